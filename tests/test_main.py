import logging

import pytest
from fastapi.testclient import TestClient

from acceptlang.config import Settings
from acceptlang.main import create_app


@pytest.fixture
def client() -> TestClient:
    settings = Settings(supported_languages="en-US,en-GB,fr-CA,fr-FR")
    return TestClient(create_app(settings))


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_supported_languages(client: TestClient) -> None:
    response = client.get("/languages")
    assert response.json() == {"supported": ["en-US", "en-GB", "fr-CA", "fr-FR"]}


def test_match_endpoint(client: TestClient) -> None:
    response = client.post(
        "/match",
        json={"header": "en-US, fr-CA, fr-FR", "supported": ["fr-FR", "en-US"]},
    )
    assert response.status_code == 200
    assert response.json() == {"languages": ["en-US", "fr-FR"]}


def test_match_endpoint_defaults_to_empty(client: TestClient) -> None:
    response = client.post("/match", json={})
    assert response.status_code == 200
    assert response.json() == {"languages": []}


def test_match_endpoint_rejects_invalid_payload(client: TestClient) -> None:
    response = client.post("/match", json={"header": "en", "supported": "en-US"})
    assert response.status_code == 422


def test_negotiate_uses_accept_language_header(client: TestClient) -> None:
    response = client.get("/negotiate", headers={"Accept-Language": "fr, en-GB"})
    assert response.status_code == 200
    assert response.json() == {
        "languages": ["fr-CA", "fr-FR", "en-GB"],
        "preferred": "fr-CA",
    }


def test_negotiate_without_header(client: TestClient) -> None:
    response = client.get("/negotiate")
    assert response.json() == {"languages": [], "preferred": None}


def test_app_state_holds_matcher() -> None:
    app = create_app(Settings(supported_languages="en-US, fr-FR"))
    matcher = app.state.language_matcher
    assert matcher.supported == ("en-US", "fr-FR")
    assert matcher.best_match("*") == "en-US"


def test_create_app_applies_log_level() -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        create_app(Settings(log_level="DEBUG"))
        assert root.getEffectiveLevel() == logging.DEBUG
        create_app(Settings(log_level="WARNING"))
        assert root.getEffectiveLevel() == logging.WARNING
    finally:
        root.setLevel(previous)


def test_negotiate_joins_repeated_accept_language_headers(client: TestClient) -> None:
    response = client.get(
        "/negotiate",
        headers=[("Accept-Language", "de, en-GB"), ("Accept-Language", "fr-FR")],
    )
    assert response.json() == {"languages": ["en-GB", "fr-FR"], "preferred": "en-GB"}
