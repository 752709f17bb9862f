"""FastAPI application exposing the Accept-Language matcher."""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, Request
from pydantic import BaseModel, Field

from .config import Settings, get_settings
from .language import LanguageMatcher, match


class MatchRequest(BaseModel):
    header: str = ""
    supported: List[str] = Field(default_factory=list)


class MatchResponse(BaseModel):
    languages: List[str]


class NegotiateResponse(BaseModel):
    languages: List[str]
    preferred: Optional[str]


class SupportedLanguagesResponse(BaseModel):
    supported: List[str]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.logging_level)
    logging.getLogger().setLevel(settings.logging_level)

    app = FastAPI(
        title="acceptlang",
        description="Accept-Language matching against a supported language list",
    )

    language_matcher = LanguageMatcher(settings.supported_tags)
    app.state.settings = settings
    app.state.language_matcher = language_matcher

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/languages", response_model=SupportedLanguagesResponse)
    async def supported_languages() -> SupportedLanguagesResponse:
        return SupportedLanguagesResponse(supported=list(language_matcher.supported))

    @app.post("/match", response_model=MatchResponse)
    async def match_languages(payload: MatchRequest) -> MatchResponse:
        return MatchResponse(languages=match(payload.header, payload.supported))

    @app.get("/negotiate", response_model=NegotiateResponse)
    async def negotiate(request: Request) -> NegotiateResponse:
        header = ", ".join(request.headers.getlist("accept-language"))
        languages = language_matcher.match(header)
        return NegotiateResponse(
            languages=languages,
            preferred=languages[0] if languages else None,
        )

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
