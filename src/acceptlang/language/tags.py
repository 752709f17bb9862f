"""Language tag helpers used by the Accept-Language matcher."""

from __future__ import annotations

from typing import List

WILDCARD = "*"


def parse_preferences(header: str) -> List[str]:
    """Split an Accept-Language value into trimmed, non-empty tokens.

    Tokens keep their header order and their original casing. Duplicates are
    kept as well; the matcher is responsible for deduplication.
    """
    if not header:
        return []
    tokens: List[str] = []
    for raw_token in header.split(","):
        token = raw_token.strip()
        if token:
            tokens.append(token)
    return tokens


def generic_prefix(tag: str) -> str:
    """Return the part of ``tag`` before its first hyphen."""
    return tag.split("-", 1)[0]


def is_generic(tag: str) -> bool:
    return "-" not in tag
