"""Match Accept-Language preferences against a supported language list."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

from .tags import WILDCARD, generic_prefix, is_generic, parse_preferences


@dataclass(frozen=True, slots=True, eq=False)
class SupportedLanguages:
    """Lookup index over an ordered list of supported language tags."""

    tags: Tuple[str, ...] = ()
    exact: FrozenSet[str] = field(default_factory=frozenset)
    variants: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_tags(cls, tags: Iterable[str]) -> "SupportedLanguages":
        ordered = tuple(tags)
        grouped: Dict[str, List[str]] = {}
        for tag in ordered:
            grouped.setdefault(generic_prefix(tag), []).append(tag)
        return cls(
            tags=ordered,
            exact=frozenset(ordered),
            variants=MappingProxyType({prefix: tuple(group) for prefix, group in grouped.items()}),
        )

    def __bool__(self) -> bool:
        return bool(self.tags)

    def variants_of(self, prefix: str) -> Tuple[str, ...]:
        """Return every supported tag sharing ``prefix``, in supported order."""
        return self.variants.get(prefix, ())


def _match_index(header: str, index: SupportedLanguages) -> List[str]:
    if not header or not index:
        return []

    result: List[str] = []
    seen: set[str] = set()

    def _append(tags: Iterable[str]) -> None:
        for tag in tags:
            if tag not in seen:
                seen.add(tag)
                result.append(tag)

    for token in parse_preferences(header):
        if token == WILDCARD:
            _append(index.tags)
            continue
        if token in index.exact and token not in seen:
            _append((token,))
            continue
        if is_generic(token):
            _append(index.variants_of(token))
    logging.debug("Matched %r against %d supported languages: %s", header, len(index.tags), result)
    return result


def match(header: str, supported: Sequence[str]) -> List[str]:
    """Return the supported tags acceptable to ``header`` in preference order.

    Each comma-separated token of ``header`` is resolved in turn: ``*`` adds
    every supported tag, an exact tag adds itself, and a bare language code
    such as ``fr`` adds every supported ``fr-*`` variant. Tags are compared
    case-sensitively and each supported tag appears at most once.
    """
    if not header or not supported:
        return []
    return _match_index(header, SupportedLanguages.from_tags(supported))


class LanguageMatcher:
    """Reusable matcher bound to a fixed set of supported languages."""

    def __init__(self, supported: Iterable[str]) -> None:
        self._index = SupportedLanguages.from_tags(supported)
        logging.info("Language matcher ready with %d supported languages", len(self._index.tags))

    @property
    def supported(self) -> Tuple[str, ...]:
        return self._index.tags

    def match(self, header: str) -> List[str]:
        return _match_index(header, self._index)

    def best_match(self, header: str, default: Optional[str] = None) -> Optional[str]:
        """Return the most preferred acceptable tag, or ``default``."""
        matches = self.match(header)
        return matches[0] if matches else default
