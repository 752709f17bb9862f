"""Accept-Language parsing and matching."""

from .matcher import LanguageMatcher, SupportedLanguages, match
from .tags import WILDCARD, generic_prefix, is_generic, parse_preferences

__all__ = [
    "LanguageMatcher",
    "SupportedLanguages",
    "WILDCARD",
    "generic_prefix",
    "is_generic",
    "match",
    "parse_preferences",
]
