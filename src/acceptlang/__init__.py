"""Accept-Language matching library and service."""

from .language import LanguageMatcher, match

__all__ = ["LanguageMatcher", "match"]
