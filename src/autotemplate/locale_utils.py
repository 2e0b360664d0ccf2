"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization so that "ja-JP", "ja_JP" and
"JA-jp" share one cache entry for label lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from .constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to lowercase POSIX format.

    Babel accepts POSIX identifiers case-insensitively, so lowercasing only
    serves to give equivalent spellings the same cache key.

    Args:
        locale_code: BCP-47 locale code (e.g., "ja-JP", "en-US")

    Returns:
        POSIX-formatted locale code (e.g., "ja_jp", "en_us")

    Example:
        >>> normalize_locale("ja-JP")
        'ja_jp'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_").lower()


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("ja-JP")
        >>> locale.language
        'ja'
        >>> locale.territory
        'JP'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()
