"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used by the engine cache and the
configuration layer, so "en-US", "en_US" and "EN-US" share one cache entry.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from moneyfmt.core.babel_compat import get_locale_class

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to lowercase POSIX format.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    BCP-47 is case-insensitive, so the result is lowercased for stable cache
    keys; Babel restores canonical casing when parsing.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        Lowercase POSIX-formatted locale code (e.g., "en_us", "pt_br")

    Example:
        >>> normalize_locale("en-US")
        'en_us'
        >>> normalize_locale("de_DE")
        'de_de'
    """
    return locale_code.strip().replace("-", "_").lower()


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    CLDR aliases are resolved by Babel, so legacy identifiers such as
    "en-UK" load the en_GB data.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
        BabelImportError: If Babel is not installed

    Example:
        >>> get_babel_locale("en-UK").territory
        'GB'
    """
    locale_class = get_locale_class()
    return locale_class.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the parsed Babel Locale cache."""
    get_babel_locale.cache_clear()
