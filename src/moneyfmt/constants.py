"""Shared constants for moneyfmt.

Placing constants here avoids circular imports between the engine and
formatting packages and provides a single source of truth.

Constants are grouped by domain:
- Cache limits: Memory bounds for engine and formatter caches
- Input limits: Bounds on configuration values

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Cache limits
    "MAX_ENGINE_CACHE_SIZE",
    "MAX_FORMATTER_CACHE_SIZE",
    # Input limits
    "MAX_FRACTION_DIGITS",
    "CURRENCY_CODE_LENGTH",
]

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached BabelCurrencyFormat instances.
# Keyed by (locale, currency, minimum fraction digits); 128 covers a storefront
# showing a handful of currencies across the major locales.
MAX_ENGINE_CACHE_SIZE: int = 128

# Maximum memoized formatter instances for get_money_formatter().
# Two entries per (config, currency) pair at most (styled and unstyled).
MAX_FORMATTER_CACHE_SIZE: int = 256

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Upper bound for minimum_fraction_digits, matching Intl.NumberFormat.
MAX_FRACTION_DIGITS: int = 20

# ISO 4217 alphabetic codes are exactly three letters.
CURRENCY_CODE_LENGTH: int = 3
