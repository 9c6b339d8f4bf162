"""Hypothesis strategies for moneyfmt property-based testing.

Usage:
    from tests.strategies import money_amounts, locale_codes, part_sequences
"""

from .money import (
    CURRENCY_CODES,
    LOCALE_CODES,
    currency_codes,
    locale_codes,
    money_amounts,
    part_sequences,
)

__all__ = [
    "CURRENCY_CODES",
    "LOCALE_CODES",
    "currency_codes",
    "locale_codes",
    "money_amounts",
    "part_sequences",
]
