"""Enumerations for moneyfmt type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so Tokens serialize to plain JSON.

Python 3.13+.
"""

from enum import StrEnum


class PartType(StrEnum):
    """Native part vocabulary of a number formatting engine.

    Values follow Intl.NumberFormat.formatToParts() naming so engine output
    from other sources can be fed to the tokenizer unchanged.
    """

    INTEGER = "integer"
    """Integer digits: 1234 in 1,234.56"""

    GROUP = "group"
    """Digit group separator: , in 1,234.56"""

    DECIMAL = "decimal"
    """Decimal separator: . in 1,234.56"""

    FRACTION = "fraction"
    """Fraction digits: 56 in 1,234.56"""

    CURRENCY = "currency"
    """Currency symbol or code: $ in $1,234.56"""

    LITERAL = "literal"
    """Spacing or other fixed text around the number"""

    MINUS_SIGN = "minusSign"
    """Negative sign: - in -$1.00"""

    PLUS_SIGN = "plusSign"
    """Explicit positive sign"""


class TokenType(StrEnum):
    """Canonical token types emitted by the formatters.

    StrEnum provides automatic string conversion: str(TokenType.INTEGER) == "integer"
    """

    INTEGER = "integer"
    """Integer run including group separators and the decimal separator"""

    CURRENCY = "currency"
    """Currency symbol with adjacent spacing"""

    FRACTION = "fraction"
    """Fraction digits"""

    LITERAL = "literal"
    """Parts no run claimed (signs, stray text), passed through verbatim"""

    DEFAULT = "default"
    """Whole amount flattened into one unstyled token"""


class FormatterKind(StrEnum):
    """Formatter variant chosen by the selector."""

    SIMPLE = "simple"
    """Plain engine string wrapped as one token"""

    PARTS = "parts"
    """Engine parts classified into canonical tokens"""

    SPECIAL_NUMBER_LOCALE = "special_number_locale"
    """Currency placement from one locale, digits from another"""


__all__ = [
    "FormatterKind",
    "PartType",
    "TokenType",
]
