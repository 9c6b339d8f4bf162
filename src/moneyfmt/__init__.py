"""moneyfmt - Localized money formatting with blended locale conventions.

Formats a monetary amount for display, optionally taking the currency symbol
and its placement from one locale and digit grouping and decimal style from
another. Output is a tuple of typed tokens (for per-part styling) or plain
text.

Public API:
    MoneyFormatConfig - Locale settings (locale, number_locale, minimum_fraction_digits)
    money_formatter - Build the formatter variant for a configuration
    get_money_formatter - Shared, memoized formatter per (config, currency, styled)
    format_money - One-shot convenience
    to_money_text - Flatten tokens into display text
    Token, TokenType - Canonical output units
    Part, PartType - Engine output fragments
    BabelCurrencyFormat - CLDR-backed formatting engine (requires Babel)

Exceptions:
    MoneyFormatError - Base exception class
    ConfigurationError - Invalid configuration values
    UnsupportedLocaleError - Unknown or malformed locale
    UnsupportedCurrencyError - Malformed currency code
    FormattingError - Engine formatting failure
    TokenMergeError - Locale blending failure
"""

from .config import MoneyFormatConfig
from .engine import BabelCurrencyFormat, Part
from .enums import FormatterKind, PartType, TokenType
from .errors import (
    ConfigurationError,
    FormattingError,
    MoneyFormatError,
    TokenMergeError,
    UnsupportedCurrencyError,
    UnsupportedLocaleError,
)
from .formatting import (
    MoneyFormatter,
    Token,
    clear_formatter_cache,
    format_money,
    get_money_formatter,
    money_formatter,
    to_money_text,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("moneyfmt")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelCurrencyFormat",
    "ConfigurationError",
    "FormatterKind",
    "FormattingError",
    "MoneyFormatConfig",
    "MoneyFormatError",
    "MoneyFormatter",
    "Part",
    "PartType",
    "Token",
    "TokenMergeError",
    "TokenType",
    "UnsupportedCurrencyError",
    "UnsupportedLocaleError",
    "__version__",
    "clear_formatter_cache",
    "format_money",
    "get_money_formatter",
    "money_formatter",
    "to_money_text",
]
