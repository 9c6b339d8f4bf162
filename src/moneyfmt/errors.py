"""moneyfmt exception hierarchy.

All library errors derive from MoneyFormatError. Validation errors also
derive from ValueError so callers that only know the standard library can
still catch them.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "ConfigurationError",
    "FormattingError",
    "MoneyFormatError",
    "TokenMergeError",
    "UnsupportedCurrencyError",
    "UnsupportedLocaleError",
]


class MoneyFormatError(Exception):
    """Base exception for all moneyfmt errors."""


class ConfigurationError(MoneyFormatError, ValueError):
    """Invalid formatter configuration.

    Raised by MoneyFormatConfig validation before any engine is built.
    """


class UnsupportedLocaleError(MoneyFormatError, ValueError):
    """Locale identifier unknown to CLDR or malformed.

    Attributes:
        locale_code: The identifier as supplied by the caller
    """

    def __init__(self, message: str, *, locale_code: str) -> None:
        """Initialize UnsupportedLocaleError.

        Args:
            message: Error message
            locale_code: The identifier as supplied by the caller
        """
        super().__init__(message)
        self.locale_code = locale_code


class UnsupportedCurrencyError(MoneyFormatError, ValueError):
    """Currency code is not a well-formed ISO 4217 alphabetic code.

    Attributes:
        currency: The code as supplied by the caller
    """

    def __init__(self, message: str, *, currency: str) -> None:
        """Initialize UnsupportedCurrencyError.

        Args:
            message: Error message
            currency: The code as supplied by the caller
        """
        super().__init__(message)
        self.currency = currency


class FormattingError(MoneyFormatError):
    """Raised when locale-aware formatting of an amount fails.

    The error carries a fallback_value callers may display instead of the
    formatted amount. The library itself never substitutes it.

    Attributes:
        fallback_value: Plain rendering of the amount ("USD 35.87")
    """

    def __init__(self, message: str, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value


class TokenMergeError(MoneyFormatError):
    """Number-locale tokens cannot be merged into the currency-locale layout.

    Raised when the number locale yields a substitutable token type more than
    once, or not at all, for one amount.

    Attributes:
        token_type: The offending token type
    """

    def __init__(self, message: str, *, token_type: str) -> None:
        """Initialize TokenMergeError.

        Args:
            message: Error message
            token_type: The offending token type
        """
        super().__init__(message)
        self.token_type = token_type
