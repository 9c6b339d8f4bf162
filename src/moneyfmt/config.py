"""Formatter configuration.

MoneyFormatConfig is immutable and hashable, so it doubles as the cache key
for memoized formatters.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from moneyfmt.constants import MAX_FRACTION_DIGITS
from moneyfmt.errors import ConfigurationError

__all__ = ["MoneyFormatConfig"]

_CAMEL_BOUNDARY_RE = re.compile(r"(?<!^)(?=[A-Z])")


def _to_snake_case(name: str) -> str:
    """Convert camelCase to snake_case ("numberLocale" -> "number_locale")."""
    return _CAMEL_BOUNDARY_RE.sub("_", name).lower()


@dataclass(frozen=True, slots=True)
class MoneyFormatConfig:
    """Locale settings for money formatting.

    Attributes:
        locale: Locale governing the currency symbol and its placement
        number_locale: Optional locale governing digit grouping and the
            decimal separator. None means use ``locale`` for both.
        minimum_fraction_digits: Minimum fraction digits, or None for the
            currency's default (USD: 2, JPY: 0)

    Examples:
        >>> MoneyFormatConfig("en-UK", number_locale="de-DE", minimum_fraction_digits=2)
        MoneyFormatConfig(locale='en-UK', number_locale='de-DE', minimum_fraction_digits=2)

        >>> MoneyFormatConfig.from_mapping({"locale": "en-US", "numberLocale": "fr-FR"})
        MoneyFormatConfig(locale='en-US', number_locale='fr-FR', minimum_fraction_digits=None)
    """

    locale: str
    number_locale: str | None = None
    minimum_fraction_digits: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.locale, str) or not self.locale.strip():
            msg = f"locale must be a non-empty string, got {self.locale!r}"
            raise ConfigurationError(msg)

        if self.number_locale is not None and (
            not isinstance(self.number_locale, str) or not self.number_locale.strip()
        ):
            msg = f"number_locale must be a non-empty string or None, got {self.number_locale!r}"
            raise ConfigurationError(msg)

        digits = self.minimum_fraction_digits
        if digits is not None and (
            isinstance(digits, bool)
            or not isinstance(digits, int)
            or not 0 <= digits <= MAX_FRACTION_DIGITS
        ):
            msg = (
                f"minimum_fraction_digits must be an integer in 0..{MAX_FRACTION_DIGITS} "
                f"or None, got {digits!r}"
            )
            raise ConfigurationError(msg)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> MoneyFormatConfig:
        """Build a config from a mapping with snake_case or camelCase keys.

        camelCase keys (``numberLocale``, ``minimumFractionDigits``) are
        accepted for settings shared with JavaScript front ends.

        Raises:
            ConfigurationError: Unknown key, a setting given under both
                spellings, or missing ``locale``
        """
        known = {"locale", "number_locale", "minimum_fraction_digits"}
        kwargs: dict[str, Any] = {}
        seen: dict[str, str] = {}
        for key, value in data.items():
            name = _to_snake_case(key)
            if name not in known:
                msg = f"Unknown configuration key '{key}'"
                raise ConfigurationError(msg)
            if name in kwargs:
                msg = f"Configuration key '{key}' duplicates '{seen[name]}'"
                raise ConfigurationError(msg)
            kwargs[name] = value
            seen[name] = key

        if "locale" not in kwargs:
            msg = "Configuration requires 'locale'"
            raise ConfigurationError(msg)
        return cls(**kwargs)

    @property
    def effective_number_locale(self) -> str:
        """Locale that governs digits: number_locale if set, else locale."""
        return self.number_locale if self.number_locale is not None else self.locale
