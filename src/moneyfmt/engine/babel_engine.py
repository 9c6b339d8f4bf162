"""Babel-backed currency formatting engine.

Plays the role of ``Intl.NumberFormat(locale, {style: "currency", ...})``:
locale-correct plain text via ``format()`` and typed fragments via
``format_to_parts()``. Uses Babel for CLDR-compliant currency formatting.

Architecture:
    - BabelCurrencyFormat: Immutable (locale, currency, digits) configuration
    - Instances are cached in a class-level LRU guarded by an RLock
    - Parts are recovered by decomposing the formatted string, so joining
      part values always reproduces format() exactly

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
import math
import re
from collections import OrderedDict
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from threading import RLock
from typing import TYPE_CHECKING, ClassVar

from moneyfmt.constants import CURRENCY_CODE_LENGTH, MAX_ENGINE_CACHE_SIZE, MAX_FRACTION_DIGITS
from moneyfmt.core.babel_compat import get_babel_numbers, get_unknown_locale_error
from moneyfmt.enums import PartType
from moneyfmt.errors import (
    ConfigurationError,
    FormattingError,
    UnsupportedCurrencyError,
    UnsupportedLocaleError,
)
from moneyfmt.locale_utils import get_babel_locale, normalize_locale

from .protocol import Amount, Part

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["BabelCurrencyFormat"]

logger = logging.getLogger(__name__)

# Fraction section of a CLDR number pattern: ".00" in "¤#,##0.00"
_FRACTION_SECTION_RE = re.compile(r"(?<=[0#])\.[0#]*")

# Digit body of a rendered amount: first digit through last digit
_DIGIT_BODY_RE = re.compile(r"\d(?:.*\d)?", re.DOTALL)

# Alternating digit / separator chunks inside the integer side of the body
_DIGIT_CHUNK_RE = re.compile(r"\d+|\D+")

type _CacheKey = tuple[str, str, int | None]


def _validate_currency(currency: str) -> str:
    """Check ISO 4217 well-formedness and return the upper-cased code.

    Well-formed codes unknown to CLDR are accepted; Babel renders them as the
    code itself with two fraction digits.
    """
    if (
        not isinstance(currency, str)
        or len(currency) != CURRENCY_CODE_LENGTH
        or not (currency.isascii() and currency.isalpha())
    ):
        msg = f"Invalid currency code '{currency}': expected three ASCII letters"
        raise UnsupportedCurrencyError(msg, currency=str(currency))
    return currency.upper()


def _validate_fraction_digits(minimum_fraction_digits: int | None) -> None:
    if minimum_fraction_digits is None:
        return
    if (
        isinstance(minimum_fraction_digits, bool)
        or not isinstance(minimum_fraction_digits, int)
        or not 0 <= minimum_fraction_digits <= MAX_FRACTION_DIGITS
    ):
        msg = (
            f"minimum_fraction_digits must be an integer in 0..{MAX_FRACTION_DIGITS}, "
            f"got {minimum_fraction_digits!r}"
        )
        raise ConfigurationError(msg)


def _resolve_locale(locale_code: str) -> Locale:
    """Parse a locale through Babel, translating failures to UnsupportedLocaleError."""
    unknown_locale_error = get_unknown_locale_error()
    try:
        return get_babel_locale(locale_code)
    except unknown_locale_error as e:
        logger.debug("Babel does not know locale '%s': %s", locale_code, e)
        msg = f"Unknown locale identifier '{locale_code}': {e}"
        raise UnsupportedLocaleError(msg, locale_code=locale_code) from e
    except ValueError as e:
        logger.debug("Malformed locale identifier '%s': %s", locale_code, e)
        msg = f"Invalid locale format '{locale_code}': {e}"
        raise UnsupportedLocaleError(msg, locale_code=locale_code) from e


@dataclass(frozen=True, slots=True)
class BabelCurrencyFormat:
    """Immutable currency formatter for one (locale, currency, digits) triple.

    Use BabelCurrencyFormat.create() to construct instances; it validates
    input, precomputes locale symbols and reuses cached instances.

    Fraction digits:
        With minimum_fraction_digits=None the currency's CLDR precision
        applies (JPY: 0, USD: 2, BHD: 3). Otherwise fraction digits range
        from the minimum to max(minimum, currency precision), which is how
        Intl.NumberFormat treats minimumFractionDigits.

    Examples:
        >>> usd = BabelCurrencyFormat.create("USD", "en-US")
        >>> usd.format(1234.5)
        '$1,234.50'
        >>> [(p.type, p.value) for p in usd.format_to_parts(1234.5)]
        [('currency', '$'), ('integer', '1'), ('group', ','), ('integer', '234'),
         ('decimal', '.'), ('fraction', '50')]

    Attributes:
        locale_code: Identifier as passed by the caller that built the
            instance. Spellings that normalize alike ('en-US', 'en_us')
            share one cached instance, so later callers see the first
            spelling; compare babel_locale instead.
        currency: Upper-cased ISO 4217 code
        minimum_fraction_digits: As passed to create()

    Thread Safety:
        Instances are immutable; Babel formatting is reentrant. Cache
        operations are protected by RLock.
    """

    _cache: ClassVar[OrderedDict[_CacheKey, BabelCurrencyFormat]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    currency: str
    minimum_fraction_digits: int | None
    _babel_locale: Locale
    _pattern: str | None = field(default=None, repr=False)
    _decimal_symbol: str = field(default=".", repr=False)
    _affix_types: dict[str, PartType] = field(default_factory=dict, repr=False, compare=False)
    _affix_re: re.Pattern[str] | None = field(default=None, repr=False, compare=False)

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the engine cache. Use to free memory or reset state in tests."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached engine instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[_CacheKey, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - keys: Tuple of (locale, currency, digits) keys in LRU order
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_ENGINE_CACHE_SIZE,
                "keys": tuple(cls._cache.keys()),
            }

    @classmethod
    def create(
        cls,
        currency: str,
        locale_code: str,
        minimum_fraction_digits: int | None = None,
    ) -> BabelCurrencyFormat:
        """Create (or fetch from cache) an engine for currency in locale.

        Argument order matches EngineFactory, so ``BabelCurrencyFormat.create``
        can be handed to the selector directly.

        Args:
            currency: ISO 4217 code (case-insensitive)
            locale_code: BCP 47 or POSIX identifier (e.g., 'en-US', 'de_DE')
            minimum_fraction_digits: Minimum fraction digits, or None for the
                currency default

        Returns:
            Cached or freshly built BabelCurrencyFormat

        Raises:
            UnsupportedCurrencyError: Currency code is malformed
            UnsupportedLocaleError: Babel cannot resolve the locale
            ConfigurationError: minimum_fraction_digits out of range
        """
        code = _validate_currency(currency)
        _validate_fraction_digits(minimum_fraction_digits)
        cache_key = (normalize_locale(locale_code), code, minimum_fraction_digits)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        babel_locale = _resolve_locale(locale_code)
        numbers = get_babel_numbers()

        pattern = None
        if minimum_fraction_digits is not None:
            pattern = cls._fraction_pattern(babel_locale, code, minimum_fraction_digits)

        affix_types: dict[str, PartType] = {
            "-": PartType.MINUS_SIGN,
            "+": PartType.PLUS_SIGN,
            numbers.get_minus_sign_symbol(babel_locale): PartType.MINUS_SIGN,
            numbers.get_plus_sign_symbol(babel_locale): PartType.PLUS_SIGN,
            numbers.get_currency_symbol(code, babel_locale): PartType.CURRENCY,
        }
        # Longest first so "US$" wins over any shorter overlapping symbol
        alternatives = sorted((s for s in affix_types if s), key=len, reverse=True)
        affix_re = re.compile("(" + "|".join(re.escape(s) for s in alternatives) + ")")

        # Keyed by normalized locale; locale_code keeps the caller spelling for debugging
        engine = cls(
            locale_code=locale_code,
            currency=code,
            minimum_fraction_digits=minimum_fraction_digits,
            _babel_locale=babel_locale,
            _pattern=pattern,
            _decimal_symbol=numbers.get_decimal_symbol(babel_locale),
            _affix_types=affix_types,
            _affix_re=affix_re,
        )

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_ENGINE_CACHE_SIZE:
                evicted, _ = cls._cache.popitem(last=False)
                logger.debug("Evicted currency engine %s", evicted)

            cls._cache[cache_key] = engine
            logger.debug(
                "Created currency engine for %s in %s (babel locale %s)",
                code,
                locale_code,
                babel_locale,
            )
            return engine

    @staticmethod
    def _fraction_pattern(
        babel_locale: Locale, currency: str, minimum_fraction_digits: int
    ) -> str:
        """Rewrite the locale's standard currency pattern for a fraction range."""
        numbers = get_babel_numbers()
        maximum = max(minimum_fraction_digits, numbers.get_currency_precision(currency))
        if maximum == 0:
            fraction = ""
        else:
            optional = maximum - minimum_fraction_digits
            fraction = "." + "0" * minimum_fraction_digits + "#" * optional

        raw_pattern = babel_locale.currency_formats["standard"].pattern
        pattern = _FRACTION_SECTION_RE.sub(lambda _match: fraction, raw_pattern)
        if _FRACTION_SECTION_RE.search(raw_pattern) is None:
            logger.debug(
                "Currency pattern %r for %s has no fraction section", raw_pattern, babel_locale
            )
        return pattern

    @property
    def babel_locale(self) -> Locale:
        """Babel Locale resolved at construction (aliases applied)."""
        return self._babel_locale

    def _fallback(self, amount: object) -> str:
        return f"{self.currency} {amount}"

    def _check_amount(self, amount: Amount) -> None:
        if isinstance(amount, bool) or not isinstance(amount, (int, float, Decimal)):
            msg = f"Amount must be int, float or Decimal, got {type(amount).__name__}"
            raise FormattingError(msg, fallback_value=self._fallback(amount))
        finite = amount.is_finite() if isinstance(amount, Decimal) else math.isfinite(amount)
        if not finite:
            msg = f"Amount must be finite, got {amount}"
            raise FormattingError(msg, fallback_value=self._fallback(amount))

    def format(self, amount: Amount) -> str:
        """Format amount as locale-correct currency text.

        Args:
            amount: Finite int, float or Decimal

        Returns:
            Formatted string, e.g. '$35.87' (en-US) or '35,87\xa0$' (de-DE)

        Raises:
            FormattingError: Amount is not a finite number, or Babel failed
        """
        self._check_amount(amount)
        numbers = get_babel_numbers()
        try:
            if self._pattern is None:
                return str(
                    numbers.format_currency(
                        amount,
                        self.currency,
                        locale=self._babel_locale,
                        currency_digits=True,
                        format_type="standard",
                    )
                )
            return str(
                numbers.format_currency(
                    amount,
                    self.currency,
                    format=self._pattern,
                    locale=self._babel_locale,
                    currency_digits=False,
                )
            )
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            msg = f"Currency formatting failed for '{self.currency} {amount}': {e}"
            raise FormattingError(msg, fallback_value=self._fallback(amount)) from e

    def format_to_parts(self, amount: Amount) -> tuple[Part, ...]:
        """Format amount and split the result into typed parts.

        The digit body yields integer/group parts, then decimal/fraction when
        the locale decimal separator is present. Text before and after the
        body yields currency, sign and literal parts.

        Raises:
            FormattingError: Amount is not a finite number, or Babel failed
        """
        text = self.format(amount)
        body = _DIGIT_BODY_RE.search(text)
        if body is None:
            return tuple(self._affix_parts(text))
        return (
            *self._affix_parts(text[: body.start()]),
            *self._body_parts(body.group()),
            *self._affix_parts(text[body.end() :]),
        )

    def _body_parts(self, body: str) -> list[Part]:
        if self._decimal_symbol in body:
            integer_text, decimal, fraction_text = body.rpartition(self._decimal_symbol)
        else:
            integer_text, decimal, fraction_text = body, "", ""

        parts = [
            Part(PartType.INTEGER if chunk[0].isdigit() else PartType.GROUP, chunk)
            for chunk in _DIGIT_CHUNK_RE.findall(integer_text)
        ]
        if decimal:
            parts.append(Part(PartType.DECIMAL, decimal))
            parts.append(Part(PartType.FRACTION, fraction_text))
        return parts

    def _affix_parts(self, text: str) -> list[Part]:
        if not text:
            return []
        if self._affix_re is None:
            return [Part(PartType.LITERAL, text)]
        return [
            Part(self._affix_types.get(chunk, PartType.LITERAL), chunk)
            for chunk in self._affix_re.split(text)
            if chunk
        ]
