"""Formatter selection.

money_formatter() picks a formatter variant from configuration and engine
capability. It performs no amount-dependent work; all formatting happens in
the returned instance.

Decision order:
    1. Engine lacks format_to_parts, or unstyled without number_locale
       -> SimpleFormatter
    2. No number_locale -> PartsFormatter
    3. Number-locale engine lacks format_to_parts -> SimpleFormatter
    4. Otherwise -> SpecialNumberLocaleFormatter over two PartsFormatters

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging

from moneyfmt.config import MoneyFormatConfig
from moneyfmt.constants import MAX_FORMATTER_CACHE_SIZE
from moneyfmt.engine.babel_engine import BabelCurrencyFormat
from moneyfmt.engine.protocol import Amount, EngineFactory, supports_format_to_parts

from .formatters import (
    MoneyFormatter,
    PartsFormatter,
    SimpleFormatter,
    SpecialNumberLocaleFormatter,
)
from .tokens import Token

__all__ = [
    "clear_formatter_cache",
    "format_money",
    "get_money_formatter",
    "money_formatter",
]

logger = logging.getLogger(__name__)


def money_formatter(
    config: MoneyFormatConfig,
    currency: str,
    styled: bool = False,
    *,
    engine_factory: EngineFactory | None = None,
) -> MoneyFormatter:
    """Build the formatter variant for a configuration.

    Args:
        config: Locale settings
        currency: ISO 4217 currency code
        styled: Keep per-type tokens (True) or flatten output (False)
        engine_factory: Builds engines from (currency, locale, digits).
            Defaults to BabelCurrencyFormat.create.

    Returns:
        SimpleFormatter, PartsFormatter or SpecialNumberLocaleFormatter

    Raises:
        Whatever the engine factory raises for the locale or currency;
        with the default factory UnsupportedLocaleError or
        UnsupportedCurrencyError.

    Example:
        >>> config = MoneyFormatConfig("en-UK", number_locale="de-DE")
        >>> money_formatter(config, "USD", styled=True).kind
        <FormatterKind.SPECIAL_NUMBER_LOCALE: 'special_number_locale'>
    """
    factory = engine_factory if engine_factory is not None else BabelCurrencyFormat.create
    engine = factory(currency, config.locale, config.minimum_fraction_digits)

    if not supports_format_to_parts(engine):
        logger.debug("Engine %r has no part output; using SimpleFormatter", engine)
        return SimpleFormatter(engine)
    if not styled and config.number_locale is None:
        return SimpleFormatter(engine)

    parts_formatter = PartsFormatter(engine)
    if config.number_locale is None:
        return parts_formatter

    number_engine = factory(currency, config.number_locale, config.minimum_fraction_digits)
    if not supports_format_to_parts(number_engine):
        logger.debug(
            "Number locale engine %r has no part output; using SimpleFormatter for %s",
            number_engine,
            config.locale,
        )
        return SimpleFormatter(engine)

    logger.debug(
        "Blending %s currency placement with %s digits for %s",
        config.locale,
        config.effective_number_locale,
        currency,
    )
    return SpecialNumberLocaleFormatter(
        parts_formatter,
        PartsFormatter(number_engine),
        styled,
    )


@functools.lru_cache(maxsize=MAX_FORMATTER_CACHE_SIZE)
def get_money_formatter(
    config: MoneyFormatConfig, currency: str, styled: bool = False
) -> MoneyFormatter:
    """Get a shared formatter for (config, currency, styled), built once.

    Uses the default Babel engine. Thread-safe via lru_cache internal locking.
    """
    return money_formatter(config, currency, styled)


def clear_formatter_cache() -> None:
    """Drop all memoized formatters."""
    get_money_formatter.cache_clear()


def format_money(
    amount: Amount,
    currency: str,
    locale: str,
    *,
    number_locale: str | None = None,
    minimum_fraction_digits: int | None = None,
    styled: bool = False,
) -> tuple[Token, ...]:
    """Format one amount with a shared formatter.

    Example:
        >>> format_money(35.87, "USD", "en-US")
        (Token(type=<TokenType.INTEGER: 'integer'>, value='$35.87'),)
    """
    config = MoneyFormatConfig(
        locale,
        number_locale=number_locale,
        minimum_fraction_digits=minimum_fraction_digits,
    )
    return get_money_formatter(config, currency, styled).format(amount)
