"""Money formatter variants.

All variants share one operation, ``format(amount) -> tuple[Token, ...]``,
plus ``format_text(amount)`` for flattened output:

    SimpleFormatter               Plain engine text as a single INTEGER token
    PartsFormatter                Engine parts classified by MoneyTokenizer
    SpecialNumberLocaleFormatter  Currency placement from one locale, digit
                                  conventions from another

Instances are immutable and keep no state between calls. Engine errors
propagate unchanged.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from moneyfmt.engine.protocol import Amount, NumberFormattingEngine, PartsFormattingEngine
from moneyfmt.enums import FormatterKind, TokenType
from moneyfmt.errors import TokenMergeError

from .tokenizer import tokenize
from .tokens import Token, to_money_text

__all__ = [
    "MoneyFormatter",
    "PartsFormatter",
    "SimpleFormatter",
    "SpecialNumberLocaleFormatter",
]

# Token types the number locale supplies; everything else keeps the
# currency locale's text and position.
_NUMBER_LOCALE_TYPES: frozenset[TokenType] = frozenset({TokenType.INTEGER, TokenType.FRACTION})


class MoneyFormatter(ABC):
    """Common interface of the formatter variants."""

    __slots__ = ()

    kind: ClassVar[FormatterKind]

    @abstractmethod
    def format(self, amount: Amount) -> tuple[Token, ...]:
        """Format amount as an ordered token tuple."""

    def format_text(self, amount: Amount) -> str:
        """Format amount as display text."""
        return to_money_text(self.format(amount))


@dataclass(frozen=True, slots=True)
class SimpleFormatter(MoneyFormatter):
    """Wrap the engine's plain text as one INTEGER token.

    Used when the engine cannot produce parts, or when neither styled output
    nor a separate number locale is requested.
    """

    kind: ClassVar[FormatterKind] = FormatterKind.SIMPLE

    engine: NumberFormattingEngine

    def format(self, amount: Amount) -> tuple[Token, ...]:
        return (Token(TokenType.INTEGER, self.engine.format(amount)),)


@dataclass(frozen=True, slots=True)
class PartsFormatter(MoneyFormatter):
    """Classify the engine's parts into canonical tokens."""

    kind: ClassVar[FormatterKind] = FormatterKind.PARTS

    engine: PartsFormattingEngine

    def format(self, amount: Amount) -> tuple[Token, ...]:
        return tokenize(self.engine.format_to_parts(amount))


@dataclass(frozen=True, slots=True)
class SpecialNumberLocaleFormatter(MoneyFormatter):
    """Blend two locales: currency symbol and placement from one, digits from the other.

    The currency-locale token order is authoritative. Its CURRENCY and
    LITERAL tokens are kept verbatim; its INTEGER and FRACTION tokens are
    replaced by the number-locale tokens of the same type.

    Example:
        USD shown to a German reader of an en-GB storefront:
        currency locale en-GB gives ['US$', '1,234.', '50'];
        number locale de-DE gives ['1.234,', '50', ' $'];
        merged result is ['US$', '1.234,', '50'].

    Attributes:
        currency_locale_formatter: Supplies currency tokens and ordering
        number_locale_formatter: Supplies integer and fraction tokens
        styled: Return typed tokens (True) or one DEFAULT token (False)
    """

    kind: ClassVar[FormatterKind] = FormatterKind.SPECIAL_NUMBER_LOCALE

    currency_locale_formatter: PartsFormatter
    number_locale_formatter: PartsFormatter
    styled: bool = False

    @staticmethod
    def _index_number_tokens(tokens: tuple[Token, ...], amount: Amount) -> dict[TokenType, Token]:
        indexed: dict[TokenType, Token] = {}
        for token in tokens:
            if token.type not in _NUMBER_LOCALE_TYPES:
                continue
            if token.type in indexed:
                msg = (
                    f"Number locale produced more than one {token.type} token for {amount}: "
                    f"{indexed[token.type].value!r} and {token.value!r}"
                )
                raise TokenMergeError(msg, token_type=token.type)
            indexed[token.type] = token
        return indexed

    def format(self, amount: Amount) -> tuple[Token, ...]:
        number_tokens = self._index_number_tokens(
            self.number_locale_formatter.format(amount), amount
        )

        merged: list[Token] = []
        for token in self.currency_locale_formatter.format(amount):
            if token.type not in _NUMBER_LOCALE_TYPES:
                merged.append(token)
                continue
            substitute = number_tokens.get(token.type)
            if substitute is None:
                msg = f"Number locale produced no {token.type} token for {amount}"
                raise TokenMergeError(msg, token_type=token.type)
            merged.append(substitute)

        if self.styled:
            return tuple(merged)
        return (Token(TokenType.DEFAULT, to_money_text(merged)),)
