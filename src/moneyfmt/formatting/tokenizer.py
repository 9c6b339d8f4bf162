"""Money tokenizer: engine parts to canonical tokens.

Scans the part type sequence left to right. At each position three runs are
tried in precedence order:

    integer-run:   DIGIT+ LITERAL? DECIMAL? LITERAL?
    currency-run:  LITERAL? CURRENCY LITERAL?
    fraction-run:  FRACTION

where DIGIT covers integer and group parts. The run that fires names the
token type; the token value joins the values of the parts it spans. Matching
is greedy and never backtracks into consumed parts.

Parts no run claims (signs, stray literals) are grouped into one LITERAL
token per contiguous stretch, so joining all token values reproduces the
engine's text. Pass ``pass_through=False`` to drop them instead.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from enum import Enum, auto

from moneyfmt.engine.protocol import Part
from moneyfmt.enums import PartType, TokenType

from .tokens import Token

__all__ = ["MoneyTokenizer", "tokenize"]


class _PartClass(Enum):
    """Scanner alphabet: what a part type means to the runs."""

    DIGIT = auto()
    DECIMAL = auto()
    FRACTION = auto()
    CURRENCY = auto()
    LITERAL = auto()
    OTHER = auto()


_PART_CLASSES: dict[str, _PartClass] = {
    PartType.INTEGER: _PartClass.DIGIT,
    PartType.GROUP: _PartClass.DIGIT,
    PartType.DECIMAL: _PartClass.DECIMAL,
    PartType.FRACTION: _PartClass.FRACTION,
    PartType.CURRENCY: _PartClass.CURRENCY,
    PartType.LITERAL: _PartClass.LITERAL,
}


class MoneyTokenizer:
    """Single-use iterator over the canonical tokens of one formatted amount.

    Example:
        >>> parts = [Part("currency", "$"), Part("integer", "35"),
        ...          Part("decimal", "."), Part("fraction", "87")]
        >>> [(t.type, t.value) for t in MoneyTokenizer(parts)]
        [('currency', '$'), ('integer', '35.'), ('fraction', '87')]
    """

    __slots__ = ("_classes", "_parts", "_pass_through", "_tokens")

    def __init__(self, parts: Sequence[Part], *, pass_through: bool = True) -> None:
        self._parts = tuple(parts)
        self._classes = tuple(
            _PART_CLASSES.get(part.type, _PartClass.OTHER) for part in self._parts
        )
        self._pass_through = pass_through
        self._tokens = self._scan()

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        return next(self._tokens)

    def _is(self, pos: int, part_class: _PartClass) -> bool:
        return pos < len(self._classes) and self._classes[pos] is part_class

    def _integer_run(self, pos: int) -> int | None:
        end = pos
        while self._is(end, _PartClass.DIGIT):
            end += 1
        if end == pos:
            return None
        for optional in (_PartClass.LITERAL, _PartClass.DECIMAL, _PartClass.LITERAL):
            if self._is(end, optional):
                end += 1
        return end

    def _currency_run(self, pos: int) -> int | None:
        end = pos
        if self._is(end, _PartClass.LITERAL) and self._is(end + 1, _PartClass.CURRENCY):
            end += 1
        if not self._is(end, _PartClass.CURRENCY):
            return None
        end += 1
        if self._is(end, _PartClass.LITERAL):
            end += 1
        return end

    def _fraction_run(self, pos: int) -> int | None:
        return pos + 1 if self._is(pos, _PartClass.FRACTION) else None

    def _match(self, pos: int) -> tuple[TokenType, int] | None:
        """Try the runs in precedence order; return (type, end) of the first hit."""
        runs: tuple[tuple[TokenType, Callable[[int], int | None]], ...] = (
            (TokenType.INTEGER, self._integer_run),
            (TokenType.CURRENCY, self._currency_run),
            (TokenType.FRACTION, self._fraction_run),
        )
        for token_type, run in runs:
            end = run(pos)
            if end is not None:
                return token_type, end
        return None

    def _token(self, token_type: TokenType, start: int, end: int) -> Token:
        return Token(token_type, "".join(part.value for part in self._parts[start:end]))

    def _scan(self) -> Iterator[Token]:
        pos = 0
        skipped_from: int | None = None
        while pos < len(self._parts):
            match = self._match(pos)
            if match is None:
                if skipped_from is None:
                    skipped_from = pos
                pos += 1
                continue
            if skipped_from is not None:
                if self._pass_through:
                    yield self._token(TokenType.LITERAL, skipped_from, pos)
                skipped_from = None
            token_type, end = match
            yield self._token(token_type, pos, end)
            pos = end
        if skipped_from is not None and self._pass_through:
            yield self._token(TokenType.LITERAL, skipped_from, pos)


def tokenize(parts: Sequence[Part], *, pass_through: bool = True) -> tuple[Token, ...]:
    """Tokenize parts eagerly.

    Args:
        parts: Ordered engine parts for one amount
        pass_through: Emit unclaimed parts as LITERAL tokens (default) or drop them

    Returns:
        All tokens in emission order
    """
    return tuple(MoneyTokenizer(parts, pass_through=pass_through))
