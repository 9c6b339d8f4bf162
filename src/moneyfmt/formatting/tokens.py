"""Canonical money tokens.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from moneyfmt.enums import TokenType

__all__ = ["Token", "to_money_text"]


@dataclass(frozen=True, slots=True)
class Token:
    """Canonical output unit for independent per-type styling.

    Attributes:
        type: Canonical token type
        value: Concatenated text of the engine parts this token covers
    """

    type: TokenType
    value: str

    def as_dict(self) -> dict[str, str]:
        """Return the token as a plain ``{"type", "value"}`` mapping."""
        return {"type": str(self.type), "value": self.value}


def to_money_text(tokens: Iterable[Token]) -> str:
    """Flatten tokens into display text, in order.

    Example:
        >>> to_money_text([Token(TokenType.CURRENCY, "$"), Token(TokenType.INTEGER, "35.")])
        '$35.'
    """
    return "".join(token.value for token in tokens)
