"""Number formatting engine protocol.

The formatters never talk to Babel directly. They consume any object with a
locale-correct ``format(amount)`` and, optionally, ``format_to_parts(amount)``.
Engines that only provide ``format`` are still usable; the selector falls back
to plain-string output for them.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Protocol, TypeIs, runtime_checkable

from moneyfmt.enums import PartType

__all__ = [
    "Amount",
    "EngineFactory",
    "NumberFormattingEngine",
    "Part",
    "PartsFormattingEngine",
    "supports_format_to_parts",
]

type Amount = int | float | Decimal
"""Monetary amount accepted by engines."""


@dataclass(frozen=True, slots=True)
class Part:
    """One fragment of a locale-aware currency rendering.

    Attributes:
        type: Native part type (PartType member, or any string for foreign engines)
        value: Rendered text of this fragment
    """

    type: PartType | str
    value: str


@runtime_checkable
class NumberFormattingEngine(Protocol):
    """Engine producing locale-correct plain text for an amount."""

    def format(self, amount: Amount) -> str:
        """Format amount as plain text."""
        ...  # pylint: disable=unnecessary-ellipsis


@runtime_checkable
class PartsFormattingEngine(NumberFormattingEngine, Protocol):
    """Engine that can additionally split its output into typed parts.

    Concatenating the part values must reproduce ``format(amount)``.
    """

    def format_to_parts(self, amount: Amount) -> Sequence[Part]:
        """Format amount as an ordered sequence of typed parts."""
        ...  # pylint: disable=unnecessary-ellipsis


type EngineFactory = Callable[[str, str, int | None], NumberFormattingEngine]
"""Build an engine from (currency, locale, minimum_fraction_digits)."""


def supports_format_to_parts(engine: object) -> TypeIs[PartsFormattingEngine]:
    """Check whether an engine provides part-level output.

    Args:
        engine: Any formatting engine

    Returns:
        True if the engine has a callable ``format_to_parts``
    """
    return callable(getattr(engine, "format_to_parts", None))
