"""Token classification, formatter variants and variant selection.

Python 3.13+.
"""

from .formatters import (
    MoneyFormatter,
    PartsFormatter,
    SimpleFormatter,
    SpecialNumberLocaleFormatter,
)
from .selector import clear_formatter_cache, format_money, get_money_formatter, money_formatter
from .tokenizer import MoneyTokenizer, tokenize
from .tokens import Token, to_money_text

__all__ = [
    "MoneyFormatter",
    "MoneyTokenizer",
    "PartsFormatter",
    "SimpleFormatter",
    "SpecialNumberLocaleFormatter",
    "Token",
    "clear_formatter_cache",
    "format_money",
    "get_money_formatter",
    "money_formatter",
    "to_money_text",
    "tokenize",
]
