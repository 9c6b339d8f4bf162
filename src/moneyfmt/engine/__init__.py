"""Number formatting engines.

The formatters depend only on the protocol; BabelCurrencyFormat is the
CLDR-backed implementation shipped with the package. Importing this package
does not import Babel; Babel is loaded on first engine creation.

Python 3.13+.
"""

from .babel_engine import BabelCurrencyFormat
from .protocol import (
    Amount,
    EngineFactory,
    NumberFormattingEngine,
    Part,
    PartsFormattingEngine,
    supports_format_to_parts,
)

__all__ = [
    "Amount",
    "BabelCurrencyFormat",
    "EngineFactory",
    "NumberFormattingEngine",
    "Part",
    "PartsFormattingEngine",
    "supports_format_to_parts",
]
