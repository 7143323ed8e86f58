"""Natural-language trading command parsing and validation."""

from trade_intent.normalizers import normalize_side, normalize_symbol, parse_tp_levels
from trade_intent.types import Intent, NormalizedCommand, Side, TPLevel, ValidationResult
from trade_intent.validation import check_command, validate_command

__version__ = "0.1.0"

__all__ = [
    "Intent",
    "NormalizedCommand",
    "Side",
    "TPLevel",
    "ValidationResult",
    "check_command",
    "normalize_side",
    "normalize_symbol",
    "parse_tp_levels",
    "validate_command",
]
