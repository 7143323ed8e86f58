"""Shared domain types for normalized trading commands."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Any


class Intent(str, Enum):
    """Canonical trading action a command represents."""

    OPEN_POSITION = "open_position"
    CLOSE_POSITION = "close_position"
    VIEW_POSITIONS = "view_positions"
    VIEW_ORDERS = "view_orders"
    CANCEL_ORDERS = "cancel_orders"
    CHECK_BALANCE = "check_balance"
    BREAK_EVEN = "break_even"
    TRAILING_STOP = "trailing_stop"
    UNKNOWN = "unknown"


class Side(str, Enum):
    """Position direction."""

    LONG = "LONG"
    SHORT = "SHORT"


@dataclass(frozen=True, slots=True)
class TPLevel:
    """One take-profit level for partial closing."""

    price: float
    percentage: float


@dataclass(slots=True)
class ValidationResult:
    """Outcome of command validation."""

    missing: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.missing and not self.errors


@dataclass(frozen=True, slots=True)
class NormalizedCommand:
    """Parsed and normalized trading command.

    Optional price, risk and trailing fields use ``None`` for "not given";
    a zero is a real value.
    """

    intent: Intent = Intent.UNKNOWN
    confidence: float = 0.0

    symbol: str = ""
    side: Side | None = None

    entry_price: float | None = None
    stop_loss: float | None = None
    take_profit: float | None = None
    trigger_price: float | None = None
    tp_levels: tuple[TPLevel, ...] = ()

    risk_percent: float | None = None
    rr_ratio: float | None = None

    callback_rate: float | None = None
    distance: float | None = None

    valid: bool = False
    missing: tuple[str, ...] = ()
    errors: tuple[str, ...] = ()

    raw_input: str = ""
    language: str = ""
    timestamp: datetime | None = None

    def with_validation(self, result: ValidationResult) -> NormalizedCommand:
        """Return a copy carrying the given validation outcome."""
        return replace(
            self,
            valid=result.valid,
            missing=tuple(result.missing),
            errors=tuple(result.errors),
        )

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation."""
        return {
            "intent": self.intent.value,
            "confidence": self.confidence,
            "symbol": self.symbol,
            "side": self.side.value if self.side is not None else None,
            "entry_price": self.entry_price,
            "stop_loss": self.stop_loss,
            "take_profit": self.take_profit,
            "trigger_price": self.trigger_price,
            "tp_levels": [
                {"price": level.price, "percentage": level.percentage}
                for level in self.tp_levels
            ],
            "risk_percent": self.risk_percent,
            "rr_ratio": self.rr_ratio,
            "callback_rate": self.callback_rate,
            "distance": self.distance,
            "valid": self.valid,
            "missing": list(self.missing),
            "errors": list(self.errors),
            "raw_input": self.raw_input,
            "language": self.language,
            "timestamp": self.timestamp.isoformat() if self.timestamp is not None else None,
        }
