"""Rule-based validation of normalized commands."""

from __future__ import annotations

from collections.abc import Callable

from trade_intent.types import Intent, NormalizedCommand, Side, ValidationResult

_NO_REQUIRED_FIELDS = frozenset(
    {
        Intent.CANCEL_ORDERS,
        Intent.VIEW_POSITIONS,
        Intent.VIEW_ORDERS,
        Intent.CHECK_BALANCE,
    }
)


def check_command(command: NormalizedCommand) -> ValidationResult:
    """Collect every missing field and rule violation for the command's intent."""
    result = ValidationResult()
    rule = _INTENT_RULES.get(command.intent)
    if rule is not None:
        rule(command, result)
    elif command.intent not in _NO_REQUIRED_FIELDS:
        result.errors.append(f"unknown intent: {_intent_label(command.intent)}")
    return result


def validate_command(command: NormalizedCommand) -> NormalizedCommand:
    """Return the command with ``valid``, ``missing`` and ``errors`` populated."""
    return command.with_validation(check_command(command))


def _check_open_position(command: NormalizedCommand, result: ValidationResult) -> None:
    _require_symbol(command, result)
    if command.side is None:
        result.missing.append("side")
    if command.entry_price is None:
        result.missing.append("entry_price")
    if command.stop_loss is None:
        result.missing.append("stop_loss")
    if command.risk_percent is None:
        result.missing.append("risk_percent")

    if command.risk_percent is not None and not 0 < command.risk_percent <= 100:
        result.errors.append("risk_percent must be between 0 and 100")

    side, entry, stop = command.side, command.entry_price, command.stop_loss
    if side is not None and entry is not None and stop is not None:
        if side == Side.LONG and stop >= entry:
            result.errors.append("stop_loss must be below entry_price for LONG")
        if side == Side.SHORT and stop <= entry:
            result.errors.append("stop_loss must be above entry_price for SHORT")

    if command.tp_levels:
        total_pct = sum(level.percentage for level in command.tp_levels)
        if total_pct > 100:
            result.errors.append(f"TP percentages sum to {total_pct:.1f}%, cannot exceed 100%")


def _check_symbol_only(command: NormalizedCommand, result: ValidationResult) -> None:
    _require_symbol(command, result)


def _check_trailing_stop(command: NormalizedCommand, result: ValidationResult) -> None:
    _require_symbol(command, result)
    if command.trigger_price is None:
        result.missing.append("trigger_price")
    if command.callback_rate is None and command.distance is None:
        result.missing.append("callback_rate or distance")


def _require_symbol(command: NormalizedCommand, result: ValidationResult) -> None:
    if not command.symbol:
        result.missing.append("symbol")


def _intent_label(intent: object) -> str:
    if isinstance(intent, Intent):
        return intent.value
    return str(intent)


_INTENT_RULES: dict[Intent, Callable[[NormalizedCommand, ValidationResult], None]] = {
    Intent.OPEN_POSITION: _check_open_position,
    Intent.CLOSE_POSITION: _check_symbol_only,
    Intent.BREAK_EVEN: _check_symbol_only,
    Intent.TRAILING_STOP: _check_trailing_stop,
}
