from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from trade_intent.types import Intent, Side, TPLevel
from trade_intent.validation import validate_command
from trade_intent.witai.schemas import WitResponse
from trade_intent.witai.transformer import map_intent, transform_response


def _entity(value: Any, confidence: float = 0.9, role: str = "") -> dict[str, Any]:
    return {"value": value, "confidence": confidence, "role": role}


def _response(intents: list[tuple[str, float]], entities: dict[str, list[Any]]) -> WitResponse:
    return WitResponse.parse_payload(
        {
            "text": "",
            "intents": [{"name": name, "confidence": conf} for name, conf in intents],
            "entities": entities,
        }
    )


def test_map_intent_known_labels() -> None:
    assert map_intent("open_position") == Intent.OPEN_POSITION
    assert map_intent("close_position") == Intent.CLOSE_POSITION
    assert map_intent("view_positions") == Intent.VIEW_POSITIONS
    assert map_intent("view_orders") == Intent.VIEW_ORDERS
    assert map_intent("cancel_orders") == Intent.CANCEL_ORDERS
    assert map_intent("check_balance") == Intent.CHECK_BALANCE
    assert map_intent("break_even") == Intent.BREAK_EVEN
    assert map_intent("trailing_stop") == Intent.TRAILING_STOP


def test_map_intent_unknown_labels() -> None:
    assert map_intent("unknown_intent") == Intent.UNKNOWN
    assert map_intent("") == Intent.UNKNOWN
    assert map_intent("Open_Position") == Intent.UNKNOWN


def test_transform_open_position_command() -> None:
    response = _response(
        [("open_position", 0.97), ("close_position", 0.02)],
        {
            "symbol:symbol": [_entity("btc"), _entity("eth", 0.1)],
            "side:side": [_entity("long", role="side")],
            "price:entry": [_entity("45000", role="entry")],
            "price:stop_loss": [_entity("44500", role="stop_loss")],
            "price:take_profit": [_entity("47000", role="take_profit")],
            "risk": [_entity("2")],
            "levels": [_entity("46000:50,47000:50")],
        },
    )
    raw = "open long BTC at 45000 with stop loss 44500 and risk 2%"
    when = datetime(2024, 3, 4, 12, 0, tzinfo=timezone.utc)

    command = transform_response(response, raw, timestamp=when)

    assert command.intent == Intent.OPEN_POSITION
    assert command.confidence == 0.97
    assert command.symbol == "BTC-USDT"
    assert command.side == Side.LONG
    assert command.entry_price == 45_000.0
    assert command.stop_loss == 44_500.0
    assert command.take_profit == 47_000.0
    assert command.risk_percent == 2.0
    assert command.tp_levels == (
        TPLevel(price=46_000.0, percentage=50.0),
        TPLevel(price=47_000.0, percentage=50.0),
    )
    assert command.raw_input == raw
    assert command.timestamp == when


def test_transform_spanish_short_command() -> None:
    response = _response(
        [("open_position", 0.91)],
        {
            "symbol": [_entity("ethereum")],
            "side": [_entity("vender")],
            "entry_price": [_entity("3000")],
            "stop_loss": [_entity("3100")],
            "risk": [_entity(1.5)],
        },
    )
    command = transform_response(response, "vender ETH en 3000 con stop 3100 y riesgo 1.5%")
    assert command.symbol == "ETH-USDT"
    assert command.side == Side.SHORT
    assert command.entry_price == 3_000.0
    assert command.stop_loss == 3_100.0
    assert command.risk_percent == 1.5


def test_transform_trailing_stop_fields() -> None:
    response = _response(
        [("trailing_stop", 0.88)],
        {
            "symbol": [_entity("sol")],
            "trigger_price": [_entity("150")],
            "callback_rate": [_entity("0.005")],
            "distance": [_entity("2.5")],
            "rr_ratio": [_entity("2")],
        },
    )
    command = transform_response(response, "trailing stop on SOL at 150 with 0.5%")
    assert command.intent == Intent.TRAILING_STOP
    assert command.symbol == "SOL-USDT"
    assert command.trigger_price == 150.0
    assert command.callback_rate == 0.005
    assert command.distance == 2.5
    assert command.rr_ratio == 2.0


def test_transform_without_intents_leaves_unknown() -> None:
    command = transform_response(_response([], {"symbol": [_entity("btc")]}), "btc")
    assert command.intent == Intent.UNKNOWN
    assert command.confidence == 0.0
    assert command.symbol == "BTC-USDT"
    assert command.timestamp is not None


def test_transform_unknown_intent_label() -> None:
    command = transform_response(_response([("place_bet", 0.6)], {}), "bet on btc")
    assert command.intent == Intent.UNKNOWN
    assert command.confidence == 0.6


def test_transform_drops_unparseable_numbers() -> None:
    response = _response(
        [("open_position", 0.9)],
        {
            "entry_price": [_entity("forty-five thousand")],
            "stop_loss": [_entity("nan")],
            "risk": [_entity("2%")],
            "trigger_price": [_entity("")],
        },
    )
    command = transform_response(response, "open at forty-five thousand")
    assert command.entry_price is None
    assert command.stop_loss is None
    assert command.risk_percent is None
    assert command.trigger_price is None
    assert command.errors == ()


def test_transform_zero_values_are_kept() -> None:
    response = _response(
        [("open_position", 0.9)],
        {"entry_price": [_entity("0")], "risk": [_entity(0)]},
    )
    command = transform_response(response, "open at 0")
    assert command.entry_price == 0.0
    assert command.risk_percent == 0.0


def test_transform_unmatched_side_defaults_to_long() -> None:
    command = transform_response(
        _response([("open_position", 0.9)], {"side": [_entity("sideways")]}),
        "open sideways btc",
    )
    assert command.side == Side.LONG


def test_transform_skips_empty_and_unknown_entities() -> None:
    response = _response(
        [("close_position", 0.9)],
        {
            "symbol": [],
            "side": [],
            "wit$datetime:datetime": [_entity("2024-03-04T00:00:00")],
            "price:other": [_entity("123")],
        },
    )
    command = transform_response(response, "close it tomorrow")
    assert command.symbol == ""
    assert command.side is None
    assert command.entry_price is None


def test_transform_blank_symbol_is_absent() -> None:
    command = transform_response(
        _response([("close_position", 0.9)], {"symbol": [_entity("   ")]}),
        "close",
    )
    assert command.symbol == ""
    assert validate_command(command).missing == ("symbol",)


def test_transform_malformed_levels_yield_partial_or_empty() -> None:
    response = _response(
        [("open_position", 0.9)],
        {"levels": [_entity("3000:30,bad,3100:70")]},
    )
    command = transform_response(response, "tp 3000 30% 3100 70%")
    assert command.tp_levels == (
        TPLevel(price=3_000.0, percentage=30.0),
        TPLevel(price=3_100.0, percentage=70.0),
    )

    empty = transform_response(
        _response([("open_position", 0.9)], {"levels": [_entity("garbage")]}),
        "tp garbage",
    )
    assert empty.tp_levels == ()


def test_transform_drops_loosely_formatted_numbers() -> None:
    response = _response(
        [("open_position", 0.9)],
        {
            "entry_price": [_entity("4_5000")],
            "stop_loss": [_entity("٤٤٥٠٠")],
            "levels": [_entity("46000 : 50")],
        },
    )
    command = transform_response(response, "open btc at 45000")
    assert command.entry_price is None
    assert command.stop_loss is None
    assert command.tp_levels == ()
