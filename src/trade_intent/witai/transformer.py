"""Transform Wit.ai classification results into normalized commands."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any

from trade_intent.normalizers import normalize_side, normalize_symbol, parse_number, parse_tp_levels
from trade_intent.types import Intent, NormalizedCommand
from trade_intent.utils.logging import get_logger
from trade_intent.witai.schemas import WitEntity, WitResponse

INTENT_TABLE: Mapping[str, Intent] = MappingProxyType(
    {intent.value: intent for intent in Intent if intent is not Intent.UNKNOWN}
)

# entity category -> numeric command field
_NUMERIC_ENTITIES: Mapping[str, str] = MappingProxyType(
    {
        "entry_price": "entry_price",
        "price:entry": "entry_price",
        "stop_loss": "stop_loss",
        "price:stop_loss": "stop_loss",
        "take_profit": "take_profit",
        "price:take_profit": "take_profit",
        "risk": "risk_percent",
        "trigger_price": "trigger_price",
        "callback_rate": "callback_rate",
        "rr_ratio": "rr_ratio",
        "distance": "distance",
    }
)

_KNOWN_ENTITIES = frozenset({"symbol", "side", "levels", *_NUMERIC_ENTITIES})


def map_intent(label: str, table: Mapping[str, Intent] = INTENT_TABLE) -> Intent:
    """Map a Wit.ai intent name to the canonical intent."""
    return table.get(label, Intent.UNKNOWN)


def transform_response(
    response: WitResponse,
    raw_input: str,
    *,
    timestamp: datetime | None = None,
) -> NormalizedCommand:
    """Build a normalized (not yet validated) command from a Wit.ai response.

    The first intent and the first value of every entity category are used,
    since Wit.ai orders candidates by confidence. Values that cannot be
    parsed leave their field unset.

    A symbol entity that is blank after trimming leaves ``symbol`` empty
    instead of normalizing to a bare ``"-USDT"``, so intents that need a
    symbol report it as missing.
    """
    logger = get_logger("trade_intent.witai.transformer")
    fields: dict[str, Any] = {
        "raw_input": raw_input,
        "timestamp": timestamp or datetime.now(timezone.utc),
    }

    if response.intents:
        top = response.intents[0]
        fields["intent"] = map_intent(top.name)
        fields["confidence"] = top.confidence

    for key, candidates in response.entities.items():
        if not candidates:
            continue
        category = _resolve_category(key)
        if category is None:
            continue
        if not _apply_entity(fields, category, candidates[0]):
            logger.debug("entity_dropped", entity=key, value=candidates[0].value)

    return NormalizedCommand(**fields)


def _resolve_category(key: str) -> str | None:
    """Resolve ``name:role`` keys, falling back to the bare entity name."""
    if key in _KNOWN_ENTITIES:
        return key
    name = key.partition(":")[0]
    if name in _KNOWN_ENTITIES:
        return name
    return None


def _apply_entity(fields: dict[str, Any], category: str, entity: WitEntity) -> bool:
    if category == "symbol":
        if not entity.value.strip():
            return False
        fields["symbol"] = normalize_symbol(entity.value)
        return True

    if category == "side":
        fields["side"] = normalize_side(entity.value)
        return True

    if category == "levels":
        fields["tp_levels"] = tuple(parse_tp_levels(entity.value))
        return True

    value = parse_number(entity.value)
    if value is None:
        return False
    fields[_NUMERIC_ENTITIES[category]] = value
    return True
