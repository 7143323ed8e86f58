"""Wit.ai provider package exports."""

from trade_intent.witai.client import WitAIClient
from trade_intent.witai.errors import (
    WitAIAPIError,
    WitAIConfigError,
    WitAIError,
    WitAIResponseError,
    WitAIStatusError,
    WitAITransientError,
)
from trade_intent.witai.processor import WitAIProcessor
from trade_intent.witai.schemas import WitEntity, WitIntent, WitResponse
from trade_intent.witai.transformer import map_intent, transform_response

__all__ = [
    "WitAIAPIError",
    "WitAIClient",
    "WitAIConfigError",
    "WitAIError",
    "WitAIProcessor",
    "WitAIResponseError",
    "WitAIStatusError",
    "WitAITransientError",
    "WitEntity",
    "WitIntent",
    "WitResponse",
    "map_intent",
    "transform_response",
]
