"""Wit.ai response schemas and strict parsing helpers."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from trade_intent.witai.errors import WitAIResponseError


class WitIntent(BaseModel):
    """One intent candidate, ordered by the provider."""

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    name: str
    confidence: float = 0.0


class WitEntity(BaseModel):
    """One entity candidate, ordered by the provider."""

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    name: str = ""
    role: str = ""
    start: int = 0
    end: int = 0
    body: str = ""
    value: str = ""
    confidence: float = 0.0

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v: Any) -> Any:
        """Built-in numeric entities carry numbers; keep them as text."""
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class WitResponse(BaseModel):
    """Classification result for one message."""

    model_config = ConfigDict(extra="ignore")

    text: str = ""
    intents: list[WitIntent] = Field(default_factory=list)
    entities: dict[str, list[WitEntity]] = Field(default_factory=dict)
    traits: dict[str, list[Any]] = Field(default_factory=dict)

    @classmethod
    def parse_payload(cls, payload: Any) -> WitResponse:
        """Parse a decoded JSON body. Shape violations raise WitAIResponseError."""
        if not isinstance(payload, dict):
            raise WitAIResponseError("wit_response_not_object")
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise WitAIResponseError(
                f"wit_response_schema_error: {exc.errors()[0]['msg']}"
            ) from exc
