"""Wit.ai backed command processor."""

from __future__ import annotations

import time

from trade_intent.config import Settings
from trade_intent.types import NormalizedCommand
from trade_intent.utils.logging import get_logger, log_command_parsed, log_provider_call
from trade_intent.validation import validate_command
from trade_intent.witai.client import WitAIClient
from trade_intent.witai.errors import WitAIError
from trade_intent.witai.transformer import transform_response


class WitAIProcessor:
    """Parse trading commands through Wit.ai."""

    def __init__(self, settings: Settings, client: WitAIClient | None = None) -> None:
        self._client = client or WitAIClient(settings)
        self._logger = get_logger("trade_intent.witai.processor")

    @property
    def name(self) -> str:
        return "witai"

    @property
    def supported_languages(self) -> list[str]:
        return ["en", "es"]

    def parse_command(self, text: str, *, timeout: float | None = None) -> NormalizedCommand:
        """Classify, normalize and validate one command."""
        started = time.perf_counter()
        try:
            response = self._client.message(text, timeout=timeout)
        except WitAIError as exc:
            elapsed_ms = (time.perf_counter() - started) * 1000
            log_provider_call(
                self._logger,
                provider=self.name,
                success=False,
                latency_ms=elapsed_ms,
                reason=type(exc).__name__,
            )
            raise

        log_provider_call(
            self._logger,
            provider=self.name,
            success=True,
            latency_ms=(time.perf_counter() - started) * 1000,
            intents=len(response.intents),
            entities=len(response.entities),
        )

        command = validate_command(transform_response(response, text))
        log_command_parsed(
            self._logger,
            intent=command.intent.value,
            valid=command.valid,
            missing=command.missing,
            errors=command.errors,
        )
        return command
