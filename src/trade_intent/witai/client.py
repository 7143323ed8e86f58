"""Wit.ai HTTP client."""

from __future__ import annotations

from typing import Any

import httpx
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from trade_intent.config import Settings
from trade_intent.witai.errors import (
    WitAIConfigError,
    WitAIResponseError,
    WitAIStatusError,
    WitAITransientError,
)
from trade_intent.witai.schemas import WitResponse


class WitAIClient:
    """Thin client for the Wit.ai ``/message`` endpoint."""

    def __init__(
        self,
        settings: Settings,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not settings.wit_ai_token:
            raise WitAIConfigError("wit.ai token is required")
        self._settings = settings
        self._transport = transport

    def message(self, text: str, timeout: float | None = None) -> WitResponse:
        """Classify one utterance.

        ``timeout`` (seconds) overrides the configured default for this call.
        Transport failures and 5xx answers are retried; anything else raises
        immediately.
        """
        retrying = Retrying(
            retry=retry_if_exception_type(WitAITransientError),
            wait=wait_exponential(multiplier=self._settings.wit_ai_retry_backoff, max=8),
            stop=stop_after_attempt(self._settings.wit_ai_max_attempts),
            reraise=True,
        )
        payload = retrying(self._request_message, text, timeout)
        return WitResponse.parse_payload(payload)

    def _request_message(self, text: str, timeout: float | None) -> Any:
        headers = {"Authorization": f"Bearer {self._settings.wit_ai_token}"}
        params = {"v": self._settings.wit_ai_api_version, "q": text}

        try:
            with httpx.Client(
                base_url=self._settings.wit_ai_base_url,
                timeout=timeout if timeout is not None else self._settings.wit_ai_timeout,
                transport=self._transport,
            ) as client:
                response = client.get("/message", headers=headers, params=params)
        except httpx.HTTPError as exc:
            raise WitAITransientError(str(exc)) from exc

        if response.status_code >= 500:
            raise WitAITransientError(f"wit.ai returned status {response.status_code}")
        if response.status_code != httpx.codes.OK:
            raise WitAIStatusError(response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise WitAIResponseError("wit_response_not_json") from exc
