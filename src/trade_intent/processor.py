"""Processor interface exposed to callers."""

from __future__ import annotations

from typing import Protocol

from trade_intent.types import NormalizedCommand


class Processor(Protocol):
    """Natural-language command processor."""

    @property
    def name(self) -> str:
        """Short processor name, e.g. ``"witai"``."""

    @property
    def supported_languages(self) -> list[str]:
        """Language codes the processor understands."""

    def parse_command(self, text: str, *, timeout: float | None = None) -> NormalizedCommand:
        """Parse free text into a validated command.

        Provider and transport failures raise; incomplete or invalid commands
        are returned with ``valid=False``.
        """
