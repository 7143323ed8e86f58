"""Symbol, side and take-profit normalization helpers."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Generic, TypeVar

from trade_intent.types import Side, TPLevel

_T = TypeVar("_T")

_NUMBER_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

QUOTE_SUFFIX = "-USDT"


class SynonymTable(Generic[_T]):
    """Read-only, case-insensitive lookup from free-text variants to a canonical value."""

    def __init__(self, entries: Mapping[str, _T]) -> None:
        self._entries: Mapping[str, _T] = MappingProxyType(
            {key.strip().lower(): value for key, value in entries.items()}
        )

    @classmethod
    def grouped(cls, groups: Mapping[_T, Iterable[str]]) -> SynonymTable[_T]:
        """Build a table from ``canonical -> synonyms`` groups."""
        return cls(
            {synonym: canonical for canonical, synonyms in groups.items() for synonym in synonyms}
        )

    def lookup(self, text: str) -> _T | None:
        return self._entries.get(text.strip().lower())


SYMBOL_TABLE: SynonymTable[str] = SynonymTable.grouped(
    {
        "BTC-USDT": ("bitcoin", "btc"),
        "ETH-USDT": ("ethereum", "eth"),
        "SOL-USDT": ("solana", "sol"),
        "BNB-USDT": ("bnb",),
        "XRP-USDT": ("xrp",),
        "ADA-USDT": ("cardano", "ada"),
        "DOGE-USDT": ("dogecoin", "doge"),
    }
)

# English + Spanish
SIDE_TABLE: SynonymTable[Side] = SynonymTable.grouped(
    {
        Side.LONG: ("buy", "long", "bullish", "comprar", "largo", "alcista"),
        Side.SHORT: ("sell", "short", "bearish", "vender", "corto", "bajista"),
    }
)


def normalize_symbol(text: str, table: SynonymTable[str] = SYMBOL_TABLE) -> str:
    """Map an asset name or ticker to a trading pair such as ``BTC-USDT``.

    Unknown input is upper-cased and gets the ``-USDT`` quote appended
    unless it already carries it.
    """
    mapped = table.lookup(text)
    if mapped is not None:
        return mapped

    symbol = text.strip().upper()
    if symbol.endswith(QUOTE_SUFFIX):
        return symbol
    return symbol + QUOTE_SUFFIX


def normalize_side(text: str, table: SynonymTable[Side] = SIDE_TABLE) -> Side:
    """Map a direction word to LONG/SHORT. Unrecognized input defaults to LONG."""
    mapped = table.lookup(text)
    if mapped is None:
        return Side.LONG
    return mapped


def parse_tp_levels(text: str) -> list[TPLevel]:
    """Parse ``"46000:50,47000:50"`` into take-profit levels.

    Tokens that are not a ``price:percentage`` pair of numbers are skipped.
    """
    levels: list[TPLevel] = []
    for token in text.split(","):
        price_text, sep, pct_text = token.strip().partition(":")
        if not sep:
            continue
        price = parse_number(price_text)
        percentage = parse_number(pct_text)
        if price is None or percentage is None:
            continue
        levels.append(TPLevel(price=price, percentage=percentage))
    return levels


def parse_number(text: str) -> float | None:
    """Parse a plain ASCII decimal, returning ``None`` for anything else.

    Surrounding whitespace, digit separators and non-ASCII digits are rejected.
    """
    if not isinstance(text, str) or _NUMBER_RE.fullmatch(text) is None:
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value
