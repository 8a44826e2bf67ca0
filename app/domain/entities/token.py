from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    symbol: str


@dataclass(frozen=True)
class Pool:
    token0: Token
    token1: Token
    id: str | None = None


@dataclass(frozen=True)
class DayVolumeRecord:
    volume_usd: str


@dataclass(frozen=True)
class AggregatedVolume:
    volume: str
