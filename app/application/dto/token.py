from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GetPoolsByTokenInput:
    token: str
    limit: str | None = None


@dataclass(frozen=True)
class GetTokenVolumeInput:
    token: str
    from_ts: str
    to_ts: str
