from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GetSwapsByBlockInput:
    block: str
    limit: str | None = None
