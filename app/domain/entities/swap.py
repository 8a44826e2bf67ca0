from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities.token import Pool


@dataclass(frozen=True)
class Swap:
    id: str
    pool: Pool
