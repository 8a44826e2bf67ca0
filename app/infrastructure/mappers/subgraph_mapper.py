from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.domain.entities.swap import Swap
from app.domain.entities.token import DayVolumeRecord, Pool, Token


def _required_str(row: Mapping[str, Any], key: str) -> str:
    value = row[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def map_row_to_token(row: Mapping[str, Any]) -> Token:
    return Token(symbol=_required_str(row, "symbol"))


def map_row_to_pool(row: Mapping[str, Any]) -> Pool:
    pool_id = row.get("id")
    if pool_id is not None and not isinstance(pool_id, str):
        raise TypeError(f"id must be a string, got {type(pool_id).__name__}")
    return Pool(
        id=pool_id,
        token0=map_row_to_token(row["token0"]),
        token1=map_row_to_token(row["token1"]),
    )


def map_row_to_swap(row: Mapping[str, Any]) -> Swap:
    return Swap(id=_required_str(row, "id"), pool=map_row_to_pool(row["pool"]))


def map_row_to_day_volume(row: Mapping[str, Any]) -> DayVolumeRecord:
    volume = row["volumeUSD"]
    if volume is None:
        raise TypeError("volumeUSD must not be null")
    return DayVolumeRecord(volume_usd=str(volume))
