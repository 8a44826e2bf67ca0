from __future__ import annotations

from pydantic import BaseModel


class TokenResponse(BaseModel):
    symbol: str


class PoolResponse(BaseModel):
    id: str | None
    token0: TokenResponse
    token1: TokenResponse


class VolumeResponse(BaseModel):
    volume: str
