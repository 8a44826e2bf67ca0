from __future__ import annotations

from pydantic import BaseModel

from app.api.schemas.token import TokenResponse


class SwapPoolResponse(BaseModel):
    token0: TokenResponse
    token1: TokenResponse


class SwapResponse(BaseModel):
    id: str
    pool: SwapPoolResponse
