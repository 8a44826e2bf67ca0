from __future__ import annotations

import time

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_pools_by_token_use_case, get_request_context, get_token_volume_use_case
from app.api.errors import to_http_exception
from app.api.rate_limit import enforce_rate_limit
from app.api.schemas.token import PoolResponse, TokenResponse, VolumeResponse
from app.application.dto.request_context import RequestContext
from app.application.dto.token import GetPoolsByTokenInput, GetTokenVolumeInput
from app.application.use_cases.get_pools_by_token import GetPoolsByTokenUseCase
from app.application.use_cases.get_token_volume import GetTokenVolumeUseCase
from app.domain.exceptions import DomainError

DEFAULT_VOLUME_WINDOW_SECONDS = 24 * 60 * 60

router = APIRouter(dependencies=[Depends(enforce_rate_limit)])


@router.get("/tokens/{token}/pools", response_model=list[PoolResponse])
def get_pools_by_token(
    token: str,
    first: str = Query(default="5"),
    context: RequestContext = Depends(get_request_context),
    use_case: GetPoolsByTokenUseCase = Depends(get_pools_by_token_use_case),
):
    try:
        pools = use_case.execute(GetPoolsByTokenInput(token=token, limit=first), context=context)
    except DomainError as exc:
        raise to_http_exception(exc) from exc

    return [
        PoolResponse(
            id=pool.id,
            token0=TokenResponse(symbol=pool.token0.symbol),
            token1=TokenResponse(symbol=pool.token1.symbol),
        )
        for pool in pools
    ]


@router.get("/tokens/{token}/volume", response_model=VolumeResponse)
def get_token_volume(
    token: str,
    from_ts: str | None = Query(default=None, alias="from"),
    to_ts: str | None = Query(default=None, alias="to"),
    context: RequestContext = Depends(get_request_context),
    use_case: GetTokenVolumeUseCase = Depends(get_token_volume_use_case),
):
    now = int(time.time())
    if not to_ts:
        to_ts = str(now)
    if not from_ts:
        from_ts = str(now - DEFAULT_VOLUME_WINDOW_SECONDS)

    try:
        volume = use_case.execute(
            GetTokenVolumeInput(token=token, from_ts=from_ts, to_ts=to_ts),
            context=context,
        )
    except DomainError as exc:
        raise to_http_exception(exc) from exc

    return VolumeResponse(volume=volume.volume)
