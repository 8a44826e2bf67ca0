from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.api.deps import (
    get_request_context,
    get_swapped_tokens_by_block_use_case,
    get_swaps_by_block_use_case,
)
from app.api.errors import to_http_exception
from app.api.rate_limit import enforce_rate_limit
from app.api.schemas.block import SwapPoolResponse, SwapResponse
from app.api.schemas.token import TokenResponse
from app.application.dto.block import GetSwapsByBlockInput
from app.application.dto.request_context import RequestContext
from app.application.use_cases.get_swapped_tokens_by_block import GetSwappedTokensByBlockUseCase
from app.application.use_cases.get_swaps_by_block import GetSwapsByBlockUseCase
from app.domain.exceptions import DomainError

router = APIRouter(dependencies=[Depends(enforce_rate_limit)])


@router.get("/blocks/{block}/swaps", response_model=list[SwapResponse])
def get_swaps_by_block(
    block: str,
    first: str = Query(default="5"),
    context: RequestContext = Depends(get_request_context),
    use_case: GetSwapsByBlockUseCase = Depends(get_swaps_by_block_use_case),
):
    try:
        swaps = use_case.execute(GetSwapsByBlockInput(block=block, limit=first), context=context)
    except DomainError as exc:
        raise to_http_exception(exc) from exc

    return [
        SwapResponse(
            id=swap.id,
            pool=SwapPoolResponse(
                token0=TokenResponse(symbol=swap.pool.token0.symbol),
                token1=TokenResponse(symbol=swap.pool.token1.symbol),
            ),
        )
        for swap in swaps
    ]


@router.get("/blocks/{block}/swaps/tokens", response_model=list[TokenResponse])
def get_swapped_tokens_by_block(
    block: str,
    first: str = Query(default="5"),
    context: RequestContext = Depends(get_request_context),
    use_case: GetSwappedTokensByBlockUseCase = Depends(get_swapped_tokens_by_block_use_case),
):
    try:
        tokens = use_case.execute(GetSwapsByBlockInput(block=block, limit=first), context=context)
    except DomainError as exc:
        raise to_http_exception(exc) from exc

    return [TokenResponse(symbol=token.symbol) for token in tokens]
