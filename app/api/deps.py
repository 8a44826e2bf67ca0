from __future__ import annotations

from functools import lru_cache

from fastapi import HTTPException

from app.application.dto.request_context import RequestContext
from app.application.use_cases.get_pools_by_token import GetPoolsByTokenUseCase
from app.application.use_cases.get_swapped_tokens_by_block import GetSwappedTokensByBlockUseCase
from app.application.use_cases.get_swaps_by_block import GetSwapsByBlockUseCase
from app.application.use_cases.get_token_volume import GetTokenVolumeUseCase
from app.infrastructure.clients.graph_query_gateway import (
    GraphQueryGateway,
    GraphQueryGatewaySettings,
)
from app.shared.config import get_settings


@lru_cache(maxsize=1)
def _get_graph_query_gateway() -> GraphQueryGateway:
    settings = get_settings()
    if not settings.graph_api:
        raise HTTPException(status_code=500, detail="GRAPH_API is required.")
    return GraphQueryGateway(
        GraphQueryGatewaySettings(
            graph_api=settings.graph_api,
            graph_gateway_base=settings.graph_gateway_base,
            graph_api_key=settings.graph_api_key,
            timeout_seconds=settings.graph_request_timeout_seconds,
            max_retries=settings.graph_max_retries,
        )
    )


def get_request_context() -> RequestContext:
    return RequestContext.with_timeout(get_settings().request_timeout_seconds)


def get_swaps_by_block_use_case() -> GetSwapsByBlockUseCase:
    return GetSwapsByBlockUseCase(query_gateway=_get_graph_query_gateway())


def get_swapped_tokens_by_block_use_case() -> GetSwappedTokensByBlockUseCase:
    return GetSwappedTokensByBlockUseCase(
        get_swaps_by_block_use_case=get_swaps_by_block_use_case(),
    )


def get_pools_by_token_use_case() -> GetPoolsByTokenUseCase:
    return GetPoolsByTokenUseCase(query_gateway=_get_graph_query_gateway())


def get_token_volume_use_case() -> GetTokenVolumeUseCase:
    return GetTokenVolumeUseCase(query_gateway=_get_graph_query_gateway())
