from __future__ import annotations

import logging

from app.application.dto.block import GetSwapsByBlockInput
from app.application.dto.request_context import RequestContext
from app.application.ports.query_gateway_port import (
    SWAPS_BY_BLOCK,
    QueryGatewayError,
    QueryGatewayPort,
    QueryGatewayTimeoutError,
)
from app.application.use_cases.query_limit import resolve_limit
from app.domain.entities.swap import Swap
from app.domain.exceptions import InvalidBlockError, RequestTimeoutError, UpstreamQueryError
from app.domain.services.validator import is_valid_block_number, parse_int64

logger = logging.getLogger(__name__)


class GetSwapsByBlockUseCase:
    def __init__(self, *, query_gateway: QueryGatewayPort):
        self._query_gateway = query_gateway

    def execute(self, command: GetSwapsByBlockInput, *, context: RequestContext) -> list[Swap]:
        if not is_valid_block_number(command.block):
            raise InvalidBlockError("invalid block")
        block_number = parse_int64(command.block)
        limit = resolve_limit(command.limit)

        try:
            return self._query_gateway.execute(
                context=context,
                shape=SWAPS_BY_BLOCK,
                variables={"block": block_number, "first": limit},
            )
        except QueryGatewayTimeoutError as exc:
            logger.warning("get_swaps_by_block: timeout block=%s first=%s", block_number, limit)
            raise RequestTimeoutError("request timeout") from exc
        except QueryGatewayError as exc:
            logger.error(
                "get_swaps_by_block: query_failed block=%s first=%s error=%s",
                block_number,
                limit,
                exc,
            )
            raise UpstreamQueryError("block: swaps query failed") from exc
