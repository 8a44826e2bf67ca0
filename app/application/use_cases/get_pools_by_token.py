from __future__ import annotations

import logging

from app.application.dto.request_context import RequestContext
from app.application.dto.token import GetPoolsByTokenInput
from app.application.ports.query_gateway_port import (
    POOLS_BY_TOKEN,
    QueryGatewayError,
    QueryGatewayPort,
    QueryGatewayTimeoutError,
)
from app.application.use_cases.query_limit import resolve_limit
from app.domain.entities.token import Pool
from app.domain.exceptions import InvalidTokenError, RequestTimeoutError, UpstreamQueryError
from app.domain.services.validator import is_valid_token

logger = logging.getLogger(__name__)


class GetPoolsByTokenUseCase:
    def __init__(self, *, query_gateway: QueryGatewayPort):
        self._query_gateway = query_gateway

    def execute(self, command: GetPoolsByTokenInput, *, context: RequestContext) -> list[Pool]:
        if not is_valid_token(command.token):
            raise InvalidTokenError("invalid token")
        limit = resolve_limit(command.limit)

        try:
            return self._query_gateway.execute(
                context=context,
                shape=POOLS_BY_TOKEN,
                variables={"token": command.token, "first": limit},
            )
        except QueryGatewayTimeoutError as exc:
            logger.warning("get_pools_by_token: timeout token=%s first=%s", command.token, limit)
            raise RequestTimeoutError("request timeout") from exc
        except QueryGatewayError as exc:
            logger.error(
                "get_pools_by_token: query_failed token=%s first=%s error=%s",
                command.token,
                limit,
                exc,
            )
            raise UpstreamQueryError("token: pools query failed") from exc
