from __future__ import annotations

import logging

from app.application.dto.request_context import RequestContext
from app.application.dto.token import GetTokenVolumeInput
from app.application.ports.query_gateway_port import (
    TOKEN_DAY_VOLUMES,
    QueryGatewayError,
    QueryGatewayPort,
    QueryGatewayTimeoutError,
)
from app.domain.entities.token import AggregatedVolume, DayVolumeRecord
from app.domain.exceptions import (
    InvalidRangeError,
    InvalidTokenError,
    NoVolumeDataError,
    RequestTimeoutError,
    SumFailedError,
    VolumeFetchFailedError,
)
from app.domain.services.decimal_sum import InvalidNumberError, sum_decimal
from app.domain.services.validator import is_valid_time_range, is_valid_token, parse_int64

logger = logging.getLogger(__name__)


class GetTokenVolumeUseCase:
    """Total USD volume of a token over a closed unix-time range.

    An empty series is reported as NoVolumeDataError instead of a zero
    volume, since "no data" and "nothing traded" mean different things.
    """

    def __init__(self, *, query_gateway: QueryGatewayPort):
        self._query_gateway = query_gateway

    def execute(self, command: GetTokenVolumeInput, *, context: RequestContext) -> AggregatedVolume:
        if not is_valid_token(command.token):
            raise InvalidTokenError("invalid token")
        if not is_valid_time_range(command.from_ts, command.to_ts):
            raise InvalidRangeError("invalid range")
        from_ts = parse_int64(command.from_ts)
        to_ts = parse_int64(command.to_ts)

        try:
            records: list[DayVolumeRecord] = self._query_gateway.execute(
                context=context,
                shape=TOKEN_DAY_VOLUMES,
                variables={"token": command.token, "from": from_ts, "to": to_ts},
            )
        except QueryGatewayTimeoutError as exc:
            logger.warning("get_token_volume: timeout token=%s from=%s to=%s", command.token, from_ts, to_ts)
            raise RequestTimeoutError("request timeout") from exc
        except QueryGatewayError as exc:
            logger.error(
                "get_token_volume: query_failed token=%s from=%s to=%s error=%s",
                command.token,
                from_ts,
                to_ts,
                exc,
            )
            raise VolumeFetchFailedError("issue to get token volume") from exc

        if not records:
            raise NoVolumeDataError("no token volume")

        try:
            total = sum_decimal(record.volume_usd for record in records)
        except InvalidNumberError as exc:
            logger.error("get_token_volume: sum_failed token=%s error=%s", command.token, exc)
            raise SumFailedError("issue to get sum of volume") from exc

        return AggregatedVolume(volume=total)
