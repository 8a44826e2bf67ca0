from __future__ import annotations

from fastapi import HTTPException

from app.domain.exceptions import (
    AggregationFailedError,
    DomainError,
    InvalidBlockError,
    InvalidRangeError,
    InvalidTokenError,
    NoVolumeDataError,
    RequestTimeoutError,
    SumFailedError,
    UpstreamQueryError,
    VolumeFetchFailedError,
)

STATUS_BY_ERROR: dict[type[DomainError], int] = {
    InvalidBlockError: 400,
    InvalidTokenError: 400,
    InvalidRangeError: 400,
    RequestTimeoutError: 408,
    NoVolumeDataError: 404,
    AggregationFailedError: 502,
    VolumeFetchFailedError: 502,
    UpstreamQueryError: 502,
    SumFailedError: 500,
}


def to_http_exception(exc: DomainError) -> HTTPException:
    status_code = STATUS_BY_ERROR.get(type(exc), 500)
    return HTTPException(status_code=status_code, detail=str(exc))
