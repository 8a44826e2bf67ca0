from __future__ import annotations


class DomainError(Exception):
    """Base for domain errors."""


class InvalidBlockError(DomainError):
    """Block number is not a positive integer."""


class InvalidTokenError(DomainError):
    """Token id is not a 40-60 char alphanumeric identifier."""


class InvalidRangeError(DomainError):
    """Time range is malformed, inverted, empty or in the future."""


class UpstreamQueryError(DomainError):
    """Upstream query failed for a pass-through lookup."""


class AggregationFailedError(DomainError):
    """Could not fetch the records to aggregate."""


class VolumeFetchFailedError(DomainError):
    """Could not fetch the day volume series."""


class NoVolumeDataError(DomainError):
    """Upstream returned no volume records for the range."""


class SumFailedError(DomainError):
    """Volume series contains a value that is not a decimal number."""


class RequestTimeoutError(DomainError):
    """Request deadline elapsed before upstream answered."""
