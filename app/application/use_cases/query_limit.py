from __future__ import annotations

from app.domain.services.validator import is_valid_limit, parse_int64

DEFAULT_LIMIT = 5


def resolve_limit(raw_limit: str | None) -> int:
    # Limit is advisory: anything unusable falls back to the default.
    limit = parse_int64(raw_limit)
    if limit is None or not is_valid_limit(limit):
        return DEFAULT_LIMIT
    return limit
