from __future__ import annotations

import re
import time

TOKEN_ID_MIN_LENGTH = 40
TOKEN_ID_MAX_LENGTH = 60
LIMIT_MIN = 1
LIMIT_MAX = 1000

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int64(value: str | None) -> int | None:
    """Strict base-10 parse: optional sign and ASCII digits, within int64."""
    if not isinstance(value, str) or not _INTEGER_PATTERN.fullmatch(value):
        return None
    number = int(value)
    if number < INT64_MIN or number > INT64_MAX:
        return None
    return number


def is_valid_token(token_id: str) -> bool:
    if not isinstance(token_id, str):
        return False
    if len(token_id) < TOKEN_ID_MIN_LENGTH or len(token_id) > TOKEN_ID_MAX_LENGTH:
        return False
    return token_id.isascii() and token_id.isalnum()


def is_valid_block_number(value: str) -> bool:
    number = parse_int64(value)
    return number is not None and number > 0


def is_valid_limit(limit: int) -> bool:
    return LIMIT_MIN <= limit <= LIMIT_MAX


def is_valid_time_range(from_str: str, to_str: str, *, now: int | None = None) -> bool:
    from_ts = parse_int64(from_str)
    to_ts = parse_int64(to_str)
    if from_ts is None or to_ts is None:
        return False
    current = int(time.time()) if now is None else now
    return from_ts < to_ts and to_ts <= current
