from __future__ import annotations

from functools import lru_cache
from threading import Lock
import time

from fastapi import Depends, HTTPException

from app.shared.config import get_settings


class RequestRateLimiter:
    """Admits at most one request per interval; excess requests are rejected, not queued."""

    def __init__(self, *, min_interval_ms: int):
        self._min_interval = max(0, min_interval_ms) / 1000.0
        self._lock = Lock()
        self._last_admitted_at: float | None = None

    def allow(self) -> bool:
        if self._min_interval <= 0:
            return True

        with self._lock:
            now = time.monotonic()
            if self._last_admitted_at is not None and now - self._last_admitted_at < self._min_interval:
                return False
            self._last_admitted_at = now
            return True


@lru_cache(maxsize=1)
def get_rate_limiter() -> RequestRateLimiter:
    return RequestRateLimiter(min_interval_ms=get_settings().rate_limit_interval_ms)


def enforce_rate_limit(limiter: RequestRateLimiter = Depends(get_rate_limiter)) -> None:
    if not limiter.allow():
        raise HTTPException(status_code=429, detail="Too Many Requests")
