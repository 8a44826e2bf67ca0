from __future__ import annotations

from dataclasses import dataclass, field
from threading import Event
import time


@dataclass(frozen=True)
class RequestContext:
    """Deadline and cancellation signal carried from the HTTP boundary to upstream calls."""

    deadline: float | None = None
    _cancelled: Event = field(default_factory=Event, repr=False, compare=False)

    @classmethod
    def with_timeout(cls, seconds: float) -> RequestContext:
        return cls(deadline=time.monotonic() + seconds)

    def remaining(self) -> float | None:
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - time.monotonic())

    @property
    def expired(self) -> bool:
        return self.deadline is not None and time.monotonic() >= self.deadline

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()
