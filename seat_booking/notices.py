import time
from dataclasses import dataclass
from typing import Callable

INFO = "info"
SUCCESS = "success"
WARNING = "warning"


@dataclass(frozen=True)
class Notice:
    level: str
    message: str
    posted_at: float


class NoticeBoard:
    """
    Holds the single transient notice shown above the seat grid.

    A new notice replaces the current one, which also restarts the
    dismissal delay. Expired notices are dropped the next time the
    board is read.
    """

    def __init__(self, ttl_ms: int, clock: Callable[[], float] = time.monotonic):
        self.ttl_ms = ttl_ms
        self._clock = clock
        self._notice: Notice | None = None

    def post(self, level: str, message: str) -> Notice:
        self._notice = Notice(level, message, self._clock())
        return self._notice

    def current(self) -> Notice | None:
        if self._notice is None:
            return None

        age_ms = (self._clock() - self._notice.posted_at) * 1000
        if age_ms >= self.ttl_ms:
            self._notice = None

        return self._notice

    def clear(self) -> None:
        self._notice = None
