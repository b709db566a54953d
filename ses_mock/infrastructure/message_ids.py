from __future__ import annotations

import threading
import time

from ses_mock.domain.ports.message_ids import MessageIdPort


class TimeBasedMessageIdGenerator(MessageIdPort):
    """
    Ids built from the nanosecond wall clock, bumped by one whenever the
    clock has not advanced since the previous id. Unique for the lifetime
    of the process; nothing more.
    """

    def __init__(self, *, time_ns=time.time_ns, suffix: str = "000000") -> None:
        self._time_ns = time_ns
        self._suffix = suffix
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            stamp = max(self._time_ns(), self._last + 1)
            self._last = stamp
        return f"{stamp:016x}-{self._suffix}"
