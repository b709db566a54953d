from __future__ import annotations

from typing import Protocol


class MessageIdPort(Protocol):
    def next_id(self) -> str:
        """Return a MessageId never handed out before by this process."""
