from __future__ import annotations

from typing import Protocol

from ses_mock.domain.entities import AuditRecord, NormalizedSendRequest


class AuditSinkPort(Protocol):
    async def record(self, request: NormalizedSendRequest) -> AuditRecord:
        """
        Persist the renderable parts of an accepted request.
        Raises AuditWriteError on any directory or file failure.
        """
