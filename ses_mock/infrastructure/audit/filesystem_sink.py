from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from pathlib import Path

from ses_mock.domain.entities import AuditRecord, NormalizedSendRequest
from ses_mock.domain.errors import AuditWriteError
from ses_mock.domain.ports.audit_sink import AuditSinkPort
from ses_mock.domain.ports.clock import ClockPort

logger = logging.getLogger(__name__)


def audit_directory(root: Path, when: datetime) -> Path:
    """``<root>/<YYYY-MM-DD>/<HH-MM-SS.mmm>-log``"""
    millis = when.microsecond // 1000
    return (
        root
        / when.strftime("%Y-%m-%d")
        / f"{when.strftime('%H-%M-%S')}.{millis:03d}-log"
    )


def render_headers(request: NormalizedSendRequest) -> str:
    return (
        f"Subject: {request.content.subject.data}\n"
        f"To: {','.join(request.destination.to)}\n"
        f"Cc: {','.join(request.destination.cc)}\n"
        f"Bcc: {','.join(request.destination.bcc)}\n"
        f"Reply-To: {','.join(request.reply_to)}\n"
        f"From: {request.from_address}\n"
    )


class FilesystemAuditSink(AuditSinkPort):
    """
    Writes body.html, body.txt and headers.txt for every accepted request.

    Two requests handled within the same millisecond share a directory and
    the later one overwrites the earlier files. Writes are not
    transactional: a failure leaves whatever was already written.
    """

    def __init__(self, output_dir: Path | str, *, clock: ClockPort) -> None:
        self._root = Path(output_dir)
        self._clock = clock

    async def record(self, request: NormalizedSendRequest) -> AuditRecord:
        directory = audit_directory(self._root, self._clock.now())
        record = await asyncio.to_thread(self._write, directory, request)
        logger.info("audit record written", extra={"directory": str(directory)})
        return record

    def _write(self, directory: Path, request: NormalizedSendRequest) -> AuditRecord:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise AuditWriteError(f"Failed to create {directory}: {e}") from e

        record = AuditRecord(directory=directory)
        files = (
            (record.body_html, request.content.body_html.data),
            (record.body_text, request.content.body_text.data),
            (record.headers, render_headers(request)),
        )
        for path, text in files:
            try:
                path.write_bytes(text.encode("utf-8"))
            except OSError as e:
                raise AuditWriteError(f"Failed to write {path}: {e}") from e
        return record
