from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Content:
    data: str = ""
    charset: str = ""


@dataclass(frozen=True)
class Destination:
    to: tuple[str, ...] = ()
    cc: tuple[str, ...] = ()
    bcc: tuple[str, ...] = ()


@dataclass(frozen=True)
class EmailContent:
    subject: Content = field(default_factory=Content)
    body_html: Content = field(default_factory=Content)
    body_text: Content = field(default_factory=Content)


@dataclass(frozen=True)
class NormalizedSendRequest:
    """
    A SendEmail call, independent of the wire encoding it arrived in.
    Built fresh per request by a decoder and never mutated afterwards.
    """

    destination: Destination = field(default_factory=Destination)
    content: EmailContent = field(default_factory=EmailContent)
    from_address: str = ""
    from_identity_arn: str | None = None
    reply_to: tuple[str, ...] = ()


@dataclass(frozen=True)
class AuditRecord:
    directory: Path

    @property
    def body_html(self) -> Path:
        return self.directory / "body.html"

    @property
    def body_text(self) -> Path:
        return self.directory / "body.txt"

    @property
    def headers(self) -> Path:
        return self.directory / "headers.txt"
