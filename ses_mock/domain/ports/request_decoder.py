from __future__ import annotations

from typing import Protocol

from ses_mock.domain.entities import NormalizedSendRequest


class RequestDecoderPort(Protocol):
    content_type: str

    def decode(self, body: bytes) -> NormalizedSendRequest:
        """
        Translate a raw request body into a NormalizedSendRequest.
        Raises DecodeError when the body does not parse; never validates.
        """
