from typing import Annotated

from fastapi import Header, Request

from ses_mock.domain.ports.audit_sink import AuditSinkPort
from ses_mock.domain.ports.message_ids import MessageIdPort
from ses_mock.domain.ports.request_decoder import RequestDecoderPort
from ses_mock.infrastructure.decoders.registry import decoder_for


def get_decoder(
    content_type: Annotated[str | None, Header()] = None,
) -> RequestDecoderPort:
    return decoder_for(content_type)


def get_audit_sink(request: Request) -> AuditSinkPort:
    # This is set in ses_mock.main create_app()
    return request.app.state.audit_sink


def get_message_ids(request: Request) -> MessageIdPort:
    return request.app.state.message_ids
