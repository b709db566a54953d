import logging

from ses_mock.domain.ports.audit_sink import AuditSinkPort
from ses_mock.domain.ports.message_ids import MessageIdPort
from ses_mock.domain.ports.request_decoder import RequestDecoderPort
from ses_mock.domain.validation import validate_send_request

logger = logging.getLogger(__name__)


async def send_email(
    body: bytes,
    decoder: RequestDecoderPort,
    audit_sink: AuditSinkPort,
    message_ids: MessageIdPort,
) -> str:
    request = decoder.decode(body)
    validate_send_request(request)

    record = await audit_sink.record(request)
    message_id = message_ids.next_id()
    logger.info(
        "email accepted",
        extra={
            "message_id": message_id,
            "to": list(request.destination.to),
            "directory": str(record.directory),
        },
    )
    return message_id
