from typing import Annotated

from fastapi import APIRouter, Depends, Request

from ses_mock.application.send_email import send_email
from ses_mock.domain.ports.audit_sink import AuditSinkPort
from ses_mock.domain.ports.message_ids import MessageIdPort
from ses_mock.domain.ports.request_decoder import RequestDecoderPort
from ses_mock.presentation.dependencies import (
    get_audit_sink,
    get_decoder,
    get_message_ids,
)
from ses_mock.schemas.responses import SendEmailOut

router = APIRouter(prefix="/email", tags=["SendEmail"])


@router.post(
    "/outbound-emails",
    response_model=SendEmailOut,
    response_model_by_alias=True,
)
async def post_outbound_email(
    request: Request,
    decoder: Annotated[RequestDecoderPort, Depends(get_decoder)],
    audit_sink: Annotated[AuditSinkPort, Depends(get_audit_sink)],
    message_ids: Annotated[MessageIdPort, Depends(get_message_ids)],
):
    # Read raw: the body is either JSON or form-encoded, chosen by Content-Type
    body = await request.body()
    message_id = await send_email(
        body,
        decoder=decoder,
        audit_sink=audit_sink,
        message_ids=message_ids,
    )
    return SendEmailOut(message_id=message_id)
