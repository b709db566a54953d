from __future__ import annotations

from pydantic import ValidationError as PydanticValidationError

from ses_mock.domain.entities import NormalizedSendRequest
from ses_mock.domain.errors import DecodeError
from ses_mock.domain.ports.request_decoder import RequestDecoderPort
from ses_mock.schemas.requests import SendEmailIn


class JsonRequestDecoder(RequestDecoderPort):
    content_type = "application/json"

    def decode(self, body: bytes) -> NormalizedSendRequest:
        try:
            payload = SendEmailIn.model_validate_json(body)
        except PydanticValidationError as e:
            raise DecodeError(f"Failed to parse JSON request: {_describe(e)}") from e
        return payload.to_domain()


def _describe(error: PydanticValidationError) -> str:
    first = error.errors(include_url=False)[0]
    location = ".".join(str(part) for part in first["loc"])
    return f"{location}: {first['msg']}" if location else first["msg"]
