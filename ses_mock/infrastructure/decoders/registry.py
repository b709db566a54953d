from __future__ import annotations

from ses_mock.domain.ports.request_decoder import RequestDecoderPort
from ses_mock.infrastructure.decoders.form import FormRequestDecoder
from ses_mock.infrastructure.decoders.json_body import JsonRequestDecoder

_FORM = FormRequestDecoder()
_JSON = JsonRequestDecoder()


def decoder_for(content_type: str | None) -> RequestDecoderPort:
    """
    Pick the decoding strategy from a Content-Type header value.
    Anything that is not form-encoded is read as JSON, which is what
    the SES v2 SDKs send (``application/json`` or no header at all).
    """
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    if media_type == _FORM.content_type:
        return _FORM
    return _JSON
