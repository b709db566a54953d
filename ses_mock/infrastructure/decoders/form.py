from __future__ import annotations

from urllib.parse import parse_qs

from ses_mock.domain.entities import (
    Content,
    Destination,
    EmailContent,
    NormalizedSendRequest,
)
from ses_mock.domain.errors import DecodeError
from ses_mock.domain.ports.request_decoder import RequestDecoderPort


class FormRequestDecoder(RequestDecoderPort):
    """
    Decodes the AWS query flattening, e.g. ``Destination.ToAddresses.member.1``.

    Only ``member.1`` of each list is read. Later members are ignored, so a
    form request carries at most one To, Cc, Bcc and Reply-To address.
    """

    content_type = "application/x-www-form-urlencoded"

    def decode(self, body: bytes) -> NormalizedSendRequest:
        try:
            text = body.decode("utf-8")
            values = parse_qs(text, keep_blank_values=True, errors="strict")
        except (UnicodeDecodeError, ValueError) as e:
            raise DecodeError(f"Failed to parse form request: {e}") from e

        def get(key: str) -> str:
            found = values.get(key)
            return found[0] if found else ""

        def first_member(key: str) -> tuple[str, ...]:
            found = values.get(f"{key}.member.1")
            return (found[0],) if found else ()

        return NormalizedSendRequest(
            destination=Destination(
                to=first_member("Destination.ToAddresses"),
                cc=first_member("Destination.CcAddresses"),
                bcc=first_member("Destination.BccAddresses"),
            ),
            content=EmailContent(
                subject=Content(
                    data=get("Content.Simple.Subject.Data"),
                    charset=get("Content.Simple.Subject.Charset"),
                ),
                body_html=Content(
                    data=get("Content.Simple.Body.Html.Data"),
                    charset=get("Content.Simple.Body.Html.Charset"),
                ),
                body_text=Content(
                    data=get("Content.Simple.Body.Text.Data"),
                    charset=get("Content.Simple.Body.Text.Charset"),
                ),
            ),
            from_address=get("FromEmailAddress"),
            from_identity_arn=get("FromEmailAddressIdentityArn") or None,
            reply_to=first_member("ReplyToAddresses"),
        )
