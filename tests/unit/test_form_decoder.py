import json
from urllib.parse import urlencode

import pytest

from ses_mock.domain.entities import Content
from ses_mock.domain.errors import DecodeError
from ses_mock.infrastructure.decoders.form import FormRequestDecoder
from ses_mock.infrastructure.decoders.json_body import JsonRequestDecoder
from tests.conftest import IDENTITY_ARN

decoder = FormRequestDecoder()


def form(**fields) -> bytes:
    return urlencode(fields).encode("ascii")


@pytest.fixture()
def send_form() -> bytes:
    return urlencode(
        {
            "Action": "SendEmail",
            "Destination.ToAddresses.member.1": "recipient@example.com",
            "Content.Simple.Subject.Data": "Test email",
            "Content.Simple.Body.Html.Data": "<p>Hello, world!</p>",
            "FromEmailAddress": "sender@example.com",
            "FromEmailAddressIdentityArn": IDENTITY_ARN,
        }
    ).encode("ascii")


def test_decodes_flattened_members(send_form, valid_request):
    assert decoder.decode(send_form) == valid_request


def test_decoding_is_idempotent(send_form):
    assert decoder.decode(send_form) == decoder.decode(send_form)


def test_matches_json_encoding_of_same_fields(send_form, send_body):
    assert decoder.decode(send_form) == JsonRequestDecoder().decode(send_body)


def test_matches_json_with_every_field_set():
    fields = {
        "Destination.ToAddresses.member.1": "to@example.com",
        "Destination.CcAddresses.member.1": "cc@example.com",
        "Destination.BccAddresses.member.1": "bcc@example.com",
        "ReplyToAddresses.member.1": "reply@example.com",
        "Content.Simple.Subject.Data": "Subject",
        "Content.Simple.Subject.Charset": "UTF-8",
        "Content.Simple.Body.Html.Data": "<p>html</p>",
        "Content.Simple.Body.Html.Charset": "UTF-8",
        "Content.Simple.Body.Text.Data": "text & more",
        "Content.Simple.Body.Text.Charset": "UTF-8",
        "FromEmailAddress": "from@example.com",
    }
    document = {
        "Destination": {
            "ToAddresses": ["to@example.com"],
            "CcAddresses": ["cc@example.com"],
            "BccAddresses": ["bcc@example.com"],
        },
        "ReplyToAddresses": ["reply@example.com"],
        "Content": {
            "Simple": {
                "Subject": {"Data": "Subject", "Charset": "UTF-8"},
                "Body": {
                    "Html": {"Data": "<p>html</p>", "Charset": "UTF-8"},
                    "Text": {"Data": "text & more", "Charset": "UTF-8"},
                },
            }
        },
        "FromEmailAddress": "from@example.com",
    }

    from_form = decoder.decode(urlencode(fields).encode())
    from_json = JsonRequestDecoder().decode(json.dumps(document).encode())

    assert from_form == from_json


def test_only_first_member_is_read():
    request = decoder.decode(
        b"Destination.ToAddresses.member.1=a%40example.com"
        b"&Destination.ToAddresses.member.2=b%40example.com"
    )
    assert request.destination.to == ("a@example.com",)


def test_absent_fields_decode_to_empty():
    request = decoder.decode(b"")

    assert request.destination.to == ()
    assert request.destination.cc == ()
    assert request.destination.bcc == ()
    assert request.reply_to == ()
    assert request.content.subject == Content()
    assert request.content.body_html == Content()
    assert request.content.body_text == Content()
    assert request.from_address == ""
    assert request.from_identity_arn is None


def test_plus_and_percent_escapes_are_unquoted():
    request = decoder.decode(form(**{"Content.Simple.Subject.Data": "Hello world & 100%"}))
    assert request.content.subject.data == "Hello world & 100%"


def test_invalid_address_still_decodes():
    request = decoder.decode(form(**{"Destination.ToAddresses.member.1": "invalid_email.com"}))
    assert request.destination.to == ("invalid_email.com",)


@pytest.mark.parametrize("body", [b"Subject=%ff%fe", b"FromEmailAddress=\xff"])
def test_non_utf8_body_raises_decode_error(body):
    with pytest.raises(DecodeError) as ei:
        decoder.decode(body)
    assert str(ei.value).startswith("Failed to parse form request: ")
