import json

import pytest

from ses_mock.domain.entities import (
    Content,
    Destination,
    EmailContent,
    NormalizedSendRequest,
)
from tests.fakes import FakeAuditSink, FixedClock, SequentialMessageIds

IDENTITY_ARN = "arn:aws:ses:eu-central-1:123456789012:identity/sender@example.com"


@pytest.fixture()
def clock():
    return FixedClock()


@pytest.fixture()
def message_ids():
    return SequentialMessageIds()


@pytest.fixture()
def sink():
    return FakeAuditSink()


@pytest.fixture()
def send_payload() -> dict:
    """The JSON body an SES v2 SDK sends for a simple HTML email."""
    return {
        "Destination": {"ToAddresses": ["recipient@example.com"]},
        "Content": {
            "Simple": {
                "Body": {"Html": {"Data": "<p>Hello, world!</p>"}},
                "Subject": {"Data": "Test email"},
            }
        },
        "FromEmailAddress": "sender@example.com",
        "FromEmailAddressIdentityArn": IDENTITY_ARN,
    }


@pytest.fixture()
def send_body(send_payload) -> bytes:
    return json.dumps(send_payload).encode("utf-8")


@pytest.fixture()
def valid_request() -> NormalizedSendRequest:
    return NormalizedSendRequest(
        destination=Destination(to=("recipient@example.com",)),
        content=EmailContent(
            subject=Content(data="Test email"),
            body_html=Content(data="<p>Hello, world!</p>"),
        ),
        from_address="sender@example.com",
        from_identity_arn=IDENTITY_ARN,
    )
