from __future__ import annotations

import logging

import email_validator
from email_validator import EmailNotValidError, validate_email

from ses_mock.domain.entities import NormalizedSendRequest
from ses_mock.domain.errors import InvalidAddressError, MissingFieldError

logger = logging.getLogger(__name__)

# Reserved names (localhost, .test, .local, ...) are ordinary recipients here
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()

# (field, label used in the error message), in scan order
_ADDRESS_FIELDS = (
    ("Destination.ToAddresses", "To-Address"),
    ("Destination.CcAddresses", "CC-Address"),
    ("Destination.BccAddresses", "BCC-Address"),
    ("ReplyToAddresses", "Reply-To-Address"),
)

BODY_FIELD = "Content.Simple.Body.Html.Data or Content.Simple.Body.Text.Data"


def is_valid_address(address: str) -> bool:
    """
    Syntax-only mailbox check. Accepts a bare ``local@domain`` or a
    display-name form such as ``Jane <jane@example.com>``.
    """
    if not address:
        return False
    try:
        validate_email(
            address,
            check_deliverability=False,
            globally_deliverable=False,
            allow_quoted_local=True,
            allow_domain_literal=True,
            allow_display_name=True,
        )
    except EmailNotValidError:
        return False
    return True


def _addresses_by_field(request: NormalizedSendRequest) -> dict[str, tuple[str, ...]]:
    return {
        "Destination.ToAddresses": request.destination.to,
        "Destination.CcAddresses": request.destination.cc,
        "Destination.BccAddresses": request.destination.bcc,
        "ReplyToAddresses": request.reply_to,
    }


def missing_fields(request: NormalizedSendRequest) -> list[str]:
    """Required fields that are absent, in the order they are checked."""
    missing: list[str] = []
    if not request.destination.to:
        missing.append("Destination.ToAddresses")
    if not request.from_address:
        missing.append("FromEmailAddress")
    if not request.content.subject.data:
        missing.append("Content.Simple.Subject.Data")
    if not (request.content.body_html.data or request.content.body_text.data):
        missing.append(BODY_FIELD)
    return missing


def validate_send_request(request: NormalizedSendRequest) -> None:
    """
    Raise the first defect found in a decoded request.

    Address syntax is checked before required fields, so a request with
    both a bad recipient and no subject reports the recipient.
    """
    addresses = _addresses_by_field(request)
    for field, label in _ADDRESS_FIELDS:
        for address in addresses[field]:
            if not is_valid_address(address):
                raise InvalidAddressError(field, address, label)

    missing = missing_fields(request)
    for field in missing:
        logger.error("required field missing", extra={"field": field})
    if missing:
        raise MissingFieldError(missing[0])
