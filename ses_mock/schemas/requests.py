from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ses_mock.domain.entities import (
    Content,
    Destination,
    EmailContent,
    NormalizedSendRequest,
)


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _null_is_empty(cls, value, info):
        # SDKs serialize unset members as null; treat them like absent ones
        if value is None:
            default = cls.model_fields[info.field_name].get_default(
                call_default_factory=True
            )
            return default
        return value


class ContentIn(_WireModel):
    data: str = Field("", alias="Data")
    charset: str = Field(
        "", alias="Charset", validation_alias=AliasChoices("Charset", "CharSet")
    )

    def to_domain(self) -> Content:
        return Content(data=self.data, charset=self.charset)


class BodyIn(_WireModel):
    html: ContentIn = Field(default_factory=ContentIn, alias="Html")
    text: ContentIn = Field(default_factory=ContentIn, alias="Text")


class MessageIn(_WireModel):
    subject: ContentIn = Field(default_factory=ContentIn, alias="Subject")
    body: BodyIn = Field(default_factory=BodyIn, alias="Body")


class EmailContentIn(_WireModel):
    simple: MessageIn = Field(default_factory=MessageIn, alias="Simple")


class DestinationIn(_WireModel):
    to_addresses: list[str] = Field(default_factory=list, alias="ToAddresses")
    cc_addresses: list[str] = Field(default_factory=list, alias="CcAddresses")
    bcc_addresses: list[str] = Field(default_factory=list, alias="BccAddresses")


class SendEmailIn(_WireModel):
    """JSON body of SES v2 ``SendEmail``."""

    destination: DestinationIn = Field(
        default_factory=DestinationIn, alias="Destination"
    )
    content: EmailContentIn = Field(
        default_factory=EmailContentIn,
        alias="Content",
        validation_alias=AliasChoices("Content", "EmailContent"),
    )
    from_email_address: str = Field("", alias="FromEmailAddress")
    from_email_address_identity_arn: str | None = Field(
        None, alias="FromEmailAddressIdentityArn"
    )
    reply_to_addresses: list[str] = Field(
        default_factory=list, alias="ReplyToAddresses"
    )

    def to_domain(self) -> NormalizedSendRequest:
        simple = self.content.simple
        return NormalizedSendRequest(
            destination=Destination(
                to=tuple(self.destination.to_addresses),
                cc=tuple(self.destination.cc_addresses),
                bcc=tuple(self.destination.bcc_addresses),
            ),
            content=EmailContent(
                subject=simple.subject.to_domain(),
                body_html=simple.body.html.to_domain(),
                body_text=simple.body.text.to_domain(),
            ),
            from_address=self.from_email_address,
            from_identity_arn=self.from_email_address_identity_arn or None,
            reply_to=tuple(self.reply_to_addresses),
        )
