from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class SendEmailOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message_id: str = Field(..., alias="MessageId", description="Id of the accepted message")


class AwsErrorOut(BaseModel):
    """AWS JSON-protocol error envelope."""

    model_config = ConfigDict(populate_by_name=True)

    type: str = Field(..., alias="__type")
    code: Literal["InvalidParameterValue", "InternalServiceException"] = Field(
        ..., alias="Code"
    )
    message: str = Field(..., alias="Message")
