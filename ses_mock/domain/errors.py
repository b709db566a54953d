class DomainError(Exception):
    """Base class for all domain-level errors."""

    code: str = "InternalServiceException"
    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DecodeError(DomainError):
    """The request body does not parse under the selected wire encoding."""

    code = "InvalidParameterValue"
    status_code = 400


class ValidationError(DomainError):
    """A decoded request breaks one of the SendEmail invariants."""

    code = "InvalidParameterValue"
    status_code = 400


class InvalidAddressError(ValidationError):
    """An address in To/Cc/Bcc/Reply-To is not a syntactically valid mailbox."""

    def __init__(self, field: str, address: str, label: str) -> None:
        super().__init__(f"{label} is invalid: {address}")
        self.field = field
        self.address = address


class MissingFieldError(ValidationError):
    """A required field was absent or empty."""

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} was not provided")
        self.field = field


class AuditWriteError(DomainError):
    """The audit directory or one of its files could not be written."""

    pass
