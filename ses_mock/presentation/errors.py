"""
AWS JSON-protocol error envelopes.

Every failure in the send pipeline ends here: domain errors carry their
own code and status, anything else becomes InternalServiceException.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ses_mock.domain.errors import DomainError
from ses_mock.schemas.responses import AwsErrorOut

logger = logging.getLogger(__name__)

INTERNAL_SERVICE_EXCEPTION = "InternalServiceException"


def aws_error_response(code: str, message: str, status_code: int) -> JSONResponse:
    body = AwsErrorOut(type=code, code=code, message=message)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True),
        headers={"x-amzn-ErrorType": code},
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "send failed",
            exc_info=exc,
            extra={"code": exc.code, "path": request.url.path},
        )
    else:
        logger.warning(
            "send rejected",
            extra={"code": exc.code, "reason": exc.message, "path": request.url.path},
        )
    return aws_error_response(exc.code, exc.message, exc.status_code)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # ServerErrorMiddleware re-raises after responding; the server logs the traceback
    logger.error(
        "unhandled error",
        extra={"error": type(exc).__name__, "path": request.url.path},
    )
    return aws_error_response(
        INTERNAL_SERVICE_EXCEPTION,
        "Internal service failure",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
