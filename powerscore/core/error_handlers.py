"""Exception handlers that render errors in the response envelope."""
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from powerscore.core.exceptions import (
    BusinessRuleError,
    ConfigurationError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from powerscore.core.logging import get_logger
from powerscore.schemas.base import APIError, error_envelope

logger = get_logger(__name__)


ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    BusinessRuleError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ConfigurationError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def status_for(exc: DomainError) -> int:
    """Status of the closest mapped class, so subclasses inherit their parent's code."""
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS_MAP:
            return ERROR_STATUS_MAP[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_for(exc)

    if status_code >= 500:
        logger.error("domain_error", code=exc.code, message=exc.message, details=exc.details)
    else:
        logger.info("domain_error", code=exc.code, message=exc.message)

    return JSONResponse(
        status_code=status_code,
        content=error_envelope(
            request,
            [APIError(code=exc.code, message=exc.message, details=exc.details)],
        ),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render schema coercion failures (bad numbers, unknown sex) as one error per field."""
    errors = [
        APIError(
            code="VAL_REQUEST_001",
            message=str(error.get("msg", "Invalid value")),
            details={"field": ".".join(str(part) for part in error.get("loc", ()))},
        )
        for error in exc.errors()
    ]
    logger.info("request_validation_failed", fields=[e.details["field"] for e in errors])
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_envelope(request, errors),
    )
