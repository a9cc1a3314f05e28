"""Exception handlers mapping errors to the uniform error envelope."""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_api.api.schemas import ErrorDetail, ErrorResponse
from catalog_api.domain.exceptions import DomainError, NotFoundError, ValidationError

logger = structlog.get_logger()


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: list[ErrorDetail] | None = None,
) -> JSONResponse:
    """Build an error envelope response.

    Args:
        request: Request being answered; supplies the request ID.
        status_code: HTTP status.
        error_code: Machine-readable error code.
        message: Human-readable message.
        details: Per-field details.

    Returns:
        JSON response with the error envelope.
    """
    body = ErrorResponse(
        message=message,
        status_code=status_code,
        error_code=error_code,
        details=details or [],
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
    )


def status_for(exc: DomainError) -> int:
    """HTTP status for a domain error family."""
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    return status.HTTP_400_BAD_REQUEST


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Handle domain errors raised by the catalog core."""
    status_code = status_for(exc)
    details = []
    if isinstance(exc, ValidationError):
        details.append(ErrorDetail(field=exc.field, message=exc.message))

    logger.warning(
        "Request rejected",
        path=request.url.path,
        error_code=exc.error_code,
        error=exc.message,
    )
    return error_response(request, status_code, exc.error_code, exc.message, details)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report schema validation failures as 400 with one detail per field."""
    details = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        details.append(
            ErrorDetail(
                field=".".join(location) or None,
                message=error.get("msg", "Invalid value"),
            )
        )

    message = "; ".join(
        f"{d.field}: {d.message}" if d.field else d.message for d in details
    )
    logger.warning("Request validation failed", path=request.url.path, error=message)
    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_ERROR",
        message or "Validation failed",
        details,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
    else:
        error_code = "NOT_FOUND" if exc.status_code == 404 else "ERROR"
        message = str(detail)

    response = error_response(request, exc.status_code, error_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on ``app``."""
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
