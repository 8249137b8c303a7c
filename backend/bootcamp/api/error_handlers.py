"""Error Handlers — every failure leaves the API in the {status, message, data} envelope.

Invariants:
    - BootcampError → its own status and to_response() body
    - RequestValidationError → 400 "Invalid data" with one entry per failing field
    - Starlette HTTPException (unknown route, wrong method) → same envelope
    - Anything else → 500 without internal details

Design Decisions:
    - 4xx domain errors log at WARNING, 5xx at ERROR
    - Registered from main.py through a single function
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bootcamp.core.errors import BootcampError, ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)


def error_body(
    status_code: int,
    message: str,
    code: str,
    category: ErrorCategory,
    severity: ErrorSeverity = ErrorSeverity.ERROR,
    **extra,
) -> dict:
    return {
        "status": status_code,
        "message": message,
        "data": {
            "error": {
                "code": code,
                "category": category.value,
                "severity": severity.value,
            },
            **extra,
        },
    }


async def handle_domain_error(request: Request, exc: BootcampError):
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"{exc.code}: {exc.message}",
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(request: Request, exc: RequestValidationError):
    errors = [
        {
            "field": ".".join(str(part) for part in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Validation failed: {[e['field'] for e in errors]}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    body = error_body(
        status.HTTP_400_BAD_REQUEST, "Invalid data",
        "VALIDATION_ERROR", ErrorCategory.VALIDATION, errors=errors,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST, content=jsonable_encoder(body),
    )


async def handle_http_error(request: Request, exc: StarletteHTTPException):
    category = (
        ErrorCategory.RESOURCE_NOT_FOUND
        if exc.status_code == status.HTTP_404_NOT_FOUND
        else ErrorCategory.VALIDATION
    )
    body = error_body(
        exc.status_code, str(exc.detail), f"HTTP_{exc.status_code}",
        category, ErrorSeverity.WARNING,
    )
    return JSONResponse(
        status_code=exc.status_code, content=body, headers=exc.headers,
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled exception: {exc}",
        exc_info=True,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    body = error_body(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error",
        "INTERNAL_ERROR", ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body,
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BootcampError, handle_domain_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
