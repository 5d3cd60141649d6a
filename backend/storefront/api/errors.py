"""
Exception handlers that turn errors into the JSON error envelope.

Every failure leaves the API as ``{"status": "error", "message": ...}``
with a status code picked from the exception class.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from storefront.core.exceptions import (
    StorefrontError,
    ValidationError,
    ConflictError,
    AuthenticationRequiredError,
    InvalidTokenError,
    NotFoundError,
    InvalidCredentialError,
    InternalError,
)

logger = logging.getLogger(__name__)

# Looked up along the MRO, so subclasses inherit their parent's code
EXCEPTION_STATUS_MAP = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConflictError: status.HTTP_400_BAD_REQUEST,
    AuthenticationRequiredError: status.HTTP_401_UNAUTHORIZED,
    InvalidTokenError: status.HTTP_403_FORBIDDEN,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidCredentialError: status.HTTP_401_UNAUTHORIZED,
    InternalError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "error", "message": message})


def status_for(exc: StorefrontError) -> int:
    for cls in type(exc).__mro__:
        if cls in EXCEPTION_STATUS_MAP:
            return EXCEPTION_STATUS_MAP[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def storefront_error_handler(request: Request, exc: StorefrontError):
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.to_dict()}")
    return error_response(status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors, reported as 400"""
    errors = exc.errors()
    if errors:
        first = errors[0]
        # loc looks like ("body", "activeCategoryIds", 0)
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", "Invalid request")
    else:
        message = "Invalid request"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_error_handler(request: Request, exc: Exception):
    # Full detail goes to the log only
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI):
    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
