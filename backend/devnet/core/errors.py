"""
Error taxonomy and the exception handlers that shape error responses.

Every error leaves the API as JSON with a short fixed message. Validation
failures are the only ones that echo field-level detail.
"""
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.orm.exc import StaleDataError

from devnet.schemas.profile import REQUEST_FIELD_ALIASES

logger = logging.getLogger(__name__)


class FieldErrors(HTTPException):
    """
    400 error carrying a list of ``{"msg": ..., "field": ...}`` entries.
    Rendered as ``{"errors": [...]}``.
    """

    def __init__(self, errors: List[Dict[str, Any]]):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=errors)
        self.errors = errors


class ValidationError(FieldErrors):
    """Malformed or missing input."""


class InvalidCredentials(FieldErrors):
    """Login failure. Does not say whether the email or the password was wrong."""

    def __init__(self):
        super().__init__([{"msg": "Invalid credentials"}])


class UserAlreadyExists(FieldErrors):
    def __init__(self):
        super().__init__([{"msg": "User already exists"}])


class Unauthorized(HTTPException):
    def __init__(self, detail: str = "No token, authorization denied"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class Forbidden(HTTPException):
    """Ownership violation. Answered with 401 for compatibility with existing clients."""

    def __init__(self, detail: str = "User not authorized"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class NotFound(HTTPException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class Conflict(HTTPException):
    def __init__(self, detail: str = "Resource was modified concurrently, please retry"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ServerError(HTTPException):
    def __init__(self, detail: str = "Server Error"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


def _field_name(loc: tuple) -> Optional[str]:
    # ("body", "email") -> "email"; a whole-body error has no field.
    # Defaults are validated under the attribute name, so map back to the wire name.
    parts = [REQUEST_FIELD_ALIASES.get(str(part), str(part)) for part in loc if part != "body"]
    return ".".join(parts) if parts else None


def _clean_message(msg: str) -> str:
    prefix = "Value error, "
    return msg[len(prefix):] if msg.startswith(prefix) else msg


async def field_errors_handler(request: Request, exc: FieldErrors) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"errors": exc.errors})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for err in exc.errors():
        entry = {"msg": _clean_message(err.get("msg", "Invalid value"))}
        field = _field_name(tuple(err.get("loc", ())))
        if field:
            entry["field"] = field
        errors.append(entry)
    logger.info(f"[VALIDATION] {request.method} {request.url.path} rejected: {errors}")
    return await field_errors_handler(request, ValidationError(errors))


async def stale_data_handler(request: Request, exc: StaleDataError) -> JSONResponse:
    logger.warning(f"[CONCURRENCY] Lost update prevented on {request.method} {request.url.path}: {exc}")
    conflict = Conflict()
    return JSONResponse(status_code=conflict.status_code, content={"detail": conflict.detail})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"[SERVER] Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Server Error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to the application."""
    app.add_exception_handler(FieldErrors, field_errors_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StaleDataError, stale_data_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
