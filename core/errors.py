# core/errors.py
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

log = logging.getLogger("emot.errors")


class EmotError(Exception):
    """Base class for errors surfaced to API callers with a stable error code."""

    error_code = "EMOT_ERROR"
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, error_code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code


class NotFoundError(EmotError):
    error_code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = "not found"):
        super().__init__(message)


class UniquenessViolation(EmotError):
    """A unique key (registration number, username) is already taken."""

    error_code = "DUPLICATE_KEY"
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, field: str, message: Optional[str] = None):
        super().__init__(message or f"{field} already used")
        self.field = field


class AuthFailure(EmotError):
    error_code = "AUTH_FAILED"
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "invalid credentials"):
        super().__init__(message)


def error_body(
    error_code: str,
    message: str,
    errors: Optional[List[Dict[str, Any]]] = None,
    **extra: Any,
) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": False, "error_code": error_code, "message": message}
    if errors is not None:
        body["errors"] = errors
    body.update(extra)
    return body


def setup_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = [
            {
                "field": " -> ".join(str(loc) for loc in err["loc"]),
                "message": err["msg"],
                "type": err["type"],
            }
            for err in exc.errors()
        ]
        log.info("validation failed on %s: %s", request.url.path, errors)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=error_body("VALIDATION_ERROR", "request validation failed", errors),
        )

    @app.exception_handler(UniquenessViolation)
    async def uniqueness_handler(request: Request, exc: UniquenessViolation):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.error_code, exc.message, field=exc.field),
        )

    @app.exception_handler(EmotError)
    async def emot_error_handler(request: Request, exc: EmotError):
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthFailure) else None
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.error_code, exc.message),
            headers=headers,
        )

    @app.exception_handler(SQLAlchemyError)
    async def store_failure_handler(request: Request, exc: SQLAlchemyError):
        log.exception("store failure on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("STORE_FAILURE", "a database error occurred"),
        )
