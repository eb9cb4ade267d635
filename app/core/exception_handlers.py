"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Domain exceptions map to a
status by error_code; request validation, Starlette HTTP errors, and
unhandled errors get the same {"error", "message", "details"} JSON body.
The cron 401 keeps the bare {"error": "Unauthorized"} body schedulers expect.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import AuthenticationException, JobBoardException

logger = logging.getLogger(__name__)

_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "AUTHENTICATION_ERROR": 401,
    "SERVICE_UNAVAILABLE": 503,
}


def _json_error(
    status_code: int,
    error: str,
    message: Any,
    details: Any = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    content: dict[str, Any] = {"error": error, "message": message}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _authentication_exception_handler(
    request: Request, exc: AuthenticationException
) -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content={"error": exc.message},
        headers={"WWW-Authenticate": "Bearer"},
    )


def _job_board_exception_handler(request: Request, exc: JobBoardException) -> JSONResponse:
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("%s on %s: %s", exc.error_code, request.url.path, exc.message)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """422, e.g. an unknown category in /constants/{category}."""
    return _json_error(422, "VALIDATION_ERROR", "Request validation failed", jsonable_encoder(exc.errors()))


def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Keep status and headers (405 Allow, 429 Retry-After) with a JSON body."""
    return _json_error(exc.status_code, "HTTP_ERROR", exc.detail, headers=exc.headers)


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """500; the exception text is exposed only in debug."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _json_error(500, "INTERNAL_ERROR", message)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Handlers resolve by exception MRO, so AuthenticationException is served
    by its own handler rather than the JobBoardException one.
    """
    app.add_exception_handler(AuthenticationException, _authentication_exception_handler)
    app.add_exception_handler(JobBoardException, _job_board_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
