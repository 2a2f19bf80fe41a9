"""Translate application exceptions into problem+json responses.

Bodies carry enough for client-side localisation (entity name and error
key) and never internal details such as SQL errors or stack traces.
"""

from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from myapp.core.logger import get_logger
from myapp.shared.alerts import FailureAlert
from myapp.shared.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    MethodNotAllowedError,
    RepositoryError,
)

logger = get_logger(__name__)

PROBLEM_MEDIA_TYPE = "application/problem+json"


def _application_name(request: Request) -> str:
    return request.app.state.settings.app_name


def problem_response(
    status_code: int,
    title: str,
    request: Request,
    message: str,
    extra: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    """Build an RFC 7807 style error response."""
    body: Dict[str, Any] = {
        "type": "about:blank",
        "title": title,
        "status": status_code,
        "path": request.url.path,
        "message": message,
    }
    if extra:
        body.update(extra)
    return JSONResponse(body, status_code=status_code, headers=headers, media_type=PROBLEM_MEDIA_TYPE)


async def invalid_argument_handler(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    alert = FailureAlert(_application_name(request), exc.entity_name, exc.error_key)
    logger.warning(f"Bad request on {request.url.path}: {exc.message}")
    return problem_response(
        status.HTTP_400_BAD_REQUEST,
        exc.message,
        request,
        alert.message,
        extra={"entityName": exc.entity_name, "errorKey": exc.error_key, "params": exc.entity_name},
        headers=alert.to_headers(),
    )


async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return problem_response(
        status.HTTP_404_NOT_FOUND,
        "Not Found",
        request,
        f"error.{exc.error_key}",
        extra={"entityName": exc.entity_type, "errorKey": exc.error_key},
    )


async def method_not_allowed_handler(request: Request, exc: MethodNotAllowedError) -> JSONResponse:
    return problem_response(
        status.HTTP_405_METHOD_NOT_ALLOWED,
        "Method Not Allowed",
        request,
        "error.http.405",
        headers={"Allow": "GET, POST"},
    )


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    logger.error(f"Storage failure on {request.method} {request.url.path}: {exc.message}")
    return problem_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        request,
        "error.http.500",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)
    app.add_exception_handler(EntityNotFoundError, not_found_handler)
    app.add_exception_handler(MethodNotAllowedError, method_not_allowed_handler)
    app.add_exception_handler(RepositoryError, repository_error_handler)
