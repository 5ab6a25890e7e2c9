"""Error Handlers — global exception handlers funnelling every failure into render().

Invariants:
    - TodoApiError → its own status and envelope
    - RequestValidationError → InputValidationError or MalformedRequestError
      (core/request_errors.py), all field violations listed
    - HTTPException (unknown route, wrong method) → RouteError envelope
    - Exception (catch-all) → INTERNAL_ERROR, never leaks internal details

Design Decisions:
    - Rejected requests logged at DEBUG only; controller errors are logged
      by the controller itself
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api.api.envelope import render
from todo_api.core.errors import InternalError, RouteError, TodoApiError
from todo_api.core.outcome import Err
from todo_api.core.request_errors import classify_request_errors

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(TodoApiError)
    async def domain_error_handler(request: Request, exc: TodoApiError):
        """Domain errors raised outside a captured controller call."""
        logger.debug(
            f"TodoApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return render(Err(exc))


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        error = classify_request_errors(exc.errors())
        logger.debug(
            f"Request rejected on {request.url.path}",
            extra={"error_code": error.code, "path": request.url.path},
        )
        return render(Err(error))


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        error = RouteError(exc.status_code, str(exc.detail))
        response = render(Err(error))
        if exc.headers:
            response.headers.update(exc.headers)
        return response


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return render(Err(InternalError()))
