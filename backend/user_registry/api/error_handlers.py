"""Error Handlers — global exception handlers that render every failure as ErrorResponse.

Invariants:
    - Every failure body has timestamp, status, error, message, path, validationErrors
    - UserRegistryError → its http_status and title (404 not found, 409 conflicts)
    - RequestValidationError → 400 with per-field details
    - Starlette HTTPException (unknown route, wrong method) → same envelope
    - Exception (catch-all) → 500, never leaks internal details
    - 4xx logged at WARNING, 5xx at ERROR with traceback

Design Decisions:
    - Four handler layers: domain, validation, routing, catch-all
    - Extracted from main.py; main.py only calls register_error_handlers()
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_registry.core.errors import UserRegistryError
from user_registry.schemas.error import ErrorResponse, FieldValidationError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = (
    "An unexpected error occurred. Please try again later or contact support."
)
_REQUEST_SOURCES = ("body", "query", "path", "header", "cookie")
_PARAMETER_SOURCES = ("query", "path")


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def build_error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    validation_errors: list[FieldValidationError] | None = None,
    exc: Exception | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Log by status class and render the uniform error body."""
    if status_code >= 500:
        logger.error(
            f"Error response: {status_code} - {message}",
            exc_info=exc,
            extra={"path": request.url.path, "status": status_code},
        )
    elif status_code >= 400:
        logger.warning(
            f"Error response: {status_code} - {message}",
            extra={"path": request.url.path, "status": status_code},
        )
    body = ErrorResponse(
        status=status_code,
        error=error,
        message=message,
        path=request.url.path,
        validation_errors=validation_errors or [],
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True),
        headers=headers,
    )


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register user registry domain/infrastructure error handler."""

    @app.exception_handler(UserRegistryError)
    async def domain_error_handler(request: Request, exc: UserRegistryError):
        if exc.http_status >= 500:
            return build_error_response(
                request, exc.http_status, exc.title, INTERNAL_ERROR_MESSAGE, exc=exc,
            )
        return build_error_response(
            request, exc.http_status, exc.title, exc.message,
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        errors = exc.errors()
        if any(e["type"] == "json_invalid" for e in errors):
            return build_error_response(
                request, status.HTTP_400_BAD_REQUEST,
                "Bad Request", "Invalid request body format",
            )
        mismatched = _parameter_type_mismatch(errors)
        if mismatched:
            return build_error_response(
                request, status.HTTP_400_BAD_REQUEST,
                "Bad Request", f"Invalid parameter type for: {mismatched}",
            )
        return build_error_response(
            request, status.HTTP_400_BAD_REQUEST,
            "Validation Error", "Input validation failed",
            validation_errors=[
                FieldValidationError(field=_field_name(e["loc"]), message=e["msg"])
                for e in errors
            ],
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register routing-level HTTP error handler (404 unknown URL, 405 wrong method)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return build_error_response(
                request, exc.status_code, "Resource Not Found",
                "The requested URL was not found on the server",
            )
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            allowed = (exc.headers or {}).get("Allow", "")
            return build_error_response(
                request, exc.status_code, "Method Not Allowed",
                f"Request method '{request.method}' is not supported for this "
                f"endpoint. Supported methods: {allowed}",
                headers=exc.headers,
            )
        return build_error_response(
            request, exc.status_code, HTTPStatus(exc.status_code).phrase,
            str(exc.detail), headers=exc.headers,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        return build_error_response(
            request, status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error", INTERNAL_ERROR_MESSAGE, exc=exc,
        )


def _field_name(loc: tuple) -> str:
    """('body', 'email') -> 'email'; ('body',) -> 'body'."""
    parts = list(loc)
    if len(parts) > 1 and parts[0] in _REQUEST_SOURCES:
        parts = parts[1:]
    return ".".join(str(p) for p in parts)


def _parameter_type_mismatch(errors: list[dict]) -> str | None:
    """Name of the first path/query parameter that failed type parsing, if that is all that failed."""
    names = []
    for e in errors:
        loc = e["loc"]
        if not loc or loc[0] not in _PARAMETER_SOURCES:
            return None
        if not e["type"].endswith(("_parsing", "_type")):
            return None
        names.append(_field_name(loc))
    return names[0] if names else None
