"""Error Handlers: global exception handlers for the person service API.

Invariants:
    - PersonServiceError -> structured JSON with error code, message, severity
    - RequestValidationError -> 400 with field-level error details
    - Router-level 404/405 -> same envelope; 405 carries an Allow header built
      from the index recorded by index_route_methods()
    - Exception (catch-all) -> 500, never leaks internal details

Design Decisions:
    - Four-layer handler: domain, validation, router HTTP errors, catch-all
    - Extracted from main.py so create_app() stays a flat list of registrations
"""

import logging

from fastapi import APIRouter, FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.routing import compile_path

from person_service.core.errors import (
    ErrorContext, ErrorSeverity, MalformedInputError, MethodNotSupportedError,
    PersonServiceError, ResourceNotFoundError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register person service domain error handler."""

    @app.exception_handler(PersonServiceError)
    async def domain_error_handler(request: Request, exc: PersonServiceError):
        """Handle all person service errors."""
        if exc.context.path is None:
            exc.context.path = request.url.path
        log = logger.error if exc.http_status >= 500 else logger.info
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors (malformed body or query)."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc, request.url.path),
        )


def _register_http_error_handler(app: FastAPI) -> None:
    """Register handler for HTTP errors raised by the router itself."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Wrap router 404/405 (and any other HTTPException) in the error envelope."""
        headers = dict(exc.headers or {})
        context = ErrorContext(path=request.url.path)
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            allowed = _allowed_methods(request)
            if allowed:
                headers["Allow"] = ", ".join(allowed)
            error = MethodNotSupportedError(
                request.method, request.url.path, allowed, context,
            )
            content = error.to_response()
        elif exc.status_code == status.HTTP_404_NOT_FOUND:
            content = ResourceNotFoundError(
                "Path", request.url.path, context,
            ).to_response()
        else:
            content = {
                "error": {
                    "code": "HTTP_ERROR",
                    "message": str(exc.detail),
                    "category": "http",
                    "severity": ErrorSeverity.ERROR.value,
                },
            }
        logger.info(
            f"HTTP {exc.status_code} on {request.method} {request.url.path}",
            extra={"status_code": exc.status_code},
        )
        return JSONResponse(
            status_code=exc.status_code, content=content, headers=headers or None,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def index_route_methods(app: FastAPI, router: APIRouter, prefix: str = "") -> None:
    """Record the path pattern and methods of every route in router.

    Call alongside app.include_router() with the same prefix. The index is
    built from the router's own routes, so it does not depend on how the
    app stores included routers.
    """
    index = getattr(app.state, "route_methods", None)
    if index is None:
        index = app.state.route_methods = []
    for route in router.routes:
        methods = getattr(route, "methods", None)
        if not methods:
            continue
        regex, _, _ = compile_path(prefix + route.path)
        index.append((regex, frozenset(methods)))


def _allowed_methods(request: Request) -> list[str]:
    """Every indexed method whose route pattern matches this request's path."""
    allowed: set[str] = set()
    path = request.scope["path"]
    for regex, methods in getattr(request.app.state, "route_methods", []):
        if regex.match(path):
            allowed.update(methods)
    return sorted(allowed)


def _build_validation_error_response(
    exc: RequestValidationError, path: str,
) -> dict:
    """Build structured validation error response."""
    response = MalformedInputError(
        "Invalid request data", ErrorContext(path=path),
    ).to_response()
    response["error"]["details"] = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return response
