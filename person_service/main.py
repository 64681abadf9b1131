"""Person Service API: FastAPI application factory and entry point.

Invariants:
    - Exactly one PersonStore per application, created here (or passed in)
      and exposed to routes only through app.state
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to a structured JSON response
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - create_app() factory: tests build isolated apps around their own store
    - Module-level `app` for `uvicorn person_service.main:app`
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.authentication import AuthenticationMiddleware

from person_service.api.error_handlers import (
    index_route_methods, register_error_handlers,
)
from person_service.api.identity import TrustedHeaderBackend
from person_service.api.routes import health, person
from person_service.config import Settings, get_settings
from person_service.core.person_store import PersonStore
from person_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, store: PersonStore | None = None,
) -> FastAPI:
    """Build the person service application around a single PersonStore."""
    settings = settings or get_settings()
    if store is None:
        store = PersonStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(f"{settings.service_name} started")
        yield
        logger.info(
            f"{settings.service_name} shutting down with {store.size} persons in memory",
        )

    app = FastAPI(
        title="Person Service API", version=settings.version, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.person_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if settings.trusted_user_header:
        app.add_middleware(
            AuthenticationMiddleware,
            backend=TrustedHeaderBackend(settings.trusted_user_header),
        )

    app.include_router(health.router)
    app.include_router(person.router, prefix=settings.resource_prefix)
    index_route_methods(app, health.router)
    index_route_methods(app, person.router, prefix=settings.resource_prefix)

    register_error_handlers(app)
    return app


app = create_app()
