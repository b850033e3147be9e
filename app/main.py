from __future__ import annotations

from typing import Any

from fastapi import FastAPI
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware

from app.api.health import router as health_router
from app.api.orders import router as orders_router
from app.config import Settings, get_settings
from app.observability.logging import configure_logging_from_settings
from app.observability.middleware import use_request_logging


def create_app(settings: Settings | None = None, request_logger: Any | None = None) -> FastAPI:
    """Build the application.

    Interactive docs are only served in development. The request logger is
    registered last so it wraps every other stage.
    """

    if settings is None:
        settings = get_settings()
    docs_enabled = settings.is_development

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.dependency_overrides[get_settings] = lambda: settings
    app.include_router(health_router)
    app.include_router(orders_router)

    # Starlette runs the most recently added middleware first.
    if settings.https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)
    use_request_logging(app, logger=request_logger)

    @app.on_event("startup")
    def _startup() -> None:
        configure_logging_from_settings(settings)

    return app


app = create_app()
