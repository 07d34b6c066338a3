"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, Star Wars resources)
- Error handlers (centralized domain-to-HTTP mapping)
- Logging configuration
- The upstream SWAPI client

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from swapi_gateway.core.config import settings
from swapi_gateway.domain.starwars.ports import StarWarsClientPort
from swapi_gateway.infrastructure.starwars.swapi_client import SwapiHttpClient
from swapi_gateway.interfaces.health import router as health_router
from swapi_gateway.interfaces.starwars.router import router as starwars_router
from swapi_gateway.shared.errors.handlers import register_error_handlers
from swapi_gateway.shared.logging import configure_logging

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the SWAPI client on startup unless one was injected, close it on shutdown."""
    owned_client: Optional[SwapiHttpClient] = None
    if getattr(app.state, "swapi_client", None) is None:
        owned_client = SwapiHttpClient(
            base_url=settings.swapi_base_url,
            timeout=settings.swapi_timeout_seconds,
        )
        app.state.swapi_client = owned_client
        logger.info("SWAPI client ready: base_url=%s", settings.swapi_base_url)

    yield

    if owned_client is not None:
        owned_client.close()
        app.state.swapi_client = None


def create_app(swapi_client: Optional[StarWarsClientPort] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        swapi_client: Upstream client to serve requests with. When omitted,
            a SwapiHttpClient is opened by the lifespan from settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    if swapi_client is not None:
        app.state.swapi_client = swapi_client

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(starwars_router, prefix=API_PREFIX)

    return app


app = create_app()
