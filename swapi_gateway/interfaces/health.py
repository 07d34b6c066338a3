"""
Liveness check for the gateway.

Reports the running version and the SWAPI instance requests are
proxied to. Never calls upstream.
"""

from fastapi import APIRouter

from swapi_gateway.core.config import settings
from swapi_gateway.interfaces.starwars.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, summary="Gateway liveness")
def gateway_health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=settings.version,
        upstream=settings.swapi_base_url,
    )
