from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from adspot_admin.app.api.routers import adspots_router
from adspot_admin.app.factory import create_service
from adspot_admin.app.health import router as health_router
from adspot_admin.application.adspot_service import AdSpotService
from adspot_admin.observability.logging import configure_logging


def create_app(service: Optional[AdSpotService] = None) -> FastAPI:
    """
    Build the API application.

    The service (and the store behind it) lives for the lifetime of the app.
    """
    app = FastAPI(title="AdSpot Admin")
    app.state.adspot_service = service or create_service()
    app.include_router(health_router)
    app.include_router(adspots_router, prefix="/v1", tags=["adspots"])
    return app


configure_logging()

app = create_app()
