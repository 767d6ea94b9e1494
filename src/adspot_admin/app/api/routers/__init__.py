"""API routers for the AdSpot admin endpoints."""

from adspot_admin.app.api.routers.adspots import router as adspots_router

__all__ = ["adspots_router"]
