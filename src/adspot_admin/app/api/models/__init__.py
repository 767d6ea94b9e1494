"""Pydantic models for API requests and responses."""

from adspot_admin.app.api.models.adspots import (
    AdSpotCreateRequest,
    AdSpotEnvelope,
    AdSpotListResponse,
    AdSpotMetricsResponse,
    AdSpotResponse,
    AdSpotStatusUpdateRequest,
)

__all__ = [
    "AdSpotCreateRequest",
    "AdSpotEnvelope",
    "AdSpotListResponse",
    "AdSpotMetricsResponse",
    "AdSpotResponse",
    "AdSpotStatusUpdateRequest",
]
