"""Router for AdSpot endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from adspot_admin.app.api.models.adspots import (
    AdSpotCreateRequest,
    AdSpotEnvelope,
    AdSpotListResponse,
    AdSpotMetricsResponse,
    AdSpotResponse,
    AdSpotStatusUpdateRequest,
    PlacementLiteral,
    StatusLiteral,
)
from adspot_admin.application.adspot_service import AdSpotService
from adspot_admin.application.errors import AdSpotNotFoundError
from adspot_admin.domain.adspot.models import AdSpot, AdSpotFilter

logger = logging.getLogger(__name__)

router = APIRouter()


def get_adspot_service(request: Request) -> AdSpotService:
    """Dependency to provide the AdSpotService created at startup."""
    return request.app.state.adspot_service


def _envelope(service: AdSpotService, adspot: AdSpot) -> AdSpotEnvelope:
    return AdSpotEnvelope(data=AdSpotResponse.from_resolved(service.resolve(adspot)))


def _list_response(service: AdSpotService, adspots: list[AdSpot]) -> AdSpotListResponse:
    now = service.clock()
    return AdSpotListResponse(
        data=[AdSpotResponse.from_resolved(service.resolve(adspot, now)) for adspot in adspots]
    )


@router.get("/adspots", response_model=AdSpotListResponse)
def list_adspots(
    placement: PlacementLiteral | None = Query(None, description="Filter by placement"),
    status: StatusLiteral | None = Query(None, description="Filter by stored status flag"),
    search: str | None = Query(None, description="Case-insensitive title search"),
    active_only: bool = Query(False, description="Only AdSpots that are effectively active now"),
    service: AdSpotService = Depends(get_adspot_service),
) -> AdSpotListResponse:
    """
    List AdSpots.

    With active_only, TTL is applied first and the status filter is ignored.
    """
    adspot_filter = AdSpotFilter(placement=placement, search=search, status=status)
    try:
        if active_only:
            adspots = service.list_active(adspot_filter)
        else:
            adspots = service.list_adspots(adspot_filter)
        return _list_response(service, adspots)
    except Exception as e:
        logger.error(f"Error listing AdSpots: {e}")
        raise HTTPException(status_code=500, detail=f"Error listing AdSpots: {str(e)}")


@router.post("/adspots", response_model=AdSpotEnvelope, status_code=201)
def create_adspot(
    req: AdSpotCreateRequest,
    service: AdSpotService = Depends(get_adspot_service),
) -> AdSpotEnvelope:
    """Create an AdSpot. It starts active with created_at set to now."""
    adspot = service.create_adspot(req.to_payload())
    return _envelope(service, adspot)


@router.get("/adspots/metrics", response_model=AdSpotMetricsResponse)
def get_metrics(service: AdSpotService = Depends(get_adspot_service)) -> AdSpotMetricsResponse:
    """Totals, active count, inactive split by reason and placement distribution."""
    return AdSpotMetricsResponse.from_metrics(service.get_metrics())


@router.post("/adspots/expire", response_model=AdSpotListResponse)
def expire_lapsed(service: AdSpotService = Depends(get_adspot_service)) -> AdSpotListResponse:
    """Persist TTL expiry for AdSpots whose TTL lapsed while still flagged active."""
    return _list_response(service, service.expire_lapsed())


@router.get("/adspots/{adspot_id}", response_model=AdSpotEnvelope)
def get_adspot(
    adspot_id: str,
    service: AdSpotService = Depends(get_adspot_service),
) -> AdSpotEnvelope:
    try:
        return _envelope(service, service.get_adspot(adspot_id))
    except AdSpotNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/adspots/{adspot_id}", response_model=AdSpotEnvelope)
def update_adspot_status(
    adspot_id: str,
    req: AdSpotStatusUpdateRequest,
    service: AdSpotService = Depends(get_adspot_service),
) -> AdSpotEnvelope:
    """Set the stored status. Moving to inactive behaves like /deactivate."""
    try:
        return _envelope(service, service.set_status(adspot_id, req.status))
    except AdSpotNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/adspots/{adspot_id}/deactivate", response_model=AdSpotEnvelope)
def deactivate_adspot(
    adspot_id: str,
    service: AdSpotService = Depends(get_adspot_service),
) -> AdSpotEnvelope:
    try:
        return _envelope(service, service.deactivate_adspot(adspot_id))
    except AdSpotNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
