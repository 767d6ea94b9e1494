"""Pydantic models for AdSpot API requests and responses."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Literal

from pydantic import (
    AliasChoices,
    BaseModel,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from adspot_admin.application.adspot_service import ResolvedAdSpot
from adspot_admin.domain.adspot.models import AdSpotCreatePayload, AdSpotMetrics
from adspot_admin.settings import get_settings

PlacementLiteral = Literal["home_screen", "ride_summary", "map_view"]
StatusLiteral = Literal["active", "inactive"]

_IMAGE_EXTENSION = re.compile(r"\.(jpg|jpeg|png|gif|webp)$", re.IGNORECASE)
_IMAGE_HOSTS = ("images.unsplash.com", "picsum.photos")
_HTTP_URL = TypeAdapter(HttpUrl)


class AdSpotCreateRequest(BaseModel):
    """Payload for creating an AdSpot. Status and timestamps are assigned server-side."""

    title: str = Field(..., description="Display title, 1-100 characters after trimming")
    image_url: str = Field(
        ...,
        validation_alias=AliasChoices("image_url", "imageUrl"),
        description="http(s) URL pointing at an image",
    )
    placement: PlacementLiteral
    ttl_minutes: int | None = Field(
        None,
        validation_alias=AliasChoices("ttl_minutes", "ttlMinutes"),
        description="Minutes after creation before auto-expiry",
    )

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        title = v.strip()
        if not title:
            raise ValueError("title must not be empty")
        max_length = get_settings().title_max_length
        if len(title) > max_length:
            raise ValueError(f"title must be at most {max_length} characters")
        return title

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, v: str) -> str:
        url = v.strip()
        try:
            parsed = _HTTP_URL.validate_python(url)
        except ValidationError as e:
            raise ValueError("image_url must be an absolute http(s) URL") from e
        host = parsed.host or ""
        if not host or "" in host.split("."):
            raise ValueError("image_url must name a valid host")
        on_image_host = any(host == h or host.endswith(f".{h}") for h in _IMAGE_HOSTS)
        if not (_IMAGE_EXTENSION.search(parsed.path or "") or on_image_host):
            raise ValueError("image_url must point to an image (jpg, png, gif, webp)")
        return url

    @field_validator("ttl_minutes", mode="before")
    @classmethod
    def blank_ttl_is_absent(cls, v: Any) -> Any:
        if v == "":
            return None
        return v

    @field_validator("ttl_minutes")
    @classmethod
    def validate_ttl_minutes(cls, v: int | None) -> int | None:
        if v is None:
            return v
        if v <= 0:
            raise ValueError("ttl_minutes must be a positive integer")
        max_ttl = get_settings().max_ttl_minutes
        if v > max_ttl:
            raise ValueError(f"ttl_minutes must be at most {max_ttl}")
        return v

    def to_payload(self) -> AdSpotCreatePayload:
        return AdSpotCreatePayload(
            title=self.title,
            image_url=self.image_url,
            placement=self.placement,
            ttl_minutes=self.ttl_minutes,
        )


class AdSpotStatusUpdateRequest(BaseModel):
    status: StatusLiteral


class AdSpotResponse(BaseModel):
    """Stored AdSpot fields plus its effective state at response time."""

    id: str
    title: str
    image_url: str
    placement: str
    status: str = Field(..., description="Stored flag: active | inactive")
    created_at: datetime
    deactivated_at: datetime | None = None
    ttl_minutes: int | None = None
    deactivation_cause: str | None = None
    is_active: bool = Field(..., description="Effective activity after applying TTL")
    inactive_reason: str | None = Field(None, description="expired_by_ttl | deactivated_by_user")
    expires_at: datetime | None = None

    @classmethod
    def from_resolved(cls, resolved: ResolvedAdSpot) -> "AdSpotResponse":
        adspot = resolved.adspot
        return cls(
            id=str(adspot.id),
            title=adspot.title,
            image_url=adspot.image_url,
            placement=adspot.placement,
            status=adspot.status,
            created_at=adspot.created_at,
            deactivated_at=adspot.deactivated_at,
            ttl_minutes=adspot.ttl_minutes,
            deactivation_cause=adspot.deactivation_cause,
            is_active=resolved.status.is_active,
            inactive_reason=resolved.status.reason,
            expires_at=resolved.expires_at,
        )


class AdSpotEnvelope(BaseModel):
    data: AdSpotResponse


class AdSpotListResponse(BaseModel):
    data: list[AdSpotResponse]


class InactiveBreakdownResponse(BaseModel):
    expired_by_ttl: int
    deactivated_by_user: int


class PlacementShareResponse(BaseModel):
    placement: str
    count: int
    percentage: int = Field(..., description="Whole percent of total, half-up rounded")


class AdSpotMetricsResponse(BaseModel):
    total: int
    active: int
    inactive: InactiveBreakdownResponse
    placement_distribution: list[PlacementShareResponse] = Field(default_factory=list)

    @classmethod
    def from_metrics(cls, metrics: AdSpotMetrics) -> "AdSpotMetricsResponse":
        return cls(
            total=metrics.total,
            active=metrics.active,
            inactive=InactiveBreakdownResponse(
                expired_by_ttl=metrics.inactive.expired_by_ttl,
                deactivated_by_user=metrics.inactive.deactivated_by_user,
            ),
            placement_distribution=[
                PlacementShareResponse(placement=s.placement, count=s.count, percentage=s.percentage)
                for s in metrics.placement_distribution
            ],
        )
