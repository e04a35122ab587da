"""Pydantic models for campaigns and customer journeys shared by every domain."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field, computed_field


class Platform(StrEnum):
    FACEBOOK = "Facebook"
    GOOGLE = "Google"
    TIKTOK = "TikTok"
    EMAIL = "Email"


class CampaignStatus(StrEnum):
    ACTIVE = "Active"
    PAUSED = "Paused"


class TouchpointType(StrEnum):
    AD_CLICK = "Ad Click"
    EMAIL_OPEN = "Email Open"
    ORGANIC_SEARCH = "Organic Search"
    DIRECT = "Direct"
    CHECKOUT = "Checkout"


class Device(StrEnum):
    MOBILE = "Mobile"
    DESKTOP = "Desktop"


def compute_roas(tracked_sales: float, spend: float) -> float:
    """Return on ad spend. Zero spend yields 0.0 rather than a division error."""
    if spend <= 0:
        return 0.0
    return tracked_sales / spend


# --- Campaigns ---


class AdSet(BaseModel):
    id: str
    name: str
    spend: float = Field(default=0.0, ge=0)
    chronos_tracked_sales: float = 0.0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def roas(self) -> float:
        return compute_roas(self.chronos_tracked_sales, self.spend)


class Campaign(BaseModel):
    id: str
    name: str
    platform: Platform
    status: CampaignStatus = CampaignStatus.ACTIVE
    spend: float = Field(default=0.0, ge=0)
    platform_reported_sales: float = 0.0  # what the ad platform claims
    chronos_tracked_sales: float = 0.0  # written by the attribution modeler
    clicks: int = Field(default=0, ge=0)
    leads: int = Field(default=0, ge=0)
    ad_sets: list[AdSet] | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def roas(self) -> float:
        return compute_roas(self.chronos_tracked_sales, self.spend)


# --- Journeys ---


class Touchpoint(BaseModel):
    id: str
    type: TouchpointType
    source: str  # matched against Campaign.name
    device: Device = Device.DESKTOP
    timestamp: datetime
    value: float = 0.0


class IdentityLink(BaseModel):
    device_id: str
    fingerprint_id: str
    timestamp: datetime
    type: str = "probabilistic"  # probabilistic / deterministic
    confidence_score: float | None = Field(default=None, ge=0, le=100)


class CustomerJourney(BaseModel):
    id: str
    customer_name: str
    email: str
    phone: str | None = None
    total_ltv: float = 0.0
    touchpoints: list[Touchpoint] = Field(default_factory=list)
    identity_graph: list[IdentityLink] | None = None
    tags: list[str] | None = None
