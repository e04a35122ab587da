"""Pydantic models for the attribution domain."""

from enum import StrEnum

from pydantic import BaseModel

from chronos.shared.models import Campaign, CustomerJourney


class AttributionModel(StrEnum):
    LAST_CLICK = "Last-Click"
    FIRST_CLICK = "First-Click"
    LINEAR = "Linear"
    TIME_DECAY = "Time-Decay"
    U_SHAPED = "U-Shaped"


class AttributionComparison(BaseModel):
    """Revenue for one campaign under a model versus a baseline model."""

    campaign_id: str
    campaign_name: str
    model: AttributionModel
    baseline: AttributionModel
    revenue: float
    baseline_revenue: float
    change_pct: float = 0.0


class AttributionRequest(BaseModel):
    campaigns: list[Campaign]
    journeys: list[CustomerJourney] = []
    model: AttributionModel | None = None


class ComparisonRequest(AttributionRequest):
    baseline: AttributionModel = AttributionModel.LAST_CLICK
