"""Attribution endpoints."""

from fastapi import APIRouter

from chronos.config import settings
from chronos.domains.attribution import (
    AttributionModel,
    AttributionRequest,
    ComparisonRequest,
    attribute,
    compare_models,
    describe_model,
)

router = APIRouter(prefix="/api/v1/attribution", tags=["attribution"])


def _resolve_model(model: AttributionModel | None) -> AttributionModel:
    return model or settings.default_attribution_model


@router.get("/models")
async def list_models() -> dict:
    return {"models": [{"name": m.value, "description": describe_model(m)} for m in AttributionModel]}


@router.post("/attribute")
async def attribute_revenue(request: AttributionRequest) -> dict:
    model = _resolve_model(request.model)
    campaigns = attribute(request.campaigns, request.journeys, model)
    return {
        "model": model.value,
        "campaigns": [c.model_dump(mode="json") for c in campaigns],
    }


@router.post("/compare")
async def compare_attribution(request: ComparisonRequest) -> dict:
    model = _resolve_model(request.model)
    comparisons = compare_models(request.campaigns, request.journeys, model, request.baseline)
    return {
        "model": model.value,
        "baseline": request.baseline.value,
        "comparisons": [c.model_dump(mode="json") for c in comparisons],
    }
