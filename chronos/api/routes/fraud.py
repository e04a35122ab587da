"""Bot/fraud risk endpoints."""

from fastapi import APIRouter, Request

from chronos.domains.fraud import FraudRiskScorer, SnapshotProbe
from chronos.domains.fraud.models import FraudAnalysisRequest

router = APIRouter(prefix="/api/v1/fraud", tags=["fraud"])


@router.post("/analyze")
async def analyze_session(snapshot: FraudAnalysisRequest, request: Request) -> dict:
    scorer = FraudRiskScorer(SnapshotProbe(snapshot), config=request.app.state.fraud_config)
    result = await scorer.analyze()
    return result.model_dump(mode="json")
