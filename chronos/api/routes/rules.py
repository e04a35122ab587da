"""Campaign rules endpoints."""

import structlog
from fastapi import APIRouter, Depends, Request

from chronos.domains.rules import RuleDefinition, RulesEngine, RuleView, summarize
from chronos.domains.rules.models import RuleEvaluationRequest, RuleToggleRequest

logger = structlog.get_logger()
router = APIRouter(prefix="/api/v1/rules", tags=["rules"])


def get_rules_engine(request: Request) -> RulesEngine:
    return request.app.state.rules_engine


def _require_rule(engine: RulesEngine, rule_id: str) -> None:
    if engine.get_rule(rule_id) is None:
        raise KeyError(f"Rule not found: {rule_id}")


@router.get("")
async def list_rules(engine: RulesEngine = Depends(get_rules_engine)) -> dict:  # noqa: B008
    return {"rules": [RuleView.from_rule(r).model_dump(mode="json") for r in engine.get_rules()]}


@router.post("", status_code=201)
async def create_rule(
    definition: RuleDefinition,
    engine: RulesEngine = Depends(get_rules_engine),  # noqa: B008
) -> dict:
    if engine.get_rule(definition.id) is not None:
        raise ValueError(f"Rule already exists: {definition.id}")
    rule = definition.to_rule()
    engine.add_rule(rule)
    logger.info("rule_added", rule_id=rule.id, priority=rule.priority, action=rule.action.value)
    return RuleView.from_rule(rule).model_dump(mode="json")


@router.patch("/{rule_id}")
async def toggle_rule(
    rule_id: str,
    body: RuleToggleRequest,
    engine: RulesEngine = Depends(get_rules_engine),  # noqa: B008
) -> dict:
    _require_rule(engine, rule_id)
    engine.toggle_rule(rule_id, body.enabled)
    logger.info("rule_toggled", rule_id=rule_id, enabled=body.enabled)
    return RuleView.from_rule(engine.get_rule(rule_id)).model_dump(mode="json")


@router.delete("/{rule_id}", status_code=204)
async def delete_rule(
    rule_id: str,
    engine: RulesEngine = Depends(get_rules_engine),  # noqa: B008
) -> None:
    _require_rule(engine, rule_id)
    engine.remove_rule(rule_id)
    logger.info("rule_removed", rule_id=rule_id)


@router.post("/evaluate")
async def evaluate_rules(
    body: RuleEvaluationRequest,
    engine: RulesEngine = Depends(get_rules_engine),  # noqa: B008
) -> dict:
    results = await engine.evaluate(body.campaigns)
    return {
        "results": [
            {
                "campaign_id": r.campaign.id,
                "campaign_name": r.campaign.name,
                "rule_id": r.rule_id,
                "rule_name": r.rule_name,
                "action": r.action.value,
                "reason": r.reason,
                "timestamp": r.timestamp.isoformat(),
            }
            for r in results
        ],
        "summary": summarize(results),
    }
