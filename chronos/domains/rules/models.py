"""Models for the campaign rules domain."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field

from chronos.shared.models import Campaign

from .conditions import Condition


class RuleAction(StrEnum):
    PAUSE = "pause"
    INCREASE_BUDGET = "increase_budget"
    DECREASE_BUDGET = "decrease_budget"
    ALERT = "alert"
    ENABLE = "enable"


ConditionFn = Callable[[Campaign], bool | Awaitable[bool]]


@dataclass
class CampaignRule:
    """A named automation rule. ``condition`` may be sync or async."""

    id: str
    name: str
    description: str
    enabled: bool
    condition: ConditionFn
    action: RuleAction
    reason: str
    priority: int


class RuleEvaluationResult(BaseModel):
    campaign: Campaign
    rule_id: str
    rule_name: str
    action: RuleAction
    reason: str
    timestamp: datetime


class RuleDefinition(BaseModel):
    """Serializable rule, as posted by the settings screen."""

    id: str
    name: str
    description: str = ""
    enabled: bool = True
    condition: Condition
    action: RuleAction
    reason: str
    priority: int = 50

    def to_rule(self) -> CampaignRule:
        return CampaignRule(
            id=self.id,
            name=self.name,
            description=self.description,
            enabled=self.enabled,
            condition=self.condition,
            action=self.action,
            reason=self.reason,
            priority=self.priority,
        )


class RuleView(BaseModel):
    id: str
    name: str
    description: str
    enabled: bool
    action: RuleAction
    reason: str
    priority: int
    # None when the rule's condition is an opaque callable
    condition: dict | None = None

    @classmethod
    def from_rule(cls, rule: CampaignRule) -> "RuleView":
        condition = rule.condition
        return cls(
            id=rule.id,
            name=rule.name,
            description=rule.description,
            enabled=rule.enabled,
            action=rule.action,
            reason=rule.reason,
            priority=rule.priority,
            condition=condition.model_dump(mode="json") if isinstance(condition, BaseModel) else None,
        )


class RuleToggleRequest(BaseModel):
    enabled: bool


class RuleEvaluationRequest(BaseModel):
    campaigns: list[Campaign] = Field(default_factory=list)
