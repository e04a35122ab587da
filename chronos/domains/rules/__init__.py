"""Campaign automation rules domain."""

from .conditions import AllOf, AnyOf, Comparison, Operator, all_of, any_of, where
from .config import RulesConfig
from .defaults import default_rules
from .engine import RulesEngine, summarize
from .models import (
    CampaignRule,
    RuleAction,
    RuleDefinition,
    RuleEvaluationResult,
    RuleView,
)

__all__ = [
    "AllOf",
    "AnyOf",
    "CampaignRule",
    "Comparison",
    "Operator",
    "RuleAction",
    "RuleDefinition",
    "RuleEvaluationResult",
    "RuleView",
    "RulesConfig",
    "RulesEngine",
    "all_of",
    "any_of",
    "default_rules",
    "summarize",
    "where",
]
