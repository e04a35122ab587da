"""Campaign rules engine: proposes automated actions from campaign metrics."""

import inspect
from collections import Counter
from collections.abc import Iterable
from datetime import UTC, datetime

import structlog

from chronos.shared.models import Campaign

from .config import RulesConfig, default_config
from .defaults import default_rules
from .models import CampaignRule, RuleEvaluationResult

logger = structlog.get_logger()


def _by_priority(rules: Iterable[CampaignRule]) -> list[CampaignRule]:
    # sorted() is stable with reverse=True, so equal priorities keep insertion order
    return sorted(rules, key=lambda rule: rule.priority, reverse=True)


class RulesEngine:
    """Evaluates campaigns against an ordered set of rules.

    Evaluation order:
    1. Campaigns in the order given
    2. Enabled rules, highest priority first
    3. Conditions awaited one at a time

    Every match is reported. The engine does not stop at the first match and
    does not resolve conflicting actions on the same campaign.
    """

    def __init__(self, rules: Iterable[CampaignRule] | None = None) -> None:
        self._rules: list[CampaignRule] = _by_priority(rules or [])
        logger.info("rules_engine_initialized", rule_count=len(self._rules))

    @classmethod
    def from_config(cls, config: RulesConfig | None = None) -> "RulesEngine":
        cfg = config or default_config
        rules = default_rules() if cfg.load_defaults else []
        for rule in rules:
            if rule.id in cfg.disabled_rule_ids:
                rule.enabled = False
            elif rule.id in cfg.enabled_rule_ids:
                rule.enabled = True
        return cls(rules)

    def add_rule(self, rule: CampaignRule) -> None:
        self._rules.append(rule)
        self._rules = _by_priority(self._rules)

    def remove_rule(self, rule_id: str) -> None:
        self._rules = [rule for rule in self._rules if rule.id != rule_id]

    def toggle_rule(self, rule_id: str, enabled: bool) -> None:
        rule = self.get_rule(rule_id)
        if rule is not None:
            rule.enabled = enabled

    def get_rule(self, rule_id: str) -> CampaignRule | None:
        return next((rule for rule in self._rules if rule.id == rule_id), None)

    def get_rules(self) -> list[CampaignRule]:
        return list(self._rules)

    async def evaluate(self, campaigns: Iterable[Campaign]) -> list[RuleEvaluationResult]:
        """Evaluate every campaign against every enabled rule.

        A condition that raises is logged and skipped for that (rule, campaign)
        pair only.
        """
        results: list[RuleEvaluationResult] = []
        rules = [rule for rule in self._rules if rule.enabled]
        campaign_count = 0
        error_count = 0

        for campaign in campaigns:
            campaign_count += 1
            for rule in rules:
                try:
                    matched = rule.condition(campaign)
                    if inspect.isawaitable(matched):
                        matched = await matched
                except Exception:
                    error_count += 1
                    logger.exception(
                        "rule_evaluation_error",
                        rule_id=rule.id,
                        campaign_id=getattr(campaign, "id", None),
                    )
                    continue

                if matched:
                    results.append(
                        RuleEvaluationResult(
                            campaign=campaign,
                            rule_id=rule.id,
                            rule_name=rule.name,
                            action=rule.action,
                            reason=rule.reason,
                            timestamp=datetime.now(UTC),
                        )
                    )

        logger.info(
            "rules_evaluated",
            campaign_count=campaign_count,
            enabled_rule_count=len(rules),
            match_count=len(results),
            error_count=error_count,
            actions=summarize(results),
        )

        return results

    async def evaluate_single(self, campaign: Campaign) -> list[RuleEvaluationResult]:
        return await self.evaluate([campaign])


def summarize(results: Iterable[RuleEvaluationResult]) -> dict[str, int]:
    """Count proposed actions, e.g. ``{"pause": 2, "alert": 1}``."""
    return dict(Counter(result.action.value for result in results))
