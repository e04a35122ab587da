"""Unit tests for the additive bot/fraud risk scorer."""

import itertools

import pytest

from chronos.domains.fraud import (
    ALL_CHECKS,
    BotCheck,
    FraudConfig,
    FraudRiskScorer,
    SnapshotProbe,
)
from chronos.domains.fraud.checks import (
    DirectTrafficCheck,
    HeadlessBrowserCheck,
    WebDriverCheck,
)
from chronos.domains.fraud.config import CheckWeights


class ExplodingCheck(BotCheck):
    check_id = "webdriver"
    factor = "WebDriver detected"

    async def evaluate(self, probe, config):
        raise RuntimeError("navigator unavailable")


class AlwaysCheck(BotCheck):
    check_id = "headless"
    factor = "Headless browser detected"

    async def evaluate(self, probe, config):
        return True


class FixedCheck(BotCheck):
    """Stands in for a real check with a predetermined outcome."""

    def __init__(self, check: BotCheck, triggered: bool) -> None:
        self.check_id = check.check_id
        self.factor = check.factor
        self._triggered = triggered

    async def evaluate(self, probe, config):
        return self._triggered


class TestFraudRiskScorer:
    @pytest.mark.asyncio
    async def test_human_visitor(self, human_snapshot):
        result = await FraudRiskScorer(SnapshotProbe(human_snapshot)).analyze()

        assert result.is_bot is False
        assert result.risk_score == 0
        assert result.factors == []
        assert len(result.checks) == 11
        assert not any(c.triggered for c in result.checks)

    @pytest.mark.asyncio
    async def test_headless_visitor_clamped_to_max(self, headless_snapshot):
        result = await FraudRiskScorer(SnapshotProbe(headless_snapshot)).analyze()

        assert result.is_bot is True
        assert result.risk_score == 100
        assert result.factors == [
            "WebDriver detected",
            "Bot user-agent pattern",
            "Headless browser detected",
            "Suspicious screen resolution",
            "Suspicious timezone",
            "No referrer on direct traffic",
            "Missing browser features",
            "No human-like behavior",
        ]
        assert sum(c.weight for c in result.checks) == 175

    @pytest.mark.asyncio
    async def test_score_is_sum_of_triggered_weights(self, human_snapshot):
        snapshot = human_snapshot.model_copy(update={"referrer": "", "cookie_enabled": False})
        result = await FraudRiskScorer(SnapshotProbe(snapshot)).analyze()

        # direct traffic 5 + cookies disabled 10 + missing features 15
        assert result.risk_score == 30
        assert result.is_bot is False
        assert result.factors == [
            "No referrer on direct traffic",
            "Cookies disabled",
            "Missing browser features",
        ]

    @pytest.mark.asyncio
    async def test_threshold_is_inclusive(self, human_snapshot):
        snapshot = human_snapshot.model_copy(update={"plugins_count": 0})
        config = FraudConfig(bot_threshold=30)
        result = await FraudRiskScorer(SnapshotProbe(snapshot), config=config).analyze()

        assert result.risk_score == 30
        assert result.is_bot is True

    @pytest.mark.asyncio
    async def test_just_below_threshold(self, human_snapshot):
        snapshot = human_snapshot.model_copy(update={"plugins_count": 0})
        config = FraudConfig(bot_threshold=31)
        result = await FraudRiskScorer(SnapshotProbe(snapshot), config=config).analyze()
        assert result.is_bot is False

    @pytest.mark.asyncio
    async def test_custom_weights(self, human_snapshot):
        snapshot = human_snapshot.model_copy(update={"navigator_markers": ["webdriver"]})
        config = FraudConfig(weights=CheckWeights(webdriver=60))
        result = await FraudRiskScorer(SnapshotProbe(snapshot), config=config).analyze()

        assert result.risk_score == 60
        assert result.is_bot is True

    @pytest.mark.asyncio
    async def test_failing_check_counts_as_not_triggered(self, human_snapshot):
        scorer = FraudRiskScorer(
            SnapshotProbe(human_snapshot),
            checks=[ExplodingCheck(), AlwaysCheck()],
        )
        result = await scorer.analyze()

        assert result.risk_score == 30
        assert result.factors == ["Headless browser detected"]
        failed = result.checks[0]
        assert failed.triggered is False
        assert failed.weight == 0
        assert failed.error == "RuntimeError: navigator unavailable"

    @pytest.mark.asyncio
    async def test_subset_of_checks(self, headless_snapshot):
        scorer = FraudRiskScorer(
            SnapshotProbe(headless_snapshot),
            checks=[WebDriverCheck(), HeadlessBrowserCheck(), DirectTrafficCheck()],
        )
        result = await scorer.analyze()
        assert result.risk_score == 75
        assert [c.check_id for c in result.checks] == ["webdriver", "headless", "direct_traffic"]

    @pytest.mark.asyncio
    async def test_live_interaction_window(self, human_snapshot, fast_config):
        snapshot = human_snapshot.model_copy(update={"interaction_observed": None})
        result = await FraudRiskScorer(SnapshotProbe(snapshot), config=fast_config).analyze()

        assert result.risk_score == 25
        assert result.factors == ["No human-like behavior"]

    @pytest.mark.asyncio
    async def test_default_threshold_reached_exactly(self, human_snapshot):
        # webdriver 40 + suspicious timezone 10
        snapshot = human_snapshot.model_copy(
            update={"navigator_markers": ["webdriver"], "timezone": "UTC"}
        )
        result = await FraudRiskScorer(SnapshotProbe(snapshot)).analyze()

        assert result.risk_score == 50
        assert result.is_bot is True

    @pytest.mark.asyncio
    async def test_default_threshold_missed_by_one_check(self, human_snapshot):
        # webdriver 40 + direct traffic 5
        snapshot = human_snapshot.model_copy(
            update={"navigator_markers": ["webdriver"], "referrer": ""}
        )
        result = await FraudRiskScorer(SnapshotProbe(snapshot)).analyze()

        assert result.risk_score == 45
        assert result.is_bot is False

    @pytest.mark.asyncio
    async def test_every_signal_combination_bounded_and_classified(self, human_snapshot):
        config = FraudConfig()
        probe = SnapshotProbe(human_snapshot)

        for outcome in itertools.product([False, True], repeat=len(ALL_CHECKS)):
            checks = [FixedCheck(c, fired) for c, fired in zip(ALL_CHECKS, outcome, strict=True)]
            raw = sum(c.weight(config) for c, fired in zip(ALL_CHECKS, outcome) if fired)

            result = await FraudRiskScorer(probe, config=config, checks=checks).analyze()

            assert 0 <= result.risk_score <= 100
            assert result.risk_score == min(raw, 100)
            assert result.is_bot == (result.risk_score >= 50)
            assert len(result.factors) == sum(outcome)
