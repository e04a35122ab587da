"""Bot/fraud risk scoring: environment checks -> additive score -> classification."""

from collections.abc import Iterable
from datetime import UTC, datetime

import structlog

from .checks import ALL_CHECKS, BotCheck
from .config import MAX_RISK_SCORE, FraudConfig, default_config
from .models import CheckResult, FraudRiskResult
from .probe import EnvironmentProbe

logger = structlog.get_logger()


class FraudRiskScorer:
    """Scores one visiting session for bot/fraud risk.

    Scoring is additive on a 0-100 scale:
    1. Run every check in order -> triggered or not
    2. Sum the weights of triggered checks
    3. Clamp to [0, 100]
    4. is_bot = score >= bot_threshold

    A check that raises counts as not triggered; ``analyze()`` itself never
    fails because of a check.
    """

    def __init__(
        self,
        probe: EnvironmentProbe,
        config: FraudConfig | None = None,
        checks: Iterable[BotCheck] | None = None,
    ) -> None:
        self._probe = probe
        self._config = config or default_config
        self._checks = list(checks) if checks is not None else list(ALL_CHECKS)

    async def analyze(self) -> FraudRiskResult:
        cfg = self._config
        factors: list[str] = []
        check_results: list[CheckResult] = []
        total = 0

        for check in self._checks:
            try:
                weight = check.weight(cfg)
                triggered = bool(await check.evaluate(self._probe, cfg))
            except Exception as exc:
                logger.exception("bot_check_error", check_id=check.check_id)
                check_results.append(
                    CheckResult(
                        check_id=check.check_id,
                        factor=check.factor,
                        triggered=False,
                        error=f"{type(exc).__name__}: {exc}",
                    )
                )
                continue

            if triggered:
                total += weight
                factors.append(check.factor)
            check_results.append(
                CheckResult(
                    check_id=check.check_id,
                    factor=check.factor,
                    triggered=triggered,
                    weight=weight if triggered else 0,
                )
            )

        risk_score = max(0, min(total, MAX_RISK_SCORE))
        is_bot = risk_score >= cfg.bot_threshold

        logger.info(
            "fraud_risk_analyzed",
            risk_score=risk_score,
            is_bot=is_bot,
            factors=factors,
            raw_score=total,
        )

        return FraudRiskResult(
            is_bot=is_bot,
            risk_score=risk_score,
            factors=factors,
            checks=check_results,
            timestamp=datetime.now(UTC),
        )
