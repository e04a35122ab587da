"""Bot/fraud risk domain."""

from .checks import ALL_CHECKS, BotCheck
from .config import FraudConfig
from .interactions import InteractionTracker
from .models import (
    CheckResult,
    EnvironmentSnapshot,
    FraudRiskResult,
    InteractionKind,
    InteractionPatterns,
)
from .probe import EnvironmentProbe, InteractionMonitor, SnapshotProbe
from .scorer import FraudRiskScorer

__all__ = [
    "ALL_CHECKS",
    "BotCheck",
    "CheckResult",
    "EnvironmentProbe",
    "EnvironmentSnapshot",
    "FraudConfig",
    "FraudRiskResult",
    "FraudRiskScorer",
    "InteractionKind",
    "InteractionMonitor",
    "InteractionPatterns",
    "InteractionTracker",
    "SnapshotProbe",
]
