"""Abstract base class for bot/fraud heuristic checks."""

from abc import ABC, abstractmethod

from ..config import FraudConfig
from ..probe import EnvironmentProbe


class BotCheck(ABC):
    """Base class for all bot checks.

    Checks are async (the interaction check waits on the client) and receive
    the probe and config. A check only answers whether it fired; the scorer
    owns the weights and the total.
    """

    check_id: str  # also the attribute name on CheckWeights
    factor: str  # human-readable name reported in FraudRiskResult.factors

    @abstractmethod
    async def evaluate(self, probe: EnvironmentProbe, config: FraudConfig) -> bool:
        """Return True when the signal suggests automation."""
        ...

    def weight(self, config: FraudConfig) -> int:
        return getattr(config.weights, self.check_id)
