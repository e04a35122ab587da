"""Human-interaction check: the only check that waits on the client."""

from ..config import FraudConfig
from ..probe import EnvironmentProbe
from .base import BotCheck


class HumanInteractionCheck(BotCheck):
    """Triggers when no pointer move, touch move, or scroll arrives in the window."""

    check_id = "no_human_behavior"
    factor = "No human-like behavior"

    async def evaluate(self, probe: EnvironmentProbe, config: FraudConfig) -> bool:
        observed = await probe.wait_for_interaction(config.interaction.window_seconds)
        return not observed
