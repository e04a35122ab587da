"""Bot/fraud heuristic checks.

Exports ALL_CHECKS (check instances in evaluation order) and the individual
check classes. The order of ALL_CHECKS is the order factors are reported in.
"""

from .automation import (
    AutomationFrameworkCheck,
    BotUserAgentCheck,
    HeadlessBrowserCheck,
    WebDriverCheck,
)
from .base import BotCheck
from .behavior import HumanInteractionCheck
from .environment import (
    CookiesDisabledCheck,
    DirectTrafficCheck,
    MissingFeaturesCheck,
    PlatformInconsistencyCheck,
    SuspiciousResolutionCheck,
    SuspiciousTimezoneCheck,
)

ALL_CHECKS: list[BotCheck] = [
    # Automation signals
    WebDriverCheck(),
    AutomationFrameworkCheck(),
    BotUserAgentCheck(),
    HeadlessBrowserCheck(),
    # Environment signals
    SuspiciousResolutionCheck(),
    SuspiciousTimezoneCheck(),
    DirectTrafficCheck(),
    CookiesDisabledCheck(),
    PlatformInconsistencyCheck(),
    MissingFeaturesCheck(),
    # Behavior
    HumanInteractionCheck(),
]

__all__ = [
    "ALL_CHECKS",
    "BotCheck",
    "WebDriverCheck",
    "AutomationFrameworkCheck",
    "BotUserAgentCheck",
    "HeadlessBrowserCheck",
    "SuspiciousResolutionCheck",
    "SuspiciousTimezoneCheck",
    "DirectTrafficCheck",
    "CookiesDisabledCheck",
    "PlatformInconsistencyCheck",
    "MissingFeaturesCheck",
    "HumanInteractionCheck",
]
