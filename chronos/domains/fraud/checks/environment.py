"""Checks on screen, locale, traffic source, cookies, and browser capabilities."""

from ..config import FraudConfig
from ..probe import EnvironmentProbe
from .base import BotCheck


class SuspiciousResolutionCheck(BotCheck):
    """Headless default resolutions, or a screen too small to be real."""

    check_id = "suspicious_resolution"
    factor = "Suspicious screen resolution"

    async def evaluate(self, probe: EnvironmentProbe, config: FraudConfig) -> bool:
        size = probe.screen_size()
        if size is None:
            return False
        width, height = size
        sig = config.signatures
        if (width, height) in sig.suspicious_resolutions:
            return True
        return width < sig.min_screen_dimension or height < sig.min_screen_dimension


class SuspiciousTimezoneCheck(BotCheck):
    check_id = "suspicious_timezone"
    factor = "Suspicious timezone"

    async def evaluate(self, probe: EnvironmentProbe, config: FraudConfig) -> bool:
        tz = probe.timezone()
        if tz is None:
            return False
        return tz in config.signatures.suspicious_timezones


class DirectTrafficCheck(BotCheck):
    """No referrer and no campaign tracking parameters in the landing URL."""

    check_id = "direct_traffic"
    factor = "No referrer on direct traffic"

    async def evaluate(self, probe: EnvironmentProbe, config: FraudConfig) -> bool:
        if probe.referrer() != "":
            return False
        params = probe.query_params()
        return not any(param in params for param in config.signatures.campaign_query_params)


class CookiesDisabledCheck(BotCheck):
    check_id = "cookies_disabled"
    factor = "Cookies disabled"

    async def evaluate(self, probe: EnvironmentProbe, config: FraudConfig) -> bool:
        return not probe.cookie_enabled()


class PlatformInconsistencyCheck(BotCheck):
    """User agent claims an OS that navigator.platform does not report."""

    check_id = "platform_inconsistency"
    factor = "Platform inconsistency"

    async def evaluate(self, probe: EnvironmentProbe, config: FraudConfig) -> bool:
        ua = probe.user_agent().lower()
        platform = probe.platform().lower()

        if "mac" in ua and "mac" not in platform:
            return True
        if "windows" in ua and "win" not in platform:
            return True
        # Android user agents mention Linux but report an ARM platform string
        if "linux" in ua and "linux" not in platform and "android" not in ua:
            return True

        return False


class MissingFeaturesCheck(BotCheck):
    check_id = "missing_features"
    factor = "Missing browser features"

    async def evaluate(self, probe: EnvironmentProbe, config: FraudConfig) -> bool:
        available = probe.features()
        has_all = all(feature in available for feature in config.signatures.required_features)
        return not (has_all and probe.cookie_enabled())
