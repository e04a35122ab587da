"""Checks for automation drivers, bot user agents, and headless browsers."""

import re

from ..config import FraudConfig
from ..probe import EnvironmentProbe
from .base import BotCheck


class WebDriverCheck(BotCheck):
    """Triggers when a driver marker property is present on navigator."""

    check_id = "webdriver"
    factor = "WebDriver detected"

    async def evaluate(self, probe: EnvironmentProbe, config: FraudConfig) -> bool:
        markers = probe.navigator_markers()
        return any(marker in markers for marker in config.signatures.webdriver_markers)


class AutomationFrameworkCheck(BotCheck):
    """Triggers on PhantomJS / Nightmare / Selenium globals on window or document."""

    check_id = "automation"
    factor = "Automation tools detected"

    async def evaluate(self, probe: EnvironmentProbe, config: FraudConfig) -> bool:
        sig = config.signatures
        window_globals = probe.window_globals()
        if any(name in window_globals for name in sig.automation_globals):
            return True
        document_markers = probe.document_markers()
        return any(name in document_markers for name in sig.document_automation_markers)


class BotUserAgentCheck(BotCheck):
    check_id = "bot_user_agent"
    factor = "Bot user-agent pattern"

    async def evaluate(self, probe: EnvironmentProbe, config: FraudConfig) -> bool:
        pattern = re.compile(config.signatures.bot_user_agent_pattern, re.IGNORECASE)
        return pattern.search(probe.user_agent()) is not None


class HeadlessBrowserCheck(BotCheck):
    """Triggers on any headless indicator.

    - no installed plugins (only when the plugin list could be read)
    - missing or empty language list
    - a ``chrome`` object without ``chrome.runtime``
    - a software GPU renderer (SwiftShader, llvmpipe)
    """

    check_id = "headless"
    factor = "Headless browser detected"

    async def evaluate(self, probe: EnvironmentProbe, config: FraudConfig) -> bool:
        if probe.plugins_count() == 0:
            return True
        if not probe.languages():
            return True
        if probe.has_chrome_object() and not probe.has_chrome_runtime():
            return True

        renderer = probe.webgl_renderer()
        if renderer:
            return any(marker in renderer for marker in config.signatures.headless_renderers)

        return False
