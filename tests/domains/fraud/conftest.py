"""Fixtures for the bot/fraud risk tests."""

import pytest

from chronos.domains.fraud import EnvironmentSnapshot, FraudConfig
from chronos.domains.fraud.config import InteractionSettings

CHROME_WINDOWS_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)


@pytest.fixture
def human_snapshot() -> EnvironmentSnapshot:
    """A desktop Chrome visitor that trips none of the checks."""
    return EnvironmentSnapshot(
        user_agent=CHROME_WINDOWS_UA,
        platform="Win32",
        plugins_count=5,
        languages=["en-US", "en"],
        has_chrome_object=True,
        has_chrome_runtime=True,
        webgl_renderer="ANGLE (NVIDIA GeForce RTX 3060 Direct3D11)",
        screen_width=1920,
        screen_height=1080,
        timezone="America/New_York",
        referrer="https://www.google.com/",
        url="https://shop.example.com/landing",
        cookie_enabled=True,
        features=["localStorage", "sessionStorage", "fetch", "Promise"],
        interaction_observed=True,
    )


@pytest.fixture
def headless_snapshot() -> EnvironmentSnapshot:
    """A headless Chrome driven by a WebDriver client."""
    return EnvironmentSnapshot(
        user_agent="Mozilla/5.0 (X11; Linux x86_64) HeadlessChrome/124.0.0.0",
        platform="Linux x86_64",
        navigator_markers=["webdriver"],
        plugins_count=0,
        languages=[],
        has_chrome_object=True,
        has_chrome_runtime=False,
        webgl_renderer="Google SwiftShader",
        screen_width=800,
        screen_height=600,
        timezone="UTC",
        referrer="",
        url="https://shop.example.com/",
        cookie_enabled=True,
        features=[],
        interaction_observed=False,
    )


@pytest.fixture
def fast_config() -> FraudConfig:
    """Default weights with a short interaction window."""
    return FraudConfig(interaction=InteractionSettings(window_seconds=0.05))
