"""Bot/fraud risk scoring configuration with sensible defaults."""

import os
from dataclasses import dataclass, field, fields

MAX_RISK_SCORE = 100


@dataclass
class CheckWeights:
    """Points each triggered check adds to the risk score."""

    webdriver: int = 40
    automation: int = 30
    bot_user_agent: int = 35
    headless: int = 30
    suspicious_resolution: int = 15
    suspicious_timezone: int = 10
    direct_traffic: int = 5
    cookies_disabled: int = 10
    platform_inconsistency: int = 20
    missing_features: int = 15
    no_human_behavior: int = 25

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ValueError(f"Check weight '{f.name}' must be non-negative, got {value}")


@dataclass
class DetectionSignatures:
    # Properties injected on navigator by browser-automation drivers
    webdriver_markers: tuple[str, ...] = (
        "webdriver",
        "__webdriver_script_fn",
        "__webdriver_script_func",
        "__webdriver_evaluate",
        "__selenium_evaluate",
        "__fxdriver_evaluate",
        "__driver_unwrapped",
        "__webdriver_unwrapped",
        "__driver_evaluate",
        "__selenium_unwrapped",
        "__fxdriver_unwrapped",
    )
    automation_globals: tuple[str, ...] = (
        "phantom",
        "_phantom",
        "__nightmare",
        "callPhantom",
        "_WEBDRIVER_ELEM_CACHE",
        "domAutomation",
        "domAutomationController",
    )
    document_automation_markers: tuple[str, ...] = (
        "__selenium_unwrapped",
        "__webdriver_evaluate",
        "__driver_evaluate",
    )
    bot_user_agent_pattern: str = (
        r"bot|crawler|spider|scraper|headless|phantom|selenium|puppeteer|playwright"
        r"|webdriver|chrome-lighthouse|googlebot|bingbot|slurp|duckduckbot|baiduspider"
        r"|yandexbot|sogou|exabot|facebot|ia_archiver"
    )
    headless_renderers: tuple[str, ...] = ("SwiftShader", "llvmpipe")
    suspicious_resolutions: tuple[tuple[int, int], ...] = (
        (800, 600),
        (1024, 768),
        (1, 1),
        (0, 0),
    )
    min_screen_dimension: int = 100
    suspicious_timezones: tuple[str, ...] = ("UTC", "Etc/UTC", "Etc/GMT")
    campaign_query_params: tuple[str, ...] = ("utm_source", "gclid", "fbclid")
    required_features: tuple[str, ...] = ("localStorage", "sessionStorage", "fetch", "Promise")


@dataclass
class InteractionSettings:
    # Observation window for pointer/touch/scroll activity
    window_seconds: float = 3.0
    pointer_history_size: int = 100
    key_history_size: int = 50


@dataclass
class FraudConfig:
    weights: CheckWeights = field(default_factory=CheckWeights)
    signatures: DetectionSignatures = field(default_factory=DetectionSignatures)
    interaction: InteractionSettings = field(default_factory=InteractionSettings)
    bot_threshold: int = 50

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        self.weights.validate()
        if not 0 <= self.bot_threshold <= MAX_RISK_SCORE:
            raise ValueError(
                f"bot_threshold must be within 0-{MAX_RISK_SCORE}, got {self.bot_threshold}"
            )

    @classmethod
    def from_env(cls) -> "FraudConfig":
        """Load config with env var overrides. Env vars use FRAUD_ prefix."""
        config = cls()

        if v := os.getenv("FRAUD_BOT_THRESHOLD"):
            config.bot_threshold = int(v)
        if v := os.getenv("FRAUD_INTERACTION_WINDOW_SECONDS"):
            config.interaction.window_seconds = float(v)

        # Per-check weights, e.g. FRAUD_WEIGHT_WEBDRIVER=50
        for f in fields(CheckWeights):
            if v := os.getenv(f"FRAUD_WEIGHT_{f.name.upper()}"):
                setattr(config.weights, f.name, int(v))

        config.validate()
        return config


# Module-level default instance
default_config = FraudConfig()
