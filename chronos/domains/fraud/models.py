"""Pydantic models for the bot/fraud risk domain."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field


class InteractionKind(StrEnum):
    POINTER_MOVE = "mousemove"
    TOUCH_MOVE = "touchmove"
    SCROLL = "scroll"
    KEY_DOWN = "keydown"


class EnvironmentSnapshot(BaseModel):
    """Client-environment signals collected by the tracking tag.

    Marker lists hold the names of properties that were present and truthy
    on the corresponding browser object. ``None`` means the tag could not
    read the signal.
    """

    user_agent: str = ""
    platform: str = ""
    navigator_markers: list[str] = Field(default_factory=list)
    window_globals: list[str] = Field(default_factory=list)
    document_markers: list[str] = Field(default_factory=list)
    plugins_count: int | None = None
    languages: list[str] | None = None
    has_chrome_object: bool = False
    has_chrome_runtime: bool = False
    webgl_renderer: str | None = None
    screen_width: int | None = None
    screen_height: int | None = None
    timezone: str | None = None
    referrer: str = ""
    url: str = ""
    cookie_enabled: bool = True
    features: list[str] = Field(default_factory=list)
    # Set by tags that watched the page themselves before posting
    interaction_observed: bool | None = None


class CheckResult(BaseModel):
    check_id: str
    factor: str
    triggered: bool
    weight: int = 0
    error: str | None = None


class FraudRiskResult(BaseModel):
    is_bot: bool
    risk_score: int = Field(ge=0, le=100)
    factors: list[str] = []
    checks: list[CheckResult] = []
    timestamp: datetime


class InteractionPatterns(BaseModel):
    """Spread of the gaps between consecutive interaction events."""

    pointer_interval_stddev_ms: float = 0.0
    key_interval_stddev_ms: float = 0.0
    pointer_event_count: int = 0
    key_event_count: int = 0


class FraudAnalysisRequest(EnvironmentSnapshot):
    """Snapshot posted over HTTP.

    The server cannot watch the page, so the tag must report whether it saw
    pointer, touch or scroll activity during the observation window.
    """

    interaction_observed: bool
