"""Unit tests for bot/fraud scoring configuration."""

import pytest

from chronos.domains.fraud import FraudConfig
from chronos.domains.fraud.config import CheckWeights


def test_defaults():
    config = FraudConfig()
    assert config.bot_threshold == 50
    assert config.weights.webdriver == 40
    assert config.weights.no_human_behavior == 25
    assert config.interaction.window_seconds == 3.0


def test_negative_weight_rejected():
    with pytest.raises(ValueError, match="headless"):
        CheckWeights(headless=-1)


@pytest.mark.parametrize("threshold", [-1, 101])
def test_threshold_out_of_range(threshold):
    with pytest.raises(ValueError, match="bot_threshold"):
        FraudConfig(bot_threshold=threshold)


@pytest.mark.parametrize("threshold", [0, 100])
def test_threshold_bounds_accepted(threshold):
    assert FraudConfig(bot_threshold=threshold).bot_threshold == threshold


def test_from_env(monkeypatch):
    monkeypatch.setenv("FRAUD_BOT_THRESHOLD", "70")
    monkeypatch.setenv("FRAUD_INTERACTION_WINDOW_SECONDS", "1.5")
    monkeypatch.setenv("FRAUD_WEIGHT_WEBDRIVER", "55")

    config = FraudConfig.from_env()

    assert config.bot_threshold == 70
    assert config.interaction.window_seconds == 1.5
    assert config.weights.webdriver == 55
    assert config.weights.automation == 30


def test_from_env_validates(monkeypatch):
    monkeypatch.setenv("FRAUD_WEIGHT_COOKIES_DISABLED", "-5")
    with pytest.raises(ValueError):
        FraudConfig.from_env()


def test_from_env_does_not_touch_defaults(monkeypatch):
    monkeypatch.setenv("FRAUD_WEIGHT_HEADLESS", "99")
    FraudConfig.from_env()
    assert FraudConfig().weights.headless == 30
