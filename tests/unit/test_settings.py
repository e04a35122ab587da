"""Tests for application settings and logging setup."""

import io
import json

import pytest
import structlog
from pydantic import ValidationError

from chronos.config import Settings
from chronos.domains.attribution import AttributionModel
from chronos.shared.logging import setup_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("DEFAULT_ATTRIBUTION_MODEL", raising=False)
        s = Settings(_env_file=None)
        assert s.app_name == "chronos-core"
        assert s.port == 8000
        assert s.default_attribution_model == "Last-Click"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("DEFAULT_ATTRIBUTION_MODEL", "U-Shaped")
        s = Settings(_env_file=None)
        assert s.log_level == "DEBUG"
        assert s.default_attribution_model == "U-Shaped"

    def test_default_attribution_model_is_typed(self, monkeypatch):
        monkeypatch.delenv("DEFAULT_ATTRIBUTION_MODEL", raising=False)
        assert Settings(_env_file=None).default_attribution_model is AttributionModel.LAST_CLICK

    def test_unknown_attribution_model_rejected_at_load(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_ATTRIBUTION_MODEL", "W-Shaped")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


def _configured_logger() -> tuple[structlog.types.BindableLogger, io.StringIO]:
    """Build a logger from the active configuration that writes to a buffer."""
    config = structlog.get_config()
    buffer = io.StringIO()
    logger = config["wrapper_class"](
        structlog.PrintLogger(buffer), processors=config["processors"], context={}
    )
    return logger, buffer


class TestSetupLogging:
    def teardown_method(self):
        structlog.contextvars.clear_contextvars()
        structlog.reset_defaults()

    def test_json_lines(self):
        setup_logging("INFO", json_logs=True)
        logger, buffer = _configured_logger()
        logger.info("rules_evaluated", result_count=3)

        event = json.loads(buffer.getvalue().strip())
        assert event["event"] == "rules_evaluated"
        assert event["result_count"] == 3
        assert event["level"] == "info"
        assert event["service"] == "chronos-core"
        assert "timestamp" in event

    def test_console_renderer(self):
        setup_logging("INFO", json_logs=False)
        renderer = structlog.get_config()["processors"][-1]
        assert isinstance(renderer, structlog.dev.ConsoleRenderer)

    def test_level_filters(self):
        setup_logging("WARNING", json_logs=True)
        logger, buffer = _configured_logger()
        logger.info("quiet")
        assert buffer.getvalue() == ""
        logger.warning("loud")
        assert "loud" in buffer.getvalue()

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("chatty", json_logs=True)
        logger, buffer = _configured_logger()
        logger.debug("hidden")
        logger.info("shown")
        out = buffer.getvalue()
        assert "shown" in out
        assert "hidden" not in out
