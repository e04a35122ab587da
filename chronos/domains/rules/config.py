"""Campaign rules configuration with sensible defaults."""

import os
from dataclasses import dataclass


def _split_ids(value: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass
class RulesConfig:
    # Start the engine with the built-in rule set
    load_defaults: bool = True
    # Built-in rules to force off / on, applied after the defaults load
    disabled_rule_ids: tuple[str, ...] = ()
    enabled_rule_ids: tuple[str, ...] = ()

    @classmethod
    def from_env(cls) -> "RulesConfig":
        """Load config with env var overrides. Env vars use RULES_ prefix."""
        config = cls()

        if v := os.getenv("RULES_LOAD_DEFAULTS"):
            config.load_defaults = v.strip().lower() in ("1", "true", "yes", "on")
        if v := os.getenv("RULES_DISABLED_IDS"):
            config.disabled_rule_ids = _split_ids(v)
        if v := os.getenv("RULES_ENABLED_IDS"):
            config.enabled_rule_ids = _split_ids(v)

        return config


# Module-level default instance
default_config = RulesConfig()
