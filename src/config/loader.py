"""Configuration loader for LaunchReady.

Provides centralized access to all engine configuration parameters.
"""
from __future__ import annotations

import yaml
from pathlib import Path
from typing import Any, Optional
import structlog

logger = structlog.get_logger(__name__)

CONFIG_FILE = Path(__file__).parent / "pipeline_config.yaml"

DEFAULT_EFFORT_ORDER: dict[str, int] = {
    "1-2 weeks": 1,
    "2-4 weeks": 2,
    "3-6 weeks": 3,
    "4-8 weeks": 4,
    "4-12 weeks": 5,
    "6-12 weeks": 6,
    "8-16 weeks": 7,
}


class ConfigLoader:
    """Loads and provides access to engine configuration."""

    _instance: Optional[ConfigLoader] = None
    _config: Optional[dict[str, Any]] = None

    def __new__(cls) -> ConfigLoader:
        """Singleton pattern - ensure only one config instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize config loader (only runs once due to singleton)."""
        if self._config is None:
            self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        if CONFIG_FILE.exists():
            with open(CONFIG_FILE) as f:
                self._config = yaml.safe_load(f) or {}
            logger.info("config_loaded", path=str(CONFIG_FILE))
        else:
            logger.warning("config_file_not_found", path=str(CONFIG_FILE))
            self._config = {}

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot-notation key.

        Examples:
            config.get("llm.model")
            config.get("prioritizer.critical_horizon_days")
            config.get("nonexistent.key", default=100)
        """
        if not self._config:
            return default

        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def get_section(self, section: str) -> dict[str, Any]:
        """Get entire configuration section.

        Examples:
            config.get_section("llm")
            config.get_section("prioritizer")
        """
        return self.get(section, default={})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._config = None
        self._load_config()


# Singleton instance
_config = ConfigLoader()


def get_config() -> ConfigLoader:
    """Get the global config instance."""
    return _config


# Convenience functions for common config access
def get_llm_model() -> str:
    """Get LLM model name."""
    return _config.get("llm.model", "claude-sonnet-4-20250514")


def get_llm_max_tokens() -> int:
    """Get max tokens for best-practice generation."""
    return _config.get("llm.max_tokens", 500)


def get_llm_temperature() -> float:
    """Get LLM temperature."""
    return _config.get("llm.temperature", 0.3)


def get_critical_horizon_days() -> int:
    """Days ahead of now within which a deadline makes an action critical."""
    return int(_config.get("prioritizer.critical_horizon_days", 180))


def get_effort_order() -> dict[str, int]:
    """Get the effort-string to ordinal table used when sorting actions."""
    order = _config.get("prioritizer.effort_order")
    return dict(order) if order else dict(DEFAULT_EFFORT_ORDER)


def get_default_effort_rank() -> int:
    """Get the ordinal assigned to effort strings missing from the table."""
    return int(_config.get("prioritizer.default_effort_rank", 3))


def get_default_effort() -> str:
    """Get the effort estimate used when neither module nor catalog has one."""
    return _config.get("actions.default_effort", "2-4 weeks")


def get_provider_batch_size() -> int:
    """Get how many actions are sent to the provider concurrently per batch."""
    return int(_config.get("actions.provider_batch_size", 5))


def get_knowledge_base_version() -> str:
    """Get the rule-content version stamped into report metadata."""
    return str(_config.get("report.knowledge_base_version", "2025.1"))


def get_llm_system_prompt() -> str:
    """Get the system prompt sent with best-practice generation requests."""
    return _config.get(
        "llm.system_prompt",
        "You are a compliance advisor specialising in AI regulation. Provide concise, actionable guidance.",
    )


def get_llm_timeout_seconds() -> float:
    """Get the per-request timeout for provider calls."""
    return float(_config.get("llm.timeout_seconds", 60))


def get_llm_max_retries() -> int:
    """Get how many times the SDK retries transient provider failures."""
    return int(_config.get("llm.max_retries", 2))
