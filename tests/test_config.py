"""Tests for the configuration loader."""
from __future__ import annotations

from config import ConfigLoader, get_config
from config.loader import (
    DEFAULT_EFFORT_ORDER,
    get_critical_horizon_days,
    get_default_effort,
    get_default_effort_rank,
    get_effort_order,
    get_knowledge_base_version,
    get_llm_max_tokens,
    get_llm_model,
    get_llm_system_prompt,
    get_llm_max_retries,
    get_llm_temperature,
    get_llm_timeout_seconds,
    get_provider_batch_size,
)


class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_singleton(self):
        assert ConfigLoader() is ConfigLoader()
        assert get_config() is ConfigLoader()

    def test_dot_notation(self):
        config = get_config()
        assert config.get("prioritizer.critical_horizon_days") == 180
        assert config.get("nonexistent.key", default=100) == 100
        assert config.get("llm.model.deeper", default="x") == "x"

    def test_section(self):
        section = get_config().get_section("actions")
        assert section["default_effort"] == "2-4 weeks"
        assert get_config().get_section("missing") == {}


class TestGetters:
    """Shipped values match the documented defaults."""

    def test_llm_settings(self):
        assert get_llm_model()
        assert get_llm_max_tokens() == 500
        assert get_llm_temperature() == 0.3
        assert get_llm_system_prompt().startswith("You are a compliance advisor")
        assert get_llm_timeout_seconds() == 60
        assert get_llm_max_retries() == 2

    def test_prioritizer_settings(self):
        assert get_critical_horizon_days() == 180
        assert get_effort_order() == DEFAULT_EFFORT_ORDER
        assert get_default_effort_rank() == 3

    def test_effort_order_is_a_copy(self):
        get_effort_order()["1-2 weeks"] = 99
        assert get_effort_order()["1-2 weeks"] == 1

    def test_action_and_report_settings(self):
        assert get_default_effort() == "2-4 weeks"
        assert get_provider_batch_size() == 5
        assert get_knowledge_base_version() == "2025.1"
