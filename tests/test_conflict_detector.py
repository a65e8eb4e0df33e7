"""Tests for cross-jurisdiction tension detection."""
from __future__ import annotations

from conftest import make_context, make_result

from jurisdictions.conflict_detector import detect_conflicts
from models.shared import RiskLevel


def _ids(ctx, *jurisdictions, levels=None):
    levels = levels or {}
    results = [make_result(j, level=levels.get(j, RiskLevel.LIMITED)) for j in jurisdictions]
    return [t.id for t in detect_conflicts(ctx, results)]


class TestDetectConflicts:
    """Tests for detect_conflicts."""

    def test_single_jurisdiction_has_no_tensions(self, minimal_context):
        assert _ids(minimal_context, "eu-gdpr") == []
        assert detect_conflicts(minimal_context, []) == []

    def test_genai_chatbot_in_china_and_eu(self, chatbot_context):
        """A public GenAI product across China and the EU hits the content and data tensions."""
        ids = _ids(chatbot_context, "eu-ai-act", "eu-gdpr", "china")
        assert ids == [
            "china-eu-content-review",
            "gdpr-china-data-minimisation",
            "cross-border-data-transfer",
            "eu-china-content-labeling",
            "gdpr-erasure-china-retention",
            "gpai-opensource-china-filing",
        ]

    def test_transfer_tension_lists_mapped_regimes(self, minimal_context):
        results = [make_result("brazil"), make_result("uk"), make_result("china")]
        tension = next(t for t in detect_conflicts(minimal_context, results) if t.id == "cross-border-data-transfer")
        assert tension.jurisdictions == ["brazil", "china"]

    def test_non_generator_skips_labeling(self, minimal_context):
        ids = _ids(minimal_context, "eu-ai-act", "china")
        assert "china-eu-content-review" in ids
        assert "eu-china-content-labeling" not in ids

    def test_singapore_needs_high_risk_eu(self, minimal_context):
        assert "singapore-eu-proportionality" not in _ids(minimal_context, "singapore", "eu-ai-act")
        ids = _ids(minimal_context, "singapore", "eu-ai-act", levels={"eu-ai-act": RiskLevel.HIGH})
        assert "singapore-eu-proportionality" in ids

    def test_us_china_transparency(self, minimal_context):
        assert "us-china-transparency" in _ids(minimal_context, "us-ca", "china")

    def test_agentic_framework_divergence(self):
        ctx = make_context(agentic_ai_context={"is_agentic": True})
        ids = _ids(ctx, "singapore", "uk")
        assert ids == ["agentic-ai-framework-divergence"]

    def test_financial_divergence(self):
        ctx = make_context(sector_context={"sector": "financial-services"})
        results = [make_result("uk"), make_result("singapore"), make_result("brazil")]
        tension = next(t for t in detect_conflicts(ctx, results) if t.id == "financial-ai-regulatory-divergence")
        assert tension.jurisdictions == ["uk", "singapore"]

    def test_duplicate_results_do_not_duplicate_tensions(self, chatbot_context):
        results = [make_result("china"), make_result("eu-gdpr"), make_result("china")]
        ids = [t.id for t in detect_conflicts(chatbot_context, results)]
        assert len(ids) == len(set(ids))
