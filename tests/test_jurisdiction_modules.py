"""Tests for the built-in jurisdiction rule modules."""
from __future__ import annotations

import pytest

from conftest import make_context

from jurisdictions.aggregator import readiness_for
from jurisdictions.modules import china, eu_ai_act, eu_gdpr
from jurisdictions.requirement_mapper import map_all, map_one
from models.shared import BUILTIN_JURISDICTIONS, ActionPriority, MarketReadinessStatus, RiskLevel


def _result(registry, ctx, jurisdiction):
    outcome = map_one(ctx, jurisdiction, registry=registry)
    assert outcome.ok, outcome.error
    return outcome.value


def _action_ids(result):
    return [a.id for a in result.all_actions()]


class TestAllBuiltins:
    """Properties every built-in module must hold."""

    @pytest.mark.parametrize("fixture_name", ["minimal_context", "hiring_context", "chatbot_context"])
    def test_never_raises(self, request, registry, fixture_name):
        """Every module maps every well-formed context without error."""
        ctx = request.getfixturevalue(fixture_name)
        mapped = map_all(ctx, BUILTIN_JURISDICTIONS, registry=registry)
        assert mapped.errors == []
        assert len(mapped.results) == len(BUILTIN_JURISDICTIONS)

    def test_deterministic(self, registry, hiring_context):
        """Equal input gives equal output."""
        first = map_all(hiring_context, BUILTIN_JURISDICTIONS, registry=registry)
        second = map_all(hiring_context, BUILTIN_JURISDICTIONS, registry=registry)
        assert [r.model_dump() for r in first.results] == [r.model_dump() for r in second.results]

    def test_actions_tagged_with_emitting_jurisdiction(self, registry, hiring_context, chatbot_context):
        for ctx in (hiring_context, chatbot_context):
            for result in map_all(ctx, BUILTIN_JURISDICTIONS, registry=registry).results:
                for req in result.all_actions():
                    assert req.jurisdictions == [result.jurisdiction]


class TestEuAiAct:
    """Tests for the EU AI Act module."""

    def test_social_scoring_is_unacceptable_and_blocked(self, registry, social_scoring_context):
        result = _result(registry, social_scoring_context, "eu-ai-act")
        risk = result.risk_classification

        assert risk.level == RiskLevel.UNACCEPTABLE
        assert "art5-1c-social-scoring" in risk.applicable_categories
        assert risk.prohibited_practices
        assert "eu-ai-act-stop-prohibited" in _action_ids(result)

        readiness = readiness_for(result)
        assert readiness.status == MarketReadinessStatus.BLOCKED
        assert readiness.blockers == risk.prohibited_practices

    def test_minimal_context(self, registry, minimal_context):
        result = _result(registry, minimal_context, "eu-ai-act")
        assert result.risk_classification.level == RiskLevel.MINIMAL
        assert result.risk_classification.prohibited_practices == []

    def test_gpai_provider_gets_gpai_obligations(self):
        ctx = make_context(
            description="Foundation model offered to developers",
            product_type="foundation-model",
            gpai_info={"is_gpai_model": True, "gpai_role": "provider"},
        )
        gpai = eu_ai_act.classify_gpai(ctx)
        assert gpai is not None and gpai.is_gpai
        assert gpai.role == "provider"
        assert "Article 53(1)(a)" in gpai.provisions
        assert not gpai.has_systemic_risk

    def test_open_source_gpai_reduced_obligations(self):
        ctx = make_context(
            description="Open model",
            gpai_info={"is_gpai_model": True, "gpai_role": "provider", "is_open_source": True},
        )
        gpai = eu_ai_act.classify_gpai(ctx)
        assert "Article 53(2)" in gpai.provisions
        assert "Article 53(1)(a)" not in gpai.provisions

    def test_no_gpai_for_plain_classifier(self, minimal_context):
        assert eu_ai_act.classify_gpai(minimal_context) is None


class TestEuGdpr:
    """Tests for the GDPR module."""

    def test_no_personal_data_is_ready(self, registry):
        result = _result(registry, make_context(data_processed=("public",)), "eu-gdpr")
        assert result.risk_classification.level == RiskLevel.MINIMAL
        assert result.required_actions == []
        assert readiness_for(result).status == MarketReadinessStatus.READY

    def test_personal_data_is_limited(self, registry):
        result = _result(registry, make_context(data_processed=("personal",)), "eu-gdpr")
        assert result.risk_classification.level == RiskLevel.LIMITED
        assert result.risk_classification.applicable_categories == ["general-processing"]
        assert "gdpr-legal-basis-assessment" in [a.id for a in result.required_actions]
        assert readiness_for(result).status == MarketReadinessStatus.ACTION_REQUIRED

    def test_health_data_requires_dpia(self, registry):
        result = _result(registry, make_context(data_processed=("personal", "health")), "eu-gdpr")
        assert result.risk_classification.level == RiskLevel.HIGH
        assert "dpia-sensitive-data-processing" in result.risk_classification.applicable_categories
        assert "gdpr-conduct-dpia" in [a.id for a in result.required_actions]
        assert "dpia" in [a.type.value for a in result.required_artifacts]

    def test_dpia_triggers_need_personal_data(self):
        """Keyword triggers alone do not raise the tier without personal data."""
        ctx = make_context(description="CCTV surveillance monitor for public space", data_processed=("public",))
        assert eu_gdpr.classify_risk(ctx).level == RiskLevel.MINIMAL


class TestEmploymentJurisdictions:
    """Hiring tools across New York, Illinois and the UK."""

    def test_new_york_ll144(self, registry, hiring_context):
        result = _result(registry, hiring_context, "us-ny")
        assert result.risk_classification.level == RiskLevel.HIGH
        assert "ll144-aedt-hiring" in result.risk_classification.applicable_categories
        assert "us-ny-ll144-conduct-audit" in _action_ids(result)

    def test_new_york_advisory_tool_not_aedt(self, registry, hiring_context):
        ctx = hiring_context.model_copy(update={"decision_impact": "advisory"})
        assert _result(registry, ctx, "us-ny").risk_classification.level == RiskLevel.MINIMAL

    def test_illinois_employment(self, registry, hiring_context):
        result = _result(registry, hiring_context, "us-il")
        assert "il-hra-ai-employment" in result.risk_classification.applicable_categories

    def test_uk_automated_employment(self, registry, hiring_context):
        risk = _result(registry, hiring_context, "uk").risk_classification
        assert risk.level == RiskLevel.HIGH
        assert risk.applicable_categories[0] == "automated-employment"


class TestChina:
    """Tests for CAC filing logic."""

    def test_public_genai_is_high_with_critical_filing(self, registry, chatbot_context):
        result = _result(registry, chatbot_context, "china")
        assert result.risk_classification.level == RiskLevel.HIGH
        filing = [a for a in result.all_actions() if a.id == "cn-algorithm-filing"]
        assert len(filing) == 1
        assert filing[0].priority == ActionPriority.CRITICAL

    @pytest.mark.parametrize(
        "status,priority,effort",
        [
            ("filed", ActionPriority.IMPORTANT, "2-4 weeks"),
            ("approved", ActionPriority.RECOMMENDED, "ongoing"),
        ],
    )
    def test_filing_status_lowers_priority(self, chatbot_context, status, priority, effort):
        gen = chatbot_context.generative_ai_context.model_copy(update={"algorithm_filing_status": status})
        ctx = chatbot_context.model_copy(update={"generative_ai_context": gen})
        filing = china._filing_action(ctx)
        assert filing.priority == priority
        assert filing.estimated_effort == effort

    def test_internal_tool_needs_no_filing(self):
        ctx = make_context(description="Internal sales dashboard", user_populations=("employees",))
        assert not china.requires_algorithm_filing(ctx)
