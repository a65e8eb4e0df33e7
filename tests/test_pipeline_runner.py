"""Tests for report assembly and the run orchestrator."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from conftest import make_context

from jurisdictions.contract import RuleModule
from jurisdictions.shared import action
from models.results import ComplianceTimeline, RiskClassification
from models.shared import MarketReadinessStatus, RiskLevel
from pipeline_runner import DEFAULT_TIMELINE, PipelineRunner, build_report, create_runner
from providers.base import LLMRequest, LLMResponse
from utils.error_handler import ContextValidationError, ErrorCategory, LaunchReadyError


class FakeProvider:
    id = "fake"
    name = "Fake"
    model = "fake-model"

    def __init__(self, fail: bool = False):
        self.fail = fail

    def complete(self, request: LLMRequest) -> LLMResponse:
        if self.fail:
            raise RuntimeError("provider down")
        return LLMResponse(content="Tailored guidance.")


def _dated_module(jurisdiction: str, deadline: str) -> RuleModule:
    return RuleModule(
        id=jurisdiction,
        name=jurisdiction.upper(),
        jurisdiction=jurisdiction,
        classify=lambda ctx: RiskClassification(level=RiskLevel.HIGH, justification="stub"),
        provisions=lambda ctx, risk: [],
        artifacts=lambda ctx, risk: [],
        actions=lambda ctx, risk: [
            action(jurisdiction, "register-system", "Register system", "Register before launch.",
                   "important", "Article 49", "1-2 weeks", deadline)
        ],
        schedule=lambda ctx, risk: ComplianceTimeline(),
    )


class TestBuildReport:
    """Tests for build_report."""

    def test_hiring_report(self, registry, hiring_context, now):
        report = build_report(hiring_context, registry=registry, now=now)

        assert report.id == f"lr-{int(now.timestamp() * 1000)}"
        assert report.generated_at == now.isoformat()
        assert [r.jurisdiction for r in report.jurisdiction_results] == list(hiring_context.target_markets)
        assert [m.jurisdiction for m in report.summary.can_launch] == list(hiring_context.target_markets)
        assert report.mapping_errors == []
        assert report.action_errors == []
        assert report.metadata.provider == "none"
        assert report.metadata.knowledge_base_version == "2025.1"

    def test_totals_are_raw_counts(self, registry, hiring_context, now):
        report = build_report(hiring_context, registry=registry, now=now)
        raw = sum(len(r.all_actions()) for r in report.jurisdiction_results)
        assert report.summary.total_actions_needed == raw
        assert report.action_plan.total <= raw

    def test_social_scoring_blocks_eu(self, registry, social_scoring_context, now):
        report = build_report(social_scoring_context, registry=registry, now=now)

        eu = report.summary.can_launch[0]
        assert eu.status == MarketReadinessStatus.BLOCKED
        assert report.summary.critical_blockers == eu.blockers
        assert report.summary.highest_risk_market == "eu-ai-act"

    def test_unknown_market_recorded_not_raised(self, registry, now):
        report = build_report(make_context(), registry=registry, now=now, target_jurisdictions=["uk", "atlantis"])
        assert [r.jurisdiction for r in report.jurisdiction_results] == ["uk"]
        assert [e.jurisdiction for e in report.mapping_errors] == ["atlantis"]

    def test_conflicts_included(self, registry, chatbot_context, now):
        report = build_report(chatbot_context, registry=registry, now=now)
        assert "china-eu-content-review" in [c.id for c in report.conflicts]

    def test_no_markets(self, registry, now):
        report = build_report(make_context(), registry=registry, now=now)
        assert report.jurisdiction_results == []
        assert report.action_plan.total == 0
        assert report.summary.highest_risk_market == "N/A"
        assert report.summary.estimated_compliance_timeline == DEFAULT_TIMELINE

    def test_provider_guidance_and_metadata(self, registry, hiring_context, now):
        report = build_report(hiring_context, registry=registry, provider=FakeProvider(), now=now)
        assert report.metadata.provider == "fake"
        assert report.metadata.model == "fake-model"
        assert all(i.best_practice == "Tailored guidance." for i in report.action_plan.all_items())

    def test_provider_failure_degrades_per_action(self, registry, hiring_context, now):
        deterministic = build_report(hiring_context, registry=registry, now=now)
        degraded = build_report(hiring_context, registry=registry, provider=FakeProvider(fail=True), now=now)

        assert len(degraded.action_errors) == degraded.action_plan.total
        assert degraded.action_plan == deterministic.action_plan

    def test_launch_date_annotation(self, empty_registry, now):
        empty_registry.register("uk", "UK", "Europe", "d", _dated_module("uk", "2026-08-02"))
        ctx = make_context(target_markets=("uk",), launch_date="2026-07-03")

        report = build_report(ctx, registry=empty_registry, now=now)

        item = report.action_plan.all_items()[0]
        assert item.description.endswith("[30 days before launch deadline]")

    def test_report_serialises_to_json(self, registry, chatbot_context, now):
        payload = build_report(chatbot_context, registry=registry, now=now).model_dump(mode="json")
        assert json.loads(json.dumps(payload))["summary"]["can_launch"]


class TestPipelineRunner:
    """Tests for PipelineRunner file handling."""

    def test_missing_input(self, tmp_path: Path):
        with pytest.raises(LaunchReadyError) as exc_info:
            PipelineRunner(str(tmp_path / "missing.json"))
        assert exc_info.value.category == ErrorCategory.FILE_IO

    def test_default_output_name(self, tmp_path: Path):
        source = tmp_path / "product.json"
        source.write_text("{}", encoding="utf-8")
        runner = create_runner(str(source), output_dir=str(tmp_path / "out"))
        assert runner.output_file.parent == tmp_path / "out"
        assert runner.output_file.name.startswith("launchready_product_")

    def test_load_context(self, tmp_path: Path):
        source = tmp_path / "product.json"
        source.write_text(json.dumps({"description": "  Chat assistant  ", "target_markets": ["uk"]}), encoding="utf-8")
        ctx = PipelineRunner(str(source)).load_context()
        assert ctx.target_markets == ("uk",)

    @pytest.mark.parametrize(
        "payload",
        ["not json", json.dumps({"description": "x", "product_type": "toaster"}), json.dumps({})],
    )
    def test_invalid_context(self, tmp_path: Path, payload):
        source = tmp_path / "product.json"
        source.write_text(payload, encoding="utf-8")
        with pytest.raises(ContextValidationError):
            PipelineRunner(str(source)).load_context()

    def test_write_output_creates_directories(self, tmp_path: Path):
        source = tmp_path / "product.json"
        source.write_text("{}", encoding="utf-8")
        target = tmp_path / "nested" / "report.json"

        runner = PipelineRunner(str(source), output_path=str(target))
        runner.write_output({"ok": True})

        assert json.loads(target.read_text(encoding="utf-8")) == {"ok": True}
