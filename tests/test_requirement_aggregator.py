"""Tests for requirement aggregation, market readiness and the summary."""
from __future__ import annotations

from conftest import make_requirement, make_result

from jurisdictions.aggregator import (
    BLOCKED_TIME,
    READY_TIME,
    aggregate,
    build_market_readiness,
    readiness_for,
    summarize,
)
from models.results import ArtifactRequirement
from models.shared import MarketReadinessStatus, RiskLevel


def _artifact(required: bool = True) -> ArtifactRequirement:
    return ArtifactRequirement(
        type="dpia",
        name="DPIA",
        required=required,
        legal_basis="Article 35",
        description="Assess the processing",
    )


class TestAggregate:
    """Tests for raw cross-jurisdiction totals."""

    def test_empty(self):
        """No results gives zero counts and no highest risk."""
        aggregated = aggregate([])
        assert aggregated.total_actions == 0
        assert aggregated.total_artifacts == 0
        assert aggregated.highest_risk_level is None

    def test_counts_are_raw(self):
        """An action emitted by two jurisdictions is counted twice."""
        shared = make_requirement(id="shared", priority="critical")
        results = [
            make_result("eu-gdpr", actions=[shared], artifacts=[_artifact()]),
            make_result("uk", actions=[shared, make_requirement(id="other", priority="recommended")]),
        ]
        aggregated = aggregate(results)
        assert aggregated.total_actions == 3
        assert aggregated.total_artifacts == 1
        assert len(aggregated.all_actions) == 3

    def test_highest_risk_first_wins_ties(self):
        """The highest level wins; between equals the first result is kept."""
        results = [
            make_result("a", level=RiskLevel.LIMITED, justification="first limited"),
            make_result("b", level=RiskLevel.HIGH, justification="first high"),
            make_result("c", level=RiskLevel.HIGH, justification="second high"),
        ]
        assert aggregate(results).highest_risk_level.justification == "first high"


class TestReadiness:
    """Tests for per-market launch verdicts."""

    def test_ready_when_nothing_required(self):
        """No required artifacts or actions means ready."""
        result = make_result(actions=[make_requirement(priority="recommended")])
        readiness = readiness_for(result)
        assert readiness.status == MarketReadinessStatus.READY
        assert readiness.blockers == []
        assert readiness.estimated_time_to_compliance == READY_TIME

    def test_optional_artifacts_do_not_block_ready(self):
        """Artifacts marked not required do not count."""
        result = make_result(artifacts=[_artifact(required=False)])
        assert readiness_for(result).status == MarketReadinessStatus.READY

    def test_required_artifact_alone_needs_action(self):
        result = make_result(artifacts=[_artifact()])
        assert readiness_for(result).status == MarketReadinessStatus.ACTION_REQUIRED

    def test_blocked_when_unacceptable(self):
        """Unacceptable risk with required items blocks, falling back to the justification."""
        result = make_result(
            level=RiskLevel.UNACCEPTABLE,
            actions=[make_requirement(priority="critical")],
            justification="Prohibited practice",
        )
        readiness = readiness_for(result)
        assert readiness.status == MarketReadinessStatus.BLOCKED
        assert readiness.blockers == ["Prohibited practice"]
        assert readiness.estimated_time_to_compliance == BLOCKED_TIME

    def test_blocked_when_prohibition_fired(self):
        """A fired prohibition trigger blocks even below unacceptable, and names the blockers."""
        result = make_result(
            level=RiskLevel.HIGH,
            actions=[make_requirement(priority="critical")],
            prohibited=["Social scoring"],
        )
        readiness = readiness_for(result)
        assert readiness.status == MarketReadinessStatus.BLOCKED
        assert readiness.blockers == ["Social scoring"]

    def test_action_required_time_is_largest_effort(self):
        """The estimate is the longest required effort."""
        result = make_result(
            level=RiskLevel.HIGH,
            actions=[
                make_requirement(id="a", priority="critical", effort="1-2 weeks"),
                make_requirement(id="b", priority="important", effort="6-12 weeks"),
                make_requirement(id="c", priority="recommended", effort="8-16 weeks"),
            ],
        )
        readiness = readiness_for(result)
        assert readiness.status == MarketReadinessStatus.ACTION_REQUIRED
        assert readiness.estimated_time_to_compliance == "6-12 weeks"

    def test_action_required_default_time(self):
        """Required actions without effort fall back to the configured default."""
        result = make_result(actions=[make_requirement(priority="critical")])
        assert readiness_for(result).estimated_time_to_compliance == "2-4 weeks"

    def test_build_preserves_order(self):
        results = [make_result("uk"), make_result("brazil"), make_result("china")]
        assert [m.jurisdiction for m in build_market_readiness(results)] == ["uk", "brazil", "china"]


class TestSummarize:
    """Tests for highest-risk, lowest-friction and blocker summary."""

    def test_empty_is_not_applicable(self):
        summary = summarize([], [])
        assert summary.highest_risk_market == "N/A"
        assert summary.lowest_friction_market == "N/A"
        assert summary.critical_blockers == []

    def test_markets_and_blockers(self):
        """First result wins ties; blockers come only from blocked markets."""
        results = [
            make_result("uk", level=RiskLevel.LIMITED),
            make_result(
                "eu-ai-act",
                level=RiskLevel.UNACCEPTABLE,
                actions=[make_requirement(priority="critical")],
                prohibited=["Social scoring"],
            ),
            make_result("brazil", level=RiskLevel.LIMITED),
            make_result("us-tx", level=RiskLevel.MINIMAL),
            make_result("china", level=RiskLevel.MINIMAL),
        ]
        summary = summarize(results, build_market_readiness(results))
        assert summary.highest_risk_market == "eu-ai-act"
        assert summary.lowest_friction_market == "us-tx"
        assert summary.critical_blockers == ["Social scoring"]
