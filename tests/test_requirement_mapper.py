"""Tests for the requirement mapper."""
from __future__ import annotations

from conftest import make_context

from jurisdictions.contract import RuleModule
from jurisdictions.requirement_mapper import group_provisions_by_law, map_all, map_one
from jurisdictions.shared import action, provision
from models.results import ComplianceTimeline, RiskClassification
from models.shared import ActionPriority, RiskLevel


def _classify(ctx):
    return RiskClassification(level=RiskLevel.LIMITED, justification="stub")


def _provisions(ctx, risk):
    return [
        provision("p1", "Law A", "Art 1", "One", "s", "r"),
        provision("p2", "Law B", "Art 2", "Two", "s", "r"),
        provision("p3", "Law A", "Art 3", "Three", "s", "r"),
    ]


def _actions(ctx, risk):
    return [
        action("stub", "a-critical", "Critical", "d", "critical", "Art 1"),
        action("stub", "a-important", "Important", "d", "important", "Art 2"),
        action("stub", "a-recommended", "Recommended", "d", "recommended", "Art 3"),
    ]


def _explode(ctx, risk):
    raise RuntimeError("module fault")


STUB = RuleModule(
    id="stub",
    name="Stub",
    jurisdiction="stub",
    classify=_classify,
    provisions=_provisions,
    artifacts=lambda ctx, risk: [],
    actions=_actions,
    schedule=lambda ctx, risk: ComplianceTimeline(),
)

BROKEN = RuleModule(
    id="broken",
    name="Broken",
    jurisdiction="broken",
    classify=_classify,
    provisions=_explode,
    artifacts=lambda ctx, risk: [],
    actions=_actions,
    schedule=lambda ctx, risk: ComplianceTimeline(),
)


class TestMapOne:
    """Tests for single-jurisdiction evaluation."""

    def test_splits_actions_by_priority(self, empty_registry):
        """Critical and important actions are required, recommended ones are not."""
        empty_registry.register("stub", "Stub", "r", "d", STUB)
        outcome = map_one(make_context(), "stub", registry=empty_registry)

        assert outcome.ok
        result = outcome.value
        assert [a.id for a in result.required_actions] == ["a-critical", "a-important"]
        assert [a.id for a in result.recommended_actions] == ["a-recommended"]
        assert all(a.priority != ActionPriority.RECOMMENDED for a in result.required_actions)

    def test_groups_provisions_by_law(self, empty_registry):
        """Provisions are grouped under their law in first-seen order."""
        empty_registry.register("stub", "Stub", "r", "d", STUB)
        result = map_one(make_context(), "stub", registry=empty_registry).value

        assert [law.name for law in result.applicable_laws] == ["Law A", "Law B"]
        assert [p.id for p in result.applicable_laws[0].provisions] == ["p1", "p3"]

    def test_unregistered_is_failure(self, empty_registry):
        """An unknown id never raises."""
        outcome = map_one(make_context(), "atlantis", registry=empty_registry)
        assert not outcome.ok
        assert "atlantis" in outcome.error

    def test_module_exception_is_failure(self, empty_registry):
        """A fault inside a module comes back as a failed result."""
        empty_registry.register("broken", "Broken", "r", "d", BROKEN)
        outcome = map_one(make_context(), "broken", registry=empty_registry)
        assert not outcome.ok
        assert "module fault" in outcome.error


class TestMapAll:
    """Tests for batch evaluation."""

    def test_empty_input(self, registry):
        """No targets gives no results and no errors."""
        mapped = map_all(make_context(target_markets=()), registry=registry)
        assert mapped.results == []
        assert mapped.errors == []

    def test_defaults_to_target_markets(self, registry):
        """Without explicit targets the context's markets are used."""
        mapped = map_all(make_context(target_markets=("uk", "brazil")), registry=registry)
        assert [r.jurisdiction for r in mapped.results] == ["uk", "brazil"]

    def test_duplicates_collapse(self, registry):
        """Repeated ids are evaluated once, in first-occurrence order."""
        mapped = map_all(make_context(), ["eu-gdpr", "uk", "eu-gdpr"], registry=registry)
        assert [r.jurisdiction for r in mapped.results] == ["eu-gdpr", "uk"]

    def test_results_plus_errors_equals_unique_ids(self, registry):
        """Every unique requested id ends up in exactly one of the two lists."""
        registry.register("broken", "Broken", "r", "d", BROKEN)
        ids = ["eu-gdpr", "atlantis", "broken", "uk", "atlantis"]

        mapped = map_all(make_context(), ids, registry=registry)

        assert len(mapped.results) + len(mapped.errors) == 4
        assert [e.jurisdiction for e in mapped.errors] == ["atlantis", "broken"]
        assert [r.jurisdiction for r in mapped.results] == ["eu-gdpr", "uk"]

    def test_one_failure_does_not_abort_batch(self, registry):
        """Jurisdictions after a failing one are still mapped."""
        registry.register("broken", "Broken", "r", "d", BROKEN)
        mapped = map_all(make_context(), ["broken", "brazil"], registry=registry)
        assert [r.jurisdiction for r in mapped.results] == ["brazil"]
        assert len(mapped.errors) == 1


class TestGroupProvisionsByLaw:
    def test_empty(self):
        assert group_provisions_by_law("x", []) == []

    def test_law_ids_are_scoped_to_jurisdiction(self):
        laws = group_provisions_by_law("uk", _provisions(None, None))
        assert [law.id for law in laws] == ["uk-law-a", "uk-law-b"]
        assert all(law.jurisdiction == "uk" for law in laws)

    def test_grouped_provisions_are_copies(self):
        source = _provisions(None, None)
        laws = group_provisions_by_law("uk", source)
        assert laws[0].provisions[0] == source[0]
        assert laws[0].provisions[0] is not source[0]

    def test_mutating_a_result_leaves_later_mappings_unchanged(self, registry, hiring_context):
        """Module provision tables are shared; a caller's edits must not leak into the next run."""
        first = map_one(hiring_context, "us-ny", registry=registry).value
        expected = map_one(hiring_context, "us-ny", registry=registry).value.model_dump()

        first.applicable_laws[0].provisions[0].title = "Edited by caller"
        first.applicable_laws[0].provisions.clear()

        again = map_one(hiring_context, "us-ny", registry=registry).value
        assert again.model_dump() == expected
