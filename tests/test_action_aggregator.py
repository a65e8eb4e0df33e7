"""Tests for merging jurisdiction-scoped actions into the deterministic plan."""
from __future__ import annotations

import itertools

from conftest import make_context, make_requirement, make_result

from actions.aggregator import (
    build_action_item,
    collect_requirements,
    fallback_best_practice,
    generate_deterministic,
    merge_actions,
)
from actions.library import get_action_by_id
from jurisdictions.contract import RuleModule
from jurisdictions.requirement_mapper import map_all
from jurisdictions.shared import action
from models.results import ComplianceTimeline, RiskClassification
from models.shared import ActionPriority, RiskLevel


def _merged_items(requirements):
    return [build_action_item(m).model_dump() for m in merge_actions(requirements)]


class TestMergeActions:
    """Tests for the keyed fold."""

    def test_one_item_per_id(self):
        reqs = [
            make_requirement(id="a", jurisdictions=("eu-gdpr",)),
            make_requirement(id="b", jurisdictions=("uk",)),
            make_requirement(id="a", jurisdictions=("uk",)),
        ]
        merged = merge_actions(reqs)
        assert [m.winner.id for m in merged] == ["a", "b"]

    def test_higher_priority_wins_content(self):
        """The heavier requirement supplies title, description and priority."""
        reqs = [
            make_requirement(id="a", priority="recommended", title="Soft", jurisdictions=("uk",)),
            make_requirement(id="a", priority="critical", title="Hard", jurisdictions=("eu-gdpr",)),
        ]
        item = build_action_item(merge_actions(reqs)[0])
        assert item.title == "Hard"
        assert item.base_priority == ActionPriority.CRITICAL

    def test_scope_is_unioned_winner_first(self):
        """Scope starts with the winner's jurisdictions, then the rest sorted."""
        reqs = [
            make_requirement(id="a", priority="important", jurisdictions=("uk",)),
            make_requirement(id="a", priority="recommended", jurisdictions=("brazil",)),
            make_requirement(id="a", priority="critical", jurisdictions=("us-tx",)),
            make_requirement(id="a", priority="recommended", jurisdictions=("china",)),
        ]
        merged = merge_actions(reqs)[0]
        assert merged.jurisdictions == ["us-tx", "brazil", "china", "uk"]

    def test_repeated_jurisdiction_not_duplicated(self):
        reqs = [
            make_requirement(id="a", jurisdictions=("uk",)),
            make_requirement(id="a", jurisdictions=("uk",)),
        ]
        assert merge_actions(reqs)[0].jurisdictions == ["uk"]

    def test_merge_is_order_independent(self):
        """Every permutation of the inputs produces the same merged items."""
        reqs = [
            make_requirement(id="a", priority="important", title="Alpha", jurisdictions=("uk",)),
            make_requirement(id="a", priority="important", title="Beta", jurisdictions=("eu-gdpr",)),
            make_requirement(id="a", priority="recommended", title="Gamma", jurisdictions=("brazil",)),
            make_requirement(id="b", priority="critical", title="Other", jurisdictions=("china",)),
            make_requirement(id="b", priority="critical", title="Other", jurisdictions=("singapore",)),
        ]
        expected = _merged_items(reqs)
        for perm in itertools.permutations(reqs):
            assert _merged_items(perm) == expected

    def test_equal_weight_tie_uses_smallest_content(self):
        """Between equal priorities the lexicographically smallest content wins."""
        reqs = [
            make_requirement(id="a", priority="important", title="Beta", jurisdictions=("uk",)),
            make_requirement(id="a", priority="important", title="Alpha", jurisdictions=("eu-gdpr",)),
        ]
        merged = merge_actions(reqs)[0]
        assert merged.winner.title == "Alpha"
        assert merged.jurisdictions == ["eu-gdpr", "uk"]

    def test_merge_is_associative(self):
        """Merging in two stages equals merging everything at once."""
        left = [make_requirement(id="a", priority="recommended", jurisdictions=("uk",))]
        right = [
            make_requirement(id="a", priority="critical", title="Hard", jurisdictions=("china",)),
            make_requirement(id="a", priority="important", jurisdictions=("brazil",)),
        ]
        staged = merge_actions([*left, merge_actions(right)[0].winner])[0]
        staged.scope.update(merge_actions(right)[0].scope)
        once = merge_actions([*left, *right])[0]
        assert staged.winner == once.winner
        assert staged.jurisdictions == once.jurisdictions


class TestCollectRequirements:
    def test_fills_missing_scope_from_result(self):
        req = make_requirement(id="a", jurisdictions=())
        collected = collect_requirements([make_result("brazil", actions=[req])])
        assert collected[0].jurisdictions == ["brazil"]

    def test_includes_recommended(self):
        reqs = [make_requirement(id="a", priority="critical"), make_requirement(id="b", priority="recommended")]
        collected = collect_requirements([make_result(actions=reqs)])
        assert {r.id for r in collected} == {"a", "b"}


class TestBuildActionItem:
    """Tests for catalog enrichment of merged actions."""

    def test_catalog_entry_supplies_criteria_and_dependencies(self):
        entry = get_action_by_id("gdpr-conduct-dpia")
        req = make_requirement(id="gdpr-conduct-dpia", priority="critical", effort=None)
        item = build_action_item(merge_actions([req])[0])

        assert item.verification_criteria == list(entry.verification_criteria)
        assert item.depends_on == list(entry.depends_on)
        assert item.estimated_effort == entry.estimated_effort

    def test_requirement_effort_beats_catalog(self):
        req = make_requirement(id="gdpr-conduct-dpia", effort="1-2 weeks")
        assert build_action_item(merge_actions([req])[0]).estimated_effort == "1-2 weeks"

    def test_unknown_action_gets_synthesized_criterion(self):
        """Every item has at least one verification criterion."""
        req = make_requirement(id="not-in-catalog", title="Publish model card")
        item = build_action_item(merge_actions([req])[0])
        assert item.verification_criteria == ["Publish model card completed and documented"]
        assert item.estimated_effort == "2-4 weeks"
        assert item.depends_on == []

    def test_fallback_best_practice(self):
        entry = get_action_by_id("gdpr-conduct-dpia")
        text = fallback_best_practice("Run a DPIA.", entry)
        assert text.startswith("Run a DPIA. Key verification steps: ")
        assert entry.verification_criteria[0] in text
        assert entry.verification_criteria[3] not in text
        assert fallback_best_practice("Run a DPIA.", None) == "Run a DPIA."


def _stub_module(jurisdiction: str, priority: str) -> RuleModule:
    def _actions(ctx, risk):
        return [
            action(
                jurisdiction,
                "transparency-notice-shared",
                "Publish transparency notice",
                "Tell users how the AI system uses their data.",
                priority,
                "Article 13",
            )
        ]

    return RuleModule(
        id=jurisdiction,
        name=jurisdiction.upper(),
        jurisdiction=jurisdiction,
        classify=lambda ctx: RiskClassification(level=RiskLevel.LIMITED, justification="stub"),
        provisions=lambda ctx, risk: [],
        artifacts=lambda ctx, risk: [],
        actions=_actions,
        schedule=lambda ctx, risk: ComplianceTimeline(),
    )


class TestGenerateDeterministic:
    """End-to-end plan generation without a provider."""

    def test_shared_action_lands_once_in_critical(self, empty_registry, now):
        """The same action from two jurisdictions appears once, in the heavier tier, with both in scope."""
        empty_registry.register("eu-gdpr", "EU", "Europe", "d", _stub_module("eu-gdpr", "critical"))
        empty_registry.register("uk", "UK", "Europe", "d", _stub_module("uk", "recommended"))

        for order in (["eu-gdpr", "uk"], ["uk", "eu-gdpr"]):
            mapped = map_all(make_context(), order, registry=empty_registry)
            plan = generate_deterministic(mapped.results, now)

            shared = [i for i in plan.all_items() if i.id == "transparency-notice-shared"]
            assert len(shared) == 1
            assert plan.bucket_of("transparency-notice-shared") == ActionPriority.CRITICAL
            assert plan.important == [] and plan.recommended == []
            assert shared[0].jurisdiction == ["eu-gdpr", "uk"]

    def test_empty_results(self, now):
        plan = generate_deterministic([], now)
        assert plan.total == 0

    def test_plan_covers_every_merged_id(self, registry, hiring_context, now):
        """Buckets are disjoint and together hold exactly the merged ids."""
        mapped = map_all(hiring_context, registry=registry)
        plan = generate_deterministic(mapped.results, now)

        ids = [i.id for i in plan.all_items()]
        merged_ids = {m.winner.id for m in merge_actions(collect_requirements(mapped.results))}
        assert len(ids) == len(set(ids))
        assert set(ids) == merged_ids
        assert all(i.verification_criteria for i in plan.all_items())
