"""Tests for priority classification, ordering and bucketing."""
from __future__ import annotations

import itertools
from datetime import datetime

import pytest

from actions.prioritizer import (
    OVERDUE_PREFIX,
    annotate_overdue_actions,
    annotate_with_launch_date,
    bucket,
    classify_priority,
    compare,
    detect_dependency_issues,
    effort_rank,
    parse_deadline,
    prioritize_actions,
    sort_actions,
)
from models.actions import ActionItem, ActionPlan
from models.shared import ActionPriority

NOW = datetime(2025, 6, 1)


def make_item(
    id: str = "a",
    title: str = "Action",
    description: str = "Do something",
    legal_basis: str = "Internal policy",
    deadline: str | None = None,
    effort: str = "2-4 weeks",
    base_priority: ActionPriority | None = None,
    depends_on: list[str] | None = None,
) -> ActionItem:
    """Create a test ActionItem."""
    return ActionItem(
        id=id,
        title=title,
        description=description,
        jurisdiction=["eu-gdpr"],
        legal_basis=legal_basis,
        estimated_effort=effort,
        deadline=deadline,
        verification_criteria=["done"],
        base_priority=base_priority,
        depends_on=depends_on or [],
    )


def _mixed_items() -> list[ActionItem]:
    """Declared and heuristic priorities, valid, missing and bogus deadlines, known and unknown efforts."""
    priorities = [ActionPriority.CRITICAL, ActionPriority.RECOMMENDED, None]
    deadlines = ["2025-09-01", None, "soon"]
    efforts = ["1-2 weeks", "ongoing"]
    titles = ["apple", "Zebra"]
    items = []
    for n, (priority, deadline, effort, title) in enumerate(
        itertools.product(priorities, deadlines, efforts, titles)
    ):
        items.append(
            make_item(
                id=f"item-{n}",
                title=title,
                deadline=deadline,
                effort=effort,
                base_priority=priority,
                legal_basis="GDPR Article 5" if n % 2 else "Internal policy",
            )
        )
    return items

class TestParseDeadline:
    @pytest.mark.parametrize("value", [None, "", "soon", "2025-13-45", "Q3 2026"])
    def test_invalid_is_none(self, value):
        """Absent or unparsable deadlines are treated as no deadline."""
        assert parse_deadline(value) is None

    def test_date_and_datetime(self):
        assert parse_deadline("2026-08-02").isoformat() == "2026-08-02"
        assert parse_deadline("2026-08-02T00:00:00Z").isoformat() == "2026-08-02"


class TestClassifyPriority:
    """Tests for the content-only heuristic."""

    def test_prohibition_language_is_critical(self):
        item = make_item(description="This practice is prohibited in the EU")
        assert classify_priority(item, NOW) == ActionPriority.CRITICAL

    def test_prohibition_beats_far_deadline(self):
        """Prohibition language wins even with a distant deadline."""
        item = make_item(title="Do not deploy in the EU", deadline="2030-01-01")
        assert classify_priority(item, NOW) == ActionPriority.CRITICAL

    def test_near_deadline_is_critical(self):
        item = make_item(deadline="2025-09-01")
        assert classify_priority(item, NOW) == ActionPriority.CRITICAL

    def test_horizon_boundary_is_critical(self):
        """A deadline exactly on the horizon counts as within it."""
        item = make_item(deadline="2025-11-28")
        assert classify_priority(item, NOW) == ActionPriority.CRITICAL

    def test_far_deadline_is_important(self):
        item = make_item(deadline="2027-01-01")
        assert classify_priority(item, NOW) == ActionPriority.IMPORTANT

    def test_statutory_citation_is_important(self):
        item = make_item(legal_basis="GDPR Article 35")
        assert classify_priority(item, NOW) == ActionPriority.IMPORTANT

    def test_statutory_but_voluntary_is_recommended(self):
        item = make_item(legal_basis="NIST AI RMF Act", description="A voluntary best practice")
        assert classify_priority(item, NOW) == ActionPriority.RECOMMENDED

    def test_unparsable_deadline_falls_through(self):
        item = make_item(deadline="next quarter")
        assert classify_priority(item, NOW) == ActionPriority.RECOMMENDED

    def test_default_is_recommended(self):
        assert classify_priority(make_item(), NOW) == ActionPriority.RECOMMENDED


class TestEffortRank:
    def test_known_and_unknown(self):
        assert effort_rank("1-2 weeks") < effort_rank("2-4 weeks") < effort_rank("6-12 weeks")
        assert effort_rank("ongoing") == 3
        assert effort_rank(None) == 3


class TestCompare:
    """Tests for the four-key ordering."""

    def test_priority_first(self):
        high = make_item(id="h", title="Z", base_priority=ActionPriority.CRITICAL)
        low = make_item(id="l", title="A", base_priority=ActionPriority.RECOMMENDED)
        assert compare(high, low, NOW) == -1
        assert compare(low, high, NOW) == 1

    def test_deadline_breaks_priority_tie(self):
        """Earlier deadline first; missing deadline last."""
        early = make_item(id="e", title="Z", deadline="2026-01-01", base_priority=ActionPriority.IMPORTANT)
        late = make_item(id="l", title="A", deadline="2027-01-01", base_priority=ActionPriority.IMPORTANT)
        none = make_item(id="n", title="A", base_priority=ActionPriority.IMPORTANT)
        assert [i.id for i in sort_actions([none, late, early], NOW)] == ["e", "l", "n"]

    def test_effort_then_title(self):
        quick = make_item(id="q", title="Z", effort="1-2 weeks", base_priority=ActionPriority.IMPORTANT)
        slow = make_item(id="s", title="A", effort="6-12 weeks", base_priority=ActionPriority.IMPORTANT)
        b = make_item(id="b", title="B", effort="6-12 weeks", base_priority=ActionPriority.IMPORTANT)
        assert [i.id for i in sort_actions([b, slow, quick], NOW)] == ["q", "s", "b"]

    def test_title_is_case_sensitive(self):
        upper = make_item(id="u", title="Zebra", base_priority=ActionPriority.IMPORTANT)
        lower = make_item(id="l", title="apple", base_priority=ActionPriority.IMPORTANT)
        assert compare(upper, lower, NOW) == -1

    def test_equal_items(self):
        a = make_item(base_priority=ActionPriority.IMPORTANT)
        assert compare(a, a, NOW) == 0

    def test_sort_is_stable_across_runs(self):
        """Sorting the same mixed input twice gives the same sequence."""
        items = _mixed_items()
        first = [i.id for i in sort_actions(items, NOW)]
        second = [i.id for i in sort_actions(items, NOW)]
        assert first == second
        assert sort_actions(sort_actions(items, NOW), NOW) == sort_actions(items, NOW)

    def test_compare_is_a_strict_weak_ordering(self):
        """Antisymmetric and transitive over every pair and triple of a mixed input."""
        items = _mixed_items()
        for a, b in itertools.product(items, repeat=2):
            assert compare(a, b, NOW) == -compare(b, a, NOW)
        for a, b, c in itertools.product(items, repeat=3):
            if compare(a, b, NOW) <= 0 and compare(b, c, NOW) <= 0:
                assert compare(a, c, NOW) <= 0


class TestBucket:
    """Tests for tier partitioning."""

    def test_empty_input(self):
        plan = bucket([], NOW)
        assert plan.critical == []
        assert plan.important == []
        assert plan.recommended == []

    def test_declared_priority_is_authoritative(self):
        """A declared tier overrides what the content heuristic would say."""
        item = make_item(
            description="This practice is prohibited",
            base_priority=ActionPriority.RECOMMENDED,
        )
        plan = bucket([item], NOW)
        assert plan.recommended == [item]
        assert plan.critical == []

    def test_heuristic_used_without_declared_priority(self):
        item = make_item(legal_basis="GDPR Article 30")
        assert bucket([item], NOW).important == [item]

    def test_partition_is_complete_and_disjoint(self):
        items = [
            make_item(id=str(i), title=f"T{i}", base_priority=p)
            for i, p in enumerate([ActionPriority.CRITICAL, ActionPriority.IMPORTANT, None, ActionPriority.CRITICAL])
        ]
        plan = bucket(items, NOW)
        ids = [i.id for i in plan.all_items()]
        assert sorted(ids) == sorted(i.id for i in items)
        assert len(ids) == len(set(ids))

    def test_each_bucket_sorted(self):
        b = make_item(id="b", title="B", base_priority=ActionPriority.CRITICAL)
        a = make_item(id="a", title="A", base_priority=ActionPriority.CRITICAL)
        dated = make_item(id="d", title="Z", deadline="2025-07-01", base_priority=ActionPriority.CRITICAL)
        assert [i.id for i in bucket([b, a, dated], NOW).critical] == ["d", "a", "b"]


class TestPostProcessing:
    """Tests for overdue escalation, launch-date notes and dependency warnings."""

    def test_overdue_escalates_to_critical(self):
        item = make_item(deadline="2025-02-02", base_priority=ActionPriority.RECOMMENDED)
        annotated = annotate_overdue_actions([item], NOW)[0]
        assert annotated.base_priority == ActionPriority.CRITICAL
        assert annotated.description.startswith(OVERDUE_PREFIX)
        assert item.description == "Do something"

    def test_future_deadline_untouched(self):
        item = make_item(deadline="2026-08-02", base_priority=ActionPriority.IMPORTANT)
        assert annotate_overdue_actions([item], NOW)[0] == item

    def test_prioritize_actions_buckets_overdue_as_critical(self):
        item = make_item(deadline="2024-01-01", base_priority=ActionPriority.RECOMMENDED)
        plan = prioritize_actions([item], NOW)
        assert [i.id for i in plan.critical] == ["a"]

    def test_launch_date_annotation(self):
        items = [
            make_item(id="before", deadline="2026-01-31"),
            make_item(id="after", deadline="2025-12-01"),
            make_item(id="none"),
        ]
        annotated = {i.id: i.description for i in annotate_with_launch_date(items, "2026-01-01")}
        assert annotated["before"].endswith("[30 days before launch deadline]")
        assert annotated["after"].endswith("[DEADLINE PASSED relative to launch date]")
        assert annotated["none"] == "Do something"

    def test_invalid_launch_date_is_noop(self):
        items = [make_item(deadline="2026-01-31")]
        assert annotate_with_launch_date(items, "someday") == items

    def test_dependency_in_lower_tier_warns(self):
        plan = ActionPlan(
            critical=[make_item(id="top", title="Top", depends_on=["base", "missing"])],
            recommended=[make_item(id="base", title="Base")],
        )
        warnings = detect_dependency_issues(plan)
        assert len(warnings) == 1
        assert '"base"' in warnings[0]

    def test_dependency_in_same_or_higher_tier_is_fine(self):
        plan = ActionPlan(
            critical=[make_item(id="base", title="Base")],
            important=[make_item(id="top", title="Top", depends_on=["base"])],
        )
        assert detect_dependency_issues(plan) == []
