"""Priority classification, ordering and bucketing of merged actions.

Ordering is a fixed four-key comparison:

1. effective priority, highest first
2. deadline, earliest first; missing or unparsable deadlines sort last
3. estimated effort, shortest first (ordinal table from config)
4. title, case-sensitive ascending

The effective priority of an item is its declared ``base_priority`` when it
has one. The content heuristic ``classify_priority`` is only consulted for
items that carry no declared priority.
"""
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Protocol, Sequence

import structlog

from config.loader import get_critical_horizon_days, get_default_effort_rank, get_effort_order
from models.actions import ActionItem, ActionPlan
from models.shared import PRIORITY_WEIGHTS, ActionPriority

logger = structlog.get_logger(__name__)

PROHIBITION_MARKERS = ("prohibited", "cannot be placed on", "do not deploy")
STATUTORY_MARKERS = ("Article", "Section", "Regulation", "Act", "SR 11-7", "ECOA")
VOLUNTARY_MARKERS = ("voluntary", "recommended", "best practice")

OVERDUE_PREFIX = "[OVERDUE - compliance required immediately] "

_NO_DEADLINE = date.max.toordinal()


class Classifiable(Protocol):
    title: str
    description: str
    legal_basis: str
    deadline: Optional[str]


def parse_deadline(value: Optional[str]) -> Optional[date]:
    """Parse an ISO date or datetime string; anything else is no deadline."""
    if not value:
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text[:10]) if len(text) >= 10 else None
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def _today(now: Optional[datetime]) -> date:
    return (now or datetime.now()).date()


def deadline_ordinal(value: Optional[str]) -> int:
    parsed = parse_deadline(value)
    return parsed.toordinal() if parsed else _NO_DEADLINE


def effort_rank(effort: Optional[str]) -> int:
    if not effort:
        return get_default_effort_rank()
    return get_effort_order().get(effort.strip(), get_default_effort_rank())


def classify_priority(action: Classifiable, now: Optional[datetime] = None) -> ActionPriority:
    """Derive a priority tier from an action's content alone.

    First match wins:
        - prohibition language in title or description: critical
        - parsable deadline within the horizon: critical, later: important
        - statutory citation in the legal basis: important, or recommended
          when the description reads as voluntary
        - otherwise recommended
    """
    description = action.description.lower()
    title = action.title.lower()

    if any(m in description or m in title for m in PROHIBITION_MARKERS):
        return ActionPriority.CRITICAL

    due = parse_deadline(action.deadline)
    if due is not None:
        horizon = _today(now) + timedelta(days=get_critical_horizon_days())
        return ActionPriority.CRITICAL if due <= horizon else ActionPriority.IMPORTANT

    if any(m in action.legal_basis for m in STATUTORY_MARKERS):
        if any(m in description for m in VOLUNTARY_MARKERS):
            return ActionPriority.RECOMMENDED
        return ActionPriority.IMPORTANT

    return ActionPriority.RECOMMENDED


def effective_priority(item: ActionItem, now: Optional[datetime] = None) -> ActionPriority:
    """Declared priority when present, otherwise the content heuristic."""
    if item.base_priority is not None:
        return item.base_priority
    return classify_priority(item, now)


def _within_bucket_key(item: ActionItem) -> tuple[int, int, str]:
    return (deadline_ordinal(item.deadline), effort_rank(item.estimated_effort), item.title)


def sort_key(item: ActionItem, now: Optional[datetime] = None) -> tuple[int, int, int, str]:
    return (-PRIORITY_WEIGHTS[effective_priority(item, now)], *_within_bucket_key(item))


def compare(a: ActionItem, b: ActionItem, now: Optional[datetime] = None) -> int:
    """Three-way comparison on the four-key order. Returns -1, 0 or 1."""
    ka, kb = sort_key(a, now), sort_key(b, now)
    return (ka > kb) - (ka < kb)


def sort_actions(actions: Iterable[ActionItem], now: Optional[datetime] = None) -> list[ActionItem]:
    """Flat ordering of all actions by the four-key comparison."""
    return sorted(actions, key=lambda item: sort_key(item, now))


def bucket(actions: Iterable[ActionItem], now: Optional[datetime] = None) -> ActionPlan:
    """Partition actions into priority tiers, each sorted by keys 2-4.

    Every input item lands in exactly one tier.
    """
    tiers: dict[ActionPriority, list[ActionItem]] = {p: [] for p in ActionPriority}
    for item in actions:
        tiers[effective_priority(item, now)].append(item)

    return ActionPlan(
        critical=sorted(tiers[ActionPriority.CRITICAL], key=_within_bucket_key),
        important=sorted(tiers[ActionPriority.IMPORTANT], key=_within_bucket_key),
        recommended=sorted(tiers[ActionPriority.RECOMMENDED], key=_within_bucket_key),
    )


def annotate_overdue_actions(
    actions: Sequence[ActionItem],
    now: Optional[datetime] = None,
) -> list[ActionItem]:
    """Escalate actions whose deadline is already past to critical."""
    today = _today(now)
    annotated: list[ActionItem] = []
    for item in actions:
        due = parse_deadline(item.deadline)
        if due is None or due >= today:
            annotated.append(item)
            continue
        annotated.append(
            item.model_copy(
                update={
                    "description": OVERDUE_PREFIX + item.description,
                    "base_priority": ActionPriority.CRITICAL,
                }
            )
        )
    return annotated


def annotate_with_launch_date(actions: Sequence[ActionItem], launch_date: str) -> list[ActionItem]:
    """Append how many days each deadline falls after the planned launch.

    An unparsable launch date leaves the actions unchanged.
    """
    launch = parse_deadline(launch_date)
    if launch is None:
        return list(actions)

    annotated: list[ActionItem] = []
    for item in actions:
        due = parse_deadline(item.deadline)
        if due is None:
            annotated.append(item)
            continue
        days = (due - launch).days
        note = (
            " [DEADLINE PASSED relative to launch date]"
            if days <= 0
            else f" [{days} days before launch deadline]"
        )
        annotated.append(item.model_copy(update={"description": item.description + note}))
    return annotated


def detect_dependency_issues(plan: ActionPlan) -> list[str]:
    """Warn when an action depends on one sitting in a lower-priority tier."""
    tier_of: dict[str, ActionPriority] = {}
    for priority, items in (
        (ActionPriority.CRITICAL, plan.critical),
        (ActionPriority.IMPORTANT, plan.important),
        (ActionPriority.RECOMMENDED, plan.recommended),
    ):
        for item in items:
            tier_of[item.id] = priority

    warnings: list[str] = []
    for item in plan.all_items():
        own = tier_of[item.id]
        for dep_id in item.depends_on:
            dep = tier_of.get(dep_id)
            if dep is None:
                continue
            if PRIORITY_WEIGHTS[dep] < PRIORITY_WEIGHTS[own]:
                warnings.append(
                    f'Action "{item.title}" ({own.value}) depends on "{dep_id}" ({dep.value}); '
                    "consider elevating the dependency's priority"
                )
    if warnings:
        logger.info("dependency_issues_detected", count=len(warnings))
    return warnings


def prioritize_actions(actions: Sequence[ActionItem], now: Optional[datetime] = None) -> ActionPlan:
    """Escalate overdue actions, then bucket."""
    return bucket(annotate_overdue_actions(actions, now), now)
