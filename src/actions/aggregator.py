"""Merge jurisdiction-scoped action requirements into plan-ready items.

The merge is a fold keyed by action id. For each id:

- the requirement with the highest priority weight supplies the content
- equal weights are settled by the smallest content tuple
  (title, description, legal basis, effort, deadline, scope)
- jurisdiction scope is the union over every contributor

Because the winner is the maximum of a total order and the scope is a set
union, the result does not depend on the order results arrive in.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional, Sequence

import structlog

from actions.library import ActionLibraryEntry, get_action_by_id
from actions.prioritizer import prioritize_actions
from config.loader import get_default_effort
from models.actions import ActionItem, ActionPlan, ActionRequirement
from models.results import JurisdictionResult
from models.shared import PRIORITY_WEIGHTS

logger = structlog.get_logger(__name__)


def _canonical(req: ActionRequirement) -> tuple[str, str, str, str, str, tuple[str, ...]]:
    return (
        req.title,
        req.description,
        req.legal_basis,
        req.estimated_effort or "",
        req.deadline or "",
        tuple(req.jurisdictions),
    )


def _outranks(challenger: ActionRequirement, holder: ActionRequirement) -> bool:
    cw, hw = PRIORITY_WEIGHTS[challenger.priority], PRIORITY_WEIGHTS[holder.priority]
    if cw != hw:
        return cw > hw
    return _canonical(challenger) < _canonical(holder)


@dataclass
class MergedAction:
    """Accumulator for one action id."""
    winner: ActionRequirement
    scope: set[str] = field(default_factory=set)

    def absorb(self, req: ActionRequirement) -> None:
        if _outranks(req, self.winner):
            self.winner = req
        self.scope.update(req.jurisdictions)

    @property
    def jurisdictions(self) -> list[str]:
        """Winner's declared scope first, then the rest sorted."""
        head = list(dict.fromkeys(self.winner.jurisdictions))
        return head + sorted(self.scope.difference(head))


def collect_requirements(results: Sequence[JurisdictionResult]) -> list[ActionRequirement]:
    """Flatten required and recommended actions of every result.

    A requirement that declares no scope is attributed to the result it
    came from.
    """
    collected: list[ActionRequirement] = []
    for result in results:
        for req in result.all_actions():
            if not req.jurisdictions:
                req = req.model_copy(update={"jurisdictions": [result.jurisdiction]})
            collected.append(req)
    return collected


def merge_actions(requirements: Iterable[ActionRequirement]) -> list[MergedAction]:
    """Fold requirements by id. Output is sorted by action id."""
    merged: dict[str, MergedAction] = {}
    for req in requirements:
        current = merged.get(req.id)
        if current is None:
            merged[req.id] = MergedAction(winner=req, scope=set(req.jurisdictions))
        else:
            current.absorb(req)
    return [merged[action_id] for action_id in sorted(merged)]


def fallback_best_practice(description: str, entry: Optional[ActionLibraryEntry]) -> str:
    """Guidance text used when no provider is available or it failed."""
    if entry is None:
        return description
    steps = "; ".join(entry.verification_criteria[:3])
    return f"{description} Key verification steps: {steps}."


def build_action_item(merged: MergedAction, best_practice: Optional[str] = None) -> ActionItem:
    req = merged.winner
    entry = get_action_by_id(req.id)

    criteria = list(entry.verification_criteria) if entry else [f"{req.title} completed and documented"]
    effort = req.estimated_effort or (entry.estimated_effort if entry else None) or get_default_effort()

    return ActionItem(
        id=req.id,
        title=req.title,
        description=req.description,
        jurisdiction=merged.jurisdictions,
        legal_basis=req.legal_basis,
        best_practice=best_practice if best_practice is not None else fallback_best_practice(req.description, entry),
        estimated_effort=effort,
        deadline=req.deadline,
        verification_criteria=criteria,
        base_priority=req.priority,
        depends_on=list(entry.depends_on) if entry else [],
    )


def generate_deterministic(
    results: Sequence[JurisdictionResult],
    now: Optional[datetime] = None,
) -> ActionPlan:
    """Build the action plan without any external collaborator.

    Args:
        results: Jurisdiction results from the requirement mapper.
        now: Evaluation time for deadline checks. Defaults to the clock.

    Returns:
        ActionPlan with every merged action in exactly one tier.
    """
    items = [build_action_item(m) for m in merge_actions(collect_requirements(results))]
    plan = prioritize_actions(items, now)
    logger.info(
        "action_plan_generated",
        mode="deterministic",
        critical=len(plan.critical),
        important=len(plan.important),
        recommended=len(plan.recommended),
    )
    return plan
