"""Rule module contract and the trigger tables modules are built from.

A jurisdiction's legal logic is a ``RuleModule`` value: a bundle of pure
functions over a ``ProductContext``. Modules are composed from ordered
``Trigger`` tables instead of subclassing a base module, so adding a
jurisdiction never touches the engine.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Iterable, Optional, Protocol, Sequence, TypeVar, runtime_checkable

from models.actions import ActionRequirement
from models.context import ProductContext
from models.results import (
    ApplicableProvision,
    ArtifactRequirement,
    ComplianceTimeline,
    GpaiClassification,
    RiskClassification,
)
from models.shared import RiskLevel

T = TypeVar("T")

Predicate = Callable[[ProductContext], bool]


@dataclass(frozen=True)
class Trigger:
    """A named predicate over a ProductContext plus the citation it rests on."""
    id: str
    description: str
    citation: str
    predicate: Predicate

    def matches(self, ctx: ProductContext) -> bool:
        return bool(self.predicate(ctx))


@dataclass(frozen=True)
class RiskTier:
    """One precedence group of triggers and the risk level it yields.

    ``justification`` may reference ``{matched}``, which is replaced with the
    comma-separated descriptions of the triggers that fired.
    """
    level: RiskLevel
    triggers: tuple[Trigger, ...]
    justification: str
    provisions: tuple[str, ...] = ()
    prohibitive: bool = False


def matching(ctx: ProductContext, triggers: Iterable[Trigger]) -> list[Trigger]:
    """Return the triggers that fire for ``ctx``, in table order."""
    return [t for t in triggers if t.matches(ctx)]


def _both(guard: Predicate, predicate: Predicate) -> Predicate:
    return lambda ctx: guard(ctx) and predicate(ctx)


def guarded(triggers: Iterable[Trigger], guard: Predicate) -> tuple[Trigger, ...]:
    """Copies of ``triggers`` that only fire when ``guard`` also holds."""
    return tuple(replace(t, predicate=_both(guard, t.predicate)) for t in triggers)


def when(ctx: ProductContext, table: Sequence[tuple[Predicate, T]]) -> list[T]:
    """Select the items of a ``(predicate, item)`` table that apply to ``ctx``."""
    return [item for predicate, item in table if predicate(ctx)]


def classify_by_tiers(
    ctx: ProductContext,
    tiers: Sequence[RiskTier],
    fallback_justification: str,
    fallback_level: RiskLevel = RiskLevel.MINIMAL,
) -> RiskClassification:
    """Walk ``tiers`` in precedence order and return the first that fires.

    Args:
        ctx: Product under assessment.
        tiers: Tiers ordered from the hardest obligation to the softest.
        fallback_justification: Justification used when no tier fires.
        fallback_level: Level used when no tier fires.

    Returns:
        RiskClassification whose ``applicable_categories`` are the ids of
        the triggers that fired in the winning tier.
    """
    for tier in tiers:
        fired = matching(ctx, tier.triggers)
        if not fired:
            continue
        descriptions = [t.description for t in fired]
        provisions = list(dict.fromkeys([*tier.provisions, *(t.citation for t in fired)]))
        return RiskClassification(
            level=tier.level,
            justification=tier.justification.format(matched=", ".join(descriptions)),
            applicable_categories=[t.id for t in fired],
            provisions=provisions,
            prohibited_practices=descriptions if tier.prohibitive else [],
        )
    return RiskClassification(
        level=fallback_level,
        justification=fallback_justification,
        applicable_categories=[],
        provisions=[],
    )


@runtime_checkable
class JurisdictionModule(Protocol):
    """Capability set every jurisdiction implements.

    Operations are pure: no I/O, no mutation, equal input gives equal output,
    and a well-formed context never causes an exception.
    """
    id: str
    name: str
    jurisdiction: str

    def applicable_provisions(self, ctx: ProductContext) -> list[ApplicableProvision]: ...

    def required_artifacts(self, ctx: ProductContext) -> list[ArtifactRequirement]: ...

    def required_actions(self, ctx: ProductContext) -> list[ActionRequirement]: ...

    def risk_level(self, ctx: ProductContext) -> RiskClassification: ...

    def timeline(self, ctx: ProductContext) -> ComplianceTimeline: ...

    def gpai_classification(self, ctx: ProductContext) -> Optional[GpaiClassification]: ...


RiskFn = Callable[[ProductContext], RiskClassification]
ProvisionsFn = Callable[[ProductContext, RiskClassification], Sequence[ApplicableProvision]]
ArtifactsFn = Callable[[ProductContext, RiskClassification], Sequence[ArtifactRequirement]]
ActionsFn = Callable[[ProductContext, RiskClassification], Sequence[ActionRequirement]]
TimelineFn = Callable[[ProductContext, RiskClassification], ComplianceTimeline]
GpaiFn = Callable[[ProductContext], Optional[GpaiClassification]]


@dataclass(frozen=True)
class RuleModule:
    """Strategy object implementing ``JurisdictionModule`` from plain functions.

    Every content function receives the risk classification computed by
    ``classify`` so modules gate provisions, artifacts and actions on the
    tier without re-deriving it.
    """
    id: str
    name: str
    jurisdiction: str
    classify: RiskFn
    provisions: ProvisionsFn
    artifacts: ArtifactsFn
    actions: ActionsFn
    schedule: TimelineFn
    gpai: Optional[GpaiFn] = None

    def risk_level(self, ctx: ProductContext) -> RiskClassification:
        return self.classify(ctx)

    def applicable_provisions(self, ctx: ProductContext) -> list[ApplicableProvision]:
        return list(self.provisions(ctx, self.classify(ctx)))

    def required_artifacts(self, ctx: ProductContext) -> list[ArtifactRequirement]:
        return list(self.artifacts(ctx, self.classify(ctx)))

    def required_actions(self, ctx: ProductContext) -> list[ActionRequirement]:
        return list(self.actions(ctx, self.classify(ctx)))

    def timeline(self, ctx: ProductContext) -> ComplianceTimeline:
        return self.schedule(ctx, self.classify(ctx))

    def gpai_classification(self, ctx: ProductContext) -> Optional[GpaiClassification]:
        return self.gpai(ctx) if self.gpai is not None else None
