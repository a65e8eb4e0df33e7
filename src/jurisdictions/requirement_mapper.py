"""Requirement mapper: evaluate registered modules against a product context.

A jurisdiction either fully succeeds or is fully recorded as an error; one
broken module never aborts the batch.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional

import structlog

from jurisdictions.registry import JurisdictionRegistry, Result, get_registry
from models.context import ProductContext
from models.report import JurisdictionMappingError
from models.results import ApplicableLaw, ApplicableProvision, JurisdictionResult
from models.shared import REQUIRED_PRIORITIES, ActionPriority

logger = structlog.get_logger(__name__)


@dataclass
class RequirementMapResult:
    results: list[JurisdictionResult] = field(default_factory=list)
    errors: list[JurisdictionMappingError] = field(default_factory=list)


def _slug(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")


def group_provisions_by_law(
    jurisdiction: str,
    provisions: Iterable[ApplicableProvision],
) -> list[ApplicableLaw]:
    """Group provisions under the law they declare, first-seen law order."""
    laws: dict[str, ApplicableLaw] = {}
    for prov in provisions:
        law = laws.get(prov.law)
        if law is None:
            law = ApplicableLaw(
                id=f"{jurisdiction}-{_slug(prov.law)}" if prov.law else jurisdiction,
                name=prov.law,
                jurisdiction=jurisdiction,
            )
            laws[prov.law] = law
        # copies keep module-level provision tables isolated from callers
        law.provisions.append(prov.model_copy(deep=True))
    return list(laws.values())


def _unique(ids: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(ids))


def map_one(
    context: ProductContext,
    jurisdiction_id: str,
    registry: Optional[JurisdictionRegistry] = None,
) -> Result[JurisdictionResult]:
    """Evaluate one jurisdiction.

    Never raises: an unregistered id or a fault inside the module comes back
    as a failed Result.
    """
    if registry is None:
        registry = get_registry()
    found = registry.get_module(jurisdiction_id)
    if not found.ok:
        return Result.failure(found.error or f'Jurisdiction "{jurisdiction_id}" is not registered')

    module = found.value
    try:
        risk = module.risk_level(context)
        provisions = module.applicable_provisions(context)
        artifacts = module.required_artifacts(context)
        actions = module.required_actions(context)
        timeline = module.timeline(context)
        gpai = module.gpai_classification(context)

        result = JurisdictionResult(
            jurisdiction=jurisdiction_id,
            applicable_laws=group_provisions_by_law(jurisdiction_id, provisions),
            risk_classification=risk,
            required_artifacts=list(artifacts),
            required_actions=[a for a in actions if a.priority in REQUIRED_PRIORITIES],
            recommended_actions=[a for a in actions if a.priority == ActionPriority.RECOMMENDED],
            compliance_timeline=timeline,
            enforcement_precedent=[],
            gpai_classification=gpai,
        )
    except Exception as exc:
        return Result.failure(f"{type(exc).__name__}: {exc}")

    return Result.success(result)


def map_all(
    context: ProductContext,
    target_jurisdictions: Optional[Iterable[str]] = None,
    registry: Optional[JurisdictionRegistry] = None,
) -> RequirementMapResult:
    """Evaluate every requested jurisdiction, collecting results and errors.

    Args:
        context: Product under assessment.
        target_jurisdictions: Jurisdiction ids; defaults to
            ``context.target_markets``. Duplicates collapse, first
            occurrence order is kept.
        registry: Registry to resolve ids against; defaults to the
            process registry.

    Returns:
        RequirementMapResult where ``len(results) + len(errors)`` equals
        the number of unique requested ids.
    """
    ids = _unique(context.target_markets if target_jurisdictions is None else target_jurisdictions)
    mapped = RequirementMapResult()

    for jurisdiction_id in ids:
        outcome = map_one(context, jurisdiction_id, registry=registry)
        if outcome.ok:
            mapped.results.append(outcome.value)
        else:
            logger.warning(
                "jurisdiction_mapping_failed",
                jurisdiction=jurisdiction_id,
                error=outcome.error,
            )
            mapped.errors.append(
                JurisdictionMappingError(jurisdiction=jurisdiction_id, error=outcome.error or "")
            )

    logger.info(
        "jurisdictions_mapped",
        requested=len(ids),
        succeeded=len(mapped.results),
        failed=len(mapped.errors),
    )
    return mapped
