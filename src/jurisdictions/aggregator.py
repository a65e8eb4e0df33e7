"""Cross-jurisdiction requirement aggregation and market readiness."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import structlog

from actions.prioritizer import effort_rank
from config.loader import get_default_effort
from models.report import AggregatedRequirements, MarketReadiness
from models.results import JurisdictionResult
from models.shared import RISK_ORDER, MarketReadinessStatus, RiskLevel

logger = structlog.get_logger(__name__)

READY_TIME = "0 weeks"
BLOCKED_TIME = "Not achievable without redesign"


def aggregate(results: Sequence[JurisdictionResult]) -> AggregatedRequirements:
    """Concatenate artifacts and actions across results and find the highest risk.

    Counts are raw: an action emitted by two jurisdictions is counted twice.
    The first result wins ties on risk level.
    """
    aggregated = AggregatedRequirements()
    for result in results:
        aggregated.all_artifacts.extend(result.required_artifacts)
        aggregated.all_actions.extend(result.required_actions)
        aggregated.all_actions.extend(result.recommended_actions)

        current = aggregated.highest_risk_level
        incoming = result.risk_classification
        if current is None or RISK_ORDER[incoming.level] > RISK_ORDER[current.level]:
            aggregated.highest_risk_level = incoming

    aggregated.total_artifacts = len(aggregated.all_artifacts)
    aggregated.total_actions = len(aggregated.all_actions)
    return aggregated


def _time_to_compliance(result: JurisdictionResult) -> str:
    efforts = [a.estimated_effort for a in result.required_actions if a.estimated_effort]
    if not efforts:
        return get_default_effort()
    # max() keeps the first of equal ranks
    return max(efforts, key=effort_rank)


def readiness_for(result: JurisdictionResult) -> MarketReadiness:
    """Launch verdict for one jurisdiction.

    - ready: nothing required (no required artifacts or actions)
    - blocked: something is required and the tier is unacceptable or a
      prohibition trigger fired
    - action-required: everything else
    """
    risk = result.risk_classification
    required_artifacts = [a for a in result.required_artifacts if a.required]
    has_required = bool(required_artifacts or result.required_actions)

    if not has_required:
        return MarketReadiness(
            jurisdiction=result.jurisdiction,
            status=MarketReadinessStatus.READY,
            blockers=[],
            estimated_time_to_compliance=READY_TIME,
        )

    if risk.level == RiskLevel.UNACCEPTABLE or risk.prohibited_practices:
        return MarketReadiness(
            jurisdiction=result.jurisdiction,
            status=MarketReadinessStatus.BLOCKED,
            blockers=list(risk.prohibited_practices) or [risk.justification],
            estimated_time_to_compliance=BLOCKED_TIME,
        )

    return MarketReadiness(
        jurisdiction=result.jurisdiction,
        status=MarketReadinessStatus.ACTION_REQUIRED,
        blockers=[],
        estimated_time_to_compliance=_time_to_compliance(result),
    )


def build_market_readiness(results: Sequence[JurisdictionResult]) -> list[MarketReadiness]:
    """One readiness verdict per result, in result order."""
    readiness = [readiness_for(r) for r in results]
    blocked = [m.jurisdiction for m in readiness if m.status == MarketReadinessStatus.BLOCKED]
    if blocked:
        logger.warning("markets_blocked", jurisdictions=blocked)
    return readiness


@dataclass
class ReadinessSummary:
    highest_risk_market: str = "N/A"
    lowest_friction_market: str = "N/A"
    critical_blockers: list[str] = field(default_factory=list)


def summarize(
    results: Sequence[JurisdictionResult],
    readiness: Sequence[MarketReadiness],
) -> ReadinessSummary:
    """Highest-risk and lowest-friction markets plus the blockers of blocked markets.

    Ties go to the market that appears first. Both markets are "N/A" when
    there are no results.
    """
    summary = ReadinessSummary()
    highest = lowest = None
    for result in results:
        rank = RISK_ORDER[result.risk_classification.level]
        if highest is None or rank > highest[0]:
            highest = (rank, result.jurisdiction)
        if lowest is None or rank < lowest[0]:
            lowest = (rank, result.jurisdiction)

    if highest is not None:
        summary.highest_risk_market = highest[1]
    if lowest is not None:
        summary.lowest_friction_market = lowest[1]
    summary.critical_blockers = [
        blocker
        for market in readiness
        if market.status == MarketReadinessStatus.BLOCKED
        for blocker in market.blockers
    ]
    return summary
