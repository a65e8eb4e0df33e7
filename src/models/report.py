"""Aggregate and report-level models."""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from models.actions import ActionPlan, ActionRequirement
from models.context import ProductContext
from models.results import ArtifactRequirement, JurisdictionResult, RiskClassification
from models.shared import MarketReadinessStatus


class MarketReadiness(BaseModel):
    jurisdiction: str
    status: MarketReadinessStatus
    blockers: List[str] = Field(default_factory=list)
    estimated_time_to_compliance: str = ""


class AggregatedRequirements(BaseModel):
    """Raw cross-jurisdiction totals. No deduplication is applied."""
    all_artifacts: List[ArtifactRequirement] = Field(default_factory=list)
    all_actions: List[ActionRequirement] = Field(default_factory=list)
    highest_risk_level: Optional[RiskClassification] = None
    total_artifacts: int = 0
    total_actions: int = 0


class JurisdictionMappingError(BaseModel):
    """A jurisdiction that could not be mapped."""
    jurisdiction: str
    error: str


class ActionPlanError(BaseModel):
    """A provider failure for one action; the plan used fallback guidance instead."""
    action_id: str
    error: str


class ConflictTension(BaseModel):
    id: str
    title: str
    jurisdictions: List[str]
    description: str
    recommendation: str


class ReportSummary(BaseModel):
    can_launch: List[MarketReadiness] = Field(default_factory=list)
    highest_risk_market: str = "N/A"
    lowest_friction_market: str = "N/A"
    critical_blockers: List[str] = Field(default_factory=list)
    total_artifacts_needed: int = 0
    total_actions_needed: int = 0
    estimated_compliance_timeline: str = "See per-jurisdiction timelines"


class ReportMetadata(BaseModel):
    provider: str = "none"
    model: str = "none"
    knowledge_base_version: str = ""
    extra: dict[str, Any] = Field(default_factory=dict)


class LaunchReadyReport(BaseModel):
    """Top-level JSON report consumed by renderers."""
    id: str
    generated_at: str
    product_context: ProductContext
    jurisdiction_results: List[JurisdictionResult] = Field(default_factory=list)
    summary: ReportSummary = Field(default_factory=ReportSummary)
    action_plan: ActionPlan = Field(default_factory=ActionPlan)
    conflicts: List[ConflictTension] = Field(default_factory=list)
    dependency_warnings: List[str] = Field(default_factory=list)
    mapping_errors: List[JurisdictionMappingError] = Field(default_factory=list)
    action_errors: List[ActionPlanError] = Field(default_factory=list)
    metadata: ReportMetadata = Field(default_factory=ReportMetadata)
