"""Per-jurisdiction evaluation results."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from models.actions import ActionRequirement
from models.context import GpaiRole
from models.shared import ArtifactType, RegulatoryForce, RiskLevel


class ApplicableProvision(BaseModel):
    """A single legal provision that applies to the product."""
    id: str
    law: str = Field(description="Name of the law this provision belongs to")
    article: str
    title: str
    summary: str
    relevance: str
    url: Optional[str] = None
    regulatory_force: Optional[RegulatoryForce] = None


class ApplicableLaw(BaseModel):
    """Provisions grouped under the law that declares them."""
    id: str
    name: str
    jurisdiction: str
    provisions: List[ApplicableProvision] = Field(default_factory=list)


class RiskClassification(BaseModel):
    """Risk tier with the trigger identifiers that produced it."""
    level: RiskLevel
    justification: str
    applicable_categories: List[str] = Field(
        default_factory=list,
        description="Identifiers of the triggers that fired",
    )
    provisions: List[str] = Field(default_factory=list)
    prohibited_practices: List[str] = Field(
        default_factory=list,
        description="Descriptions of fired prohibition triggers; non-empty means the market is blocked",
    )


class ComplianceDeadline(BaseModel):
    date: str
    description: str
    provision: str
    is_mandatory: bool = True


class ComplianceTimeline(BaseModel):
    effective_date: Optional[str] = None
    deadlines: List[ComplianceDeadline] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)


class ArtifactRequirement(BaseModel):
    """A compliance document the jurisdiction requires."""
    type: ArtifactType
    name: str
    required: bool = True
    legal_basis: str
    description: str
    template_id: Optional[str] = None


class GpaiClassification(BaseModel):
    is_gpai: bool
    has_systemic_risk: bool
    is_open_source: bool
    role: GpaiRole
    justification: str
    provisions: List[str] = Field(default_factory=list)


class EnforcementCase(BaseModel):
    id: str
    jurisdiction: str
    authority: str
    date: str
    respondent: str
    summary: str
    relevant_provisions: List[str] = Field(default_factory=list)
    outcome: str
    fine: Optional[float] = None
    url: Optional[str] = None


class JurisdictionResult(BaseModel):
    """Complete evaluation of one jurisdiction against a ProductContext."""
    jurisdiction: str
    applicable_laws: List[ApplicableLaw] = Field(default_factory=list)
    risk_classification: RiskClassification
    required_artifacts: List[ArtifactRequirement] = Field(default_factory=list)
    required_actions: List[ActionRequirement] = Field(default_factory=list)
    recommended_actions: List[ActionRequirement] = Field(default_factory=list)
    compliance_timeline: ComplianceTimeline = Field(default_factory=ComplianceTimeline)
    enforcement_precedent: List[EnforcementCase] = Field(default_factory=list)
    gpai_classification: Optional[GpaiClassification] = None

    def all_actions(self) -> list[ActionRequirement]:
        return [*self.required_actions, *self.recommended_actions]
