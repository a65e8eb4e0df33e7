"""Data models for LaunchReady."""
from models.shared import (
    ActionPriority,
    ArtifactType,
    MarketReadinessStatus,
    PRIORITY_WEIGHTS,
    RISK_ORDER,
    RegulatoryForce,
    RiskLevel,
)
from models.context import ProductContext
from models.actions import ActionItem, ActionPlan, ActionRequirement
from models.results import (
    ApplicableLaw,
    ApplicableProvision,
    ArtifactRequirement,
    ComplianceDeadline,
    ComplianceTimeline,
    GpaiClassification,
    JurisdictionResult,
    RiskClassification,
)

__all__ = [
    "ActionPriority",
    "ArtifactType",
    "MarketReadinessStatus",
    "PRIORITY_WEIGHTS",
    "RISK_ORDER",
    "RegulatoryForce",
    "RiskLevel",
    "ProductContext",
    "ActionItem",
    "ActionPlan",
    "ActionRequirement",
    "ApplicableLaw",
    "ApplicableProvision",
    "ArtifactRequirement",
    "ComplianceDeadline",
    "ComplianceTimeline",
    "GpaiClassification",
    "JurisdictionResult",
    "RiskClassification",
]
