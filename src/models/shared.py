"""Shared model definitions for LaunchReady.

This module contains canonical definitions for enums and ordinal tables
used across the mapping and action-planning stages.

Usage:
    from models.shared import ActionPriority, RiskLevel, PRIORITY_WEIGHTS
"""
from __future__ import annotations

from enum import Enum


class ActionPriority(str, Enum):
    """Priority tier of a compliance action."""
    CRITICAL = "critical"
    IMPORTANT = "important"
    RECOMMENDED = "recommended"


class RiskLevel(str, Enum):
    """Risk tier assigned by a jurisdiction module.

    - UNACCEPTABLE: Prohibited practice, cannot launch as designed
    - HIGH: Heavy pre-market obligations (assessments, audits, registration)
    - LIMITED: Transparency or general processing obligations
    - MINIMAL: No mandatory obligations identified
    - UNDETERMINED: Not enough information to classify
    """
    UNACCEPTABLE = "unacceptable"
    HIGH = "high"
    LIMITED = "limited"
    MINIMAL = "minimal"
    UNDETERMINED = "undetermined"


class MarketReadinessStatus(str, Enum):
    """Launch verdict for one jurisdiction."""
    READY = "ready"
    ACTION_REQUIRED = "action-required"
    BLOCKED = "blocked"


class RegulatoryForce(str, Enum):
    """Legal weight of a provision."""
    BINDING_LAW = "binding-law"
    BINDING_REGULATION = "binding-regulation"
    SUPERVISORY_GUIDANCE = "supervisory-guidance"
    VOLUNTARY_FRAMEWORK = "voluntary-framework"
    PENDING_LEGISLATION = "pending-legislation"


class ArtifactType(str, Enum):
    """Kinds of compliance documents a jurisdiction may require."""
    DPIA = "dpia"
    RISK_CLASSIFICATION = "risk-classification"
    CONFORMITY_ASSESSMENT = "conformity-assessment"
    MODEL_CARD = "model-card"
    TRANSPARENCY_NOTICE = "transparency-notice"
    BIAS_AUDIT = "bias-audit"
    RISK_ASSESSMENT = "risk-assessment"
    ALGORITHMIC_IMPACT = "algorithmic-impact"
    GPAI_TECHNICAL_DOCUMENTATION = "gpai-technical-documentation"
    GPAI_TRAINING_DATA_SUMMARY = "gpai-training-data-summary"
    GPAI_SYSTEMIC_RISK_ASSESSMENT = "gpai-systemic-risk-assessment"
    GENAI_CONTENT_POLICY = "genai-content-policy"


# Numeric weights used when merging the same action from several jurisdictions
PRIORITY_WEIGHTS: dict[ActionPriority, int] = {
    ActionPriority.CRITICAL: 3,
    ActionPriority.IMPORTANT: 2,
    ActionPriority.RECOMMENDED: 1,
}


# Severity order for picking the highest-risk result
RISK_ORDER: dict[RiskLevel, int] = {
    RiskLevel.UNACCEPTABLE: 4,
    RiskLevel.HIGH: 3,
    RiskLevel.LIMITED: 2,
    RiskLevel.MINIMAL: 1,
    RiskLevel.UNDETERMINED: 0,
}


# Priorities that land an action in a result's required list
REQUIRED_PRIORITIES = {
    ActionPriority.CRITICAL,
    ActionPriority.IMPORTANT,
}


# Jurisdiction identifiers shipped with the built-in rule content
BUILTIN_JURISDICTIONS: tuple[str, ...] = (
    "eu-ai-act",
    "eu-gdpr",
    "us-federal",
    "us-ca",
    "us-co",
    "us-il",
    "us-ny",
    "us-tx",
    "uk",
    "singapore",
    "china",
    "brazil",
)
