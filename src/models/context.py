"""Product context models: the immutable description of the AI product under assessment."""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

ProductType = Literal[
    "classifier",
    "recommender",
    "generator",
    "predictor",
    "detector",
    "ranker",
    "agent",
    "foundation-model",
    "other",
]

DataCategory = Literal[
    "personal",
    "sensitive",
    "biometric",
    "health",
    "financial",
    "location",
    "behavioral",
    "minor",
    "employment",
    "criminal",
    "political",
    "genetic",
    "public",
    "anonymized",
    "pseudonymized",
    "other",
]

UserPopulation = Literal[
    "consumers",
    "businesses",
    "minors",
    "employees",
    "patients",
    "students",
    "job-applicants",
    "credit-applicants",
    "tenants",
    "general-public",
    "other",
]

DecisionImpact = Literal["advisory", "material", "determinative"]

AutomationLevel = Literal["fully-automated", "human-in-the-loop", "human-on-the-loop"]

GpaiRole = Literal["provider", "deployer", "both"]

TrainingDataCategory = Literal[
    "public-web-scrape",
    "licensed-datasets",
    "user-generated-content",
    "proprietary-data",
    "synthetic-data",
    "copyrighted-works",
    "personal-data",
    "government-data",
    "open-source-datasets",
]

OutputModality = Literal["text", "image", "audio", "video", "code", "multimodal"]

FoundationModelSource = Literal["self-trained", "third-party-api", "fine-tuned", "open-source"]

AutonomyLevel = Literal["narrow", "bounded", "broad"]

AISector = Literal[
    "financial-services",
    "healthcare",
    "employment",
    "education",
    "law-enforcement",
    "critical-infrastructure",
    "general",
]

FinancialSubSector = Literal["banking", "insurance", "investment", "payments", "lending", "trading"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class TrainingDataInfo(_Frozen):
    """How the product's models were trained."""
    uses_training_data: bool = False
    sources: tuple[str, ...] = ()
    contains_personal_data: bool = False
    consent_obtained: Optional[bool] = None
    opt_out_mechanism: bool = False
    synthetic_data: bool = False


class ExistingMeasure(_Frozen):
    type: str
    description: str = ""
    implemented: bool = False


class GpaiInfo(_Frozen):
    """General-purpose AI model details supplied by the product team."""
    is_gpai_model: bool = False
    gpai_role: GpaiRole = "deployer"
    model_name: Optional[str] = None
    is_open_source: bool = False
    compute_flops: Optional[float] = None
    exceeds_systemic_risk_threshold: bool = False
    commission_designated: bool = False
    provides_downstream_documentation: bool = False
    has_acceptable_use_policy: bool = False
    copyright_compliance_mechanism: Optional[str] = None


class GenerativeAiContext(_Frozen):
    uses_foundation_model: bool = False
    foundation_model_source: FoundationModelSource = "third-party-api"
    model_identifier: Optional[str] = None
    generates_content: bool = False
    output_modalities: tuple[OutputModality, ...] = ()
    can_generate_deepfakes: bool = False
    can_generate_synthetic_voice: bool = False
    has_output_watermarking: bool = False
    has_output_filtering: bool = False
    training_data_includes: tuple[TrainingDataCategory, ...] = ()
    finetuning_performed: bool = False
    finetuning_data_description: Optional[str] = None
    uses_rag: bool = False
    uses_agentic_capabilities: bool = False
    algorithm_filing_status: Optional[Literal["not-filed", "filed", "approved", "not-applicable"]] = None
    provides_content_moderation: Optional[bool] = None
    is_frontier_model: Optional[bool] = None
    follows_imda_guidelines: Optional[bool] = None


class AgenticAiContext(_Frozen):
    is_agentic: bool = False
    autonomy_level: AutonomyLevel = "narrow"
    tool_access: tuple[str, ...] = ()
    action_scope: tuple[str, ...] = ()
    has_human_checkpoints: bool = False
    human_checkpoint_description: Optional[str] = None
    is_multi_agent: bool = False
    can_access_external_systems: bool = False
    can_modify_data: bool = False
    can_make_financial_transactions: bool = False
    has_failsafe_mechanisms: bool = False
    has_action_logging: bool = False


class FinancialServicesContext(_Frozen):
    sub_sector: FinancialSubSector = "banking"
    involves_credit: bool = False
    involves_insurance_pricing: bool = False
    involves_trading: bool = False
    involves_aml_kyc: bool = False
    involves_regulatory_reporting: bool = False
    regulatory_bodies: tuple[str, ...] = ()
    has_materiality_assessment: bool = False
    has_model_risk_governance: Optional[bool] = None


class SectorContext(_Frozen):
    sector: AISector = "general"
    financial_services: Optional[FinancialServicesContext] = None


class ProductContext(_Frozen):
    """Structured description of the AI product being assessed.

    Built once by the intake collaborator and passed through the pipeline
    unchanged. Enumerated fields draw from closed vocabularies.
    """
    description: str = Field(description="Free-text product description")
    product_type: ProductType = "other"
    data_processed: tuple[DataCategory, ...] = ()
    user_populations: tuple[UserPopulation, ...] = ()
    decision_impact: DecisionImpact = "advisory"
    automation_level: AutomationLevel = "human-in-the-loop"
    training_data: TrainingDataInfo = Field(default_factory=TrainingDataInfo)
    target_markets: tuple[str, ...] = Field(default=(), description="Jurisdiction identifiers to assess")
    existing_measures: tuple[ExistingMeasure, ...] = ()
    launch_date: Optional[str] = None
    gpai_info: Optional[GpaiInfo] = None
    generative_ai_context: Optional[GenerativeAiContext] = None
    agentic_ai_context: Optional[AgenticAiContext] = None
    sector_context: Optional[SectorContext] = None

    @field_validator("description")
    @classmethod
    def _strip_description(cls, v: str) -> str:
        return v.strip()

    @property
    def description_lower(self) -> str:
        return self.description.lower()
