"""Predicates and content builders shared by the jurisdiction modules.

The predicates cover conditions checked by several jurisdictions. Where a
jurisdiction uses a narrower or broader test it keeps that test in its own
module.
"""
from __future__ import annotations

from typing import Optional

from models.actions import ActionRequirement
from models.context import ProductContext
from models.results import ApplicableProvision, ArtifactRequirement, ComplianceDeadline
from models.shared import ActionPriority, ArtifactType, RegulatoryForce

PERSONAL_DATA_CATEGORIES = frozenset(
    {"personal", "sensitive", "biometric", "health", "financial", "location", "minor"}
)
SPECIAL_CATEGORY_DATA = frozenset(
    {"sensitive", "biometric", "health", "genetic", "political", "criminal"}
)


def desc_has(ctx: ProductContext, *needles: str) -> bool:
    """True if the lower-cased description contains any of ``needles``."""
    text = ctx.description_lower
    return any(n in text for n in needles)


def processes_personal_data(ctx: ProductContext) -> bool:
    return any(d in PERSONAL_DATA_CATEGORIES for d in ctx.data_processed)


def processes_special_category_data(ctx: ProductContext) -> bool:
    return any(d in SPECIAL_CATEGORY_DATA for d in ctx.data_processed)


def processes_biometric_data(ctx: ProductContext) -> bool:
    return "biometric" in ctx.data_processed


def is_genai_product(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    return (
        ctx.product_type in ("generator", "foundation-model")
        or (gen is not None and (gen.generates_content or gen.uses_foundation_model))
    )


def uses_foundation_model(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    return ctx.product_type == "foundation-model" or (gen is not None and gen.uses_foundation_model)


def is_foundation_model_provider(ctx: ProductContext) -> bool:
    """Product trains or fine-tunes the model itself rather than calling one."""
    gen = ctx.generative_ai_context
    if ctx.product_type == "foundation-model":
        return True
    return gen is not None and gen.foundation_model_source in ("self-trained", "fine-tuned")


def can_generate_deepfakes(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    return gen is not None and (gen.can_generate_deepfakes or gen.can_generate_synthetic_voice)


def is_financial_services_ai(ctx: ProductContext) -> bool:
    return ctx.sector_context is not None and ctx.sector_context.sector == "financial-services"


def involves_credit_or_insurance(ctx: ProductContext) -> bool:
    fin = ctx.sector_context.financial_services if ctx.sector_context else None
    return fin is not None and (fin.involves_credit or fin.involves_insurance_pricing)


def has_agentic_capabilities(ctx: ProductContext) -> bool:
    agent = ctx.agentic_ai_context
    gen = ctx.generative_ai_context
    return (agent is not None and agent.is_agentic) or (gen is not None and gen.uses_agentic_capabilities)


def makes_material_decisions(ctx: ProductContext) -> bool:
    return ctx.decision_impact in ("material", "determinative")


def is_fully_automated(ctx: ProductContext) -> bool:
    return ctx.automation_level == "fully-automated"


def involves_minors(ctx: ProductContext) -> bool:
    return "minors" in ctx.user_populations or "minor" in ctx.data_processed


def is_consumer_facing(ctx: ProductContext) -> bool:
    return "consumers" in ctx.user_populations or "general-public" in ctx.user_populations


def is_employment_context(ctx: ProductContext) -> bool:
    return "job-applicants" in ctx.user_populations or "employees" in ctx.user_populations


def training_data_includes_personal_data(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    if gen is None:
        return False
    return "personal-data" in gen.training_data_includes or "user-generated-content" in gen.training_data_includes


# -- content builders --------------------------------------------------------
# Modules declare their content through these so every record carries the
# jurisdiction tag it was emitted under.


def action(
    jurisdiction: str,
    id: str,
    title: str,
    description: str,
    priority: ActionPriority | str,
    legal_basis: str,
    effort: Optional[str] = None,
    deadline: Optional[str] = None,
) -> ActionRequirement:
    return ActionRequirement(
        id=id,
        title=title,
        description=description,
        priority=ActionPriority(priority),
        legal_basis=legal_basis,
        jurisdictions=[jurisdiction],
        estimated_effort=effort,
        deadline=deadline,
    )


def provision(
    id: str,
    law: str,
    article: str,
    title: str,
    summary: str,
    relevance: str,
    url: Optional[str] = None,
    force: Optional[RegulatoryForce] = None,
) -> ApplicableProvision:
    return ApplicableProvision(
        id=id,
        law=law,
        article=article,
        title=title,
        summary=summary,
        relevance=relevance,
        url=url,
        regulatory_force=force,
    )


def artifact(
    type: ArtifactType | str,
    name: str,
    legal_basis: str,
    description: str,
    template_id: Optional[str] = None,
    required: bool = True,
) -> ArtifactRequirement:
    return ArtifactRequirement(
        type=ArtifactType(type),
        name=name,
        required=required,
        legal_basis=legal_basis,
        description=description,
        template_id=template_id,
    )


def deadline(date: str, description: str, provision: str, mandatory: bool = True) -> ComplianceDeadline:
    return ComplianceDeadline(date=date, description=description, provision=provision, is_mandatory=mandatory)
