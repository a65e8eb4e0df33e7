"""Colorado AI Act (SB 24-205): consequential decisions about consumers.

A system is high-risk when it makes, or is a substantial factor in, a
consequential decision in one of eight areas and the decision impact is
material or determinative. All obligations start on 2026-02-01.
"""
from __future__ import annotations

from functools import partial

from jurisdictions.contract import RiskTier, RuleModule, Trigger, classify_by_tiers, guarded, matching
from jurisdictions.shared import (
    action,
    artifact,
    deadline,
    desc_has,
    has_agentic_capabilities,
    is_employment_context,
    is_financial_services_ai,
    is_genai_product,
    makes_material_decisions,
    provision,
)
from models.actions import ActionRequirement
from models.context import ProductContext
from models.results import ApplicableProvision, ArtifactRequirement, ComplianceTimeline, RiskClassification
from models.shared import RegulatoryForce, RiskLevel

JURISDICTION = "us-co"
EFFECTIVE_DATE = "2026-02-01"

_action = partial(action, JURISDICTION, deadline=EFFECTIVE_DATE)

LAW = "Colorado AI Act"


def _insurance(ctx: ProductContext) -> bool:
    fin = ctx.sector_context.financial_services if ctx.sector_context else None
    return (fin is not None and fin.involves_insurance_pricing) or desc_has(
        ctx, "insurance", "underwriting", "actuarial", "claims processing"
    )


CONSEQUENTIAL_AREAS: tuple[Trigger, ...] = (
    Trigger(
        "co-education", "Education", "SB 24-205 §6-1-1701(3)",
        lambda c: "students" in c.user_populations or desc_has(c, "education", "enrollment", "admission", "academic"),
    ),
    Trigger(
        "co-employment", "Employment", "SB 24-205 §6-1-1701(3)",
        lambda c: is_employment_context(c)
        or desc_has(c, "hiring", "recruitment", "employment", "promotion", "termination", "resume screen"),
    ),
    Trigger(
        "co-financial-services", "Financial Services", "SB 24-205 §6-1-1701(3)",
        lambda c: is_financial_services_ai(c)
        or "credit-applicants" in c.user_populations
        or desc_has(c, "credit", "lending", "loan", "financial service", "banking"),
    ),
    Trigger(
        "co-government-services", "Government Services", "SB 24-205 §6-1-1701(3)",
        lambda c: desc_has(
            c, "government service", "public benefit", "public assistance", "welfare", "social benefit",
            "government program",
        ),
    ),
    Trigger(
        "co-healthcare", "Healthcare", "SB 24-205 §6-1-1701(3)",
        lambda c: "patients" in c.user_populations
        or "health" in c.data_processed
        or desc_has(c, "healthcare", "medical", "health service", "clinical", "diagnosis", "treatment"),
    ),
    Trigger(
        "co-housing", "Housing", "SB 24-205 §6-1-1701(3)",
        lambda c: "tenants" in c.user_populations
        or desc_has(c, "housing", "rental", "tenant screen", "landlord", "lease"),
    ),
    Trigger("co-insurance", "Insurance", "SB 24-205 §6-1-1701(3)", _insurance),
    Trigger(
        "co-legal-services", "Legal Services", "SB 24-205 §6-1-1701(3)",
        lambda c: desc_has(c, "legal service", "legal aid", "judicial", "court", "sentencing", "parole"),
    ),
)


def is_consequential_decision(ctx: ProductContext) -> bool:
    return bool(matching(ctx, CONSEQUENTIAL_AREAS))


def is_high_risk_system(ctx: ProductContext) -> bool:
    return is_consequential_decision(ctx) and makes_material_decisions(ctx)


def is_developer(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    return (
        ctx.product_type == "foundation-model"
        or desc_has(ctx, "develop", "provider", "vendor", "build")
        or (gen is not None and gen.foundation_model_source == "self-trained")
    )


def is_deployer(ctx: ProductContext) -> bool:
    """Everyone deploys except a foundation-model vendor with no consumer reach."""
    consumer_reach = any(p in ("consumers", "general-public") for p in ctx.user_populations)
    return not (ctx.product_type == "foundation-model" and not consumer_reach)


def is_genai_in_consequential_area(ctx: ProductContext) -> bool:
    return is_genai_product(ctx) and is_consequential_decision(ctx)


RISK_TIERS: tuple[RiskTier, ...] = (
    RiskTier(
        level=RiskLevel.HIGH,
        triggers=guarded(CONSEQUENTIAL_AREAS, makes_material_decisions),
        justification=(
            "This AI system makes consequential decisions under the Colorado AI Act (SB 24-205) in: {matched}. "
            "With material or determinative impact it is a high-risk AI system requiring impact assessments, risk "
            "management policies, consumer notice, and algorithmic discrimination prevention."
        ),
        provisions=("SB 24-205 §6-1-1702", "SB 24-205 §6-1-1703", "SB 24-205 §6-1-1704"),
    ),
    RiskTier(
        level=RiskLevel.LIMITED,
        triggers=(
            *CONSEQUENTIAL_AREAS,
            Trigger(
                "co-consumer-data",
                "Consumer data processing",
                "SB 24-205 §6-1-1704",
                lambda c: "personal" in c.data_processed or "consumers" in c.user_populations,
            ),
        ),
        justification=(
            "This AI system processes consumer data or operates in a consequential decision area under the "
            "Colorado AI Act but does not make material or determinative decisions. General transparency and "
            "consumer notification requirements may apply."
        ),
        provisions=("SB 24-205 §6-1-1704",),
    ),
)


def classify_risk(ctx: ProductContext) -> RiskClassification:
    return classify_by_tiers(
        ctx,
        RISK_TIERS,
        fallback_justification=(
            "This AI system does not make consequential decisions about consumers in any area regulated by the "
            "Colorado AI Act (SB 24-205). No mandatory obligations apply under this law."
        ),
    )


def _provisions(ctx: ProductContext, risk: RiskClassification) -> list[ApplicableProvision]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    provisions = [
        provision(
            "co-sb205-scope", LAW, "SB 24-205 §6-1-1702",
            "High-Risk AI System Definition",
            "A high-risk AI system makes or is a substantial factor in making a consequential decision in education, "
            "employment, financial services, government services, healthcare, housing, insurance or legal services.",
            risk.justification,
            force=RegulatoryForce.PENDING_LEGISLATION,
        )
    ]
    if risk.level == RiskLevel.HIGH:
        if is_developer(ctx):
            provisions.append(
                provision(
                    "co-sb205-developer-duties", LAW, "SB 24-205 §6-1-1703",
                    "Developer Duties",
                    "Developers must use reasonable care against algorithmic discrimination and give deployers "
                    "documentation of high-risk uses, limitations, training data and mitigations.",
                    "As a developer of this high-risk AI system you owe deployers comprehensive documentation.",
                    force=RegulatoryForce.PENDING_LEGISLATION,
                )
            )
        if is_deployer(ctx):
            provisions += [
                provision(
                    "co-sb205-deployer-risk-mgmt", LAW, "SB 24-205 §6-1-1704(1)",
                    "Deployer Risk Management Policy",
                    "Deployers must implement a risk management policy and program specifying principles, processes "
                    "and personnel for oversight.",
                    "A risk management policy and program is required for this deployment.",
                    force=RegulatoryForce.PENDING_LEGISLATION,
                ),
                provision(
                    "co-sb205-deployer-impact-assessment", LAW, "SB 24-205 §6-1-1704(2)",
                    "Deployer Impact Assessment",
                    "An impact assessment is due before deployment and annually thereafter, covering purpose, risks "
                    "of algorithmic discrimination, inputs, outputs and safeguards.",
                    "An impact assessment is required before deploying this system in Colorado.",
                    force=RegulatoryForce.PENDING_LEGISLATION,
                ),
                provision(
                    "co-sb205-deployer-notice", LAW, "SB 24-205 §6-1-1704(3)",
                    "Consumer Notice Requirements",
                    "Consumers must be told an AI system is used in a consequential decision, with a description, "
                    "contact information and the right to opt out of profiling.",
                    "Consumers must be notified that this AI system is used in consequential decisions.",
                    force=RegulatoryForce.PENDING_LEGISLATION,
                ),
            ]
        provisions.append(
            provision(
                "co-sb205-algo-discrimination", LAW, "SB 24-205 §6-1-1701(1)",
                "Algorithmic Discrimination",
                "Unlawful differential treatment or impact disfavouring a protected class through use of an AI system.",
                "Developers and deployers must use reasonable care against algorithmic discrimination.",
                force=RegulatoryForce.PENDING_LEGISLATION,
            )
        )
    if is_genai_in_consequential_area(ctx):
        provisions.append(
            provision(
                "co-sb205-genai-consequential", LAW, "SB 24-205 §6-1-1702, §6-1-1704",
                "GenAI in Consequential Decisions",
                "Generative AI used in consequential decisions carries every high-risk obligation.",
                "This system uses generative AI in a consequential decision area.",
                force=RegulatoryForce.PENDING_LEGISLATION,
            )
        )
    return provisions


def _artifacts(ctx: ProductContext, risk: RiskClassification) -> list[ArtifactRequirement]:
    if risk.level != RiskLevel.HIGH:
        return []
    artifacts: list[ArtifactRequirement] = []
    if is_deployer(ctx):
        artifacts.append(
            artifact(
                "algorithmic-impact",
                "Colorado AI Act Impact Assessment",
                "SB 24-205 §6-1-1704(2)",
                "Purpose, intended uses, known discrimination risks, data categories, outputs, oversight and "
                "safeguards. Completed before deployment and updated annually.",
                template_id="algorithmic-impact",
            )
        )
    artifacts += [
        artifact(
            "risk-assessment",
            "Colorado AI Act Risk Management Policy",
            "SB 24-205 §6-1-1704(1)",
            "Principles, processes and personnel governing deployment, including algorithmic discrimination "
            "prevention.",
        ),
        artifact(
            "transparency-notice",
            "Colorado Consumer AI Notice",
            "SB 24-205 §6-1-1704(3)",
            "Consumer notice of AI use in a consequential decision, with system description, contact information "
            "and opt-out rights.",
            template_id="transparency-notice",
        ),
    ]
    if is_developer(ctx):
        artifacts.append(
            artifact(
                "model-card",
                "Colorado Developer Disclosure Documentation",
                "SB 24-205 §6-1-1703(2)",
                "Deployer-facing documentation of intended uses, limitations, development data, and discrimination "
                "mitigations.",
                template_id="model-card",
            )
        )
    if is_financial_services_ai(ctx) or is_employment_context(ctx):
        artifacts.append(
            artifact(
                "bias-audit",
                "Algorithmic Discrimination Analysis",
                "SB 24-205 §6-1-1701(1), §6-1-1704(1)",
                "Testing for algorithmic discrimination across the protected classes of the Colorado AI Act.",
            )
        )
    return artifacts


def _actions(ctx: ProductContext, risk: RiskClassification) -> list[ActionRequirement]:
    if risk.level != RiskLevel.HIGH:
        return []
    actions: list[ActionRequirement] = []
    if is_deployer(ctx):
        actions += [
            _action(
                "co-risk-management-policy",
                "Implement risk management policy and program",
                "Establish a risk management policy naming governance principles, discrimination mitigation "
                "processes, oversight personnel and training requirements.",
                "critical", "SB 24-205 §6-1-1704(1)", "4-8 weeks",
            ),
            _action(
                "co-impact-assessment",
                "Complete impact assessment before deployment",
                "Cover purpose, intended uses, discrimination risks, input and output data, performance metrics and "
                "safeguards. Update annually after deployment.",
                "critical", "SB 24-205 §6-1-1704(2)", "2-4 weeks",
            ),
            _action(
                "co-consumer-notice",
                "Provide consumer notice of AI use in consequential decisions",
                "Notify consumers that a high-risk AI system makes or substantially factors into a consequential "
                "decision, with contact details and opt-out information.",
                "critical", "SB 24-205 §6-1-1704(3)", "1-2 weeks",
            ),
            _action(
                "co-opt-out-mechanism",
                "Implement consumer opt-out for profiling",
                "Let consumers opt out of profiling in furtherance of consequential decisions through an accessible "
                "mechanism.",
                "critical", "SB 24-205 §6-1-1704(3)(c)", "2-4 weeks",
            ),
            _action(
                "co-discrimination-testing",
                "Test for algorithmic discrimination",
                "Test for and mitigate algorithmic discrimination across protected classes. Document methodology, "
                "results and remediation.",
                "critical", "SB 24-205 §6-1-1701(1), §6-1-1704(1)", "3-6 weeks",
            ),
        ]
    if is_developer(ctx):
        actions += [
            _action(
                "co-developer-reasonable-care",
                "Exercise reasonable care to prevent algorithmic discrimination",
                "Protect consumers from foreseeable discrimination risks of intended uses. Document design choices, "
                "data selection and bias mitigation.",
                "critical", "SB 24-205 §6-1-1703(1)", "4-8 weeks",
            ),
            _action(
                "co-developer-documentation",
                "Provide deployer documentation and transparency notice",
                "Publish a statement of high-risk systems developed and give deployers documentation of limitations, "
                "intended uses, data and mitigations.",
                "critical", "SB 24-205 §6-1-1703(2)-(3)", "2-4 weeks",
            ),
        ]
    actions.append(
        _action(
            "co-ag-notification",
            "Establish process for AG notification of discrimination",
            "Notify the Colorado Attorney General within 90 days of discovering algorithmic discrimination, "
            "describing affected populations and remediation.",
            "important", "SB 24-205 §6-1-1704(4)", "1-2 weeks",
        )
    )
    if is_genai_in_consequential_area(ctx):
        actions.append(
            _action(
                "co-genai-consequential-controls",
                "Implement controls for GenAI use in consequential decisions",
                "Validate GenAI outputs before they influence decisions, document their use, and keep human "
                "oversight. Address hallucination risk in the impact assessment.",
                "critical", "SB 24-205 §6-1-1702, §6-1-1704", "2-4 weeks",
            )
        )
    if has_agentic_capabilities(ctx):
        actions.append(
            _action(
                "co-agentic-oversight",
                "Implement oversight for agentic AI in consequential decisions",
                "Add human checkpoints before autonomous actions affecting consumers and document decision authority, "
                "action logging and failsafes.",
                "critical", "SB 24-205 §6-1-1704(1)-(2)", "3-6 weeks",
            )
        )
    return actions


def _timeline(ctx: ProductContext, risk: RiskClassification) -> ComplianceTimeline:
    notes = ["The Colorado AI Act (SB 24-205) was signed on May 17, 2024 and takes effect February 1, 2026."]
    if risk.level == RiskLevel.HIGH:
        notes += [
            "All high-risk obligations take effect on February 1, 2026. Risk management policies, impact "
            "assessments and consumer notices must be in place by then.",
            "Impact assessments are updated annually. Discovered discrimination is reported to the AG within 90 days.",
        ]
    elif risk.level == RiskLevel.LIMITED:
        notes.append(
            "Using the system for material consequential decisions would trigger the full high-risk obligations."
        )
    return ComplianceTimeline(
        effective_date=EFFECTIVE_DATE,
        deadlines=[
            deadline(
                EFFECTIVE_DATE,
                "Colorado AI Act takes effect. Developer and deployer obligations become enforceable.",
                "SB 24-205",
            )
        ],
        notes=notes,
    )


MODULE = RuleModule(
    id=JURISDICTION,
    name="Colorado AI Act (SB 24-205)",
    jurisdiction=JURISDICTION,
    classify=classify_risk,
    provisions=_provisions,
    artifacts=_artifacts,
    actions=_actions,
    schedule=_timeline,
)
