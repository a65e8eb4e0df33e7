"""United Kingdom: UK GDPR and ICO guidance, AISI, DSIT principles, and the FCA.

The UK has no single AI statute. Obligations come from data protection law,
sector regulators and frontier model safety commitments, so the module walks
four trigger families and picks the strictest outcome.
"""
from __future__ import annotations

from functools import partial

from jurisdictions.contract import RuleModule, Trigger, matching, when
from jurisdictions.shared import (
    action,
    artifact,
    can_generate_deepfakes,
    deadline,
    desc_has,
    has_agentic_capabilities,
    involves_minors,
    is_employment_context,
    is_financial_services_ai,
    is_fully_automated,
    is_genai_product,
    makes_material_decisions,
    processes_biometric_data,
    provision,
    uses_foundation_model,
)
from models.actions import ActionRequirement
from models.context import ProductContext
from models.results import ApplicableProvision, ArtifactRequirement, ComplianceTimeline, RiskClassification
from models.shared import RegulatoryForce, RiskLevel

JURISDICTION = "uk"

_action = partial(action, JURISDICTION)

UK_PERSONAL_DATA = frozenset(
    {"personal", "sensitive", "biometric", "health", "financial", "location", "behavioral",
     "minor", "employment", "criminal", "political", "genetic"}
)
SPECIAL_CATEGORY = frozenset({"sensitive", "biometric", "health", "genetic", "political", "criminal"})
DPIA_SPECIAL_CATEGORY = frozenset({"biometric", "health", "genetic", "criminal", "sensitive"})


def processes_personal_data(ctx: ProductContext) -> bool:
    return any(d in UK_PERSONAL_DATA for d in ctx.data_processed)


def _frontier(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    return gen is not None and bool(gen.is_frontier_model)


def _self_trained(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    return gen is not None and gen.foundation_model_source == "self-trained"


def is_frontier_model_provider(ctx: ProductContext) -> bool:
    return _frontier(ctx) and (ctx.product_type == "foundation-model" or _self_trained(ctx))


def is_automated_employment_decision(ctx: ProductContext) -> bool:
    return is_employment_context(ctx) and makes_material_decisions(ctx) and is_fully_automated(ctx)


def _automated_significant(ctx: ProductContext) -> bool:
    return is_fully_automated(ctx) and makes_material_decisions(ctx)


def _trains_on_personal_data(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    risky_sources = ("personal-data", "public-web-scrape", "user-generated-content")
    personal = ctx.training_data.contains_personal_data or (
        gen is not None and any(s in gen.training_data_includes for s in risky_sources)
    )
    return personal and ctx.training_data.uses_training_data


def _dpia_required(ctx: ProductContext) -> bool:
    special = any(d in DPIA_SPECIAL_CATEGORY for d in ctx.data_processed)
    large_scale = "general-public" in ctx.user_populations or "consumers" in ctx.user_populations
    return (special and large_scale) or _automated_significant(ctx) or processes_biometric_data(ctx)


def _generates_personal_content(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    return gen is not None and gen.generates_content and processes_personal_data(ctx)


AISI_TRIGGERS: tuple[Trigger, ...] = (
    Trigger(
        "aisi-frontier-safety-evaluation", "Frontier Model Safety Evaluation", "AISI Frontier Model Framework",
        lambda c: _frontier(c) or (c.product_type == "foundation-model" and _self_trained(c)),
    ),
    Trigger("aisi-pre-deployment-testing", "Pre-Deployment Testing Requirements", "AISI Frontier Model Framework",
            _frontier),
    Trigger(
        "aisi-voluntary-commitments", "Voluntary Safety Commitments (Becoming Mandatory)",
        "AISI Frontier Model Framework",
        lambda c: _frontier(c) or c.product_type == "foundation-model",
    ),
    Trigger(
        "aisi-agentic-capability-evaluation", "Agentic Capability Evaluation", "AISI Frontier Model Framework",
        lambda c: _frontier(c) and has_agentic_capabilities(c),
    ),
)

DSIT_TRIGGERS: tuple[Trigger, ...] = (
    Trigger("dsit-foundation-model-transparency", "Foundation Model Transparency",
            "DSIT Foundation Model Taskforce Principles", uses_foundation_model),
    Trigger(
        "dsit-foundation-model-accountability", "Foundation Model Accountability",
        "DSIT Foundation Model Taskforce Principles",
        lambda c: c.product_type == "foundation-model" or (uses_foundation_model(c) and _self_trained(c)),
    ),
    Trigger(
        "dsit-foundation-model-safety", "Foundation Model Safety Standards",
        "DSIT Foundation Model Taskforce Principles",
        lambda c: c.product_type == "foundation-model" or _frontier(c),
    ),
)

ICO_TRIGGERS: tuple[Trigger, ...] = (
    Trigger("ico-lawful-basis-ai-training", "Lawful Basis for AI Training on Personal Data",
            "UK GDPR / Data Protection Act 2018", _trains_on_personal_data),
    Trigger("ico-generated-content-personal-data", "Generated Content Containing Personal Data",
            "UK GDPR / Data Protection Act 2018", _generates_personal_content),
    Trigger("ico-automated-decisions", "Automated Decision-Making (UK GDPR Article 22)",
            "UK GDPR / Data Protection Act 2018", _automated_significant),
    Trigger("ico-dpia-requirement", "UK DPIA Requirement", "UK GDPR Article 35 / Data Protection Act 2018",
            _dpia_required),
    Trigger("ico-children-data", "Children's Data Processing (Age Appropriate Design Code)",
            "UK GDPR / Age Appropriate Design Code (Children's Code)", involves_minors),
    Trigger("ico-special-category", "Special Category Data Processing",
            "UK GDPR Article 9 / Data Protection Act 2018 Schedule 1",
            lambda c: any(d in SPECIAL_CATEGORY for d in c.data_processed)),
)


def _credit(ctx: ProductContext) -> bool:
    fin = ctx.sector_context.financial_services if ctx.sector_context else None
    return (
        (fin is not None and fin.involves_credit)
        or "credit-applicants" in ctx.user_populations
        or desc_has(ctx, "credit scor", "creditworth", "lending")
    )


def _insurance(ctx: ProductContext) -> bool:
    fin = ctx.sector_context.financial_services if ctx.sector_context else None
    if fin is not None and fin.involves_insurance_pricing:
        return True
    return desc_has(ctx, "insurance") and desc_has(ctx, "pricing", "underwriting", "risk")


def _trading(ctx: ProductContext) -> bool:
    fin = ctx.sector_context.financial_services if ctx.sector_context else None
    return fin is not None and fin.involves_trading


FCA_TRIGGERS: tuple[Trigger, ...] = (
    Trigger(
        "fca-fair-treatment", "FCA Fair Treatment of Customers (AI Outcomes)", "FCA Principles-Based AI Guidance",
        lambda c: is_financial_services_ai(c)
        and ("consumers" in c.user_populations or "credit-applicants" in c.user_populations),
    ),
    Trigger("fca-ai-bias-avoidance", "FCA AI Bias Avoidance", "FCA Principles-Based AI Guidance",
            lambda c: is_financial_services_ai(c) and makes_material_decisions(c)),
    Trigger("fca-ai-explainability", "FCA AI Explainability Requirements", "FCA Principles-Based AI Guidance",
            lambda c: is_financial_services_ai(c) and is_fully_automated(c)),
    Trigger("fca-smcr-accountability", "SM&CR Accountability for AI Decisions",
            "Senior Managers & Certification Regime",
            lambda c: is_financial_services_ai(c) and makes_material_decisions(c)),
    Trigger("fca-credit-ai", "FCA AI in Credit Decisions",
            "FCA Principles-Based AI Guidance / Consumer Credit Act", _credit),
    Trigger("fca-insurance-ai", "FCA AI in Insurance Pricing",
            "FCA Principles-Based AI Guidance / Insurance Conduct of Business", _insurance),
    Trigger("fca-trading-ai", "FCA AI in Algorithmic Trading", "FCA / MiFID II Algorithmic Trading Requirements",
            _trading),
)


def _ids(triggers: list[Trigger]) -> list[str]:
    return [t.id for t in triggers]


def _fired(ctx: ProductContext, triggers: tuple[Trigger, ...], trigger_id: str) -> bool:
    return trigger_id in _ids(matching(ctx, triggers))


def classify_risk(ctx: ProductContext) -> RiskClassification:
    aisi = matching(ctx, AISI_TRIGGERS)
    fca = matching(ctx, FCA_TRIGGERS)
    ico = matching(ctx, ICO_TRIGGERS)

    if is_frontier_model_provider(ctx):
        return RiskClassification(
            level=RiskLevel.HIGH,
            justification=(
                "This AI system involves a frontier model. Frontier model providers face AISI safety evaluation, "
                "pre-deployment testing, and safety commitments that are becoming mandatory."
            ),
            applicable_categories=["frontier-model-provider", *_ids(aisi)],
            provisions=["AISI Frontier Model Framework", "DSIT Foundation Model Principles"],
        )
    if is_financial_services_ai(ctx) and makes_material_decisions(ctx):
        concerns = "; ".join(t.description for t in fca)
        return RiskClassification(
            level=RiskLevel.HIGH,
            justification=(
                "This AI system operates in financial services with material decision-making impact. FCA "
                "principles require fair treatment, bias avoidance and explainability, and SM&CR applies to "
                f"AI-driven decisions. Applicable FCA concerns: {concerns}."
            ),
            applicable_categories=["financial-services-material", *_ids(fca)],
            provisions=list(dict.fromkeys(["FCA Principles-Based AI Guidance", "SM&CR", *(t.citation for t in fca)])),
        )
    if is_automated_employment_decision(ctx):
        return RiskClassification(
            level=RiskLevel.HIGH,
            justification=(
                "This AI system makes fully automated employment decisions with significant effects. UK GDPR and "
                "ICO guidance require human oversight, data protection safeguards and potentially a DPIA."
            ),
            applicable_categories=["automated-employment", *_ids(ico)],
            provisions=["UK GDPR Article 22", "ICO AI Guidance", "Data Protection Act 2018"],
        )
    if processes_biometric_data(ctx):
        return RiskClassification(
            level=RiskLevel.HIGH,
            justification=(
                "This AI system processes biometric data, which is special category data under UK GDPR. An "
                "Article 9(2) condition and a DPIA are required, with heightened transparency and security."
            ),
            applicable_categories=["biometric-processing", *_ids(ico)],
            provisions=[
                "UK GDPR Article 9",
                "UK GDPR Article 35",
                "Data Protection Act 2018 Schedule 1",
                "ICO AI Guidance",
            ],
        )
    if uses_foundation_model(ctx) and ctx.product_type != "foundation-model" and not _self_trained(ctx):
        provisions = ["DSIT Foundation Model Principles"]
        if aisi:
            provisions.append("AISI Frontier Model Framework")
        return RiskClassification(
            level=RiskLevel.LIMITED,
            justification=(
                "This AI system deploys a third-party foundation model. DSIT transparency and accountability "
                "principles apply to the deployer, along with UK GDPR for any personal data processing."
            ),
            applicable_categories=["foundation-model-deployer", *_ids(aisi)],
            provisions=provisions,
        )
    if is_genai_product(ctx):
        categories = ["genai-content-generation"]
        if can_generate_deepfakes(ctx):
            categories.append("deepfake-capabilities")
        return RiskClassification(
            level=RiskLevel.LIMITED,
            justification=(
                "This AI system generates content. UK expectations include transparency about AI-generated content "
                "and alignment with ICO guidance and DSIT principles."
            ),
            applicable_categories=categories,
            provisions=["ICO AI Guidance", "DSIT Foundation Model Principles"],
        )
    if processes_personal_data(ctx):
        return RiskClassification(
            level=RiskLevel.LIMITED,
            justification=(
                "This AI system processes personal data and must comply with UK GDPR and the Data Protection Act "
                "2018, including lawful basis, transparency, fairness and data subject rights."
            ),
            applicable_categories=["personal-data-processing", *_ids(ico)],
            provisions=["UK GDPR", "Data Protection Act 2018", "ICO AI Guidance"],
        )
    return RiskClassification(
        level=RiskLevel.MINIMAL,
        justification=(
            "This AI system does not process personal data, make high-impact decisions, or involve frontier or "
            "foundation models. Voluntary alignment with DSIT principles is recommended."
        ),
        applicable_categories=[],
        provisions=[],
    )


DATA_PROTECTION_PROVISIONS: tuple[tuple, ...] = (
    (
        _automated_significant,
        provision(
            "uk-gdpr-art22", "UK GDPR", "Article 22",
            "Automated Individual Decision-Making",
            "Individuals may not be subject to solely automated decisions with legal or similarly significant "
            "effects without safeguards, including human intervention.",
            "This AI system makes fully automated decisions with material impact.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
    (
        _dpia_required,
        provision(
            "uk-gdpr-dpia", "UK GDPR", "Article 35",
            "UK Data Protection Impact Assessment",
            "A DPIA is required before processing likely to result in high risk, including profiling with "
            "significant effects and large-scale special category or biometric processing.",
            "This AI system meets the ICO screening criteria for a DPIA.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
    (
        lambda c: any(d in DPIA_SPECIAL_CATEGORY for d in c.data_processed),
        provision(
            "uk-gdpr-special-category", "UK GDPR / Data Protection Act 2018", "Article 9, Schedule 1",
            "Special Category Data Processing",
            "Special category data needs an Article 9 condition and, for many conditions, an appropriate policy "
            "document under DPA 2018 Schedule 1.",
            "This AI system processes special category data.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
    (
        involves_minors,
        provision(
            "uk-children-code", "Data Protection Act 2018 / ICO Age Appropriate Design Code",
            "Age Appropriate Design Code (Children's Code)",
            "Age Appropriate Design Code",
            "Online services likely to be accessed by children must meet 15 standards, with high privacy by default "
            "and the best interests of the child as a primary consideration.",
            "This AI system processes children's data or is likely to be used by children.",
            force=RegulatoryForce.BINDING_REGULATION,
        ),
    ),
    (
        _trains_on_personal_data,
        provision(
            "uk-ico-training-data", "UK GDPR / ICO AI Guidance", "Articles 5-6, 14",
            "Lawful Basis for AI Training on Personal Data",
            "Training on personal data needs a lawful basis, usually legitimate interests backed by a balancing "
            "test, and transparency toward the people whose data was used.",
            "This AI system is trained on personal data.",
            force=RegulatoryForce.SUPERVISORY_GUIDANCE,
        ),
    ),
    (
        _generates_personal_content,
        provision(
            "uk-ico-generated-content", "UK GDPR / ICO AI Guidance", "Articles 5, 17, 22",
            "AI-Generated Content Containing Personal Data",
            "Generated output that contains personal data must be accurate and is subject to erasure and "
            "rectification rights.",
            "This AI system generates content while processing personal data.",
            force=RegulatoryForce.SUPERVISORY_GUIDANCE,
        ),
    ),
)

FCA_PROVISIONS: tuple[tuple, ...] = (
    (
        lambda c: _fired(c, FCA_TRIGGERS, "fca-smcr-accountability"),
        provision(
            "uk-fca-smcr", "Senior Managers & Certification Regime (SM&CR)", "SM&CR / FCA SYSC 4",
            "SM&CR Accountability for AI Decisions",
            "A named senior manager is accountable for AI-driven decisions within their area of responsibility.",
            "This AI system makes material decisions at an FCA-regulated firm.",
            force=RegulatoryForce.BINDING_REGULATION,
        ),
    ),
    (
        lambda c: _fired(c, FCA_TRIGGERS, "fca-credit-ai"),
        provision(
            "uk-fca-credit-ai", "FCA Handbook / Consumer Credit Act", "FCA CONC / Consumer Credit Act 1974",
            "AI in Credit Decisions",
            "Creditworthiness assessments must be reasonable and proportionate and must not produce unfair outcomes.",
            "This AI system is used in credit decisions.",
            force=RegulatoryForce.BINDING_REGULATION,
        ),
    ),
    (
        lambda c: _fired(c, FCA_TRIGGERS, "fca-insurance-ai"),
        provision(
            "uk-fca-insurance-ai", "FCA Handbook / Insurance Conduct of Business", "FCA ICOBS / Insurance Act 2015",
            "AI in Insurance Pricing and Underwriting",
            "AI-driven pricing must deliver fair value and must not penalise loyal or vulnerable customers.",
            "This AI system is used in insurance pricing or underwriting.",
            force=RegulatoryForce.BINDING_REGULATION,
        ),
    ),
    (
        lambda c: _fired(c, FCA_TRIGGERS, "fca-trading-ai"),
        provision(
            "uk-fca-trading-ai", "FCA Handbook / MiFID II Implementation", "FCA MAR 7A / MiFID II Algorithmic Trading",
            "AI in Algorithmic Trading",
            "Algorithmic trading systems need testing, kill switches, risk controls and notification to the FCA.",
            "This AI system is used in trading.",
            force=RegulatoryForce.BINDING_REGULATION,
        ),
    ),
)


def _provisions(ctx: ProductContext, risk: RiskClassification) -> list[ApplicableProvision]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    provisions: list[ApplicableProvision] = []
    if processes_personal_data(ctx):
        provisions += [
            provision(
                "uk-gdpr-principles", "UK GDPR", "Articles 5-6",
                "UK GDPR Principles and Lawful Basis",
                "Processing must be lawful, fair, transparent, purpose-limited, minimised, accurate, retained no "
                "longer than needed, and secure, with an Article 6 legal basis.",
                "Applies to all personal data processing by the AI system in the UK market.",
                force=RegulatoryForce.BINDING_LAW,
            ),
            provision(
                "uk-gdpr-data-subject-rights", "UK GDPR", "Articles 12-23",
                "Data Subject Rights",
                "Rights of access, rectification, erasure, restriction, portability and objection, including "
                "meaningful information about automated decision logic.",
                "The AI system must facilitate data subject rights.",
                force=RegulatoryForce.BINDING_LAW,
            ),
            *when(ctx, DATA_PROTECTION_PROVISIONS),
        ]

    aisi = matching(ctx, AISI_TRIGGERS)
    if aisi:
        provisions.append(
            provision(
                "uk-aisi-frontier-framework", "AISI Frontier Model Framework", "AISI Safety Evaluation Framework",
                "AISI Frontier Model Safety Requirements",
                "Frontier model developers give the AI Security Institute pre-deployment access for safety "
                "evaluation of dangerous capabilities.",
                "This AI system involves a frontier or foundation model.",
                force=RegulatoryForce.VOLUNTARY_FRAMEWORK,
            )
        )
        if "aisi-agentic-capability-evaluation" in _ids(aisi):
            provisions.append(
                provision(
                    "uk-aisi-agentic-evaluation", "AISI Frontier Model Framework", "AISI Agentic Capability Assessment",
                    "Agentic Capability Evaluation",
                    "Frontier models with agentic capabilities are evaluated for autonomous replication, tool misuse "
                    "and loss-of-control risks.",
                    "This frontier model has agentic capabilities.",
                    force=RegulatoryForce.VOLUNTARY_FRAMEWORK,
                )
            )

    if matching(ctx, DSIT_TRIGGERS):
        provisions.append(
            provision(
                "uk-dsit-foundation-principles", "DSIT Foundation Model Taskforce Principles",
                "DSIT Foundation Model Principles (2024)",
                "DSIT Foundation Model Transparency and Accountability",
                "Foundation model developers and deployers should be transparent about capabilities and limitations "
                "and accountable across the value chain.",
                "This AI system uses or provides a foundation model.",
                force=RegulatoryForce.VOLUNTARY_FRAMEWORK,
            )
        )

    if matching(ctx, FCA_TRIGGERS):
        provisions.append(
            provision(
                "uk-fca-principles", "FCA Handbook / FCA Principles-Based AI Guidance", "FCA Principles for Businesses",
                "FCA Principles-Based AI Guidance",
                "The FCA applies its existing principles and the Consumer Duty to AI, requiring good outcomes, fair "
                "treatment and clear communication.",
                "This AI system is used in regulated financial services.",
                force=RegulatoryForce.SUPERVISORY_GUIDANCE,
            )
        )
        provisions += when(ctx, FCA_PROVISIONS)

    gen = ctx.generative_ai_context
    if is_financial_services_ai(ctx) and gen is not None and gen.foundation_model_source in ("third-party-api", "fine-tuned"):
        provisions.append(
            provision(
                "uk-pra-ss221", "PRA Supervisory Statement SS2/21", "SS2/21",
                "PRA Third-Party Dependency Management",
                "Firms relying on third-party model providers must manage outsourcing risk, including exit plans and "
                "operational resilience.",
                "This financial AI system depends on a third-party foundation model.",
                force=RegulatoryForce.SUPERVISORY_GUIDANCE,
            )
        )
    if len(ctx.target_markets) > 1 and processes_personal_data(ctx):
        provisions.append(
            provision(
                "uk-ico-transfer-risk", "UK GDPR / ICO Transfer Risk Assessment", "Articles 44-49, ICO TRA Tool",
                "International Data Transfer Risk Assessment",
                "Restricted transfers outside the UK need adequacy regulations or appropriate safeguards with a "
                "transfer risk assessment.",
                "This AI system targets several markets and may transfer personal data abroad.",
                force=RegulatoryForce.BINDING_LAW,
            )
        )
    if has_agentic_capabilities(ctx) and not aisi:
        provisions.append(
            provision(
                "uk-agentic-existing-frameworks", "UK GDPR / ICO Guidance / DSIT Principles", "Multiple",
                "Agentic AI Under Existing UK Frameworks",
                "Agentic systems are governed by existing data protection, automated decision and accountability "
                "rules applied to each agent action.",
                "This AI system has agentic capabilities.",
                force=RegulatoryForce.SUPERVISORY_GUIDANCE,
            )
        )
    return provisions


def _artifacts(ctx: ProductContext, risk: RiskClassification) -> list[ArtifactRequirement]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    artifacts: list[ArtifactRequirement] = []
    if _dpia_required(ctx):
        artifacts.append(
            artifact(
                "dpia",
                "UK Data Protection Impact Assessment",
                "UK GDPR Article 35 / ICO DPIA Guidance",
                "DPIA following ICO guidance: processing description, necessity, risks to individuals and mitigations.",
                template_id="dpia-uk",
            )
        )
    if processes_personal_data(ctx):
        artifacts.append(
            artifact(
                "transparency-notice",
                "UK GDPR Privacy Notice / AI Transparency Statement",
                "UK GDPR Articles 13-14 / ICO AI Guidance",
                "Privacy notice with an explanation of how AI is used and the logic of automated decisions.",
                template_id="transparency-notice",
            )
        )
    frontier = is_frontier_model_provider(ctx)
    if frontier:
        artifacts += [
            artifact(
                "risk-assessment",
                "AISI Frontier Model Safety Assessment",
                "AISI Frontier Model Framework",
                "Dangerous capability evaluations, red-teaming results and mitigations for the frontier model.",
            ),
            artifact(
                "model-card",
                "Frontier Model System Card / Technical Documentation",
                "AISI Frontier Model Framework / DSIT Principles",
                "Capabilities, limitations, evaluation results and safety measures of the frontier model.",
                template_id="model-card",
            ),
        ]
    elif uses_foundation_model(ctx):
        artifacts.append(
            artifact(
                "model-card",
                "Foundation Model Documentation (DSIT-Aligned)",
                "DSIT Foundation Model Principles",
                "Documentation of the foundation model used, its limitations and how it is integrated.",
                template_id="model-card",
                required=False,
            )
        )
    if is_genai_product(ctx):
        artifacts.append(
            artifact(
                "genai-content-policy",
                "AI-Generated Content Disclosure Policy (UK)",
                "ICO AI Guidance / DSIT Principles",
                "How AI-generated content is labelled and disclosed to UK users.",
                template_id="genai-content-policy",
                required=False,
            )
        )
    if can_generate_deepfakes(ctx):
        artifacts.append(
            artifact(
                "transparency-notice",
                "Synthetic Media / Deepfake Disclosure Notice",
                "Online Safety Act 2023 / ICO Guidance",
                "Disclosure that media is synthetic, with safeguards against intimate image abuse.",
            )
        )
    if is_financial_services_ai(ctx):
        artifacts.append(
            artifact(
                "risk-assessment",
                "FCA AI Model Risk Assessment",
                "FCA Principles / SM&CR / PRA Supervisory Statement",
                "Model risk assessment covering consumer outcomes, bias, explainability and accountability.",
            )
        )
        if _fired(ctx, FCA_TRIGGERS, "fca-credit-ai"):
            artifacts.append(
                artifact(
                    "bias-audit",
                    "FCA Credit AI Fairness Assessment",
                    "FCA CONC / Consumer Duty / Equality Act 2010",
                    "Fairness testing of the credit model across protected characteristics.",
                    template_id="bias-audit-nyc",
                )
            )
    if involves_minors(ctx):
        artifacts.append(
            artifact(
                "risk-assessment",
                "ICO Children's Code Impact Assessment",
                "Age Appropriate Design Code (Children's Code)",
                "Assessment of the service against the 15 Children's Code standards.",
            )
        )
    return artifacts


ICO_ACTIONS: tuple[tuple, ...] = (
    (
        _dpia_required,
        _action(
            "uk-conduct-dpia",
            "Conduct UK Data Protection Impact Assessment",
            "Complete a DPIA following ICO guidance before processing begins, and consult the ICO if high residual "
            "risk remains.",
            "critical", "UK GDPR Article 35 / ICO DPIA Guidance", "2-4 weeks",
        ),
    ),
    (
        _automated_significant,
        _action(
            "uk-automated-decision-safeguards",
            "Implement UK GDPR Article 22 automated decision safeguards",
            "Provide human intervention, the right to contest, and meaningful information about the logic of "
            "automated decisions.",
            "critical", "UK GDPR Article 22 / ICO Automated Decision-Making Guidance", "2-4 weeks",
        ),
    ),
    (
        lambda c: any(d in SPECIAL_CATEGORY for d in c.data_processed),
        _action(
            "uk-special-category-basis",
            "Establish legal basis for special category data processing",
            "Identify an Article 9 condition and prepare the Schedule 1 appropriate policy document where needed.",
            "critical", "UK GDPR Article 9 / DPA 2018 Schedule 1", "1-2 weeks",
        ),
    ),
    (
        involves_minors,
        _action(
            "uk-children-code-compliance",
            "Comply with ICO Age Appropriate Design Code (Children's Code)",
            "Apply the 15 Children's Code standards, with high-privacy defaults and age assurance.",
            "critical", "ICO Age Appropriate Design Code", "4-8 weeks",
        ),
    ),
    (
        _trains_on_personal_data,
        _action(
            "uk-training-data-legal-basis",
            "Establish lawful basis for AI training data processing",
            "Document a lawful basis and legitimate interests assessment for training on personal data and inform "
            "affected individuals.",
            "critical", "UK GDPR Articles 5-6, 14 / ICO AI Guidance", "2-4 weeks",
        ),
    ),
    (
        _trains_on_personal_data,
        _action(
            "uk-training-data-erasure-policy",
            "Develop policy for right to erasure in trained models",
            "Define how erasure requests affect training data and trained models, including retraining or output "
            "suppression.",
            "important", "UK GDPR Article 17 / ICO AI Guidance", "2-4 weeks",
        ),
    ),
)

FCA_ACTIONS: tuple[tuple, ...] = (
    (
        lambda c: _fired(c, FCA_TRIGGERS, "fca-smcr-accountability"),
        _action(
            "uk-fca-smcr-mapping",
            "Map SM&CR accountability for AI governance",
            "Assign a senior manager responsible for AI decisions and record it in the responsibilities map.",
            "critical", "SM&CR / FCA SYSC 4", "1-2 weeks",
        ),
    ),
    (
        lambda c: _fired(c, FCA_TRIGGERS, "fca-ai-explainability"),
        _action(
            "uk-fca-explainability",
            "Implement AI explainability for regulated decisions",
            "Explain automated decisions to customers and supervisors in terms they can act on.",
            "critical", "FCA Principles / Consumer Duty", "3-6 weeks",
        ),
    ),
    (
        lambda c: _fired(c, FCA_TRIGGERS, "fca-credit-ai"),
        _action(
            "uk-fca-credit-fairness",
            "Conduct fair lending analysis for AI credit model",
            "Test credit decisions for unfair outcomes across protected characteristics and vulnerable customers.",
            "critical", "FCA CONC / Consumer Duty / Equality Act 2010", "4-8 weeks",
        ),
    ),
    (
        lambda c: _fired(c, FCA_TRIGGERS, "fca-insurance-ai"),
        _action(
            "uk-fca-insurance-fairness",
            "Ensure fair value in AI insurance pricing",
            "Assess AI pricing for fair value and make sure it does not exploit loyalty or vulnerability.",
            "critical", "FCA ICOBS / Consumer Duty", "3-6 weeks",
        ),
    ),
    (
        lambda c: _fired(c, FCA_TRIGGERS, "fca-trading-ai"),
        _action(
            "uk-fca-algo-trading-controls",
            "Implement FCA algorithmic trading controls",
            "Put pre-trade risk limits, kill switches and real-time monitoring around AI trading algorithms.",
            "critical", "FCA MAR 7A / MiFID II Implementation", "4-8 weeks",
        ),
    ),
    (
        lambda c: _fired(c, FCA_TRIGGERS, "fca-trading-ai"),
        _action(
            "uk-fca-algo-testing",
            "Conduct AI trading algorithm testing and validation",
            "Test algorithms in non-live environments and under stressed market conditions before deployment.",
            "critical", "FCA MAR 7A / MiFID II Algorithmic Trading", "3-6 weeks",
        ),
    ),
)


def _actions(ctx: ProductContext, risk: RiskClassification) -> list[ActionRequirement]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    actions: list[ActionRequirement] = []
    if processes_personal_data(ctx):
        actions += [
            _action(
                "uk-legal-basis-assessment",
                "Determine lawful basis for processing under UK GDPR",
                "Identify and document the Article 6 lawful basis for each processing purpose.",
                "critical", "UK GDPR Articles 6-7", "1-2 weeks",
            ),
            _action(
                "uk-data-subject-rights",
                "Implement UK GDPR data subject rights mechanisms",
                "Handle access, rectification, erasure, restriction, portability and objection requests within one "
                "month.",
                "critical", "UK GDPR Articles 12-23", "3-6 weeks",
            ),
            _action(
                "uk-privacy-notice",
                "Publish UK GDPR-compliant privacy notice with AI transparency",
                "Publish a privacy notice that explains AI processing and automated decision logic.",
                "critical", "UK GDPR Articles 13-14 / ICO Guidance", "1-2 weeks",
            ),
            *when(ctx, ICO_ACTIONS),
            _action(
                "uk-security-measures",
                "Implement UK GDPR-compliant security measures for AI system",
                "Apply appropriate technical and organisational security, including protection against model "
                "inversion and data leakage.",
                "important", "UK GDPR Article 32", "2-6 weeks",
            ),
        ]

    aisi = matching(ctx, AISI_TRIGGERS)
    if aisi and is_frontier_model_provider(ctx):
        actions += [
            _action(
                "uk-aisi-safety-evaluation",
                "Submit frontier model for AISI safety evaluation",
                "Give the AI Security Institute pre-deployment access for dangerous capability evaluation.",
                "critical", "AISI Frontier Model Framework", "4-8 weeks",
            ),
            _action(
                "uk-aisi-pre-deployment-testing",
                "Conduct pre-deployment safety testing aligned with AISI protocols",
                "Run red-teaming and capability evaluations for misuse, cyber and autonomy risks before release.",
                "critical", "AISI Frontier Model Framework", "4-8 weeks",
            ),
            _action(
                "uk-aisi-safety-commitments",
                "Make and implement AISI safety commitments",
                "Publish a safety framework with capability thresholds and the mitigations they trigger.",
                "critical", "AISI Frontier Model Framework / Bletchley Declaration", "2-4 weeks",
            ),
        ]
    if "aisi-agentic-capability-evaluation" in _ids(aisi):
        actions.append(
            _action(
                "uk-aisi-agentic-assessment",
                "Conduct AISI-aligned agentic capability assessment",
                "Evaluate autonomous tool use, replication and loss-of-control risks of the agentic model.",
                "critical", "AISI Frontier Model Framework", "3-6 weeks",
            )
        )

    if matching(ctx, DSIT_TRIGGERS):
        actions.append(
            _action(
                "uk-dsit-transparency-disclosure",
                "Implement DSIT foundation model transparency disclosures",
                "Disclose which foundation model is used, its known limitations, and how outputs are governed.",
                "important", "DSIT Foundation Model Taskforce Principles", "2-4 weeks",
            )
        )
        if ctx.product_type == "foundation-model" or _self_trained(ctx):
            actions.append(
                _action(
                    "uk-dsit-safety-standards",
                    "Implement DSIT foundation model safety standards",
                    "Apply safety testing, misuse monitoring and incident reporting for the foundation model.",
                    "important", "DSIT Foundation Model Taskforce Principles", "4-8 weeks",
                )
            )
    if is_genai_product(ctx) and not is_frontier_model_provider(ctx):
        actions.append(
            _action(
                "uk-genai-content-disclosure",
                "Implement AI-generated content disclosure mechanisms",
                "Label AI-generated content so UK users can tell it is machine-generated.",
                "important", "ICO AI Guidance / DSIT Principles / Online Safety Act 2023", "2-4 weeks",
            )
        )
    if can_generate_deepfakes(ctx):
        actions.append(
            _action(
                "uk-deepfake-safeguards",
                "Implement deepfake and synthetic media safeguards",
                "Block intimate image abuse, label synthetic media, and provide takedown routes under the Online "
                "Safety Act.",
                "critical", "Online Safety Act 2023 / ICO Guidance", "3-6 weeks",
            )
        )
    if has_agentic_capabilities(ctx) and not aisi:
        actions += [
            _action(
                "uk-agentic-human-oversight",
                "Implement human oversight for agentic AI system",
                "Put human checkpoints before agent actions with significant effects on individuals.",
                "critical", "UK GDPR Article 22 / ICO AI Guidance / DSIT Principles", "3-6 weeks",
            ),
            _action(
                "uk-agentic-action-logging",
                "Establish comprehensive audit logging for agent actions",
                "Log every agent action and its data use to demonstrate accountability.",
                "important", "UK GDPR Article 5(2) (Accountability) / ICO Guidance", "2-4 weeks",
            ),
        ]
    if matching(ctx, FCA_TRIGGERS):
        actions += [
            _action(
                "uk-fca-fair-outcomes",
                "Demonstrate fair consumer outcomes from AI",
                "Monitor AI outcomes across customer groups and evidence that they are fair.",
                "critical", "FCA Principles / Consumer Duty / Equality Act 2010", "3-6 weeks",
            ),
            _action(
                "uk-fca-consumer-duty-ai",
                "Assess AI against FCA Consumer Duty requirements",
                "Assess the AI against the four Consumer Duty outcomes: products, price and value, understanding, "
                "and support.",
                "critical", "FCA Consumer Duty (PS22/9, FG22/5)", "3-6 weeks",
            ),
            *when(ctx, FCA_ACTIONS),
            _action(
                "uk-fca-model-governance",
                "Establish AI model risk governance framework",
                "Maintain a model inventory, independent validation and ongoing monitoring for AI models.",
                "important", "FCA Principles / PRA Supervisory Statement / Consumer Duty", "4-8 weeks",
            ),
        ]
    return actions


def _timeline(ctx: ProductContext, risk: RiskClassification) -> ComplianceTimeline:
    notes = [
        "The UK follows a principles-based, regulator-led approach to AI with no single AI statute.",
    ]
    if processes_personal_data(ctx):
        notes.append("UK GDPR and the Data Protection Act 2018 apply now to all personal data processing.")
    if risk.level == RiskLevel.HIGH and is_frontier_model_provider(ctx):
        notes.append("Frontier model providers should engage with AISI before deployment.")
    if uses_foundation_model(ctx):
        notes.append("DSIT foundation model principles are voluntary but increasingly expected.")
    if is_financial_services_ai(ctx):
        notes.append("FCA Consumer Duty has applied since July 2023 and covers AI-driven customer outcomes.")
    if involves_minors(ctx):
        notes.append("The Children's Code has been enforced since September 2021.")
    if matching(ctx, AISI_TRIGGERS):
        notes.append("AISI commitments are voluntary today but the government has signalled binding legislation.")
    return ComplianceTimeline(
        effective_date="2021-01-01",
        deadlines=[
            deadline("2021-01-01", "UK GDPR in force after Brexit transition.", "UK GDPR / DPA 2018"),
            deadline("2021-09-02", "Children's Code enforcement begins.", "Children's Code"),
            deadline("2023-03-29", "AI Regulation White Paper published.", "AI Regulation White Paper", mandatory=False),
            deadline("2023-07-31", "FCA Consumer Duty applies to open products.", "FCA Consumer Duty"),
            deadline("2023-10-26", "Online Safety Act 2023 receives Royal Assent.", "Online Safety Act 2023"),
            deadline("2023-11-01", "Bletchley Declaration and AISI established.", "AISI / Bletchley Declaration",
                     mandatory=False),
            deadline("2024-02-06", "Government response to the AI White Paper.", "AI Regulation Framework",
                     mandatory=False),
            deadline("2024-04-15", "DSIT foundation model principles published.", "DSIT Foundation Model Principles",
                     mandatory=False),
            deadline("2024-10-01", "FCA AI update on applying existing rules to AI.", "FCA AI Guidance",
                     mandatory=False),
        ],
        notes=notes,
    )


MODULE = RuleModule(
    id=JURISDICTION,
    name="UK AI Regulatory Framework",
    jurisdiction=JURISDICTION,
    classify=classify_risk,
    provisions=_provisions,
    artifacts=_artifacts,
    actions=_actions,
    schedule=_timeline,
)
