"""Brazil: LGPD, the AI Bill (PL 2338/2023), BCB guidance and the Consumer Defence Code."""
from __future__ import annotations

from functools import partial

from jurisdictions.contract import RuleModule, Trigger, matching
from jurisdictions.shared import (
    action,
    artifact,
    deadline,
    desc_has,
    is_consumer_facing,
    is_financial_services_ai,
    is_genai_product,
    makes_material_decisions,
    provision,
)
from models.actions import ActionRequirement
from models.context import ProductContext
from models.results import ApplicableProvision, ArtifactRequirement, ComplianceTimeline, RiskClassification
from models.shared import RegulatoryForce, RiskLevel

JURISDICTION = "brazil"
AI_BILL = "AI Bill (PL 2338/2023)"

_action = partial(action, JURISDICTION)

LGPD_PERSONAL_DATA = frozenset(
    {"personal", "sensitive", "biometric", "health", "financial", "location", "behavioral", "minor", "genetic",
     "political"}
)
LGPD_SENSITIVE_DATA = frozenset({"sensitive", "biometric", "health", "genetic", "political"})
HIGH_RISK_POPULATIONS = frozenset({"consumers", "credit-applicants", "job-applicants", "patients"})


def processes_personal_data(ctx: ProductContext) -> bool:
    return any(d in LGPD_PERSONAL_DATA for d in ctx.data_processed)


def is_automated_decision_making(ctx: ProductContext) -> bool:
    # LGPD Art. 20 also reaches human-on-the-loop decisions
    return makes_material_decisions(ctx) and ctx.automation_level in ("fully-automated", "human-on-the-loop")


def is_foundation_model_provider(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    return ctx.product_type == "foundation-model" or (gen is not None and gen.foundation_model_source == "self-trained")


def _ai_bill_high_risk(ctx: ProductContext) -> bool:
    sensitive_use = any(p in HIGH_RISK_POPULATIONS for p in ctx.user_populations) or desc_has(
        ctx, "credit", "employment", "health", "education", "justice", "public service"
    )
    return makes_material_decisions(ctx) and sensitive_use


LGPD_TRIGGERS: tuple[Trigger, ...] = (
    Trigger("br-lgpd-personal-data", "Personal Data Processing", "LGPD", processes_personal_data),
    Trigger("br-lgpd-automated-decisions", "Automated Decision-Making (Article 20)", "LGPD Article 20",
            is_automated_decision_making),
    Trigger("br-lgpd-sensitive-data", "Sensitive Personal Data Processing", "LGPD Article 11",
            lambda c: any(d in LGPD_SENSITIVE_DATA for d in c.data_processed)),
    Trigger("br-lgpd-minors", "Children's Data Processing", "LGPD Article 14",
            lambda c: "minor" in c.data_processed or "minors" in c.user_populations),
)

AI_BILL_TRIGGERS: tuple[Trigger, ...] = (
    Trigger("br-ai-bill-high-risk", "High-Risk AI System (AI Bill)", AI_BILL, _ai_bill_high_risk),
    Trigger("br-ai-bill-foundation-model", "Foundation Model Provider (AI Bill)", AI_BILL,
            is_foundation_model_provider),
    Trigger(
        "br-ai-bill-genai-transparency", "GenAI Transparency (AI Bill)", AI_BILL,
        lambda c: c.product_type == "generator"
        or (c.generative_ai_context is not None and c.generative_ai_context.generates_content),
    ),
    Trigger(
        "br-ai-bill-training-data", "Training Data Disclosure (AI Bill)", AI_BILL,
        lambda c: c.generative_ai_context is not None
        and (c.generative_ai_context.uses_foundation_model or c.generative_ai_context.finetuning_performed)
        and c.training_data.uses_training_data,
    ),
)


def classify_risk(ctx: ProductContext) -> RiskClassification:
    lgpd = [t.id for t in matching(ctx, LGPD_TRIGGERS)]
    bill = [t.id for t in matching(ctx, AI_BILL_TRIGGERS)]
    categories = lgpd + bill

    if "br-lgpd-automated-decisions" in lgpd:
        return RiskClassification(
            level=RiskLevel.HIGH,
            justification=(
                "This AI system makes automated decisions with material impact on individuals in Brazil. LGPD "
                "Article 20 gives data subjects the right to request review of automated decisions, and the AI Bill "
                "would classify the system as high risk."
            ),
            applicable_categories=categories,
            provisions=["LGPD Article 20", AI_BILL],
        )
    if "br-ai-bill-foundation-model" in bill:
        return RiskClassification(
            level=RiskLevel.HIGH,
            justification=(
                "This AI system is or trains a foundation model. The AI Bill imposes transparency, documentation and "
                "risk management obligations on foundation model providers."
            ),
            applicable_categories=categories,
            provisions=[AI_BILL],
        )
    if "br-lgpd-sensitive-data" in lgpd or is_financial_services_ai(ctx):
        return RiskClassification(
            level=RiskLevel.HIGH,
            justification=(
                "This AI system processes sensitive personal data or operates in financial services in Brazil. "
                "LGPD Article 11 restricts sensitive data processing and an impact report (RIPD) is expected."
            ),
            applicable_categories=categories,
            provisions=["LGPD Article 11"],
        )
    if is_genai_product(ctx):
        return RiskClassification(
            level=RiskLevel.LIMITED,
            justification=(
                "This generative AI system is subject to the AI Bill's transparency obligations for AI-generated "
                "content and training data disclosure."
            ),
            applicable_categories=bill,
            provisions=[AI_BILL],
        )
    if lgpd:
        return RiskClassification(
            level=RiskLevel.LIMITED,
            justification=(
                "This AI system processes personal data in Brazil and must comply with the LGPD, including legal "
                "basis, data subject rights and security."
            ),
            applicable_categories=lgpd,
            provisions=["LGPD"],
        )
    return RiskClassification(
        level=RiskLevel.MINIMAL,
        justification=(
            "This AI system does not trigger specific Brazilian obligations. No personal data processing, automated "
            "decisions, or generative AI concerns were identified."
        ),
        applicable_categories=[],
        provisions=[],
    )


def _bill(id: str, article: str, title: str, summary: str, relevance: str) -> ApplicableProvision:
    return provision(id, AI_BILL, article, title, summary, relevance, force=RegulatoryForce.PENDING_LEGISLATION)


AI_BILL_PROVISIONS: dict[str, ApplicableProvision] = {
    "br-ai-bill-high-risk": _bill(
        "br-ai-bill-high-risk-obligations", "High-Risk Classification",
        "High-Risk AI System Obligations (AI Bill)",
        "High-risk systems need an algorithmic impact assessment, human oversight, and bias mitigation.",
        "This AI system makes material decisions in a high-risk area.",
    ),
    "br-ai-bill-foundation-model": _bill(
        "br-ai-bill-foundation-transparency", "Foundation Model Provisions",
        "Foundation Model Provider Transparency",
        "Foundation model providers document capabilities, limitations, and risk mitigation measures.",
        "This AI system is a foundation model or trains one.",
    ),
    "br-ai-bill-genai-transparency": _bill(
        "br-ai-bill-genai-transparency", "GenAI Transparency",
        "AI-Generated Content Transparency",
        "Users are told when content is generated by AI.",
        "This AI system generates content.",
    ),
    "br-ai-bill-training-data": _bill(
        "br-ai-bill-training-disclosure", "Training Data Disclosure",
        "Training Data Disclosure Requirements",
        "Providers disclose training data sources, including copyrighted works.",
        "This AI system trains or fine-tunes models.",
    ),
}


def _material_consumer(ctx: ProductContext) -> bool:
    return is_consumer_facing(ctx) and makes_material_decisions(ctx)


def _provisions(ctx: ProductContext, risk: RiskClassification) -> list[ApplicableProvision]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    provisions: list[ApplicableProvision] = []
    if processes_personal_data(ctx):
        provisions += [
            provision(
                "br-lgpd-legal-basis", "LGPD", "Article 7",
                "Legal Basis for Processing",
                "Processing requires one of the ten LGPD legal bases, such as consent or legitimate interest.",
                "This AI system processes personal data of individuals in Brazil.",
                force=RegulatoryForce.BINDING_LAW,
            ),
            provision(
                "br-lgpd-data-subject-rights", "LGPD", "Article 18",
                "Data Subject Rights",
                "Rights of confirmation, access, correction, anonymisation, portability, deletion and information "
                "about sharing.",
                "The AI system must support LGPD data subject rights.",
                force=RegulatoryForce.BINDING_LAW,
            ),
            provision(
                "br-anpd-ai-guidance", "ANPD AI Guidance", "ANPD Regulatory Sandbox / AI Analysis",
                "ANPD AI and Data Protection Guidance",
                "The data protection authority's guidance on applying the LGPD to AI systems.",
                "This AI system processes personal data and falls within ANPD supervision.",
                force=RegulatoryForce.SUPERVISORY_GUIDANCE,
            ),
        ]
    if is_automated_decision_making(ctx):
        provisions.append(
            provision(
                "br-lgpd-art20-automated", "LGPD", "Article 20",
                "Review of Automated Decisions",
                "Data subjects may request review of decisions made solely on automated processing and clear "
                "information about the criteria used.",
                "This AI system makes automated decisions with material impact.",
                force=RegulatoryForce.BINDING_LAW,
            )
        )
    provisions += [AI_BILL_PROVISIONS[t.id] for t in matching(ctx, AI_BILL_TRIGGERS)]
    if is_financial_services_ai(ctx):
        provisions.append(
            provision(
                "br-central-bank-ai", "Central Bank of Brazil (BCB)", "Resolucao BCB 403/2024, CMN Resolution 4893/2021",
                "BCB AI and Technology Risk Guidelines",
                "Financial institutions manage technology, cyber and model risk, including for AI.",
                "This AI system operates in Brazilian financial services.",
                force=RegulatoryForce.BINDING_REGULATION,
            )
        )
    if _material_consumer(ctx):
        provisions.append(
            provision(
                "br-cdc-consumer-protection", "Consumer Defence Code (CDC - Lei 8.078/1990)", "Articles 6, 31, 39, 43",
                "Consumer Defence Code - AI Consumer Protection",
                "Consumers are entitled to clear information and protection from abusive practices, and may access "
                "data held about them.",
                "This AI system makes material decisions about consumers.",
                force=RegulatoryForce.BINDING_LAW,
            )
        )
    if len(ctx.target_markets) > 1 and processes_personal_data(ctx):
        provisions.append(
            provision(
                "br-lgpd-international-transfer", "LGPD", "Articles 33-34",
                "International Data Transfer (LGPD)",
                "Transfers abroad need adequacy, standard contractual clauses, or another Article 33 mechanism.",
                "This AI system targets several markets and may transfer personal data abroad.",
                force=RegulatoryForce.BINDING_LAW,
            )
        )
    return provisions


def _artifacts(ctx: ProductContext, risk: RiskClassification) -> list[ArtifactRequirement]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    bill = [t.id for t in matching(ctx, AI_BILL_TRIGGERS)]
    artifacts: list[ArtifactRequirement] = []
    if risk.level == RiskLevel.HIGH and processes_personal_data(ctx):
        artifacts.append(
            artifact(
                "dpia",
                "LGPD Data Protection Impact Report (RIPD)",
                "LGPD Article 38",
                "Impact report describing the processing, the data, safeguards and risk mitigation.",
            )
        )
    if "br-ai-bill-high-risk" in bill:
        artifacts.append(
            artifact(
                "algorithmic-impact",
                "AI Bill Algorithmic Impact Assessment",
                AI_BILL,
                "Assessment of the AI system's risks to fundamental rights and the mitigations applied.",
            )
        )
    if is_foundation_model_provider(ctx):
        artifacts.append(
            artifact(
                "model-card",
                "Foundation Model Transparency Documentation",
                f"{AI_BILL} - Foundation Model Provisions",
                "Capabilities, limitations, training data summary and risk mitigation of the foundation model.",
                template_id="model-card",
            )
        )
    if is_genai_product(ctx):
        artifacts.append(
            artifact(
                "transparency-notice",
                "AI-Generated Content Disclosure Notice",
                f"{AI_BILL} - GenAI Transparency",
                "Notice telling users that content was generated by AI.",
                template_id="transparency-notice",
                required=False,
            )
        )
    return artifacts


AI_BILL_ACTIONS: dict[str, ActionRequirement] = {
    "br-ai-bill-high-risk": _action(
        "br-ai-bill-impact-assessment",
        "Conduct AI Bill algorithmic impact assessment",
        "Assess risks to fundamental rights, document mitigations, and plan for publication of conclusions.",
        "important", AI_BILL, "4-8 weeks",
    ),
    "br-ai-bill-foundation-model": _action(
        "br-ai-bill-foundation-transparency",
        "Publish foundation model transparency documentation",
        "Document the model's capabilities, limitations, training data and risk mitigations.",
        "important", f"{AI_BILL} - Foundation Model Provisions", "3-6 weeks",
    ),
    "br-ai-bill-genai-transparency": _action(
        "br-ai-bill-genai-disclosure",
        "Implement AI-generated content disclosure",
        "Label AI-generated content and tell users when they interact with AI.",
        "important", f"{AI_BILL} - GenAI Transparency", "2-4 weeks",
    ),
    "br-ai-bill-training-data": _action(
        "br-ai-bill-training-disclosure",
        "Disclose training data information",
        "Publish a summary of training data sources, including any copyrighted works used.",
        "important", f"{AI_BILL} - Training Data Disclosure", "2-4 weeks",
    ),
}


def _actions(ctx: ProductContext, risk: RiskClassification) -> list[ActionRequirement]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    actions: list[ActionRequirement] = []
    if processes_personal_data(ctx):
        actions += [
            _action(
                "br-lgpd-legal-basis",
                "Determine and document legal basis for processing",
                "Identify the LGPD Article 7 basis for each processing purpose and record it.",
                "critical", "LGPD Article 7", "1-2 weeks",
            ),
            _action(
                "br-lgpd-data-subject-rights",
                "Implement data subject rights mechanisms",
                "Handle LGPD Article 18 requests, including access, correction and deletion.",
                "critical", "LGPD Article 18", "3-6 weeks",
            ),
        ]
    if is_automated_decision_making(ctx):
        actions.append(
            _action(
                "br-lgpd-art20-review",
                "Implement automated decision review mechanism",
                "Let data subjects request review of automated decisions and explain the criteria used.",
                "critical", "LGPD Article 20", "3-6 weeks",
            )
        )
    if risk.level == RiskLevel.HIGH and processes_personal_data(ctx):
        actions.append(
            _action(
                "br-lgpd-ripd",
                "Conduct LGPD Data Protection Impact Report (RIPD)",
                "Prepare a RIPD describing the processing, risks and safeguards, available to the ANPD on request.",
                "critical", "LGPD Article 38", "2-4 weeks",
            )
        )
    actions += [AI_BILL_ACTIONS[t.id] for t in matching(ctx, AI_BILL_TRIGGERS)]
    if is_financial_services_ai(ctx):
        actions.append(
            _action(
                "br-financial-ai-governance",
                "Implement financial AI model governance",
                "Bring the AI model under BCB technology and model risk governance.",
                "important", "Central Bank Guidelines, LGPD Article 20", "4-8 weeks",
            )
        )
    if _material_consumer(ctx):
        actions.append(
            _action(
                "br-cdc-transparency",
                "Ensure Consumer Defence Code compliance for AI decisions",
                "Give consumers clear information about AI decisions and avoid abusive practices.",
                "important", "Consumer Defence Code (Lei 8.078/1990)", "2-4 weeks",
            )
        )
    return actions


def _timeline(ctx: ProductContext, risk: RiskClassification) -> ComplianceTimeline:
    notes = ["The LGPD has applied since September 2020, with ANPD sanctions enforceable since August 2021."]
    if risk.level == RiskLevel.HIGH:
        notes.append(
            "High-risk processing should have a RIPD ready before launch. The ANPD may request it at any time."
        )
    notes.append(
        "The AI Bill (PL 2338/2023) passed the Senate and is pending in the Chamber of Deputies. Obligations may "
        "change before enactment."
    )
    return ComplianceTimeline(
        effective_date="2020-09-18",
        deadlines=[
            deadline("2020-09-18", "LGPD in force.", "LGPD"),
            deadline("2021-08-01", "ANPD administrative sanctions enforceable.", "LGPD Article 52"),
            deadline("2026-06-30", "Expected AI Bill enactment.", AI_BILL, mandatory=False),
        ],
        notes=notes,
    )


MODULE = RuleModule(
    id=JURISDICTION,
    name="Brazil AI Regulations (LGPD, AI Bill PL 2338/2023)",
    jurisdiction=JURISDICTION,
    classify=classify_risk,
    provisions=_provisions,
    artifacts=_artifacts,
    actions=_actions,
    schedule=_timeline,
)
