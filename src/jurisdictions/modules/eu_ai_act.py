"""EU Artificial Intelligence Act (Regulation (EU) 2024/1689).

Risk precedence: Article 5 prohibited practices, then Annex III high-risk
categories (subject to the Article 6(3) significant-risk filter), then
Article 50 transparency systems, then minimal. GPAI obligations under
Articles 51-55 are evaluated independently of the risk tier.
"""
from __future__ import annotations

from functools import partial
from typing import Optional

from jurisdictions.contract import RiskTier, RuleModule, Trigger, classify_by_tiers, matching
from jurisdictions.shared import action, artifact, deadline, desc_has, provision
from models.actions import ActionRequirement
from models.context import ProductContext
from models.results import (
    ApplicableProvision,
    ArtifactRequirement,
    ComplianceTimeline,
    GpaiClassification,
    RiskClassification,
)
from models.shared import RegulatoryForce, RiskLevel

JURISDICTION = "eu-ai-act"
LAW = "EU AI Act"
URL = "https://eur-lex.europa.eu/eli/reg/2024/1689/oj"

HIGH_RISK_DEADLINE = "2026-08-02"
GPAI_DEADLINE = "2025-08-02"

_action = partial(action, JURISDICTION)
_provision = partial(provision, law=LAW, url=URL, force=RegulatoryForce.BINDING_LAW)


def is_emotion_recognition_system(ctx: ProductContext) -> bool:
    return desc_has(ctx, "emotion recognition", "emotion detect", "sentiment analysis on face", "facial emotion")


def is_chatbot(ctx: ProductContext) -> bool:
    return desc_has(
        ctx, "chatbot", "conversational ai", "virtual assistant", "ai assistant", "customer service ai"
    ) or (ctx.product_type == "generator" and desc_has(ctx, "interact"))


def is_deepfake_system(ctx: ProductContext) -> bool:
    return desc_has(ctx, "deepfake", "face swap") or (
        ctx.product_type == "generator"
        and desc_has(ctx, "generate image", "generate video", "generate audio", "synthetic media")
    )


def is_limited_risk_system(ctx: ProductContext) -> bool:
    return is_chatbot(ctx) or is_deepfake_system(ctx) or is_emotion_recognition_system(ctx)


def passes_significant_risk_filter(ctx: ProductContext) -> bool:
    """Article 6(3): Annex III systems doing narrow or preparatory work are not high-risk.

    Profiling always counts as significant risk.
    """
    if desc_has(ctx, "profiling", "profile"):
        return True
    narrow = desc_has(ctx, "narrow procedural", "procedural task")
    improves_human = desc_has(ctx, "improves") and desc_has(ctx, "human")
    detects_patterns = desc_has(ctx, "detect pattern") and not desc_has(ctx, "replace")
    preparatory = desc_has(ctx, "preparatory task")
    return not (narrow or improves_human or detects_patterns or preparatory)


def _is_essential_service(ctx: ProductContext) -> bool:
    credit = "credit-applicants" in ctx.user_populations or desc_has(ctx, "credit scor", "creditworth")
    insurance_risk = (
        ("health" in ctx.data_processed and desc_has(ctx, "insurance", "risk assessment"))
        or (desc_has(ctx, "life insurance", "health insurance") and desc_has(ctx, "risk", "pricing", "underwriting"))
    )
    fin = ctx.sector_context.financial_services if ctx.sector_context else None
    insurance_pricing = fin is not None and fin.involves_insurance_pricing
    emergency = desc_has(ctx, "emergency call")
    benefits = desc_has(ctx, "public benefit", "public assistance", "welfare", "social benefit")
    return credit or insurance_risk or insurance_pricing or emergency or benefits


def _material(ctx: ProductContext) -> bool:
    return ctx.decision_impact in ("material", "determinative")


PROHIBITED_PRACTICES: tuple[Trigger, ...] = (
    Trigger(
        "art5-1c-social-scoring",
        "Social Scoring",
        "Article 5(1)(c)",
        lambda c: desc_has(c, "social scor", "social credit", "citizen score")
        or (desc_has(c, "behaviour score") and desc_has(c, "social context")),
    ),
    Trigger(
        "art5-1a-subliminal-manipulation",
        "Subliminal/Manipulative Techniques",
        "Article 5(1)(a)",
        lambda c: desc_has(c, "subliminal")
        or (desc_has(c, "manipulat") and desc_has(c, "beyond") and desc_has(c, "consciousness")),
    ),
    Trigger(
        "art5-1b-vulnerability-exploitation",
        "Exploitation of Vulnerabilities",
        "Article 5(1)(b)",
        lambda c: desc_has(c, "exploit")
        and desc_has(c, "vulnerab", "disability", "elderly")
        and desc_has(c, "distort"),
    ),
    Trigger(
        "art5-1d-predictive-policing",
        "Predictive Policing (Individual Risk Based on Profiling)",
        "Article 5(1)(d)",
        lambda c: (desc_has(c, "predict") and desc_has(c, "criminal") and desc_has(c, "profiling"))
        or (desc_has(c, "predictive policing") and desc_has(c, "personality")),
    ),
    Trigger(
        "art5-1e-facial-recognition-scraping",
        "Untargeted Facial Recognition Database Building",
        "Article 5(1)(e)",
        lambda c: desc_has(c, "facial recognition") and desc_has(c, "scraping", "untargeted", "scrape"),
    ),
    Trigger(
        "art5-1f-workplace-emotion-recognition",
        "Emotion Recognition in Workplace/Education",
        "Article 5(1)(f)",
        lambda c: desc_has(c, "emotion recognition", "emotion detect")
        and ("employees" in c.user_populations or "students" in c.user_populations)
        and not desc_has(c, "medical", "safety"),
    ),
    Trigger(
        "art5-1g-biometric-sensitive-categorisation",
        "Biometric Categorisation for Sensitive Attributes",
        "Article 5(1)(g)",
        lambda c: "biometric" in c.data_processed
        and desc_has(c, "race", "political opinion", "religion", "sexual orientation", "trade union"),
    ),
    Trigger(
        "art5-1h-realtime-biometric-public",
        "Real-Time Remote Biometric Identification in Public Spaces",
        "Article 5(1)(h)",
        lambda c: desc_has(c, "real-time")
        and desc_has(c, "biometric identification")
        and desc_has(c, "public space", "public area"),
    ),
)

ANNEX_III_CATEGORIES: tuple[Trigger, ...] = (
    Trigger(
        "annex-iii-1-biometrics",
        "Biometrics",
        "Annex III, point 1",
        lambda c: "biometric" in c.data_processed or is_emotion_recognition_system(c),
    ),
    Trigger(
        "annex-iii-2-critical-infrastructure",
        "Critical Infrastructure",
        "Annex III, point 2",
        lambda c: desc_has(
            c,
            "critical infrastructure",
            "power grid",
            "water supply",
            "electricity",
            "gas supply",
            "road traffic",
            "traffic management",
            "digital infrastructure",
        ),
    ),
    Trigger(
        "annex-iii-3-education",
        "Education and Vocational Training",
        "Annex III, point 3",
        lambda c: "students" in c.user_populations and _material(c),
    ),
    Trigger(
        "annex-iii-4-employment",
        "Employment, Workers Management, Access to Self-Employment",
        "Annex III, point 4",
        lambda c: ("job-applicants" in c.user_populations or "employees" in c.user_populations) and _material(c),
    ),
    Trigger(
        "annex-iii-5-essential-services",
        "Access to Essential Private and Public Services",
        "Annex III, point 5",
        _is_essential_service,
    ),
    Trigger(
        "annex-iii-6-law-enforcement",
        "Law Enforcement",
        "Annex III, point 6",
        lambda c: desc_has(c, "law enforcement", "police", "crime analytic", "recidivism"),
    ),
    Trigger(
        "annex-iii-7-migration",
        "Migration, Asylum, and Border Control",
        "Annex III, point 7",
        lambda c: desc_has(c, "asylum", "migration", "border control", "visa application", "residence permit"),
    ),
    Trigger(
        "annex-iii-8-justice",
        "Administration of Justice and Democratic Processes",
        "Annex III, point 8",
        lambda c: desc_has(c, "judicial", "court", "legal research", "election", "voting", "democratic process"),
    ),
)

TRANSPARENCY_TRIGGERS: tuple[Trigger, ...] = (
    Trigger("chatbot-disclosure", "AI interaction with natural persons", "Article 50(1)", is_chatbot),
    Trigger("deepfake-labeling", "Synthetic or manipulated content", "Article 50(4)", is_deepfake_system),
    Trigger(
        "emotion-recognition-disclosure",
        "Emotion recognition or biometric categorisation",
        "Article 50(3)",
        is_emotion_recognition_system,
    ),
)

RISK_TIERS: tuple[RiskTier, ...] = (
    RiskTier(
        level=RiskLevel.UNACCEPTABLE,
        triggers=PROHIBITED_PRACTICES,
        justification=(
            "This AI system matches prohibited practice(s) under Article 5 of the EU AI Act: {matched}. "
            "These practices are banned in the EU regardless of safeguards."
        ),
        prohibitive=True,
    ),
    RiskTier(
        level=RiskLevel.HIGH,
        triggers=ANNEX_III_CATEGORIES,
        justification=(
            "This AI system falls within Annex III high-risk category: {matched}. "
            "It must comply with requirements under Articles 8-15."
        ),
        provisions=("Article 6(2)", "Annex III"),
    ),
    RiskTier(
        level=RiskLevel.LIMITED,
        triggers=TRANSPARENCY_TRIGGERS,
        justification=(
            "This AI system has transparency obligations under Article 50 of the EU AI Act ({matched}). "
            "Users must be informed they are interacting with an AI system, and/or AI-generated content must be labelled."
        ),
        provisions=("Article 50",),
    ),
)


def classify_risk(ctx: ProductContext) -> RiskClassification:
    annex = matching(ctx, ANNEX_III_CATEGORIES)
    if annex and not matching(ctx, PROHIBITED_PRACTICES) and not passes_significant_risk_filter(ctx):
        return RiskClassification(
            level=RiskLevel.MINIMAL,
            justification=(
                "This AI system falls within an Annex III category but does not pose a significant risk "
                "of harm under Article 6(3). It performs a narrow procedural task, improves a previously "
                "completed human activity, detects patterns without replacing human assessment, or "
                "performs a preparatory task."
            ),
            applicable_categories=[t.id for t in annex],
            provisions=["Article 6(3)"],
        )
    return classify_by_tiers(
        ctx,
        RISK_TIERS,
        fallback_justification=(
            "This AI system does not fall into the prohibited, high-risk, or limited-risk categories under "
            "the EU AI Act. No mandatory requirements apply beyond voluntary codes of conduct."
        ),
    )


# -- GPAI ---------------------------------------------------------------------

GPAI_KEYWORDS = (
    "large language model",
    "llm",
    "foundation model",
    "general-purpose ai",
    "general purpose ai",
    "gpai",
    "generative ai",
    "multimodal model",
    "text generation model",
    "image generation model",
    "diffusion model",
    "transformer model",
    "pre-trained model",
    "pretrained model",
)


def is_gpai_applicable(ctx: ProductContext) -> bool:
    if ctx.gpai_info is not None and ctx.gpai_info.is_gpai_model:
        return True
    if ctx.product_type == "foundation-model":
        return True
    return desc_has(ctx, *GPAI_KEYWORDS)


def classify_gpai(ctx: ProductContext) -> Optional[GpaiClassification]:
    if not is_gpai_applicable(ctx):
        return None

    info = ctx.gpai_info
    if info is not None:
        role = info.gpai_role
    else:
        role = "provider" if ctx.product_type == "foundation-model" else "deployer"
    open_source = info.is_open_source if info else False
    systemic = bool(info and (info.exceeds_systemic_risk_threshold or info.commission_designated))

    provisions = ["Article 51"]
    if role in ("provider", "both"):
        if open_source and not systemic:
            provisions += ["Article 53(1)(c)", "Article 53(1)(d)", "Article 53(2)"]
        else:
            provisions += ["Article 53(1)(a)", "Article 53(1)(b)", "Article 53(1)(c)", "Article 53(1)(d)"]
        if systemic:
            provisions += ["Article 55(1)(a)", "Article 55(1)(b)", "Article 55(1)(c)", "Article 55(1)(d)"]

    parts = [f"GPAI model role: {role}."]
    if open_source:
        parts.append("Model is open-source.")
    if systemic:
        reasons = []
        if info.exceeds_systemic_risk_threshold:
            reasons.append("compute exceeds 10^25 FLOPs threshold")
        if info.commission_designated:
            reasons.append("designated by European Commission")
        parts.append(f"Systemic risk: {', '.join(reasons)}.")

    return GpaiClassification(
        is_gpai=True,
        has_systemic_risk=systemic,
        is_open_source=open_source,
        role=role,
        justification=" ".join(parts),
        provisions=provisions,
    )


def _is_provider(gpai: GpaiClassification) -> bool:
    return gpai.role in ("provider", "both")


def _needs_full_docs(gpai: GpaiClassification) -> bool:
    return not gpai.is_open_source or gpai.has_systemic_risk


def _gpai_provisions(gpai: GpaiClassification) -> list[ApplicableProvision]:
    provisions = [
        _provision(
            id="eu-ai-act-art51",
            article="Article 51",
            title="Classification of GPAI Models",
            summary="This product involves a general-purpose AI model subject to GPAI obligations under the EU AI Act.",
            relevance=gpai.justification,
        )
    ]
    if not _is_provider(gpai):
        return provisions
    if _needs_full_docs(gpai):
        provisions.append(
            _provision(
                id="eu-ai-act-art53",
                article="Article 53",
                title="GPAI Provider Obligations",
                summary=(
                    "GPAI model providers must maintain technical documentation, provide downstream documentation, "
                    "comply with copyright law, and publish a training data summary."
                ),
                relevance="Required for all GPAI model providers under Article 53.",
            )
        )
    else:
        provisions.append(
            _provision(
                id="eu-ai-act-art53-2",
                article="Article 53(2)",
                title="Open-Source GPAI Exemption",
                summary=(
                    "Open-source GPAI models are exempt from technical and downstream documentation obligations, "
                    "but must still comply with copyright and training data summary obligations."
                ),
                relevance="This model qualifies for the open-source exemption.",
            )
        )
    if gpai.has_systemic_risk:
        provisions.append(
            _provision(
                id="eu-ai-act-art55",
                article="Article 55",
                title="Systemic Risk Obligations",
                summary=(
                    "GPAI models with systemic risk must undergo model evaluation, adversarial testing, systemic "
                    "risk assessment, incident reporting, and cybersecurity measures."
                ),
                relevance="This GPAI model has systemic risk, triggering obligations under Article 55.",
            )
        )
    return provisions


def _gpai_artifacts(gpai: GpaiClassification) -> list[ArtifactRequirement]:
    if not _is_provider(gpai):
        return []
    artifacts: list[ArtifactRequirement] = []
    if _needs_full_docs(gpai):
        artifacts += [
            artifact(
                "gpai-technical-documentation",
                "GPAI Technical Documentation (Annex XI)",
                "Article 53(1)(a), Annex XI",
                "Technical documentation of the GPAI model including training and testing process, evaluation "
                "results, model architecture, compute resources, and capability limitations.",
            ),
            artifact(
                "model-card",
                "GPAI Downstream Documentation / Model Card",
                "Article 53(1)(b)",
                "Information for downstream AI system providers covering capabilities, limitations, intended "
                "uses, known risks, and integration guidance.",
                template_id="model-card",
            ),
        ]
    artifacts.append(
        artifact(
            "gpai-training-data-summary",
            "GPAI Training Data Summary",
            "Article 53(1)(d)",
            "Sufficiently detailed, publicly available summary of the content used for training the GPAI model, "
            "following the AI Office template.",
        )
    )
    if gpai.has_systemic_risk:
        artifacts.append(
            artifact(
                "gpai-systemic-risk-assessment",
                "GPAI Systemic Risk Assessment",
                "Article 55(1)(b)",
                "Assessment and mitigation plan for possible systemic risks at Union level.",
            )
        )
    return artifacts


def _gpai_actions(gpai: GpaiClassification) -> list[ActionRequirement]:
    actions: list[ActionRequirement] = []
    if _is_provider(gpai):
        actions += [
            _action(
                "eu-ai-act-gpai-copyright",
                "Implement copyright compliance policy",
                "Put in place a policy to comply with EU copyright law, including identifying and respecting "
                "text and data mining opt-outs under Directive (EU) 2019/790 Article 4(3).",
                "critical",
                "Article 53(1)(c)",
                "2-4 weeks",
                GPAI_DEADLINE,
            ),
            _action(
                "eu-ai-act-gpai-training-summary",
                "Publish training data summary",
                "Draw up and make publicly available a sufficiently detailed summary of the content used for "
                "training the GPAI model, according to the AI Office template.",
                "critical",
                "Article 53(1)(d)",
                "2-4 weeks",
                GPAI_DEADLINE,
            ),
        ]
        if _needs_full_docs(gpai):
            actions += [
                _action(
                    "eu-ai-act-gpai-tech-docs",
                    "Prepare GPAI technical documentation",
                    "Draw up and maintain technical documentation of the GPAI model covering training process, "
                    "testing, evaluation results, model architecture, and capability limitations per Annex XI.",
                    "critical",
                    "Article 53(1)(a)",
                    "4-8 weeks",
                    GPAI_DEADLINE,
                ),
                _action(
                    "eu-ai-act-gpai-downstream-docs",
                    "Provide downstream documentation to integrators",
                    "Make available information and documentation to downstream AI system providers to enable "
                    "understanding of model capabilities, limitations, and their own obligations.",
                    "critical",
                    "Article 53(1)(b)",
                    "2-4 weeks",
                    GPAI_DEADLINE,
                ),
            ]
        if gpai.has_systemic_risk:
            actions += [
                _action(
                    "eu-ai-act-gpai-model-evaluation",
                    "Perform model evaluation with standardised protocols",
                    "Conduct model evaluation in accordance with standardised protocols and tools reflecting the "
                    "state of the art, including conducting and documenting adversarial testing.",
                    "critical",
                    "Article 55(1)(a)",
                    "4-8 weeks",
                    GPAI_DEADLINE,
                ),
                _action(
                    "eu-ai-act-gpai-systemic-risk-assessment",
                    "Assess and mitigate systemic risks",
                    "Assess and mitigate possible systemic risks at Union level, including their sources, that may "
                    "stem from the development, placement on market, or use of the GPAI model.",
                    "critical",
                    "Article 55(1)(b)",
                    "4-8 weeks",
                    GPAI_DEADLINE,
                ),
                _action(
                    "eu-ai-act-gpai-incident-reporting",
                    "Establish incident tracking and reporting",
                    "Keep track of, document, and report serious incidents and possible corrective measures to the "
                    "AI Office and national competent authorities.",
                    "critical",
                    "Article 55(1)(c)",
                    "2-4 weeks",
                    GPAI_DEADLINE,
                ),
                _action(
                    "eu-ai-act-gpai-cybersecurity",
                    "Ensure adequate cybersecurity for GPAI model",
                    "Ensure an adequate level of cybersecurity protection for the GPAI model with systemic risk "
                    "and its physical infrastructure.",
                    "critical",
                    "Article 55(1)(d)",
                    "4-8 weeks",
                    GPAI_DEADLINE,
                ),
            ]
    if gpai.role in ("deployer", "both"):
        actions.append(
            _action(
                "eu-ai-act-gpai-deployer-verify",
                "Verify GPAI provider compliance",
                "Verify that the upstream GPAI model provider has met their documentation and transparency "
                "obligations under Article 53. Request and review technical documentation and integration guidance.",
                "important",
                "Article 53(1)(b)",
                "1-2 weeks",
                GPAI_DEADLINE,
            )
        )
    return actions


# -- risk-gated content -------------------------------------------------------

HIGH_RISK_PROVISIONS: tuple[tuple[str, str, str, str], ...] = (
    ("eu-ai-act-art9", "Article 9", "Risk Management System",
     "A continuous risk management system must be established, identifying and mitigating risks throughout the lifecycle."),
    ("eu-ai-act-art10", "Article 10", "Data and Data Governance",
     "Training, validation, and testing datasets must meet quality criteria including relevance, representativeness, and bias examination."),
    ("eu-ai-act-art11", "Article 11", "Technical Documentation",
     "Technical documentation must be drawn up before the system is placed on the market."),
    ("eu-ai-act-art12", "Article 12", "Record-Keeping",
     "The system must automatically record events (logs) with at least 6-month retention."),
    ("eu-ai-act-art13", "Article 13", "Transparency and Information to Deployers",
     "Instructions for use must be provided to deployers with system capabilities, limitations, and oversight measures."),
    ("eu-ai-act-art14", "Article 14", "Human Oversight",
     "The system must be designed for effective human oversight, including the ability to override, reverse, or stop the system."),
    ("eu-ai-act-art15", "Article 15", "Accuracy, Robustness, and Cybersecurity",
     "Appropriate levels of accuracy, robustness against errors, and cybersecurity must be ensured."),
)


def _has_transparency_duty(ctx: ProductContext, risk: RiskClassification) -> bool:
    return risk.level == RiskLevel.LIMITED or is_limited_risk_system(ctx)


def _provisions(ctx: ProductContext, risk: RiskClassification) -> list[ApplicableProvision]:
    provisions: list[ApplicableProvision] = []
    if risk.level == RiskLevel.UNACCEPTABLE:
        provisions.append(
            _provision(
                id="eu-ai-act-art5",
                article="Article 5",
                title="Prohibited AI Practices",
                summary=(
                    "This AI system falls under a prohibited practice and cannot be placed on the EU market "
                    "or used within the EU."
                ),
                relevance="The system's intended purpose matches one or more prohibited use cases.",
            )
        )
    if risk.level == RiskLevel.HIGH:
        provisions.append(
            _provision(
                id="eu-ai-act-art6",
                article="Articles 6-7",
                title="High-Risk Classification",
                summary="This AI system is classified as high-risk under Annex III of the EU AI Act.",
                relevance=risk.justification,
            )
        )
        for pid, article, title, summary in HIGH_RISK_PROVISIONS:
            provisions.append(
                _provision(
                    id=pid,
                    article=article,
                    title=title,
                    summary=summary,
                    relevance=f"Required for all high-risk AI systems under {article}.",
                )
            )
    if _has_transparency_duty(ctx, risk):
        provisions.append(
            _provision(
                id="eu-ai-act-art50",
                article="Articles 50-52",
                title="Transparency Obligations",
                summary=(
                    "Users must be informed of AI interaction, AI-generated content must be labelled, and/or "
                    "emotion recognition or biometric categorisation must be disclosed."
                ),
                relevance=(
                    "This system has transparency obligations based on its interaction with natural persons "
                    "or content generation capabilities."
                ),
            )
        )
    gpai = classify_gpai(ctx)
    if gpai is not None:
        provisions += _gpai_provisions(gpai)
    return provisions


def _artifacts(ctx: ProductContext, risk: RiskClassification) -> list[ArtifactRequirement]:
    artifacts: list[ArtifactRequirement] = []
    if risk.level == RiskLevel.HIGH:
        artifacts += [
            artifact(
                "risk-classification",
                "EU AI Act Risk Classification Report",
                "Articles 6-7, Annex III",
                "Document explaining the risk classification of the AI system, including the applicable Annex III "
                "category and why the system qualifies as high-risk.",
                template_id="ai-act-risk-assessment",
            ),
            artifact(
                "conformity-assessment",
                "EU AI Act Conformity Assessment",
                "Articles 43-44",
                "Conformity assessment demonstrating compliance with Articles 8-15. For most Annex III systems this "
                "is a self-assessment under Annex VI. Biometric identification systems require third-party assessment.",
                template_id="ai-act-conformity",
            ),
            artifact(
                "risk-assessment",
                "Risk Management System Documentation",
                "Article 9",
                "Documentation of the risk management system covering identification, evaluation, and mitigation "
                "of risks throughout the AI system lifecycle.",
            ),
            artifact(
                "model-card",
                "Technical Documentation / Model Card",
                "Article 11",
                "Comprehensive technical documentation covering system description, development process, "
                "capabilities, limitations, and intended use.",
                template_id="model-card",
            ),
        ]
        if "biometric" in ctx.data_processed:
            artifacts.append(
                artifact(
                    "conformity-assessment",
                    "Third-Party Conformity Assessment (Notified Body)",
                    "Article 43(1), Annex VII",
                    "Biometric identification systems require conformity assessment by an independent notified body "
                    "under Annex VII, rather than self-assessment.",
                )
            )
    if _has_transparency_duty(ctx, risk):
        artifacts.append(
            artifact(
                "transparency-notice",
                "AI Transparency Notice",
                "Articles 50-52",
                "User-facing transparency notice informing individuals of AI interaction, AI-generated content, or "
                "emotion recognition/biometric categorisation.",
                template_id="transparency-notice",
            )
        )
    if risk.level == RiskLevel.UNACCEPTABLE:
        artifacts.append(
            artifact(
                "risk-classification",
                "EU AI Act Prohibition Analysis",
                "Article 5",
                "Analysis documenting why this AI system falls under a prohibited practice. This system cannot be "
                "placed on the EU market. Use this document to explore redesign options or market exclusion.",
            )
        )
    gpai = classify_gpai(ctx)
    if gpai is not None:
        artifacts += _gpai_artifacts(gpai)
    return artifacts


def _risk_actions(ctx: ProductContext, risk: RiskClassification) -> list[ActionRequirement]:
    if risk.level == RiskLevel.UNACCEPTABLE:
        return [
            _action(
                "eu-ai-act-stop-prohibited",
                "Do not deploy this AI system in the EU",
                "This AI system falls under a prohibited practice (Article 5). It cannot be placed on the EU market, "
                "put into service, or used within the EU. Consider redesigning the system to remove the prohibited "
                "characteristics or exclude the EU from target markets.",
                "critical",
                "Article 5",
            )
        ]

    actions: list[ActionRequirement] = []
    if risk.level == RiskLevel.HIGH:
        actions += [
            _action(
                "eu-ai-act-risk-management",
                "Establish risk management system",
                "Implement a continuous, iterative risk management process covering identification, analysis, "
                "evaluation, and mitigation of risks throughout the AI system lifecycle.",
                "critical", "Article 9", "4-8 weeks", HIGH_RISK_DEADLINE,
            ),
            _action(
                "eu-ai-act-data-governance",
                "Implement data governance and quality measures",
                "Ensure training, validation, and testing datasets meet quality criteria: relevance, "
                "representativeness, freedom from errors, completeness. Document design choices and conduct bias "
                "examination.",
                "critical", "Article 10", "4-12 weeks", HIGH_RISK_DEADLINE,
            ),
            _action(
                "eu-ai-act-technical-docs",
                "Prepare technical documentation",
                "Create comprehensive technical documentation covering system description, development process, "
                "monitoring capabilities, and compliance evidence before placing the system on the market.",
                "critical", "Article 11", "2-4 weeks", HIGH_RISK_DEADLINE,
            ),
            _action(
                "eu-ai-act-logging",
                "Implement automatic event logging",
                "Design the system to automatically record events throughout its lifetime, with at least 6-month "
                "retention. Logs must include usage periods, input data references, and human verification records.",
                "critical", "Article 12", "2-4 weeks", HIGH_RISK_DEADLINE,
            ),
            _action(
                "eu-ai-act-human-oversight",
                "Implement human oversight mechanisms",
                "Design effective human oversight including the ability to understand system output, monitor for "
                "automation bias, override or reverse decisions, and stop the system.",
                "critical", "Article 14", "3-6 weeks", HIGH_RISK_DEADLINE,
            ),
            _action(
                "eu-ai-act-conformity-assessment",
                "Complete conformity assessment",
                "Undergo conformity assessment (self-assessment via Annex VI for most Annex III systems, or "
                "third-party assessment via Annex VII for biometric identification). Affix CE marking on completion.",
                "critical", "Articles 43-44", "4-8 weeks", HIGH_RISK_DEADLINE,
            ),
            _action(
                "eu-ai-act-eu-database-registration",
                "Register in EU AI database",
                "Register the high-risk AI system in the EU database before placing it on the market or putting "
                "it into service.",
                "critical", "Article 49", "1-2 weeks", HIGH_RISK_DEADLINE,
            ),
            _action(
                "eu-ai-act-accuracy-robustness",
                "Validate accuracy, robustness, and cybersecurity",
                "Ensure and document appropriate levels of accuracy for the intended purpose, robustness against "
                "errors and adversarial inputs, and cybersecurity protections.",
                "important", "Article 15", "3-6 weeks", HIGH_RISK_DEADLINE,
            ),
            _action(
                "eu-ai-act-post-market-monitoring",
                "Establish post-market monitoring system",
                "Set up a post-market monitoring system to collect and review performance and compliance data after "
                "deployment, including serious incident reporting procedures.",
                "important", "Articles 72-73", "2-4 weeks", HIGH_RISK_DEADLINE,
            ),
            _action(
                "eu-ai-act-quality-management",
                "Implement quality management system",
                "Establish a quality management system covering compliance strategies, design and development "
                "control, testing procedures, data management, and resource allocation.",
                "important", "Article 17", "4-8 weeks", HIGH_RISK_DEADLINE,
            ),
        ]
    if _has_transparency_duty(ctx, risk):
        actions.append(
            _action(
                "eu-ai-act-transparency-disclosure",
                "Implement transparency disclosures",
                "Ensure users are clearly informed they are interacting with an AI system, that content is "
                "AI-generated, or that emotion recognition or biometric categorisation is in use.",
                "critical", "Articles 50-52", "1-2 weeks", HIGH_RISK_DEADLINE,
            )
        )
    return actions


def _actions(ctx: ProductContext, risk: RiskClassification) -> list[ActionRequirement]:
    actions = _risk_actions(ctx, risk)
    gpai = classify_gpai(ctx)
    if gpai is not None:
        actions += _gpai_actions(gpai)
    return actions


def _timeline(ctx: ProductContext, risk: RiskClassification) -> ComplianceTimeline:
    notes: list[str] = []
    if risk.level == RiskLevel.UNACCEPTABLE:
        notes.append("Prohibited practices have been enforceable since 2 February 2025. Immediate action required.")
    if risk.level == RiskLevel.HIGH:
        notes += [
            "High-risk system obligations apply from 2 August 2026. Plan conformity assessment and documentation well in advance.",
            "Post-market monitoring and serious incident reporting obligations also apply from August 2026.",
        ]
    if risk.level == RiskLevel.LIMITED:
        notes.append("Transparency obligations for non-GPAI systems apply from 2 August 2026.")

    gpai = classify_gpai(ctx)
    if gpai is not None:
        notes.append("GPAI model obligations under Articles 51-56 have applied since 2 August 2025.")
        if gpai.has_systemic_risk:
            notes.append("Systemic risk obligations under Article 55 have also applied since 2 August 2025.")

    return ComplianceTimeline(
        effective_date="2024-08-01",
        deadlines=[
            deadline(
                "2025-02-02",
                "Prohibited AI practices (Article 5) become enforceable.",
                "Article 5",
            ),
            deadline(
                "2025-08-02",
                "Obligations for GPAI models apply.",
                "Articles 51-56",
            ),
            deadline(
                "2026-08-02",
                "High-risk AI system obligations apply, including conformity assessment, EU database registration, "
                "and post-market monitoring.",
                "Articles 6-49, 72-73",
            ),
            deadline(
                "2027-08-02",
                "High-risk AI systems covered by Annex I Union harmonisation legislation must comply.",
                "Article 6(1), Annex I",
            ),
        ],
        notes=notes,
    )


MODULE = RuleModule(
    id=JURISDICTION,
    name="EU Artificial Intelligence Act",
    jurisdiction=JURISDICTION,
    classify=classify_risk,
    provisions=_provisions,
    artifacts=_artifacts,
    actions=_actions,
    schedule=_timeline,
    gpai=classify_gpai,
)
