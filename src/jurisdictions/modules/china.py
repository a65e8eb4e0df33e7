"""China: PIPL, CAC generative AI measures, deep synthesis and recommendation algorithm provisions.

Every Chinese AI obligation here is mandatory. Algorithm filing is the common
thread: public-facing GenAI, deep synthesis and recommender services all file
with the CAC, and the filing action softens as the filing progresses.
"""
from __future__ import annotations

from functools import partial

from jurisdictions.contract import RuleModule, Trigger, matching
from jurisdictions.shared import (
    action,
    artifact,
    deadline,
    desc_has,
    is_consumer_facing,
    is_fully_automated,
    is_genai_product,
    makes_material_decisions,
    provision,
)
from models.actions import ActionRequirement
from models.context import ProductContext
from models.results import ApplicableProvision, ArtifactRequirement, ComplianceTimeline, RiskClassification
from models.shared import RegulatoryForce, RiskLevel

JURISDICTION = "china"
GENAI_MEASURES = "CAC Interim Measures for GenAI Services"
DEEP_SYNTHESIS = "Provisions on Deep Synthesis"
RECOMMENDATION = "Provisions on Recommendation Algorithms"
PIPL = "PIPL (Personal Information Protection Law)"

_action = partial(action, JURISDICTION)

PIPL_PERSONAL_DATA = frozenset(
    {"personal", "sensitive", "biometric", "health", "financial", "location", "behavioral", "minor"}
)


def _generates(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    return ctx.product_type == "generator" or (gen is not None and gen.generates_content)


def is_public_facing_genai(ctx: ProductContext) -> bool:
    return (_generates(ctx) or ctx.product_type == "foundation-model") and is_consumer_facing(ctx)


def _trains_model(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    return (
        gen is not None
        and (gen.uses_foundation_model or gen.finetuning_performed)
        and ctx.training_data.uses_training_data
    )


def _modalities(ctx: ProductContext) -> tuple[str, ...]:
    gen = ctx.generative_ai_context
    return gen.output_modalities if gen is not None else ()


CAC_GENAI_TRIGGERS: tuple[Trigger, ...] = (
    Trigger("cn-cac-genai-public", "Public-Facing GenAI Service", GENAI_MEASURES, is_public_facing_genai),
    Trigger("cn-cac-genai-training-data", "GenAI Training Data Legality", GENAI_MEASURES, _trains_model),
    Trigger("cn-cac-genai-content-labeling", "AI-Generated Content Labeling", GENAI_MEASURES, _generates),
    Trigger("cn-cac-genai-content-review", "GenAI Content Review Obligation", GENAI_MEASURES, _generates),
)

DEEP_SYNTHESIS_TRIGGERS: tuple[Trigger, ...] = (
    Trigger(
        "cn-deep-synthesis-face", "Face Generation/Manipulation (Deep Synthesis)", DEEP_SYNTHESIS,
        lambda c: (c.generative_ai_context is not None and c.generative_ai_context.can_generate_deepfakes)
        or ("image" in _modalities(c) and "video" in _modalities(c)),
    ),
    Trigger(
        "cn-deep-synthesis-voice", "Voice Synthesis/Cloning (Deep Synthesis)", DEEP_SYNTHESIS,
        lambda c: c.generative_ai_context is not None and c.generative_ai_context.can_generate_synthetic_voice,
    ),
    Trigger(
        "cn-deep-synthesis-text", "Text Generation (Deep Synthesis)", DEEP_SYNTHESIS,
        lambda c: c.generative_ai_context is not None
        and c.generative_ai_context.generates_content
        and "text" in _modalities(c),
    ),
)

RECOMMENDATION_TRIGGERS: tuple[Trigger, ...] = (
    Trigger(
        "cn-recommendation-algo", "Recommendation Algorithm Service", RECOMMENDATION,
        lambda c: c.product_type == "recommender"
        or desc_has(c, "recommend", "personali", "content feed", "newsfeed", "suggestion engine", "ranking algorithm"),
    ),
)


def is_deep_synthesis_product(ctx: ProductContext) -> bool:
    return bool(matching(ctx, DEEP_SYNTHESIS_TRIGGERS))


def is_recommendation_system(ctx: ProductContext) -> bool:
    return bool(matching(ctx, RECOMMENDATION_TRIGGERS))


def requires_algorithm_filing(ctx: ProductContext) -> bool:
    return is_public_facing_genai(ctx) or is_recommendation_system(ctx) or is_deep_synthesis_product(ctx)


def processes_personal_data(ctx: ProductContext) -> bool:
    return any(d in PIPL_PERSONAL_DATA for d in ctx.data_processed)


def _filing_status(ctx: ProductContext):
    gen = ctx.generative_ai_context
    return gen.algorithm_filing_status if gen is not None else None


def classify_risk(ctx: ProductContext) -> RiskClassification:
    cac = matching(ctx, CAC_GENAI_TRIGGERS)
    synthesis = matching(ctx, DEEP_SYNTHESIS_TRIGGERS)
    reco = matching(ctx, RECOMMENDATION_TRIGGERS)
    categories = [t.id for t in (*cac, *synthesis, *reco)]

    if any(t.id == "cn-cac-genai-public" for t in cac):
        return RiskClassification(
            level=RiskLevel.HIGH,
            justification=(
                "This is a public-facing generative AI service in China, triggering mandatory CAC algorithm filing, "
                "training data legality verification, content review, AI-generated content labeling, user identity "
                "verification and complaint mechanisms. Non-compliance can result in service suspension."
            ),
            applicable_categories=categories,
            provisions=[GENAI_MEASURES, *([DEEP_SYNTHESIS] if synthesis else [])],
        )
    if synthesis:
        names = "; ".join(t.description for t in synthesis)
        return RiskClassification(
            level=RiskLevel.HIGH,
            justification=(
                f"This AI system has deep synthesis capabilities ({names}), triggering mandatory labeling, "
                "technology support provider obligations and potential algorithm filing under China's deep "
                "synthesis regulations."
            ),
            applicable_categories=categories,
            provisions=[DEEP_SYNTHESIS],
        )
    if reco:
        return RiskClassification(
            level=RiskLevel.LIMITED,
            justification=(
                "This AI system uses recommendation algorithms, triggering algorithm filing, user profiling "
                "transparency and opt-out mechanisms under China's recommendation algorithm provisions."
            ),
            applicable_categories=[t.id for t in reco],
            provisions=[RECOMMENDATION],
        )
    if is_genai_product(ctx):
        return RiskClassification(
            level=RiskLevel.LIMITED,
            justification=(
                "This GenAI system is not public-facing but may still be subject to Chinese AI regulations depending "
                "on deployment scope. Training data legality verification may still apply."
            ),
            applicable_categories=["cn-internal-genai"],
            provisions=[f"{GENAI_MEASURES} (limited)"],
        )
    if makes_material_decisions(ctx) and is_fully_automated(ctx):
        return RiskClassification(
            level=RiskLevel.LIMITED,
            justification=(
                "This AI system makes automated decisions affecting individuals in China. General personal "
                "information protection obligations under PIPL may apply."
            ),
            applicable_categories=["cn-pipl-automated"],
            provisions=[PIPL],
        )
    return RiskClassification(
        level=RiskLevel.MINIMAL,
        justification=(
            "This AI system does not trigger specific Chinese AI regulatory obligations. It is not a public-facing "
            "GenAI service, does not use deep synthesis technology, and does not employ recommendation algorithms."
        ),
        applicable_categories=[],
        provisions=[],
    )


def _cac(id: str, article: str, title: str, summary: str, relevance: str) -> ApplicableProvision:
    return provision(id, GENAI_MEASURES, article, title, summary, relevance, force=RegulatoryForce.BINDING_REGULATION)


CAC_PROVISIONS = (
    _cac(
        "cn-cac-algorithm-filing", "Article 17", "Algorithm Filing with CAC",
        "GenAI services with public opinion or social mobilisation attributes file their algorithms with the CAC and "
        "pass a security assessment.",
        "This GenAI service must be filed with the CAC before or on launch.",
    ),
    _cac(
        "cn-cac-training-data", "Article 7", "Training Data Legality Verification",
        "Training data must come from lawful sources, respect IP rights, and have consent where personal "
        "information is involved.",
        "Training data for this GenAI system must be verified as lawful.",
    ),
    _cac(
        "cn-cac-content-review", "Articles 4, 9", "Content Review and Core Values Alignment",
        "Generated content must uphold core socialist values and must not contain prohibited content. Providers "
        "bear producer responsibility for output.",
        "This GenAI service must review generated content.",
    ),
    _cac(
        "cn-cac-content-labeling", "Article 12", "Mandatory AI-Generated Content Labeling",
        "Generated images, video and other content must be labelled as AI-generated.",
        "Content produced by this system must carry AI labels.",
    ),
    _cac(
        "cn-cac-user-identity", "Article 11", "User Identity Verification",
        "Providers verify user identity under real-name registration rules.",
        "Users of this public GenAI service must be verified.",
    ),
    _cac(
        "cn-cac-complaint-mechanism", "Article 15", "Complaint and Reporting Mechanism",
        "Providers run accessible complaint and reporting channels and handle reports promptly.",
        "This GenAI service needs a complaint mechanism.",
    ),
    _cac(
        "cn-cac-compliance-personnel", "Articles 17-18", "Compliance and Security Personnel Designation",
        "Providers designate personnel responsible for content security and compliance.",
        "This GenAI service needs designated compliance personnel.",
    ),
)

PIPL_PROVISIONS = (
    provision(
        "cn-pipl-lawful-basis", PIPL, "Articles 13-14",
        "Lawful Basis for Personal Information Processing",
        "Processing requires consent or another statutory basis, with informed, voluntary and explicit consent.",
        "This AI system processes personal information of individuals in China.",
        force=RegulatoryForce.BINDING_LAW,
    ),
    provision(
        "cn-pipl-sensitive-pi", PIPL, "Articles 28-32",
        "Sensitive Personal Information Protection",
        "Sensitive personal information needs a specific purpose, necessity, and separate consent.",
        "This AI system may process sensitive personal information.",
        force=RegulatoryForce.BINDING_LAW,
    ),
    provision(
        "cn-pipl-cross-border", PIPL, "Articles 38-43",
        "Cross-Border Data Transfer Requirements",
        "Transfers abroad need a CAC security assessment, certification or standard contract.",
        "This AI system may transfer personal information out of China.",
        force=RegulatoryForce.BINDING_LAW,
    ),
    provision(
        "cn-pipl-automated-decisions", PIPL, "Article 24",
        "Automated Decision-Making Transparency",
        "Automated decisions must be transparent and fair, with an option to refuse personalised targeting.",
        "This AI system makes decisions from personal information.",
        force=RegulatoryForce.BINDING_LAW,
    ),
    provision(
        "cn-pipl-impact-assessment", PIPL, "Article 55",
        "Personal Information Protection Impact Assessment",
        "An impact assessment is required before automated decision-making, sensitive processing or transfers "
        "abroad.",
        "This AI system's processing requires a PIPIA.",
        force=RegulatoryForce.BINDING_LAW,
    ),
)


def _provisions(ctx: ProductContext, risk: RiskClassification) -> list[ApplicableProvision]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    provisions: list[ApplicableProvision] = []
    if matching(ctx, CAC_GENAI_TRIGGERS):
        provisions += CAC_PROVISIONS
    if is_genai_product(ctx) and not is_public_facing_genai(ctx):
        provisions.append(
            _cac(
                "cn-cac-internal-deployment-note", "General Scope", "Internal vs Public Deployment Scope",
                "The GenAI measures target services offered to the public in China. Internal enterprise use has "
                "reduced obligations.",
                "This GenAI system is not public-facing, so most CAC service obligations do not apply.",
            )
        )
    if is_deep_synthesis_product(ctx):
        provisions += [
            provision(
                "cn-deep-synthesis-labeling", DEEP_SYNTHESIS, "Articles 16-17",
                "Deep Synthesis Content Labeling",
                "Synthetic content that may confuse or mislead the public carries prominent labels.",
                "This system produces deep synthesis content.",
                force=RegulatoryForce.BINDING_REGULATION,
            ),
            provision(
                "cn-deep-synthesis-provider", DEEP_SYNTHESIS, "Articles 6-10",
                "Deep Synthesis Provider Obligations",
                "Providers verify users, review content, keep records and maintain rumour-refutation mechanisms.",
                "This system is a deep synthesis service.",
                force=RegulatoryForce.BINDING_REGULATION,
            ),
        ]
    if is_recommendation_system(ctx):
        provisions += [
            provision(
                "cn-reco-algo-filing", RECOMMENDATION, "Article 24",
                "Recommendation Algorithm Filing",
                "Recommendation services with public opinion attributes file within 10 working days of launch.",
                "This recommender must be filed with the CAC.",
                force=RegulatoryForce.BINDING_REGULATION,
            ),
            provision(
                "cn-reco-algo-transparency", RECOMMENDATION, "Articles 16-17",
                "Recommendation Algorithm Transparency",
                "Users are told the basic principles of the algorithm and can switch off personalised "
                "recommendations.",
                "This recommender must be transparent and offer opt-out.",
                force=RegulatoryForce.BINDING_REGULATION,
            ),
        ]
    if processes_personal_data(ctx):
        provisions += PIPL_PROVISIONS
    return provisions


def _artifacts(ctx: ProductContext, risk: RiskClassification) -> list[ArtifactRequirement]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    artifacts: list[ArtifactRequirement] = []
    if requires_algorithm_filing(ctx):
        artifacts.append(
            artifact(
                "risk-assessment",
                "China Algorithm Filing Document",
                "CAC Algorithm Filing Requirements",
                "Algorithm name, type, application scenario, mechanism and self-assessment report for CAC filing.",
                template_id="china-algorithm-filing",
            )
        )
    if is_public_facing_genai(ctx):
        artifacts += [
            artifact(
                "risk-assessment",
                "China GenAI Safety Assessment",
                f"{GENAI_MEASURES}, Article 17",
                "Security assessment covering training data, content safety and user protection.",
                template_id="china-genai-assessment",
            ),
            artifact(
                "genai-content-policy",
                "Content Review and Moderation Policy",
                f"{GENAI_MEASURES}, Articles 4, 9",
                "Content review rules, keyword filtering and escalation procedures.",
            ),
        ]
    if is_deep_synthesis_product(ctx):
        artifacts.append(
            artifact(
                "genai-content-policy",
                "Deep Synthesis Content Labeling Policy",
                f"{DEEP_SYNTHESIS}, Articles 16-17",
                "How synthetic content is labelled, both visibly and in metadata.",
            )
        )
    return artifacts


FILING_DESCRIPTIONS = {
    "approved": (
        "Algorithm filing with the CAC has been approved. Update the filing within 10 working days of material "
        "algorithm changes and track renewal and annual reporting obligations."
    ),
    "filed": (
        "Algorithm filing has been submitted to the CAC and is pending review, which takes up to 30 working days. "
        "Respond promptly to requests for supplementary materials."
    ),
}


def _filing_action(ctx: ProductContext) -> ActionRequirement:
    status = _filing_status(ctx)
    priority = {"approved": "recommended", "filed": "important"}.get(status, "critical")
    description = FILING_DESCRIPTIONS.get(
        status,
        "File the algorithm with the Cyberspace Administration of China through the algorithm filing system within "
        "10 working days of providing the service, including the algorithm name, type, mechanism and "
        "self-assessment report.",
    )
    effort = "ongoing" if status == "approved" else "2-4 weeks"
    return _action(
        "cn-algorithm-filing", "File algorithm with CAC", description, priority,
        "CAC Algorithm Filing Requirements", effort,
    )


def _actions(ctx: ProductContext, risk: RiskClassification) -> list[ActionRequirement]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    actions: list[ActionRequirement] = []
    if requires_algorithm_filing(ctx):
        actions.append(_filing_action(ctx))
    if is_public_facing_genai(ctx):
        actions += [
            _action(
                "cn-cac-training-data-verification",
                "Verify training data legality",
                "Audit training data sources for lawfulness, IP rights and personal information consent.",
                "critical", f"{GENAI_MEASURES}, Article 7", "4-8 weeks",
            ),
            _action(
                "cn-cac-content-review-mechanism",
                "Implement content review mechanism",
                "Filter prompts and outputs for prohibited content and keep review logs.",
                "critical", f"{GENAI_MEASURES}, Articles 4, 9", "4-8 weeks",
            ),
            _action(
                "cn-cac-content-labeling",
                "Implement mandatory AI-generated content labeling",
                "Label generated content visibly and in metadata as AI-generated.",
                "critical", f"{GENAI_MEASURES}, Article 12", "3-6 weeks",
            ),
            _action(
                "cn-cac-user-identity-verification",
                "Implement real-name user identity verification",
                "Verify users under real-name registration rules before granting access.",
                "critical", f"{GENAI_MEASURES}, Article 11", "2-4 weeks",
            ),
            _action(
                "cn-cac-complaint-mechanism",
                "Establish complaint and reporting mechanism",
                "Provide complaint channels and handle reports within the required timeframes.",
                "important", f"{GENAI_MEASURES}, Article 15", "1-2 weeks",
            ),
            _action(
                "cn-cac-safety-assessment",
                "Conduct GenAI safety assessment",
                "Complete the CAC security assessment covering data, content safety and user protection.",
                "critical", f"{GENAI_MEASURES}, Article 17", "8-16 weeks",
            ),
            _action(
                "cn-safety-governance-committee",
                "Establish GenAI safety governance committee",
                "Designate content security and compliance personnel and set up a governance committee.",
                "critical", f"{GENAI_MEASURES} Articles 17-18", "2-4 weeks",
            ),
        ]
    if is_deep_synthesis_product(ctx):
        actions += [
            _action(
                "cn-deep-synthesis-labeling",
                "Implement deep synthesis content labeling",
                "Add prominent labels to synthetic faces, voices and text that could mislead the public.",
                "critical", f"{DEEP_SYNTHESIS}, Articles 16-17", "3-6 weeks",
            ),
            _action(
                "cn-deep-synthesis-records",
                "Maintain deep synthesis service records",
                "Keep usage logs and user verification records and cooperate with inspections.",
                "critical", f"{DEEP_SYNTHESIS}, Articles 6-10", "2-4 weeks",
            ),
        ]
    if is_recommendation_system(ctx):
        actions += [
            _action(
                "cn-reco-transparency",
                "Implement recommendation algorithm transparency",
                "Publish the basic principles, purpose and main mechanism of the recommendation algorithm.",
                "important", f"{RECOMMENDATION}, Article 16", "2-4 weeks",
            ),
            _action(
                "cn-reco-opt-out",
                "Implement recommendation opt-out mechanism",
                "Let users turn off personalised recommendations and delete user tags.",
                "important", f"{RECOMMENDATION}, Article 17", "1-2 weeks",
            ),
        ]
    if processes_personal_data(ctx):
        actions += [
            _action(
                "china-pipl-consent",
                "Establish lawful basis for personal information processing under PIPL",
                "Obtain informed consent or document another PIPL basis for each processing purpose.",
                "critical", "PIPL Articles 13-14", "2-4 weeks",
            ),
            _action(
                "china-pipl-sensitive-pi",
                "Implement enhanced protections for sensitive personal information",
                "Obtain separate consent and apply strict protection to sensitive personal information.",
                "critical", "PIPL Articles 28-32", "3-6 weeks",
            ),
            _action(
                "china-pipl-cross-border",
                "Comply with cross-border data transfer requirements",
                "Complete a CAC security assessment, certification or standard contract before transfers abroad.",
                "critical", "PIPL Articles 38-43", "4-8 weeks",
            ),
            _action(
                "china-pipl-automated-decisions",
                "Provide transparency and opt-out for automated decision-making",
                "Explain automated decisions and offer an option that is not based on personal characteristics.",
                "important", "PIPL Article 24", "2-4 weeks",
            ),
        ]
    return actions


def _timeline(ctx: ProductContext, risk: RiskClassification) -> ComplianceTimeline:
    notes = [
        "China has distinct mandatory AI laws for recommendation algorithms (2022), deep synthesis (2023) and "
        "generative AI (2023), enforced by the Cyberspace Administration of China.",
    ]
    if is_public_facing_genai(ctx):
        notes.append(
            "CRITICAL: The CAC GenAI measures have applied since August 15, 2023. Filing, content review, training "
            "data verification and labeling are mandatory."
        )
    if is_deep_synthesis_product(ctx):
        notes.append(
            "Deep synthesis rules have applied since January 10, 2023. All deep synthesis content must be labelled."
        )
    if is_recommendation_system(ctx):
        notes.append(
            "Recommendation algorithm provisions have applied since March 1, 2022. Filing, transparency and opt-out "
            "are required."
        )
    if _filing_status(ctx) == "not-filed" and requires_algorithm_filing(ctx):
        notes.append(
            "WARNING: This service requires algorithm filing with the CAC but has not been filed. Operating without "
            "filing is a violation."
        )
    return ComplianceTimeline(
        effective_date="2022-03-01",
        deadlines=[
            deadline("2022-03-01", "Recommendation algorithm provisions in force.", RECOMMENDATION),
            deadline("2023-01-10", "Deep synthesis provisions in force.", DEEP_SYNTHESIS),
            deadline("2023-08-15", "Interim measures for generative AI services in force.", GENAI_MEASURES),
        ],
        notes=notes,
    )


MODULE = RuleModule(
    id=JURISDICTION,
    name="China AI Regulations (PIPL, CAC GenAI, Deep Synthesis, Recommendation Algorithms)",
    jurisdiction=JURISDICTION,
    classify=classify_risk,
    provisions=_provisions,
    artifacts=_artifacts,
    actions=_actions,
    schedule=_timeline,
)
