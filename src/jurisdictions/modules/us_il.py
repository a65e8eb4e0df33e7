"""Illinois: BIPA, the Human Rights Act AI amendment, and the AI Video Interview Act."""
from __future__ import annotations

from functools import partial

from jurisdictions.contract import RiskTier, RuleModule, Trigger, classify_by_tiers, when
from jurisdictions.shared import (
    action,
    artifact,
    can_generate_deepfakes,
    deadline,
    desc_has,
    is_employment_context,
    is_genai_product,
    makes_material_decisions,
    processes_biometric_data,
    provision,
)
from models.actions import ActionRequirement
from models.context import ProductContext
from models.results import ApplicableProvision, ArtifactRequirement, ComplianceTimeline, RiskClassification
from models.shared import RegulatoryForce, RiskLevel

JURISDICTION = "us-il"

_action = partial(action, JURISDICTION)

CONSUMER_DATA = frozenset({"personal", "sensitive", "health", "financial", "location", "behavioral"})


def is_employment_ai(ctx: ProductContext) -> bool:
    return is_employment_context(ctx) and makes_material_decisions(ctx)


def analyses_video_interviews(ctx: ProductContext) -> bool:
    return "job-applicants" in ctx.user_populations and (
        desc_has(ctx, "video interview", "video analysis")
        or (desc_has(ctx, "interview") and desc_has(ctx, "ai analysis"))
    )


BIPA_TRIGGERS: tuple[Trigger, ...] = (
    Trigger("bipa-biometric-collection", "Biometric Information Collection", "BIPA (740 ILCS 14)",
            processes_biometric_data),
    Trigger(
        "bipa-biometric-sale",
        "Sale/Disclosure of Biometric Information",
        "BIPA (740 ILCS 14/15(c))",
        lambda c: processes_biometric_data(c) and desc_has(c, "share", "sale", "sell", "third-party", "disclose"),
    ),
)

EMPLOYMENT_TRIGGERS: tuple[Trigger, ...] = (
    Trigger("il-hra-ai-employment", "AI in Employment Decisions (Illinois Human Rights Act)",
            "Illinois Human Rights Act (HRA) AI Amendment", is_employment_ai),
    Trigger("il-aiaaa-video-interview", "AI Video Interview Act",
            "Illinois AI Video Interview Act (820 ILCS 42)", analyses_video_interviews),
)

RISK_TIERS: tuple[RiskTier, ...] = (
    RiskTier(
        level=RiskLevel.HIGH,
        triggers=BIPA_TRIGGERS,
        justification=(
            "This AI system processes biometric data in Illinois, triggering the Biometric Information Privacy Act. "
            "BIPA carries a private right of action with statutory damages of $1,000-$5,000 per violation. "
            "Compliance is mandatory before any biometric data collection."
        ),
    ),
    RiskTier(
        level=RiskLevel.HIGH,
        triggers=EMPLOYMENT_TRIGGERS,
        justification=(
            "This AI system is used in employment decisions in Illinois ({matched}). Employers must ensure AI does "
            "not produce discriminatory outcomes based on protected classes."
        ),
    ),
    RiskTier(
        level=RiskLevel.LIMITED,
        triggers=(Trigger("il-genai-deepfake", "AI-Generated Deepfake Content", "Illinois Deepfake Laws",
                          can_generate_deepfakes),),
        justification=(
            "This AI system can generate synthetic media, which may be subject to Illinois deepfake and synthetic "
            "media disclosure requirements."
        ),
    ),
    RiskTier(
        level=RiskLevel.LIMITED,
        triggers=(
            Trigger(
                "il-consumer-data",
                "Consumer personal data",
                "Illinois Consumer Privacy",
                lambda c: "consumers" in c.user_populations and any(d in CONSUMER_DATA for d in c.data_processed),
            ),
        ),
        justification=(
            "This AI system processes personal data of Illinois consumers. General consumer protection obligations "
            "apply."
        ),
    ),
)


def classify_risk(ctx: ProductContext) -> RiskClassification:
    return classify_by_tiers(
        ctx,
        RISK_TIERS,
        fallback_justification=(
            "This AI system does not trigger specific Illinois obligations. No biometric data processing, employment "
            "AI decisions, or consumer data concerns were identified."
        ),
    )


BIPA_PROVISIONS = (
    provision(
        "us-il-bipa-consent", "BIPA", "740 ILCS 14/15(b)",
        "Written Consent Before Biometric Collection",
        "Individuals must be told in writing that biometric data is collected, why, and for how long, and must "
        "give written consent before collection.",
        "This AI system collects biometric data.",
        force=RegulatoryForce.BINDING_LAW,
    ),
    provision(
        "us-il-bipa-retention", "BIPA", "740 ILCS 14/15(a)",
        "Biometric Data Retention and Destruction Policy",
        "A public retention schedule is required. Data is destroyed when its purpose is satisfied or within 3 years "
        "of the last interaction, whichever comes first.",
        "This AI system stores biometric data.",
        force=RegulatoryForce.BINDING_LAW,
    ),
    provision(
        "us-il-bipa-no-sale", "BIPA", "740 ILCS 14/15(c)",
        "Prohibition on Sale of Biometric Data",
        "No private entity may sell, lease, trade, or otherwise profit from a person's biometric data.",
        "Any monetisation or sharing of biometric data handled by this system is prohibited.",
        force=RegulatoryForce.BINDING_LAW,
    ),
    provision(
        "us-il-bipa-security", "BIPA", "740 ILCS 14/15(e)",
        "Biometric Data Security",
        "Biometric data must be protected at least as well as other confidential and sensitive information.",
        "This AI system must apply industry-standard security to biometric data.",
        force=RegulatoryForce.BINDING_LAW,
    ),
)

CONDITIONAL_PROVISIONS: tuple[tuple, ...] = (
    (
        is_employment_ai,
        provision(
            "us-il-hra-ai", "Illinois Human Rights Act", "HRA AI Amendment",
            "AI in Employment Decisions: Non-Discrimination",
            "Employers may not use AI that produces discriminatory outcomes for protected classes, and may not use zip "
            "codes as a proxy for them.",
            "This AI system makes employment decisions in Illinois.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
    (
        analyses_video_interviews,
        provision(
            "us-il-video-interview", "Illinois AI Video Interview Act", "820 ILCS 42",
            "AI Analysis of Video Interviews",
            "Applicants must be notified, told how the AI evaluates them, and consent before the interview. Videos "
            "are destroyed within 30 days of request.",
            "This AI system analyses video interviews for employment purposes.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
    (
        lambda c: is_genai_product(c) and can_generate_deepfakes(c),
        provision(
            "us-il-deepfake-disclosure", "Illinois Deepfake Laws", "Illinois Criminal Code Amendments",
            "Synthetic Media and Deepfake Disclosure",
            "Creating or distributing deceptive deepfakes, including non-consensual intimate imagery and election "
            "interference, may result in criminal and civil liability.",
            "This AI system can generate synthetic media.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
)


def _provisions(ctx: ProductContext, risk: RiskClassification) -> list[ApplicableProvision]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    provisions = list(BIPA_PROVISIONS) if processes_biometric_data(ctx) else []
    return provisions + when(ctx, CONDITIONAL_PROVISIONS)


def _artifacts(ctx: ProductContext, risk: RiskClassification) -> list[ArtifactRequirement]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    artifacts: list[ArtifactRequirement] = []
    if processes_biometric_data(ctx):
        artifacts += [
            artifact(
                "risk-assessment",
                "BIPA Compliance Assessment",
                "BIPA (740 ILCS 14)",
                "Biometric collection, storage, use and destruction practices, with retention policy, consent and "
                "security measures.",
            ),
            artifact(
                "transparency-notice",
                "BIPA Biometric Data Notice",
                "BIPA 740 ILCS 14/15(b)",
                "Written notice of biometric collection, purpose and retention period, given before collection.",
                template_id="transparency-notice",
            ),
        ]
    if is_employment_ai(ctx):
        artifacts.append(
            artifact(
                "bias-audit",
                "Illinois Employment AI Bias Audit",
                "Illinois Human Rights Act AI Amendment",
                "Testing for discriminatory outcomes across Illinois-protected classes.",
                template_id="bias-audit-nyc",
            )
        )
    return artifacts


BIPA_ACTIONS = (
    _action(
        "us-il-bipa-consent-mechanism",
        "Implement BIPA written consent mechanism",
        "Inform individuals in writing about biometric collection, purpose and retention, and obtain written consent "
        "before collection. General terms of service are insufficient.",
        "critical", "BIPA 740 ILCS 14/15(b)", "2-4 weeks",
    ),
    _action(
        "us-il-bipa-retention-policy",
        "Publish biometric data retention and destruction policy",
        "Publish a retention schedule and destruction guidelines for biometric data.",
        "critical", "BIPA 740 ILCS 14/15(a)", "1-2 weeks",
    ),
    _action(
        "us-il-bipa-security",
        "Implement biometric data security measures",
        "Protect biometric data with at least the care applied to other confidential and sensitive information.",
        "critical", "BIPA 740 ILCS 14/15(e)", "2-4 weeks",
    ),
    _action(
        "us-il-bipa-no-monetisation",
        "Ensure no sale or profit from biometric data",
        "Verify biometric data is never sold, leased, traded or monetised and review third-party sharing "
        "arrangements.",
        "critical", "BIPA 740 ILCS 14/15(c)", "1-2 weeks",
    ),
)

CONDITIONAL_ACTIONS: tuple[tuple, ...] = (
    (
        is_employment_ai,
        _action(
            "us-il-hra-bias-testing",
            "Conduct employment AI bias testing for Illinois protected classes",
            "Test for discriminatory outcomes across all Illinois HRA protected classes and make sure zip codes are "
            "not used as proxies.",
            "critical", "Illinois Human Rights Act AI Amendment", "4-8 weeks",
        ),
    ),
    (
        is_employment_ai,
        _action(
            "us-il-hra-notice",
            "Provide notice of AI use in employment decisions",
            "Tell applicants and employees that AI is used, what data it analyses, and how it factors into decisions.",
            "important", "Illinois Human Rights Act AI Amendment", "1-2 weeks",
        ),
    ),
    (
        analyses_video_interviews,
        _action(
            "us-il-video-interview-compliance",
            "Implement AI Video Interview Act compliance",
            "Notify applicants, explain what the AI evaluates, and obtain consent before analysing video interviews. "
            "Destroy videos within 30 days of request.",
            "critical", "Illinois AI Video Interview Act (820 ILCS 42)", "2-4 weeks",
        ),
    ),
    (
        can_generate_deepfakes,
        _action(
            "us-il-deepfake-safeguards",
            "Implement deepfake safeguards for Illinois compliance",
            "Label AI-generated content and guard against its use for non-consensual intimate imagery or election "
            "interference.",
            "important", "Illinois Deepfake Laws", "2-4 weeks",
        ),
    ),
)


def _actions(ctx: ProductContext, risk: RiskClassification) -> list[ActionRequirement]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    actions = list(BIPA_ACTIONS) if processes_biometric_data(ctx) else []
    return actions + when(ctx, CONDITIONAL_ACTIONS)


def _timeline(ctx: ProductContext, risk: RiskClassification) -> ComplianceTimeline:
    notes: list[str] = []
    if risk.level == RiskLevel.HIGH and any("bipa" in c for c in risk.applicable_categories):
        notes.append(
            "BIPA has been enforced since 2008 with a private right of action. Class action exposure is significant."
        )
    if any("employment" in c for c in risk.applicable_categories):
        notes.append("Employers must proactively test AI systems for discriminatory outcomes under the HRA amendment.")
    return ComplianceTimeline(
        effective_date="2008-10-03",
        deadlines=[
            deadline("2008-10-03", "BIPA enacted.", "BIPA (740 ILCS 14)"),
            deadline("2020-01-01", "Illinois AI Video Interview Act took effect.", "820 ILCS 42"),
            deadline("2026-01-01", "Illinois Human Rights Act AI amendment takes effect.", "Illinois HRA AI Amendment"),
        ],
        notes=notes,
    )


MODULE = RuleModule(
    id=JURISDICTION,
    name="Illinois AI & Biometric Regulations (BIPA, HRA AI Amendment)",
    jurisdiction=JURISDICTION,
    classify=classify_risk,
    provisions=_provisions,
    artifacts=_artifacts,
    actions=_actions,
    schedule=_timeline,
)
