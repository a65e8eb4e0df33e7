"""California: CCPA/CPRA, SB 942, SB 243, AB 730 and AB 602."""
from __future__ import annotations

from functools import partial

from jurisdictions.contract import RiskTier, RuleModule, Trigger, classify_by_tiers, matching, when
from jurisdictions.shared import (
    action,
    artifact,
    deadline,
    desc_has,
    has_agentic_capabilities,
    involves_minors,
    is_financial_services_ai,
    is_genai_product,
    provision,
)
from models.actions import ActionRequirement
from models.context import ProductContext
from models.results import ApplicableProvision, ArtifactRequirement, ComplianceTimeline, RiskClassification
from models.shared import RegulatoryForce, RiskLevel

JURISDICTION = "us-ca"

_action = partial(action, JURISDICTION)

CONSUMER_DATA = frozenset(
    {"personal", "sensitive", "biometric", "health", "financial", "location",
     "behavioral", "minor", "employment", "genetic"}
)
SENSITIVE_DATA = frozenset({"sensitive", "biometric", "health", "genetic", "political", "location"})
ADMT_POPULATIONS = ("consumers", "credit-applicants", "job-applicants", "tenants")
HIGH_STAKES_POPULATIONS = ("job-applicants", "credit-applicants", "tenants")
POLITICAL_TERMS = ("election", "political", "candidate", "campaign", "voting")


def _outputs(ctx: ProductContext, *modalities: str) -> bool:
    gen = ctx.generative_ai_context
    return gen is not None and any(m in gen.output_modalities for m in modalities)


def _generates_content(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    return gen is not None and gen.generates_content


def processes_consumer_personal_data(ctx: ProductContext) -> bool:
    return "consumers" in ctx.user_populations and any(d in CONSUMER_DATA for d in ctx.data_processed)


def processes_sensitive_personal_info(ctx: ProductContext) -> bool:
    return any(d in SENSITIVE_DATA for d in ctx.data_processed)


def is_admt_on_consumers(ctx: ProductContext) -> bool:
    """Automated decision-making with significant effects on California consumers."""
    return (
        ctx.automation_level in ("fully-automated", "human-on-the-loop")
        and ctx.decision_impact in ("material", "determinative")
        and any(p in ctx.user_populations for p in ADMT_POPULATIONS)
    )


def is_high_stakes_admt(ctx: ProductContext) -> bool:
    return is_admt_on_consumers(ctx) and (
        any(p in ctx.user_populations for p in HIGH_STAKES_POPULATIONS)
        or desc_has(ctx, "insurance", "hiring", "employment", "credit", "housing", "lending")
    )


def has_deepfake_capabilities(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    if gen is not None and gen.can_generate_deepfakes:
        return True
    return ctx.product_type == "generator" and _outputs(ctx, "image", "video")


def _sale_or_sharing(ctx: ProductContext) -> bool:
    return "consumers" in ctx.user_populations and desc_has(
        ctx, "advertising", "marketing", "targeted ads", "cross-context behavioral", "data shar", "third-party"
    )


def _political_deepfakes(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    capable = (gen is not None and gen.can_generate_deepfakes) or _outputs(ctx, "image", "video", "audio")
    return capable and desc_has(ctx, *POLITICAL_TERMS)


def _sexual_deepfakes(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    return gen is not None and gen.can_generate_deepfakes and _outputs(ctx, "image", "video")


CCPA_TRIGGERS: tuple[Trigger, ...] = (
    Trigger("us-ca-ccpa-personal-info", "CCPA/CPRA Personal Information Processing", "CCPA/CPRA",
            processes_consumer_personal_data),
    Trigger("us-ca-ccpa-sensitive-personal-info", "CCPA/CPRA Sensitive Personal Information Processing",
            "CPRA §1798.140(ae)", processes_sensitive_personal_info),
    Trigger("us-ca-ccpa-automated-decision-making", "CCPA/CPRA Automated Decision-Making Technology",
            "CPRA §1798.185(a)(16)", is_admt_on_consumers),
    Trigger("us-ca-ccpa-sale-sharing", "CCPA/CPRA Sale or Sharing of Personal Information",
            "Cal. Civ. Code §1798.120", _sale_or_sharing),
    Trigger("us-ca-ccpa-minors", "CCPA/CPRA Minors' Data Protections", "Cal. Civ. Code §1798.120(c)-(d)",
            involves_minors),
)

SB_942_TRIGGERS: tuple[Trigger, ...] = (
    Trigger(
        "us-ca-sb942-genai-provider",
        "SB 942 GenAI Transparency Requirements",
        "SB 942",
        lambda c: _generates_content(c) or c.product_type in ("generator", "foundation-model"),
    ),
    Trigger(
        "us-ca-sb942-provenance",
        "SB 942 AI-Generated Content Provenance",
        "SB 942",
        lambda c: _generates_content(c) and _outputs(c, "image", "video", "audio"),
    ),
)

DEEPFAKE_TRIGGERS: tuple[Trigger, ...] = (
    Trigger("us-ca-ab730-political-deepfakes", "AB 730 Political Deepfake Prohibition",
            "AB 730 (Cal. Elec. Code §20010)", _political_deepfakes),
    Trigger("us-ca-ab602-sexual-deepfakes", "AB 602 Non-Consensual Sexual Deepfake Prohibition",
            "AB 602 (Cal. Civ. Code §1708.86)", _sexual_deepfakes),
)


def _admt_only(ctx: ProductContext) -> bool:
    return is_admt_on_consumers(ctx) and not (
        processes_consumer_personal_data(ctx) or matching(ctx, SB_942_TRIGGERS)
    )


RISK_TIERS: tuple[RiskTier, ...] = (
    RiskTier(
        level=RiskLevel.HIGH,
        triggers=(
            Trigger("us-ca-ccpa-automated-decision-making", "High-stakes automated decision-making",
                    "CPRA §1798.185(a)(16)", is_high_stakes_admt),
            Trigger("us-ca-sb243-ai-regulation", "SB 243 AI Regulations", "SB 243", is_high_stakes_admt),
        ),
        justification=(
            "This AI system makes automated decisions with material or determinative impact on California "
            "consumers in high-stakes domains (employment, credit, housing, insurance). This triggers CPRA "
            "automated decision-making technology provisions, SB 243, and heightened opt-out and access rights."
        ),
    ),
    RiskTier(
        level=RiskLevel.HIGH,
        triggers=(
            Trigger(
                "us-ca-ccpa-sensitive-personal-info",
                "Biometric information of California consumers",
                "CPRA §1798.140(ae)",
                lambda c: "biometric" in c.data_processed and processes_consumer_personal_data(c),
            ),
        ),
        justification=(
            "This AI system processes biometric information of California consumers. Biometric data is sensitive "
            "personal information under CPRA, triggering the right to limit use and disclosure and heightened data "
            "minimisation requirements."
        ),
        provisions=("CPRA §1798.140(ae)", "CPRA §1798.121"),
    ),
    RiskTier(
        level=RiskLevel.HIGH,
        triggers=(
            Trigger(
                "us-ca-ab730-political-deepfakes",
                "Deepfake generation in a political context",
                "AB 730 (Cal. Elec. Code §20010)",
                lambda c: has_deepfake_capabilities(c) and desc_has(c, *POLITICAL_TERMS),
            ),
        ),
        justification=(
            "This AI system can generate deepfake content in a political context. AB 730 prohibits distribution of "
            "deceptive media of candidates within 60 days of an election."
        ),
    ),
    RiskTier(
        level=RiskLevel.HIGH,
        triggers=(DEEPFAKE_TRIGGERS[1],),
        justification=(
            "This AI system can generate deepfake visual media, creating liability exposure under AB 602, which "
            "prohibits creation of non-consensual sexually explicit deepfakes."
        ),
    ),
    RiskTier(
        level=RiskLevel.LIMITED,
        triggers=(
            CCPA_TRIGGERS[0],
            *SB_942_TRIGGERS,
            Trigger("us-ca-ccpa-automated-decision-making", "CCPA/CPRA Automated Decision-Making Technology",
                    "CPRA §1798.185(a)(16)", _admt_only),
        ),
        justification=(
            "This AI system triggers California obligations requiring transparency and consumer protections: "
            "{matched}."
        ),
    ),
)


def classify_risk(ctx: ProductContext) -> RiskClassification:
    return classify_by_tiers(
        ctx,
        RISK_TIERS,
        fallback_justification=(
            "This AI system does not process personal information of California consumers and does not make "
            "automated decisions with significant effects on individuals. CCPA/CPRA, SB 942 and SB 243 do not "
            "impose material obligations."
        ),
    )


def _fired(ctx: ProductContext, triggers: tuple[Trigger, ...], trigger_id: str) -> bool:
    return any(t.id == trigger_id for t in matching(ctx, triggers))


CONDITIONAL_PROVISIONS: tuple[tuple, ...] = (
    (
        processes_consumer_personal_data,
        provision(
            "us-ca-ccpa-consumer-rights", "CCPA/CPRA", "Cal. Civ. Code §§1798.100-1798.125",
            "Consumer Privacy Rights",
            "California consumers have the right to know, delete, correct and opt out of sale or sharing of "
            "personal information, and the right to non-discrimination for exercising these rights.",
            "This AI system processes personal information of California consumers.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
    (
        processes_consumer_personal_data,
        provision(
            "us-ca-ccpa-notice", "CCPA/CPRA", "Cal. Civ. Code §1798.100(b)",
            "Notice at Collection",
            "Businesses must inform consumers at or before collection of the categories collected, the purposes, "
            "whether information is sold or shared, and the retention period.",
            "Required wherever the AI system collects personal information from California consumers.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
    (
        processes_sensitive_personal_info,
        provision(
            "us-ca-cpra-sensitive-info", "CPRA", "Cal. Civ. Code §§1798.121, 1798.140(ae)",
            "Right to Limit Use and Disclosure of Sensitive Personal Information",
            "Consumers may limit use of sensitive personal information to what is necessary to provide the "
            "requested service.",
            "This AI system processes sensitive personal information categories as defined by CPRA.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
    (
        is_admt_on_consumers,
        provision(
            "us-ca-cpra-admt", "CPRA", "Cal. Civ. Code §1798.185(a)(16)",
            "Automated Decision-Making Technology",
            "Consumers have access and opt-out rights for automated decision-making technology that produces legal "
            "or similarly significant effects, including the right to request human review.",
            "This AI system uses automated decision-making that produces significant effects on consumers.",
            force=RegulatoryForce.BINDING_REGULATION,
        ),
    ),
    (
        _sale_or_sharing,
        provision(
            "us-ca-ccpa-opt-out", "CCPA/CPRA", "Cal. Civ. Code §1798.120",
            "Right to Opt-Out of Sale or Sharing of Personal Information",
            "Businesses must provide a 'Do Not Sell or Share My Personal Information' link and honour Global "
            "Privacy Control signals.",
            "This AI system shares or sells personal information for advertising or marketing.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
    (
        involves_minors,
        provision(
            "us-ca-ccpa-minors-protections", "CCPA/CPRA", "Cal. Civ. Code §1798.120(c)-(d)",
            "CCPA/CPRA Minors' Protections",
            "Sale or sharing of personal information of consumers under 16 requires opt-in consent; under 13 a "
            "parent or guardian must opt in.",
            "This AI system processes data of minors.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
    (
        lambda c: bool(matching(c, SB_942_TRIGGERS)),
        provision(
            "us-ca-sb942-transparency", "California SB 942", "SB 942 (AI Transparency Act)",
            "GenAI Transparency and Provenance Requirements",
            "Covered GenAI providers must offer free AI detection tools, include provenance data in generated "
            "content, and disclose that content was generated by AI.",
            "This system generates AI content.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
    (
        lambda c: _fired(c, SB_942_TRIGGERS, "us-ca-sb942-provenance"),
        provision(
            "us-ca-sb942-provenance-data", "California SB 942", "SB 942 §§3-4",
            "AI-Generated Content Provenance Data",
            "Image, video and audio output must carry a manifest or latent watermark identifying it as "
            "AI-generated and naming the responsible provider.",
            "This system generates visual or audio content.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
    (
        is_admt_on_consumers,
        provision(
            "us-ca-sb243-ai-regs", "California SB 243", "SB 243",
            "SB 243 AI Regulation Requirements",
            "Additional transparency, accountability and consumer access requirements for automated decision "
            "systems making significant decisions about California consumers.",
            "This AI system makes significant automated decisions affecting consumers.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
    (
        _political_deepfakes,
        provision(
            "us-ca-ab730", "California AB 730", "Cal. Elec. Code §20010",
            "Prohibition on Political Deepfakes Near Elections",
            "Distributing materially deceptive audio or visual media of a candidate within 60 days of an election "
            "with actual malice is prohibited.",
            "This AI system can generate synthetic media and operates in a political context.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
    (
        _sexual_deepfakes,
        provision(
            "us-ca-ab602", "California AB 602", "Cal. Civ. Code §1708.86",
            "Prohibition on Non-Consensual Sexual Deepfakes",
            "Creates a private right of action against anyone who creates or distributes sexually explicit "
            "digital alterations of a person's likeness without consent.",
            "This AI system can generate deepfake visual media.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
    (
        lambda c: has_agentic_capabilities(c) and processes_consumer_personal_data(c),
        provision(
            "us-ca-agentic-ccpa", "CCPA/CPRA", "Cal. Civ. Code §§1798.100-1798.199.100",
            "Agentic AI Under CCPA/CPRA Framework",
            "Agents that autonomously collect, share or decide on consumer personal information trigger notice, "
            "ADMT and opt-out obligations for every agent-initiated operation.",
            "This AI system has agentic capabilities that may process consumer personal information.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
    (
        lambda c: is_financial_services_ai(c) and (
            "consumers" in c.user_populations
            or (c.automation_level in ("fully-automated", "human-on-the-loop")
                and c.decision_impact in ("material", "determinative"))
        ),
        provision(
            "us-ca-ccpa-financial", "CCPA/CPRA", "Cal. Civ. Code §§1798.100, 1798.140(ae)",
            "CCPA/CPRA Financial Data and Automated Decision-Making",
            "Financial account information is sensitive personal information under CPRA, and automated financial "
            "decisions trigger opt-out and human review rights.",
            "This AI system operates in financial services and processes California consumer data.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
)


def _provisions(ctx: ProductContext, risk: RiskClassification) -> list[ApplicableProvision]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    return when(ctx, CONDITIONAL_PROVISIONS)


def _artifacts(ctx: ProductContext, risk: RiskClassification) -> list[ArtifactRequirement]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    artifacts: list[ArtifactRequirement] = []
    if processes_consumer_personal_data(ctx):
        artifacts.append(
            artifact(
                "transparency-notice",
                "CCPA/CPRA Privacy Notice at Collection",
                "Cal. Civ. Code §§1798.100(b), 1798.130",
                "Notice of categories collected, purposes, sale or sharing, retention and consumer rights, with a "
                "'Do Not Sell or Share' link where applicable.",
                template_id="transparency-notice",
            )
        )
    if is_admt_on_consumers(ctx):
        artifacts.append(
            artifact(
                "risk-assessment",
                "CCPA/CPRA Automated Decision-Making Risk Assessment",
                "CPRA §1798.185(a)(16), SB 243",
                "Purpose of the ADMT, personal information processed, significance of effects, risks and benefits "
                "to consumers, and safeguards.",
            )
        )
    if matching(ctx, SB_942_TRIGGERS):
        artifacts.append(
            artifact(
                "genai-content-policy",
                "SB 942 AI Transparency Compliance Documentation",
                "California SB 942 (AI Transparency Act)",
                "Detection tools offered to users, provenance implementation, public detection webpage, and "
                "disclosure mechanisms.",
                template_id="genai-content-policy",
            )
        )
    if (
        risk.level == RiskLevel.HIGH
        and is_admt_on_consumers(ctx)
        and any(p in ctx.user_populations for p in HIGH_STAKES_POPULATIONS)
    ):
        artifacts.append(
            artifact(
                "bias-audit",
                "California Automated Decision Bias Audit",
                "CPRA §1798.185(a)(16), SB 243",
                "Disparate impact evaluation across protected classes for high-stakes employment, credit and "
                "housing decisions.",
                template_id="bias-audit-nyc",
                required=False,
            )
        )
    if is_financial_services_ai(ctx) and processes_consumer_personal_data(ctx):
        artifacts.append(
            artifact(
                "model-card",
                "California Financial AI Model Documentation",
                "CCPA/CPRA, California Financial Code",
                "Purpose, methodology, data categories, accuracy, fairness evaluation and consumer impact of the "
                "financial model.",
                template_id="model-card",
                required=False,
            )
        )
    return artifacts


CONDITIONAL_ACTIONS: tuple[tuple, ...] = (
    (
        processes_sensitive_personal_info,
        _action(
            "us-ca-cpra-limit-sensitive-data",
            "Implement right to limit use of sensitive personal information",
            "Let consumers limit use and disclosure of sensitive personal information to what is necessary for the "
            "service. Display a 'Limit the Use of My Sensitive Personal Information' link.",
            "critical", "Cal. Civ. Code §1798.121", "2-4 weeks",
        ),
    ),
    (
        is_admt_on_consumers,
        _action(
            "us-ca-cpra-admt-access",
            "Implement ADMT access and opt-out rights",
            "Let consumers access information about automated decision-making, opt out of it for significant "
            "decisions, and request human review.",
            "critical", "CPRA §1798.185(a)(16)", "3-6 weeks",
        ),
    ),
    (
        is_admt_on_consumers,
        _action(
            "us-ca-cpra-admt-risk-assessment",
            "Conduct automated decision-making risk assessment",
            "Assess purpose and necessity, personal information processed, risks to consumers, benefits and "
            "safeguards of the ADMT, and retain the assessment.",
            "critical", "CPRA §1798.185(a)(16), SB 243", "2-4 weeks",
        ),
    ),
    (
        _sale_or_sharing,
        _action(
            "us-ca-ccpa-opt-out-link",
            "Implement 'Do Not Sell or Share' opt-out mechanism",
            "Provide a conspicuous 'Do Not Sell or Share My Personal Information' link and honour Global Privacy "
            "Control signals without dark patterns.",
            "critical", "Cal. Civ. Code §1798.120", "1-2 weeks",
        ),
    ),
    (
        involves_minors,
        _action(
            "us-ca-ccpa-minors-opt-in",
            "Implement opt-in consent for minors' data sale/sharing",
            "Obtain affirmative opt-in before selling or sharing data of consumers under 16, and parental consent "
            "under 13. Implement age-gating to identify minors.",
            "critical", "Cal. Civ. Code §1798.120(c)-(d)", "2-4 weeks",
        ),
    ),
    (
        lambda c: bool(matching(c, SB_942_TRIGGERS)),
        _action(
            "us-ca-sb942-detection-tools",
            "Make AI detection tools freely available",
            "Offer users a free tool to assess whether content was generated by the provider's GenAI system and "
            "publish a webpage describing its capabilities and limitations.",
            "critical", "California SB 942 (AI Transparency Act)", "4-8 weeks", "2026-01-01",
        ),
    ),
    (
        lambda c: bool(matching(c, SB_942_TRIGGERS)),
        _action(
            "us-ca-sb942-disclosure",
            "Implement AI-generated content disclosure",
            "Provide clear and conspicuous disclosure that content was AI-generated. Disclosures must be durable "
            "and hard to remove downstream.",
            "critical", "California SB 942 (AI Transparency Act)", "3-6 weeks", "2026-01-01",
        ),
    ),
    (
        lambda c: _fired(c, SB_942_TRIGGERS, "us-ca-sb942-provenance"),
        _action(
            "us-ca-sb942-provenance-implementation",
            "Implement provenance data in AI-generated media",
            "Embed provenance data in generated image, video and audio using C2PA manifests or latent "
            "watermarking, detectable by the provider's detection tools.",
            "critical", "California SB 942 §§3-4", "4-8 weeks", "2026-01-01",
        ),
    ),
    (
        _political_deepfakes,
        _action(
            "us-ca-ab730-safeguards",
            "Implement safeguards against political deepfake generation",
            "Prevent generation of deceptive media of candidates for elective office through likeness filters, "
            "usage policies and misuse monitoring.",
            "critical", "AB 730 (Cal. Elec. Code §20010)", "3-6 weeks",
        ),
    ),
    (
        _sexual_deepfakes,
        _action(
            "us-ca-ab602-safeguards",
            "Implement safeguards against non-consensual sexual deepfakes",
            "Deploy NSFW safety filters, verify identity before generating likenesses of real persons, prohibit "
            "non-consensual intimate imagery and provide abuse reporting.",
            "critical", "AB 602 (Cal. Civ. Code §1708.86)", "3-6 weeks",
        ),
    ),
    (
        lambda c: has_agentic_capabilities(c) and processes_consumer_personal_data(c),
        _action(
            "us-ca-agentic-data-governance",
            "Implement data governance for agentic AI operations",
            "Give notice for agent-initiated collection, minimise agent data use, log all agent data operations, "
            "and honour existing opt-out preferences.",
            "critical", "CCPA/CPRA", "3-6 weeks",
        ),
    ),
    (
        lambda c: is_financial_services_ai(c) and processes_consumer_personal_data(c),
        _action(
            "us-ca-financial-ccpa-compliance",
            "Ensure CCPA/CPRA compliance for financial AI",
            "Treat financial account information as sensitive, explain automated financial decisions, and allow "
            "human review of automated credit, insurance or lending decisions.",
            "critical", "CCPA/CPRA, Cal. Civ. Code §§1798.121, 1798.185(a)(16)", "3-6 weeks",
        ),
    ),
    (
        processes_consumer_personal_data,
        _action(
            "us-ca-data-security",
            "Implement reasonable security measures",
            "Maintain reasonable security procedures for personal information. Lack of reasonable security gives "
            "rise to a CCPA private right of action after a breach.",
            "important", "Cal. Civ. Code §§1798.81.5, 1798.82, 1798.150", "2-4 weeks",
        ),
    ),
)


def _actions(ctx: ProductContext, risk: RiskClassification) -> list[ActionRequirement]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    actions: list[ActionRequirement] = []
    if processes_consumer_personal_data(ctx):
        actions += [
            _action(
                "us-ca-ccpa-notice-at-collection",
                "Provide CCPA/CPRA notice at collection",
                "Give consumers a notice at or before collection listing categories, purposes, retention and "
                "whether information is sold or shared.",
                "critical", "Cal. Civ. Code §1798.100(b)", "1-2 weeks",
            ),
            _action(
                "us-ca-ccpa-consumer-rights-mechanisms",
                "Implement CCPA/CPRA consumer rights request mechanisms",
                "Support requests to know, delete, correct and opt out through at least two submission methods and "
                "respond within 45 days.",
                "critical", "Cal. Civ. Code §§1798.105-1798.125", "3-6 weeks",
            ),
            _action(
                "us-ca-ccpa-data-inventory",
                "Conduct personal information inventory and mapping",
                "Map categories of personal information collected, processed, stored and shared with sources, "
                "purposes, retention periods and recipients.",
                "important", "Cal. Civ. Code §§1798.100, 1798.110", "2-4 weeks",
            ),
        ]
    actions += when(ctx, CONDITIONAL_ACTIONS)
    return actions


def _timeline(ctx: ProductContext, risk: RiskClassification) -> ComplianceTimeline:
    deadlines = [
        deadline("2020-01-01", "CCPA entered into force.", "CCPA (Cal. Civ. Code §1798.100 et seq.)"),
        deadline(
            "2023-01-01",
            "CPRA amendments took effect and the CPPA assumed enforcement authority.",
            "CPRA",
        ),
        deadline("2024-01-01", "AB 730 political deepfake prohibition in force.", "AB 730 (Cal. Elec. Code §20010)"),
    ]
    notes = ["CCPA/CPRA obligations are in force now for all processing of California consumers' data."]
    if risk.level == RiskLevel.HIGH:
        notes.append(
            "High-risk automated decision-making systems should complete risk assessments and opt-out mechanisms "
            "as soon as practicable. CPPA ADMT regulations are in development."
        )
    if matching(ctx, SB_942_TRIGGERS):
        deadlines.append(
            deadline(
                "2026-01-01",
                "SB 942 (California AI Transparency Act) takes effect.",
                "SB 942 (AI Transparency Act)",
            )
        )
        notes.append("SB 942 takes effect January 1, 2026. Provenance data and detection tools are needed by then.")
    if is_genai_product(ctx):
        notes.append("California GenAI providers face SB 942, AB 730 and AB 602 together.")
    if has_agentic_capabilities(ctx):
        notes.append("Agentic AI is assessed under existing CCPA/CPRA and ADMT frameworks. Monitor CPPA rulemaking.")
    if is_financial_services_ai(ctx):
        notes.append("Financial account data is sensitive personal information under CPRA.")
    return ComplianceTimeline(effective_date="2020-01-01", deadlines=deadlines, notes=notes)


MODULE = RuleModule(
    id=JURISDICTION,
    name="California (CCPA/CPRA, SB 942, SB 243, AB 730, AB 602)",
    jurisdiction=JURISDICTION,
    classify=classify_risk,
    provisions=_provisions,
    artifacts=_artifacts,
    actions=_actions,
    schedule=_timeline,
)
