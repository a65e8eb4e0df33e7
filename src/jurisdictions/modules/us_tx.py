"""Texas: TRAIGA plus the election and sexual deepfake statutes."""
from __future__ import annotations

from functools import partial

from jurisdictions.contract import RiskTier, RuleModule, Trigger, classify_by_tiers, guarded, matching
from jurisdictions.shared import (
    action,
    artifact,
    deadline,
    desc_has,
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

JURISDICTION = "us-tx"

_action = partial(action, JURISDICTION)

TRAIGA_TRIGGERS: tuple[Trigger, ...] = guarded(
    (
        Trigger("traiga-employment", "High-Risk AI: Employment Decisions", "TRAIGA", is_employment_context),
        Trigger("traiga-education", "High-Risk AI: Education Decisions", "TRAIGA",
                lambda c: "students" in c.user_populations),
        Trigger(
            "traiga-financial", "High-Risk AI: Financial Services Decisions", "TRAIGA",
            lambda c: is_financial_services_ai(c)
            or "credit-applicants" in c.user_populations
            or desc_has(c, "credit", "lending", "insurance", "loan"),
        ),
        Trigger(
            "traiga-housing", "High-Risk AI: Housing Decisions", "TRAIGA",
            lambda c: "tenants" in c.user_populations or desc_has(c, "housing", "rental", "tenant screen"),
        ),
        Trigger("traiga-healthcare", "High-Risk AI: Healthcare Decisions", "TRAIGA",
                lambda c: "patients" in c.user_populations),
        Trigger(
            "traiga-government", "High-Risk AI: Government Services Decisions", "TRAIGA",
            lambda c: desc_has(c, "government service", "public benefit", "welfare", "public assistance"),
        ),
        Trigger(
            "traiga-legal", "High-Risk AI: Legal Services Decisions", "TRAIGA",
            lambda c: desc_has(c, "legal service", "legal decision", "judicial"),
        ),
    ),
    makes_material_decisions,
)


def _deepfakes_or_voice(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    return gen is not None and (gen.can_generate_deepfakes or gen.can_generate_synthetic_voice)


def _visual_deepfakes(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    return (
        gen is not None
        and gen.can_generate_deepfakes
        and any(m in gen.output_modalities for m in ("image", "video"))
    )


DEEPFAKE_TRIGGERS: tuple[Trigger, ...] = (
    Trigger(
        "tx-deepfake-election",
        "Election Deepfakes (Texas Election Code)",
        "Texas Election Code § 255.004",
        lambda c: _deepfakes_or_voice(c) and desc_has(c, "election", "political", "candidate", "campaign"),
    ),
    Trigger("tx-deepfake-sexual", "Non-Consensual Sexual Deepfakes", "Texas Penal Code § 21.165", _visual_deepfakes),
)


def is_high_risk_ai(ctx: ProductContext) -> bool:
    return bool(matching(ctx, TRAIGA_TRIGGERS))


def _fired(ctx: ProductContext, trigger_id: str) -> bool:
    return any(t.id == trigger_id for t in matching(ctx, DEEPFAKE_TRIGGERS))


RISK_TIERS: tuple[RiskTier, ...] = (
    RiskTier(
        level=RiskLevel.HIGH,
        triggers=TRAIGA_TRIGGERS,
        justification=(
            "This AI system makes consequential decisions in TRAIGA-regulated domains: {matched}. Deployers must "
            "conduct impact assessments, implement risk management, and provide individual notice and opt-out rights."
        ),
        provisions=("TRAIGA (Texas Responsible AI Governance Act)",),
    ),
    RiskTier(
        level=RiskLevel.LIMITED,
        triggers=DEEPFAKE_TRIGGERS,
        justification=(
            "This AI system can generate synthetic media triggering Texas deepfake provisions: {matched}. Texas "
            "criminalises election deepfakes and non-consensual sexual deepfakes."
        ),
    ),
    RiskTier(
        level=RiskLevel.LIMITED,
        triggers=(Trigger("tx-genai-disclosure", "Generative AI content", "TRAIGA GenAI Provisions", is_genai_product),),
        justification=(
            "This generative AI system is subject to Texas AI content disclosure requirements under TRAIGA."
        ),
    ),
    RiskTier(
        level=RiskLevel.LIMITED,
        triggers=(Trigger("tx-consumer-protection", "Consumer-facing AI", "Texas DTPA",
                          lambda c: "consumers" in c.user_populations),),
        justification=(
            "This consumer-facing AI system is subject to the Texas Deceptive Trade Practices Act."
        ),
    ),
)


def classify_risk(ctx: ProductContext) -> RiskClassification:
    return classify_by_tiers(
        ctx,
        RISK_TIERS,
        fallback_justification=(
            "This AI system does not make consequential decisions in TRAIGA domains and does not generate synthetic "
            "media. No specific Texas obligations apply."
        ),
    )


def _traiga(article: str, title: str, summary: str, relevance: str, id: str):
    return provision(id, "TRAIGA", article, title, summary, relevance, force=RegulatoryForce.BINDING_LAW)


TRAIGA_PROVISIONS = (
    _traiga(
        "TRAIGA Impact Assessment Requirements", "Algorithmic Impact Assessment",
        "Deployers of high-risk AI document an impact assessment before deployment covering discriminatory impact, "
        "purpose, intended use and mitigations.",
        "This AI system makes consequential decisions.",
        id="us-tx-traiga-impact-assessment",
    ),
    _traiga(
        "TRAIGA Risk Management", "Risk Management Policy",
        "Deployers identify algorithmic discrimination risks, mitigate them, and monitor continuously.",
        "This high-risk AI system requires a documented risk management policy.",
        id="us-tx-traiga-risk-management",
    ),
    _traiga(
        "TRAIGA Notice Requirements", "Individual Notice of AI Use",
        "Individuals are told an AI system is making a consequential decision about them, what data it uses, and how "
        "to contest it.",
        "Individuals affected by this system's decisions must be notified.",
        id="us-tx-traiga-notice",
    ),
    _traiga(
        "TRAIGA Opt-Out Rights", "Right to Opt Out and Appeal",
        "Individuals may opt out of AI profiling and appeal adverse decisions to a human reviewer.",
        "Affected individuals must be given opt-out and appeal rights.",
        id="us-tx-traiga-opt-out",
    ),
)


def _provisions(ctx: ProductContext, risk: RiskClassification) -> list[ApplicableProvision]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    provisions = list(TRAIGA_PROVISIONS) if is_high_risk_ai(ctx) else []
    if _fired(ctx, "tx-deepfake-election"):
        provisions.append(
            provision(
                "us-tx-election-deepfake", "Texas Election Code", "§ 255.004",
                "Prohibition on Deceptive Election Deepfakes",
                "Creating and distributing a deepfake video to injure a candidate or influence an election within "
                "30 days of the vote is a Class A misdemeanor.",
                "This AI system can generate deepfakes in political contexts.",
                force=RegulatoryForce.BINDING_LAW,
            )
        )
    if _fired(ctx, "tx-deepfake-sexual"):
        provisions.append(
            provision(
                "us-tx-sexual-deepfake", "Texas Penal Code", "§ 21.165",
                "Non-Consensual Sexual Deepfakes",
                "Creating or distributing non-consensual sexually explicit deepfake imagery is a state jail felony.",
                "This AI system can generate realistic images or videos.",
                force=RegulatoryForce.BINDING_LAW,
            )
        )
    if is_genai_product(ctx):
        provisions.append(
            _traiga(
                "TRAIGA GenAI Disclosure", "AI-Generated Content Disclosure",
                "Content that could be mistaken for human-created content must be disclosed as AI-generated.",
                "This generative AI system must implement content disclosure mechanisms.",
                id="us-tx-traiga-genai-disclosure",
            )
        )
    return provisions


def _artifacts(ctx: ProductContext, risk: RiskClassification) -> list[ArtifactRequirement]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    artifacts: list[ArtifactRequirement] = []
    if is_high_risk_ai(ctx):
        artifacts += [
            artifact(
                "algorithmic-impact",
                "TRAIGA Algorithmic Impact Assessment",
                "TRAIGA Impact Assessment Requirements",
                "Purpose, data inputs, decision outputs, discriminatory impacts, mitigations and monitoring plan, "
                "completed before deployment.",
            ),
            artifact(
                "risk-assessment",
                "TRAIGA Risk Management Policy",
                "TRAIGA Risk Management",
                "Identification of discrimination risks, mitigation steps and monitoring procedures.",
            ),
            artifact(
                "transparency-notice",
                "TRAIGA Individual Notice",
                "TRAIGA Notice Requirements",
                "Notice of AI use in consequential decisions with data used, contest route and opt-out.",
                template_id="transparency-notice",
            ),
        ]
    if is_genai_product(ctx):
        artifacts.append(
            artifact(
                "genai-content-policy",
                "AI-Generated Content Disclosure Policy",
                "TRAIGA GenAI Provisions",
                "Disclosure mechanisms, labelling standards and deepfake provisions for generated content.",
                required=False,
            )
        )
    return artifacts


def _actions(ctx: ProductContext, risk: RiskClassification) -> list[ActionRequirement]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    actions: list[ActionRequirement] = []
    if is_high_risk_ai(ctx):
        actions += [
            _action(
                "us-tx-traiga-impact-assessment",
                "Conduct TRAIGA algorithmic impact assessment",
                "Evaluate purpose, data inputs, discrimination potential, mitigations and monitoring before deployment.",
                "critical", "TRAIGA", "4-8 weeks",
            ),
            _action(
                "us-tx-traiga-risk-policy",
                "Implement TRAIGA risk management policy",
                "Maintain a risk management policy covering discrimination risks, mitigations and monitoring.",
                "critical", "TRAIGA", "2-4 weeks",
            ),
            _action(
                "us-tx-traiga-individual-notice",
                "Implement individual notice and opt-out mechanisms",
                "Notify individuals of AI use in consequential decisions, explain how to contest or opt out, and "
                "provide a human reviewer for appeals.",
                "critical", "TRAIGA", "2-4 weeks",
            ),
            _action(
                "us-tx-traiga-discrimination-testing",
                "Test for algorithmic discrimination",
                "Test for discriminatory outcomes across Texas-protected classes and keep records for regulatory "
                "review.",
                "important", "TRAIGA", "4-8 weeks",
            ),
        ]
    if matching(ctx, DEEPFAKE_TRIGGERS):
        actions.append(
            _action(
                "us-tx-deepfake-safeguards",
                "Implement Texas deepfake safeguards",
                "Prevent misleading political deepfakes near elections and add consent verification and content "
                "safety filters for intimate imagery.",
                "critical", "Texas Election Code § 255.004, Texas Penal Code § 21.165", "2-4 weeks",
            )
        )
    if is_genai_product(ctx):
        actions.append(
            _action(
                "us-tx-genai-disclosure",
                "Implement AI-generated content disclosure",
                "Label AI-generated output that could be mistaken for human-created content and keep provenance.",
                "important", "TRAIGA GenAI Provisions", "2-4 weeks",
            )
        )
    return actions


def _timeline(ctx: ProductContext, risk: RiskClassification) -> ComplianceTimeline:
    notes = ["TRAIGA was signed into law in 2025. Obligations phase in by system risk level."]
    if risk.level == RiskLevel.HIGH:
        notes.append(
            "High-risk deployers complete impact assessments and risk policies before deployment and reassess "
            "annually."
        )
    return ComplianceTimeline(
        effective_date="2025-09-01",
        deadlines=[
            deadline("2019-09-01", "Texas election deepfake provision took effect.", "Texas Election Code § 255.004"),
            deadline("2025-09-01", "TRAIGA takes effect for deployers of high-risk AI systems.", "TRAIGA"),
        ],
        notes=notes,
    )


MODULE = RuleModule(
    id=JURISDICTION,
    name="Texas Responsible AI Governance Act (TRAIGA)",
    jurisdiction=JURISDICTION,
    classify=classify_risk,
    provisions=_provisions,
    artifacts=_artifacts,
    actions=_actions,
    schedule=_timeline,
)
