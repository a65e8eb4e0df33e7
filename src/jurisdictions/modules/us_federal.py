"""US federal AI oversight: FTC Section 5, NIST AI RMF, and financial supervisors.

Federal AI regulation is enforcement-driven. The only prescriptive regime
modelled here is financial supervision (SR 11-7, ECOA/Regulation B, SEC).
"""
from __future__ import annotations

from functools import partial

from jurisdictions.contract import RiskTier, RuleModule, Trigger, classify_by_tiers, guarded, matching, when
from jurisdictions.shared import (
    action,
    artifact,
    can_generate_deepfakes,
    deadline,
    desc_has,
    is_financial_services_ai,
    is_genai_product,
    provision,
)
from models.actions import ActionRequirement
from models.context import ProductContext
from models.results import ApplicableProvision, ArtifactRequirement, ComplianceTimeline, RiskClassification
from models.shared import RegulatoryForce, RiskLevel

JURISDICTION = "us-federal"

_action = partial(action, JURISDICTION)

AFFECTED_POPULATIONS = ("consumers", "credit-applicants", "tenants", "job-applicants")


def _fin(ctx: ProductContext):
    return ctx.sector_context.financial_services if ctx.sector_context else None


def is_credit_scoring_ai(ctx: ProductContext) -> bool:
    fin = _fin(ctx)
    return (
        (fin is not None and fin.involves_credit)
        or "credit-applicants" in ctx.user_populations
        or desc_has(ctx, "credit scor", "creditworth")
    )


def is_high_impact_automated_decision(ctx: ProductContext) -> bool:
    return (
        ctx.decision_impact in ("material", "determinative")
        and ctx.automation_level == "fully-automated"
        and any(p in ctx.user_populations for p in AFFECTED_POPULATIONS)
    )


def _sr_11_7(ctx: ProductContext) -> bool:
    fin = _fin(ctx)
    return is_financial_services_ai(ctx) and fin is not None and (
        fin.has_model_risk_governance is not None
        or fin.involves_credit
        or fin.involves_trading
        or fin.involves_insurance_pricing
    )


def _fair_lending(ctx: ProductContext) -> bool:
    fin = _fin(ctx)
    return (
        (fin is not None and fin.involves_credit)
        or "credit-applicants" in ctx.user_populations
        or desc_has(ctx, "credit scor", "creditworth", "lending", "loan")
    )


def _sec_advisory(ctx: ProductContext) -> bool:
    fin = _fin(ctx)
    return (
        (fin is not None and (fin.sub_sector == "investment" or fin.involves_trading))
        or desc_has(ctx, "investment advi", "robo-advis", "portfolio management")
    )


def _genai_synthetic(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    return ctx.product_type == "generator" or (
        gen is not None and (gen.generates_content or gen.can_generate_deepfakes or gen.can_generate_synthetic_voice)
    )


FTC_TRIGGERS: tuple[Trigger, ...] = (
    Trigger(
        "ftc-deceptive-ai",
        "Deceptive AI Practices",
        "FTC Act Section 5",
        lambda c: "consumers" in c.user_populations
        and (c.product_type in ("generator", "recommender", "classifier") or desc_has(c, "consumer", "customer")),
    ),
    Trigger(
        "ftc-genai-synthetic-content",
        "AI-Generated/Synthetic Content Disclosure",
        "FTC Act Section 5",
        _genai_synthetic,
    ),
    Trigger(
        "ftc-unfair-ai-decisions",
        "Unfair Automated Decision-Making",
        "FTC Act Section 5",
        lambda c: c.decision_impact in ("material", "determinative")
        and any(p in c.user_populations for p in AFFECTED_POPULATIONS),
    ),
)

FINANCIAL_TRIGGERS: tuple[Trigger, ...] = (
    Trigger("sr-11-7-model-risk", "OCC/Fed SR 11-7 Model Risk Management", "SR 11-7 / OCC 2011-12", _sr_11_7),
    Trigger("cfpb-fair-lending", "CFPB Fair Lending AI Guidance", "ECOA / Regulation B", _fair_lending),
    Trigger("sec-ai-advisory", "SEC AI in Investment Advisory", "SEC Investment Advisers Act", _sec_advisory),
)

RISK_TIERS: tuple[RiskTier, ...] = (
    RiskTier(
        level=RiskLevel.HIGH,
        triggers=(Trigger("credit-scoring", "Credit scoring or lending decisions", "ECOA/Regulation B", is_credit_scoring_ai),),
        justification=(
            "This AI system is used in credit scoring or lending decisions, subject to heightened scrutiny under "
            "ECOA/Regulation B, OCC/Fed SR 11-7 model risk management, and FTC Section 5. Supervisory examination "
            "and enforcement is active in this area."
        ),
        provisions=("SR 11-7", "FTC Act Section 5"),
    ),
    RiskTier(
        level=RiskLevel.HIGH,
        triggers=guarded(FINANCIAL_TRIGGERS, is_financial_services_ai),
        justification=(
            "This AI system operates in financial services and is subject to regulatory oversight: {matched}. "
            "Supervised institutions must comply with model risk management expectations."
        ),
    ),
    RiskTier(
        level=RiskLevel.LIMITED,
        triggers=(
            Trigger(
                "ftc-unfair-ai-decisions",
                "Unfair Automated Decision-Making",
                "FTC Act Section 5",
                is_high_impact_automated_decision,
            ),
        ),
        justification=(
            "This AI system makes automated decisions with material impact on consumers, triggering FTC scrutiny "
            "for unfair or deceptive practices. No federal pre-market assessment exists, but failure to ensure "
            "fairness and transparency creates significant enforcement risk."
        ),
    ),
    RiskTier(
        level=RiskLevel.LIMITED,
        triggers=guarded((FTC_TRIGGERS[1],), is_genai_product),
        justification=(
            "This generative AI system creates content that may be mistaken for human-created content. FTC guidance "
            "emphasises disclosure of AI-generated content, and NIST AI 600-1 provides a GenAI risk profile."
        ),
        provisions=("NIST AI 600-1",),
    ),
    RiskTier(
        level=RiskLevel.LIMITED,
        triggers=FTC_TRIGGERS,
        justification=(
            "This AI system interacts with consumers and is subject to FTC oversight for unfair or deceptive "
            "practices ({matched})."
        ),
    ),
)


def classify_risk(ctx: ProductContext) -> RiskClassification:
    return classify_by_tiers(
        ctx,
        RISK_TIERS,
        fallback_justification=(
            "This AI system does not trigger specific US federal obligations beyond general FTC consumer "
            "protection. Voluntary alignment with the NIST AI RMF is recommended as a best practice."
        ),
    )


def _fired(ctx: ProductContext, trigger_id: str) -> bool:
    return any(t.id == trigger_id for t in matching(ctx, FINANCIAL_TRIGGERS))


CONDITIONAL_PROVISIONS: tuple[tuple, ...] = (
    (
        lambda c: bool(matching(c, FTC_TRIGGERS)),
        provision(
            "us-ftc-section5", "FTC Act", "Section 5",
            "FTC Prohibition on Unfair or Deceptive Practices",
            "The FTC prohibits unfair or deceptive acts in commerce, including false claims about AI capabilities, "
            "undisclosed AI involvement in decisions, and discriminatory AI use.",
            "This AI system is consumer-facing and within the FTC's enforcement remit.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
    (
        is_genai_product,
        provision(
            "us-nist-genai-profile", "NIST AI 600-1", "NIST AI 600-1",
            "NIST Generative AI Risk Profile",
            "Companion to the AI RMF covering twelve generative AI risk areas, from confabulation to value chain risks.",
            "This system uses or provides generative AI capabilities.",
            force=RegulatoryForce.VOLUNTARY_FRAMEWORK,
        ),
    ),
    (
        lambda c: is_genai_product(c) and can_generate_deepfakes(c),
        provision(
            "us-ftc-genai-deepfakes", "FTC Guidance", "FTC GenAI Guidance (2023-2024)",
            "FTC Guidance on AI-Generated Content and Deepfakes",
            "Using AI to generate deceptive content, including deepfakes and synthetic voices, may violate Section 5.",
            "This system can generate synthetic media or deepfakes.",
            force=RegulatoryForce.SUPERVISORY_GUIDANCE,
        ),
    ),
    (
        lambda c: _fired(c, "sr-11-7-model-risk"),
        provision(
            "us-sr-11-7", "SR 11-7 / OCC 2011-12", "SR 11-7",
            "OCC/Fed Model Risk Management Guidance",
            "Models used for material decisions at banking institutions need independent validation, ongoing "
            "monitoring, governance, and documentation.",
            "This AI system operates at a supervised financial institution.",
            force=RegulatoryForce.SUPERVISORY_GUIDANCE,
        ),
    ),
    (
        lambda c: _fired(c, "cfpb-fair-lending"),
        provision(
            "us-cfpb-fair-lending", "ECOA / Regulation B", "ECOA Section 701, Regulation B",
            "CFPB Fair Lending AI Guidance",
            "Creditors using AI must give specific and accurate adverse action reasons and test models for "
            "disparate impact.",
            "This AI system is involved in credit decisions.",
            force=RegulatoryForce.BINDING_REGULATION,
        ),
    ),
    (
        lambda c: _fired(c, "sec-ai-advisory"),
        provision(
            "us-sec-ai-advisory", "Investment Advisers Act", "SEC AI Examination Priorities",
            "SEC Examination of AI in Investment Advisory",
            "Advisers using AI must disclose it to clients and avoid undisclosed conflicts of interest.",
            "This AI system is used in investment advisory or trading.",
            force=RegulatoryForce.BINDING_LAW,
        ),
    ),
)


def _provisions(ctx: ProductContext, risk: RiskClassification) -> list[ApplicableProvision]:
    base = provision(
        "us-nist-ai-rmf", "NIST AI RMF", "NIST AI 100-1",
        "NIST AI Risk Management Framework",
        "Voluntary framework for managing AI risks across the lifecycle through the Govern, Map, Measure and "
        "Manage functions.",
        "Recommended framework for systematic AI risk management regardless of regulatory requirements.",
        force=RegulatoryForce.VOLUNTARY_FRAMEWORK,
    )
    return [base, *when(ctx, CONDITIONAL_PROVISIONS)]


def _artifacts(ctx: ProductContext, risk: RiskClassification) -> list[ArtifactRequirement]:
    artifacts: list[ArtifactRequirement] = []
    if risk.level in (RiskLevel.HIGH, RiskLevel.LIMITED):
        artifacts.append(
            artifact(
                "risk-assessment",
                "AI Risk Assessment (NIST AI RMF Aligned)",
                "NIST AI RMF 1.0",
                "Risk assessment covering the Govern, Map, Measure and Manage functions. Expected by federal "
                "supervisors for financial institutions.",
                required=risk.level == RiskLevel.HIGH,
            )
        )
    if is_genai_product(ctx):
        artifacts.append(
            artifact(
                "transparency-notice",
                "AI-Generated Content Disclosure Policy",
                "FTC Act Section 5, NIST AI 600-1",
                "Policies for labelling, watermarking and disclosing AI-generated content to consumers.",
                template_id="transparency-notice",
                required=False,
            )
        )
    if is_financial_services_ai(ctx):
        artifacts.append(
            artifact(
                "model-card",
                "Model Documentation (SR 11-7 Aligned)",
                "SR 11-7 / OCC 2011-12",
                "Model purpose, methodology, assumptions, limitations, performance, validation results, and "
                "monitoring plan.",
                template_id="model-card",
            )
        )
    if is_credit_scoring_ai(ctx):
        artifacts.append(
            artifact(
                "bias-audit",
                "Fair Lending Analysis / Bias Audit",
                "ECOA / Regulation B",
                "Disparate impact analysis of the credit model across protected classes with methodology, results, "
                "and remediation plan.",
                template_id="bias-audit-nyc",
            )
        )
    return artifacts


FINANCIAL_ACTIONS: tuple[tuple, ...] = (
    (
        lambda c: _fired(c, "sr-11-7-model-risk"),
        _action(
            "us-sr-11-7-governance",
            "Establish AI model risk governance framework",
            "Define the model inventory, model risk appetite, ownership, and model risk policies. Board and senior "
            "management must provide effective challenge of model risk.",
            "critical", "SR 11-7 / OCC 2011-12", "4-8 weeks",
        ),
    ),
    (
        lambda c: _fired(c, "sr-11-7-model-risk"),
        _action(
            "us-sr-11-7-validation",
            "Conduct independent model validation",
            "Validate AI/ML models independently of development: conceptual soundness, outcome analysis, and "
            "benchmarking. Re-validate on material change.",
            "critical", "SR 11-7 / OCC 2011-12", "4-8 weeks",
        ),
    ),
    (
        lambda c: _fired(c, "sr-11-7-model-risk"),
        _action(
            "us-sr-11-7-monitoring",
            "Implement ongoing model performance monitoring",
            "Track performance metrics, detect drift, analyse outcomes against validation benchmarks, and trigger "
            "re-validation when performance degrades.",
            "important", "SR 11-7 / OCC 2011-12", "3-6 weeks",
        ),
    ),
    (
        lambda c: _fired(c, "cfpb-fair-lending"),
        _action(
            "us-cfpb-adverse-action",
            "Implement specific adverse action reason codes",
            "Provide specific and accurate principal reasons for adverse credit decisions, generated with model "
            "explainability techniques.",
            "critical", "ECOA Section 701(d), Regulation B 1002.9", "3-6 weeks",
        ),
    ),
    (
        lambda c: _fired(c, "cfpb-fair-lending"),
        _action(
            "us-cfpb-fair-lending-testing",
            "Conduct fair lending testing on AI credit model",
            "Test the credit model for disparate impact across protected classes and document methodology, results, "
            "and remediation.",
            "critical", "ECOA / Regulation B", "4-8 weeks",
        ),
    ),
    (
        lambda c: _fired(c, "sec-ai-advisory"),
        _action(
            "us-sec-ai-disclosure",
            "Disclose AI use in investment advisory",
            "Disclose AI use in recommendations, portfolio management or trading, and address conflicts of interest "
            "arising from AI-driven decisions.",
            "critical", "Investment Advisers Act", "2-4 weeks",
        ),
    ),
)


def _actions(ctx: ProductContext, risk: RiskClassification) -> list[ActionRequirement]:
    actions = [
        _action(
            "us-nist-rmf-alignment",
            "Align with NIST AI Risk Management Framework",
            "Implement AI risk management practices aligned with NIST AI RMF 1.0 across the Govern, Map, Measure "
            "and Manage functions. While voluntary, it is increasingly referenced by federal agencies.",
            "recommended", "NIST AI RMF 1.0", "4-8 weeks",
        )
    ]
    if matching(ctx, FTC_TRIGGERS):
        actions.append(
            _action(
                "us-ftc-transparency",
                "Ensure truthful AI marketing and transparency",
                "Review marketing claims about AI capabilities for accuracy and do not hide material AI involvement "
                "in decisions.",
                "important", "FTC Act Section 5", "1-2 weeks",
            )
        )
    if is_high_impact_automated_decision(ctx):
        actions.append(
            _action(
                "us-ftc-fair-ai-decisions",
                "Test and document AI decision fairness",
                "Test automated decisions for unfair outcomes across protected classes and document the methodology "
                "and results.",
                "critical", "FTC Act Section 5", "3-6 weeks",
            )
        )
    if is_genai_product(ctx):
        actions += [
            _action(
                "us-nist-genai-risk-management",
                "Address NIST GenAI risk profile areas",
                "Map and address the twelve GenAI risk areas in NIST AI 600-1 and document assessments and "
                "mitigations for each applicable area.",
                "important", "NIST AI 600-1", "4-8 weeks",
            ),
            _action(
                "us-ftc-genai-disclosure",
                "Implement AI-generated content disclosure",
                "Establish labelling, watermarking or provenance mechanisms for AI-generated content, especially "
                "synthetic media that could be mistaken for real content.",
                "important", "FTC Act Section 5, FTC GenAI Guidance", "2-4 weeks",
            ),
        ]
    if is_financial_services_ai(ctx):
        actions += when(ctx, FINANCIAL_ACTIONS)
    return actions


def _timeline(ctx: ProductContext, risk: RiskClassification) -> ComplianceTimeline:
    notes = [
        "US federal AI regulation is enforcement-driven. Obligations arise from existing statutes enforced by the "
        "FTC, CFPB, SEC and banking regulators.",
    ]
    if risk.level == RiskLevel.HIGH:
        notes.append("Financial services AI is subject to immediate supervisory expectations.")
    if is_genai_product(ctx):
        notes.append("NIST AI 600-1 (GenAI risk profile) was published in July 2024.")
    return ComplianceTimeline(
        effective_date=None,
        deadlines=[
            deadline(
                "2024-07-26",
                "NIST AI 600-1 (Generative AI Profile) published.",
                "NIST AI 600-1",
                mandatory=False,
            ),
        ],
        notes=notes,
    )


MODULE = RuleModule(
    id=JURISDICTION,
    name="US Federal AI Regulatory Framework",
    jurisdiction=JURISDICTION,
    classify=classify_risk,
    provisions=_provisions,
    artifacts=_artifacts,
    actions=_actions,
    schedule=_timeline,
)
