"""New York: NYC Local Law 144 on automated employment decision tools."""
from __future__ import annotations

from functools import partial

from jurisdictions.contract import RiskTier, RuleModule, Trigger, classify_by_tiers, guarded, matching
from jurisdictions.shared import (
    action,
    artifact,
    can_generate_deepfakes,
    deadline,
    desc_has,
    is_financial_services_ai,
    is_genai_product,
    makes_material_decisions,
    provision,
)
from models.actions import ActionRequirement
from models.context import ProductContext
from models.results import ApplicableProvision, ArtifactRequirement, ComplianceTimeline, RiskClassification
from models.shared import RegulatoryForce, RiskLevel

JURISDICTION = "us-ny"
LL144 = "NYC Local Law 144"

_action = partial(action, JURISDICTION)


def _hiring(ctx: ProductContext) -> bool:
    return "job-applicants" in ctx.user_populations or desc_has(
        ctx, "hiring", "recruit", "resume screen", "candidate screen", "application screen"
    )


def _promotion(ctx: ProductContext) -> bool:
    return "employees" in ctx.user_populations and desc_has(
        ctx, "promot", "advancement", "performance evaluation"
    )


LL144_TRIGGERS: tuple[Trigger, ...] = guarded(
    (
        Trigger("ll144-aedt-hiring", "Automated Employment Decision Tool (Hiring)", LL144, _hiring),
        Trigger("ll144-aedt-promotion", "Automated Employment Decision Tool (Promotion)", LL144, _promotion),
    ),
    makes_material_decisions,
)


def is_aedt(ctx: ProductContext) -> bool:
    return bool(matching(ctx, LL144_TRIGGERS))


RISK_TIERS: tuple[RiskTier, ...] = (
    RiskTier(
        level=RiskLevel.HIGH,
        triggers=LL144_TRIGGERS,
        justification=(
            "This AI system qualifies as an Automated Employment Decision Tool under NYC Local Law 144, triggering "
            "a mandatory annual independent bias audit and candidate/employee notification. Applies to: {matched}."
        ),
        provisions=("NYC Local Law 144 (Int. 1894-2020)",),
    ),
    RiskTier(
        level=RiskLevel.LIMITED,
        triggers=(Trigger("ny-financial-ai", "Financial services AI", "NYDFS Cybersecurity Regulation (23 NYCRR 500)",
                          is_financial_services_ai),),
        justification=(
            "This AI system operates in financial services in New York. NYDFS applies cybersecurity and consumer "
            "protection requirements to AI systems at regulated financial institutions."
        ),
    ),
    RiskTier(
        level=RiskLevel.LIMITED,
        triggers=(
            Trigger(
                "ny-genai-deepfake",
                "AI-Generated Deepfake Content",
                "New York Deepfake Laws",
                lambda c: is_genai_product(c) and can_generate_deepfakes(c),
            ),
        ),
        justification=(
            "This AI system can generate synthetic media. New York has deepfake provisions addressing "
            "non-consensual intimate imagery and election interference."
        ),
    ),
    RiskTier(
        level=RiskLevel.LIMITED,
        triggers=(Trigger("ny-consumer-protection", "Consumer-facing AI", "NY General Business Law",
                          lambda c: "consumers" in c.user_populations),),
        justification=(
            "This AI system is consumer-facing in New York. General consumer protection laws apply, including the "
            "New York General Business Law."
        ),
    ),
)


def classify_risk(ctx: ProductContext) -> RiskClassification:
    return classify_by_tiers(
        ctx,
        RISK_TIERS,
        fallback_justification=(
            "This AI system does not trigger specific New York obligations. NYC LL144 does not apply and no other "
            "AI-specific triggers were identified."
        ),
    )


LL144_PROVISIONS = (
    provision(
        "us-ny-ll144-bias-audit", LL144, "Section 20-871(b)",
        "Annual Independent Bias Audit Requirement",
        "An AEDT may not be used unless an independent bias audit testing impact ratios across sex, race/ethnicity "
        "and intersectional categories was completed within the past year.",
        "This system is an AEDT subject to mandatory annual bias audit before use in NYC.",
        force=RegulatoryForce.BINDING_LAW,
    ),
    provision(
        "us-ny-ll144-notice", LL144, "Section 20-871(c)-(d)",
        "Candidate/Employee Notice Requirements",
        "Candidates and employees are notified at least 10 business days before AEDT use, including the "
        "characteristics assessed and how to request an alternative process.",
        "This system requires advance candidate/employee notification.",
        force=RegulatoryForce.BINDING_LAW,
    ),
    provision(
        "us-ny-ll144-summary-publication", LL144, "Section 20-871(b)(2)",
        "Bias Audit Summary Publication",
        "The most recent audit summary, with data sources, number assessed and impact ratios, is posted on the "
        "employer's website.",
        "This AEDT requires public posting of bias audit results.",
        force=RegulatoryForce.BINDING_LAW,
    ),
    provision(
        "us-ny-ll144-data-collection", LL144, "Section 20-871(c)",
        "AEDT Data Collection Transparency",
        "Employers disclose the data collected, its source, the retention policy, and how to request deletion.",
        "This AEDT must disclose data collection and retention practices.",
        force=RegulatoryForce.BINDING_LAW,
    ),
)


def _provisions(ctx: ProductContext, risk: RiskClassification) -> list[ApplicableProvision]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    provisions = list(LL144_PROVISIONS) if is_aedt(ctx) else []
    if is_financial_services_ai(ctx):
        provisions.append(
            provision(
                "us-ny-dfs-cybersecurity", "NYDFS", "23 NYCRR 500",
                "NYDFS Cybersecurity Requirements",
                "Regulated financial institutions maintain a cybersecurity program covering the information systems, "
                "including AI systems, that process nonpublic information.",
                "This AI system operates at a New York regulated financial institution.",
                force=RegulatoryForce.BINDING_REGULATION,
            )
        )
    if can_generate_deepfakes(ctx):
        provisions.append(
            provision(
                "us-ny-deepfake", "New York Deepfake Laws", "NY Penal Law / Civil Rights Law Amendments",
                "Synthetic Media and Deepfake Provisions",
                "Non-consensual intimate deepfakes and deceptive political deepfakes carry civil and criminal "
                "liability.",
                "This AI system can generate synthetic media.",
                force=RegulatoryForce.BINDING_LAW,
            )
        )
    return provisions


def _artifacts(ctx: ProductContext, risk: RiskClassification) -> list[ArtifactRequirement]:
    if risk.level == RiskLevel.MINIMAL or not is_aedt(ctx):
        return []
    return [
        artifact(
            "bias-audit",
            "NYC LL144 Independent Bias Audit",
            "NYC Local Law 144, Section 20-871(b)",
            "Annual independent audit of selection or scoring rates and impact ratios across sex, race/ethnicity and "
            "intersectional categories.",
            template_id="bias-audit-nyc",
        ),
        artifact(
            "transparency-notice",
            "NYC LL144 Candidate/Employee Notice",
            "NYC Local Law 144, Section 20-871(c)-(d)",
            "Notice given 10 business days before AEDT use, covering qualifications assessed, retention policy and "
            "alternative process instructions.",
            template_id="transparency-notice",
        ),
    ]


def _actions(ctx: ProductContext, risk: RiskClassification) -> list[ActionRequirement]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    actions: list[ActionRequirement] = []
    if is_aedt(ctx):
        actions += [
            _action(
                "us-ny-ll144-engage-auditor",
                "Engage independent auditor for LL144 bias audit",
                "Engage an auditor with no involvement in developing, using or distributing the AEDT.",
                "critical", "NYC Local Law 144, Section 20-871(b)", "4-8 weeks",
            ),
            _action(
                "us-ny-ll144-conduct-audit",
                "Complete annual bias audit",
                "Calculate selection rates and impact ratios for sex, race/ethnicity and intersectional categories. "
                "Record the number assessed and the audit date.",
                "critical", "NYC Local Law 144, Section 20-871(b)", "4-8 weeks",
            ),
            _action(
                "us-ny-ll144-publish-results",
                "Publish bias audit summary on employer website",
                "Post the latest audit summary with data sources, number assessed and impact ratios.",
                "critical", "NYC Local Law 144, Section 20-871(b)(2)", "1-2 weeks",
            ),
            _action(
                "us-ny-ll144-candidate-notice",
                "Implement 10-day advance candidate notification",
                "Notify candidates and employees at least 10 business days before AEDT use via the job posting, "
                "website, mail or email.",
                "critical", "NYC Local Law 144, Section 20-871(c)-(d)", "1-2 weeks",
            ),
            _action(
                "us-ny-ll144-data-deletion",
                "Implement AEDT data deletion process",
                "Let candidates and employees request deletion of AEDT data and respond within 30 days.",
                "important", "NYC Local Law 144, Section 20-871(c)", "1-2 weeks",
            ),
        ]
    if can_generate_deepfakes(ctx):
        actions.append(
            _action(
                "us-ny-deepfake-safeguards",
                "Implement deepfake safeguards for New York compliance",
                "Guard against non-consensual intimate and deceptive political deepfakes, label synthetic media, and "
                "obtain consent for likeness use.",
                "important", "New York Deepfake Laws", "2-4 weeks",
            )
        )
    return actions


def _timeline(ctx: ProductContext, risk: RiskClassification) -> ComplianceTimeline:
    notes: list[str] = []
    if any("ll144" in c for c in risk.applicable_categories):
        notes.append(
            "NYC Local Law 144 has been enforced since July 5, 2023. DCWP fines run from $500 to $1,500 per "
            "violation per day per AEDT."
        )
    return ComplianceTimeline(
        effective_date="2023-07-05",
        deadlines=[deadline("2023-07-05", "NYC Local Law 144 enforcement begins.", LL144)],
        notes=notes,
    )


MODULE = RuleModule(
    id=JURISDICTION,
    name="New York City Automated Employment Decision Tools Law (LL144)",
    jurisdiction=JURISDICTION,
    classify=classify_risk,
    provisions=_provisions,
    artifacts=_artifacts,
    actions=_actions,
    schedule=_timeline,
)
