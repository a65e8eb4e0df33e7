"""EU General Data Protection Regulation (Regulation (EU) 2016/679)."""
from __future__ import annotations

from functools import partial

from jurisdictions.contract import RiskTier, RuleModule, Trigger, classify_by_tiers, guarded, when
from jurisdictions.shared import action, artifact, deadline, desc_has, provision
from models.actions import ActionRequirement
from models.context import ProductContext
from models.results import ApplicableProvision, ArtifactRequirement, ComplianceTimeline, RiskClassification
from models.shared import RegulatoryForce, RiskLevel

JURISDICTION = "eu-gdpr"
LAW = "GDPR"

_action = partial(action, JURISDICTION)
_provision = partial(
    provision, law=LAW, url="https://eur-lex.europa.eu/eli/reg/2016/679/oj", force=RegulatoryForce.BINDING_LAW
)

# GDPR treats every category below as personal data, including behavioural
# and employment data that some other regimes leave out.
GDPR_PERSONAL_DATA = frozenset(
    {
        "personal", "sensitive", "biometric", "health", "financial", "location", "behavioral",
        "minor", "employment", "criminal", "political", "genetic",
    }
)
ARTICLE_9_DATA = frozenset({"sensitive", "biometric", "health", "genetic"})


def processes_personal_data(ctx: ProductContext) -> bool:
    return any(d in GDPR_PERSONAL_DATA for d in ctx.data_processed)


def _large_scale(ctx: ProductContext) -> bool:
    return desc_has(ctx, "large-scale", "large scale") or any(
        p in ctx.user_populations for p in ("general-public", "consumers")
    )


def is_automated_decision_making(ctx: ProductContext) -> bool:
    return ctx.automation_level == "fully-automated" and ctx.decision_impact in ("material", "determinative")


def involves_data_transfers(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    return desc_has(ctx, "cross-border", "data transfer", "third-party api") or (
        gen is not None and gen.foundation_model_source == "third-party-api"
    )


def has_genai_personal_data_concerns(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    if gen is None or not gen.uses_foundation_model:
        return False
    return ctx.training_data.contains_personal_data or any(
        c in gen.training_data_includes for c in ("personal-data", "public-web-scrape", "user-generated-content")
    )


def _article_9(ctx: ProductContext) -> bool:
    return any(d in ARTICLE_9_DATA for d in ctx.data_processed)


def _children(ctx: ProductContext) -> bool:
    return "minor" in ctx.data_processed or "minors" in ctx.user_populations


def requires_dpo(ctx: ProductContext) -> bool:
    return _large_scale(ctx) and any(
        d in ctx.data_processed for d in ("sensitive", "biometric", "health", "genetic", "criminal")
    )


def _trains_on_personal_data(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    personal = ctx.training_data.contains_personal_data or (
        gen is not None
        and ("personal-data" in gen.training_data_includes or "user-generated-content" in gen.training_data_includes)
    )
    return personal and ctx.training_data.uses_training_data


DPIA_TRIGGERS: tuple[Trigger, ...] = (
    Trigger(
        "dpia-systematic-evaluation",
        "Systematic and Extensive Evaluation of Personal Aspects (Profiling)",
        "Article 35(3)(a)",
        lambda c: desc_has(c, "profiling", "profile", "scoring", "evaluating personal")
        and c.automation_level in ("fully-automated", "human-on-the-loop")
        and c.decision_impact in ("material", "determinative"),
    ),
    Trigger(
        "dpia-large-scale-special-category",
        "Large-Scale Processing of Special Category Data",
        "Article 35(3)(b)",
        lambda c: any(d in c.data_processed for d in ("biometric", "health", "genetic", "political", "criminal"))
        and _large_scale(c),
    ),
    Trigger(
        "dpia-public-monitoring",
        "Systematic Monitoring of Publicly Accessible Area",
        "Article 35(3)(c)",
        lambda c: desc_has(c, "public space", "public area", "public monitoring", "cctv", "surveillance")
        and desc_has(c, "monitor", "track", "surveillance"),
    ),
    Trigger(
        "dpia-automated-decision-making",
        "Automated Decision-Making with Legal/Significant Effects",
        "Article 22 / Article 35",
        is_automated_decision_making,
    ),
    Trigger(
        "dpia-sensitive-data-processing",
        "Processing of Sensitive Personal Data",
        "Article 9, Article 35",
        _article_9,
    ),
    Trigger("dpia-minor-data", "Processing of Children's Data", "Article 8, Article 35", _children),
    Trigger(
        "dpia-training-data-personal",
        "GenAI: Personal Data Used in Model Training",
        "Article 35, Recital 91",
        _trains_on_personal_data,
    ),
)

GENERAL_PROCESSING = Trigger(
    "general-processing",
    "General processing of personal data",
    "Articles 5-6",
    processes_personal_data,
)

RISK_TIERS: tuple[RiskTier, ...] = (
    RiskTier(
        level=RiskLevel.HIGH,
        # DPIA triggers only count once personal data is in scope
        triggers=guarded(DPIA_TRIGGERS, processes_personal_data),
        justification=(
            "This AI system triggers a DPIA requirement under GDPR due to: {matched}. A Data Protection Impact "
            "Assessment must be conducted before processing begins."
        ),
    ),
    RiskTier(
        level=RiskLevel.LIMITED,
        triggers=(GENERAL_PROCESSING,),
        justification=(
            "This AI system processes personal data and must comply with the GDPR principles of lawfulness, "
            "fairness and transparency, purpose limitation, data minimisation, accuracy, storage limitation, "
            "integrity and accountability. No DPIA triggers were identified."
        ),
    ),
)


def classify_risk(ctx: ProductContext) -> RiskClassification:
    return classify_by_tiers(
        ctx,
        RISK_TIERS,
        fallback_justification=(
            "This AI system does not process personal data. GDPR obligations do not apply to non-personal "
            "data processing."
        ),
    )


CONDITIONAL_PROVISIONS: tuple[tuple, ...] = (
    (
        is_automated_decision_making,
        _provision(
            id="gdpr-art22",
            article="Article 22",
            title="Automated Individual Decision-Making, Including Profiling",
            summary=(
                "Data subjects have the right not to be subject to decisions based solely on automated processing "
                "that produce legal or similarly significant effects, unless based on explicit consent, contractual "
                "necessity, or Union or Member State law. Suitable safeguards including human intervention apply."
            ),
            relevance="This AI system makes fully automated decisions with material or determinative impact on individuals.",
        ),
    ),
    (
        involves_data_transfers,
        _provision(
            id="gdpr-art44-49-transfers",
            article="Articles 44-49",
            title="International Data Transfers",
            summary=(
                "Transfers of personal data to third countries require an adequacy decision, appropriate safeguards "
                "(SCCs, BCRs), or a derogation. Supplementary measures may be required."
            ),
            relevance="The AI system sends data to third-party services or processes it across borders.",
        ),
    ),
    (
        has_genai_personal_data_concerns,
        _provision(
            id="gdpr-genai-training-data",
            article="Articles 5-6, 9, 14",
            title="Legal Basis for AI Training Data Processing",
            summary=(
                "Processing personal data for AI model training requires a valid legal basis. Legitimate interest "
                "requires a balancing test, and web-scraped personal data triggers Article 14 transparency duties."
            ),
            relevance="This AI system uses a foundation model trained on data that may include personal data.",
        ),
    ),
    (
        has_genai_personal_data_concerns,
        _provision(
            id="gdpr-genai-erasure",
            article="Article 17",
            title="Right of Erasure and Trained Models",
            summary=(
                "Controllers must assess how erasure requests apply to personal data that may be encoded in "
                "trained model weights."
            ),
            relevance="This AI system uses models potentially trained on personal data.",
        ),
    ),
    (
        _article_9,
        _provision(
            id="gdpr-art9-special-category",
            article="Article 9",
            title="Processing of Special Categories of Data",
            summary=(
                "Processing of special categories of personal data is prohibited unless an Article 9(2) "
                "exception applies."
            ),
            relevance="This AI system processes special category data.",
        ),
    ),
    (
        _children,
        _provision(
            id="gdpr-art8-children",
            article="Article 8",
            title="Conditions Applicable to Child's Consent",
            summary=(
                "For information society services offered directly to a child, parental consent is required below "
                "the Member State age threshold (13-16)."
            ),
            relevance="This AI system processes data of minors.",
        ),
    ),
)


def _provisions(ctx: ProductContext, risk: RiskClassification) -> list[ApplicableProvision]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    provisions = [
        _provision(
            id="gdpr-art5-principles",
            article="Article 5",
            title="Principles of Processing",
            summary=(
                "Processing must be lawful, fair and transparent, limited to specified purposes and to what is "
                "necessary, accurate, kept no longer than necessary, and secure."
            ),
            relevance="Applies to all personal data processing in the AI system.",
        ),
        _provision(
            id="gdpr-art6-legal-basis",
            article="Articles 6-7",
            title="Legal Basis for Processing",
            summary=(
                "Processing must have a valid legal basis: consent, contract, legal obligation, vital interests, "
                "public interest, or legitimate interests."
            ),
            relevance="A valid legal basis must be identified for each processing purpose.",
        ),
        _provision(
            id="gdpr-art12-15-rights",
            article="Articles 12-23",
            title="Data Subject Rights",
            summary=(
                "Data subjects have rights to access, rectification, erasure, restriction, portability, and objection."
            ),
            relevance="The AI system must facilitate the exercise of data subject rights.",
        ),
    ]
    if risk.level == RiskLevel.HIGH:
        provisions.append(
            _provision(
                id="gdpr-art35-dpia",
                article="Articles 35-36",
                title="Data Protection Impact Assessment (DPIA)",
                summary=(
                    "A DPIA must be carried out before processing likely to result in a high risk to individuals. "
                    "Residual high risk requires prior consultation with the supervisory authority."
                ),
                relevance=risk.justification,
            )
        )
    return provisions + when(ctx, CONDITIONAL_PROVISIONS)


def _artifacts(ctx: ProductContext, risk: RiskClassification) -> list[ArtifactRequirement]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    artifacts: list[ArtifactRequirement] = []
    if risk.level == RiskLevel.HIGH:
        artifacts.append(
            artifact(
                "dpia",
                "GDPR Data Protection Impact Assessment",
                "Articles 35-36",
                "Describe processing operations, assess necessity and proportionality, assess risks, and identify "
                "mitigation measures before high-risk processing begins.",
                template_id="dpia-gdpr",
            )
        )
    artifacts.append(
        artifact(
            "transparency-notice",
            "GDPR Privacy Notice / Transparency Information",
            "Articles 13-14",
            "Privacy notice covering purposes, legal basis, retention, data subject rights, and meaningful "
            "information about any automated decision-making logic.",
            template_id="transparency-notice",
        )
    )
    if has_genai_personal_data_concerns(ctx):
        artifacts.append(
            artifact(
                "model-card",
                "Data Processing Record for AI Training",
                "Article 30",
                "Record of processing for model training: legal basis, personal data categories, retention policy, "
                "and measures for data subject rights.",
            )
        )
    return artifacts


CONDITIONAL_ACTIONS: tuple[tuple, ...] = (
    (
        is_automated_decision_making,
        _action(
            "gdpr-art22-safeguards",
            "Implement Article 22 automated decision-making safeguards",
            "Provide the right to obtain human intervention, to express a point of view, to contest the decision, "
            "and meaningful information about the logic involved. Document the legal basis relied on.",
            "critical", "Article 22", "2-4 weeks",
        ),
    ),
    (
        _article_9,
        _action(
            "gdpr-special-category-basis",
            "Establish legal basis for special category data processing",
            "Identify and document a valid Article 9(2) exception for processing special category data and "
            "implement safeguards appropriate to its sensitivity.",
            "critical", "Article 9", "1-2 weeks",
        ),
    ),
    (
        _children,
        _action(
            "gdpr-children-consent",
            "Implement age verification and parental consent",
            "Implement age verification and parental consent collection for children's data, with child-friendly "
            "privacy notices and the applicable Member State age threshold.",
            "critical", "Article 8", "2-4 weeks",
        ),
    ),
    (
        requires_dpo,
        _action(
            "gdpr-appoint-dpo",
            "Appoint a Data Protection Officer",
            "Appoint an independent DPO with expert knowledge of data protection law, as required for large-scale "
            "processing of special category data.",
            "important", "Articles 37-39", "2-4 weeks",
        ),
    ),
    (
        involves_data_transfers,
        _action(
            "gdpr-data-transfers",
            "Establish valid data transfer mechanisms",
            "Implement transfer mechanisms for international data transfers (adequacy, SCCs, BCRs, or derogations) "
            "and conduct a Transfer Impact Assessment.",
            "critical", "Articles 44-49", "2-4 weeks",
        ),
    ),
    (
        has_genai_personal_data_concerns,
        _action(
            "gdpr-genai-training-legal-basis",
            "Establish legal basis for AI training data processing",
            "Determine and document the legal basis for personal data used in model training, including a "
            "Legitimate Interest Assessment where relied on and Article 14 notices for web-scraped data.",
            "critical", "Articles 5-6, 14", "2-4 weeks",
        ),
    ),
    (
        has_genai_personal_data_concerns,
        _action(
            "gdpr-genai-erasure-policy",
            "Develop policy for right of erasure in trained models",
            "Document how erasure requests are handled for personal data that may be encoded in model weights: "
            "retraining, unlearning, or input/output filtering.",
            "important", "Article 17", "2-4 weeks",
        ),
    ),
)


def _actions(ctx: ProductContext, risk: RiskClassification) -> list[ActionRequirement]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    actions = [
        _action(
            "gdpr-legal-basis-assessment",
            "Determine and document legal basis for processing",
            "Identify and document the Article 6 legal basis for each processing purpose. Implement valid consent "
            "mechanisms or document a Legitimate Interest Assessment.",
            "critical", "Articles 6-7", "1-2 weeks",
        ),
        _action(
            "gdpr-data-subject-rights",
            "Implement data subject rights mechanisms",
            "Enable access, rectification, erasure, restriction, portability, and objection requests, including "
            "how they apply to automated processing and training data.",
            "critical", "Articles 12-23", "3-6 weeks",
        ),
        _action(
            "gdpr-privacy-notice",
            "Prepare and publish privacy notice",
            "Provide transparent information about purposes, legal basis, data categories, retention, rights, and "
            "the logic involved in automated decision-making.",
            "critical", "Articles 13-14", "1-2 weeks",
        ),
        _action(
            "gdpr-records-of-processing",
            "Maintain records of processing activities",
            "Maintain written records of processing purposes, data subject and data categories, recipients, "
            "transfers, retention periods, and security measures.",
            "important", "Article 30", "1-2 weeks",
        ),
    ]
    if risk.level == RiskLevel.HIGH:
        actions.append(
            _action(
                "gdpr-conduct-dpia",
                "Conduct Data Protection Impact Assessment",
                "Conduct a DPIA before processing begins. If residual risk is high, consult the supervisory "
                "authority under Article 36.",
                "critical", "Articles 35-36", "2-4 weeks",
            )
        )
    actions += when(ctx, CONDITIONAL_ACTIONS)
    actions.append(
        _action(
            "gdpr-security-measures",
            "Implement appropriate technical and organisational security measures",
            "Implement security appropriate to the risk, including pseudonymisation, encryption, resilience, and "
            "regular testing. For AI systems, cover model security and adversarial robustness.",
            "important", "Article 32", "2-6 weeks",
        )
    )
    return actions


def _timeline(ctx: ProductContext, risk: RiskClassification) -> ComplianceTimeline:
    notes = ["GDPR has applied since 25 May 2018. All obligations apply immediately to personal data processing."]
    if risk.level == RiskLevel.HIGH:
        notes += [
            "A DPIA must be completed before processing begins.",
            "High residual risk after the DPIA requires prior consultation with the supervisory authority (Article 36).",
        ]
    return ComplianceTimeline(
        effective_date="2018-05-25",
        deadlines=[deadline("2018-05-25", "GDPR entered into application.", "GDPR")],
        notes=notes,
    )


MODULE = RuleModule(
    id=JURISDICTION,
    name="EU General Data Protection Regulation (GDPR)",
    jurisdiction=JURISDICTION,
    classify=classify_risk,
    provisions=_provisions,
    artifacts=_artifacts,
    actions=_actions,
    schedule=_timeline,
)
