"""Singapore: PDPA, IMDA governance frameworks (GenAI and agentic), and MAS guidelines."""
from __future__ import annotations

from functools import partial

from jurisdictions.contract import RuleModule, Trigger, matching
from jurisdictions.shared import (
    action,
    artifact,
    can_generate_deepfakes,
    deadline,
    has_agentic_capabilities,
    is_financial_services_ai,
    is_fully_automated,
    is_genai_product,
    makes_material_decisions,
    provision,
    uses_foundation_model,
)
from models.actions import ActionRequirement
from models.context import ProductContext
from models.results import ApplicableProvision, ArtifactRequirement, ComplianceTimeline, RiskClassification
from models.shared import RegulatoryForce, RiskLevel

JURISDICTION = "singapore"
AGENTIC_FRAMEWORK = "IMDA Model AI Governance Framework for Agentic AI"
GENAI_FRAMEWORK = "IMDA GenAI Governance Framework"
MAS_GUIDELINES = "MAS Guidelines on AI Risk Management for FIs"

_action = partial(action, JURISDICTION)

PDPA_PERSONAL_DATA = frozenset(
    {"personal", "sensitive", "biometric", "health", "financial", "location", "behavioral", "minor"}
)


def _agent(ctx: ProductContext):
    return ctx.agentic_ai_context


def _financial(ctx: ProductContext):
    return ctx.sector_context.financial_services if ctx.sector_context else None


def _is_agentic(ctx: ProductContext) -> bool:
    agent = _agent(ctx)
    return agent is not None and agent.is_agentic


PDPC_TRIGGERS: tuple[Trigger, ...] = (
    Trigger(
        "sg-pdpc-personal-data", "Personal Data Processing (PDPA)", "Personal Data Protection Act (PDPA)",
        lambda c: any(d in PDPA_PERSONAL_DATA for d in c.data_processed),
    ),
    Trigger(
        "sg-pdpc-automated-decisions", "Automated Decision-Making (PDPA)", "PDPA / Model AI Governance Framework",
        lambda c: makes_material_decisions(c) and is_fully_automated(c),
    ),
)

IMDA_GENAI_TRIGGERS: tuple[Trigger, ...] = (
    Trigger("sg-imda-genai-foundation", "Foundation Model Usage (IMDA GenAI)", GENAI_FRAMEWORK, uses_foundation_model),
    Trigger(
        "sg-imda-genai-content", "AI Content Generation (IMDA GenAI)", GENAI_FRAMEWORK,
        lambda c: c.product_type == "generator"
        or (c.generative_ai_context is not None and c.generative_ai_context.generates_content),
    ),
    Trigger("sg-imda-genai-deepfake", "Synthetic Media Generation (IMDA GenAI)", GENAI_FRAMEWORK,
            can_generate_deepfakes),
)

IMDA_AGENTIC_TRIGGERS: tuple[Trigger, ...] = (
    Trigger("sg-imda-agentic-basic", "Agentic AI System (IMDA Agentic Framework)", AGENTIC_FRAMEWORK, _is_agentic),
    Trigger(
        "sg-imda-agentic-broad", "Broad Autonomy Agentic AI", AGENTIC_FRAMEWORK,
        lambda c: _agent(c) is not None and _agent(c).autonomy_level == "broad",
    ),
    Trigger(
        "sg-imda-agentic-financial", "Agentic AI with Financial Transactions", AGENTIC_FRAMEWORK,
        lambda c: _agent(c) is not None and _agent(c).can_make_financial_transactions,
    ),
    Trigger(
        "sg-imda-agentic-multi-agent", "Multi-Agent AI System", AGENTIC_FRAMEWORK,
        lambda c: _agent(c) is not None and _agent(c).is_multi_agent,
    ),
)

MAS_TRIGGERS: tuple[Trigger, ...] = (
    Trigger("sg-mas-financial-ai", "AI in Financial Services (MAS)", MAS_GUIDELINES, is_financial_services_ai),
    Trigger("sg-mas-credit-scoring", "AI Credit Scoring (MAS)", MAS_GUIDELINES,
            lambda c: _financial(c) is not None and _financial(c).involves_credit),
    Trigger("sg-mas-insurance", "AI Insurance Pricing (MAS)", MAS_GUIDELINES,
            lambda c: _financial(c) is not None and _financial(c).involves_insurance_pricing),
    Trigger("sg-mas-trading", "AI Trading (MAS)", MAS_GUIDELINES,
            lambda c: _financial(c) is not None and _financial(c).involves_trading),
    Trigger("sg-mas-aml-kyc", "AI AML/KYC (MAS)", MAS_GUIDELINES,
            lambda c: _financial(c) is not None and _financial(c).involves_aml_kyc),
    Trigger(
        "sg-mas-trm", "Technology Risk Management (MAS TRM)", "MAS Technology Risk Management Guidelines",
        lambda c: is_financial_services_ai(c)
        and ((c.generative_ai_context is not None and c.generative_ai_context.uses_foundation_model) or _is_agentic(c)),
    ),
)


def _ids(triggers: list[Trigger]) -> list[str]:
    return [t.id for t in triggers]


def _names(triggers: list[Trigger]) -> str:
    return "; ".join(t.description for t in triggers)


def classify_risk(ctx: ProductContext) -> RiskClassification:
    mas = matching(ctx, MAS_TRIGGERS)
    agentic = matching(ctx, IMDA_AGENTIC_TRIGGERS)
    genai = matching(ctx, IMDA_GENAI_TRIGGERS)
    pdpc = matching(ctx, PDPC_TRIGGERS)
    categories = _ids(mas) + _ids(agentic) + _ids(genai) + _ids(pdpc)

    if mas:
        return RiskClassification(
            level=RiskLevel.HIGH,
            justification=(
                "This AI system operates in financial services in Singapore, triggering MAS Guidelines on AI Risk "
                f"Management for Financial Institutions: {_names(mas)}. Board/senior management oversight, "
                "materiality assessment, and full lifecycle controls are required."
            ),
            applicable_categories=categories,
            provisions=["MAS AI Risk Management Guidelines", "PDPA"],
        )
    if {"sg-imda-agentic-broad", "sg-imda-agentic-financial"} & set(_ids(agentic)):
        return RiskClassification(
            level=RiskLevel.HIGH,
            justification=(
                "This agentic AI system has broad autonomy or can make financial transactions, triggering "
                "heightened requirements under the IMDA Model AI Governance Framework for Agentic AI across risk "
                "bounding, human accountability, technical controls and end-user responsibility."
            ),
            applicable_categories=categories,
            provisions=["IMDA Agentic AI Framework", "PDPA"],
        )
    if ctx.product_type == "foundation-model":
        return RiskClassification(
            level=RiskLevel.HIGH,
            justification=(
                "This is a foundation model provider, triggering comprehensive IMDA GenAI governance requirements "
                "including testing and evaluation, incident reporting, content provenance and disclosure."
            ),
            applicable_categories=categories,
            provisions=["IMDA GenAI Governance Framework", "PDPA"],
        )
    if genai or agentic:
        provisions = []
        if genai:
            provisions.append("IMDA GenAI Governance Framework")
        if agentic:
            provisions.append("IMDA Agentic AI Framework")
        if pdpc:
            provisions.append("PDPA")
        return RiskClassification(
            level=RiskLevel.LIMITED,
            justification=(
                f"This AI system triggers Singapore governance frameworks: {_names(genai + agentic)}. "
                "Proportionate governance measures apply."
            ),
            applicable_categories=categories,
            provisions=provisions,
        )
    if pdpc:
        return RiskClassification(
            level=RiskLevel.LIMITED,
            justification=(
                "This AI system processes personal data in Singapore, triggering PDPA obligations and Model AI "
                "Governance Framework alignment."
            ),
            applicable_categories=_ids(pdpc),
            provisions=["PDPA", "Model AI Governance Framework"],
        )
    return RiskClassification(
        level=RiskLevel.MINIMAL,
        justification=(
            "This AI system does not trigger specific Singapore regulatory obligations. No personal data processing, "
            "financial services, GenAI, or agentic AI concerns identified."
        ),
        applicable_categories=[],
        provisions=[],
    )


PDPA_PROVISIONS = (
    provision(
        "sg-pdpa-consent", "PDPA", "Part IV (Consent)",
        "Consent for Personal Data Collection and Use",
        "Organisations obtain consent before collecting, using or disclosing personal data, subject to the deemed "
        "consent and legitimate interests exceptions.",
        "This AI system processes personal data of individuals in Singapore.",
        force=RegulatoryForce.BINDING_LAW,
    ),
    provision(
        "sg-pdpc-advisory-ai", "PDPC Advisory Guidelines on AI and Personal Data", "Advisory Guidelines (2024 Revision)",
        "PDPC Advisory Guidelines on Use of Personal Data in AI",
        "Guidance on consent, the business improvement and research exceptions, and transparency when personal "
        "data is used to develop or deploy AI.",
        "This AI system uses personal data in AI development or deployment.",
        force=RegulatoryForce.SUPERVISORY_GUIDANCE,
    ),
    provision(
        "sg-cbpr-asean-transfer", "PDPA / APEC CBPR / ASEAN Data Management Framework",
        "PDPA Transfer Provisions, APEC CBPR, ASEAN DMF",
        "ASEAN/APEC Cross-Border Data Transfer Frameworks",
        "Personal data transferred out of Singapore must receive comparable protection, for example through CBPR "
        "certification or ASEAN model contractual clauses.",
        "This AI system may transfer personal data across borders.",
        force=RegulatoryForce.BINDING_LAW,
    ),
)

GENAI_PROVISIONS = (
    provision(
        "sg-imda-genai-testing", GENAI_FRAMEWORK, "Testing and Evaluation",
        "GenAI Testing and Evaluation Requirements",
        "GenAI systems are tested for safety, robustness and bias before and after deployment.",
        "This GenAI system should be tested and evaluated per IMDA guidelines.",
        force=RegulatoryForce.VOLUNTARY_FRAMEWORK,
    ),
    provision(
        "sg-imda-genai-incident", GENAI_FRAMEWORK, "Incident Reporting",
        "GenAI Incident Reporting",
        "Organisations maintain processes to detect, report and remediate GenAI incidents.",
        "This GenAI system should have incident reporting mechanisms.",
        force=RegulatoryForce.VOLUNTARY_FRAMEWORK,
    ),
    provision(
        "sg-imda-genai-provenance", GENAI_FRAMEWORK, "Content Provenance",
        "AI Content Provenance and Disclosure",
        "AI-generated content carries provenance information such as watermarks or metadata.",
        "This GenAI system should implement content provenance per IMDA guidelines.",
        force=RegulatoryForce.VOLUNTARY_FRAMEWORK,
    ),
)

AGENTIC_PROVISIONS = (
    provision(
        "sg-imda-agentic-risk-bounding", "IMDA Agentic AI Framework", "Dimension 1: Assess and Bound Risks",
        "Agentic AI Risk Bounding",
        "Assess agent risks up front and bound them by limiting tools, permissions and action scope.",
        "This agentic AI system must bound its operational risks.",
        force=RegulatoryForce.VOLUNTARY_FRAMEWORK,
    ),
    provision(
        "sg-imda-agentic-human-accountability", "IMDA Agentic AI Framework", "Dimension 2: Human Accountability",
        "Agentic AI Human Accountability",
        "Humans remain accountable for agent actions through named owners and meaningful checkpoints.",
        "This agentic AI system requires clear human accountability.",
        force=RegulatoryForce.VOLUNTARY_FRAMEWORK,
    ),
    provision(
        "sg-imda-agentic-technical-controls", "IMDA Agentic AI Framework", "Dimension 3: Technical Controls",
        "Agentic AI Technical Controls",
        "Technical safeguards include sandboxing, rate limits, failsafes and action logging.",
        "This agentic AI system needs technical controls on agent behaviour.",
        force=RegulatoryForce.VOLUNTARY_FRAMEWORK,
    ),
    provision(
        "sg-imda-agentic-end-user", "IMDA Agentic AI Framework", "Dimension 4: End-User Responsibility",
        "Agentic AI End-User Responsibility",
        "End users are told what the agent can do and given controls to supervise and stop it.",
        "Users of this agentic AI system must be equipped to use it responsibly.",
        force=RegulatoryForce.VOLUNTARY_FRAMEWORK,
    ),
)

MAS_PROVISIONS = (
    provision(
        "sg-mas-governance", "MAS AI Risk Management Guidelines", "Governance and Oversight",
        "Board/Senior Management AI Oversight",
        "The board and senior management oversee AI risk with clear roles and an AI risk appetite.",
        "This financial AI system falls under MAS AI governance expectations.",
        force=RegulatoryForce.SUPERVISORY_GUIDANCE,
    ),
    provision(
        "sg-mas-materiality", "MAS AI Risk Management Guidelines", "Materiality Assessment",
        "AI Risk Materiality Assessment",
        "Each AI use case is assessed for materiality by impact, complexity and reliance, and controls scale with it.",
        "This AI use case must undergo a materiality assessment per MAS guidelines.",
        force=RegulatoryForce.SUPERVISORY_GUIDANCE,
    ),
    provision(
        "sg-mas-lifecycle", "MAS AI Risk Management Guidelines", "Lifecycle Controls",
        "AI Lifecycle Controls",
        "Controls cover data, development, validation, deployment, monitoring and change management.",
        "This financial AI system needs controls across its lifecycle.",
        force=RegulatoryForce.SUPERVISORY_GUIDANCE,
    ),
)


def _provisions(ctx: ProductContext, risk: RiskClassification) -> list[ApplicableProvision]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    provisions: list[ApplicableProvision] = []
    if matching(ctx, PDPC_TRIGGERS):
        provisions += PDPA_PROVISIONS
    if matching(ctx, IMDA_GENAI_TRIGGERS):
        provisions += GENAI_PROVISIONS
        gen = ctx.generative_ai_context
        public = "consumers" in ctx.user_populations or "general-public" in ctx.user_populations
        if gen is not None and "text" in gen.output_modalities and public:
            provisions.append(
                provision(
                    "sg-dnc-registry", "Do Not Call Registry (PDPA Part IX)", "PDPA Part IX",
                    "DNC Registry for AI-Generated Communications",
                    "Marketing messages to Singapore numbers, including AI-generated ones, must be checked against "
                    "the Do Not Call registry.",
                    "This GenAI system generates text for consumers and may send marketing messages.",
                    force=RegulatoryForce.BINDING_LAW,
                )
            )
    if matching(ctx, IMDA_AGENTIC_TRIGGERS):
        provisions += AGENTIC_PROVISIONS
    mas = _ids(matching(ctx, MAS_TRIGGERS))
    if mas:
        provisions += MAS_PROVISIONS
        if "sg-mas-credit-scoring" in mas:
            provisions.append(
                provision(
                    "sg-mas-credit-fairness", "MAS AI Risk Management Guidelines", "Fairness in Credit Decisions",
                    "Fair AI Credit Scoring",
                    "AI credit scoring is tested for unjustified bias and its outcomes are explainable to customers.",
                    "This AI system is used for credit scoring.",
                    force=RegulatoryForce.SUPERVISORY_GUIDANCE,
                )
            )
    return provisions


def _artifacts(ctx: ProductContext, risk: RiskClassification) -> list[ArtifactRequirement]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    artifacts: list[ArtifactRequirement] = []
    if "sg-pdpc-automated-decisions" in _ids(matching(ctx, PDPC_TRIGGERS)):
        artifacts.append(
            artifact(
                "dpia",
                "PDPA Data Protection Impact Assessment",
                "PDPA Part IV / PDPC AI Governance Framework",
                "Impact assessment of automated decisions on individuals, with mitigations.",
                template_id="dpia-pdpa",
            )
        )
    if is_genai_product(ctx):
        artifacts.append(
            artifact(
                "risk-assessment",
                "IMDA GenAI Governance Assessment",
                GENAI_FRAMEWORK,
                "Assessment against the IMDA GenAI framework dimensions.",
                required=False,
            )
        )
    if _is_agentic(ctx):
        artifacts.append(
            artifact(
                "risk-assessment",
                "IMDA Agentic AI Governance Assessment",
                AGENTIC_FRAMEWORK,
                "Assessment against the four agentic dimensions with the controls in place for each.",
            )
        )
    mas = _ids(matching(ctx, MAS_TRIGGERS))
    if mas:
        artifacts += [
            artifact(
                "risk-assessment",
                "MAS AI Risk Materiality Assessment",
                "MAS AI Risk Management Guidelines",
                "Materiality rating of the AI use case by impact, complexity and reliance.",
            ),
            artifact(
                "model-card",
                "MAS AI Model Documentation",
                "MAS AI Risk Management Guidelines - Documentation",
                "Model purpose, data, validation results, limitations and monitoring plan.",
                template_id="model-card",
            ),
        ]
        if "sg-mas-credit-scoring" in mas:
            artifacts.append(
                artifact(
                    "bias-audit",
                    "MAS AI Fairness Assessment - Credit Scoring",
                    "MAS AI Risk Management Guidelines - Fairness",
                    "Fairness testing of the credit scoring model across customer segments.",
                )
            )
    return artifacts


def _actions(ctx: ProductContext, risk: RiskClassification) -> list[ActionRequirement]:
    if risk.level == RiskLevel.MINIMAL:
        return []
    actions: list[ActionRequirement] = []
    if matching(ctx, PDPC_TRIGGERS):
        actions += [
            _action(
                "sg-pdpa-consent-part-iii",
                "Implement PDPA Part III consent obligations",
                "Obtain and record consent, apply deemed consent by notification where suitable, and support "
                "withdrawal of consent.",
                "critical", "PDPA Part III (Sections 13-17), 2020 Amendments (Sections 15A, 17A)", "2-4 weeks",
            ),
            _action(
                "sg-pdpa-access-correction-part-iv",
                "Implement PDPA Part IV access and correction obligations",
                "Answer access and correction requests, including how personal data was used by the AI system.",
                "important", "PDPA Part IV (Sections 21-22)", "2-4 weeks",
            ),
            _action(
                "sg-pdpa-care-part-v",
                "Implement PDPA Part V care of personal data obligations",
                "Keep personal data accurate, protected and retained only as long as needed.",
                "important", "PDPA Part V (Sections 24-26)", "2-4 weeks",
            ),
            _action(
                "sg-pdpa-breach-notification-part-via",
                "Implement PDPA Part VIA data breach notification procedures",
                "Assess breaches within 30 days and notify the PDPC within 3 days of a notifiable breach.",
                "critical", "PDPA Part VIA (Sections 26A-26E)", "1-2 weeks",
            ),
            _action(
                "sg-cross-border-cbpr",
                "Evaluate ASEAN/APEC cross-border data transfer mechanisms",
                "Choose a transfer mechanism such as APEC CBPR certification or ASEAN model clauses.",
                "recommended", "PDPA Transfer provisions, APEC CBPR, ASEAN DMF", "2-4 weeks",
            ),
        ]
    if is_genai_product(ctx):
        actions += [
            _action(
                "sg-imda-genai-testing",
                "Conduct GenAI testing and evaluation",
                "Red-team and benchmark the GenAI system for safety, robustness and bias.",
                "important", GENAI_FRAMEWORK, "4-8 weeks",
            ),
            _action(
                "sg-imda-genai-incident-reporting",
                "Establish GenAI incident reporting mechanism",
                "Set up detection, escalation and reporting for GenAI incidents.",
                "important", GENAI_FRAMEWORK, "2-4 weeks",
            ),
            _action(
                "sg-imda-genai-provenance",
                "Implement AI content provenance mechanisms",
                "Attach watermarks or provenance metadata to generated content.",
                "important", GENAI_FRAMEWORK, "3-6 weeks",
            ),
            _action(
                "sg-imda-ai-verify",
                "Consider AI Verify toolkit for testing and evaluation",
                "Run the AI Verify toolkit to produce a standardised testing report.",
                "recommended", "IMDA AI Verify / Model AI Governance Framework", "2-4 weeks",
            ),
        ]
    if _is_agentic(ctx):
        actions += [
            _action(
                "sg-imda-agentic-risk-bound",
                "Assess and bound agentic AI risks (IMDA Dimension 1)",
                "Limit agent tools, permissions and action scope to what the use case needs.",
                "critical", "IMDA Agentic AI Framework - Dimension 1", "3-6 weeks",
            ),
            _action(
                "sg-imda-agentic-human-accountability",
                "Establish human accountability mechanisms (IMDA Dimension 2)",
                "Name accountable owners and add human checkpoints for significant agent actions.",
                "critical", "IMDA Agentic AI Framework - Dimension 2", "3-6 weeks",
            ),
            _action(
                "sg-imda-agentic-technical-controls",
                "Implement agentic AI technical controls (IMDA Dimension 3)",
                "Add sandboxing, failsafes, rate limits and action logging for the agent.",
                "critical", "IMDA Agentic AI Framework - Dimension 3", "4-8 weeks",
            ),
            _action(
                "sg-imda-agentic-end-user",
                "Enable end-user responsibility (IMDA Dimension 4)",
                "Tell users what the agent can do and give them controls to supervise and stop it.",
                "important", "IMDA Agentic AI Framework - Dimension 4", "2-4 weeks",
            ),
        ]
        if _agent(ctx) is not None and _agent(ctx).autonomy_level == "broad":
            actions.append(
                _action(
                    "sg-imda-agentic-graduated-deployment",
                    "Implement graduated deployment strategy for agentic AI",
                    "Roll out autonomy in stages, widening scope only after each stage is validated.",
                    "important", "IMDA Agentic AI Framework - Dimension 3", "4-8 weeks",
                )
            )
    mas = _ids(matching(ctx, MAS_TRIGGERS))
    if mas:
        actions += [
            _action(
                "sg-mas-governance-structure",
                "Establish board/senior management AI governance",
                "Define board oversight, senior management roles and an AI risk appetite statement.",
                "critical", "MAS AI Risk Management Guidelines - Governance", "4-8 weeks",
            ),
            _action(
                "sg-mas-materiality-assessment",
                "Conduct AI risk materiality assessment",
                "Rate the use case by impact, complexity and reliance and record the rating.",
                "critical", "MAS AI Risk Management Guidelines - Materiality", "2-4 weeks",
            ),
            _action(
                "sg-mas-lifecycle-controls",
                "Implement AI lifecycle controls per MAS guidelines",
                "Apply data, validation, deployment, monitoring and change controls proportionate to materiality.",
                "critical", "MAS AI Risk Management Guidelines - Lifecycle", "8-16 weeks",
            ),
        ]
        if "sg-mas-credit-scoring" in mas:
            actions.append(
                _action(
                    "sg-mas-credit-fairness-testing",
                    "Conduct fairness testing for AI credit scoring",
                    "Test credit scores for unjustified differences across customer segments.",
                    "critical", "MAS AI Risk Management Guidelines - Fairness", "4-8 weeks",
                )
            )
        gen = ctx.generative_ai_context
        if gen is not None and gen.foundation_model_source in ("third-party-api", "fine-tuned"):
            actions.append(
                _action(
                    "sg-mas-third-party-ai",
                    "Implement third-party AI management controls",
                    "Apply due diligence, contractual controls and exit planning to third-party AI providers.",
                    "important", "MAS AI Risk Management Guidelines - Third-Party AI", "3-6 weeks",
                )
            )
        if "sg-mas-trm" in mas:
            actions.append(
                _action(
                    "sg-mas-trm-compliance",
                    "Comply with MAS Technology Risk Management Guidelines for AI",
                    "Bring the AI system under the firm's TRM controls for resilience, access and change management.",
                    "important", "MAS TRM Guidelines", "4-8 weeks",
                )
            )
    return actions


def _timeline(ctx: ProductContext, risk: RiskClassification) -> ComplianceTimeline:
    notes = [
        "Singapore's AI governance approach is framework-based and proportionate. The PDPA provides the legal "
        "foundation, while IMDA and MAS frameworks provide detailed governance guidance.",
    ]
    if _is_agentic(ctx) or has_agentic_capabilities(ctx):
        notes.append(
            "The IMDA agentic AI framework extends the existing Model AI Governance Framework with four agentic "
            "dimensions."
        )
    if is_financial_services_ai(ctx):
        notes.append(
            "MAS AI risk management guidelines are expected to become enforceable around 2026-2027. Early adoption "
            "is strongly recommended."
        )
    if is_genai_product(ctx):
        notes.append("IMDA GenAI guidelines are a living framework. Monitor IMDA announcements for updates.")
    return ComplianceTimeline(
        effective_date="2014-07-02",
        deadlines=[
            deadline("2014-07-02", "PDPA entered into full force. All personal data obligations apply.", "PDPA"),
            deadline("2024-02-01", "PDPA amendments and revised advisory guidelines apply.", "PDPA (Amended 2024)"),
            deadline("2020-02-01", "Model AI Governance Framework second edition.", "Model AI Governance Framework",
                     mandatory=False),
            deadline("2024-09-01", "IMDA GenAI governance framework published.", GENAI_FRAMEWORK, mandatory=False),
            deadline("2026-01-15", "IMDA agentic AI framework published.", "IMDA Agentic AI Framework",
                     mandatory=False),
            deadline("2026-06-30", "Expected MAS AI risk management guidelines implementation.",
                     "MAS AI Risk Management Guidelines"),
        ],
        notes=notes,
    )


MODULE = RuleModule(
    id=JURISDICTION,
    name="Singapore AI Governance Frameworks (PDPC, IMDA, MAS)",
    jurisdiction=JURISDICTION,
    classify=classify_risk,
    provisions=_provisions,
    artifacts=_artifacts,
    actions=_actions,
    schedule=_timeline,
)
