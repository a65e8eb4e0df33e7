"""Action catalog: authoritative per-action metadata keyed by action id.

Jurisdiction modules decide *whether* an action applies; the catalog says
what done looks like. Entries carry the verification criteria, default
effort and ordering dependencies that the merge step attaches to each
ActionItem.

Usage:
    from actions.library import get_action_by_id

    entry = get_action_by_id("gdpr-conduct-dpia")
    if entry is not None:
        criteria = entry.verification_criteria
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from models.shared import ActionPriority


class ActionCategory(str, Enum):
    DATA_GOVERNANCE = "data-governance"
    TRANSPARENCY = "transparency"
    HUMAN_OVERSIGHT = "human-oversight"
    BIAS_TESTING = "bias-testing"
    CONSENT = "consent"
    MONITORING = "monitoring"
    DOCUMENTATION = "documentation"
    GENAI_CONTENT_SAFETY = "genai-content-safety"
    GENAI_LABELING = "genai-labeling"
    GENAI_TRAINING_DATA = "genai-training-data"
    ALGORITHM_FILING = "algorithm-filing"
    RISK_MANAGEMENT = "risk-management"
    SECURITY = "security"
    REGISTRATION = "registration"
    FINANCIAL_COMPLIANCE = "financial-compliance"


class ActionLibraryEntry(BaseModel):
    """One catalog entry. Immutable once loaded."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str
    category: ActionCategory
    jurisdictions: tuple[str, ...]
    legal_basis: str
    default_priority: ActionPriority
    estimated_effort: str
    deadline: Optional[str] = None
    verification_criteria: tuple[str, ...] = Field(min_length=1)
    best_practice_ref: Optional[str] = None
    depends_on: tuple[str, ...] = ()


_C = ActionPriority.CRITICAL
_I = ActionPriority.IMPORTANT
_R = ActionPriority.RECOMMENDED


def _entry(
    id: str,
    title: str,
    description: str,
    category: ActionCategory,
    jurisdictions: tuple[str, ...],
    legal_basis: str,
    priority: ActionPriority,
    effort: str,
    criteria: tuple[str, ...],
    *,
    deadline: Optional[str] = None,
    ref: Optional[str] = None,
    depends_on: tuple[str, ...] = (),
) -> ActionLibraryEntry:
    return ActionLibraryEntry(
        id=id,
        title=title,
        description=description,
        category=category,
        jurisdictions=jurisdictions,
        legal_basis=legal_basis,
        default_priority=priority,
        estimated_effort=effort,
        deadline=deadline,
        verification_criteria=criteria,
        best_practice_ref=ref,
        depends_on=depends_on,
    )


# ---------------------------------------------------------------------------
# EU AI Act
# ---------------------------------------------------------------------------

_EU_AI_ACT = (
    _entry(
        "eu-ai-act-stop-prohibited",
        "Cease prohibited AI practice",
        "Remove or redesign the functionality that constitutes a prohibited practice before placing the "
        "system on the EU market.",
        ActionCategory.RISK_MANAGEMENT,
        ("eu-ai-act",),
        "EU AI Act Article 5",
        _C,
        "4-12 weeks",
        (
            "Prohibited functionality identified and removed or redesigned",
            "Legal review confirms the redesigned system falls outside Article 5",
            "Redesign decision documented with sign-off",
        ),
        deadline="2025-02-02",
    ),
    _entry(
        "eu-ai-act-risk-management",
        "Establish a risk management system",
        "Implement a continuous, iterative risk management process covering the full AI system lifecycle.",
        ActionCategory.RISK_MANAGEMENT,
        ("eu-ai-act",),
        "EU AI Act Article 9",
        _C,
        "6-12 weeks",
        (
            "Risk management process documented and approved",
            "Known and foreseeable risks identified and analysed",
            "Risk mitigation measures implemented and tested",
            "Residual risk evaluation completed",
            "Review cadence established for ongoing risk assessment",
        ),
        ref="risk-management",
    ),
    _entry(
        "eu-ai-act-data-governance",
        "Implement data governance and quality measures",
        "Ensure training, validation and testing datasets are relevant, representative and examined for bias.",
        ActionCategory.DATA_GOVERNANCE,
        ("eu-ai-act",),
        "EU AI Act Article 10",
        _C,
        "4-12 weeks",
        (
            "Data quality metrics defined and documented",
            "Dataset documentation (datasheets or data cards) completed",
            "Bias examination of training data performed and recorded",
            "Data collection and labeling processes documented",
        ),
        ref="data-governance",
    ),
    _entry(
        "eu-ai-act-technical-docs",
        "Prepare Annex IV technical documentation",
        "Draw up technical documentation demonstrating compliance before the system is placed on the market.",
        ActionCategory.DOCUMENTATION,
        ("eu-ai-act",),
        "EU AI Act Article 11, Annex IV",
        _C,
        "4-8 weeks",
        (
            "All Annex IV sections completed",
            "System architecture and design choices described",
            "Performance metrics and known limitations documented",
            "Documentation kept up to date with a change log",
        ),
        depends_on=("eu-ai-act-risk-management", "eu-ai-act-data-governance"),
    ),
    _entry(
        "eu-ai-act-logging",
        "Implement automatic event logging",
        "Enable automatic recording of events over the lifetime of the system to support traceability.",
        ActionCategory.MONITORING,
        ("eu-ai-act",),
        "EU AI Act Article 12",
        _I,
        "2-4 weeks",
        (
            "Logging captures period of use, reference data and input data",
            "Logs retained for at least six months",
            "Log access controls documented",
        ),
    ),
    _entry(
        "eu-ai-act-human-oversight",
        "Design human oversight measures",
        "Build the system so that natural persons can effectively oversee it, interpret output and intervene.",
        ActionCategory.HUMAN_OVERSIGHT,
        ("eu-ai-act",),
        "EU AI Act Article 14",
        _C,
        "3-6 weeks",
        (
            "Oversight roles assigned and trained",
            "Override and stop mechanisms implemented and tested",
            "Automation bias guidance provided to overseers",
        ),
        ref="human-oversight",
    ),
    _entry(
        "eu-ai-act-accuracy-robustness",
        "Validate accuracy, robustness and cybersecurity",
        "Achieve and declare appropriate levels of accuracy, robustness and cybersecurity.",
        ActionCategory.SECURITY,
        ("eu-ai-act",),
        "EU AI Act Article 15",
        _I,
        "4-8 weeks",
        (
            "Accuracy metrics declared in instructions for use",
            "Robustness testing against errors and inconsistencies completed",
            "Adversarial and data poisoning threats assessed",
        ),
    ),
    _entry(
        "eu-ai-act-quality-management",
        "Implement a quality management system",
        "Put in place a documented quality management system covering design, testing and post-market processes.",
        ActionCategory.DOCUMENTATION,
        ("eu-ai-act",),
        "EU AI Act Article 17",
        _C,
        "6-12 weeks",
        (
            "Quality management policies and procedures documented",
            "Accountability framework defined",
            "Design verification and validation procedures in place",
        ),
    ),
    _entry(
        "eu-ai-act-conformity-assessment",
        "Complete conformity assessment",
        "Carry out the applicable conformity assessment procedure and draw up the EU declaration of conformity.",
        ActionCategory.REGISTRATION,
        ("eu-ai-act",),
        "EU AI Act Article 43",
        _C,
        "8-16 weeks",
        (
            "Conformity assessment procedure selected and completed",
            "EU declaration of conformity signed",
            "CE marking affixed",
        ),
        depends_on=(
            "eu-ai-act-risk-management",
            "eu-ai-act-technical-docs",
            "eu-ai-act-quality-management",
        ),
    ),
    _entry(
        "eu-ai-act-eu-database-registration",
        "Register in the EU database",
        "Register the high-risk AI system in the EU database before placing it on the market.",
        ActionCategory.REGISTRATION,
        ("eu-ai-act",),
        "EU AI Act Article 49",
        _C,
        "1-2 weeks",
        (
            "Registration submitted with all Annex VIII information",
            "Registration number recorded",
        ),
        depends_on=("eu-ai-act-conformity-assessment",),
    ),
    _entry(
        "eu-ai-act-post-market-monitoring",
        "Establish post-market monitoring",
        "Collect and analyse performance data throughout the system lifetime and report serious incidents.",
        ActionCategory.MONITORING,
        ("eu-ai-act",),
        "EU AI Act Article 72",
        _I,
        "3-6 weeks",
        (
            "Post-market monitoring plan documented",
            "Performance drift metrics collected",
            "Serious incident reporting procedure defined",
        ),
        depends_on=("eu-ai-act-logging",),
    ),
    _entry(
        "eu-ai-act-transparency-disclosure",
        "Disclose AI interaction and label generated content",
        "Inform people that they are interacting with an AI system and mark synthetic content as AI-generated.",
        ActionCategory.TRANSPARENCY,
        ("eu-ai-act",),
        "EU AI Act Article 50",
        _I,
        "2-4 weeks",
        (
            "AI interaction disclosure shown before or at first interaction",
            "Generated content marked in a machine-readable format",
            "Deepfake content visibly disclosed",
        ),
        ref="transparency",
    ),
    _entry(
        "eu-ai-act-gpai-tech-docs",
        "Prepare GPAI model technical documentation",
        "Draw up and maintain technical documentation of the model, including training and testing process.",
        ActionCategory.DOCUMENTATION,
        ("eu-ai-act",),
        "EU AI Act Article 53(1)(a), Annex XI",
        _C,
        "4-8 weeks",
        (
            "Annex XI documentation completed",
            "Training compute and energy consumption recorded",
            "Documentation available to the AI Office on request",
        ),
    ),
    _entry(
        "eu-ai-act-gpai-downstream-docs",
        "Provide documentation to downstream providers",
        "Make information available that lets downstream providers understand capabilities and limitations.",
        ActionCategory.DOCUMENTATION,
        ("eu-ai-act",),
        "EU AI Act Article 53(1)(b), Annex XII",
        _I,
        "2-4 weeks",
        (
            "Annex XII information package published to integrators",
            "Acceptable use policy provided",
        ),
        depends_on=("eu-ai-act-gpai-tech-docs",),
    ),
    _entry(
        "eu-ai-act-gpai-copyright",
        "Put in place a copyright compliance policy",
        "Adopt a policy to comply with EU copyright law, including honouring text and data mining opt-outs.",
        ActionCategory.GENAI_TRAINING_DATA,
        ("eu-ai-act",),
        "EU AI Act Article 53(1)(c)",
        _C,
        "2-4 weeks",
        (
            "Copyright policy documented and approved",
            "Machine-readable opt-out reservations honoured in crawling",
        ),
    ),
    _entry(
        "eu-ai-act-gpai-training-summary",
        "Publish a training content summary",
        "Publish a sufficiently detailed summary of the content used for training using the AI Office template.",
        ActionCategory.GENAI_TRAINING_DATA,
        ("eu-ai-act",),
        "EU AI Act Article 53(1)(d)",
        _C,
        "1-2 weeks",
        (
            "Summary prepared using the AI Office template",
            "Summary published and publicly accessible",
        ),
    ),
    _entry(
        "eu-ai-act-gpai-model-evaluation",
        "Perform state-of-the-art model evaluation",
        "Evaluate the model with standardised protocols, including adversarial testing.",
        ActionCategory.RISK_MANAGEMENT,
        ("eu-ai-act",),
        "EU AI Act Article 55(1)(a)",
        _C,
        "6-12 weeks",
        (
            "Evaluation protocol documented",
            "Adversarial testing results recorded",
        ),
    ),
    _entry(
        "eu-ai-act-gpai-systemic-risk-assessment",
        "Assess and mitigate systemic risks",
        "Assess and mitigate possible systemic risks at Union level arising from the model.",
        ActionCategory.RISK_MANAGEMENT,
        ("eu-ai-act",),
        "EU AI Act Article 55(1)(b)",
        _C,
        "6-12 weeks",
        (
            "Systemic risk assessment completed",
            "Mitigation measures documented and implemented",
        ),
        depends_on=("eu-ai-act-gpai-model-evaluation",),
    ),
    _entry(
        "eu-ai-act-gpai-incident-reporting",
        "Track and report serious incidents",
        "Track, document and report serious incidents and corrective measures to the AI Office.",
        ActionCategory.MONITORING,
        ("eu-ai-act",),
        "EU AI Act Article 55(1)(c)",
        _C,
        "2-4 weeks",
        (
            "Incident tracking process in place",
            "Reporting channel to the AI Office established",
        ),
        depends_on=("eu-ai-act-gpai-systemic-risk-assessment",),
    ),
    _entry(
        "eu-ai-act-gpai-cybersecurity",
        "Ensure model cybersecurity protection",
        "Ensure an adequate level of cybersecurity protection for the model and its physical infrastructure.",
        ActionCategory.SECURITY,
        ("eu-ai-act",),
        "EU AI Act Article 55(1)(d)",
        _C,
        "4-8 weeks",
        (
            "Model weight access controls documented",
            "Infrastructure security review completed",
        ),
    ),
    _entry(
        "eu-ai-act-gpai-deployer-verify",
        "Verify upstream GPAI provider compliance",
        "Obtain and review the model provider's documentation before building on the model.",
        ActionCategory.DOCUMENTATION,
        ("eu-ai-act",),
        "EU AI Act Article 53(1)(b)",
        _I,
        "1-2 weeks",
        (
            "Provider documentation obtained and reviewed",
            "Model limitations reflected in the product's own documentation",
        ),
    ),
)


# ---------------------------------------------------------------------------
# GDPR and UK data protection
# ---------------------------------------------------------------------------

_DATA_PROTECTION = (
    _entry(
        "gdpr-legal-basis-assessment",
        "Determine and document legal basis for data processing",
        "Identify and document the legal basis for each processing purpose.",
        ActionCategory.DATA_GOVERNANCE,
        ("eu-gdpr",),
        "GDPR Articles 6-7",
        _C,
        "1-2 weeks",
        (
            "Legal basis identified for each processing purpose",
            "Legitimate Interest Assessment completed where applicable",
            "Consent mechanisms implemented and tested",
            "Legal basis documented in records of processing activities",
        ),
    ),
    _entry(
        "gdpr-records-of-processing",
        "Maintain records of processing activities",
        "Keep a record of processing activities covering purposes, categories, recipients and retention.",
        ActionCategory.DOCUMENTATION,
        ("eu-gdpr",),
        "GDPR Article 30",
        _I,
        "1-2 weeks",
        (
            "Records of processing activities completed",
            "Retention periods recorded per data category",
        ),
    ),
    _entry(
        "gdpr-conduct-dpia",
        "Conduct a Data Protection Impact Assessment",
        "Assess processing likely to result in a high risk to the rights and freedoms of individuals.",
        ActionCategory.RISK_MANAGEMENT,
        ("eu-gdpr",),
        "GDPR Article 35",
        _C,
        "3-6 weeks",
        (
            "DPIA completed covering necessity, proportionality and risks",
            "DPO consulted on the DPIA",
            "Mitigation measures documented",
            "Prior consultation with supervisory authority where residual risk remains high",
        ),
        ref="dpia",
        depends_on=("gdpr-records-of-processing",),
    ),
    _entry(
        "gdpr-privacy-notice",
        "Publish a privacy notice covering AI processing",
        "Provide transparent information on processing, including meaningful information about automated logic.",
        ActionCategory.TRANSPARENCY,
        ("eu-gdpr",),
        "GDPR Articles 13-14",
        _I,
        "1-2 weeks",
        (
            "Privacy notice updated with AI processing purposes",
            "Automated decision-making logic explained in plain language",
        ),
        depends_on=("gdpr-legal-basis-assessment",),
    ),
    _entry(
        "gdpr-data-subject-rights",
        "Implement data subject rights handling",
        "Operate processes to handle access, rectification, erasure, objection and portability requests.",
        ActionCategory.DATA_GOVERNANCE,
        ("eu-gdpr",),
        "GDPR Articles 15-21",
        _I,
        "2-4 weeks",
        (
            "Request intake channel available",
            "Requests answered within one month",
            "Erasure propagates to downstream stores",
        ),
    ),
    _entry(
        "gdpr-art22-safeguards",
        "Implement automated decision-making safeguards",
        "Provide human intervention, the right to contest and an explanation for solely automated decisions.",
        ActionCategory.HUMAN_OVERSIGHT,
        ("eu-gdpr",),
        "GDPR Article 22",
        _C,
        "3-6 weeks",
        (
            "Human review route available for contested decisions",
            "Decision explanation provided to data subjects",
            "Article 22(2) exception documented",
        ),
    ),
    _entry(
        "gdpr-security-measures",
        "Implement appropriate security measures",
        "Apply technical and organisational measures appropriate to the risk of the processing.",
        ActionCategory.SECURITY,
        ("eu-gdpr",),
        "GDPR Article 32",
        _I,
        "2-4 weeks",
        (
            "Encryption at rest and in transit verified",
            "Access controls reviewed",
            "Breach notification procedure tested",
        ),
    ),
    _entry(
        "uk-conduct-dpia",
        "Conduct a UK GDPR Data Protection Impact Assessment",
        "Complete a DPIA following ICO guidance for AI systems before processing begins.",
        ActionCategory.RISK_MANAGEMENT,
        ("uk",),
        "UK GDPR Article 35, ICO AI guidance",
        _C,
        "3-6 weeks",
        (
            "DPIA completed following the ICO template",
            "AI-specific risks such as bias and explainability assessed",
            "DPIA reviewed before processing begins",
        ),
        ref="dpia",
    ),
    _entry(
        "uk-automated-decision-safeguards",
        "Implement UK automated decision-making safeguards",
        "Inform individuals of significant automated decisions and allow them to request human reconsideration.",
        ActionCategory.HUMAN_OVERSIGHT,
        ("uk",),
        "UK GDPR Article 22, DPA 2018 Section 14",
        _C,
        "3-6 weeks",
        (
            "Notification sent for significant automated decisions",
            "Reconsideration requests handled within one month",
        ),
    ),
)


# ---------------------------------------------------------------------------
# United States
# ---------------------------------------------------------------------------

_US = (
    _entry(
        "us-sr-11-7-governance",
        "Establish model risk governance",
        "Set up board-approved model risk management governance covering inventory, policies and roles.",
        ActionCategory.FINANCIAL_COMPLIANCE,
        ("us-federal",),
        "SR 11-7 Section V",
        _C,
        "6-12 weeks",
        (
            "Model inventory maintained",
            "Model risk policy approved by the board",
            "Roles for development, validation and use separated",
        ),
    ),
    _entry(
        "us-sr-11-7-validation",
        "Perform independent model validation",
        "Validate conceptual soundness, ongoing monitoring and outcomes analysis independently of development.",
        ActionCategory.FINANCIAL_COMPLIANCE,
        ("us-federal",),
        "SR 11-7 Section VI",
        _C,
        "6-12 weeks",
        (
            "Independent validation report completed",
            "Outcomes analysis and back-testing performed",
        ),
        depends_on=("us-sr-11-7-governance",),
    ),
    _entry(
        "us-sr-11-7-monitoring",
        "Implement ongoing model monitoring",
        "Monitor model performance and track overrides and drift after deployment.",
        ActionCategory.MONITORING,
        ("us-federal",),
        "SR 11-7 Section VI",
        _I,
        "3-6 weeks",
        (
            "Performance thresholds and alerts defined",
            "Override rates tracked and reviewed",
        ),
        depends_on=("us-sr-11-7-validation",),
    ),
    _entry(
        "us-cfpb-adverse-action",
        "Provide specific adverse action reasons",
        "Give applicants accurate and specific principal reasons for adverse credit decisions made with AI.",
        ActionCategory.TRANSPARENCY,
        ("us-federal",),
        "ECOA, Regulation B, CFPB Circular 2022-03",
        _C,
        "3-6 weeks",
        (
            "Adverse action notices list specific principal reasons",
            "Reason codes traced to model features",
        ),
    ),
    _entry(
        "us-cfpb-fair-lending-testing",
        "Conduct fair lending testing",
        "Test credit models for disparate impact and search for less discriminatory alternatives.",
        ActionCategory.BIAS_TESTING,
        ("us-federal",),
        "ECOA, Regulation B",
        _C,
        "4-8 weeks",
        (
            "Disparate impact analysis completed across protected classes",
            "Less discriminatory alternative search documented",
        ),
    ),
    _entry(
        "us-nist-rmf-alignment",
        "Align with the NIST AI Risk Management Framework",
        "Map AI risks and controls to the Govern, Map, Measure and Manage functions.",
        ActionCategory.RISK_MANAGEMENT,
        ("us-federal",),
        "NIST AI RMF 1.0",
        _R,
        "4-8 weeks",
        (
            "Govern, Map, Measure and Manage functions mapped to controls",
            "Gaps recorded with owners",
        ),
    ),
    _entry(
        "us-ny-ll144-engage-auditor",
        "Engage an independent bias auditor",
        "Retain an independent auditor with no financial interest in the tool.",
        ActionCategory.BIAS_TESTING,
        ("us-ny",),
        "NYC Local Law 144, 6 RCNY Section 5-300",
        _C,
        "1-2 weeks",
        ("Independent auditor engaged with independence confirmed in writing",),
    ),
    _entry(
        "us-ny-ll144-conduct-audit",
        "Conduct the annual bias audit",
        "Calculate selection rates and impact ratios by sex, race and ethnicity and intersectional categories.",
        ActionCategory.BIAS_TESTING,
        ("us-ny",),
        "NYC Local Law 144, 6 RCNY Section 5-301",
        _C,
        "4-8 weeks",
        (
            "Selection rates and impact ratios calculated for all required categories",
            "Audit completed within one year before use",
        ),
        depends_on=("us-ny-ll144-engage-auditor",),
    ),
    _entry(
        "us-ny-ll144-publish-results",
        "Publish bias audit results",
        "Publish a summary of the most recent bias audit and the tool distribution date on the careers site.",
        ActionCategory.TRANSPARENCY,
        ("us-ny",),
        "NYC Local Law 144, 6 RCNY Section 5-302",
        _C,
        "1-2 weeks",
        ("Audit summary publicly posted with the distribution date",),
        depends_on=("us-ny-ll144-conduct-audit",),
    ),
    _entry(
        "co-risk-management-policy",
        "Adopt a risk management policy and program",
        "Implement a risk management program for high-risk AI systems aligned to a recognised framework.",
        ActionCategory.RISK_MANAGEMENT,
        ("us-co",),
        "Colorado SB 24-205 Section 6-1-1703(2)",
        _C,
        "4-8 weeks",
        (
            "Risk management policy adopted",
            "Program aligned with NIST AI RMF or ISO/IEC 42001",
        ),
    ),
    _entry(
        "co-impact-assessment",
        "Complete a Colorado impact assessment",
        "Complete an impact assessment annually and within 90 days of any intentional substantial modification.",
        ActionCategory.RISK_MANAGEMENT,
        ("us-co",),
        "Colorado SB 24-205 Section 6-1-1703(3)",
        _C,
        "3-6 weeks",
        (
            "Impact assessment completed and retained for three years",
            "Algorithmic discrimination risks analysed",
        ),
        depends_on=("co-risk-management-policy",),
    ),
    _entry(
        "us-il-bipa-consent-mechanism",
        "Obtain written release for biometric data",
        "Inform individuals in writing and obtain a written release before collecting biometric identifiers.",
        ActionCategory.CONSENT,
        ("us-il",),
        "740 ILCS 14/15(b)",
        _C,
        "2-4 weeks",
        (
            "Written notice states purpose and retention period",
            "Written release captured before collection",
        ),
    ),
)


# ---------------------------------------------------------------------------
# UK, Singapore, China, Brazil
# ---------------------------------------------------------------------------

_INTERNATIONAL = (
    _entry(
        "uk-fca-consumer-duty-ai",
        "Evidence Consumer Duty outcomes for AI",
        "Show that AI-driven processes deliver good outcomes for retail customers, including vulnerable ones.",
        ActionCategory.FINANCIAL_COMPLIANCE,
        ("uk",),
        "FCA PRIN 2A (Consumer Duty)",
        _I,
        "4-8 weeks",
        (
            "Outcome testing covers vulnerable customers",
            "Board report on Consumer Duty outcomes includes AI use",
        ),
    ),
    _entry(
        "sg-mas-materiality-assessment",
        "Perform AI materiality assessment",
        "Assess the materiality of each AI use case to size the governance and controls applied.",
        ActionCategory.FINANCIAL_COMPLIANCE,
        ("singapore",),
        "MAS Guidelines on AI Risk Management",
        _C,
        "2-4 weeks",
        (
            "Materiality rating recorded per AI use case",
            "Rating rationale reviewed by risk function",
        ),
    ),
    _entry(
        "sg-mas-lifecycle-controls",
        "Apply AI lifecycle controls",
        "Apply data, development, validation and monitoring controls proportionate to materiality.",
        ActionCategory.FINANCIAL_COMPLIANCE,
        ("singapore",),
        "MAS Guidelines on AI Risk Management",
        _I,
        "6-12 weeks",
        (
            "Controls mapped to each lifecycle stage",
            "Independent validation for high-materiality models",
        ),
        depends_on=("sg-mas-materiality-assessment",),
    ),
    _entry(
        "sg-imda-ai-verify",
        "Test against the AI Verify framework",
        "Run the AI Verify toolkit against the system and publish the resulting report where appropriate.",
        ActionCategory.BIAS_TESTING,
        ("singapore",),
        "IMDA AI Verify Testing Framework",
        _R,
        "2-4 weeks",
        ("AI Verify report generated and reviewed",),
    ),
    _entry(
        "cn-cac-safety-assessment",
        "Complete the CAC security self-assessment",
        "Carry out the security assessment required before offering generative AI services to the public.",
        ActionCategory.ALGORITHM_FILING,
        ("china",),
        "Interim Measures for Generative AI Services Article 17",
        _C,
        "4-8 weeks",
        (
            "Security assessment report completed",
            "Assessment submitted with the filing package",
        ),
    ),
    _entry(
        "cn-algorithm-filing",
        "File the algorithm with the CAC",
        "Complete algorithm filing through the CAC Internet Information Service Algorithm Filing System.",
        ActionCategory.ALGORITHM_FILING,
        ("china",),
        "Provisions on Algorithmic Recommendation Article 24",
        _C,
        "8-16 weeks",
        (
            "Filing submitted with algorithm type, mechanism and self-assessment",
            "Filing number displayed in the service",
        ),
        depends_on=("cn-cac-safety-assessment",),
    ),
    _entry(
        "cn-cac-content-labeling",
        "Label AI-generated content",
        "Add explicit and implicit labels to generated content as required by the CAC labeling measures.",
        ActionCategory.GENAI_LABELING,
        ("china",),
        "Interim Measures for Generative AI Services Article 12",
        _C,
        "2-4 weeks",
        (
            "Visible labels applied to generated content",
            "Metadata labels embedded in generated files",
        ),
    ),
    _entry(
        "cn-cac-content-review-mechanism",
        "Operate a content review mechanism",
        "Filter and review generated content and handle illegal content promptly.",
        ActionCategory.GENAI_CONTENT_SAFETY,
        ("china",),
        "Interim Measures for Generative AI Services Articles 4 and 14",
        _C,
        "4-8 weeks",
        (
            "Output filtering deployed",
            "Illegal content handling process documented",
        ),
    ),
    _entry(
        "br-lgpd-ripd",
        "Prepare the LGPD data protection impact report",
        "Prepare a Relatorio de Impacto a Protecao de Dados Pessoais describing processing and safeguards.",
        ActionCategory.RISK_MANAGEMENT,
        ("brazil",),
        "LGPD Article 38",
        _I,
        "3-6 weeks",
        (
            "RIPD completed describing data types, collection and safeguards",
            "RIPD available to ANPD on request",
        ),
        ref="dpia",
    ),
    _entry(
        "br-lgpd-art20-review",
        "Provide review of automated decisions",
        "Allow data subjects to request review of decisions made solely on automated processing.",
        ActionCategory.HUMAN_OVERSIGHT,
        ("brazil",),
        "LGPD Article 20",
        _C,
        "3-6 weeks",
        (
            "Review request channel available",
            "Criteria and procedures of the decision disclosed on request",
        ),
    ),
)


ACTION_LIBRARY: tuple[ActionLibraryEntry, ...] = (
    *_EU_AI_ACT,
    *_DATA_PROTECTION,
    *_US,
    *_INTERNATIONAL,
)

_BY_ID: dict[str, ActionLibraryEntry] = {entry.id: entry for entry in ACTION_LIBRARY}


def get_action_by_id(action_id: str) -> Optional[ActionLibraryEntry]:
    return _BY_ID.get(action_id)


def get_actions_by_category(category: ActionCategory | str) -> list[ActionLibraryEntry]:
    wanted = ActionCategory(category)
    return [entry for entry in ACTION_LIBRARY if entry.category == wanted]


def get_actions_by_jurisdiction(jurisdiction: str) -> list[ActionLibraryEntry]:
    return [entry for entry in ACTION_LIBRARY if jurisdiction in entry.jurisdictions]


def get_all_actions() -> tuple[ActionLibraryEntry, ...]:
    return ACTION_LIBRARY


def get_action_categories() -> list[ActionCategory]:
    """Categories present in the catalog, in first-appearance order."""
    return list(dict.fromkeys(entry.category for entry in ACTION_LIBRARY))
