"""Cross-jurisdiction tension detection for multi-market assessments.

Flags areas where the requirements of two mapped jurisdictions pull in
different directions. It does not make legal determinations; each tension
carries a recommendation to take to counsel.
"""
from __future__ import annotations

from typing import Sequence

import structlog

from models.context import ProductContext
from models.report import ConflictTension
from models.results import JurisdictionResult
from models.shared import RiskLevel

logger = structlog.get_logger(__name__)

DATA_TRANSFER_REGIMES = ("eu-gdpr", "singapore", "china", "brazil")
FINANCIAL_REGIMES = ("eu-ai-act", "singapore", "us-federal", "uk")


def _has_eu(mapped: Sequence[str]) -> bool:
    return "eu-ai-act" in mapped or "eu-gdpr" in mapped


def _is_generator(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    return ctx.product_type in ("generator", "foundation-model") or (gen is not None and gen.generates_content)


def _is_gpai_or_foundation(ctx: ProductContext) -> bool:
    gen = ctx.generative_ai_context
    return (
        (ctx.gpai_info is not None and ctx.gpai_info.is_gpai_model)
        or ctx.product_type == "foundation-model"
        or (gen is not None and gen.uses_foundation_model)
    )


def detect_conflicts(
    ctx: ProductContext,
    results: Sequence[JurisdictionResult],
) -> list[ConflictTension]:
    """Return the known tensions between the jurisdictions in ``results``.

    Args:
        ctx: Product under assessment.
        results: Successfully mapped jurisdictions, in mapping order.

    Returns:
        Tensions in a fixed order. Empty when fewer than two relevant
        jurisdictions were mapped.
    """
    mapped = list(dict.fromkeys(r.jurisdiction for r in results))
    by_id = {r.jurisdiction: r for r in results}
    tensions: list[ConflictTension] = []

    if "china" in mapped and _has_eu(mapped):
        tensions.append(
            ConflictTension(
                id="china-eu-content-review",
                title="China mandatory content review vs. EU freedom of expression",
                jurisdictions=["china", "eu-ai-act"],
                description=(
                    "China's CAC GenAI Measures require generated content to align with core socialist values and "
                    "prohibit specific content categories, while the EU fundamental rights framework protects "
                    "freedom of expression. Filtering calibrated for China may be overly restrictive for EU users."
                ),
                recommendation=(
                    "Consider jurisdiction-specific content policies with separate filtering rulesets for China "
                    "and the EU. Ask counsel whether one global policy can satisfy both frameworks."
                ),
            )
        )

    if "eu-gdpr" in mapped and "china" in mapped:
        tensions.append(
            ConflictTension(
                id="gdpr-china-data-minimisation",
                title="GDPR data minimisation vs. China content logging requirements",
                jurisdictions=["eu-gdpr", "china"],
                description=(
                    "GDPR Article 5(1)(c) limits processing to what is necessary. China's CAC measures require "
                    "extensive logging of generated content, user interactions and training data records for "
                    "regulatory review."
                ),
                recommendation=(
                    "Segregate data handling: keep China-compliant logs for China users apart from EU user data, "
                    "and make sure EU user data is not subject to Chinese logging requirements."
                ),
            )
        )

    eu_ai_act = by_id.get("eu-ai-act")
    if "singapore" in mapped and eu_ai_act is not None and eu_ai_act.risk_classification.level == RiskLevel.HIGH:
        tensions.append(
            ConflictTension(
                id="singapore-eu-proportionality",
                title="Singapore proportionate governance vs. EU mandatory conformity assessment",
                jurisdictions=["singapore", "eu-ai-act"],
                description=(
                    "Singapore's frameworks scale governance with risk, while the EU AI Act mandates conformity "
                    "assessment for high-risk systems regardless of proportionality. A high-risk system under the "
                    "EU AI Act needs the full assessment even where Singapore would accept lighter governance."
                ),
                recommendation=(
                    "Use the EU AI Act conformity assessment as the baseline and document how it also satisfies "
                    "Singapore's governance framework."
                ),
            )
        )

    if ("us-federal" in mapped or "us-ca" in mapped) and "china" in mapped:
        tensions.append(
            ConflictTension(
                id="us-china-transparency",
                title="US transparency expectations vs. China algorithm confidentiality",
                jurisdictions=["us-federal", "china"],
                description=(
                    "US frameworks emphasise public transparency and explainability of AI systems. China's "
                    "algorithm filing requires detailed disclosure to the CAC but may restrict public disclosure, "
                    "and data localisation can limit what is shared with US regulators."
                ),
                recommendation=(
                    "Develop separate disclosure frameworks per market and get counsel's view on managing dual "
                    "regulatory reporting."
                ),
            )
        )

    if "china" in mapped and any(j in mapped for j in ("eu-gdpr", "singapore", "brazil")):
        tensions.append(
            ConflictTension(
                id="cross-border-data-transfer",
                title="Cross-border data transfer conflicts between GDPR/PDPA/LGPD and China PIPL",
                jurisdictions=[j for j in mapped if j in DATA_TRANSFER_REGIMES],
                description=(
                    "Several jurisdictions restrict cross-border transfers with incompatible mechanisms: GDPR "
                    "adequacy or SCCs for exports from the EU, and a CAC security assessment or China SCCs under "
                    "PIPL for exports from China."
                ),
                recommendation=(
                    "Map all personal data flows, use jurisdiction-specific transfer mechanisms, and consider data "
                    "localisation where transfer mechanisms are insufficient."
                ),
            )
        )

    agent = ctx.agentic_ai_context
    if agent is not None and agent.is_agentic and "singapore" in mapped and len(mapped) > 1:
        tensions.append(
            ConflictTension(
                id="agentic-ai-framework-divergence",
                title="Singapore agentic AI framework vs. other jurisdictions' general AI frameworks",
                jurisdictions=["singapore", *(j for j in mapped if j != "singapore")],
                description=(
                    "Singapore's IMDA framework is a dedicated governance framework for agentic AI with four "
                    "dimensions. Other jurisdictions address agentic AI through general AI rules such as EU AI Act "
                    "human oversight or the NIST AI RMF."
                ),
                recommendation=(
                    "Use the IMDA agentic framework as the baseline for agentic governance, then check coverage "
                    "against each other jurisdiction's general oversight requirements."
                ),
            )
        )

    if _has_eu(mapped) and "china" in mapped and _is_generator(ctx):
        tensions.append(
            ConflictTension(
                id="eu-china-content-labeling",
                title="EU AI Act Article 50 vs. China CAC Article 12 content labeling requirements",
                jurisdictions=["eu-ai-act", "china"],
                description=(
                    "The EU requires machine-readable marking of AI-generated content, while China prescribes "
                    "visible labels in formats set by the CAC. One labeling implementation may not satisfy both."
                ),
                recommendation=(
                    "Use dual labeling: machine-readable provenance metadata such as C2PA for the EU alongside "
                    "visible Chinese-format labels for China-market content."
                ),
            )
        )

    if "eu-gdpr" in mapped and "china" in mapped:
        tensions.append(
            ConflictTension(
                id="gdpr-erasure-china-retention",
                title="GDPR right to erasure vs. China data retention obligations",
                jurisdictions=["eu-gdpr", "china"],
                description=(
                    "GDPR Article 17 gives data subjects a right to erasure. Chinese rules require retention of "
                    "interaction logs and generated content records for regulatory review, so an erasure request "
                    "may collide with mandatory retention."
                ),
                recommendation=(
                    "Keep separate data stores for EU and China users so erasure requests can be honoured without "
                    "touching China-compliant retention, and avoid records subject to both regimes."
                ),
            )
        )

    if "eu-ai-act" in mapped and "china" in mapped and _is_gpai_or_foundation(ctx):
        open_source = ctx.gpai_info is not None and ctx.gpai_info.is_open_source
        if open_source:
            description = (
                "This product appears to use an open-source GPAI model. The EU AI Act Article 53(2) reduces "
                "open-source provider obligations to a training data summary and copyright compliance, but China "
                "requires algorithm filing for every public GenAI service regardless of open-source status."
            )
        else:
            description = (
                "Open-source GPAI models get reduced obligations under EU AI Act Article 53(2), while China requires "
                "algorithm filing regardless of open-source status. If the model becomes open-source, the EU burden "
                "may fall but China obligations stay the same."
            )
        tensions.append(
            ConflictTension(
                id="gpai-opensource-china-filing",
                title="EU AI Act GPAI open-source exemption vs. China algorithm filing requirement",
                jurisdictions=["eu-ai-act", "china"],
                description=description,
                recommendation=(
                    "Do not assume open-source status reduces obligations globally. Keep full CAC filing "
                    "documentation regardless of any EU exemption claimed."
                ),
            )
        )

    sector = ctx.sector_context
    if sector is not None and sector.sector == "financial-services":
        financial = [j for j in mapped if j in FINANCIAL_REGIMES]
        if len(financial) > 1:
            tensions.append(
                ConflictTension(
                    id="financial-ai-regulatory-divergence",
                    title="Divergent financial AI regulatory approaches across jurisdictions",
                    jurisdictions=financial,
                    description=(
                        "The EU AI Act treats credit scoring and insurance pricing as high-risk, MAS uses "
                        "materiality assessment, US SR 11-7 focuses on model risk management, and the UK FCA is "
                        "principles-based. Documentation and testing expectations may conflict."
                    ),
                    recommendation=(
                        "Adopt the most prescriptive requirement from each framework as the compliance baseline and "
                        "document how it satisfies each jurisdiction."
                    ),
                )
            )

    if tensions:
        logger.info("conflicts_detected", count=len(tensions), ids=[t.id for t in tensions])
    return tensions
