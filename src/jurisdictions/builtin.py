"""Registration table for the jurisdictions shipped with LaunchReady."""
from __future__ import annotations

from typing import Optional

import structlog

from jurisdictions.modules import (
    brazil,
    china,
    eu_ai_act,
    eu_gdpr,
    singapore,
    uk,
    us_ca,
    us_co,
    us_federal,
    us_il,
    us_ny,
    us_tx,
)
from jurisdictions.registry import JurisdictionRegistry, get_registry

logger = structlog.get_logger(__name__)

# (module, region, description); ids and names come from the module itself
BUILTIN_MODULES = (
    (eu_ai_act.MODULE, "Europe",
     "Risk-based AI regulation: prohibited practices, high-risk obligations, transparency duties and GPAI rules."),
    (eu_gdpr.MODULE, "Europe",
     "Personal data protection, automated decision-making rights and DPIA requirements."),
    (us_federal.MODULE, "North America",
     "FTC Act Section 5, ECOA/Regulation B, FCRA, SR 11-7 and the NIST AI RMF."),
    (us_ca.MODULE, "North America",
     "CCPA/CPRA automated decision-making rules, AI transparency and deepfake laws."),
    (us_co.MODULE, "North America",
     "Developer and deployer duties for high-risk AI making consequential decisions."),
    (us_il.MODULE, "North America",
     "Biometric privacy (BIPA) and AI in employment decisions."),
    (us_ny.MODULE, "North America",
     "Bias audits and candidate notice for automated employment decision tools."),
    (us_tx.MODULE, "North America",
     "Disclosure and governance duties for AI in consequential decisions, plus deepfake laws."),
    (uk.MODULE, "Europe",
     "UK GDPR and ICO guidance, AISI frontier model safety, DSIT principles and FCA expectations."),
    (singapore.MODULE, "Asia-Pacific",
     "PDPA, IMDA GenAI and agentic AI frameworks, and MAS AI risk management guidelines."),
    (china.MODULE, "Asia-Pacific",
     "PIPL, CAC generative AI measures, deep synthesis and recommendation algorithm rules."),
    (brazil.MODULE, "Latin America",
     "LGPD, the pending AI Bill (PL 2338/2023), BCB guidance and consumer protection."),
)


def register_builtin_jurisdictions(registry: Optional[JurisdictionRegistry] = None) -> JurisdictionRegistry:
    """Register every built-in module on ``registry`` (default: process registry).

    Safe to call more than once; later calls replace the earlier entries.
    """
    if registry is None:
        registry = get_registry()
    for module, region, description in BUILTIN_MODULES:
        registry.register(module.id, module.name, region, description, module)
    logger.info("builtin_jurisdictions_registered", count=len(BUILTIN_MODULES))
    return registry
