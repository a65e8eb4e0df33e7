"""Built-in jurisdiction rule modules.

Each submodule exposes a ``MODULE`` value satisfying ``JurisdictionModule``.
Importing this package registers nothing; see ``jurisdictions.builtin``.
"""
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

__all__ = [
    "brazil",
    "china",
    "eu_ai_act",
    "eu_gdpr",
    "singapore",
    "uk",
    "us_ca",
    "us_co",
    "us_federal",
    "us_il",
    "us_ny",
    "us_tx",
]
