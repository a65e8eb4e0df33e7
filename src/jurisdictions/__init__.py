"""Jurisdiction engine: rule module contract, registry, mapping and aggregation."""
from jurisdictions.contract import JurisdictionModule, RiskTier, RuleModule, Trigger
from jurisdictions.registry import JurisdictionEntry, JurisdictionRegistry, Result, get_registry
from jurisdictions.requirement_mapper import RequirementMapResult, map_all, map_one
from jurisdictions.aggregator import aggregate, build_market_readiness, summarize
from jurisdictions.builtin import register_builtin_jurisdictions
from jurisdictions.conflict_detector import detect_conflicts

__all__ = [
    "JurisdictionModule",
    "RiskTier",
    "RuleModule",
    "Trigger",
    "JurisdictionEntry",
    "JurisdictionRegistry",
    "Result",
    "get_registry",
    "RequirementMapResult",
    "map_all",
    "map_one",
    "aggregate",
    "build_market_readiness",
    "summarize",
    "register_builtin_jurisdictions",
    "detect_conflicts",
]
