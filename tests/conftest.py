from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

# Add src directory to path immediately on import - MUST be before any other imports
_src_dir = Path(__file__).resolve().parents[1] / "src"
_src_str = str(_src_dir)
if _src_str not in sys.path:
    sys.path.insert(0, _src_str)

import pytest

from jurisdictions.builtin import register_builtin_jurisdictions
from jurisdictions.registry import JurisdictionRegistry
from models.actions import ActionRequirement
from models.context import ProductContext
from models.results import JurisdictionResult, RiskClassification
from models.shared import ActionPriority, RiskLevel

# Fixed evaluation time so deadline-based behaviour is stable
NOW = datetime(2025, 6, 1, 12, 0, 0)


def pytest_configure(config: pytest.Config) -> None:
    """Ensure src directory is on sys.path so tests can import modules."""
    src_dir = Path(__file__).resolve().parents[1] / "src"
    src_str = str(src_dir)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


def make_context(**overrides) -> ProductContext:
    """Create a ProductContext with neutral defaults."""
    fields = {
        "description": "Internal analytics dashboard summarising aggregate sales figures",
        "product_type": "other",
        "data_processed": ("anonymized",),
        "user_populations": ("businesses",),
        "decision_impact": "advisory",
        "automation_level": "human-in-the-loop",
        "target_markets": (),
    }
    fields.update(overrides)
    return ProductContext(**fields)


def make_requirement(
    id: str = "action-1",
    priority: str = "important",
    jurisdictions: tuple[str, ...] = ("eu-gdpr",),
    title: str = "Do the thing",
    description: str = "Description of the thing",
    legal_basis: str = "Article 1",
    effort: str | None = None,
    deadline: str | None = None,
) -> ActionRequirement:
    """Create a test ActionRequirement."""
    return ActionRequirement(
        id=id,
        title=title,
        description=description,
        priority=ActionPriority(priority),
        legal_basis=legal_basis,
        jurisdictions=list(jurisdictions),
        estimated_effort=effort,
        deadline=deadline,
    )


def make_result(
    jurisdiction: str = "eu-gdpr",
    level: RiskLevel = RiskLevel.LIMITED,
    actions: list[ActionRequirement] | None = None,
    prohibited: list[str] | None = None,
    justification: str = "Test justification",
    artifacts: list | None = None,
) -> JurisdictionResult:
    """Create a JurisdictionResult, splitting actions the way the mapper does."""
    actions = actions or []
    return JurisdictionResult(
        jurisdiction=jurisdiction,
        risk_classification=RiskClassification(
            level=level,
            justification=justification,
            prohibited_practices=prohibited or [],
        ),
        required_artifacts=artifacts or [],
        required_actions=[a for a in actions if a.priority != ActionPriority.RECOMMENDED],
        recommended_actions=[a for a in actions if a.priority == ActionPriority.RECOMMENDED],
    )


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def registry() -> JurisdictionRegistry:
    """A fresh registry holding the built-in jurisdictions."""
    return register_builtin_jurisdictions(JurisdictionRegistry())


@pytest.fixture
def empty_registry() -> JurisdictionRegistry:
    return JurisdictionRegistry()


@pytest.fixture
def minimal_context() -> ProductContext:
    return make_context()


@pytest.fixture
def hiring_context() -> ProductContext:
    """Automated CV screening sold to employers in several markets."""
    return make_context(
        description="AI resume screening tool that ranks job applicants and rejects unqualified candidates",
        product_type="classifier",
        data_processed=("personal", "employment"),
        user_populations=("job-applicants",),
        decision_impact="determinative",
        automation_level="fully-automated",
        target_markets=("eu-ai-act", "eu-gdpr", "us-ny", "us-il", "uk"),
    )


@pytest.fixture
def social_scoring_context() -> ProductContext:
    return make_context(
        description="Citizen score platform assigning social scores to residents based on behaviour",
        product_type="classifier",
        data_processed=("personal", "behavioral"),
        user_populations=("general-public",),
        decision_impact="determinative",
        automation_level="fully-automated",
        target_markets=("eu-ai-act",),
    )


@pytest.fixture
def chatbot_context() -> ProductContext:
    """Public GenAI chatbot launched in China and the EU."""
    return make_context(
        description="Generative AI chatbot that answers consumer questions",
        product_type="generator",
        data_processed=("personal",),
        user_populations=("consumers",),
        target_markets=("eu-ai-act", "eu-gdpr", "china"),
        generative_ai_context={
            "uses_foundation_model": True,
            "generates_content": True,
            "output_modalities": ("text",),
            "algorithm_filing_status": "not-filed",
        },
    )
