"""Action models: jurisdiction-scoped requirements and merged plan items."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from models.shared import ActionPriority


class ActionRequirement(BaseModel):
    """A single action as emitted by one jurisdiction module.

    The identifier is global: the same id from two jurisdictions denotes
    the same real-world action.
    """
    id: str
    title: str
    description: str
    priority: ActionPriority
    legal_basis: str
    jurisdictions: List[str] = Field(default_factory=list)
    estimated_effort: Optional[str] = None
    deadline: Optional[str] = None


class ActionItem(BaseModel):
    """A merged, plan-ready action."""
    id: str
    title: str
    description: str
    jurisdiction: List[str] = Field(default_factory=list, description="Unioned jurisdiction scope")
    legal_basis: str
    best_practice: str = ""
    estimated_effort: str = "2-4 weeks"
    deadline: Optional[str] = None
    verification_criteria: List[str] = Field(min_length=1)
    base_priority: Optional[ActionPriority] = Field(
        default=None,
        description="Priority declared by the contributing jurisdictions, if any",
    )
    depends_on: List[str] = Field(default_factory=list)
    conflicts_with: List[str] = Field(default_factory=list)

    @field_validator("verification_criteria")
    @classmethod
    def _no_blank_criteria(cls, v: list[str]) -> list[str]:
        cleaned = [c for c in v if c and c.strip()]
        if not cleaned:
            raise ValueError("verification_criteria must contain at least one non-blank entry")
        return cleaned


class ActionPlan(BaseModel):
    """Three disjoint, ordered priority tiers."""
    critical: List[ActionItem] = Field(default_factory=list)
    important: List[ActionItem] = Field(default_factory=list)
    recommended: List[ActionItem] = Field(default_factory=list)

    def all_items(self) -> list[ActionItem]:
        return [*self.critical, *self.important, *self.recommended]

    def bucket_of(self, action_id: str) -> Optional[ActionPriority]:
        for priority, items in (
            (ActionPriority.CRITICAL, self.critical),
            (ActionPriority.IMPORTANT, self.important),
            (ActionPriority.RECOMMENDED, self.recommended),
        ):
            if any(item.id == action_id for item in items):
                return priority
        return None

    @property
    def total(self) -> int:
        return len(self.critical) + len(self.important) + len(self.recommended)
