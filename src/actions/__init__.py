"""Action planning: catalog, merge, prioritisation and generation."""
from actions.aggregator import (
    MergedAction,
    build_action_item,
    collect_requirements,
    fallback_best_practice,
    generate_deterministic,
    merge_actions,
)
from actions.generator import GenerateActionPlanResult, generate_with_provider
from actions.library import ActionCategory, ActionLibraryEntry, get_action_by_id
from actions.prioritizer import (
    bucket,
    classify_priority,
    compare,
    detect_dependency_issues,
    prioritize_actions,
    sort_actions,
)

__all__ = [
    "ActionCategory",
    "ActionLibraryEntry",
    "GenerateActionPlanResult",
    "MergedAction",
    "bucket",
    "build_action_item",
    "classify_priority",
    "collect_requirements",
    "compare",
    "detect_dependency_issues",
    "fallback_best_practice",
    "generate_deterministic",
    "generate_with_provider",
    "get_action_by_id",
    "merge_actions",
    "prioritize_actions",
    "sort_actions",
]
