"""Provider-assisted action plan generation.

Produces the same plan as ``generate_deterministic`` except that each
action's ``best_practice`` text is tailored to the product by an LLM
provider. Requests go out in fixed-size batches; a failed request falls back
to the deterministic guidance for that action and is reported as an
ActionPlanError.
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Sequence

import structlog

from actions.aggregator import (
    MergedAction,
    build_action_item,
    collect_requirements,
    fallback_best_practice,
    merge_actions,
)
from actions.library import get_action_by_id
from actions.prioritizer import prioritize_actions
from config.loader import (
    get_llm_max_tokens,
    get_llm_system_prompt,
    get_llm_temperature,
    get_provider_batch_size,
)
from models.actions import ActionItem, ActionPlan
from models.context import ProductContext
from models.report import ActionPlanError
from models.results import JurisdictionResult
from providers.base import LLMProvider, LLMRequest
from utils.error_handler import InvalidResponseError

logger = structlog.get_logger(__name__)


@dataclass
class GenerateActionPlanResult:
    action_plan: ActionPlan
    errors: list[ActionPlanError] = field(default_factory=list)


def build_product_context_summary(ctx: ProductContext) -> str:
    parts = [
        f"Product description: {ctx.description}",
        f"Product type: {ctx.product_type}",
        f"Data processed: {', '.join(ctx.data_processed)}",
        f"User populations: {', '.join(ctx.user_populations)}",
        f"Decision impact: {ctx.decision_impact}",
        f"Automation level: {ctx.automation_level}",
        f"Target markets: {', '.join(ctx.target_markets)}",
    ]

    gen = ctx.generative_ai_context
    if gen is not None:
        parts.append(f"GenAI: generates {', '.join(gen.output_modalities)} content")
        parts.append(f"Foundation model source: {gen.foundation_model_source}")
        if gen.model_identifier:
            parts.append(f"Model: {gen.model_identifier}")
        parts.append(f"Has output watermarking: {gen.has_output_watermarking}")
        parts.append(f"Has output filtering: {gen.has_output_filtering}")
        parts.append(f"Uses RAG: {gen.uses_rag}")

    agent = ctx.agentic_ai_context
    if agent is not None:
        parts.append(f"Agentic AI: autonomy level {agent.autonomy_level}")
        parts.append(f"Tool access: {', '.join(agent.tool_access)}")
        parts.append(f"Has human checkpoints: {agent.has_human_checkpoints}")
        parts.append(f"Has failsafe mechanisms: {agent.has_failsafe_mechanisms}")

    sector = ctx.sector_context
    if sector is not None:
        parts.append(f"Sector: {sector.sector}")
        if sector.financial_services is not None:
            parts.append(f"Financial sub-sector: {sector.financial_services.sub_sector}")

    if ctx.existing_measures:
        measures = "; ".join(f"{m.type}: {m.description}" for m in ctx.existing_measures)
        parts.append(f"Existing measures: {measures}")

    return "\n".join(parts)


def build_best_practice_prompt(merged: MergedAction, ctx: ProductContext) -> str:
    req = merged.winner
    return f"""Generate a customised best-practice guidance paragraph for a specific compliance action, tailored to the product described below.

## Product Context

{build_product_context_summary(ctx)}

## Action

Title: {req.title}
Description: {req.description}
Legal basis: {req.legal_basis}
Applicable jurisdictions: {', '.join(merged.jurisdictions)}
Priority: {req.priority.value}

## Instructions

1. Write 2-4 sentences of actionable, product-specific guidance for implementing this compliance action.
2. Reference the specific data types, user populations, and product characteristics from the context.
3. Mention specific tools, techniques, or approaches relevant to this product type.
4. Do NOT include generic boilerplate or citations; legal references are already in the action item.
5. Return ONLY the guidance paragraph, no headers or formatting."""


def _generate_best_practice(merged: MergedAction, ctx: ProductContext, provider: LLMProvider) -> str:
    request = LLMRequest.from_prompt(
        build_best_practice_prompt(merged, ctx),
        system_prompt=get_llm_system_prompt(),
        max_tokens=get_llm_max_tokens(),
        temperature=get_llm_temperature(),
    )
    text = provider.complete(request).content.strip()
    if not text:
        raise InvalidResponseError("empty guidance")
    return text


def _build_one(
    merged: MergedAction,
    ctx: ProductContext,
    provider: LLMProvider,
) -> tuple[ActionItem, Optional[ActionPlanError]]:
    action_id = merged.winner.id
    try:
        guidance = _generate_best_practice(merged, ctx, provider)
    except Exception as exc:
        logger.warning("best_practice_generation_failed", action_id=action_id, error=str(exc))
        fallback = fallback_best_practice(merged.winner.description, get_action_by_id(action_id))
        error = ActionPlanError(action_id=action_id, error=f"Failed to generate best practice: {exc}")
        return build_action_item(merged, fallback), error
    return build_action_item(merged, guidance), None


def generate_with_provider(
    context: ProductContext,
    results: Sequence[JurisdictionResult],
    provider: LLMProvider,
    now: Optional[datetime] = None,
) -> GenerateActionPlanResult:
    """Build the action plan with provider-tailored guidance.

    Args:
        context: Product the guidance is tailored to.
        results: Jurisdiction results from the requirement mapper.
        provider: LLM provider used for each action.
        now: Evaluation time for deadline checks. Defaults to the clock.

    Returns:
        GenerateActionPlanResult whose plan has the same shape as the
        deterministic plan, plus one error per failed action.
    """
    merged = merge_actions(collect_requirements(results))
    batch_size = max(1, get_provider_batch_size())

    items: list[ActionItem] = []
    errors: list[ActionPlanError] = []
    with ThreadPoolExecutor(max_workers=batch_size) as pool:
        for start in range(0, len(merged), batch_size):
            batch = merged[start:start + batch_size]
            for item, error in pool.map(lambda m: _build_one(m, context, provider), batch):
                items.append(item)
                if error is not None:
                    errors.append(error)

    plan = prioritize_actions(items, now)
    logger.info(
        "action_plan_generated",
        mode="provider",
        provider=getattr(provider, "id", "unknown"),
        critical=len(plan.critical),
        important=len(plan.important),
        recommended=len(plan.recommended),
        failed=len(errors),
    )
    return GenerateActionPlanResult(action_plan=plan, errors=errors)
