"""Report assembly and run orchestration for CLI commands.

``build_report`` wires the stages together:

    ProductContext -> requirement mapper -> jurisdiction results
        -> requirement aggregator -> summary + market readiness
        -> action aggregator -> prioritizer -> action plan
        -> conflict detector
"""
from __future__ import annotations

import json
import logging
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Optional

from pydantic import ValidationError

from actions.aggregator import generate_deterministic
from actions.generator import generate_with_provider
from actions.prioritizer import annotate_with_launch_date, detect_dependency_issues, effort_rank
from config.loader import get_knowledge_base_version
from jurisdictions.aggregator import aggregate, build_market_readiness, summarize
from jurisdictions.builtin import register_builtin_jurisdictions
from jurisdictions.conflict_detector import detect_conflicts
from jurisdictions.registry import JurisdictionRegistry, get_registry
from jurisdictions.requirement_mapper import map_all
from models.actions import ActionPlan
from models.context import ProductContext
from models.report import LaunchReadyReport, MarketReadiness, ReportMetadata, ReportSummary
from models.shared import MarketReadinessStatus
from providers.base import LLMProvider
from utils.error_handler import ContextValidationError, ErrorCategory, LaunchReadyError

logger = logging.getLogger(__name__)

DEFAULT_TIMELINE = "See per-jurisdiction timelines"


def _overall_timeline(readiness: list[MarketReadiness]) -> str:
    pending = [
        m.estimated_time_to_compliance
        for m in readiness
        if m.status == MarketReadinessStatus.ACTION_REQUIRED and m.estimated_time_to_compliance
    ]
    if not pending:
        return DEFAULT_TIMELINE
    return max(pending, key=effort_rank)


def _with_launch_date(plan: ActionPlan, launch_date: Optional[str]) -> ActionPlan:
    if not launch_date:
        return plan
    return ActionPlan(
        critical=annotate_with_launch_date(plan.critical, launch_date),
        important=annotate_with_launch_date(plan.important, launch_date),
        recommended=annotate_with_launch_date(plan.recommended, launch_date),
    )


def build_report(
    context: ProductContext,
    registry: Optional[JurisdictionRegistry] = None,
    provider: Optional[LLMProvider] = None,
    now: Optional[datetime] = None,
    target_jurisdictions: Optional[Iterable[str]] = None,
) -> LaunchReadyReport:
    """Assess ``context`` and assemble the full report.

    Args:
        context: Product under assessment.
        registry: Jurisdiction registry. Defaults to the process registry,
            populated with the builtin jurisdictions when empty.
        provider: Optional LLM provider for tailored guidance. Without one the
            plan is fully deterministic.
        now: Evaluation time. Defaults to the clock.
        target_jurisdictions: Overrides ``context.target_markets``.

    Returns:
        LaunchReadyReport. Mapping and provider failures are recorded in the
        report, never raised.
    """
    if registry is None:
        registry = get_registry()
        if len(registry) == 0:
            register_builtin_jurisdictions(registry)

    stamp = now or datetime.now(timezone.utc)

    mapped = map_all(context, target_jurisdictions, registry=registry)
    results = mapped.results

    aggregated = aggregate(results)
    readiness = build_market_readiness(results)
    overview = summarize(results, readiness)

    action_errors = []
    if provider is None:
        plan = generate_deterministic(results, now)
    else:
        generated = generate_with_provider(context, results, provider, now)
        plan, action_errors = generated.action_plan, generated.errors
    plan = _with_launch_date(plan, context.launch_date)

    summary = ReportSummary(
        can_launch=readiness,
        highest_risk_market=overview.highest_risk_market,
        lowest_friction_market=overview.lowest_friction_market,
        critical_blockers=overview.critical_blockers,
        total_artifacts_needed=aggregated.total_artifacts,
        total_actions_needed=aggregated.total_actions,
        estimated_compliance_timeline=_overall_timeline(readiness),
    )

    report = LaunchReadyReport(
        id=f"lr-{int(stamp.timestamp() * 1000)}",
        generated_at=stamp.isoformat(),
        product_context=context,
        jurisdiction_results=results,
        summary=summary,
        action_plan=plan,
        conflicts=detect_conflicts(context, results),
        dependency_warnings=detect_dependency_issues(plan),
        mapping_errors=mapped.errors,
        action_errors=action_errors,
        metadata=ReportMetadata(
            provider=getattr(provider, "id", "none") if provider is not None else "none",
            model=getattr(provider, "model", "none") if provider is not None else "none",
            knowledge_base_version=get_knowledge_base_version(),
        ),
    )
    logger.info(
        "[report] id=%s jurisdictions=%s actions=%s mapping_errors=%s action_errors=%s",
        report.id,
        len(results),
        plan.total,
        len(mapped.errors),
        len(action_errors),
    )
    return report


class PipelineRunner:
    """Common orchestration for the ``assess`` command."""

    def __init__(
        self,
        input_path: str,
        output_path: str = "",
        output_dir: str = "outputs",
        output_prefix: str = "launchready",
    ):
        self.input_path = Path(input_path)
        self.output_dir = output_dir
        self.output_prefix = output_prefix

        if not self.input_path.exists():
            raise LaunchReadyError(
                category=ErrorCategory.FILE_IO,
                message=f"Input file not found: {input_path}",
            )

        self.run_id = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S") + "_" + uuid.uuid4().hex[:8]

        if output_path:
            self.output_file = Path(output_path)
        else:
            self.output_file = Path(output_dir) / f"{output_prefix}_{self.input_path.stem}_{self.run_id}.json"

    def log_plan(self, steps: list[str]) -> None:
        """Log the pipeline plan."""
        logger.info("[plan] %s", steps[0] if steps else "Pipeline")
        for step in steps[1:]:
            logger.info("[plan] - %s", step)

    def log_step(self, step_name: str, **kwargs) -> None:
        """Log a pipeline step with optional metrics."""
        if kwargs:
            metrics = " ".join(f"{k}={v}" for k, v in kwargs.items())
            logger.info("[%s] %s", step_name, metrics)
        else:
            logger.info("[%s] started", step_name)

    def load_context(self) -> ProductContext:
        """Read and validate the product context JSON."""
        try:
            raw = json.loads(self.input_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ContextValidationError(f"Invalid JSON: {exc}") from exc
        except OSError as exc:
            raise LaunchReadyError(
                category=ErrorCategory.FILE_IO,
                message=f"Could not read {self.input_path}",
                details=str(exc),
            ) from exc

        try:
            context = ProductContext.model_validate(raw)
        except ValidationError as exc:
            raise ContextValidationError(str(exc)) from exc

        self.log_step("context", product_type=context.product_type, markets=len(context.target_markets))
        return context

    def write_output(self, payload: dict[str, Any]) -> None:
        """Write output to JSON file."""
        text = json.dumps(payload, indent=2)
        try:
            self.output_file.parent.mkdir(parents=True, exist_ok=True)
            self.output_file.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise LaunchReadyError(
                category=ErrorCategory.FILE_IO,
                message=f"Could not write {self.output_file}",
                details=str(exc),
            ) from exc
        logger.info("[output] wrote=%s", str(self.output_file))


def create_runner(
    input_path: str,
    output_path: str = "",
    output_dir: str = "outputs",
    output_prefix: str = "launchready",
) -> PipelineRunner:
    """Factory function to create a PipelineRunner."""
    return PipelineRunner(
        input_path=input_path,
        output_path=output_path,
        output_dir=output_dir,
        output_prefix=output_prefix,
    )
