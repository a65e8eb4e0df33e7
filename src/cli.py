from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv

from jurisdictions.builtin import register_builtin_jurisdictions
from jurisdictions.registry import get_registry
from models.report import LaunchReadyReport
from pipeline_runner import build_report, create_runner
from providers import PROVIDER_NAMES, get_provider
from utils.error_handler import LaunchReadyError, exit_with_error


logger = logging.getLogger(__name__)

COMMANDS = ("assess", "jurisdictions")


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=os.getenv("LAUNCHREADY_LOG_LEVEL", "INFO"),
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--dotenv",
        dest="dotenv_path",
        default=".env",
        help="Path to .env file to load (default: .env at repo root)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="launchready",
        description="Map an AI product to regulatory requirements and build a launch action plan",
    )
    parser.add_argument("command", choices=COMMANDS, help="Command to run")
    return parser


def build_assess_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="launchready assess",
        description="Assess a product context against the target jurisdictions",
    )

    parser.add_argument(
        "--context",
        dest="context_path",
        required=True,
        help="Path to the product context JSON file",
    )
    parser.add_argument(
        "--markets",
        dest="markets",
        default="",
        help="Comma-separated jurisdiction ids. Defaults to the context's target markets.",
    )
    parser.add_argument(
        "--output",
        dest="output_path",
        default="",
        help="Optional output JSON file path. If not set, writes to outputs/.",
    )
    parser.add_argument(
        "--output-dir",
        dest="output_dir",
        default=os.getenv("LAUNCHREADY_OUTPUT_DIR", "outputs"),
        help="Directory to save reports when --output is not set.",
    )
    parser.add_argument(
        "--provider",
        choices=PROVIDER_NAMES,
        default=os.getenv("LAUNCHREADY_PROVIDER", "none"),
        help="LLM provider for tailored guidance ('none' for the deterministic plan)",
    )
    _add_common_arguments(parser)
    return parser


def build_jurisdictions_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="launchready jurisdictions",
        description="List the registered jurisdictions",
    )
    _add_common_arguments(parser)
    return parser


def _configure_logging(log_level: str, dotenv_path: str) -> None:
    logging.basicConfig(level=getattr(logging, str(log_level).upper(), logging.INFO))

    # Reduce noisy transport logs; keep app milestone logs readable.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("anthropic").setLevel(logging.WARNING)

    load_dotenv(dotenv_path)


def _print_summary(report: LaunchReadyReport) -> None:
    summary = report.summary
    print(f"Report {report.id}")
    for market in summary.can_launch:
        line = f"  {market.jurisdiction:<12} {market.status.value:<16} {market.estimated_time_to_compliance}"
        print(line)
        for blocker in market.blockers:
            print(f"      blocker: {blocker}")

    plan = report.action_plan
    print(
        f"Actions: critical={len(plan.critical)} important={len(plan.important)} "
        f"recommended={len(plan.recommended)}"
    )
    print(f"Highest risk market: {summary.highest_risk_market}")
    print(f"Lowest friction market: {summary.lowest_friction_market}")

    for err in report.mapping_errors:
        print(f"Warning: could not map {err.jurisdiction}: {err.error}", file=sys.stderr)
    for err in report.action_errors:
        print(f"Warning: {err.action_id}: {err.error}", file=sys.stderr)
    for warning in report.dependency_warnings:
        print(f"Warning: {warning}", file=sys.stderr)


def run_assess(
    context_path: str,
    markets: str = "",
    output_path: str = "",
    output_dir: str = "outputs",
    provider_name: str = "none",
) -> int:
    try:
        runner = create_runner(context_path, output_path=output_path, output_dir=output_dir)
        runner.log_plan([
            "Assessment",
            "map jurisdictions",
            "aggregate requirements and readiness",
            "build action plan",
            "detect conflicts",
        ])
        context = runner.load_context()
        provider = get_provider(provider_name)

        registry = get_registry()
        if len(registry) == 0:
            register_builtin_jurisdictions(registry)

        targets = [m.strip() for m in markets.split(",") if m.strip()] or None
        report = build_report(context, registry=registry, provider=provider, target_jurisdictions=targets)
        runner.write_output(report.model_dump(mode="json"))
    except LaunchReadyError as exc:
        return exit_with_error(exc, context="assess")

    _print_summary(report)
    print(f"Wrote {runner.output_file}")
    return 0


def run_jurisdictions() -> int:
    registry = get_registry()
    if len(registry) == 0:
        register_builtin_jurisdictions(registry)

    for entry in registry.list():
        print(f"{entry.id:<12} {entry.region:<14} {entry.name}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    argv_list = list(argv) if argv is not None else sys.argv[1:]

    if argv_list and argv_list[0] == "assess":
        args = build_assess_parser().parse_args(argv_list[1:])
        _configure_logging(args.log_level, args.dotenv_path)
        return run_assess(
            context_path=args.context_path,
            markets=args.markets,
            output_path=args.output_path,
            output_dir=args.output_dir,
            provider_name=args.provider,
        )

    if argv_list and argv_list[0] == "jurisdictions":
        args = build_jurisdictions_parser().parse_args(argv_list[1:])
        _configure_logging(args.log_level, args.dotenv_path)
        return run_jurisdictions()

    parser = build_parser()
    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
