from __future__ import annotations

import json
from pathlib import Path

from cli import build_assess_parser, main


def _write_context(tmp_path: Path, **fields) -> Path:
    payload = {
        "description": "Generative AI chatbot that answers consumer questions",
        "product_type": "generator",
        "data_processed": ["personal"],
        "user_populations": ["consumers"],
        "target_markets": ["eu-ai-act", "eu-gdpr"],
    }
    payload.update(fields)
    path = tmp_path / "context.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_assess_parser_builds() -> None:
    args = build_assess_parser().parse_args(["--context", "product.json", "--markets", "uk,china"])

    assert args.context_path == "product.json"
    assert args.markets == "uk,china"
    assert args.provider in ("none", "anthropic")
    assert isinstance(args.output_dir, str)
    assert isinstance(args.log_level, str)


def test_no_command_prints_help(capsys) -> None:
    assert main([]) == 2
    assert "usage:" in capsys.readouterr().out


def test_jurisdictions_lists_builtins(capsys) -> None:
    assert main(["jurisdictions"]) == 0
    out = capsys.readouterr().out
    assert "eu-ai-act" in out
    assert "singapore" in out


def test_assess_writes_report(tmp_path: Path, capsys) -> None:
    context_path = _write_context(tmp_path)
    out_path = tmp_path / "report.json"

    code = main(["assess", "--context", str(context_path), "--output", str(out_path), "--provider", "none"])

    assert code == 0
    report = json.loads(out_path.read_text(encoding="utf-8"))
    assert [m["jurisdiction"] for m in report["summary"]["can_launch"]] == ["eu-ai-act", "eu-gdpr"]
    assert report["metadata"]["provider"] == "none"
    assert "Wrote" in capsys.readouterr().out


def test_assess_markets_override(tmp_path: Path) -> None:
    context_path = _write_context(tmp_path)
    out_path = tmp_path / "report.json"

    code = main([
        "assess", "--context", str(context_path), "--output", str(out_path),
        "--provider", "none", "--markets", "uk, atlantis",
    ])

    assert code == 0
    report = json.loads(out_path.read_text(encoding="utf-8"))
    assert [r["jurisdiction"] for r in report["jurisdiction_results"]] == ["uk"]
    assert [e["jurisdiction"] for e in report["mapping_errors"]] == ["atlantis"]


def test_assess_missing_context_fails(tmp_path: Path, capsys) -> None:
    code = main(["assess", "--context", str(tmp_path / "nope.json"), "--provider", "none"])

    assert code == 1
    assert "Input file not found" in capsys.readouterr().err


def test_assess_invalid_context_fails(tmp_path: Path, capsys) -> None:
    context_path = _write_context(tmp_path, decision_impact="catastrophic")

    code = main(["assess", "--context", str(context_path), "--provider", "none"])

    assert code == 1
    assert "failed validation" in capsys.readouterr().err


def test_assess_provider_construction_failure_exits_cleanly(tmp_path: Path, monkeypatch, capsys) -> None:
    def _broken_client(api_key=None):
        raise TypeError("Invalid http_client argument")

    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
    monkeypatch.setattr("providers.anthropic.get_anthropic_client", _broken_client)
    context_path = _write_context(tmp_path)

    code = main([
        "assess", "--context", str(context_path), "--output", str(tmp_path / "report.json"),
        "--provider", "anthropic",
    ])

    assert code == 1
    assert "LLM provider request failed" in capsys.readouterr().err
    assert not (tmp_path / "report.json").exists()
