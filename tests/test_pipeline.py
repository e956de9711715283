"""Tests for the pipeline runner and report line."""

from __future__ import annotations

from functools import partial

from core.models import ProbeResult, Severity
from pipeline.report import emit_report, format_report
from pipeline.runner import run_pipeline


def _ok(message: str) -> ProbeResult:
    return ProbeResult(severity=Severity.OK, message=message)


def test_all_ok_returns_last_result() -> None:
    result = run_pipeline([lambda: _ok("first"), lambda: _ok("second")])

    assert result.message == "second"


def test_stops_at_first_failure() -> None:
    calls: list[str] = []

    def failing() -> ProbeResult:
        calls.append("failing")
        return ProbeResult.critical("broken")

    def later() -> ProbeResult:
        calls.append("later")
        return _ok("never")

    result = run_pipeline([lambda: _ok("first"), failing, later])

    assert result.message == "broken"
    assert calls == ["failing"]


def test_raising_stage_becomes_unknown() -> None:
    def explode(value: str) -> ProbeResult:
        raise RuntimeError(value)

    result = run_pipeline([partial(explode, "boom")])

    assert result.severity is Severity.UNKNOWN
    assert result.message == "explode failed: boom"


def test_empty_pipeline_is_unknown() -> None:
    assert run_pipeline([]).severity is Severity.UNKNOWN


def test_format_report_is_single_line() -> None:
    result = ProbeResult.critical("no response\nfrom db1")

    assert format_report("SNMP_HOST", result) == "SNMP_HOST CRITICAL -- no response from db1"


def test_emit_report_prints_once_and_returns_exit_code(capsys) -> None:
    code = emit_report("SNMP_HOST", ProbeResult.unknown("no reply from db1"))

    out = capsys.readouterr().out
    assert out == "SNMP_HOST UNKNOWN -- no reply from db1\n"
    assert code == 3
