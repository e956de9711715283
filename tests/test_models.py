"""Tests for probe models."""

from __future__ import annotations

from core.models import ProbeResult, QuerySpec, Severity


def test_severity_exit_codes_match_supervisor_contract() -> None:
    assert Severity.OK.exit_code == 0
    assert Severity.WARNING.exit_code == 1
    assert Severity.CRITICAL.exit_code == 2
    assert Severity.UNKNOWN.exit_code == 3


def test_query_spec_failure_message_with_label() -> None:
    spec = QuerySpec(
        name="uptime",
        identifier="1.3.6.1.2.1.25.1.1.0",
        expected_pattern="Timeticks",
        label="host-resources MIB",
    )

    assert spec.failure_message("db1") == (
        "no response from db1 on host-resources MIB 1.3.6.1.2.1.25.1.1.0"
    )


def test_query_spec_failure_message_appends_advice() -> None:
    spec = QuerySpec(
        name="vendor",
        identifier="1.2.3",
        expected_pattern="INTEGER",
        failure_advice="Check the agent.",
    )

    assert spec.failure_message("db1") == "no response from db1 on 1.2.3. Check the agent."


def test_probe_result_helpers() -> None:
    assert ProbeResult(severity=Severity.OK, message="fine").ok
    assert ProbeResult.unknown("x").severity is Severity.UNKNOWN
    assert not ProbeResult.critical("x").ok
