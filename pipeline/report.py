"""Single-line status report for the monitoring supervisor."""

from __future__ import annotations

from core.models import ProbeResult


def format_report(check_name: str, result: ProbeResult) -> str:
    """Return the status line, e.g. ``SNMP_HOST OK -- response from ...``."""

    message = " ".join(result.message.split())
    return f"{check_name} {result.severity.value} -- {message}"


def emit_report(check_name: str, result: ProbeResult) -> int:
    """Print the status line and return the matching exit code."""

    print(format_report(check_name, result), flush=True)
    return result.severity.exit_code
