"""Reachability check built on the system ping command."""

from __future__ import annotations

import re
import subprocess
from typing import Iterable

from core.command import Runner, run_command
from core.logging import logger as LOGGER
from core.models import ProbeResult, ProbeSettings, Severity, Target

_TOTAL_LOSS_RE = re.compile(r"\b100(?:\.0+)?% packet loss")
# BSD/AIX print "NOT FOUND", Linux iputils and glibc use the others.
_UNRESOLVED_RE = re.compile(
    r"NOT FOUND|unknown host|Name or service not known|"
    r"Temporary failure in name resolution|cannot resolve",
)
_NO_ROUTE_RE = re.compile(r"no route to host", re.IGNORECASE)


def ping_command(host: str, settings: ProbeSettings) -> list[str]:
    return ["ping", "-c", str(settings.ping_count), "-W", str(settings.ping_timeout_s), host]


def classify_ping_output(host: str, lines: Iterable[str]) -> ProbeResult:
    """Classify complete ping output.

    Failure signatures can appear on any line, so the whole output is
    inspected before deciding. Partial packet loss counts as reachable.
    """

    text = "\n".join(lines)
    if _TOTAL_LOSS_RE.search(text):
        return ProbeResult.unknown(f"no reply from {host}")
    if _UNRESOLVED_RE.search(text):
        return ProbeResult.unknown(f"could not resolve hostname {host}")
    if _NO_ROUTE_RE.search(text):
        return ProbeResult.unknown(
            f"could not find a route to {host} - check routing tables"
        )
    return ProbeResult(severity=Severity.OK, message=f"{host} is reachable")


def probe_reachability(
    target: Target,
    settings: ProbeSettings,
    *,
    runner: Runner = subprocess.run,
) -> ProbeResult:
    """Ping the target host and classify the outcome."""

    try:
        output = run_command(ping_command(target.host, settings), runner=runner)
    except OSError as exc:
        return ProbeResult.unknown(f"cannot run ping: {exc}")

    result = classify_ping_output(target.host, output.lines)
    LOGGER.debug("reachability: %s %s", result.severity.value, result.message)
    return result
