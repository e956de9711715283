"""SNMP query-tool resolution and MIB probes."""

from __future__ import annotations

from dataclasses import dataclass
import os
import re
import subprocess
from typing import Callable, Iterable, Sequence

from core.command import Runner, run_command
from core.logging import logger as LOGGER
from core.models import ProbeResult, ProbeSettings, QuerySpec, Severity, Target

UPTIME_QUERY = QuerySpec(
    name="host-resources uptime",
    identifier="1.3.6.1.2.1.25.1.1.0",
    expected_pattern="Timeticks",
    label="host-resources MIB",
)
VENDOR_SYSTEM_QUERY = QuerySpec(
    name="vendor system",
    identifier="1.3.6.1.4.1.2.6.191.1.2.1.0",
    expected_pattern="INTEGER",
    failure_advice=(
        "This is the vendor system MIB. "
        "Confirm the agent configuration exposes this branch."
    ),
)
PERFORMANCE_AGENT_QUERY = QuerySpec(
    name="performance agent",
    identifier="1.3.6.1.4.1.2.3.1.2.2.2.1.1.1.1.1",
    expected_pattern="INTEGER",
    failure_advice=(
        "This is the performance-agent MIB. "
        "Confirm the performance agent daemon is running."
    ),
)

MIB_QUERIES: tuple[QuerySpec, ...] = (
    UPTIME_QUERY,
    VENDOR_SYSTEM_QUERY,
    PERFORMANCE_AGENT_QUERY,
)


@dataclass(frozen=True)
class QueryTool:
    """A resolved snmpget executable bound to one target."""

    path: str
    target: Target
    version: str = "1"
    retries: int = 2
    timeout_s: int = 5

    def command(self, identifier: str) -> list[str]:
        return [
            self.path,
            "-v", self.version,
            "-c", self.target.community,
            "-r", str(self.retries),
            "-t", str(self.timeout_s),
            self.target.host,
            identifier,
        ]


def locate_query_tool(
    paths: Iterable[str],
    *,
    exists: Callable[[str], bool] = os.path.isfile,
) -> str | None:
    """Return the first known query tool path that exists."""

    for path in paths:
        if exists(path):
            LOGGER.debug("using snmp query tool %s", path)
            return path
    return None


def check_query_tool(
    path: str | None,
    *,
    executable: Callable[[str], bool] = lambda p: os.access(p, os.X_OK),
) -> ProbeResult:
    """Validate the located query tool before any network activity."""

    if path is None:
        return ProbeResult.unknown("cannot find snmp query tool")
    if not executable(path):
        return ProbeResult.unknown(f"snmp query tool {path} is not executable")
    return ProbeResult(severity=Severity.OK, message=f"snmp query tool {path}")


def build_query_tool(path: str, target: Target, settings: ProbeSettings) -> QueryTool:
    return QueryTool(
        path=path,
        target=target,
        version=settings.snmp_version,
        retries=settings.snmp_retries,
        timeout_s=settings.snmp_timeout_s,
    )


def classify_query_output(host: str, spec: QuerySpec, lines: Sequence[str]) -> ProbeResult:
    """Judge a query response by its type marker.

    Only the value type after ``=`` counts, e.g. ``... = INTEGER: 1``, so
    error text echoing the host name cannot pass. Query tools sometimes
    print several lines; the last one carrying the marker is kept as the
    result output.
    """

    marker = re.compile(rf"=\s*{re.escape(spec.expected_pattern)}:", re.IGNORECASE)
    matched = ""
    for line in lines:
        if marker.search(line):
            matched = line

    if not matched:
        return ProbeResult.critical(spec.failure_message(host))
    return ProbeResult(
        severity=Severity.OK,
        message=f"response from {host} on {spec.identifier}",
        output=matched,
    )


def probe_mib(
    tool: QueryTool,
    spec: QuerySpec,
    *,
    runner: Runner = subprocess.run,
) -> ProbeResult:
    """Query one identifier and classify the response."""

    try:
        output = run_command(tool.command(spec.identifier), runner=runner)
    except OSError as exc:
        return ProbeResult.unknown(f"cannot run snmp query tool: {exc}")

    result = classify_query_output(tool.target.host, spec, output.lines)
    if result.ok:
        LOGGER.debug("%s: %s", spec.name, result.output)
    return result
