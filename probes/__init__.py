"""Probe stages for the host health check."""

from probes.reachability import classify_ping_output, probe_reachability
from probes.snmp import (
    MIB_QUERIES,
    QueryTool,
    build_query_tool,
    check_query_tool,
    classify_query_output,
    locate_query_tool,
    probe_mib,
)

__all__ = [
    "MIB_QUERIES",
    "QueryTool",
    "build_query_tool",
    "check_query_tool",
    "classify_ping_output",
    "classify_query_output",
    "locate_query_tool",
    "probe_mib",
    "probe_reachability",
]
