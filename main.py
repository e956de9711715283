"""Command-line entry point for the SNMP host probe."""

from __future__ import annotations

import argparse
from functools import partial
import socket
import subprocess
import sys
from typing import NoReturn

from config.controller import ConfigController, ConfigError
from core.command import Runner
from core.logging import logger, setup_logging
from core.models import ProbeResult, ProbeSettings, Severity, Target
from pipeline.report import emit_report, format_report
from pipeline.runner import Stage, run_pipeline
from probes.reachability import probe_reachability
from probes.snmp import (
    MIB_QUERIES,
    build_query_tool,
    check_query_tool,
    locate_query_tool,
    probe_mib,
)

DEFAULT_COMMUNITY = "public"


class ProbeArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors as UNKNOWN."""

    def error(self, message: str) -> NoReturn:
        result = ProbeResult.unknown(f"{self.prog}: {message}")
        print(format_report(ProbeSettings().check_name, result), flush=True)
        raise SystemExit(Severity.UNKNOWN.exit_code)


def default_host() -> str:
    """Return the local machine name, or ``localhost`` if it is unknown."""

    try:
        name = socket.gethostname()
    except OSError:
        name = ""
    return name or "localhost"


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Raw command-line arguments.

    Returns:
        Parsed arguments namespace.
    """

    parser = ProbeArgumentParser(
        description=(
            "Check that a host answers ping and the host-resources, vendor "
            "system and performance-agent SNMP MIBs."
        )
    )
    parser.add_argument("community_arg", nargs="?", metavar="community", help="SNMP community")
    parser.add_argument("host_arg", nargs="?", metavar="host", help="Host to check")
    parser.add_argument("-C", "--community", help="SNMP community (default: public)")
    parser.add_argument("-H", "--host", help="Host to check (default: this machine)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each step to stderr.")
    parser.add_argument("--config", help="YAML file overriding the packaged settings.")
    return parser.parse_args(argv)


def resolve_target(args: argparse.Namespace) -> Target:
    """Build the target from flags, then positionals, then defaults."""

    community = args.community or args.community_arg
    if not community:
        community = DEFAULT_COMMUNITY
        logger.debug("no community given, using %s", community)

    host = args.host or args.host_arg
    if not host:
        host = default_host()
        logger.debug("no host given, using %s", host)

    return Target(host=host, community=community)


def build_stages(
    target: Target,
    settings: ProbeSettings,
    *,
    runner: Runner = subprocess.run,
) -> list[Stage]:
    """Return the ordered check stages for one target."""

    tool_path = locate_query_tool(settings.tool_paths)

    def query_tool() -> ProbeResult:
        return check_query_tool(tool_path)

    def reachability() -> ProbeResult:
        return probe_reachability(target, settings, runner=runner)

    stages: list[Stage] = [query_tool, reachability]
    if tool_path is not None:
        tool = build_query_tool(tool_path, target, settings)
        stages.extend(partial(probe_mib, tool, spec, runner=runner) for spec in MIB_QUERIES)
    return stages


def main(argv: list[str] | None = None, *, runner: Runner = subprocess.run) -> int:
    """Application entry point.

    Args:
        argv: Optional list of command-line arguments.
        runner: Subprocess runner used for ping and SNMP queries.

    Returns:
        Process exit code.
    """

    if argv is None:
        argv = sys.argv[1:]

    args = parse_args(argv)
    if args.verbose:
        setup_logging("DEBUG")

    try:
        settings = ConfigController(override_file=args.config).get_settings()
    except ConfigError as exc:
        logger.error("%s", exc)
        return emit_report(ProbeSettings().check_name, ProbeResult.unknown(str(exc)))

    if not args.verbose:
        setup_logging(settings.logging_level)

    target = resolve_target(args)
    logger.debug("checking %s", target.host)
    result = run_pipeline(build_stages(target, settings, runner=runner))
    return emit_report(settings.check_name, result)


if __name__ == "__main__":
    raise SystemExit(main())
