"""Models for probe targets, queries and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Severity(str, Enum):
    """Status vocabulary understood by the monitoring supervisor."""

    OK = "OK"
    # Reserved: no stage produces it, but supervisors expect exit code 1.
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"
    UNKNOWN = "UNKNOWN"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


_EXIT_CODES = {
    Severity.OK: 0,
    Severity.WARNING: 1,
    Severity.CRITICAL: 2,
    Severity.UNKNOWN: 3,
}


@dataclass(frozen=True)
class Target:
    """Host and community credential under test."""

    host: str
    community: str


@dataclass(frozen=True)
class QuerySpec:
    """A single scalar SNMP query and how to judge its answer."""

    name: str
    identifier: str
    expected_pattern: str
    failure_advice: str = ""
    label: str = ""

    def failure_message(self, host: str) -> str:
        """Return the CRITICAL message for a host that did not answer."""

        subject = f"{self.label} {self.identifier}" if self.label else self.identifier
        message = f"no response from {host} on {subject}"
        if self.failure_advice:
            message = f"{message}. {self.failure_advice}"
        return message


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of one pipeline stage."""

    severity: Severity
    message: str
    output: str = ""

    @property
    def ok(self) -> bool:
        return self.severity is Severity.OK

    @classmethod
    def unknown(cls, message: str) -> "ProbeResult":
        return cls(severity=Severity.UNKNOWN, message=message)

    @classmethod
    def critical(cls, message: str) -> "ProbeResult":
        return cls(severity=Severity.CRITICAL, message=message)


@dataclass(frozen=True)
class ProbeSettings:
    """Normalized configuration for one probe run."""

    check_name: str = "SNMP_HOST"
    logging_level: str = "WARNING"
    ping_count: int = 4
    ping_timeout_s: int = 1
    tool_paths: tuple[str, ...] = field(default_factory=tuple)
    snmp_version: str = "1"
    snmp_retries: int = 2
    snmp_timeout_s: int = 5
