"""Sequential pipeline runner."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from core.logging import logger as LOGGER
from core.models import ProbeResult

Stage = Callable[[], ProbeResult]


def _stage_name(stage: Stage) -> str:
    name = getattr(stage, "__name__", None)
    if name is None:
        # functools.partial and similar wrappers
        name = getattr(getattr(stage, "func", None), "__name__", "stage")
    return name


def run_pipeline(stages: Iterable[Stage]) -> ProbeResult:
    """Run stages in order and return the first non-OK result.

    If every stage passes, the last stage's result is returned.
    """

    result: ProbeResult | None = None
    for stage in stages:
        name = _stage_name(stage)
        try:
            result = stage()
        except Exception as exc:  # noqa: BLE001 - reported as UNKNOWN
            LOGGER.exception("Stage failed: %s", name)
            return ProbeResult.unknown(f"{name} failed: {exc}")
        LOGGER.debug("%s -> %s", name, result.severity.value)
        if not result.ok:
            return result

    if result is None:
        return ProbeResult.unknown("no checks configured")
    return result
