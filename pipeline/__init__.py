"""Pipeline driver and report helpers."""

from pipeline.report import emit_report, format_report
from pipeline.runner import run_pipeline

__all__ = [
    "emit_report",
    "format_report",
    "run_pipeline",
]
