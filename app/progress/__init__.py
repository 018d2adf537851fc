"""Progress analytics core: time series, group forward fill, exercise ranking and report assembly."""

from app.progress.aggregate import aggregate_forward_fill, summarize_members
from app.progress.exercises import analyze_exercise_progress
from app.progress.report import ReportConfig, assemble_report
from app.progress.timeseries import build_series, find_baseline

__all__ = [
    "ReportConfig",
    "aggregate_forward_fill",
    "analyze_exercise_progress",
    "assemble_report",
    "build_series",
    "find_baseline",
    "summarize_members",
]
