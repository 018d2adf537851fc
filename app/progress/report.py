"""
Progress report assembly.

A report compiles, for one subject and one period:

1. a **metrics table**: per metric, the baseline (earliest value ever
   recorded), the latest value inside the period and the signed change;
2. **charts**: a combined overview (weight, BMI, metabolic age), a
   combined body-composition chart (fat %, visceral fat), one chart per
   remaining metric, and one weight/repetitions/volume chart per top
   exercise;
3. **exercise summaries**: the most performed exercises with their
   period records.

Assembly is pure.  The side effects a report implies (notifying the
coaching staff, flagging the subject for end-of-program feedback) are
returned as data in :class:`~app.schemas.progress.ReportBundle`; the
caller executes them together with persisting the report.
"""

from __future__ import annotations

import datetime
import logging
from typing import Any, Iterable, Optional

from pydantic import BaseModel, Field

from app.progress.charts import build_line_chart, build_time_series_chart, format_date_labels
from app.progress.exercises import analyze_exercise_progress
from app.progress.timeseries import build_series, find_baseline
from app.schemas.measurement import BODY_COMPOSITION_METRICS, OVERVIEW_METRICS, metric_label
from app.schemas.progress import (FOLLOW_UP_REPORT_KINDS, REPORT_KIND_CUSTOM, REPORT_KIND_MONTHLY,
                                  REPORT_KIND_PROGRAM_COMPLETION, AggregationRequest, ChartSpec, ExerciseSummary,
                                  FollowUpFlag, MeasurementSample, MetricRow, NotificationEvent, ReportBundle,
                                  ReportDocument, TimeSeriesPoint, )

logger = logging.getLogger(__name__)

REPORT_TITLES: dict[str, str] = {
    REPORT_KIND_MONTHLY: "Monthly progress report",
    REPORT_KIND_PROGRAM_COMPLETION: "Program completion report",
    REPORT_KIND_CUSTOM: "Progress report",
}


# ======================================================================
# Configuration
# ======================================================================


class ReportConfig(BaseModel):
    """Tunables for report assembly, injectable for testing."""

    top_exercises: int = Field(5, ge=1, le=20)
    overview_metrics: list[str] = Field(default_factory=lambda: list(OVERVIEW_METRICS))
    body_composition_metrics: list[str] = Field(default_factory=lambda: list(BODY_COMPOSITION_METRICS))


DEFAULT_REPORT_CONFIG = ReportConfig()


def report_title(kind: str) -> str:
    return REPORT_TITLES.get(kind, REPORT_TITLES[REPORT_KIND_CUSTOM])


# ======================================================================
# Metrics table
# ======================================================================


def build_metrics_table(samples: Iterable[MeasurementSample], metrics: Iterable[str], start: datetime.date,
                        end: datetime.date, ) -> list[MetricRow]:
    """One row per metric with at least one valid value in the period.

    The baseline is not limited to the period: progress is always shown
    since the very first measurement.
    """
    sample_list = list(samples)
    rows: list[MetricRow] = []
    for metric in metrics:
        series = build_series(metric, sample_list, start, end)
        if not series:
            continue
        baseline = find_baseline(metric, sample_list)
        latest = series[-1].value
        rows.append(MetricRow(metric=metric, label=metric_label(metric), baseline=baseline, latest=latest,
                              delta=round(latest - baseline, 1), ))
    return rows


# ======================================================================
# Charts
# ======================================================================


def _named(metrics: Iterable[str], series_by_metric: dict[str, list[TimeSeriesPoint]],
           ) -> dict[str, list[TimeSeriesPoint]]:
    return {metric_label(m): series_by_metric[m] for m in metrics if series_by_metric.get(m)}


def build_measurement_charts(series_by_metric: dict[str, list[TimeSeriesPoint]],
                             config: Optional[ReportConfig] = None, ) -> list[ChartSpec]:
    """Combined and per-metric charts for the in-period series."""
    cfg = config or DEFAULT_REPORT_CONFIG
    charts: list[Optional[ChartSpec]] = [
        build_time_series_chart("overview", "Body metrics overview",
                                _named(cfg.overview_metrics, series_by_metric)),
        build_time_series_chart("body_composition", "Body composition (fat)",
                                _named(cfg.body_composition_metrics, series_by_metric)),
    ]

    combined = set(cfg.overview_metrics) | set(cfg.body_composition_metrics)
    for metric, series in series_by_metric.items():
        if metric in combined:
            continue
        charts.append(build_time_series_chart(f"metric:{metric}", metric_label(metric),
                                              _named([metric], series_by_metric)))

    return [c for c in charts if c is not None]


def build_exercise_charts(summaries: Iterable[ExerciseSummary]) -> list[ChartSpec]:
    """One chart per exercise: max weight, max repetitions and volume per occurrence."""
    charts: list[ChartSpec] = []
    for summary in summaries:
        labels = format_date_labels([o.workout_date for o in summary.history])
        chart = build_line_chart(f"exercise:{summary.exercise_name}", f"Progress: {summary.exercise_name}", labels, {
            "Max weight (kg)": [o.max_weight for o in summary.history],
            "Max repetitions": [o.max_repetitions for o in summary.history],
            "Volume (kg)": [o.volume for o in summary.history],
        }, )
        if chart is not None:
            charts.append(chart)
    return charts


# ======================================================================
# Side effects
# ======================================================================


def _side_effects(document: ReportDocument) -> list[Any]:
    title = report_title(document.report_kind)
    details = (f"{title} generated for {document.period_start:%d/%m/%Y} - "
               f"{document.period_end:%d/%m/%Y}")
    effects: list[Any] = [
        NotificationEvent(subject_id=document.subject_id, report_kind=document.report_kind,
                          generated_at=document.generated_at, details=details, )
    ]
    if document.report_kind in FOLLOW_UP_REPORT_KINDS:
        effects.append(FollowUpFlag(subject_id=document.subject_id, reason=document.report_kind))
    return effects


# ======================================================================
# Main entry point
# ======================================================================


def assemble_report(request: AggregationRequest, samples: Iterable[MeasurementSample], workouts: Iterable[Any],
                    kind: str, generated_at: datetime.datetime,
                    config: Optional[ReportConfig] = None, ) -> ReportBundle:
    """Compile a report for the single subject in *request*.

    Args:
        request: Subject, metrics and period of the report.
        samples: Measurement samples of the subject (all history, so the
            baseline can predate the period).
        workouts: Workouts of the subject; only completed ones inside the
            period are analysed.
        kind: Report kind, e.g. ``"monthly"``.
        generated_at: Generation timestamp stamped on the report.
        config: Optional :class:`ReportConfig` override.

    Returns:
        :class:`ReportBundle` with the document and its side effects.
    """
    if len(request.subject_scope) != 1:
        raise ValueError("A report covers exactly one subject")

    cfg = config or DEFAULT_REPORT_CONFIG
    subject_id = request.subject_scope[0]
    start, end = request.date_range.start, request.date_range.end
    metrics = list(request.metric_set)

    subject_samples = [s for s in samples if s.subject_id == subject_id]

    metrics_table = build_metrics_table(subject_samples, metrics, start, end)
    series_by_metric = {m: build_series(m, subject_samples, start, end) for m in metrics}
    exercise_summaries = analyze_exercise_progress(workouts, start, end, cfg.top_exercises)

    chart_specs = build_measurement_charts(series_by_metric, cfg) + build_exercise_charts(exercise_summaries)

    document = ReportDocument(subject_id=subject_id, report_kind=kind, period_start=start, period_end=end,
                              metrics_table=tuple(metrics_table), chart_specs=tuple(chart_specs),
                              exercise_summaries=tuple(exercise_summaries), generated_at=generated_at, )

    logger.debug("Assembled %s report for subject %s: %d metrics, %d charts, %d exercises", kind, subject_id,
                 len(metrics_table), len(chart_specs), len(exercise_summaries))
    return ReportBundle(report=document, side_effects=tuple(_side_effects(document)))
