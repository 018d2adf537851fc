"""
Progress analytics value types.

These are the inputs and outputs of the pure functions in
:mod:`app.progress`.  All of them are immutable: recomputation means
building a new request, never mutating a previous result.

"No data" is always an explicit value (``None`` or an empty list), never
an exception.
"""

from __future__ import annotations

import datetime
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

REPORT_KIND_MONTHLY = "monthly"
REPORT_KIND_PROGRAM_COMPLETION = "program_completion"
REPORT_KIND_CUSTOM = "custom"

REPORT_KINDS = [REPORT_KIND_MONTHLY, REPORT_KIND_PROGRAM_COMPLETION, REPORT_KIND_CUSTOM]

# Report kinds that flag the subject for an end-of-program follow-up.
FOLLOW_UP_REPORT_KINDS = {REPORT_KIND_PROGRAM_COMPLETION}


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

class DateRange(BaseModel):
    """Inclusive ``[start, end]`` calendar-day window."""

    model_config = ConfigDict(frozen=True)

    start: datetime.date
    end: datetime.date

    @model_validator(mode="after")
    def check_order(self) -> DateRange:
        if self.end < self.start:
            raise ValueError(f"Date range end {self.end} is before start {self.start}")
        return self

    def contains(self, day: datetime.date) -> bool:
        return self.start <= day <= self.end


class AggregationRequest(BaseModel):
    """What to compute: which subjects, which metrics, which window."""

    model_config = ConfigDict(frozen=True)

    subject_scope: tuple[int, ...] = Field(..., min_length=1)
    metric_set: tuple[str, ...] = Field(..., min_length=1)
    date_range: DateRange


# ---------------------------------------------------------------------------
# Time series
# ---------------------------------------------------------------------------

class MeasurementSample(BaseModel):
    """One metric value of one measurement entry (``None`` = not recorded)."""

    model_config = ConfigDict(frozen=True)

    subject_id: int
    date: datetime.date
    metric: str
    value: Any = None


class TimeSeriesPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: datetime.date
    value: float


# ---------------------------------------------------------------------------
# Group aggregation
# ---------------------------------------------------------------------------

class GroupMember(BaseModel):
    """A group member's baseline and in-window series for one metric.

    ``baseline`` is left untyped: invalid baselines are part of the
    input domain and are filtered out by the aggregator, not rejected here.
    """

    model_config = ConfigDict(frozen=True)

    subject_id: int
    name: str = ""
    baseline: Any = None
    series: tuple[TimeSeriesPoint, ...] = ()


class GroupTrendPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: datetime.date
    total: float


class GroupTrend(BaseModel):
    """Forward-filled sum of member values over the window."""

    model_config = ConfigDict(frozen=True)

    window_start: datetime.date
    member_count: int
    points: tuple[GroupTrendPoint, ...]


class MemberProgress(BaseModel):
    model_config = ConfigDict(frozen=True)

    subject_id: int
    name: str
    start_value: float
    current_value: float
    change: float


class GroupSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    member_count: int
    total_start: float
    total_current: float
    total_change: float
    members: tuple[MemberProgress, ...]


# ---------------------------------------------------------------------------
# Exercise progress
# ---------------------------------------------------------------------------

class ExerciseOccurrence(BaseModel):
    """One performance of an exercise within one workout."""

    model_config = ConfigDict(frozen=True)

    exercise_name: str
    workout_date: datetime.date
    max_weight: float
    max_repetitions: float
    volume: float


class ExerciseHistory(BaseModel):
    model_config = ConfigDict(frozen=True)

    exercise_name: str
    occurrences: tuple[ExerciseOccurrence, ...]

    @property
    def frequency(self) -> int:
        return len(self.occurrences)


class ExerciseSummary(BaseModel):
    """Date-sorted history of a top exercise plus its period records."""

    model_config = ConfigDict(frozen=True)

    exercise_name: str
    occurrence_count: int
    history: tuple[ExerciseOccurrence, ...]
    period_max_weight: float
    period_max_repetitions: float
    period_max_volume: float


# ---------------------------------------------------------------------------
# Charts
# ---------------------------------------------------------------------------

class ChartAxis(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    position: Literal["left", "right"]
    color: str
    draw_grid: bool


class ChartDataset(BaseModel):
    """One line of a chart; ``None`` values are gaps on the shared axis."""

    model_config = ConfigDict(frozen=True)

    label: str
    values: tuple[Optional[float], ...]
    color: str
    axis_id: str


class ChartSpec(BaseModel):
    """Renderer-independent description of a multi-axis line chart."""

    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    labels: tuple[str, ...]
    datasets: tuple[ChartDataset, ...]
    axes: tuple[ChartAxis, ...]


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

class MetricRow(BaseModel):
    """Baseline → latest in-window value for one metric."""

    model_config = ConfigDict(frozen=True)

    metric: str
    label: str
    baseline: float
    latest: float
    delta: float


class ReportDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    subject_id: int
    report_kind: str
    period_start: datetime.date
    period_end: datetime.date
    metrics_table: tuple[MetricRow, ...]
    chart_specs: tuple[ChartSpec, ...]
    exercise_summaries: tuple[ExerciseSummary, ...]
    generated_at: datetime.datetime


class NotificationEvent(BaseModel):
    """Tell the coaching staff a report was generated."""

    model_config = ConfigDict(frozen=True)

    effect: Literal["notify_coach"] = "notify_coach"
    subject_id: int
    report_kind: str
    generated_at: datetime.datetime
    details: str


class FollowUpFlag(BaseModel):
    """Mark the subject as owing an end-of-program feedback."""

    model_config = ConfigDict(frozen=True)

    effect: Literal["flag_follow_up"] = "flag_follow_up"
    subject_id: int
    reason: str


SideEffect = Annotated[Union[NotificationEvent, FollowUpFlag], Field(discriminator="effect")]


class ReportBundle(BaseModel):
    """A report plus the side effects the caller must execute with it."""

    model_config = ConfigDict(frozen=True)

    report: ReportDocument
    side_effects: tuple[SideEffect, ...]


# ---------------------------------------------------------------------------
# API responses
# ---------------------------------------------------------------------------

class SeriesResponse(BaseModel):
    """A subject's in-window series for one metric."""

    subject_id: int
    metric: str
    start: datetime.date
    end: datetime.date
    baseline: Optional[float]
    latest: Optional[float]
    points: list[TimeSeriesPoint]


class ExerciseProgressResponse(BaseModel):
    subject_id: int
    start: datetime.date
    end: datetime.date
    exercises: list[ExerciseSummary]


class GroupTrendResponse(BaseModel):
    """Group aggregate for one metric; ``trend`` is ``None`` without qualifying members."""

    metric: str
    group_name: Optional[str]
    start: datetime.date
    end: datetime.date
    trend: Optional[GroupTrend]
    summary: Optional[GroupSummary]
    chart: Optional[ChartSpec]
