"""Pydantic schemas for request/response validation."""

from app.schemas.measurement import METRIC_LABELS, METRIC_NAMES, metric_label
from app.schemas.progress import (
    AggregationRequest,
    ChartSpec,
    DateRange,
    ExerciseProgressResponse,
    ExerciseSummary,
    GroupMember,
    GroupSummary,
    GroupTrend,
    GroupTrendResponse,
    MeasurementSample,
    MetricRow,
    ReportBundle,
    ReportDocument,
    SeriesResponse,
    TimeSeriesPoint,
)
from app.schemas.report import ChartUrlResponse, ReportCreate, ReportResponse, ReportSummaryResponse

__all__ = [
    "METRIC_LABELS",
    "METRIC_NAMES",
    "metric_label",
    "AggregationRequest",
    "ChartSpec",
    "DateRange",
    "ExerciseProgressResponse",
    "ExerciseSummary",
    "GroupMember",
    "GroupSummary",
    "GroupTrend",
    "GroupTrendResponse",
    "MeasurementSample",
    "MetricRow",
    "ReportBundle",
    "ReportDocument",
    "SeriesResponse",
    "TimeSeriesPoint",
    "ChartUrlResponse",
    "ReportCreate",
    "ReportResponse",
    "ReportSummaryResponse",
]
