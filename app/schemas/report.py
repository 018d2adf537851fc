"""
Report API schemas.

Pydantic models for report generation requests and stored-report
responses.  Report sections reuse the engine value types.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from app.schemas.measurement import METRIC_NAMES
from app.schemas.progress import REPORT_KIND_CUSTOM, REPORT_KINDS, ChartSpec, ExerciseSummary, MetricRow


# Request schemas
class ReportCreate(BaseModel):
    """Schema for generating a report over an explicit period."""

    kind: str = Field(REPORT_KIND_CUSTOM, description=f"One of: {', '.join(REPORT_KINDS)}")
    period_start: datetime.date = Field(..., description="First day of the period (YYYY-MM-DD)")
    period_end: datetime.date = Field(..., description="Last day of the period, inclusive (YYYY-MM-DD)")
    metrics: Optional[list[str]] = Field(None, description="Metrics to include (defaults to all)")

    @field_validator("kind")
    @classmethod
    def check_kind(cls, value: str) -> str:
        if value not in REPORT_KINDS:
            raise ValueError(f"Unknown report kind '{value}'. Available: {REPORT_KINDS}")
        return value

    @field_validator("metrics")
    @classmethod
    def check_metrics(cls, value: Optional[list[str]]) -> Optional[list[str]]:
        if value is None:
            return value
        unknown = [m for m in value if m not in METRIC_NAMES]
        if unknown:
            raise ValueError(f"Unknown metrics: {unknown}")
        if not value:
            raise ValueError("At least one metric is required")
        return value

    @model_validator(mode="after")
    def check_period(self) -> "ReportCreate":
        if self.period_end < self.period_start:
            raise ValueError("period_end must not be before period_start")
        return self


# Response schemas
class ReportSummaryResponse(BaseModel):
    """A stored report without its sections, for listings."""

    id: int
    subject_id: int
    report_kind: str
    period_start: datetime.date
    period_end: datetime.date
    generated_at: datetime.datetime


class ReportResponse(ReportSummaryResponse):
    """A stored report with all sections."""

    metrics_table: list[MetricRow]
    chart_specs: list[ChartSpec]
    exercise_summaries: list[ExerciseSummary]


class ChartUrlResponse(BaseModel):
    """A report chart serialized for the image rendering service."""

    key: str
    title: str
    url: str
