"""
Progress service.

Dashboard views over the progress engine: a subject's metric series, a
subject's exercise progress, and the forward-filled trend of a training
group.  Nothing is persisted.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.config import settings
from app.models.user import User
from app.progress.aggregate import aggregate_forward_fill, summarize_members
from app.progress.charts import build_line_chart, format_date_labels
from app.progress.exercises import analyze_exercise_progress
from app.progress.timeseries import build_series, find_baseline, group_samples_by_subject, latest_value
from app.schemas.measurement import METRIC_NAMES, metric_label
from app.schemas.progress import (AggregationRequest, ChartSpec, DateRange, ExerciseProgressResponse, GroupMember,
                                  GroupTrend, GroupTrendResponse, SeriesResponse, )
from app.services.sample_store import SampleStore

logger = logging.getLogger(__name__)


class ProgressService:
    """Service for progress dashboards."""

    def __init__(self, session: Session, store: Optional[SampleStore] = None):
        self.store = store or SampleStore(session)

    # ------------------------------------------------------------------
    # Single subject
    # ------------------------------------------------------------------

    def subject_series(self, subject_id: int, metric: str, start: datetime.date,
                       end: datetime.date, ) -> SeriesResponse:
        self._check_metric(metric)
        self._check_range(start, end)
        self._get_subject(subject_id)
        request = AggregationRequest(subject_scope=(subject_id,), metric_set=(metric,),
                                     date_range=DateRange(start=start, end=end), )

        samples = self.store.fetch_samples(request.subject_scope, request.metric_set)
        points = build_series(metric, samples, start, end)
        return SeriesResponse(subject_id=subject_id, metric=metric, start=start, end=end,
                              baseline=find_baseline(metric, samples), latest=latest_value(points), points=points, )

    def exercise_progress(self, subject_id: int, start: datetime.date, end: datetime.date, ) -> ExerciseProgressResponse:
        self._check_range(start, end)
        self._get_subject(subject_id)
        workouts = self.store.fetch_workouts(subject_id, date_range=DateRange(start=start, end=end))
        summaries = analyze_exercise_progress(workouts, start, end, settings.REPORT_TOP_EXERCISES)
        return ExerciseProgressResponse(subject_id=subject_id, start=start, end=end, exercises=summaries)

    # ------------------------------------------------------------------
    # Group
    # ------------------------------------------------------------------

    def group_trend(self, metric: str, start: datetime.date, end: datetime.date,
                    group_name: Optional[str] = None, ) -> GroupTrendResponse:
        """Forward-filled group total of *metric* over ``[start, end]``.

        Members are the group's trainees; only those with a valid
        baseline for *metric* take part.
        """
        self._check_metric(metric)
        self._check_range(start, end)
        subjects = self.store.fetch_group_subjects(group_name)
        window = DateRange(start=start, end=end)
        members = self._build_members(subjects, metric, window)

        trend = aggregate_forward_fill(members, start)
        summary = summarize_members(members, start)
        if trend is None:
            logger.info("No qualifying members for %s trend of group %r", metric, group_name)

        return GroupTrendResponse(metric=metric, group_name=group_name, start=start, end=end, trend=trend,
                                  summary=summary, chart=self._trend_chart(metric, trend), )

    def _build_members(self, subjects: list[User], metric: str, window: DateRange) -> list[GroupMember]:
        if not subjects:
            return []
        ids = [s.id for s in subjects]
        baselines = self.store.fetch_subject_baselines(ids)
        by_subject = group_samples_by_subject(self.store.fetch_samples(ids, [metric], window))

        return [GroupMember(subject_id=s.id, name=s.full_name or s.email,
                            baseline=baselines.get(s.id, {}).get(metric),
                            series=tuple(build_series(metric, by_subject.get(s.id, []), window.start, window.end)), )
                for s in subjects]

    @staticmethod
    def _trend_chart(metric: str, trend: Optional[GroupTrend]) -> Optional[ChartSpec]:
        if trend is None:
            return None
        labels = format_date_labels([p.date for p in trend.points])
        return build_line_chart(f"group:{metric}", f"Group total: {metric_label(metric)}", labels,
                                {"Group total": [p.total for p in trend.points]}, )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_subject(self, subject_id: int) -> User:
        subjects = self.store.fetch_subjects([subject_id])
        if not subjects:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subject not found", )
        return subjects[0]

    @staticmethod
    def _check_metric(metric: str) -> None:
        if metric not in METRIC_NAMES:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                                detail=f"Unknown metric: '{metric}'. Available: {METRIC_NAMES}", )

    @staticmethod
    def _check_range(start: datetime.date, end: datetime.date) -> None:
        if end < start:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                                detail=f"Range end {end} is before start {start}", )
