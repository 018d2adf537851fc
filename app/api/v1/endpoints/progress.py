"""
Progress endpoints: metric series, exercise progress and group trends.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_progress_service
from app.schemas.progress import ExerciseProgressResponse, GroupTrendResponse, SeriesResponse
from app.services.progress_service import ProgressService

router = APIRouter()


def _default_range(start: Optional[datetime.date], end: Optional[datetime.date],
                   ) -> tuple[datetime.date, datetime.date]:
    # Default: last 30 days
    end_date = end or datetime.date.today()
    start_date = start or end_date - datetime.timedelta(days=30)
    return start_date, end_date


@router.get("/groups/trend", summary="Forward-filled group total of a metric.", response_model=GroupTrendResponse, )
def get_group_trend(metric: str = Query("weight", description="Metric key"),
                    group: Optional[str] = Query(None, description="Group name (all trainees if omitted)"),
                    start: Optional[datetime.date] = Query(None, description="Window start (inclusive)"),
                    end: Optional[datetime.date] = Query(None, description="Window end (inclusive)"),
                    service: ProgressService = Depends(get_progress_service), ):
    start_date, end_date = _default_range(start, end)
    return service.group_trend(metric, start_date, end_date, group)


@router.get("/{subject_id}/series", summary="A subject's series for one metric.", response_model=SeriesResponse, )
def get_subject_series(subject_id: int, metric: str = Query("weight", description="Metric key"),
                       start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                       end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                       service: ProgressService = Depends(get_progress_service), ):
    start_date, end_date = _default_range(start, end)
    return service.subject_series(subject_id, metric, start_date, end_date)


@router.get("/{subject_id}/exercises", summary="Most performed exercises and their period records.",
            response_model=ExerciseProgressResponse, )
def get_exercise_progress(subject_id: int,
                          start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                          end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                          service: ProgressService = Depends(get_progress_service), ):
    start_date, end_date = _default_range(start, end)
    return service.exercise_progress(subject_id, start_date, end_date)
