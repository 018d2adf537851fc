"""
Report service.

Fetches a subject's samples and workouts, assembles the report with the
pure engine, then persists the report and executes its side effects
(coach notification, follow-up flag) in a single transaction.

Generation is all-or-nothing: a failed fetch raises
:class:`~app.core.exceptions.FetchFailure` before anything is written,
and any failure while writing rolls the whole transaction back.
"""

import calendar
import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.report import NotificationRepository, ReportRepository
from app.db.repositories.user import UserRepository
from app.db.repositories.weekly_task import WeeklyTaskRepository
from app.models.report import CoachNotification, GeneratedReport
from app.models.timestamps import utcnow
from app.models.user import User
from app.models.weekly_task import TASK_STATUS_COMPLETED
from app.progress.charts import to_chart_url
from app.progress.report import ReportConfig, assemble_report
from app.schemas.measurement import METRIC_NAMES
from app.schemas.progress import (REPORT_KIND_MONTHLY, REPORT_KIND_PROGRAM_COMPLETION, AggregationRequest,
                                  ChartSpec, DateRange, FollowUpFlag, NotificationEvent, ReportBundle, )
from app.schemas.report import ChartUrlResponse, ReportResponse, ReportSummaryResponse
from app.services.sample_store import SampleStore

logger = logging.getLogger(__name__)

NOTIFICATION_REPORT_GENERATED = "report_generated"


def one_month_before(day: datetime.date) -> datetime.date:
    """Same day of the previous month, clamped to that month's length."""
    year, month = (day.year, day.month - 1) if day.month > 1 else (day.year - 1, 12)
    last_day = calendar.monthrange(year, month)[1]
    return datetime.date(year, month, min(day.day, last_day))


class ReportService:
    """Service for report generation and retrieval."""

    def __init__(self, session: Session, store: Optional[SampleStore] = None,
                 config: Optional[ReportConfig] = None, ):
        self.session = session
        self.store = store or SampleStore(session)
        self.config = config or ReportConfig(top_exercises=settings.REPORT_TOP_EXERCISES)
        self.users = UserRepository(session)
        self.reports = ReportRepository(session)
        self.notifications = NotificationRepository(session)
        self.tasks = WeeklyTaskRepository(session)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate(self, subject_id: int, period_start: datetime.date, period_end: datetime.date, kind: str,
                 metrics: Optional[list[str]] = None,
                 generated_at: Optional[datetime.datetime] = None, ) -> ReportResponse:
        """Generate, persist and announce a report.

        Returns:
            The persisted report.

        Raises:
            HTTPException: 404 if the subject does not exist.
            FetchFailure: if the record store cannot serve the data; nothing
                is persisted in that case.
        """
        subject = self._get_subject(subject_id)
        request = AggregationRequest(subject_scope=(subject_id,), metric_set=tuple(metrics or METRIC_NAMES),
                                     date_range=DateRange(start=period_start, end=period_end), )
        stamp = generated_at or utcnow()
        logger.info("Generating %s report for subject %s (%s..%s)", kind, subject_id, period_start, period_end)

        try:
            # Full measurement history: the baseline may predate the period.
            samples = self.store.fetch_samples([subject_id], request.metric_set)
            workouts = self.store.fetch_workouts(subject_id, date_range=request.date_range)

            bundle = assemble_report(request, samples, workouts, kind, stamp, self.config)

            report = self.reports.add(self._to_model(bundle))
            self._apply_side_effects(subject, report, bundle)
            self.session.commit()
        except Exception:
            logger.exception("Report generation failed for subject %s; nothing persisted", subject_id)
            self.session.rollback()
            raise

        self.session.refresh(report)
        logger.info("Persisted report %s for subject %s", report.id, subject_id)
        return self._to_response(report)

    def generate_monthly(self, subject_id: int, today: Optional[datetime.date] = None) -> ReportResponse:
        """Report over the last month, up to and including *today*."""
        end = today or datetime.date.today()
        return self.generate(subject_id, one_month_before(end), end, REPORT_KIND_MONTHLY)

    def generate_program_completion(self, subject_id: int,
                                    today: Optional[datetime.date] = None, ) -> ReportResponse:
        """End-of-program report; requires the final program week to be completed.

        The period runs from the first week's start (or the subject's start
        date) to the final week's end (or start + program length).
        """
        subject = self._get_subject(subject_id)
        if not self.is_program_complete(subject_id):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT,
                                detail=f"Program not completed: week {settings.PROGRAM_WEEKS} is not done", )

        first_week = self.tasks.get_week(subject_id, 1)
        final_week = self.tasks.get_week(subject_id, settings.PROGRAM_WEEKS)

        if first_week and first_week.week_start_date:
            start = first_week.week_start_date
        elif subject.start_date:
            start = subject.start_date
        else:
            start = today or datetime.date.today()

        if final_week and final_week.week_end_date:
            end = final_week.week_end_date
        else:
            end = start + datetime.timedelta(weeks=settings.PROGRAM_WEEKS)

        if end < start:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                                detail=f"Program period is inconsistent: {start} to {end}", )

        return self.generate(subject_id, start, end, REPORT_KIND_PROGRAM_COMPLETION)

    def is_program_complete(self, subject_id: int) -> bool:
        final_week = self.tasks.get_week(subject_id, settings.PROGRAM_WEEKS)
        return final_week is not None and final_week.status == TASK_STATUS_COMPLETED

    # ------------------------------------------------------------------
    # Retrieval
    # ------------------------------------------------------------------

    def list_reports(self, subject_id: int, limit: int = 10) -> list[ReportSummaryResponse]:
        self._get_subject(subject_id)
        return [self._to_summary(r) for r in self.reports.get_latest_by_user(subject_id, limit)]

    def get_report(self, report_id: int) -> ReportResponse:
        return self._to_response(self._get_report(report_id))

    def chart_urls(self, report_id: int) -> list[ChartUrlResponse]:
        """Renderer image URLs for every chart of a stored report."""
        report = self._get_report(report_id)
        urls = []
        for raw in report.chart_specs:
            spec = ChartSpec.model_validate(raw)
            urls.append(ChartUrlResponse(key=spec.key, title=spec.title,
                                         url=to_chart_url(spec, settings.CHART_RENDER_URL, settings.CHART_WIDTH,
                                                          settings.CHART_HEIGHT), ))
        return urls

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_subject(self, subject_id: int) -> User:
        subjects = self.store.fetch_subjects([subject_id])
        if not subjects:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Subject not found", )
        return subjects[0]

    def _get_report(self, report_id: int) -> GeneratedReport:
        report = self.reports.get_by_id(report_id)
        if not report:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Report not found", )
        return report

    def _apply_side_effects(self, subject: User, report: GeneratedReport, bundle: ReportBundle) -> None:
        for effect in bundle.side_effects:
            if isinstance(effect, NotificationEvent):
                self.notifications.add(CoachNotification(user_id=effect.subject_id,
                                                         notification_type=NOTIFICATION_REPORT_GENERATED,
                                                         report_kind=effect.report_kind, report_id=report.id,
                                                         details=effect.details, created_at=effect.generated_at, ))
            elif isinstance(effect, FollowUpFlag):
                subject.needs_final_feedback = True
                subject.last_program_report_id = report.id
                subject.updated_at = utcnow()
                self.users.update(subject)

    @staticmethod
    def _to_model(bundle: ReportBundle) -> GeneratedReport:
        document = bundle.report.model_dump(mode="json")
        return GeneratedReport(user_id=bundle.report.subject_id, report_kind=bundle.report.report_kind,
                               period_start=bundle.report.period_start, period_end=bundle.report.period_end,
                               metrics_table=document["metrics_table"], chart_specs=document["chart_specs"],
                               exercise_summaries=document["exercise_summaries"],
                               generated_at=bundle.report.generated_at, )

    @staticmethod
    def _to_summary(report: GeneratedReport) -> ReportSummaryResponse:
        return ReportSummaryResponse(id=report.id, subject_id=report.user_id, report_kind=report.report_kind,
                                     period_start=report.period_start, period_end=report.period_end,
                                     generated_at=report.generated_at, )

    @staticmethod
    def _to_response(report: GeneratedReport) -> ReportResponse:
        return ReportResponse(id=report.id, subject_id=report.user_id, report_kind=report.report_kind,
                              period_start=report.period_start, period_end=report.period_end,
                              generated_at=report.generated_at, metrics_table=report.metrics_table,
                              chart_specs=report.chart_specs, exercise_summaries=report.exercise_summaries, )
