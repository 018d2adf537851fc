"""
Generated report and coach notification repositories.

Both tables are append-only from this service.  ``add`` stages a row and
flushes it (so it gets an ID) without committing: report generation
commits the report and its notification together.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.report import CoachNotification, GeneratedReport


class ReportRepository:
    """Repository for GeneratedReport database operations."""

    def __init__(self, session: Session):
        self.session = session

    def add(self, report: GeneratedReport) -> GeneratedReport:
        self.session.add(report)
        self.session.flush()
        return report

    def get_by_id(self, report_id: int) -> Optional[GeneratedReport]:
        return self.session.get(GeneratedReport, report_id)

    def get_latest_by_user(self, user_id: int, limit: int = 10, ) -> list[GeneratedReport]:
        """Reports of a user, newest first."""
        statement = (select(GeneratedReport).where(GeneratedReport.user_id == user_id).order_by(
            GeneratedReport.generated_at.desc(), GeneratedReport.id.desc()).limit(limit))
        return list(self.session.exec(statement).all())


class NotificationRepository:
    """Repository for CoachNotification database operations."""

    def __init__(self, session: Session):
        self.session = session

    def add(self, notification: CoachNotification) -> CoachNotification:
        self.session.add(notification)
        self.session.flush()
        return notification
