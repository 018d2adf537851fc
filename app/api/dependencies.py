"""
Shared API dependencies.

Reusable FastAPI dependencies wiring services to the request session.
Authentication is handled upstream by the portal gateway.
"""

from fastapi import Depends
from sqlmodel import Session

from app.db.session import get_db
from app.services.progress_service import ProgressService
from app.services.report_service import ReportService


def get_report_service(db: Session = Depends(get_db)) -> ReportService:
    return ReportService(db)


def get_progress_service(db: Session = Depends(get_db)) -> ProgressService:
    return ProgressService(db)
