"""Business logic services."""

from app.services.progress_service import ProgressService
from app.services.report_service import ReportService
from app.services.sample_store import SampleStore

__all__ = [
    "ProgressService",
    "ReportService",
    "SampleStore",
]
