"""
Report endpoints: generate, list and view progress reports.
"""

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_report_service
from app.core.config import settings
from app.schemas.report import ChartUrlResponse, ReportCreate, ReportResponse, ReportSummaryResponse
from app.services.report_service import ReportService

router = APIRouter()


@router.post("/{subject_id}", summary="Generate a report for an explicit period.", response_model=ReportResponse,
             status_code=status.HTTP_201_CREATED, )
def generate_report(subject_id: int, data: ReportCreate, service: ReportService = Depends(get_report_service), ):
    return service.generate(subject_id, data.period_start, data.period_end, data.kind, data.metrics)


@router.post("/{subject_id}/monthly", summary="Generate the report of the last month.",
             response_model=ReportResponse, status_code=status.HTTP_201_CREATED, )
def generate_monthly_report(subject_id: int, service: ReportService = Depends(get_report_service), ):
    return service.generate_monthly(subject_id)


@router.post("/{subject_id}/program", summary="Generate the end-of-program report.", response_model=ReportResponse,
             status_code=status.HTTP_201_CREATED, )
def generate_program_report(subject_id: int, service: ReportService = Depends(get_report_service), ):
    return service.generate_program_completion(subject_id)


@router.get("/{subject_id}", summary="List a subject's reports, newest first.",
            response_model=list[ReportSummaryResponse], )
def list_reports(subject_id: int,
                 limit: int = Query(settings.REPORT_HISTORY_LIMIT, ge=1, le=100, description="Maximum reports"),
                 service: ReportService = Depends(get_report_service), ):
    return service.list_reports(subject_id, limit)


@router.get("/id/{report_id}", summary="Get a stored report.", response_model=ReportResponse, )
def get_report(report_id: int, service: ReportService = Depends(get_report_service)):
    return service.get_report(report_id)


@router.get("/id/{report_id}/charts", summary="Get image URLs for a report's charts.",
            response_model=list[ChartUrlResponse], )
def get_report_charts(report_id: int, service: ReportService = Depends(get_report_service)):
    return service.chart_urls(report_id)
