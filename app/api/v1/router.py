"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import progress, reports

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    reports.router, prefix="/reports", tags=["Reports"]
)
api_router.include_router(
    progress.router, prefix="/progress", tags=["Progress"]
)
