"""
Jobly API package initialization.

This package contains FastAPI router modules:
- companies: company CRUD and search
- jobs: job CRUD and search
"""

from fastapi import APIRouter

from jobly.api.companies import router as companies_router
from jobly.api.jobs import router as jobs_router

api_router = APIRouter()

api_router.include_router(companies_router, prefix="/companies", tags=["companies"])
api_router.include_router(jobs_router, prefix="/jobs", tags=["jobs"])

__all__ = [
    "api_router",
    "companies_router",
    "jobs_router",
]
