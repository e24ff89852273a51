"""
Package initialization file for Jobly models.

Re-exports the Pydantic schemas so other modules can import them from
jobly.models directly.

Usage:
    from jobly.models import JobNew, JobUpdate, CompanyDetail
"""

from jobly.models.schemas import (
    # Identity
    UserIdentity,
    # Companies
    CompanyNew,
    CompanyUpdate,
    Company,
    CompanyJob,
    CompanyDetail,
    CompanyResponse,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyDeletedResponse,
    # Jobs
    JobNew,
    JobUpdate,
    Job,
    JobListing,
    JobResponse,
    JobListingResponse,
    JobListResponse,
    JobDeletedResponse,
)

__all__ = [
    'UserIdentity',
    'CompanyNew',
    'CompanyUpdate',
    'Company',
    'CompanyJob',
    'CompanyDetail',
    'CompanyResponse',
    'CompanyDetailResponse',
    'CompanyListResponse',
    'CompanyDeletedResponse',
    'JobNew',
    'JobUpdate',
    'Job',
    'JobListing',
    'JobResponse',
    'JobListingResponse',
    'JobListResponse',
    'JobDeletedResponse',
]
