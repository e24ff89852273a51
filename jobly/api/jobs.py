"""
FastAPI router module for jobs.

Key Endpoints:
- POST /jobs - Create a job (admin)
- GET /jobs - List jobs, filtered by title, minSalary and hasEquity
- GET /jobs/{job_id} - Job detail with company name
- PATCH /jobs/{job_id} - Partial update (admin)
- DELETE /jobs/{job_id} - Remove a job (admin)

The router only parses query strings into a JobSearchCriteria record; the
choice of predicates happens in jobly.sql.filters. A filtered search that
matches nothing answers 404, an unfiltered listing always answers 200.

Dependencies:
- jobly/core/dependencies.py: DBSessionDep, AdminUserDep
- jobly/services/jobs.py: job access layer
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Path, Query, status

from jobly.core.dependencies import AdminUserDep, DBSessionDep
from jobly.models.schemas import (
    PG_INT_MAX,
    JobDeletedResponse,
    JobListingResponse,
    JobListResponse,
    JobNew,
    JobResponse,
    JobUpdate,
)
from jobly.services import jobs as job_service
from jobly.sql import JobSearchCriteria


logger = logging.getLogger(__name__)

router = APIRouter()

# Ids are PostgreSQL INTEGERs; anything outside that range cannot name a job
JobIdPath = Annotated[int, Path(ge=0, le=PG_INT_MAX)]


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(job_data: JobNew, db: DBSessionDep, _admin: AdminUserDep) -> dict:
    """
    Create a job.

    Body: {title, salary, equity, companyHandle}
    Returns: {job: {id, title, salary, equity, companyHandle}}
    """
    job = await job_service.create_job(db, job_data)
    return {"job": job}


@router.get("", response_model=JobListResponse)
async def list_jobs(
    db: DBSessionDep,
    title: Optional[str] = Query(default=None, min_length=1, description="Case-insensitive title substring"),
    minSalary: Optional[int] = Query(default=None, ge=0, le=PG_INT_MAX, description="Inclusive minimum salary"),
    hasEquity: Optional[bool] = Query(default=None, description="Only jobs with equity > 0 when true"),
) -> dict:
    """
    List jobs, optionally filtered.

    Returns: {jobs: [{id, title, salary, equity, companyName}, ...]}
    """
    criteria = JobSearchCriteria(title=title, min_salary=minSalary, has_equity=hasEquity)
    jobs = await job_service.search_jobs(db, criteria)

    logger.debug(f"Listed {len(jobs)} jobs (filters: {criteria.describe() or 'none'})")
    return {"jobs": jobs}


@router.get("/{job_id}", response_model=JobListingResponse)
async def get_job(job_id: JobIdPath, db: DBSessionDep) -> dict:
    """Returns: {job: {id, title, salary, equity, companyName}}"""
    job = await job_service.get_job(db, job_id)
    return {"job": job}


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job(job_id: JobIdPath, job_data: JobUpdate, db: DBSessionDep, _admin: AdminUserDep) -> dict:
    """
    Update any of {title, salary, equity}.

    Returns: {job: {id, title, salary, equity, companyHandle}}
    """
    job = await job_service.update_job(db, job_id, job_data.model_dump(exclude_unset=True))
    return {"job": job}


@router.delete("/{job_id}", response_model=JobDeletedResponse)
async def delete_job(job_id: JobIdPath, db: DBSessionDep, _admin: AdminUserDep) -> dict:
    """Returns: {deleted: job_id}"""
    await job_service.remove_job(db, job_id)
    return {"deleted": job_id}


__all__ = ["router"]
