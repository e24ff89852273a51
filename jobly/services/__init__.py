"""
Jobly Services Module

Entity access layer for companies and jobs. Each service is stateless: it
takes a borrowed asyncpg connection, builds statements with jobly.sql, runs
them, and raises BadRequestError / NotFoundError on failure.

Services:
- companies: company CRUD and search
- jobs: job CRUD and search

All services are consumed by the API layer (jobly.api).
"""

# =============================================================================
# Company Service Exports
# =============================================================================

from jobly.services.companies import (
    create_company,
    find_all_companies,
    search_companies,
    get_company,
    update_company,
    remove_company,
    COMPANY_IDENTITY_FIELDS,
    COMPANY_UPDATABLE_FIELDS,
)

# =============================================================================
# Job Service Exports
# =============================================================================

from jobly.services.jobs import (
    create_job,
    find_all_jobs,
    search_jobs,
    get_job,
    update_job,
    remove_job,
    JOB_IDENTITY_FIELDS,
    JOB_UPDATABLE_FIELDS,
)

__all__ = [
    # Companies
    'create_company',
    'find_all_companies',
    'search_companies',
    'get_company',
    'update_company',
    'remove_company',
    'COMPANY_IDENTITY_FIELDS',
    'COMPANY_UPDATABLE_FIELDS',
    # Jobs
    'create_job',
    'find_all_jobs',
    'search_jobs',
    'get_job',
    'update_job',
    'remove_job',
    'JOB_IDENTITY_FIELDS',
    'JOB_UPDATABLE_FIELDS',
]
