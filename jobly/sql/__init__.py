"""
SQL Query Module for the Jobly backend.

Provides:
- The partial update compiler (partial_update)
- Search criteria records and predicate composition (filters)
- Parameterized statements for jobs (job_queries) and companies
  (company_queries)

Follows the Repository Pattern: services in jobly.services combine these
pieces and execute them; nothing here touches a connection.

Example usage:
    from jobly.sql import (
        JobSearchCriteria,
        compose_job_filters,
        get_job_listing_query,
    )

    where_sql, params = compose_job_filters(JobSearchCriteria(min_salary=50000))
    rows = await db.fetch(get_job_listing_query(where_sql), *params)
"""

# =============================================================================
# PARTIAL UPDATE COMPILER
# =============================================================================

from jobly.sql.partial_update import (
    PartialUpdate,
    quote_identifier,
    sql_for_partial_update,
)

# =============================================================================
# FILTER COMPOSITION
# =============================================================================

from jobly.sql.filters import (
    JobSearchCriteria,
    CompanySearchCriteria,
    compose_job_filters,
    compose_company_filters,
)

# =============================================================================
# JOB QUERIES
# =============================================================================

from jobly.sql.job_queries import (
    get_job_listing_query,
    get_job_by_id_query,
    get_duplicate_job_query,
    get_job_insert_query,
    get_job_update_query,
    get_job_delete_query,
    JOB_FIELD_COLUMNS,
)

# =============================================================================
# COMPANY QUERIES
# =============================================================================

from jobly.sql.company_queries import (
    get_company_listing_query,
    get_company_by_handle_query,
    get_company_exists_query,
    get_company_jobs_query,
    get_company_insert_query,
    get_company_update_query,
    get_company_delete_query,
    COMPANY_FIELD_COLUMNS,
)

__all__ = [
    # Partial update compiler
    'PartialUpdate',
    'quote_identifier',
    'sql_for_partial_update',
    # Filter composition
    'JobSearchCriteria',
    'CompanySearchCriteria',
    'compose_job_filters',
    'compose_company_filters',
    # Job queries
    'get_job_listing_query',
    'get_job_by_id_query',
    'get_duplicate_job_query',
    'get_job_insert_query',
    'get_job_update_query',
    'get_job_delete_query',
    'JOB_FIELD_COLUMNS',
    # Company queries
    'get_company_listing_query',
    'get_company_by_handle_query',
    'get_company_exists_query',
    'get_company_jobs_query',
    'get_company_insert_query',
    'get_company_update_query',
    'get_company_delete_query',
    'COMPANY_FIELD_COLUMNS',
]
