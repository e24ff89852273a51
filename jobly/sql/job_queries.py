"""
Job Queries Module for the Jobly backend.

Provides parameterized PostgreSQL statements for the jobs table. Read queries
join jobs to companies and project each row as
{id, title, salary, equity, companyName}; write queries return
{id, title, salary, equity, companyHandle}.

All statements use asyncpg $n placeholders. Functions that splice in a
generated fragment (a WHERE clause or SET clause) only accept fragments
produced by jobly.sql.filters and jobly.sql.partial_update.
"""

from typing import Dict


# =============================================================================
# PROJECTIONS
# =============================================================================

# Columns returned by list, search and single-job reads
JOB_LISTING_COLUMNS: str = """
        j.id,
        j.title,
        j.salary,
        j.equity,
        c.name AS "companyName"
"""

# Columns returned by insert and update
JOB_RETURNING_COLUMNS: str = 'id, title, salary, equity, company_handle AS "companyHandle"'

# Updatable job fields already share their column names
JOB_FIELD_COLUMNS: Dict[str, str] = {}


# =============================================================================
# READ QUERIES
# =============================================================================

def get_job_listing_query(where_sql: str = "") -> str:
    """
    Generate the job listing query, optionally filtered.

    Args:
        where_sql: AND-joined predicates from compose_job_filters, or "" for
            every job.

    Returns:
        Query ordered by job id so results are stable across calls.
    """
    where_clause = f"WHERE {where_sql}" if where_sql else ""
    return f"""
    SELECT {JOB_LISTING_COLUMNS}
    FROM jobs AS j
    JOIN companies AS c ON j.company_handle = c.handle
    {where_clause}
    ORDER BY j.id
    """


def get_job_by_id_query() -> str:
    """Single job by id ($1) with the company name projection."""
    return f"""
    SELECT {JOB_LISTING_COLUMNS}
    FROM jobs AS j
    JOIN companies AS c ON j.company_handle = c.handle
    WHERE j.id = $1
    """


def get_duplicate_job_query() -> str:
    """Existing job with the same title ($1) at the same company ($2)."""
    return """
    SELECT id
    FROM jobs
    WHERE title = $1 AND company_handle = $2
    """


# =============================================================================
# WRITE QUERIES
# =============================================================================

def get_job_insert_query() -> str:
    """Insert (title, salary, equity, company_handle) as $1..$4."""
    return f"""
    INSERT INTO jobs (title, salary, equity, company_handle)
    VALUES ($1, $2, $3, $4)
    RETURNING {JOB_RETURNING_COLUMNS}
    """


def get_job_update_query(set_cols: str, id_placeholder: str) -> str:
    """
    Generate the partial update statement for one job.

    Args:
        set_cols: Assignments from sql_for_partial_update.
        id_placeholder: Placeholder for the job id, numbered after the
            assignment values (e.g. "$4" after three assignments).
    """
    return f"""
    UPDATE jobs
    SET {set_cols}
    WHERE id = {id_placeholder}
    RETURNING {JOB_RETURNING_COLUMNS}
    """


def get_job_delete_query() -> str:
    """Delete by id ($1); returns the id when a row was removed."""
    return """
    DELETE FROM jobs
    WHERE id = $1
    RETURNING id
    """
