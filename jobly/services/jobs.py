"""
Job access layer.

Stateless async functions that run job statements on a borrowed asyncpg
connection. Every function takes the connection first so the API layer can
pass the one injected by get_db_session:

    job = await create_job(db, JobNew(title="j1", salary=1, companyHandle="c1"))
    jobs = await search_jobs(db, JobSearchCriteria(title="j", has_equity=True))

Failures surface as BadRequestError / NotFoundError; store errors other than
the constraint violations translated in create_job propagate unchanged.

Search contract:
- A search with at least one criterion that matches nothing raises
  NotFoundError rather than returning an empty list.
- A search with no criteria returns every job (possibly none).
"""

import logging
from typing import Any, Dict, List, Mapping

from asyncpg import Connection
from asyncpg import exceptions as pg_exc

from jobly.core.errors import BadRequestError, NotFoundError
from jobly.models.schemas import JobNew
from jobly.services.common import prepare_update_fields
from jobly.sql import (
    JOB_FIELD_COLUMNS,
    JobSearchCriteria,
    compose_job_filters,
    get_company_exists_query,
    get_duplicate_job_query,
    get_job_by_id_query,
    get_job_delete_query,
    get_job_insert_query,
    get_job_listing_query,
    get_job_update_query,
    sql_for_partial_update,
)


logger = logging.getLogger(__name__)

# Never written by update_job, even when present in the request
JOB_IDENTITY_FIELDS = frozenset({"id", "companyHandle"})

JOB_UPDATABLE_FIELDS = frozenset({"title", "salary", "equity"})


# =============================================================================
# Create
# =============================================================================


async def create_job(db: Connection, job: JobNew) -> Dict[str, Any]:
    """
    Insert a job after checking its invariants.

    The duplicate check, the company check and the insert share one
    transaction. If a concurrent request slips past the checks, the store's
    unique / foreign-key constraints fire on insert and are reported the same
    way as the checks.

    Returns:
        {id, title, salary, equity, companyHandle}

    Raises:
        BadRequestError: Duplicate (title, companyHandle), or companyHandle
            does not name an existing company.
    """
    async with db.transaction():
        duplicate = await db.fetchrow(get_duplicate_job_query(), job.title, job.companyHandle)
        if duplicate is not None:
            raise BadRequestError(f"Duplicate job: {job.title}")

        company = await db.fetchrow(get_company_exists_query(), job.companyHandle)
        if company is None:
            raise BadRequestError(f"Invalid companyHandle: {job.companyHandle}")

        try:
            row = await db.fetchrow(
                get_job_insert_query(),
                job.title,
                job.salary,
                job.equity,
                job.companyHandle,
            )
        except pg_exc.UniqueViolationError as exc:
            raise BadRequestError(f"Duplicate job: {job.title}") from exc
        except pg_exc.ForeignKeyViolationError as exc:
            raise BadRequestError(f"Invalid companyHandle: {job.companyHandle}") from exc

    logger.info(f"Created job id={row['id']} title={job.title!r} company={job.companyHandle}")
    return dict(row)


# =============================================================================
# Read
# =============================================================================


async def find_all_jobs(db: Connection) -> List[Dict[str, Any]]:
    """Every job as {id, title, salary, equity, companyName}, ordered by id."""
    rows = await db.fetch(get_job_listing_query())
    return [dict(row) for row in rows]


async def search_jobs(db: Connection, criteria: JobSearchCriteria) -> List[Dict[str, Any]]:
    """
    Jobs matching every supplied criterion.

    Raises:
        NotFoundError: Criteria were supplied and no job matches them.
    """
    if criteria.is_empty():
        return await find_all_jobs(db)

    where_sql, params = compose_job_filters(criteria)
    rows = await db.fetch(get_job_listing_query(where_sql), *params)

    if not rows:
        raise NotFoundError(f"No jobs found with {criteria.describe()}")

    return [dict(row) for row in rows]


async def get_job(db: Connection, job_id: int) -> Dict[str, Any]:
    """
    Single job with its company name.

    Raises:
        NotFoundError: No job has this id.
    """
    row = await db.fetchrow(get_job_by_id_query(), job_id)
    if row is None:
        raise NotFoundError(f"No job found with id {job_id}")
    return dict(row)


# =============================================================================
# Update / Delete
# =============================================================================


async def update_job(db: Connection, job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Apply a partial update to a job.

    id and companyHandle are dropped from data without error; they never
    change.

    Returns:
        {id, title, salary, equity, companyHandle}

    Raises:
        BadRequestError: Nothing left to update, or an unknown field.
        NotFoundError: No job has this id.
    """
    fields = prepare_update_fields(data, JOB_IDENTITY_FIELDS, JOB_UPDATABLE_FIELDS)
    update = sql_for_partial_update(fields, JOB_FIELD_COLUMNS)

    query = get_job_update_query(update.set_cols, f"${len(update.values) + 1}")
    row = await db.fetchrow(query, *update.values, job_id)

    if row is None:
        raise NotFoundError(f"No job found with id {job_id}")

    logger.info(f"Updated job id={job_id} fields={list(fields)}")
    return dict(row)


async def remove_job(db: Connection, job_id: int) -> None:
    """
    Delete a job.

    Raises:
        NotFoundError: No job has this id.
    """
    row = await db.fetchrow(get_job_delete_query(), job_id)
    if row is None:
        raise NotFoundError(f"No job found with id {job_id}")

    logger.info(f"Removed job id={job_id}")
