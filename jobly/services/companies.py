"""
Company access layer.

Mirrors jobly.services.jobs for the companies table: stateless functions
taking a borrowed asyncpg connection first, raising BadRequestError /
NotFoundError, never retrying.
"""

import logging
from typing import Any, Dict, List, Mapping

from asyncpg import Connection
from asyncpg import exceptions as pg_exc

from jobly.core.errors import BadRequestError, NotFoundError
from jobly.models.schemas import CompanyNew
from jobly.services.common import prepare_update_fields
from jobly.sql import (
    COMPANY_FIELD_COLUMNS,
    CompanySearchCriteria,
    compose_company_filters,
    get_company_by_handle_query,
    get_company_delete_query,
    get_company_exists_query,
    get_company_insert_query,
    get_company_jobs_query,
    get_company_listing_query,
    get_company_update_query,
    sql_for_partial_update,
)


logger = logging.getLogger(__name__)

COMPANY_IDENTITY_FIELDS = frozenset({"handle"})

COMPANY_UPDATABLE_FIELDS = frozenset({"name", "description", "numEmployees", "logoUrl"})


async def create_company(db: Connection, company: CompanyNew) -> Dict[str, Any]:
    """
    Insert a company.

    Returns:
        {handle, name, description, numEmployees, logoUrl}

    Raises:
        BadRequestError: A company with this handle already exists.
    """
    async with db.transaction():
        existing = await db.fetchrow(get_company_exists_query(), company.handle)
        if existing is not None:
            raise BadRequestError(f"Duplicate company: {company.handle}")

        try:
            row = await db.fetchrow(
                get_company_insert_query(),
                company.handle,
                company.name,
                company.description,
                company.numEmployees,
                company.logoUrl,
            )
        except pg_exc.UniqueViolationError as exc:
            raise BadRequestError(f"Duplicate company: {company.handle}") from exc

    logger.info(f"Created company handle={company.handle}")
    return dict(row)


async def find_all_companies(db: Connection) -> List[Dict[str, Any]]:
    """Every company, ordered by name."""
    rows = await db.fetch(get_company_listing_query())
    return [dict(row) for row in rows]


async def search_companies(db: Connection, criteria: CompanySearchCriteria) -> List[Dict[str, Any]]:
    """
    Companies matching every supplied criterion.

    The min/max bound check happens when the criteria record is built, so an
    inverted range never reaches this function.

    Raises:
        NotFoundError: Criteria were supplied and no company matches them.
    """
    if criteria.is_empty():
        return await find_all_companies(db)

    where_sql, params = compose_company_filters(criteria)
    rows = await db.fetch(get_company_listing_query(where_sql), *params)

    if not rows:
        raise NotFoundError(f"No companies found with {criteria.describe()}")

    return [dict(row) for row in rows]


async def get_company(db: Connection, handle: str) -> Dict[str, Any]:
    """
    Company with its jobs as [{id, title, salary, equity}].

    Raises:
        NotFoundError: No company has this handle.
    """
    row = await db.fetchrow(get_company_by_handle_query(), handle)
    if row is None:
        raise NotFoundError(f"No company: {handle}")

    jobs = await db.fetch(get_company_jobs_query(), handle)

    company = dict(row)
    company["jobs"] = [dict(job) for job in jobs]
    return company


async def update_company(db: Connection, handle: str, data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Apply a partial update to a company; handle is dropped and never changes.

    Raises:
        BadRequestError: Nothing left to update, or an unknown field.
        NotFoundError: No company has this handle.
    """
    fields = prepare_update_fields(data, COMPANY_IDENTITY_FIELDS, COMPANY_UPDATABLE_FIELDS)
    update = sql_for_partial_update(fields, COMPANY_FIELD_COLUMNS)

    query = get_company_update_query(update.set_cols, f"${len(update.values) + 1}")
    row = await db.fetchrow(query, *update.values, handle)

    if row is None:
        raise NotFoundError(f"No company: {handle}")

    logger.info(f"Updated company handle={handle} fields={list(fields)}")
    return dict(row)


async def remove_company(db: Connection, handle: str) -> None:
    """
    Delete a company; the store cascades the delete to its jobs.

    Raises:
        NotFoundError: No company has this handle.
    """
    row = await db.fetchrow(get_company_delete_query(), handle)
    if row is None:
        raise NotFoundError(f"No company: {handle}")

    logger.info(f"Removed company handle={handle}")
