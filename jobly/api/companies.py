"""
FastAPI router module for companies.

Key Endpoints:
- POST /companies - Create a company (admin)
- GET /companies - List companies, filtered by name, minEmployees and maxEmployees
- GET /companies/{handle} - Company detail including its jobs
- PATCH /companies/{handle} - Partial update (admin)
- DELETE /companies/{handle} - Remove a company and its jobs (admin)

The short query names min and max are accepted as aliases of minEmployees and
maxEmployees. An inverted range (min > max) answers 400 before any query runs.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Query, status

from jobly.core.dependencies import AdminUserDep, DBSessionDep
from jobly.models.schemas import (
    PG_INT_MAX,
    CompanyDeletedResponse,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyNew,
    CompanyResponse,
    CompanyUpdate,
)
from jobly.services import companies as company_service
from jobly.sql import CompanySearchCriteria


logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
async def create_company(company_data: CompanyNew, db: DBSessionDep, _admin: AdminUserDep) -> dict:
    """
    Create a company.

    Body: {handle, name, description, numEmployees, logoUrl}
    Returns: {company: {handle, name, description, numEmployees, logoUrl}}
    """
    company = await company_service.create_company(db, company_data)
    return {"company": company}


@router.get("", response_model=CompanyListResponse)
async def list_companies(
    db: DBSessionDep,
    name: Optional[str] = Query(default=None, min_length=1, description="Case-insensitive name substring"),
    minEmployees: Optional[int] = Query(default=None, ge=0, le=PG_INT_MAX),
    maxEmployees: Optional[int] = Query(default=None, ge=0, le=PG_INT_MAX),
    min_alias: Optional[int] = Query(default=None, ge=0, le=PG_INT_MAX, alias="min", include_in_schema=False),
    max_alias: Optional[int] = Query(default=None, ge=0, le=PG_INT_MAX, alias="max", include_in_schema=False),
) -> dict:
    """
    List companies, optionally filtered.

    Returns: {companies: [{handle, name, description, numEmployees, logoUrl}, ...]}
    """
    criteria = CompanySearchCriteria(
        name=name,
        min_employees=minEmployees if minEmployees is not None else min_alias,
        max_employees=maxEmployees if maxEmployees is not None else max_alias,
    )
    companies = await company_service.search_companies(db, criteria)

    logger.debug(f"Listed {len(companies)} companies (filters: {criteria.describe() or 'none'})")
    return {"companies": companies}


@router.get("/{handle}", response_model=CompanyDetailResponse)
async def get_company(handle: str, db: DBSessionDep) -> dict:
    """Returns: {company: {handle, name, description, numEmployees, logoUrl, jobs}}"""
    company = await company_service.get_company(db, handle)
    return {"company": company}


@router.patch("/{handle}", response_model=CompanyResponse)
async def update_company(
    handle: str,
    company_data: CompanyUpdate,
    db: DBSessionDep,
    _admin: AdminUserDep,
) -> dict:
    """
    Update any of {name, description, numEmployees, logoUrl}.

    Returns: {company: {handle, name, description, numEmployees, logoUrl}}
    """
    company = await company_service.update_company(db, handle, company_data.model_dump(exclude_unset=True))
    return {"company": company}


@router.delete("/{handle}", response_model=CompanyDeletedResponse)
async def delete_company(handle: str, db: DBSessionDep, _admin: AdminUserDep) -> dict:
    """Returns: {deleted: handle}"""
    await company_service.remove_company(db, handle)
    return {"deleted": handle}


__all__ = ["router"]
