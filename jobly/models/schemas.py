"""
Pydantic request/response models for the Jobly FastAPI backend.

Field names use the client-facing camelCase spelling. Storage rows are
aliased to the same names in SQL (e.g. company_handle AS "companyHandle"), so
a fetched record converts to these models with model_validate(dict(row)).

Request models reject unknown fields, which keeps arbitrary keys away from the
partial-update compiler. Decimal equity values serialize as strings
(e.g. "0.1"), matching how PostgreSQL NUMERIC values round-trip.

All models use Pydantic v2 syntax.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Shared field constraints
HANDLE_MAX_LENGTH = 25
# Largest value a PostgreSQL INTEGER column or parameter accepts
PG_INT_MAX = 2**31 - 1
URL_PATTERN = r"^https?://\S+$"


def _reject_null(value: Optional[str]) -> str:
    """Update fields left out of a PATCH body are skipped; an explicit null is not."""
    if value is None:
        raise ValueError("may not be null")
    return value


# =============================================================================
# Identity
# =============================================================================


class UserIdentity(BaseModel):
    """Identity decoded from a bearer token."""

    username: str = Field(..., min_length=1)
    isAdmin: bool = False


# =============================================================================
# Company Models
# =============================================================================


class CompanyNew(BaseModel):
    """
    Body of POST /companies.

    handle is the company's immutable natural key.
    """
    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "handle": "acme",
                "name": "Acme Corp",
                "description": "Anvils and rockets",
                "numEmployees": 120,
                "logoUrl": "https://acme.example/logo.png",
            }
        },
    )

    handle: str = Field(..., min_length=1, max_length=HANDLE_MAX_LENGTH)
    name: str = Field(..., min_length=1)
    description: str = Field(default="", description="Free-text description")
    numEmployees: Optional[int] = Field(default=None, ge=0, le=PG_INT_MAX)
    logoUrl: Optional[str] = Field(default=None, pattern=URL_PATTERN)


class CompanyUpdate(BaseModel):
    """Body of PATCH /companies/{handle}; every field optional, handle excluded."""
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    numEmployees: Optional[int] = Field(default=None, ge=0, le=PG_INT_MAX)
    logoUrl: Optional[str] = Field(default=None, pattern=URL_PATTERN)

    @field_validator("name", "description")
    @classmethod
    def not_null(cls, value: Optional[str]) -> str:
        return _reject_null(value)


class Company(BaseModel):
    handle: str
    name: str
    description: Optional[str] = None
    numEmployees: Optional[int] = None
    logoUrl: Optional[str] = None


class CompanyJob(BaseModel):
    """A job as listed under its owning company."""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None


class CompanyDetail(Company):
    jobs: List[CompanyJob] = Field(default_factory=list)


class CompanyResponse(BaseModel):
    company: Company


class CompanyDetailResponse(BaseModel):
    company: CompanyDetail


class CompanyListResponse(BaseModel):
    companies: List[Company]


class CompanyDeletedResponse(BaseModel):
    deleted: str


# =============================================================================
# Job Models
# =============================================================================


class JobNew(BaseModel):
    """Body of POST /jobs."""
    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "title": "sales associate",
                "salary": 55000,
                "equity": "0.05",
                "companyHandle": "acme",
            }
        },
    )

    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(default=None, ge=0, le=PG_INT_MAX)
    equity: Optional[Decimal] = Field(default=None, ge=0, le=1)
    companyHandle: str = Field(..., min_length=1, max_length=HANDLE_MAX_LENGTH)


class JobUpdate(BaseModel):
    """Body of PATCH /jobs/{id}; id and companyHandle cannot be changed."""
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    title: Optional[str] = Field(default=None, min_length=1)
    salary: Optional[int] = Field(default=None, ge=0, le=PG_INT_MAX)
    equity: Optional[Decimal] = Field(default=None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def not_null(cls, value: Optional[str]) -> str:
        return _reject_null(value)


class Job(BaseModel):
    """A job as stored: returned by create and update."""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    companyHandle: str


class JobListing(BaseModel):
    """A job joined to its company: returned by list, search and get."""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    companyName: str


class JobResponse(BaseModel):
    job: Job


class JobListingResponse(BaseModel):
    job: JobListing


class JobListResponse(BaseModel):
    jobs: List[JobListing]


class JobDeletedResponse(BaseModel):
    deleted: int
