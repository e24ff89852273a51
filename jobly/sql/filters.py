"""
Filter predicate composition for job and company search.

Each search criterion is optional. The composers turn whichever criteria are
present into predicates with bound $-parameters and AND-join them, so one
function covers every combination of filters:

    criteria = JobSearchCriteria(title="eng", min_salary=90000)
    where_sql, params = compose_job_filters(criteria)
    # where_sql == "j.title ILIKE $1 ESCAPE '\\' AND j.salary >= $2"
    # params    == ["%eng%", 90000]

An empty criteria record composes to an empty WHERE fragment. There is no OR
anywhere in this module.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from jobly.core.errors import BadRequestError


# =============================================================================
# Criteria records
# =============================================================================


@dataclass(frozen=True)
class JobSearchCriteria:
    """
    Optional job filters.

    Attributes:
        title: Case-insensitive substring of the job title.
        min_salary: Inclusive lower bound on salary.
        has_equity: When True, only jobs with equity > 0. False means the
            same as absent: no equity constraint.
    """
    title: Optional[str] = None
    min_salary: Optional[int] = None
    has_equity: Optional[bool] = None

    def is_empty(self) -> bool:
        return self.title is None and self.min_salary is None and not self.has_equity

    def describe(self) -> str:
        parts = []
        if self.title is not None:
            parts.append(f"title like '{self.title}'")
        if self.min_salary is not None:
            parts.append(f"salary >= {self.min_salary}")
        if self.has_equity:
            parts.append("equity > 0")
        return " and ".join(parts)


@dataclass(frozen=True)
class CompanySearchCriteria:
    """
    Optional company filters.

    Attributes:
        name: Case-insensitive substring of the company name.
        min_employees: Inclusive lower bound on num_employees.
        max_employees: Inclusive upper bound on num_employees.
    """
    name: Optional[str] = None
    min_employees: Optional[int] = None
    max_employees: Optional[int] = None

    def __post_init__(self) -> None:
        if (
            self.min_employees is not None
            and self.max_employees is not None
            and self.min_employees > self.max_employees
        ):
            raise BadRequestError("minEmployees cannot be greater than maxEmployees")

    def is_empty(self) -> bool:
        return self.name is None and self.min_employees is None and self.max_employees is None

    def describe(self) -> str:
        parts = []
        if self.name is not None:
            parts.append(f"name like '{self.name}'")
        if self.min_employees is not None:
            parts.append(f"employees >= {self.min_employees}")
        if self.max_employees is not None:
            parts.append(f"employees <= {self.max_employees}")
        return " and ".join(parts)


# =============================================================================
# Composition
# =============================================================================


def _binder(params: List[Any]) -> Callable[[Any], str]:
    """Return bind(value) which appends value to params and yields its placeholder."""
    def bind(value: Any) -> str:
        params.append(value)
        return f"${len(params)}"
    return bind


# Literal match: the user text never contributes LIKE wildcards
LIKE_ESCAPE = "\\"


def _contains_pattern(text: str) -> str:
    escaped = (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def compose_job_filters(criteria: JobSearchCriteria) -> Tuple[str, List[Any]]:
    """
    Compose the WHERE fragment for a job search.

    Column references assume jobs is aliased as j.

    Returns:
        (where_sql, params): where_sql is "" when no criteria are present.
    """
    conditions: List[str] = []
    params: List[Any] = []
    bind = _binder(params)

    if criteria.title is not None:
        conditions.append(f"j.title ILIKE {bind(_contains_pattern(criteria.title))} ESCAPE '{LIKE_ESCAPE}'")
    if criteria.min_salary is not None:
        conditions.append(f"j.salary >= {bind(criteria.min_salary)}")
    if criteria.has_equity:
        conditions.append("j.equity > 0")

    return " AND ".join(conditions), params


def compose_company_filters(criteria: CompanySearchCriteria) -> Tuple[str, List[Any]]:
    """
    Compose the WHERE fragment for a company search.

    Returns:
        (where_sql, params): where_sql is "" when no criteria are present.
    """
    conditions: List[str] = []
    params: List[Any] = []
    bind = _binder(params)

    if criteria.name is not None:
        conditions.append(f"name ILIKE {bind(_contains_pattern(criteria.name))} ESCAPE '{LIKE_ESCAPE}'")
    if criteria.min_employees is not None:
        conditions.append(f"num_employees >= {bind(criteria.min_employees)}")
    if criteria.max_employees is not None:
        conditions.append(f"num_employees <= {bind(criteria.max_employees)}")

    return " AND ".join(conditions), params
