"""
Tests for filter predicate composition (jobly/sql/filters.py).
"""

import pytest

from jobly.core.errors import BadRequestError
from jobly.sql.filters import (
    CompanySearchCriteria,
    JobSearchCriteria,
    compose_company_filters,
    compose_job_filters,
)


class TestComposeJobFilters:

    def test_no_criteria(self) -> None:
        assert compose_job_filters(JobSearchCriteria()) == ("", [])

    def test_title_is_wildcarded_ilike(self) -> None:
        where_sql, params = compose_job_filters(JobSearchCriteria(title="J2"))

        assert where_sql == "j.title ILIKE $1 ESCAPE '\\'"
        assert params == ["%J2%"]

    @pytest.mark.parametrize(
        "title, pattern",
        [
            ("50%", "%50\\%%"),
            ("a_b", "%a\\_b%"),
            ("c:\\temp", "%c:\\\\temp%"),
        ],
    )
    def test_title_wildcards_match_literally(self, title, pattern) -> None:
        _, params = compose_job_filters(JobSearchCriteria(title=title))

        assert params == [pattern]

    def test_min_salary_is_inclusive(self) -> None:
        where_sql, params = compose_job_filters(JobSearchCriteria(min_salary=2))

        assert where_sql == "j.salary >= $1"
        assert params == [2]

    def test_has_equity_binds_nothing(self) -> None:
        assert compose_job_filters(JobSearchCriteria(has_equity=True)) == ("j.equity > 0", [])

    def test_has_equity_false_adds_no_constraint(self) -> None:
        assert compose_job_filters(JobSearchCriteria(has_equity=False)) == ("", [])

    def test_all_criteria_are_and_joined_in_order(self) -> None:
        where_sql, params = compose_job_filters(
            JobSearchCriteria(title="j", min_salary=45, has_equity=True)
        )

        assert where_sql == "j.title ILIKE $1 ESCAPE '\\' AND j.salary >= $2 AND j.equity > 0"
        assert params == ["%j%", 45]
        assert " OR " not in where_sql

    def test_salary_and_equity_number_from_one(self) -> None:
        where_sql, params = compose_job_filters(JobSearchCriteria(min_salary=50, has_equity=True))

        assert where_sql == "j.salary >= $1 AND j.equity > 0"
        assert params == [50]

    @pytest.mark.parametrize(
        "criteria, empty",
        [
            (JobSearchCriteria(), True),
            (JobSearchCriteria(has_equity=False), True),
            (JobSearchCriteria(has_equity=True), False),
            (JobSearchCriteria(min_salary=0), False),
            (JobSearchCriteria(title="x"), False),
        ],
    )
    def test_is_empty(self, criteria, empty) -> None:
        assert criteria.is_empty() is empty


class TestComposeCompanyFilters:

    def test_no_criteria(self) -> None:
        assert compose_company_filters(CompanySearchCriteria()) == ("", [])

    def test_all_criteria(self) -> None:
        where_sql, params = compose_company_filters(
            CompanySearchCriteria(name="net", min_employees=10, max_employees=500)
        )

        assert where_sql == "name ILIKE $1 ESCAPE '\\' AND num_employees >= $2 AND num_employees <= $3"
        assert params == ["%net%", 10, 500]

    def test_name_wildcards_match_literally(self) -> None:
        _, params = compose_company_filters(CompanySearchCriteria(name="100%_net"))

        assert params == ["%100\\%\\_net%"]

    def test_only_max_bound(self) -> None:
        where_sql, params = compose_company_filters(CompanySearchCriteria(max_employees=2))

        assert where_sql == "num_employees <= $1"
        assert params == [2]

    def test_large_bound_is_not_a_sentinel(self) -> None:
        where_sql, params = compose_company_filters(CompanySearchCriteria(max_employees=7000000))

        assert params == [7000000]

    def test_min_greater_than_max_raises(self) -> None:
        with pytest.raises(BadRequestError):
            CompanySearchCriteria(min_employees=10, max_employees=2)

    def test_equal_bounds_are_allowed(self) -> None:
        criteria = CompanySearchCriteria(min_employees=3, max_employees=3)

        assert compose_company_filters(criteria) == (
            "num_employees >= $1 AND num_employees <= $2",
            [3, 3],
        )
