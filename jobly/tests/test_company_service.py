"""
Unit tests for the company access layer (jobly/services/companies.py).
"""

from decimal import Decimal

import pytest
from asyncpg import exceptions as pg_exc

from jobly.core.errors import BadRequestError, NotFoundError
from jobly.models.schemas import CompanyNew
from jobly.services import companies as company_service
from jobly.sql import CompanySearchCriteria


pytestmark = pytest.mark.asyncio


NEW_COMPANY = CompanyNew(
    handle="new",
    name="New",
    description="New Description",
    numEmployees=1,
    logoUrl="http://new.img",
)


class TestCreateCompany:

    async def test_inserts_and_returns_row(self, mock_db_conn) -> None:
        inserted = NEW_COMPANY.model_dump()
        mock_db_conn.fetchrow.side_effect = [None, inserted]

        company = await company_service.create_company(mock_db_conn, NEW_COMPANY)

        assert company == inserted
        mock_db_conn.transaction.assert_called_once()
        insert_call = mock_db_conn.fetchrow.await_args_list[1]
        assert "INSERT INTO companies" in insert_call.args[0]
        assert insert_call.args[1:] == ("new", "New", "New Description", 1, "http://new.img")

    async def test_duplicate_handle_is_rejected(self, mock_db_conn) -> None:
        mock_db_conn.fetchrow.side_effect = [{"handle": "new"}]

        with pytest.raises(BadRequestError, match="Duplicate company: new"):
            await company_service.create_company(mock_db_conn, NEW_COMPANY)

        assert mock_db_conn.fetchrow.await_count == 1

    async def test_unique_violation_on_insert_reports_duplicate(self, mock_db_conn) -> None:
        mock_db_conn.fetchrow.side_effect = [
            None,
            pg_exc.UniqueViolationError("duplicate key value"),
        ]

        with pytest.raises(BadRequestError, match="Duplicate company: new"):
            await company_service.create_company(mock_db_conn, NEW_COMPANY)


class TestSearchCompanies:

    async def test_find_all_is_ordered_by_name(self, mock_db_conn, company_rows) -> None:
        mock_db_conn.fetch.return_value = company_rows

        companies = await company_service.find_all_companies(mock_db_conn)

        assert [c["handle"] for c in companies] == ["c1", "c2", "c3"]
        assert "ORDER BY name" in mock_db_conn.fetch.await_args.args[0]

    async def test_range_filter(self, mock_db_conn, company_rows) -> None:
        mock_db_conn.fetch.return_value = company_rows[1:]

        companies = await company_service.search_companies(
            mock_db_conn, CompanySearchCriteria(min_employees=2, max_employees=3)
        )

        assert len(companies) == 2
        query, *params = mock_db_conn.fetch.await_args.args
        assert "WHERE num_employees >= $1 AND num_employees <= $2" in query
        assert params == [2, 3]

    async def test_no_match_raises_not_found(self, mock_db_conn) -> None:
        mock_db_conn.fetch.return_value = []

        with pytest.raises(NotFoundError) as exc_info:
            await company_service.search_companies(mock_db_conn, CompanySearchCriteria(name="zzz"))

        assert exc_info.value.message == "No companies found with name like 'zzz'"

    async def test_empty_criteria_returns_empty_list(self, mock_db_conn) -> None:
        mock_db_conn.fetch.return_value = []

        assert await company_service.search_companies(mock_db_conn, CompanySearchCriteria()) == []


class TestGetCompany:

    async def test_includes_jobs(self, mock_db_conn, company_rows) -> None:
        mock_db_conn.fetchrow.return_value = company_rows[0]
        mock_db_conn.fetch.return_value = [
            {"id": 1, "title": "j1", "salary": 1, "equity": Decimal("0.1")},
        ]

        company = await company_service.get_company(mock_db_conn, "c1")

        assert company["handle"] == "c1"
        assert company["jobs"] == [{"id": 1, "title": "j1", "salary": 1, "equity": Decimal("0.1")}]
        assert mock_db_conn.fetch.await_args.args[1:] == ("c1",)

    async def test_company_without_jobs(self, mock_db_conn, company_rows) -> None:
        mock_db_conn.fetchrow.return_value = company_rows[2]

        company = await company_service.get_company(mock_db_conn, "c3")

        assert company["jobs"] == []

    async def test_missing_raises_not_found(self, mock_db_conn) -> None:
        with pytest.raises(NotFoundError, match="No company: nope"):
            await company_service.get_company(mock_db_conn, "nope")

        mock_db_conn.fetch.assert_not_awaited()


class TestUpdateCompany:

    async def test_maps_field_names_to_columns(self, mock_db_conn, company_rows) -> None:
        mock_db_conn.fetchrow.return_value = {**company_rows[0], "numEmployees": 10, "logoUrl": None}

        company = await company_service.update_company(
            mock_db_conn, "c1", {"numEmployees": 10, "logoUrl": None}
        )

        assert company["numEmployees"] == 10
        query, *params = mock_db_conn.fetchrow.await_args.args
        assert '"num_employees"=$1, "logo_url"=$2' in query
        assert "WHERE handle = $3" in query
        assert params == [10, None, "c1"]

    async def test_handle_is_dropped(self, mock_db_conn, company_rows) -> None:
        mock_db_conn.fetchrow.return_value = company_rows[0]

        await company_service.update_company(mock_db_conn, "c1", {"handle": "other", "name": "C1"})

        query, *params = mock_db_conn.fetchrow.await_args.args
        assert 'SET "name"=$1' in query
        assert params == ["C1", "c1"]

    async def test_empty_update_is_no_data(self, mock_db_conn) -> None:
        with pytest.raises(BadRequestError, match="No data"):
            await company_service.update_company(mock_db_conn, "c1", {})

    async def test_missing_raises_not_found(self, mock_db_conn) -> None:
        with pytest.raises(NotFoundError):
            await company_service.update_company(mock_db_conn, "nope", {"name": "x"})


class TestRemoveCompany:

    async def test_removes(self, mock_db_conn) -> None:
        mock_db_conn.fetchrow.return_value = {"handle": "c1"}

        await company_service.remove_company(mock_db_conn, "c1")

        assert mock_db_conn.fetchrow.await_args.args[1:] == ("c1",)

    async def test_missing_raises_not_found(self, mock_db_conn) -> None:
        with pytest.raises(NotFoundError, match="No company: nope"):
            await company_service.remove_company(mock_db_conn, "nope")
