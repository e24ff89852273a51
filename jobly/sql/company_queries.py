"""
Company Queries Module for the Jobly backend.

Provides parameterized PostgreSQL statements for the companies table. Every
statement projects rows as {handle, name, description, numEmployees, logoUrl}
so records convert directly to the Company model.
"""


# =============================================================================
# PROJECTIONS
# =============================================================================

COMPANY_COLUMNS: str = """
        handle,
        name,
        description,
        num_employees AS "numEmployees",
        logo_url AS "logoUrl"
"""

# Client field name -> column name for fields whose spelling differs
COMPANY_FIELD_COLUMNS = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


# =============================================================================
# READ QUERIES
# =============================================================================

def get_company_listing_query(where_sql: str = "") -> str:
    """
    Generate the company listing query, optionally filtered.

    Args:
        where_sql: AND-joined predicates from compose_company_filters, or ""
            for every company.

    Returns:
        Query ordered by company name.
    """
    where_clause = f"WHERE {where_sql}" if where_sql else ""
    return f"""
    SELECT {COMPANY_COLUMNS}
    FROM companies
    {where_clause}
    ORDER BY name
    """


def get_company_by_handle_query() -> str:
    """Single company by handle ($1)."""
    return f"""
    SELECT {COMPANY_COLUMNS}
    FROM companies
    WHERE handle = $1
    """


def get_company_exists_query() -> str:
    """Handle ($1) of an existing company, used for duplicate and reference checks."""
    return """
    SELECT handle
    FROM companies
    WHERE handle = $1
    """


def get_company_jobs_query() -> str:
    """Jobs owned by a company ($1), ordered by id."""
    return """
    SELECT id, title, salary, equity
    FROM jobs
    WHERE company_handle = $1
    ORDER BY id
    """


# =============================================================================
# WRITE QUERIES
# =============================================================================

def get_company_insert_query() -> str:
    """Insert (handle, name, description, num_employees, logo_url) as $1..$5."""
    return f"""
    INSERT INTO companies (handle, name, description, num_employees, logo_url)
    VALUES ($1, $2, $3, $4, $5)
    RETURNING {COMPANY_COLUMNS}
    """


def get_company_update_query(set_cols: str, handle_placeholder: str) -> str:
    """
    Generate the partial update statement for one company.

    Args:
        set_cols: Assignments from sql_for_partial_update.
        handle_placeholder: Placeholder for the handle, numbered after the
            assignment values.
    """
    return f"""
    UPDATE companies
    SET {set_cols}
    WHERE handle = {handle_placeholder}
    RETURNING {COMPANY_COLUMNS}
    """


def get_company_delete_query() -> str:
    """Delete by handle ($1); jobs cascade in the store."""
    return """
    DELETE FROM companies
    WHERE handle = $1
    RETURNING handle
    """
