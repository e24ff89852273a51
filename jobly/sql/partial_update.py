"""
Partial update compiler.

Builds the SET clause of an UPDATE statement from a sparse mapping of
client-facing field names to new values:

    >>> sql_for_partial_update(
    ...     {"firstName": "Dylan", "lastName": "Steele", "email": "x"},
    ...     {"firstName": "first_name", "lastName": "last_name"},
    ... )
    PartialUpdate(set_cols='"first_name"=$1, "last_name"=$2, "email"=$3', values=['Dylan', 'Steele', 'x'])

The Nth $-placeholder in set_cols always refers to values[N-1], so callers
append their own WHERE parameters after the returned values, starting at
placeholder len(values) + 1:

    update = sql_for_partial_update(data, {"numEmployees": "num_employees"})
    await db.fetchrow(
        f"UPDATE companies SET {update.set_cols} WHERE handle = ${len(update.values) + 1}",
        *update.values, handle,
    )

The compiler is entity-agnostic. Column names are quoted, but keys are not
checked against any schema: callers must only pass keys they recognize.
"""

from typing import Any, List, Mapping, NamedTuple

from jobly.core.errors import BadRequestError


class PartialUpdate(NamedTuple):
    set_cols: str
    values: List[Any]


def quote_identifier(name: str) -> str:
    """Double-quote a PostgreSQL identifier, doubling embedded quotes."""
    escaped = name.replace('"', '""')
    return f'"{escaped}"'


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Mapping[str, str],
) -> PartialUpdate:
    """
    Compile a partial update into a SET clause and its ordered values.

    Args:
        data_to_update: Field name -> new value, in the order the
            assignments should be emitted.
        js_to_sql: Field name -> column name for fields whose storage name
            differs. Fields missing from it are used as column names as-is.

    Returns:
        PartialUpdate with the comma-joined assignments and the values in
        placeholder order.

    Raises:
        BadRequestError: If data_to_update is empty.
    """
    if not data_to_update:
        raise BadRequestError("No data")

    cols = [
        f"{quote_identifier(js_to_sql.get(col_name, col_name))}=${idx}"
        for idx, col_name in enumerate(data_to_update, start=1)
    ]

    return PartialUpdate(
        set_cols=", ".join(cols),
        values=list(data_to_update.values()),
    )
