"""
Helpers for composing parameterized SQL.

Placeholders are named ``:p1``, ``:p2``, ... so that placeholder *k* binds to
the *k*-th entry of the accompanying values list.
"""
from typing import Any, List, Mapping, Sequence, Tuple

from sqlalchemy import TextClause, bindparam, text

from jobly.core.exceptions import BadRequestException


def placeholder(position: int) -> str:
    """Placeholder for the value at 1-based ``position``."""
    return f":p{position}"


def sql_for_partial_update(
    data: Mapping[str, Any],
    column_map: Mapping[str, str],
) -> Tuple[str, List[Any]]:
    """
    Build the SET clause of a partial update.

    Args:
        data: fields to change, e.g. ``{"numEmployees": 4, "name": "Acme"}``
        column_map: storage names for fields whose column differs from the
            field name, e.g. ``{"numEmployees": "num_employees"}``

    Returns:
        ``('"num_employees"=:p1, "name"=:p2', [4, "Acme"])``

    Raises:
        BadRequestException: if ``data`` is empty
    """
    if not data:
        raise BadRequestException("No data")

    cols = [
        f'"{column_map.get(field, field)}"={placeholder(idx)}'
        for idx, field in enumerate(data, start=1)
    ]
    return ", ".join(cols), list(data.values())


def where_clause(conditions: Sequence[str]) -> str:
    """Join predicate fragments with AND; empty input gives an empty string."""
    if not conditions:
        return ""
    return "WHERE " + " AND ".join(conditions)


def bind(sql: str, values: Sequence[Any] = ()) -> TextClause:
    """
    Attach positional ``values`` to the ``:pN`` placeholders of ``sql``.

    Each bind parameter takes its SQL type from its Python value, so e.g.
    ``Decimal`` equity is sent as NUMERIC on every backend.
    """
    params = [
        bindparam(f"p{idx}", value)
        for idx, value in enumerate(values, start=1)
    ]
    return text(sql).bindparams(*params)
