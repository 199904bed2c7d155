"""
System catalog queries.

Fixed introspection statements (databases, tables with row counts, stored
procedures, views, column search) looked up by purpose from the active
dialect's template table.
"""

import logging

from querytool.dialects import SEARCH_STRING_PARAMETER, Dialect, SystemQuery, get_dialect
from querytool.exceptions import QueryBuildError

logger = logging.getLogger(__name__)


def resolve_system_query(query: SystemQuery | str) -> SystemQuery:
    """
    Resolve a SystemQuery member from itself or its value.

    Raises:
        QueryBuildError: If no query has that name
    """
    if isinstance(query, SystemQuery):
        return query
    try:
        return SystemQuery(query.lower().replace("-", "_"))
    except ValueError:
        available = ", ".join(q.value for q in SystemQuery)
        raise QueryBuildError(f"Unknown system query '{query}'. Available: {available}") from None


def get_system_query(query: SystemQuery | str, dialect: str | Dialect | None = None) -> str:
    """
    Get a catalog introspection statement.

    Args:
        query: SystemQuery member or its value (e.g., "view_list")
        dialect: Dialect name or instance

    Returns:
        SQL text; FIND_COLUMNS contains the ``@SearchString`` parameter
    """
    return get_dialect(dialect).get_system_queries()[resolve_system_query(query)]


def list_system_queries() -> list[str]:
    return [q.value for q in SystemQuery]


def build_table_list_query(
    min_rows: int | None = None, dialect: str | Dialect | None = None
) -> str:
    """
    Get the table list with row counts, optionally hiding small tables.

    Args:
        min_rows: Only list tables with at least this many rows (None for all)
        dialect: Dialect name or instance

    Raises:
        QueryBuildError: If ``min_rows`` is not a non-negative integer
    """
    d = get_dialect(dialect)
    query = d.get_system_queries()[SystemQuery.TABLE_LIST_WITH_ROW_COUNTS]
    if min_rows is None:
        return query

    if isinstance(min_rows, bool) or not isinstance(min_rows, int) or min_rows < 0:
        raise QueryBuildError(f"Minimum row count must be a non-negative integer, got {min_rows!r}")

    logger.debug(f"Filtering table list to tables with at least {min_rows} rows")
    return f"{query}\tAND {d.ROW_COUNT_COLUMN} >= {min_rows}\n"


def bind_search_string(query: str, pattern: str, dialect: str | Dialect | None = None) -> str:
    """Replace the ``@SearchString`` parameter with a quoted LIKE pattern."""
    return query.replace(SEARCH_STRING_PARAMETER, get_dialect(dialect).format_literal(pattern))
