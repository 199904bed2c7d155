"""
Catalog command implementation.
"""

import typer

from querytool.catalog import (
    bind_search_string,
    build_table_list_query,
    get_system_query,
    resolve_system_query,
)
from querytool.cli.context import CommandContext
from querytool.dialects import SystemQuery
from querytool.exceptions import QueryBuildError, QueryToolError


def cmd_catalog(
    query_name: str,
    min_rows: int | None = None,
    search: str | None = None,
    dialect: str | None = None,
    config_path: str | None = None,
    verbose: bool = False,
) -> None:
    """
    Print a catalog introspection query.

    Args:
        query_name: SystemQuery value (e.g., "view_list")
        min_rows: Minimum row count (table_list_with_row_counts only)
        search: LIKE pattern bound to @SearchString (find_columns only)
    """
    ctx = CommandContext(dialect=dialect, config_path=config_path, verbose=verbose)

    try:
        system_query = resolve_system_query(query_name)

        if min_rows is not None:
            if system_query is not SystemQuery.TABLE_LIST_WITH_ROW_COUNTS:
                raise QueryBuildError("--min-rows only applies to table_list_with_row_counts")
            query = build_table_list_query(min_rows, ctx.dialect)
        else:
            query = get_system_query(system_query, ctx.dialect)

        if search is not None:
            if system_query is not SystemQuery.FIND_COLUMNS:
                raise QueryBuildError("--search only applies to find_columns")
            query = bind_search_string(query, search, ctx.dialect)

        typer.echo(query)
    except QueryToolError as e:
        ctx.handle_error(e)
