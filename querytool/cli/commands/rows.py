"""
Row-level commands: row-update, row-delete and count.
"""

from querytool.builder import (
    SelectionShape,
    build_row_delete,
    build_row_update,
    build_select_row_count,
)
from querytool.cli.context import CommandContext
from querytool.cli.utils import parse_cells
from querytool.exceptions import QueryToolError
from querytool.loader import parse_cell


def cmd_row_update(
    table_name: str,
    set_cells: list[str] | None,
    where_cell: str,
    dialect: str | None = None,
    config_path: str | None = None,
    verbose: bool = False,
) -> None:
    """Print an UPDATE assigning ``set_cells`` on the row matched by ``where_cell``."""
    ctx = CommandContext(dialect=dialect, config_path=config_path, verbose=verbose)

    try:
        update_cells = parse_cells(set_cells, ctx.dialect)
        filter_cell = parse_cell(where_cell, ctx.dialect)
        ctx.print_statement(
            build_row_update(table_name, update_cells, filter_cell, dialect=ctx.dialect)
        )
    except QueryToolError as e:
        ctx.handle_error(e)


def cmd_row_delete(
    table_name: str,
    cells: list[str] | None,
    shape: SelectionShape = SelectionShape.ROW,
    dialect: str | None = None,
    config_path: str | None = None,
    verbose: bool = False,
) -> None:
    """Print a DELETE for the selected cells."""
    ctx = CommandContext(dialect=dialect, config_path=config_path, verbose=verbose)

    try:
        filter_cells = parse_cells(cells, ctx.dialect)
        ctx.print_statement(build_row_delete(table_name, filter_cells, shape, dialect=ctx.dialect))
    except QueryToolError as e:
        ctx.handle_error(e)


def cmd_count(
    table_name: str,
    dialect: str | None = None,
    config_path: str | None = None,
    verbose: bool = False,
) -> None:
    """Print a row count query for a table."""
    ctx = CommandContext(dialect=dialect, config_path=config_path, verbose=verbose)

    try:
        ctx.print_statement(build_select_row_count(table_name, dialect=ctx.dialect))
    except QueryToolError as e:
        ctx.handle_error(e)
