"""
SQL statement builders.

Pure functions that turn table metadata or grid cell values into SQL text.
Nothing here touches a connection: statements that still need caller input
(an identity value to bind, a filter or an order key) are returned with a
``Resolution`` other than ``RESOLVED`` and keep a ``?`` placeholder in the
text.

Literal values (``ColumnDefinition.formatted_value`` and
``SqlCellValue.sql_formatted_value``) are placed as-is; escaping them is the
job of whoever produced them.
"""

import logging
from collections.abc import Iterable
from enum import Enum

from querytool.dialects import Dialect, get_dialect
from querytool.exceptions import EmptySelectionError, QueryBuildError
from querytool.heuristics import is_trusted_identifier
from querytool.typing import (
    ColumnDefinition,
    Resolution,
    SqlCellValue,
    SqlStatement,
    TableDefinition,
)

logger = logging.getLogger(__name__)

PLACEHOLDER = "?"
# Always-false conjunct appended when a row update filters on a column not known to be an id
UNTRUSTED_FILTER_GUARD = "AND 1 = 0 /* Review the WHERE clause! */"
FAIL_SAFE_PREDICATE = "1 = 0"
DEFAULT_GRANTEE = "xxx"


class SelectionShape(Enum):
    """How the grid cells used as a delete filter were selected."""

    COLUMN = "column"  # Several cells of one column: delete every row with one of these keys
    ROW = "row"  # Every cell of one row: delete exactly that row


class TableSelectLimit(Enum):
    NONE = "none"
    LIMIT_TOP = "top"
    LIMIT_BOTTOM = "bottom"


DialectArg = str | Dialect | None


def select_expression(column: ColumnDefinition, dialect: DialectArg = None) -> str:
    """Expression used for a column in a select list."""
    d = get_dialect(dialect)
    quoted = d.quote_identifier(column.name)
    if column.type.display_cast:
        return f"CAST({quoted} AS {column.type.display_cast}) AS {quoted}"
    return quoted


def get_where_clause(
    table: TableDefinition, dialect: DialectArg = None
) -> tuple[str, Resolution]:
    """
    Get the WHERE clause used by whole-row UPDATE and DELETE templates.

    Returns:
        ("<identity> = ?", NEEDS_PARAMETER) when the table has an identity column,
        otherwise ("?", NEEDS_PREDICATE): no safe filter is known
    """
    identity = table.identity_column
    if identity is not None:
        d = get_dialect(dialect)
        return f"{d.quote_identifier(identity.name)} = {PLACEHOLDER}", Resolution.NEEDS_PARAMETER
    return PLACEHOLDER, Resolution.NEEDS_PREDICATE


def _resolve_row_limit(row_limit: int | None, d: Dialect) -> int:
    if row_limit is None:
        return d.DEFAULT_ROW_LIMIT
    if isinstance(row_limit, bool) or not isinstance(row_limit, int) or row_limit <= 0:
        raise QueryBuildError(f"Row limit must be a positive integer, got {row_limit!r}")
    return row_limit


def build_insert(table: TableDefinition, dialect: DialectArg = None) -> SqlStatement:
    """
    Build an INSERT template for a table.

    Identity and read-only columns are skipped; each remaining column gets its
    ``formatted_value``, positionally aligned with the column list.
    """
    d = get_dialect(dialect)
    table_name = d.quote_table_name(table.name)
    columns = table.writable_columns

    if not columns:
        text = f"INSERT INTO {table_name}\nDEFAULT VALUES"
    else:
        column_names = ", ".join(d.quote_identifier(c.name) for c in columns)
        values = ", ".join(c.formatted_value for c in columns)
        text = f"INSERT INTO {table_name}\n\t({column_names})\nVALUES\n\t({values})"

    logger.debug(f"Built INSERT for {table.name} with {len(columns)} column(s)")
    return SqlStatement(text)


def build_select(
    table: TableDefinition,
    limit: TableSelectLimit = TableSelectLimit.NONE,
    where_clause: str = "",
    row_limit: int | None = None,
    dialect: DialectArg = None,
) -> SqlStatement:
    """
    Build a SELECT over a table or view.

    Args:
        table: Table metadata; with no columns the select list is ``*``
        limit: NONE, LIMIT_TOP (first rows) or LIMIT_BOTTOM (last rows by identity)
        where_clause: Predicate appended verbatim (not validated or escaped)
        row_limit: Row cap for LIMIT_TOP/LIMIT_BOTTOM (dialect default if None)
        dialect: Dialect name or instance

    Returns:
        SqlStatement; NEEDS_ORDER_KEY for LIMIT_BOTTOM on a table without identity
    """
    d = get_dialect(dialect)
    limited = limit is not TableSelectLimit.NONE
    cap = _resolve_row_limit(row_limit, d) if limited else None

    text = "SELECT"
    top = d.top_clause(cap).strip() if limited else ""
    if top:
        text += f" {top}"

    if table.columns:
        text += ",".join(f"\n\t{select_expression(c, d)}" for c in table.columns)
    else:
        # Views whose columns could not be discovered
        text += "\n\t*"

    text += f"\nFROM\n\t{d.quote_table_name(table.name)}"

    if where_clause:
        text += f"\nWHERE\n\t{where_clause}"

    resolution = Resolution.RESOLVED
    if limit is TableSelectLimit.LIMIT_BOTTOM:
        identity = table.identity_column
        if identity is not None:
            text += f"\nORDER BY\n\t{d.quote_identifier(identity.name)} DESC"
        else:
            text += f"\nORDER BY\n\t{PLACEHOLDER} DESC"
            resolution = Resolution.NEEDS_ORDER_KEY

    if limited and d.limit_clause(cap):
        text += f"\n{d.limit_clause(cap)}"

    logger.debug(f"Built SELECT for {table.name} (limit={limit.value}, {resolution.value})")
    return SqlStatement(text, resolution)


def build_update(table: TableDefinition, dialect: DialectArg = None) -> SqlStatement:
    """
    Build a whole-row UPDATE template for a table.

    The SET list covers the same columns as :func:`build_insert`. The WHERE
    clause comes from :func:`get_where_clause` and always needs caller input.
    """
    d = get_dialect(dialect)
    columns = table.writable_columns
    if not columns:
        raise QueryBuildError(f"Table '{table.name}' has no writable columns to update")

    assignments = ",\n\t".join(f"{d.quote_identifier(c.name)} = {c.formatted_value}" for c in columns)
    where, resolution = get_where_clause(table, d)
    text = (
        f"UPDATE\n\t{d.quote_table_name(table.name)}\n"
        f"SET\n\t{assignments}\n"
        f"WHERE\n\t{where}"
    )
    logger.debug(f"Built UPDATE for {table.name} ({resolution.value})")
    return SqlStatement(text, resolution)


def build_row_update(
    table_name: str,
    update_cells: Iterable[SqlCellValue],
    filter_cell: SqlCellValue,
    dialect: DialectArg = None,
) -> SqlStatement:
    """
    Build an UPDATE for edited grid cells of a single row.

    If the filter column is not recognized by the identifier heuristics, an
    always-false ``AND 1 = 0`` conjunct is appended so the statement matches
    no rows until the caller reviews the filter. The check is name based only.

    Args:
        table_name: Table to update
        update_cells: Cells to assign, in SET order
        filter_cell: Cell whose column/value becomes the WHERE equality

    Returns:
        SqlStatement with ``guarded=True`` when the guard was appended

    Raises:
        EmptySelectionError: If ``update_cells`` is empty
    """
    cells = list(update_cells)
    if not cells:
        raise EmptySelectionError("Row update requires at least one cell to assign")

    d = get_dialect(dialect)
    assignments = ",\n\t".join(
        f"{d.quote_identifier(c.column_name)} = {c.sql_formatted_value}" for c in cells
    )
    text = (
        f"UPDATE\n\t{d.quote_table_name(table_name)}\n"
        f"SET\n\t{assignments}\n"
        f"WHERE\n\t{d.quote_identifier(filter_cell.column_name)} = {filter_cell.sql_formatted_value}"
    )

    guarded = not is_trusted_identifier(table_name, filter_cell.column_name)
    if guarded:
        logger.warning(
            f"Filter column '{filter_cell.column_name}' is not a recognized identifier of "
            f"'{table_name}'; the update was disabled with '1 = 0'"
        )
        text += f" {UNTRUSTED_FILTER_GUARD}"

    return SqlStatement(text, guarded=guarded)


def build_row_delete(
    table_name: str,
    filter_cells: Iterable[SqlCellValue],
    shape: SelectionShape,
    dialect: DialectArg = None,
) -> SqlStatement:
    """
    Build a DELETE for rows selected in the grid.

    - COLUMN: ``<first cell column> IN (<v1>, <v2>, ...)``
    - ROW: ``(<c1> = <v1> AND <c2> = <v2> ...)``
    - anything else: ``1 = 0``, so an unknown shape never deletes everything

    Raises:
        EmptySelectionError: If ``filter_cells`` is empty
    """
    cells = list(filter_cells)
    if not cells:
        raise EmptySelectionError("Row delete requires at least one filter cell")

    d = get_dialect(dialect)
    guarded = False
    if shape is SelectionShape.COLUMN:
        values = ", ".join(c.sql_formatted_value for c in cells)
        predicate = f"{d.quote_identifier(cells[0].column_name)} IN ({values})"
    elif shape is SelectionShape.ROW:
        terms = " AND ".join(
            f"{d.quote_identifier(c.column_name)} = {c.sql_formatted_value}" for c in cells
        )
        predicate = f"({terms})"
    else:
        logger.warning(f"Unknown selection shape {shape!r}; delete on {table_name} disabled")
        predicate = FAIL_SAFE_PREDICATE
        guarded = True

    text = f"DELETE FROM\n\t{d.quote_table_name(table_name)}\nWHERE\n\t{predicate}"
    return SqlStatement(text, guarded=guarded)


def build_delete(table: TableDefinition, dialect: DialectArg = None) -> SqlStatement:
    """Build a DELETE template for a table, filtered by :func:`get_where_clause`."""
    d = get_dialect(dialect)
    where, resolution = get_where_clause(table, d)
    text = f"DELETE FROM\n\t{d.quote_table_name(table.name)}\nWHERE\n\t{where}"
    logger.debug(f"Built DELETE for {table.name} ({resolution.value})")
    return SqlStatement(text, resolution)


def build_select_row_count(table_name: str, dialect: DialectArg = None) -> SqlStatement:
    """Build ``SELECT COUNT(*)`` for a table."""
    d = get_dialect(dialect)
    return SqlStatement(f"SELECT\n\tCOUNT(*)\nFROM\n\t{d.quote_table_name(table_name)}")


def build_grant_execute(
    sp_name: str, user_name: str = DEFAULT_GRANTEE, dialect: DialectArg = None
) -> SqlStatement:
    """
    Build ``GRANT EXECUTE`` on a stored procedure.

    ``DEFAULT_GRANTEE`` is a placeholder for a principal that has not been
    chosen yet; statements using it are marked NEEDS_PARAMETER.
    """
    d = get_dialect(dialect)
    text = f"GRANT EXECUTE\nON {d.grant_execute_target(sp_name)}\nTO {d.quote_identifier(user_name)}"
    resolution = Resolution.NEEDS_PARAMETER if user_name == DEFAULT_GRANTEE else Resolution.RESOLVED
    return SqlStatement(text, resolution)
