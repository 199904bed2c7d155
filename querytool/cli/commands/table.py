"""
Table template commands: insert, select, update and delete.
"""

from typing import Literal

import typer

from querytool.builder import (
    TableSelectLimit,
    build_delete,
    build_insert,
    build_select,
    build_update,
)
from querytool.cli.context import CommandContext
from querytool.exceptions import QueryToolError
from querytool.loader import load_table_definition

TemplateKind = Literal["insert", "select", "update", "delete"]

_BUILDERS = {
    "insert": build_insert,
    "update": build_update,
    "delete": build_delete,
}


def cmd_table_template(
    kind: TemplateKind,
    table_file: str,
    dialect: str | None = None,
    config_path: str | None = None,
    verbose: bool = False,
    limit: TableSelectLimit = TableSelectLimit.NONE,
    where: str = "",
    row_limit: int | None = None,
) -> None:
    """
    Print a statement template for the table described in ``table_file``.

    Args:
        kind: Statement kind
        table_file: YAML/JSON table definition
        dialect: Dialect name overriding the configuration
        config_path: Path to querytool.toml
        verbose: Enable verbose output
        limit: Row limiting mode (select only)
        where: WHERE predicate appended verbatim (select only)
        row_limit: Row cap overriding the configuration (select only)
    """
    ctx = CommandContext(
        dialect=dialect,
        config_path=config_path,
        verbose=verbose,
        row_limit=row_limit,
    )

    try:
        table = load_table_definition(table_file, ctx.dialect)
        if kind == "select":
            statement = build_select(
                table,
                limit=limit,
                where_clause=where,
                row_limit=ctx.config.row_limit,
                dialect=ctx.dialect,
            )
        else:
            statement = _BUILDERS[kind](table, dialect=ctx.dialect)
        ctx.print_statement(statement)

    except QueryToolError as e:
        ctx.handle_error(e)
    except Exception as e:
        typer.echo(f"\n❌ Unexpected error: {e}", err=True)
        ctx.handle_error(e)
