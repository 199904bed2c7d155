"""
qtool CLI Main Module

Command-line interface for generating and classifying SQL statements.
"""

import sys
from typing import Any

import typer

from querytool.builder import SelectionShape, TableSelectLimit
from querytool.catalog import list_system_queries
from querytool.cli.commands import (
    cmd_catalog,
    cmd_classify,
    cmd_convert,
    cmd_count,
    cmd_grant,
    cmd_row_delete,
    cmd_row_update,
    cmd_table_template,
)
from querytool.dialects import is_dialect_supported, list_available_dialects


class AlphabeticalOrderGroup(typer.core.TyperGroup):
    """Custom Typer Group that lists commands in alphabetical order."""

    def list_commands(self, ctx: typer.Context) -> list[str]:
        return sorted(self.commands.keys())


def validate_dialect(value: str | None) -> str | None:
    """Validate dialect option."""
    if value is None:
        return None
    dialect = value.lower()
    if not is_dialect_supported(dialect):
        available = ", ".join(sorted(list_available_dialects()))
        raise typer.BadParameter(
            typer.style("Error: ", fg=typer.colors.RED, bold=True)
            + f"Unsupported dialect '{dialect}'. "
            f"Supported: {available}"
        )
    return dialect


def validate_shape(value: str) -> str:
    """Validate selection shape option (column or row)."""
    if value.lower() not in [shape.value for shape in SelectionShape]:
        raise typer.BadParameter(
            typer.style("Error: ", fg=typer.colors.RED, bold=True)
            + f"Invalid shape '{value}'. Must be 'column' or 'row'."
        )
    return value.lower()


app = typer.Typer(
    name="qtool",
    help="qtool - SQL statement templates and query classification",
    add_completion=False,
    rich_markup_mode="rich",
    cls=AlphabeticalOrderGroup,
    invoke_without_command=True,
)


@app.callback()
def main_callback(ctx: typer.Context) -> None:
    """Main CLI callback - shows help when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


# Common option definitions to reduce duplication
TABLE_FILE_ARG = typer.Argument(None, help="Path to a YAML/JSON table definition")
TABLE_NAME_ARG = typer.Argument(None, help="Table name, optionally schema-qualified")
VERBOSE_OPTION = typer.Option(False, "-v", "--verbose", help="Enable verbose output")
DIALECT_OPTION = typer.Option(
    None,
    "-d",
    "--dialect",
    help="SQL dialect (default from querytool.toml, else tsql)",
    callback=validate_dialect,
)
CONFIG_OPTION = typer.Option(
    None, "-c", "--config", help="Path to querytool.toml (default: ./querytool.toml)"
)


def _check_required_argument(ctx: typer.Context, arg_name: str, arg_value: Any) -> None:
    """Check if a required argument is provided, show help if not."""
    if arg_value is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


@app.command()
def insert(
    ctx: typer.Context,
    table_file: str | None = TABLE_FILE_ARG,
    dialect: str | None = DIALECT_OPTION,
    config: str | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Generate an INSERT template for a table."""
    _check_required_argument(ctx, "table_file", table_file)
    cmd_table_template("insert", table_file, dialect=dialect, config_path=config, verbose=verbose)


@app.command()
def select(
    ctx: typer.Context,
    table_file: str | None = TABLE_FILE_ARG,
    top: bool = typer.Option(False, "--top", help="Only the first rows"),
    bottom: bool = typer.Option(False, "--bottom", help="Only the last rows, newest first"),
    where: str = typer.Option("", "-w", "--where", help="WHERE predicate, used verbatim"),
    limit: int | None = typer.Option(
        None, "-n", "--limit", help="Row cap for --top/--bottom (default from config)"
    ),
    dialect: str | None = DIALECT_OPTION,
    config: str | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Generate a SELECT for a table or view."""
    _check_required_argument(ctx, "table_file", table_file)
    if top and bottom:
        raise typer.BadParameter("Use either --top or --bottom, not both")

    if bottom:
        select_limit = TableSelectLimit.LIMIT_BOTTOM
    elif top:
        select_limit = TableSelectLimit.LIMIT_TOP
    else:
        select_limit = TableSelectLimit.NONE

    cmd_table_template(
        "select",
        table_file,
        dialect=dialect,
        config_path=config,
        verbose=verbose,
        limit=select_limit,
        where=where,
        row_limit=limit,
    )


@app.command()
def update(
    ctx: typer.Context,
    table_file: str | None = TABLE_FILE_ARG,
    dialect: str | None = DIALECT_OPTION,
    config: str | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Generate a whole-row UPDATE template for a table."""
    _check_required_argument(ctx, "table_file", table_file)
    cmd_table_template("update", table_file, dialect=dialect, config_path=config, verbose=verbose)


@app.command()
def delete(
    ctx: typer.Context,
    table_file: str | None = TABLE_FILE_ARG,
    dialect: str | None = DIALECT_OPTION,
    config: str | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Generate a DELETE template for a table."""
    _check_required_argument(ctx, "table_file", table_file)
    cmd_table_template("delete", table_file, dialect=dialect, config_path=config, verbose=verbose)


@app.command()
def count(
    ctx: typer.Context,
    table_name: str | None = TABLE_NAME_ARG,
    dialect: str | None = DIALECT_OPTION,
    config: str | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Generate a row count query for a table."""
    _check_required_argument(ctx, "table_name", table_name)
    cmd_count(table_name, dialect=dialect, config_path=config, verbose=verbose)


@app.command(name="row-update")
def row_update(
    ctx: typer.Context,
    table_name: str | None = TABLE_NAME_ARG,
    set_cells: list[str] | None = typer.Option(
        None, "-s", "--set", help="Cell to assign as column=value. Can be used multiple times."
    ),
    where: str | None = typer.Option(
        None, "-w", "--where", help="Cell identifying the row as column=value"
    ),
    dialect: str | None = DIALECT_OPTION,
    config: str | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Generate an UPDATE for edited cells of one row."""
    _check_required_argument(ctx, "table_name", table_name)
    _check_required_argument(ctx, "where", where)
    cmd_row_update(
        table_name,
        set_cells,
        where,
        dialect=dialect,
        config_path=config,
        verbose=verbose,
    )


@app.command(name="row-delete")
def row_delete(
    ctx: typer.Context,
    table_name: str | None = TABLE_NAME_ARG,
    cells: list[str] | None = typer.Option(
        None, "--cell", help="Selected cell as column=value. Can be used multiple times."
    ),
    shape: str = typer.Option(
        "row",
        "--shape",
        help="column: cells of one column (IN list); row: cells of one row (AND)",
        callback=validate_shape,
    ),
    dialect: str | None = DIALECT_OPTION,
    config: str | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Generate a DELETE for selected grid cells."""
    _check_required_argument(ctx, "table_name", table_name)
    cmd_row_delete(
        table_name,
        cells,
        SelectionShape(shape),
        dialect=dialect,
        config_path=config,
        verbose=verbose,
    )


@app.command()
def grant(
    ctx: typer.Context,
    procedure: str | None = typer.Argument(None, help="Stored procedure name"),
    user: str | None = typer.Option(None, "-u", "--user", help="Grantee (default from config)"),
    dialect: str | None = DIALECT_OPTION,
    config: str | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Generate GRANT EXECUTE on a stored procedure."""
    _check_required_argument(ctx, "procedure", procedure)
    cmd_grant(procedure, user, dialect=dialect, config_path=config, verbose=verbose)


@app.command()
def catalog(
    ctx: typer.Context,
    query_name: str | None = typer.Argument(
        None, help=f"Catalog query: {', '.join(list_system_queries())}"
    ),
    min_rows: int | None = typer.Option(
        None, "--min-rows", help="Hide tables with fewer rows (table_list_with_row_counts)"
    ),
    search: str | None = typer.Option(
        None, "--search", help="LIKE pattern for column names (find_columns)"
    ),
    dialect: str | None = DIALECT_OPTION,
    config: str | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Print a catalog introspection query."""
    _check_required_argument(ctx, "query_name", query_name)
    cmd_catalog(
        query_name,
        min_rows=min_rows,
        search=search,
        dialect=dialect,
        config_path=config,
        verbose=verbose,
    )


@app.command()
def classify(
    sql: str | None = typer.Argument(None, help="SQL text (read from stdin if omitted)"),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Classify SQL text by intent (read-only, destructive, schema-altering)."""
    if sql is None:
        sql = sys.stdin.read()
    cmd_classify(sql, verbose=verbose)


@app.command()
def convert(
    sql: str | None = typer.Argument(None, help="SQL statement (read from stdin if omitted)"),
    source: str | None = typer.Option(
        None, "--from", help="Dialect of the input (auto-detect if omitted)"
    ),
    dialect: str | None = DIALECT_OPTION,
    config: str | None = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Convert a SQL statement to the target dialect."""
    if sql is None:
        sql = sys.stdin.read()
    cmd_convert(sql, source_dialect=source, dialect=dialect, config_path=config, verbose=verbose)


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
