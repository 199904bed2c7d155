"""
Convert command implementation.
"""

import typer

from querytool.cli.context import CommandContext
from querytool.exceptions import QueryToolError


def cmd_convert(
    query_text: str,
    source_dialect: str | None = None,
    dialect: str | None = None,
    config_path: str | None = None,
    verbose: bool = False,
) -> None:
    """
    Print ``query_text`` converted to the target dialect.

    Args:
        query_text: A single SQL statement
        source_dialect: Dialect of the input (auto-detect if None)
        dialect: Target dialect (configured dialect if None)
    """
    ctx = CommandContext(dialect=dialect, config_path=config_path, verbose=verbose)

    try:
        typer.echo(ctx.dialect.convert_sql(query_text, source_dialect))
    except QueryToolError as e:
        ctx.handle_error(e)
