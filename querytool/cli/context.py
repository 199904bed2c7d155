"""
Command context for shared setup across CLI commands.
"""

import traceback

import typer

from querytool.config import load_config
from querytool.dialects import get_dialect
from querytool.exceptions import QueryToolError
from querytool.typing import Resolution, SqlStatement

from .utils import setup_logging

RESOLUTION_NOTES = {
    Resolution.NEEDS_PARAMETER: "bind the '?' placeholder (or set the grantee) before running",
    Resolution.NEEDS_PREDICATE: "no identity column is known; replace the '?' WHERE clause with a filter",
    Resolution.NEEDS_ORDER_KEY: "no identity column is known; replace '?' in ORDER BY with a column",
}


class CommandContext:
    """
    Shared context for CLI commands.

    Handles common setup: logging, configuration loading and dialect lookup,
    plus consistent printing of statements and errors.
    """

    def __init__(
        self,
        dialect: str | None = None,
        config_path: str | None = None,
        verbose: bool = False,
        row_limit: int | None = None,
    ):
        # Set up logging
        self.verbose = verbose
        setup_logging(self.verbose)

        try:
            self.config = load_config(
                config_path, overrides={"dialect": dialect, "row_limit": row_limit}
            )
            self.dialect = get_dialect(self.config.dialect)
        except QueryToolError as e:
            self.handle_error(e)

    def handle_error(self, error: Exception, show_traceback: bool | None = None) -> None:
        """
        Handle errors consistently across commands.

        Args:
            error: The exception that occurred
            show_traceback: Whether to show traceback (defaults to verbose mode)
        """
        if show_traceback is None:
            show_traceback = self.verbose

        error_prefix = typer.style("Error: ", fg=typer.colors.RED, bold=True)
        typer.echo(f"{error_prefix}{error}", err=True)
        if show_traceback:
            traceback.print_exc()
        raise typer.Exit(1)

    def print_statement(self, statement: SqlStatement) -> None:
        """Print statement text on stdout and any caveats on stderr."""
        typer.echo(statement.text)

        if statement.guarded:
            prefix = typer.style("Warning: ", fg=typer.colors.YELLOW, bold=True)
            typer.echo(
                f"{prefix}the filter is not a recognized row identifier, "
                "the statement was disabled with '1 = 0'. Review the WHERE clause.",
                err=True,
            )
        if not statement.is_resolved:
            prefix = typer.style("Note: ", fg=typer.colors.YELLOW, bold=True)
            typer.echo(f"{prefix}{RESOLUTION_NOTES[statement.resolution]}", err=True)
