"""
Grant command implementation.
"""

from querytool.builder import build_grant_execute
from querytool.cli.context import CommandContext
from querytool.exceptions import QueryToolError


def cmd_grant(
    procedure: str,
    user: str | None = None,
    dialect: str | None = None,
    config_path: str | None = None,
    verbose: bool = False,
) -> None:
    """
    Print GRANT EXECUTE for a stored procedure.

    Args:
        procedure: Stored procedure name, optionally schema-qualified
        user: Grantee (configured grantee if None)
    """
    ctx = CommandContext(dialect=dialect, config_path=config_path, verbose=verbose)

    try:
        grantee = user or ctx.config.grantee
        ctx.print_statement(build_grant_execute(procedure, grantee, dialect=ctx.dialect))
    except QueryToolError as e:
        ctx.handle_error(e)
