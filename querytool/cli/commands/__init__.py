"""
CLI command implementations.
"""

from querytool.cli.commands.catalog import cmd_catalog
from querytool.cli.commands.classify import cmd_classify
from querytool.cli.commands.convert import cmd_convert
from querytool.cli.commands.grant import cmd_grant
from querytool.cli.commands.rows import cmd_count, cmd_row_delete, cmd_row_update
from querytool.cli.commands.table import cmd_table_template

__all__ = [
    "cmd_table_template",
    "cmd_row_update",
    "cmd_row_delete",
    "cmd_count",
    "cmd_grant",
    "cmd_catalog",
    "cmd_classify",
    "cmd_convert",
]
