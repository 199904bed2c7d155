"""
CLI utility functions.

Pure, stateless utility functions used across CLI commands.
"""

import logging

from querytool.dialects import Dialect
from querytool.loader import parse_cell
from querytool.typing import SqlCellValue


def parse_cells(cell_texts: list[str] | None, dialect: Dialect) -> list[SqlCellValue]:
    """
    Parse ``column=value`` options into cell values.

    Args:
        cell_texts: Option values as typed on the command line (None for empty)
        dialect: Dialect used to format the literals

    Returns:
        Cell values in the order given
    """
    return [parse_cell(cell_text, dialect) for cell_text in cell_texts or []]


def setup_logging(verbose: bool = False) -> None:
    """
    Set up logging configuration.

    Args:
        verbose: If True, set logging level to DEBUG, otherwise INFO
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s - %(name)s - %(message)s")
