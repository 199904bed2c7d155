"""
Type definitions for querytool.
"""

from .metadata import ColumnDefinition, ColumnType, SqlCellValue, TableDefinition
from .statement import Resolution, SqlStatement

__all__ = [
    "ColumnType",
    "ColumnDefinition",
    "TableDefinition",
    "SqlCellValue",
    "Resolution",
    "SqlStatement",
]
