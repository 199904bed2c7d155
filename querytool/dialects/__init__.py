"""
SQL dialects for querytool.

Each dialect handles:
- Identifier quoting and literal formatting
- Row limiting syntax for interactive previews
- Catalog introspection query templates
"""

from .base import SEARCH_STRING_PARAMETER, Dialect, SystemQuery
from .registry import (
    DEFAULT_DIALECT,
    DialectRegistry,
    get_dialect,
    is_dialect_supported,
    list_available_dialects,
    register_dialect,
)

# Import dialects to register them
from .postgres import PostgresDialect
from .tsql import TSQLDialect

__all__ = [
    # Base classes
    "Dialect",
    "SystemQuery",
    "SEARCH_STRING_PARAMETER",
    # Registry and factory functions
    "DialectRegistry",
    "DEFAULT_DIALECT",
    "get_dialect",
    "register_dialect",
    "list_available_dialects",
    "is_dialect_supported",
    # Available dialects
    "TSQLDialect",
    "PostgresDialect",
]
