"""
Identifier and literal formatting.

Thin module-level wrappers over the active dialect so callers that do not
care about dialects can format names and values directly.
"""

from typing import Any

from querytool.dialects import Dialect, get_dialect


def quote_identifier(name: str, dialect: str | Dialect | None = None) -> str:
    """Quote a single identifier (idempotent, escapes the closing quote)."""
    return get_dialect(dialect).quote_identifier(name)


def quote_table_name(name: str, dialect: str | Dialect | None = None) -> str:
    """Quote each part of a possibly schema-qualified table name."""
    return get_dialect(dialect).quote_table_name(name)


def format_literal(value: Any, dialect: str | Dialect | None = None) -> str:
    """Format a Python value as a SQL literal for the given dialect."""
    return get_dialect(dialect).format_literal(value)
