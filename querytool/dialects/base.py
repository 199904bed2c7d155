"""
Base dialect class.

A dialect owns everything that differs between database engines: identifier
quoting, literal formatting, row limiting syntax and the catalog
introspection templates. The statement builders only talk to this interface.
"""

import logging
import math
import re
from abc import ABC, abstractmethod
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any

import sqlglot
from sqlglot.errors import SqlglotError

from querytool.exceptions import QueryBuildError


class SystemQuery(Enum):
    """Catalog introspection queries available in every dialect."""

    DATABASE_LIST = "database_list"
    TABLE_LIST_WITH_ROW_COUNTS = "table_list_with_row_counts"
    STORED_PROCEDURE_LIST = "stored_procedure_list"
    VIEW_LIST = "view_list"
    FIND_COLUMNS = "find_columns"


# Placeholder bound by the caller when running SystemQuery.FIND_COLUMNS
SEARCH_STRING_PARAMETER = "@SearchString"


class Dialect(ABC):
    """
    Abstract base class for SQL dialects.

    Subclasses set the identifier quote characters and the pattern of names
    that are safe to leave unquoted, and provide the catalog templates.
    """

    name: str = ""
    sqlglot_dialect: str = ""

    IDENTIFIER_START = '"'
    IDENTIFIER_END = '"'
    PLAIN_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

    # Words the engine reserves; identifiers spelled like them must be quoted
    RESERVED_KEYWORDS: frozenset[str] = frozenset()

    DEFAULT_ROW_LIMIT = 100

    # Column of the table list template holding the row count
    ROW_COUNT_COLUMN = ""

    def __init__(self) -> None:
        self.logger = logging.getLogger(self.__class__.__name__)

    # Identifiers

    def is_quoted(self, name: str) -> bool:
        """Whether ``name`` is already a single, correctly escaped quoted identifier."""
        start, end = self.IDENTIFIER_START, self.IDENTIFIER_END
        if len(name) < 2 or not name.startswith(start) or not name.endswith(end):
            return False
        inner = name[1:-1]
        return end not in inner.replace(end * 2, "")

    def needs_quoting(self, name: str) -> bool:
        return (
            not self.PLAIN_IDENTIFIER.fullmatch(name)
            or name.upper() in self.RESERVED_KEYWORDS
        )

    def quote_identifier(self, name: str) -> str:
        """
        Make a single identifier safe to embed in SQL.

        Plain, non-reserved names are returned as-is. Anything else is wrapped
        in the dialect quotes with the closing quote doubled. Quoting an
        already quoted identifier returns it unchanged.

        Args:
            name: Bare or quoted identifier (e.g., "Users", "Order Details")

        Returns:
            Identifier text ready for concatenation
        """
        if not name:
            raise QueryBuildError("Cannot quote an empty identifier")
        if self.is_quoted(name) or not self.needs_quoting(name):
            return name
        escaped = name.replace(self.IDENTIFIER_END, self.IDENTIFIER_END * 2)
        return f"{self.IDENTIFIER_START}{escaped}{self.IDENTIFIER_END}"

    def split_qualified_name(self, name: str) -> list[str]:
        """Split "schema.table" on dots that are not inside quotes."""
        start, end = self.IDENTIFIER_START, self.IDENTIFIER_END
        parts: list[str] = []
        current: list[str] = []
        in_quotes = False
        i = 0
        while i < len(name):
            char = name[i]
            if in_quotes:
                current.append(char)
                if char == end:
                    if name[i + 1 : i + 2] == end:
                        current.append(end)
                        i += 1
                    else:
                        in_quotes = False
            elif char == start:
                in_quotes = True
                current.append(char)
            elif char == ".":
                parts.append("".join(current))
                current = []
            else:
                current.append(char)
            i += 1
        parts.append("".join(current))
        return parts

    def quote_table_name(self, name: str) -> str:
        """Quote every part of a possibly schema-qualified object name."""
        return ".".join(self.quote_identifier(part) for part in self.split_qualified_name(name))

    def grant_execute_target(self, name: str) -> str:
        """Object clause of GRANT EXECUTE for a stored procedure."""
        return self.quote_table_name(name)

    # Literals

    def format_literal(self, value: Any) -> str:
        """
        Format a Python value as a SQL literal.

        Args:
            value: The value to format

        Returns:
            SQL-formatted string representation of the value
        """
        if value is None:
            return "NULL"
        elif isinstance(value, bool):
            return self.format_boolean(value)
        elif isinstance(value, float) and not math.isfinite(value):
            raise QueryBuildError(f"Cannot format non-finite number {value!r} as a SQL literal")
        elif isinstance(value, Decimal) and not value.is_finite():
            raise QueryBuildError(f"Cannot format non-finite number {value!r} as a SQL literal")
        elif isinstance(value, (int, float, Decimal)):
            return str(value)
        elif isinstance(value, datetime):
            return self.format_string(value.isoformat(sep=" "))
        elif isinstance(value, (date, time)):
            return self.format_string(value.isoformat())
        elif isinstance(value, (bytes, bytearray, memoryview)):
            return self.format_binary(bytes(value))
        elif isinstance(value, str):
            return self.format_string(value)
        else:
            # For other types, convert to string and quote
            return self.format_string(str(value))

    def format_string(self, value: str) -> str:
        # Escape single quotes by doubling them
        escaped_value = value.replace("'", "''")
        return f"'{escaped_value}'"

    def format_boolean(self, value: bool) -> str:
        return "TRUE" if value else "FALSE"

    @abstractmethod
    def format_binary(self, value: bytes) -> str:
        """Format raw bytes as a binary literal."""
        pass

    # Row limiting

    def top_clause(self, row_limit: int) -> str:
        """Text inserted right after SELECT to cap the result (empty if unsupported)."""
        return ""

    def limit_clause(self, row_limit: int) -> str:
        """Text appended after ORDER BY to cap the result (empty if unsupported)."""
        return ""

    # Conversion

    def convert_sql(self, sql: str, source_dialect: str | None = None) -> str:
        """
        Convert SQL from another dialect to this one.

        Uses sqlglot auto-detection (read=None) unless ``source_dialect`` is
        given. This is a user-facing conversion aid; the builders and the
        classification never parse SQL.

        Args:
            sql: SQL text to convert (a single statement)
            source_dialect: querytool or sqlglot dialect name of the input

        Returns:
            Converted SQL text

        Raises:
            QueryBuildError: If sqlglot cannot parse or generate the statement
        """
        if not sql or not sql.strip():
            return sql

        read_dialect = _sqlglot_name(source_dialect) if source_dialect else None
        try:
            parsed = sqlglot.parse_one(sql, read=read_dialect)
            converted = parsed.sql(dialect=self.sqlglot_dialect)
        except SqlglotError as e:
            source_name = source_dialect or "auto-detect"
            self.logger.error(f"Failed to convert SQL from {source_name} to {self.name}: {e}")
            raise QueryBuildError(f"SQL dialect conversion failed: {e}") from e

        self.logger.debug(
            f"Converted SQL from {source_dialect or 'auto-detect'} to {self.name}. "
            f"Please review the converted query for correctness."
        )
        return converted

    # Catalog

    @abstractmethod
    def get_system_queries(self) -> dict[SystemQuery, str]:
        """Get the catalog introspection templates keyed by purpose."""
        pass


def _sqlglot_name(dialect_name: str) -> str:
    """Map a querytool dialect name to sqlglot's; unknown names are passed through."""
    from querytool.dialects.registry import _registry

    dialect_class = _registry.get_dialect_class(dialect_name)
    return dialect_class.sqlglot_dialect if dialect_class else dialect_name.lower()
