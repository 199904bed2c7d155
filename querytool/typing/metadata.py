"""
Type definitions for table metadata consumed by the statement builders.

Instances are immutable snapshots built by the schema introspection layer
(or by :mod:`querytool.loader`) right before a builder call.
"""

from dataclasses import dataclass, field
from typing import Any

from querytool.exceptions import MetadataError


@dataclass(frozen=True)
class ColumnType:
    """Database type traits of a column."""

    name: str = "sql_variant"
    # Computed, generated and rowversion columns must never be written
    is_read_only: bool = False
    # Type to CAST to in select lists, for types the grid cannot display
    display_cast: str | None = None


@dataclass(frozen=True)
class ColumnDefinition:
    """A single column of a table or view."""

    name: str
    type: ColumnType = field(default_factory=ColumnType)
    is_identity: bool = False
    formatted_value: str = "NULL"  # Pre-formatted SQL literal used by INSERT/UPDATE templates

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise MetadataError("Column definition must include a non-empty name")

    @property
    def is_writable(self) -> bool:
        """Whether INSERT and UPDATE templates may assign this column."""
        return not self.is_identity and not self.type.is_read_only


@dataclass(frozen=True)
class TableDefinition:
    """
    A table or view with its columns in schema order.

    An empty ``columns`` tuple means the object is a view whose columns
    could not be discovered.
    """

    name: str
    columns: tuple[ColumnDefinition, ...] = ()

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise MetadataError("Table definition must include a non-empty name")

        # Accept any iterable but always store a tuple
        object.__setattr__(self, "columns", tuple(self.columns))

        identities = [c.name for c in self.columns if c.is_identity]
        if len(identities) > 1:
            raise MetadataError(
                f"Table '{self.name}' declares more than one identity column: {identities}"
            )

    @property
    def identity_column(self) -> ColumnDefinition | None:
        for column in self.columns:
            if column.is_identity:
                return column
        return None

    @property
    def writable_columns(self) -> tuple[ColumnDefinition, ...]:
        """Columns that are neither identity nor read-only, in schema order."""
        return tuple(c for c in self.columns if c.is_writable)

    @property
    def is_view_without_columns(self) -> bool:
        return not self.columns


@dataclass(frozen=True)
class SqlCellValue:
    """A grid cell value with its SQL literal already formatted."""

    column_name: str
    raw_value: Any
    sql_formatted_value: str

    @classmethod
    def from_raw(cls, column_name: str, raw_value: Any, dialect: Any = None) -> "SqlCellValue":
        """
        Build a cell value by formatting ``raw_value`` as a SQL literal.

        Args:
            column_name: Column the cell belongs to
            raw_value: Python value shown in the grid
            dialect: Dialect name or instance (default dialect if None)

        Returns:
            SqlCellValue with ``sql_formatted_value`` set
        """
        from querytool.formatting import format_literal

        return cls(
            column_name=column_name,
            raw_value=raw_value,
            sql_formatted_value=format_literal(raw_value, dialect),
        )
