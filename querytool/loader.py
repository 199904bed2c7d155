"""
Loading table definitions and grid cells from text.

Table definitions are YAML (or JSON) documents:

    name: dbo.Users
    columns:
      - name: Id
        type: int
        identity: true
      - name: Name
        type: nvarchar
        value: Bob
      - name: RowVersion
        type: rowversion
        read_only: true

Cells are ``column=value`` strings whose value is read as a YAML scalar, so
``Id=1`` is numeric, ``Name=Bob`` is text and ``Name=null`` is NULL. Only
canonical numbers, true/false and null are typed: ``Code=010`` stays the
text ``'010'``. A number needs digits before any decimal point, and an
exponent only counts after a fraction: ``Y=1e5`` stays the text ``'1e5'``
while ``X=1.50`` is the number 1.5.
"""

import logging
import re
from datetime import date
from pathlib import Path
from typing import Any

import yaml

from querytool.dialects import Dialect, get_dialect
from querytool.exceptions import MetadataError
from querytool.typing import ColumnDefinition, ColumnType, SqlCellValue, TableDefinition

logger = logging.getLogger(__name__)

TABLE_KEYS = {"name", "columns"}
COLUMN_KEYS = {"name", "type", "identity", "read_only", "display_cast", "value", "formatted_value"}

NUMERIC_TYPES = {
    "int", "integer", "bigint", "smallint", "tinyint", "decimal", "numeric",
    "float", "real", "double", "money", "smallmoney",
}
TEXT_TYPES = {"char", "varchar", "nchar", "nvarchar", "text", "ntext", "character varying"}
BOOLEAN_TYPES = {"bit", "boolean", "bool"}
DATE_TYPES = {"date", "datetime", "datetime2", "smalldatetime", "datetimeoffset", "timestamp"}

# Spellings of cell values that keep their YAML type
CANONICAL_INTEGER = re.compile(r"[-+]?(0|[1-9][0-9]*)")
CANONICAL_FLOAT = re.compile(r"[-+]?(0|[1-9][0-9]*)\.[0-9]+([eE][-+]?[0-9]+)?")
BOOLEAN_LITERALS = {"true", "false"}
NULL_LITERALS = {"null", "~"}


def sample_value_for_type(type_name: str, dialect: str | Dialect | None = None) -> str:
    """
    Get a placeholder literal for a column type, used when a definition gives no value.

    Args:
        type_name: Database type name, optionally with size (e.g., "nvarchar(50)")
        dialect: Dialect name or instance

    Returns:
        Formatted SQL literal ("0", "''", "NULL", ...)
    """
    d = get_dialect(dialect)
    base_type = type_name.split("(")[0].strip().lower()
    if base_type in NUMERIC_TYPES:
        return d.format_literal(0)
    if base_type in TEXT_TYPES:
        return d.format_literal("")
    if base_type in BOOLEAN_TYPES:
        return d.format_literal(False)
    if base_type in DATE_TYPES:
        return d.format_literal(date(1900, 1, 1))
    return "NULL"


def _parse_column(col_def: Any, table_name: str, dialect: Dialect) -> ColumnDefinition:
    if not isinstance(col_def, dict):
        raise MetadataError(f"Each column definition of '{table_name}' must be a mapping")

    unknown = set(col_def) - COLUMN_KEYS
    if unknown:
        raise MetadataError(f"Unknown column keys in '{table_name}': {sorted(unknown)}")

    if "name" not in col_def:
        raise MetadataError(f"Column definition in '{table_name}' must include 'name' field")

    if "value" in col_def and "formatted_value" in col_def:
        raise MetadataError(
            f"Column '{col_def['name']}' of '{table_name}' sets both 'value' and 'formatted_value'"
        )

    type_name = str(col_def.get("type", "sql_variant"))
    column_type = ColumnType(
        name=type_name,
        is_read_only=bool(col_def.get("read_only", False)),
        display_cast=col_def.get("display_cast"),
    )

    if "formatted_value" in col_def:
        formatted_value = str(col_def["formatted_value"])
    elif "value" in col_def:
        formatted_value = dialect.format_literal(col_def["value"])
    else:
        formatted_value = sample_value_for_type(type_name, dialect)

    return ColumnDefinition(
        name=str(col_def["name"]),
        type=column_type,
        is_identity=bool(col_def.get("identity", False)),
        formatted_value=formatted_value,
    )


def parse_table_definition(
    document: Any, dialect: str | Dialect | None = None
) -> TableDefinition:
    """
    Build a TableDefinition from a parsed YAML/JSON document.

    Raises:
        MetadataError: If the document is malformed
    """
    if not isinstance(document, dict):
        raise MetadataError("Table definition must be a mapping")

    unknown = set(document) - TABLE_KEYS
    if unknown:
        raise MetadataError(f"Unknown table keys: {sorted(unknown)}")

    if not document.get("name"):
        raise MetadataError("Table definition must include 'name' field")

    table_name = str(document["name"])
    columns = document.get("columns") or []
    if not isinstance(columns, list):
        raise MetadataError(f"Columns of '{table_name}' must be a list of column definitions")

    d = get_dialect(dialect)
    return TableDefinition(
        name=table_name,
        columns=tuple(_parse_column(col_def, table_name, d) for col_def in columns),
    )


def load_table_definition(
    path: str | Path, dialect: str | Dialect | None = None
) -> TableDefinition:
    """
    Load a table definition from a YAML or JSON file.

    Raises:
        MetadataError: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except OSError as e:
        raise MetadataError(f"Cannot read table definition {path}: {e}") from e
    except yaml.YAMLError as e:
        raise MetadataError(f"Invalid table definition {path}: {e}") from e

    table = parse_table_definition(document, dialect)
    logger.debug(f"Loaded table definition {table.name} with {len(table.columns)} column(s) from {path}")
    return table


def _cell_value(text: str) -> Any:
    """
    Read a cell value typed on the command line.

    YAML decides the type, but a number, boolean or null is only accepted
    when it is spelled canonically. YAML 1.1 reads ``010`` as octal 8,
    ``12:30`` as 750 and ``on`` as true; such text stays a string so a
    zero-padded key is never turned into another key.
    """
    if not text:
        return None
    try:
        value = yaml.safe_load(text)
    except yaml.YAMLError:
        return text

    if isinstance(value, str) and text[0] in "'\"":
        return value
    if isinstance(value, bool):
        return value if text.lower() in BOOLEAN_LITERALS else text
    if isinstance(value, int):
        return value if CANONICAL_INTEGER.fullmatch(text) else text
    if isinstance(value, float):
        return value if CANONICAL_FLOAT.fullmatch(text) else text
    if value is None:
        return None if text.lower() in NULL_LITERALS else text
    # Unquoted strings, dates, mappings and sequences keep the text as typed
    return text


def parse_cell(cell_text: str, dialect: str | Dialect | None = None) -> SqlCellValue:
    """
    Parse a ``column=value`` string into a SqlCellValue.

    Raises:
        MetadataError: If the string has no '=' or an empty column name
    """
    column_name, separator, raw_text = cell_text.partition("=")
    column_name = column_name.strip()
    if not separator or not column_name:
        raise MetadataError(f"Invalid cell '{cell_text}'. Expected 'column=value'")

    return SqlCellValue.from_raw(column_name, _cell_value(raw_text.strip()), dialect)
