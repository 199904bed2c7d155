"""
querytool

SQL statement synthesis and classification for interactive database browsing.
"""

from .builder import (
    DEFAULT_GRANTEE,
    SelectionShape,
    TableSelectLimit,
    build_delete,
    build_grant_execute,
    build_insert,
    build_row_delete,
    build_row_update,
    build_select,
    build_select_row_count,
    build_update,
    get_where_clause,
)
from .catalog import (
    bind_search_string,
    build_table_list_query,
    get_system_query,
    list_system_queries,
    resolve_system_query,
)
from .classification import (
    SHOW_RESULTS_DIRECTIVE,
    QueryKind,
    classify,
    is_crud,
    is_destructive,
    is_structure_altering,
    requires_confirmation,
    returns_results,
)
from .dialects import Dialect, SystemQuery, get_dialect
from .formatting import format_literal, quote_identifier, quote_table_name
from .heuristics import get_id_column_names, is_trusted_identifier
from .typing import (
    ColumnDefinition,
    ColumnType,
    Resolution,
    SqlCellValue,
    SqlStatement,
    TableDefinition,
)

__all__ = [
    # Metadata model
    "ColumnType",
    "ColumnDefinition",
    "TableDefinition",
    "SqlCellValue",
    "SqlStatement",
    "Resolution",
    # Builders
    "SelectionShape",
    "TableSelectLimit",
    "DEFAULT_GRANTEE",
    "build_insert",
    "build_select",
    "build_update",
    "build_row_update",
    "build_row_delete",
    "build_delete",
    "build_select_row_count",
    "build_grant_execute",
    "get_where_clause",
    # Catalog
    "SystemQuery",
    "resolve_system_query",
    "get_system_query",
    "list_system_queries",
    "build_table_list_query",
    "bind_search_string",
    # Classification
    "QueryKind",
    "SHOW_RESULTS_DIRECTIVE",
    "classify",
    "is_crud",
    "returns_results",
    "is_destructive",
    "is_structure_altering",
    "requires_confirmation",
    # Formatting and heuristics
    "Dialect",
    "get_dialect",
    "quote_identifier",
    "quote_table_name",
    "format_literal",
    "get_id_column_names",
    "is_trusted_identifier",
]
