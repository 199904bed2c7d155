"""
PostgreSQL dialect.

Double-quoted identifiers, LIMIT n row limiting and pg_catalog /
information_schema introspection. Mixed-case names are quoted because
PostgreSQL folds unquoted identifiers to lower case.
"""

import re

from querytool.dialects.base import Dialect, SystemQuery
from querytool.dialects.registry import register_dialect

_SYSTEM_SCHEMAS = "'pg_catalog', 'information_schema'"

# Keywords marked reserved for PostgreSQL in the SQL key words appendix
_RESERVED_KEYWORDS = frozenset(
    """
    ALL ANALYSE ANALYZE AND ANY ARRAY AS ASC ASYMMETRIC AUTHORIZATION BINARY BOTH CASE
    CAST CHECK COLLATE COLLATION COLUMN CONCURRENTLY CONSTRAINT CREATE CROSS
    CURRENT_CATALOG CURRENT_DATE CURRENT_ROLE CURRENT_SCHEMA CURRENT_TIME
    CURRENT_TIMESTAMP CURRENT_USER DEFAULT DEFERRABLE DESC DISTINCT DO ELSE END EXCEPT
    FALSE FETCH FOR FOREIGN FREEZE FROM FULL GRANT GROUP HAVING ILIKE IN INITIALLY INNER
    INTERSECT INTO IS ISNULL JOIN LATERAL LEADING LEFT LIKE LIMIT LOCALTIME
    LOCALTIMESTAMP NATURAL NOT NOTNULL NULL OFFSET ON ONLY OR ORDER OUTER OVERLAPS
    PLACING PRIMARY REFERENCES RETURNING RIGHT SELECT SESSION_USER SIMILAR SOME
    SYMMETRIC SYSTEM_USER TABLE TABLESAMPLE THEN TO TRAILING TRUE UNION UNIQUE USER
    USING VARIADIC VERBOSE WHEN WHERE WINDOW WITH
    """.split()
)


class PostgresDialect(Dialect):
    """PostgreSQL dialect."""

    name = "postgres"
    sqlglot_dialect = "postgres"

    IDENTIFIER_START = '"'
    IDENTIFIER_END = '"'
    PLAIN_IDENTIFIER = re.compile(r"[a-z_][a-z0-9_$]*")
    RESERVED_KEYWORDS = _RESERVED_KEYWORDS

    ROW_COUNT_COLUMN = "c.reltuples"

    def format_binary(self, value: bytes) -> str:
        return f"'\\x{value.hex()}'"

    def limit_clause(self, row_limit: int) -> str:
        return f"LIMIT {row_limit}"

    def grant_execute_target(self, name: str) -> str:
        # PostgreSQL needs the object kind in front of routine names
        return f"PROCEDURE {self.quote_table_name(name)}"

    def get_system_queries(self) -> dict[SystemQuery, str]:
        return {
            SystemQuery.DATABASE_LIST: (
                "SELECT datname AS name FROM pg_catalog.pg_database "
                "WHERE datistemplate = false AND datname NOT IN ('postgres')"
            ),
            SystemQuery.TABLE_LIST_WITH_ROW_COUNTS: (
                "SELECT\n"
                '\tn.nspname "Schema",\n'
                '\tc.relname "Table",\n'
                '\tc.oid "Id",\n'
                '\tc.reltuples::bigint "Rows"\n'
                "FROM\n"
                "\tpg_catalog.pg_class c\n"
                "INNER JOIN\n"
                "\tpg_catalog.pg_namespace n ON (n.oid = c.relnamespace)\n"
                "WHERE\n"
                "\tc.relkind = 'r'\n"
                f"\tAND n.nspname NOT IN ({_SYSTEM_SCHEMAS})\n"
            ),
            SystemQuery.STORED_PROCEDURE_LIST: (
                "SELECT p.proname AS name, pg_catalog.pg_get_functiondef(p.oid) AS text "
                "FROM pg_catalog.pg_proc p "
                "JOIN pg_catalog.pg_namespace n ON (n.oid = p.pronamespace) "
                f"WHERE p.prokind = 'p' AND n.nspname NOT IN ({_SYSTEM_SCHEMAS}) "
                "ORDER BY p.proname"
            ),
            SystemQuery.VIEW_LIST: (
                "SELECT\n"
                "\tv.table_name AS name,\n"
                "\tCOALESCE(v.view_definition, '') AS definition\n"
                "FROM\n"
                "\tinformation_schema.views v\n"
                "WHERE\n"
                f"\tv.table_schema NOT IN ({_SYSTEM_SCHEMAS})\n"
                "ORDER BY\n"
                "\tv.table_name"
            ),
            SystemQuery.FIND_COLUMNS: (
                "SELECT \n"
                '\tc.table_name "Table", \n'
                '\tc.column_name "Column", \n'
                "\tc.data_type || COALESCE(' (' || c.character_maximum_length || ')', '') "
                '"Column definition"\n'
                "FROM \n"
                "\tinformation_schema.columns c \n"
                "WHERE \n"
                f"\tc.table_schema NOT IN ({_SYSTEM_SCHEMAS}) \n"
                "\tAND c.column_name LIKE @SearchString \n"
                "ORDER BY \n"
                "\tc.table_name\n"
            ),
        }


register_dialect("postgres", PostgresDialect)
register_dialect("postgresql", PostgresDialect)
