"""
SQL Server (T-SQL) dialect.

This is the default dialect:
- Bracket-quoted identifiers
- TOP n row limiting
- sys.* catalog views and the legacy sysobjects/syscolumns tables
"""

import re

from querytool.dialects.base import Dialect, SystemQuery
from querytool.dialects.registry import register_dialect

_SYSTEM_DATABASES = "'master', 'tempdb', 'model', 'msdb'"

# Reserved keywords of SQL Server (Transact-SQL reference)
_RESERVED_KEYWORDS = frozenset(
    """
    ADD ALL ALTER AND ANY AS ASC AUTHORIZATION BACKUP BEGIN BETWEEN BREAK BROWSE BULK BY
    CASCADE CASE CHECK CHECKPOINT CLOSE CLUSTERED COALESCE COLLATE COLUMN COMMIT COMPUTE
    CONSTRAINT CONTAINS CONTAINSTABLE CONTINUE CONVERT CREATE CROSS CURRENT CURRENT_DATE
    CURRENT_TIME CURRENT_TIMESTAMP CURRENT_USER CURSOR DATABASE DBCC DEALLOCATE DECLARE
    DEFAULT DELETE DENY DESC DISK DISTINCT DISTRIBUTED DOUBLE DROP DUMP ELSE END ERRLVL
    ESCAPE EXCEPT EXEC EXECUTE EXISTS EXIT EXTERNAL FETCH FILE FILLFACTOR FOR FOREIGN
    FREETEXT FREETEXTTABLE FROM FULL FUNCTION GOTO GRANT GROUP HAVING HOLDLOCK IDENTITY
    IDENTITY_INSERT IDENTITYCOL IF IN INDEX INNER INSERT INTERSECT INTO IS JOIN KEY KILL
    LEFT LIKE LINENO LOAD MERGE NATIONAL NOCHECK NONCLUSTERED NOT NULL NULLIF OF OFF
    OFFSETS ON OPEN OPENDATASOURCE OPENQUERY OPENROWSET OPENXML OPTION OR ORDER OUTER
    OVER PERCENT PIVOT PLAN PRECISION PRIMARY PRINT PROC PROCEDURE PUBLIC RAISERROR READ
    READTEXT RECONFIGURE REFERENCES REPLICATION RESTORE RESTRICT RETURN REVERT REVOKE
    RIGHT ROLLBACK ROWCOUNT ROWGUIDCOL RULE SAVE SCHEMA SECURITYAUDIT SELECT
    SEMANTICKEYPHRASETABLE SEMANTICSIMILARITYDETAILSTABLE SEMANTICSIMILARITYTABLE
    SESSION_USER SET SETUSER SHUTDOWN SOME STATISTICS SYSTEM_USER TABLE TABLESAMPLE
    TEXTSIZE THEN TO TOP TRAN TRANSACTION TRIGGER TRUNCATE TRY_CONVERT TSEQUAL UNION
    UNIQUE UNPIVOT UPDATE UPDATETEXT USE USER VALUES VARYING VIEW WAITFOR WHEN WHERE
    WHILE WITH WITHIN WRITETEXT
    """.split()
)


class TSQLDialect(Dialect):
    """Microsoft SQL Server dialect."""

    name = "tsql"
    sqlglot_dialect = "tsql"

    IDENTIFIER_START = "["
    IDENTIFIER_END = "]"
    PLAIN_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_@#$]*")
    RESERVED_KEYWORDS = _RESERVED_KEYWORDS

    ROW_COUNT_COLUMN = "p.rows"

    def format_string(self, value: str) -> str:
        literal = super().format_string(value)
        # Unicode text needs the N prefix or it is narrowed to the code page
        if any(ord(char) > 127 for char in value):
            return f"N{literal}"
        return literal

    def format_boolean(self, value: bool) -> str:
        # BIT columns
        return "1" if value else "0"

    def format_binary(self, value: bytes) -> str:
        return f"0x{value.hex().upper()}"

    def top_clause(self, row_limit: int) -> str:
        return f"TOP {row_limit} "

    def get_system_queries(self) -> dict[SystemQuery, str]:
        return {
            SystemQuery.DATABASE_LIST: (
                f"SELECT name FROM sys.databases WHERE name NOT IN ({_SYSTEM_DATABASES})"
            ),
            SystemQuery.TABLE_LIST_WITH_ROW_COUNTS: (
                "SELECT DISTINCT\n"
                '\ts.name "Schema",\n'
                '\tt.name "Table",\n'
                '\tt.object_id "Id",\n'
                '\tp.rows "Rows"\n'
                "FROM \n"
                "\tsys.tables t\n"
                "INNER JOIN\n"
                "\tsys.schemas s ON (t.schema_id = s.schema_id)\n"
                "INNER JOIN\n"
                "\tsys.partitions p ON (t.object_id = p.object_id AND p.index_id < 2)\n"
                "WHERE\n"
                "\tt.is_ms_shipped = 0\n"
            ),
            SystemQuery.STORED_PROCEDURE_LIST: (
                "SELECT so.name, sc.text FROM sysobjects so "
                "JOIN syscomments sc ON (sc.id = so.id) "
                "WHERE so.type ='P' AND so.category = 0 "
                "ORDER BY so.name, sc.colid"
            ),
            SystemQuery.VIEW_LIST: (
                "SELECT\n"
                "\to.name,\n"
                "\tCOALESCE(m.definition, '') AS definition\n"
                "FROM\n"
                "\tsys.objects o\n"
                "LEFT JOIN\n"
                "\tsys.sql_modules m ON (m.object_id = o.object_id)\n"
                "WHERE\n"
                "\to.type = 'V'\n"
                "ORDER BY\n"
                "\to.name"
            ),
            SystemQuery.FIND_COLUMNS: (
                "SELECT \n"
                '\ttables.name "Table", \n'
                '\tcolumns.name "Column", \n'
                "\tstype.name + ' (' + CAST(columns.length AS VARCHAR) + ')' \"Column definition\"\n"
                "FROM \n"
                "\tsysobjects tables \n"
                "JOIN\n"
                "\tsyscolumns columns ON (tables.id = columns.id) \n"
                "JOIN \n"
                "\tsystypes stype ON (columns.xtype = stype.xusertype)\n"
                "WHERE \n"
                "\ttables.xtype = 'U' \n"
                "\tAND tables.name NOT LIKE 'sys%' \n"
                "\tAND columns.name LIKE @SearchString \n"
                "ORDER BY \n"
                "\ttables.name\n"
            ),
        }


register_dialect("tsql", TSQLDialect)
register_dialect("mssql", TSQLDialect)
