"""
Tests for the T-SQL dialect.
"""

from datetime import date, datetime
from decimal import Decimal

import pytest

from querytool.dialects import SystemQuery
from querytool.exceptions import QueryBuildError


class TestIdentifierQuoting:
    """Test bracket quoting of identifiers."""

    @pytest.mark.parametrize("name", ["Users", "user_id", "_tmp", "Col1", "a@b", "Temp#"])
    def test_plain_names_unchanged(self, tsql, name):
        assert tsql.quote_identifier(name) == name

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Order Details", "[Order Details]"),
            ("1stColumn", "[1stColumn]"),
            ("Straße", "[Straße]"),
            ("weird]name", "[weird]]name]"),
            ("Order", "[Order]"),
            ("user", "[user]"),
            ("Key", "[Key]"),
        ],
    )
    def test_names_that_need_quoting(self, tsql, name, expected):
        assert tsql.quote_identifier(name) == expected

    @pytest.mark.parametrize("name", ["Users", "Order Details", "weird]name", "Select"])
    def test_quoting_is_idempotent(self, tsql, name):
        once = tsql.quote_identifier(name)

        assert tsql.quote_identifier(once) == once

    def test_already_quoted_plain_name_kept(self, tsql):
        assert tsql.quote_identifier("[Users]") == "[Users]"

    def test_badly_escaped_brackets_are_requoted(self, tsql):
        """'[a]b]' is not a single quoted identifier."""
        assert tsql.quote_identifier("[a]b]") == "[[a]]b]]]"

    def test_empty_name(self, tsql):
        with pytest.raises(QueryBuildError):
            tsql.quote_identifier("")

    def test_is_quoted(self, tsql):
        assert tsql.is_quoted("[Order Details]")
        assert tsql.is_quoted("[a]]b]")
        assert not tsql.is_quoted("Users")
        assert not tsql.is_quoted("[")
        assert not tsql.is_quoted('"Users"')


class TestQualifiedNames:
    """Test schema-qualified name handling."""

    def test_split_plain(self, tsql):
        assert tsql.split_qualified_name("dbo.Users") == ["dbo", "Users"]

    def test_split_keeps_dots_inside_brackets(self, tsql):
        assert tsql.split_qualified_name("[my.schema].[a.b]") == ["[my.schema]", "[a.b]"]

    def test_split_escaped_bracket(self, tsql):
        assert tsql.split_qualified_name("[a]].b].c") == ["[a]].b]", "c"]

    def test_quote_table_name(self, tsql):
        assert tsql.quote_table_name("dbo.Order Details") == "dbo.[Order Details]"
        assert tsql.quote_table_name("sales.Orders") == "sales.Orders"
        assert tsql.quote_table_name("[my.schema].Users") == "[my.schema].Users"


class TestLiterals:
    """Test literal formatting."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, "NULL"),
            (True, "1"),
            (False, "0"),
            (42, "42"),
            (-1.5, "-1.5"),
            (Decimal("9.99"), "9.99"),
            ("Bob", "'Bob'"),
            ("O'Brien", "'O''Brien'"),
            ("", "''"),
            ("Zoë", "N'Zoë'"),
            (date(2024, 1, 31), "'2024-01-31'"),
            (datetime(2024, 1, 31, 13, 45, 0), "'2024-01-31 13:45:00'"),
            (b"\x01\xab", "0x01AB"),
        ],
    )
    def test_format_literal(self, tsql, value, expected):
        assert tsql.format_literal(value) == expected

    def test_unknown_type_is_quoted_text(self, tsql):
        class Point:
            def __str__(self):
                return "POINT (1 2)"

        assert tsql.format_literal(Point()) == "'POINT (1 2)'"


class TestRowLimitAndCatalog:
    """Test TOP and catalog templates."""

    def test_top_clause(self, tsql):
        assert tsql.top_clause(10) == "TOP 10 "
        assert tsql.limit_clause(10) == ""

    def test_grant_execute_target_is_bare_name(self, tsql):
        assert tsql.grant_execute_target("dbo.usp Report") == "dbo.[usp Report]"

    def test_every_system_query_defined(self, tsql):
        assert set(tsql.get_system_queries()) == set(SystemQuery)

    def test_find_columns_has_search_parameter(self, tsql):
        assert "@SearchString" in tsql.get_system_queries()[SystemQuery.FIND_COLUMNS]

    def test_database_list_hides_system_databases(self, tsql):
        query = tsql.get_system_queries()[SystemQuery.DATABASE_LIST]

        assert "'master', 'tempdb', 'model', 'msdb'" in query


class TestConvertSql:
    """Test conversion to T-SQL through sqlglot."""

    def test_limit_becomes_top(self, tsql):
        converted = tsql.convert_sql("SELECT a FROM t LIMIT 5", source_dialect="postgres")

        assert "TOP 5" in converted.upper()

    def test_empty_text_unchanged(self, tsql):
        assert tsql.convert_sql("   ") == "   "

    def test_parse_error(self, tsql):
        with pytest.raises(QueryBuildError, match="conversion failed"):
            tsql.convert_sql("SELECT (", source_dialect="postgres")
