"""
Tests for the dialect registry.
"""

import pytest

from querytool.dialects import (
    DEFAULT_DIALECT,
    Dialect,
    DialectRegistry,
    PostgresDialect,
    SystemQuery,
    TSQLDialect,
    get_dialect,
    is_dialect_supported,
    list_available_dialects,
)
from querytool.exceptions import UnknownDialectError


class TestDialectRegistry:
    """Test DialectRegistry and the module-level helpers."""

    def test_builtin_dialects_registered(self):
        available = list_available_dialects()

        for name in ["tsql", "mssql", "postgres", "postgresql"]:
            assert name in available

    def test_default_dialect(self):
        assert DEFAULT_DIALECT == "tsql"
        assert isinstance(get_dialect(), TSQLDialect)

    def test_lookup_is_case_insensitive(self):
        assert isinstance(get_dialect("PostgreSQL"), PostgresDialect)
        assert is_dialect_supported("MSSQL")

    def test_instance_passed_through(self, postgres):
        assert get_dialect(postgres) is postgres

    def test_unknown_dialect(self):
        with pytest.raises(UnknownDialectError, match="Unsupported dialect: oracle"):
            get_dialect("oracle")

        assert not is_dialect_supported("oracle")

    def test_register_custom_dialect(self):
        class UpperDialect(Dialect):
            name = "upper"

            def format_binary(self, value):
                return "NULL"

            def get_system_queries(self):
                return {query: "SELECT 1" for query in SystemQuery}

        registry = DialectRegistry()
        registry.register("Upper", UpperDialect)

        assert registry.is_supported("upper")
        assert registry.list_dialects() == ["upper"]
        assert isinstance(registry.create_dialect("UPPER"), UpperDialect)
        assert registry.get_dialect_class("missing") is None
