"""
Pytest configuration and shared fixtures for querytool tests.
"""

import tempfile
from pathlib import Path

import pytest

from querytool.dialects import PostgresDialect, TSQLDialect
from querytool.typing import ColumnDefinition, ColumnType, SqlCellValue, TableDefinition


@pytest.fixture
def tsql():
    """T-SQL dialect instance."""
    return TSQLDialect()


@pytest.fixture
def postgres():
    """PostgreSQL dialect instance."""
    return PostgresDialect()


@pytest.fixture
def users_table():
    """Users table: identity Id plus two writable columns."""
    return TableDefinition(
        name="Users",
        columns=(
            ColumnDefinition("Id", ColumnType("int"), is_identity=True, formatted_value="0"),
            ColumnDefinition("Name", ColumnType("nvarchar"), formatted_value="'Bob'"),
            ColumnDefinition("Email", ColumnType("nvarchar"), formatted_value="'bob@example.com'"),
        ),
    )


@pytest.fixture
def orders_table():
    """Orders table without identity, with read-only and display-cast columns."""
    return TableDefinition(
        name="sales.Orders",
        columns=(
            ColumnDefinition("OrderNumber", ColumnType("int"), formatted_value="1"),
            ColumnDefinition("Total", ColumnType("decimal(10,2)"), formatted_value="9.99"),
            ColumnDefinition(
                "Version", ColumnType("rowversion", is_read_only=True), formatted_value="NULL"
            ),
            ColumnDefinition(
                "Location",
                ColumnType("geography", display_cast="NVARCHAR(MAX)"),
                formatted_value="NULL",
            ),
            ColumnDefinition("Order Notes", ColumnType("nvarchar"), formatted_value="''"),
        ),
    )


@pytest.fixture
def view_without_columns():
    """View whose columns could not be discovered."""
    return TableDefinition(name="ActiveUsers")


@pytest.fixture
def id_cells():
    """Cells of the Id column for two selected rows."""
    return [SqlCellValue("Id", 1, "1"), SqlCellValue("Id", 2, "2")]


@pytest.fixture
def temp_project_dir():
    """Create a temporary working directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def users_yaml(temp_project_dir):
    """Users table definition written as YAML."""
    path = temp_project_dir / "users.yaml"
    path.write_text(
        "name: Users\n"
        "columns:\n"
        "  - name: Id\n"
        "    type: int\n"
        "    identity: true\n"
        "  - name: Name\n"
        "    type: nvarchar(50)\n"
        "    value: Bob\n"
        "  - name: Email\n"
        "    type: nvarchar(100)\n"
        "    formatted_value: \"'bob@example.com'\"\n"
    )
    return path


def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
