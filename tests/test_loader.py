"""
Tests for loading table definitions and cells.
"""

import json

import pytest

from querytool.builder import SelectionShape, build_row_delete
from querytool.exceptions import MetadataError
from querytool.loader import (
    load_table_definition,
    parse_cell,
    parse_table_definition,
    sample_value_for_type,
)


class TestSampleValues:
    """Test sample_value_for_type."""

    @pytest.mark.parametrize(
        "type_name,expected",
        [
            ("int", "0"),
            ("DECIMAL(10, 2)", "0"),
            ("nvarchar(50)", "''"),
            ("bit", "0"),
            ("datetime2", "'1900-01-01'"),
            ("geography", "NULL"),
            ("uniqueidentifier", "NULL"),
        ],
    )
    def test_tsql(self, type_name, expected):
        assert sample_value_for_type(type_name) == expected

    def test_postgres_boolean(self):
        assert sample_value_for_type("boolean", "postgres") == "FALSE"


class TestParseTableDefinition:
    """Test parse_table_definition."""

    def test_full_definition(self):
        table = parse_table_definition(
            {
                "name": "dbo.Users",
                "columns": [
                    {"name": "Id", "type": "int", "identity": True},
                    {"name": "Name", "type": "nvarchar", "value": "O'Brien"},
                    {"name": "Shape", "type": "geometry", "display_cast": "NVARCHAR(MAX)"},
                    {"name": "Version", "type": "rowversion", "read_only": True},
                    {"name": "Score", "formatted_value": "42"},
                ],
            }
        )

        assert table.name == "dbo.Users"
        assert table.identity_column.name == "Id"
        by_name = {c.name: c for c in table.columns}
        assert by_name["Name"].formatted_value == "'O''Brien'"
        assert by_name["Shape"].type.display_cast == "NVARCHAR(MAX)"
        assert by_name["Version"].type.is_read_only is True
        assert by_name["Score"].formatted_value == "42"
        assert by_name["Score"].type.name == "sql_variant"

    def test_view_without_columns(self):
        table = parse_table_definition({"name": "ActiveUsers"})

        assert table.is_view_without_columns

    def test_value_uses_dialect(self):
        table = parse_table_definition(
            {"name": "t", "columns": [{"name": "Active", "value": True}]}, "postgres"
        )

        assert table.columns[0].formatted_value == "TRUE"

    @pytest.mark.parametrize(
        "document,message",
        [
            (["not", "a", "mapping"], "must be a mapping"),
            ({"columns": []}, "must include 'name'"),
            ({"name": "t", "schema": "dbo"}, "Unknown table keys"),
            ({"name": "t", "columns": {"a": 1}}, "must be a list"),
            ({"name": "t", "columns": ["Id"]}, "must be a mapping"),
            ({"name": "t", "columns": [{"type": "int"}]}, "must include 'name'"),
            ({"name": "t", "columns": [{"name": "a", "nullable": True}]}, "Unknown column keys"),
            (
                {"name": "t", "columns": [{"name": "a", "value": 1, "formatted_value": "1"}]},
                "both 'value' and 'formatted_value'",
            ),
        ],
    )
    def test_invalid_documents(self, document, message):
        with pytest.raises(MetadataError, match=message):
            parse_table_definition(document)


class TestLoadTableDefinition:
    """Test load_table_definition."""

    def test_yaml_file(self, users_yaml):
        table = load_table_definition(users_yaml)

        assert [c.name for c in table.columns] == ["Id", "Name", "Email"]
        assert [c.formatted_value for c in table.writable_columns] == [
            "'Bob'",
            "'bob@example.com'",
        ]

    def test_json_file(self, temp_project_dir):
        path = temp_project_dir / "t.json"
        path.write_text(json.dumps({"name": "T", "columns": [{"name": "A", "type": "int"}]}))

        table = load_table_definition(path)

        assert table.columns[0].formatted_value == "0"

    def test_missing_file(self, temp_project_dir):
        with pytest.raises(MetadataError, match="Cannot read"):
            load_table_definition(temp_project_dir / "missing.yaml")

    def test_invalid_yaml(self, temp_project_dir):
        path = temp_project_dir / "bad.yaml"
        path.write_text("name: [unclosed\n")

        with pytest.raises(MetadataError, match="Invalid table definition"):
            load_table_definition(path)


class TestParseCell:
    """Test parse_cell."""

    @pytest.mark.parametrize(
        "cell_text,column,raw,formatted",
        [
            ("Id=1", "Id", 1, "1"),
            ("Name=Bob", "Name", "Bob", "'Bob'"),
            ("Name='O''Brien'", "Name", "O'Brien", "'O''Brien'"),
            ("Name=null", "Name", None, "NULL"),
            ("Name=", "Name", None, "NULL"),
            ("Active=true", "Active", True, "1"),
            ("Expr=a=b", "Expr", "a=b", "'a=b'"),
            (" Id = 7", "Id", 7, "7"),
            ("Tags=[a, b]", "Tags", "[a, b]", "'[a, b]'"),
        ],
    )
    def test_parse(self, cell_text, column, raw, formatted):
        cell = parse_cell(cell_text)

        assert cell.column_name == column
        assert cell.raw_value == raw
        assert cell.sql_formatted_value == formatted

    @pytest.mark.parametrize(
        "cell_text,raw,formatted",
        [
            ("Code=010", "010", "'010'"),
            ("Zip=01234", "01234", "'01234'"),
            ("Slot=12:30", "12:30", "'12:30'"),
            ("Status=on", "on", "'on'"),
            ("Answer=no", "no", "'no'"),
            ("Hex=0x1A", "0x1A", "'0x1A'"),
            ("Amount=1_000", "1_000", "'1_000'"),
            ("Ratio=.5", ".5", "'.5'"),
            ("Score=.nan", ".nan", "'.nan'"),
            ("Day=2024-01-31", "2024-01-31", "'2024-01-31'"),
            ("Note=Bob #1", "Bob #1", "'Bob #1'"),
            ("Tag=#1", "#1", "'#1'"),
            ("Y=1e5", "1e5", "'1e5'"),
        ],
    )
    def test_non_canonical_values_stay_text(self, cell_text, raw, formatted):
        """Text that YAML 1.1 would reinterpret is kept exactly as typed."""
        cell = parse_cell(cell_text)

        assert cell.raw_value == raw
        assert cell.sql_formatted_value == formatted

    @pytest.mark.parametrize(
        "cell_text,raw",
        [
            ("N=0", 0),
            ("N=-12", -12),
            ("N=+3", 3),
            ("N=9.99", 9.99),
            ("N=1.50", 1.5),
            ("N=FALSE", False),
            ("N=~", None),
        ],
    )
    def test_canonical_values_are_typed(self, cell_text, raw):
        assert parse_cell(cell_text).raw_value == raw

    def test_zero_padded_key_in_delete_filter(self):
        cells = [parse_cell("code=010", "postgres"), parse_cell("code=8", "postgres")]

        statement = build_row_delete("t", cells, SelectionShape.COLUMN, "postgres")

        assert statement.text.endswith("WHERE\n\tcode IN ('010', 8)")

    @pytest.mark.parametrize("cell_text", ["Id", "=1", "  =1"])
    def test_invalid(self, cell_text):
        with pytest.raises(MetadataError, match="Expected 'column=value'"):
            parse_cell(cell_text)
