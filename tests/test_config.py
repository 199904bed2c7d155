"""
Tests for querytool.toml loading.
"""

import os

import pytest

from querytool.builder import DEFAULT_GRANTEE
from querytool.config import CONFIG_FILE_NAME, QueryToolConfig, load_config
from querytool.exceptions import ConfigurationError


@pytest.fixture
def in_temp_dir(temp_project_dir):
    """Run the test with the temporary directory as working directory."""
    original_cwd = os.getcwd()
    os.chdir(temp_project_dir)
    try:
        yield temp_project_dir
    finally:
        os.chdir(original_cwd)


class TestLoadConfig:
    """Test load_config."""

    def test_defaults_without_file(self, in_temp_dir):
        config = load_config()

        assert config == QueryToolConfig()
        assert config.dialect == "tsql"
        assert config.row_limit == 100
        assert config.grantee == DEFAULT_GRANTEE

    def test_reads_file_in_working_directory(self, in_temp_dir):
        (in_temp_dir / CONFIG_FILE_NAME).write_text(
            '[querytool]\ndialect = "postgres"\nrow_limit = 25\ngrantee = "app_user"\n'
        )

        config = load_config()

        assert config == QueryToolConfig(dialect="postgres", row_limit=25, grantee="app_user")

    def test_explicit_path(self, temp_project_dir):
        path = temp_project_dir / "custom.toml"
        path.write_text("[querytool]\nrow_limit = 10\n")

        assert load_config(path).row_limit == 10

    def test_missing_explicit_path(self, temp_project_dir):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(temp_project_dir / "missing.toml")

    def test_file_without_section(self, temp_project_dir):
        path = temp_project_dir / "other.toml"
        path.write_text('[tool]\nname = "x"\n')

        assert load_config(path) == QueryToolConfig()

    def test_overrides_take_precedence(self, temp_project_dir):
        path = temp_project_dir / "q.toml"
        path.write_text('[querytool]\ndialect = "postgres"\nrow_limit = 10\n')

        config = load_config(path, overrides={"dialect": "tsql", "row_limit": None})

        assert config.dialect == "tsql"
        assert config.row_limit == 10

    @pytest.mark.parametrize(
        "content,message",
        [
            ('[querytool]\ndialect = "oracle"\n', "Unsupported dialect"),
            ("[querytool]\ndialect = 1\n", "must be a string"),
            ("[querytool]\nrow_limit = 0\n", "must be positive"),
            ('[querytool]\nrow_limit = "ten"\n', "must be an integer"),
            ("[querytool]\nrow_limit = true\n", "must be an integer"),
            ('[querytool]\ngrantee = ""\n', "non-empty string"),
            ("[querytool]\ncolour = 1\n", "Unknown settings"),
            ('querytool = "tsql"\n', "must be a table"),
            ("[querytool\n", "Invalid TOML"),
        ],
    )
    def test_invalid_settings(self, temp_project_dir, content, message):
        path = temp_project_dir / "bad.toml"
        path.write_text(content)

        with pytest.raises(ConfigurationError, match=message):
            load_config(path)
