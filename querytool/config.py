"""
Configuration for querytool.

Settings are read from the ``[querytool]`` table of a ``querytool.toml`` file;
every setting has a default so the file is optional.
"""

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from querytool.builder import DEFAULT_GRANTEE
from querytool.dialects import DEFAULT_DIALECT, is_dialect_supported, list_available_dialects
from querytool.exceptions import ConfigurationError

CONFIG_FILE_NAME = "querytool.toml"


@dataclass
class QueryToolConfig:
    """Configuration for statement generation."""

    dialect: str = DEFAULT_DIALECT
    row_limit: int = 100  # Row cap for top/bottom previews
    grantee: str = DEFAULT_GRANTEE


def _validate_config(config_dict: dict[str, Any]) -> None:
    """Validate configuration values."""
    known = {f.name for f in fields(QueryToolConfig)}
    unknown = set(config_dict) - known
    if unknown:
        raise ConfigurationError(f"Unknown settings in [querytool]: {sorted(unknown)}")

    if "dialect" in config_dict:
        if not isinstance(config_dict["dialect"], str):
            raise ConfigurationError("Dialect must be a string")
        if not is_dialect_supported(config_dict["dialect"]):
            available = ", ".join(sorted(list_available_dialects()))
            raise ConfigurationError(
                f"Unsupported dialect '{config_dict['dialect']}'. Supported: {available}"
            )

    if "row_limit" in config_dict:
        row_limit = config_dict["row_limit"]
        if isinstance(row_limit, bool) or not isinstance(row_limit, int):
            raise ConfigurationError("Row limit must be an integer")
        if row_limit <= 0:
            raise ConfigurationError("Row limit must be positive")

    if "grantee" in config_dict:
        if not isinstance(config_dict["grantee"], str) or not config_dict["grantee"].strip():
            raise ConfigurationError("Grantee must be a non-empty string")


def load_config(
    config_path: str | Path | None = None, overrides: dict[str, Any] | None = None
) -> QueryToolConfig:
    """
    Load configuration from a TOML file and apply overrides.

    Args:
        config_path: Path to a TOML file. If None, ``querytool.toml`` in the
            current directory is used when it exists.
        overrides: Settings that take precedence over the file (None values ignored)

    Returns:
        QueryToolConfig

    Raises:
        ConfigurationError: If the file is missing, unreadable or has invalid settings
    """
    settings: dict[str, Any] = {}

    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")
    else:
        path = Path.cwd() / CONFIG_FILE_NAME

    if path.exists():
        try:
            with open(path, "rb") as f:
                document = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in {path}: {e}") from e
        section = document.get("querytool", {})
        if not isinstance(section, dict):
            raise ConfigurationError(f"[querytool] in {path} must be a table")
        settings.update(section)

    if overrides:
        settings.update({k: v for k, v in overrides.items() if v is not None})

    _validate_config(settings)
    return QueryToolConfig(**settings)
