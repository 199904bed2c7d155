"""
Custom exceptions for querytool.
"""


class QueryToolError(Exception):
    """Base exception for all querytool errors."""

    pass


class MetadataError(QueryToolError):
    """Raised when a table definition is malformed."""

    pass


class EmptySelectionError(QueryToolError):
    """Raised when a row-level builder is called without any cells."""

    pass


class QueryBuildError(QueryToolError):
    """Raised when a builder receives invalid arguments."""

    pass


class UnknownDialectError(QueryToolError):
    """Raised when a dialect name is not registered."""

    pass


class ConfigurationError(QueryToolError):
    """Raised when querytool.toml contains invalid settings."""

    pass
