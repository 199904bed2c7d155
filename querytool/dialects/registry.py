"""
Dialect registry for looking up SQL dialects by name.

Dialects register themselves when their module is imported; the registry is
read-only after import.
"""

import logging

from querytool.dialects.base import Dialect
from querytool.exceptions import UnknownDialectError

DEFAULT_DIALECT = "tsql"


class DialectRegistry:
    """Registry for managing SQL dialects."""

    def __init__(self):
        self._dialects: dict[str, type[Dialect]] = {}
        self.logger = logging.getLogger(self.__class__.__name__)

    def register(self, dialect_name: str, dialect_class: type[Dialect]) -> None:
        """
        Register a dialect.

        Args:
            dialect_name: Dialect identifier (e.g., 'tsql', 'postgres')
            dialect_class: Class that implements Dialect
        """
        self._dialects[dialect_name.lower()] = dialect_class
        self.logger.debug(f"Registered dialect: {dialect_name} -> {dialect_class.__name__}")

    def get_dialect_class(self, dialect_name: str) -> type[Dialect] | None:
        return self._dialects.get(dialect_name.lower())

    def create_dialect(self, dialect_name: str) -> Dialect:
        """
        Create a dialect instance by name.

        Raises:
            UnknownDialectError: If the dialect is not registered
        """
        dialect_class = self.get_dialect_class(dialect_name)
        if not dialect_class:
            supported = sorted(self._dialects.keys())
            raise UnknownDialectError(
                f"Unsupported dialect: {dialect_name}. Supported dialects: {supported}"
            )
        return dialect_class()

    def list_dialects(self) -> list[str]:
        """Get list of registered dialect names."""
        return list(self._dialects.keys())

    def is_supported(self, dialect_name: str) -> bool:
        return dialect_name.lower() in self._dialects


# Global registry instance
_registry = DialectRegistry()


def register_dialect(dialect_name: str, dialect_class: type[Dialect]) -> None:
    """Register a dialect with the global registry."""
    _registry.register(dialect_name, dialect_class)


def get_dialect(dialect: str | Dialect | None = None) -> Dialect:
    """
    Resolve a dialect name or instance.

    Args:
        dialect: Dialect name, Dialect instance, or None for the default dialect

    Returns:
        Dialect instance
    """
    if isinstance(dialect, Dialect):
        return dialect
    return _registry.create_dialect(dialect or DEFAULT_DIALECT)


def list_available_dialects() -> list[str]:
    """Get list of available dialect names."""
    return _registry.list_dialects()


def is_dialect_supported(dialect_name: str) -> bool:
    """Check if a dialect name is supported."""
    return _registry.is_supported(dialect_name)
