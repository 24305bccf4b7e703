"""
Configuration Exceptions

Exception classes raised while loading, merging and validating startup
configuration. Every error in this module is fatal for startup.
"""

from typing import Any


class ConfigError(Exception):
    """Base exception for all configuration errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for error reports."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ConfigParseError(ConfigError):
    """Raised when the environment override file is malformed."""

    def __init__(self, path: str, line: int, statement: str) -> None:
        self.path = path
        self.line = line
        self.statement = statement
        super().__init__(
            f"Could not parse {path} at line {line}",
            details={"path": path, "line": line},
        )


class ConfigValidationError(ConfigError):
    """Raised when a configuration value has an invalid format."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message, details={"field": field} if field else None)


class ConfigNamespaceFrozenError(ConfigError):
    """Raised when writing to a namespace after bootstrap has completed."""

    pass


class BootstrapError(ConfigError):
    """Raised when bootstrap is invoked more than once."""

    pass
