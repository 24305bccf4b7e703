"""
Configuration Validation

Validation helpers for typed values read from the configuration namespace.
"""

import logging

from .exceptions import ConfigValidationError
from .namespace import ConfigNamespace

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"critical", "error", "warning", "info", "debug", "trace"}


class ConfigValidator:
    """Configuration validation utilities."""

    @staticmethod
    def validate_port(port: int | str) -> bool:
        """
        Validate port number.

        Args:
            port: Port number to validate

        Returns:
            True if port is valid
        """
        try:
            port_int = int(port)
            return 1 <= port_int <= 65535
        except (ValueError, TypeError):
            return False

    @staticmethod
    def validate_host(host: str) -> bool:
        """Validate that a bind host is non-empty and has no whitespace."""
        return bool(host) and not any(char.isspace() for char in host)

    @staticmethod
    def validate_log_level(level: str) -> bool:
        """Validate a uvicorn log level name."""
        return bool(level) and level.lower() in _LOG_LEVELS


def require_port(config: ConfigNamespace, key: str = "PORT", default: int = 8000) -> int:
    """
    Read a port from the namespace.

    Raises:
        ConfigValidationError: If the value is not an integer in 1-65535
    """
    port = config.get_int(key, default)
    if not ConfigValidator.validate_port(port):
        raise ConfigValidationError(f"{key} must be between 1 and 65535, got {port}", field=key)
    return port


def require_log_level(config: ConfigNamespace, key: str = "LOG_LEVEL", default: str = "info") -> str:
    """
    Read a log level from the namespace.

    Raises:
        ConfigValidationError: If the value is not a known log level;
            a blank value falls back to the default
    """
    level = config.get(key, "").strip().lower() or default
    if not ConfigValidator.validate_log_level(level):
        logger.debug(f"Rejected log level {level!r} from {key}")
        raise ConfigValidationError(f"{key} must be one of {sorted(_LOG_LEVELS)}, got {level!r}", field=key)
    return level
