"""
Startup Configuration

Loads optional ``.env.local`` overrides into an explicit configuration
namespace. Values already provided by the hosting environment always win
over file defaults, and the namespace is read-only once bootstrap ends.
"""

from .dotenv_loader import DEFAULT_ENV_FILE, ConfigEntry, load_env_entries
from .environment import Environment, get_current_environment
from .exceptions import (
    BootstrapError,
    ConfigError,
    ConfigNamespaceFrozenError,
    ConfigParseError,
    ConfigValidationError,
)
from .namespace import ConfigNamespace

__all__ = [
    "DEFAULT_ENV_FILE",
    "ConfigEntry",
    "load_env_entries",
    "Environment",
    "get_current_environment",
    "ConfigNamespace",
    "ConfigError",
    "ConfigParseError",
    "ConfigValidationError",
    "ConfigNamespaceFrozenError",
    "BootstrapError",
]
