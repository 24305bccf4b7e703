"""
Environment Detection

Resolves the deployment environment from the configuration namespace.
"""

import logging
from collections.abc import Mapping
from enum import Enum

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    """Application environment types."""
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def from_string(cls, env_str: str) -> 'Environment':
        """Convert string to Environment enum, defaulting to development."""
        if not env_str:
            return cls.DEVELOPMENT

        env_value = env_str.lower().strip()

        # Handle common variations
        env_mapping = {
            "dev": cls.DEVELOPMENT,
            "develop": cls.DEVELOPMENT,
            "development": cls.DEVELOPMENT,
            "test": cls.TESTING,
            "testing": cls.TESTING,
            "stage": cls.STAGING,
            "staging": cls.STAGING,
            "prod": cls.PRODUCTION,
            "production": cls.PRODUCTION,
        }

        return env_mapping.get(env_value, cls.DEVELOPMENT)


def get_current_environment(config: Mapping[str, str]) -> Environment:
    """
    Detect current environment from the configuration namespace.

    Checks keys in order of precedence:
    1. ENVIRONMENT
    2. ENV
    3. APP_ENV

    Falls back to testing on CI runners and to development otherwise.

    Args:
        config: Configuration namespace (or any string mapping)

    Returns:
        Environment enum value
    """
    for env_var in ["ENVIRONMENT", "ENV", "APP_ENV"]:
        env_value = config.get(env_var)
        if env_value:
            environment = Environment.from_string(env_value)
            logger.debug(f"Environment detected from {env_var}: {environment.value}")
            return environment

    if any(config.get(ci_var) for ci_var in ["CI", "GITHUB_ACTIONS", "CONTINUOUS_INTEGRATION"]):
        logger.debug("Environment detected from CI variables: testing")
        return Environment.TESTING

    logger.debug("Environment defaulted to: development")
    return Environment.DEVELOPMENT
