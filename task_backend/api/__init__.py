"""HTTP application shell for the task management backend."""

from .main import create_app, get_config

__all__ = ["create_app", "get_config"]
