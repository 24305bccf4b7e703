"""
FastAPI Application Factory

Builds the web application around the configuration namespace produced by
bootstrap. Only liveness endpoints live here.
"""

import logging
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request

from task_backend import __version__
from task_backend.config import ConfigNamespace, get_current_environment

logger = logging.getLogger(__name__)

DEFAULT_APP_NAME = "Task Management Backend"


def get_config(request: Request) -> ConfigNamespace:
    """Dependency returning the configuration attached to the app."""
    return request.app.state.config


def create_app(config: ConfigNamespace) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        config: Frozen configuration namespace from bootstrap

    Returns:
        Configured FastAPI app
    """
    app_name = config.get("APP_NAME", DEFAULT_APP_NAME)
    app_version = config.get("APP_VERSION", __version__)
    environment = get_current_environment(config)

    app = FastAPI(
        title=f"{app_name} API",
        version=app_version,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.state.config = config

    @app.get("/")
    async def root():
        """Root endpoint for basic connectivity test."""
        return {
            "message": f"{app_name} is running",
            "version": app_version,
            "docs": "/api/docs",
        }

    @app.get("/ping")
    async def ping():
        """Simple ping endpoint for connectivity test."""
        return {"pong": True}

    @app.get("/health")
    async def health_check(config: ConfigNamespace = Depends(get_config)):
        """Basic health check endpoint - no dependencies."""
        return {
            "status": "healthy",
            "service": config.get("APP_NAME", DEFAULT_APP_NAME),
            "version": app_version,
            "environment": get_current_environment(config).value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    logger.info(f"{app_name} API initialized (environment={environment.value})")
    return app
