"""
Application Runtime

The runtime receives the frozen configuration and the untouched process
arguments from bootstrap, and owns the process until it returns an exit
code.

Usage:
    task-backend [--host HOST] [--port PORT] [--debug]
"""

import argparse
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

import uvicorn

from task_backend.api import create_app
from task_backend.config import ConfigError, ConfigNamespace, ConfigValidationError
from task_backend.config.validation import ConfigValidator, require_log_level, require_port

logger = logging.getLogger(__name__)


class IApplicationRuntime(ABC):
    """Interface for the runtime bootstrap hands control to."""

    @abstractmethod
    def start(self, config: ConfigNamespace, args: Sequence[str]) -> int:
        """Run the application and return its exit code."""
        pass


def parse_arguments(args: Sequence[str], config: ConfigNamespace) -> argparse.Namespace:
    """Parse runtime arguments, using HOST and PORT from config as defaults."""
    parser = argparse.ArgumentParser(
        prog="task-backend",
        description="Task Management Backend - Web API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                     Start on localhost:8000
  %(prog)s --port 3000         Start on localhost:3000
  %(prog)s --host 0.0.0.0      Start on all interfaces (accessible from network)
  %(prog)s --debug             Enable debug logging
        """
    )

    parser.add_argument(
        '--host',
        default=config.get("HOST", "localhost"),
        help='Host address to bind to (default: HOST or localhost)'
    )

    parser.add_argument(
        '--port',
        type=int,
        default=None,
        help='Port number to bind to (default: PORT or 8000)'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    options = parser.parse_args(list(args))
    if options.port is None:
        options.port = require_port(config)

    return options


class UvicornRuntime(IApplicationRuntime):
    """Serves the FastAPI application with uvicorn."""

    def start(self, config: ConfigNamespace, args: Sequence[str]) -> int:
        try:
            options = parse_arguments(args, config)

            if options.debug:
                logging.getLogger().setLevel(logging.DEBUG)
                log_level = "debug"
            else:
                log_level = require_log_level(config)

            if not ConfigValidator.validate_port(options.port):
                raise ConfigValidationError(f"Invalid port: {options.port}", field="port")
            if not ConfigValidator.validate_host(options.host):
                raise ConfigValidationError(f"Invalid host: {options.host!r}", field="host")

            app = create_app(config)
        except ConfigError as e:
            logger.error(f"Invalid runtime configuration: {e}")
            return 1

        logger.info(f"Configuration: host={options.host}, port={options.port}, debug={options.debug}")

        try:
            uvicorn.run(
                app,
                host=options.host,
                port=options.port,
                log_level=log_level,
            )
        except KeyboardInterrupt:
            logger.info("Server stopped by user")
            return 0
        except Exception as e:
            logger.error(f"Error starting web application: {e}")
            if options.debug:
                import traceback
                traceback.print_exc()
            return 1

        return 0
