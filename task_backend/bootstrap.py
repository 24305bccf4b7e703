"""
Startup Bootstrap

Loads ``.env.local`` from the working directory into the configuration
namespace without overwriting values the hosting environment already set,
freezes the namespace and hands control to the application runtime.
"""

import logging
import sys
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from task_backend.config import (
    DEFAULT_ENV_FILE,
    BootstrapError,
    ConfigError,
    ConfigNamespace,
    get_current_environment,
    load_env_entries,
)
from task_backend.runtime import IApplicationRuntime, UvicornRuntime

logger = logging.getLogger(__name__)


class BootstrapState(str, Enum):
    UNSTARTED = "unstarted"
    STARTED = "started"


class ConfigBootstrapper:
    """Populates configuration defaults, then starts the runtime once."""

    def __init__(
        self,
        runtime: IApplicationRuntime,
        namespace: ConfigNamespace | None = None,
        env_file: str | Path = DEFAULT_ENV_FILE,
    ) -> None:
        self.runtime = runtime
        self.namespace = namespace if namespace is not None else ConfigNamespace.from_environ()
        self.env_file = Path(env_file)
        self.state = BootstrapState.UNSTARTED

    def bootstrap(self, args: Sequence[str]) -> int:
        """
        Merge file defaults into the namespace and start the runtime.

        Args:
            args: Process arguments, forwarded to the runtime unchanged

        Returns:
            Exit code reported by the runtime

        Raises:
            ConfigParseError: If the override file is malformed; the runtime
                is not started
            BootstrapError: If called more than once
        """
        if self.state is BootstrapState.STARTED:
            raise BootstrapError("Bootstrap already ran for this process")

        env_path = self.env_file if self.env_file.is_absolute() else Path.cwd() / self.env_file
        entries = load_env_entries(env_path)

        applied = 0
        skipped = []
        for entry in entries:
            if self.namespace.set_if_absent(entry.key, entry.value):
                applied += 1
            else:
                skipped.append(entry.key)

        if entries:
            logger.info(f"Loaded {len(entries)} entries from {env_path} ({applied} applied)")
        if skipped:
            logger.debug(f"Kept existing values for: {', '.join(skipped)}")

        self.namespace.freeze()
        self.state = BootstrapState.STARTED

        environment = get_current_environment(self.namespace)
        logger.info(f"Starting application runtime (environment={environment.value})")
        return self.runtime.start(self.namespace, args)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the backend process."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    args = list(sys.argv[1:] if argv is None else argv)
    bootstrapper = ConfigBootstrapper(UvicornRuntime())

    try:
        return bootstrapper.bootstrap(args)
    except ConfigError as e:
        logger.error(f"Startup aborted: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
