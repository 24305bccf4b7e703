"""
Configuration Namespace

Explicit key/value configuration object built once at startup. Values
supplied by the hosting environment are seeded first; bootstrap may only
add missing keys, and the namespace becomes read-only once frozen.
"""

import os
from collections.abc import Iterator, Mapping

from .exceptions import ConfigNamespaceFrozenError, ConfigValidationError

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


class ConfigNamespace(Mapping[str, str]):
    """String-to-string configuration store with set-if-absent writes."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})
        self._frozen = False

    @classmethod
    def from_environ(cls) -> "ConfigNamespace":
        """Create a namespace seeded from the process environment."""
        return cls(os.environ)

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "writable"
        return f"<ConfigNamespace keys={len(self._values)} {state}>"

    @property
    def frozen(self) -> bool:
        return self._frozen

    def set_if_absent(self, key: str, value: str) -> bool:
        """
        Store a value only if no value exists for the key.

        Args:
            key: Configuration key
            value: Value to store

        Returns:
            True if the value was stored, False if the key was already set

        Raises:
            ConfigNamespaceFrozenError: If the namespace has been frozen
        """
        if self._frozen:
            raise ConfigNamespaceFrozenError(
                f"Cannot set '{key}': configuration is read-only after bootstrap"
            )

        if key in self._values:
            return False

        self._values[key] = value
        return True

    def freeze(self) -> None:
        """Make the namespace read-only."""
        self._frozen = True

    def get_int(self, key: str, default: int | None = None) -> int | None:
        """Get an integer value, raising ConfigValidationError if malformed."""
        raw = self._values.get(key)
        if raw is None or not raw.strip():
            return default

        try:
            return int(raw.strip())
        except ValueError as e:
            raise ConfigValidationError(
                f"{key} must be an integer, got {raw!r}", field=key
            ) from e

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get a boolean value from common true/false spellings."""
        raw = self._values.get(key)
        if raw is None or not raw.strip():
            return default

        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False

        raise ConfigValidationError(f"{key} must be a boolean, got {raw!r}", field=key)
