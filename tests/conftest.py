"""Shared pytest fixtures for the bootstrap test suite."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from task_backend.config import ConfigNamespace
from task_backend.runtime import IApplicationRuntime


class RecordingRuntime(IApplicationRuntime):
    """Runtime double that records each start call."""

    def __init__(self, exit_code: int = 0) -> None:
        self.exit_code = exit_code
        self.calls: list[tuple[ConfigNamespace, list[str]]] = []

    def start(self, config: ConfigNamespace, args: Sequence[str]) -> int:
        self.calls.append((config, list(args)))
        return self.exit_code


@pytest.fixture
def recording_runtime() -> RecordingRuntime:
    return RecordingRuntime()


@pytest.fixture
def make_runtime():
    return RecordingRuntime


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_env_file(workdir):
    """Write a .env.local file into the working directory."""

    def _write(content: str, name: str = ".env.local"):
        path = workdir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
