"""
Environment Override File Loader

Reads ``KEY=VALUE`` lines from a local dotenv file with python-dotenv's
parser. Unlike ``dotenv_values``, which warns and skips lines it cannot
parse, this loader rejects them: a malformed override file aborts startup.

Format:
- ``KEY=VALUE`` per line, optional ``export`` prefix
- blank lines and ``#`` comments are ignored
- single/double quoted values (double quotes support escapes)
- no ``${VAR}`` interpolation, values are taken literally
- a key without ``=`` is an error
"""

import io
import logging
import re
from dataclasses import dataclass
from pathlib import Path

from dotenv.parser import Original, parse_stream

from .exceptions import ConfigParseError

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env.local"

_NEWLINE = re.compile(r"\r\n|\n|\r")


@dataclass(frozen=True)
class ConfigEntry:
    """Single key/value pair read from the override file."""

    key: str
    value: str
    line: int


def load_env_entries(path: str | Path) -> list[ConfigEntry]:
    """
    Load configuration entries from a dotenv file.

    Args:
        path: Path to the dotenv file

    Returns:
        Entries in file order; empty if the file does not exist

    Raises:
        ConfigParseError: If any statement in the file is malformed
    """
    env_path = Path(path)

    try:
        raw = env_path.read_bytes()
    except FileNotFoundError:
        logger.debug(f"No environment override file at {env_path}, skipping")
        return []

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        line = raw.count(b"\n", 0, e.start) + 1
        raise ConfigParseError(str(env_path), line, "invalid UTF-8") from e

    entries = _parse_entries(io.StringIO(text), str(env_path))

    logger.debug(f"Parsed {len(entries)} entries from {env_path}")
    return entries


def _parse_entries(stream, source: str) -> list[ConfigEntry]:
    entries = []

    for binding in parse_stream(stream):
        statement = binding.original.string.strip()
        line = _statement_line(binding.original)

        if binding.error:
            raise ConfigParseError(source, line, statement)

        # Blank line or comment
        if binding.key is None:
            continue

        if binding.value is None:
            raise ConfigParseError(source, line, statement)

        entries.append(ConfigEntry(key=binding.key, value=binding.value, line=line))

    return entries


def _statement_line(original: Original) -> int:
    # The parser marks bindings from the end of the previous statement, so
    # blank lines in front of a statement are counted from original.line.
    text = original.string
    leading = text[: len(text) - len(text.lstrip())]
    return original.line + len(_NEWLINE.findall(leading))
