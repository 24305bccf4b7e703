import pytest

from task_backend.config import ConfigEntry, ConfigParseError, load_env_entries


def _entries(path):
    return {entry.key: entry.value for entry in load_env_entries(path)}


def test_missing_file_returns_no_entries(tmp_path):
    assert load_env_entries(tmp_path / ".env.local") == []


def test_entries_keep_file_order_and_lines(tmp_path):
    path = tmp_path / ".env.local"
    path.write_text("# database\nDB_HOST=localhost\n\nDB_PORT=5432\n", encoding="utf-8")

    assert load_env_entries(path) == [
        ConfigEntry(key="DB_HOST", value="localhost", line=2),
        ConfigEntry(key="DB_PORT", value="5432", line=4),
    ]


def test_supported_value_forms(tmp_path):
    path = tmp_path / ".env.local"
    path.write_text(
        "export EXPORTED=yes\n"
        "SPACED = padded\n"
        "SINGLE='single quoted'\n"
        'DOUBLE="line\\nbreak"\n'
        "INLINE=8080 # trailing comment\n"
        "EMPTY=\n"
        "LITERAL=${HOME}/tasks\n",
        encoding="utf-8",
    )

    assert _entries(path) == {
        "EXPORTED": "yes",
        "SPACED": "padded",
        "SINGLE": "single quoted",
        "DOUBLE": "line\nbreak",
        "INLINE": "8080",
        "EMPTY": "",
        "LITERAL": "${HOME}/tasks",
    }


def test_key_without_separator_is_rejected(tmp_path):
    path = tmp_path / ".env.local"
    path.write_text("A=1\n\n# note\nMISSING_SEPARATOR\n", encoding="utf-8")

    with pytest.raises(ConfigParseError) as exc_info:
        load_env_entries(path)

    assert exc_info.value.line == 4
    assert exc_info.value.path == str(path)
    assert exc_info.value.to_dict()["details"] == {"path": str(path), "line": 4}


def test_unparseable_statement_is_rejected(tmp_path):
    path = tmp_path / ".env.local"
    path.write_text("A=1\n\n\nBAD LINE\n", encoding="utf-8")

    with pytest.raises(ConfigParseError) as exc_info:
        load_env_entries(path)

    assert exc_info.value.line == 4
    assert exc_info.value.statement == "BAD LINE"


def test_unterminated_quote_is_rejected(tmp_path):
    path = tmp_path / ".env.local"
    path.write_text('TOKEN="never closed\n', encoding="utf-8")

    with pytest.raises(ConfigParseError):
        load_env_entries(path)


def test_invalid_utf8_is_rejected(tmp_path):
    path = tmp_path / ".env.local"
    path.write_bytes(b"A=1\nKEY=\xff\xfe\n")

    with pytest.raises(ConfigParseError) as exc_info:
        load_env_entries(path)

    assert exc_info.value.line == 2
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
