import pytest

from task_backend.config import Environment, get_current_environment


@pytest.mark.parametrize(
    "value, expected",
    [
        ("prod", Environment.PRODUCTION),
        ("Staging", Environment.STAGING),
        (" test ", Environment.TESTING),
        ("unknown", Environment.DEVELOPMENT),
        ("", Environment.DEVELOPMENT),
    ],
)
def test_environment_from_string(value, expected):
    assert Environment.from_string(value) is expected


def test_environment_key_precedence():
    config = {"ENVIRONMENT": "production", "ENV": "dev", "APP_ENV": "staging"}

    assert get_current_environment(config) is Environment.PRODUCTION
    assert get_current_environment({"APP_ENV": "staging"}) is Environment.STAGING


def test_ci_defaults_to_testing():
    assert get_current_environment({"CI": "true"}) is Environment.TESTING
    assert get_current_environment({}) is Environment.DEVELOPMENT
