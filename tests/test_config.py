"""Tests for reading settings from the environment."""

from __future__ import annotations

import dataclasses

import pytest

from activity_box.config import GITHUB_API_BASE, MAX_LENGTH, MAX_LINES, ConfigError, Settings

BASE_ENV = {"GH_USERNAME": "clippy", "GIST_ID": "abc123", "GH_PAT": "gist-token"}


def test_defaults() -> None:
    settings = Settings.from_env(dict(BASE_ENV))

    assert settings.username == "clippy"
    assert settings.gist_id == "abc123"
    assert settings.gist_token == "gist-token"
    assert settings.github_token is None
    assert settings.gist_filename is None
    assert settings.api_base_url == GITHUB_API_BASE
    assert settings.max_lines == MAX_LINES
    assert settings.max_length == MAX_LENGTH
    assert settings.log_level == "INFO"


def test_optional_values() -> None:
    env = dict(
        BASE_ENV,
        GITHUB_TOKEN="ghs_x",
        GIST_FILENAME="activity.md",
        GITHUB_API_URL="https://ghe.example.com/api/v3/",
        ACTIVITY_MAX_LINES="8",
        ACTIVITY_MAX_LENGTH="80",
        RUNNER_DEBUG="1",
    )
    settings = Settings.from_env(env)

    assert settings.github_token == "ghs_x"
    assert settings.gist_filename == "activity.md"
    assert settings.api_base_url == "https://ghe.example.com/api/v3"
    assert settings.max_lines == 8
    assert settings.max_length == 80
    assert settings.log_level == "DEBUG"


def test_missing_required_values_are_listed() -> None:
    with pytest.raises(ConfigError) as exc:
        Settings.from_env({"GH_USERNAME": "clippy", "GIST_ID": "  "})
    assert str(exc.value) == "Missing required environment variables: GIST_ID, GH_PAT"


@pytest.mark.parametrize(
    ("name", "value", "message"),
    [
        ("ACTIVITY_MAX_LINES", "five", "ACTIVITY_MAX_LINES must be an integer"),
        ("ACTIVITY_MAX_LENGTH", "3", "must leave room"),
        ("LOG_LEVEL", "chatty", "LOG_LEVEL must be one of"),
        ("LOG_LEVEL", "warning", "LOG_LEVEL must be one of DEBUG, INFO"),
    ],
)
def test_invalid_values(name, value, message) -> None:
    with pytest.raises(ConfigError, match=message):
        Settings.from_env(dict(BASE_ENV, **{name: value}))


def test_settings_are_frozen() -> None:
    settings = Settings.from_env(dict(BASE_ENV))
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.gist_id = "other"  # type: ignore[misc]


def test_log_level_accepts_debug_and_info() -> None:
    assert Settings.from_env(dict(BASE_ENV, LOG_LEVEL="debug")).log_level == "DEBUG"
    assert Settings.from_env(dict(BASE_ENV, LOG_LEVEL="INFO", RUNNER_DEBUG="1")).log_level == "INFO"
