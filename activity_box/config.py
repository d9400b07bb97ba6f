"""Job settings, read from the environment (and ``.env`` when present)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

GITHUB_API_BASE = "https://api.github.com"

# A pinned gist on a profile page shows five lines of 54 columns.
MAX_LINES = 5
MAX_LENGTH = 54

# The run always reports its outcome at INFO, so quieter levels are not accepted.
LOG_LEVELS = ("DEBUG", "INFO")

REQUIRED_VARS = {
    "GH_USERNAME": "username",
    "GIST_ID": "gist_id",
    "GH_PAT": "gist_token",
}


class ConfigError(ValueError):
    """Raised when required settings are missing or malformed."""


def _int_var(env: Mapping[str, str], name: str, default: int) -> int:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _log_level(env: Mapping[str, str]) -> str:
    level = (env.get("LOG_LEVEL") or "").strip().upper()
    if level:
        if level not in LOG_LEVELS:
            raise ConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
        return level
    # Set by GitHub Actions when a run is re-run with debug logging enabled.
    return "DEBUG" if env.get("RUNNER_DEBUG") == "1" else "INFO"


@dataclass(frozen=True)
class Settings:
    """Job Settings"""

    username: str
    gist_id: str
    gist_token: str
    github_token: Optional[str] = None
    gist_filename: Optional[str] = None
    api_base_url: str = GITHUB_API_BASE
    max_lines: int = MAX_LINES
    max_length: int = MAX_LENGTH
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """
        Build settings from ``environ`` (defaults to ``os.environ``).

        A ``.env`` file is loaded first when reading the real process
        environment; existing variables win over the file.

        Raises
        ------
        ConfigError
            If any of ``GH_USERNAME``, ``GIST_ID`` or ``GH_PAT`` is unset,
            or a numeric limit is not an integer.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        values = {field: (environ.get(var) or "").strip() for var, field in REQUIRED_VARS.items()}
        missing = [var for var, field in REQUIRED_VARS.items() if not values[field]]
        if missing:
            raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

        max_length = _int_var(environ, "ACTIVITY_MAX_LENGTH", MAX_LENGTH)
        if max_length <= 3:
            raise ConfigError(f"ACTIVITY_MAX_LENGTH must leave room for '...', got {max_length}")

        return cls(
            **values,
            github_token=(environ.get("GITHUB_TOKEN") or "").strip() or None,
            gist_filename=(environ.get("GIST_FILENAME") or "").strip() or None,
            api_base_url=(environ.get("GITHUB_API_URL") or GITHUB_API_BASE).rstrip("/"),
            max_lines=_int_var(environ, "ACTIVITY_MAX_LINES", MAX_LINES),
            max_length=max_length,
            log_level=_log_level(environ),
        )
