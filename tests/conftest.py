"""Shared fixtures: a small feed of public events."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure the project root (which contains the ``activity_box`` package) is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from activity_box.config import Settings  # noqa: E402
from activity_box.schemas import ActivityEvent  # noqa: E402

LONG_REPO = "clippy/really-really-really-really-really-really-really-really-really-long"


def make_event(event_type: str, repo: str = "a/b", **payload: Any) -> ActivityEvent:
    return ActivityEvent.model_validate(
        {"type": event_type, "repo": {"name": repo}, "payload": payload}
    )


@pytest.fixture
def raw_events() -> list[dict[str, Any]]:
    """The feed as the API returns it, including one event type we never show."""
    return [
        {
            "id": "1",
            "type": "IssuesEvent",
            "repo": {"id": 10, "name": "clippy/take-over-github"},
            "payload": {"action": "opened", "issue": {"number": 1}},
        },
        {
            "id": "2",
            "type": "IssueCommentEvent",
            "repo": {"id": 10, "name": "clippy/take-over-github"},
            "payload": {"action": "created", "issue": {"number": 1}},
        },
        {
            "id": "3",
            "type": "WatchEvent",
            "repo": {"id": 11, "name": "clippy/starred"},
            "payload": {"action": "started"},
        },
        {
            "id": "4",
            "type": "PullRequestEvent",
            "repo": {"id": 10, "name": "clippy/take-over-github"},
            "payload": {"action": "closed", "pull_request": {"number": 2, "merged": True}},
        },
        {
            "id": "5",
            "type": "PullRequestEvent",
            "repo": {"id": 10, "name": "clippy/take-over-github"},
            "payload": {"action": "closed", "pull_request": {"number": 3, "merged": False}},
        },
        {
            "id": "6",
            "type": "PullRequestEvent",
            "repo": {"id": 12, "name": LONG_REPO},
            "payload": {"action": "opened", "pull_request": {"number": 3}},
        },
    ]


@pytest.fixture
def events(raw_events) -> list[ActivityEvent]:
    return [ActivityEvent.model_validate(item) for item in raw_events]


@pytest.fixture
def settings() -> Settings:
    return Settings(username="clippy", gist_id="abc123", gist_token="gist-token")


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """``configure_logging`` swaps handlers on the package logger; undo it after each test."""
    logger = logging.getLogger("activity_box")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)
