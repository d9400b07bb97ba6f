"""Logging setup for the job."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# GitHub Actions workflow commands, keyed by log level.
_WORKFLOW_COMMANDS = {
    logging.DEBUG: "debug",
    logging.WARNING: "warning",
    logging.ERROR: "error",
    logging.CRITICAL: "error",
}


def _escape_data(text: str) -> str:
    return text.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class ActionsFormatter(logging.Formatter):
    """
    Render records as workflow commands (``::error::msg``) so the Actions UI
    picks them up as annotations. INFO records are printed as plain text.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = _WORKFLOW_COMMANDS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{_escape_data(message)}"


def running_in_actions(environ: Optional[dict[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return env.get("GITHUB_ACTIONS") == "true"


def configure_logging(level: str | int = "INFO", *, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a single stream handler to the ``activity_box`` logger."""
    logger = logging.getLogger("activity_box")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    if running_in_actions():
        handler.setFormatter(ActionsFormatter("%(message)s"))
    else:
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    logger.addHandler(handler)
    return logger
