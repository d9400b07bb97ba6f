"""Turn a feed of events into gist content."""

from __future__ import annotations

from typing import Iterable

from activity_box.config import MAX_LENGTH, MAX_LINES
from activity_box.schemas import ActivityEvent
from activity_box.services.serializers import is_supported, serialize_event

ELLIPSIS = "..."


def truncate(line: str, max_length: int = MAX_LENGTH) -> str:
    if len(line) <= max_length:
        return line
    return line[: max_length - len(ELLIPSIS)] + ELLIPSIS


def format_events(
    events: Iterable[ActivityEvent],
    max_lines: int = MAX_LINES,
    max_length: int = MAX_LENGTH,
) -> str:
    """
    Render up to ``max_lines`` supported events, one per line.

    Unsupported event types are dropped, the feed order is kept, and each
    line is truncated to ``max_length`` characters.
    """
    supported = [event for event in events if is_supported(event)]
    kept = supported[: max(max_lines, 0)]
    return "\n".join(truncate(serialize_event(event), max_length) for event in kept)
