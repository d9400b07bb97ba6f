"""One-line renderings for public GitHub events."""

from __future__ import annotations

from typing import Any, Callable, Mapping

from activity_box.schemas import ActivityEvent

Serializer = Callable[[ActivityEvent], str]


def capitalize(text: str) -> str:
    """Upper-case the first character only; ``str.capitalize`` would lower the rest."""
    return text[:1].upper() + text[1:]


def _issue_number(payload: Mapping[str, Any]) -> Any:
    return payload["issue"]["number"]


def _serialize_issue_comment(event: ActivityEvent) -> str:
    return f"🗣 Commented on #{_issue_number(event.payload)} in {event.repo.name}"


def _serialize_issues(event: ActivityEvent) -> str:
    action = capitalize(event.payload["action"])
    return f"❗️ {action} issue #{_issue_number(event.payload)} in {event.repo.name}"


def _serialize_pull_request(event: ActivityEvent) -> str:
    payload = event.payload
    pr = payload["pull_request"]
    if pr.get("merged"):
        head = "🎉 Merged"
    else:
        action = payload["action"]
        emoji = "💪" if action == "opened" else "❌"
        head = f"{emoji} {capitalize(action)}"
    return f"{head} PR #{pr['number']} in {event.repo.name}"


SERIALIZERS: dict[str, Serializer] = {
    "IssueCommentEvent": _serialize_issue_comment,
    "IssuesEvent": _serialize_issues,
    "PullRequestEvent": _serialize_pull_request,
}


def is_supported(event: ActivityEvent) -> bool:
    return event.type in SERIALIZERS


def serialize_event(event: ActivityEvent) -> str:
    """
    Render a supported event.

    Raises
    ------
    KeyError
        If no serializer is registered for ``event.type``. Check with
        :func:`is_supported` first; there is no fallback rendering.
    """
    return SERIALIZERS[event.type](event)
