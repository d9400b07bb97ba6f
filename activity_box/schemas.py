"""GitHub event schemas"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel


class RepoRef(BaseModel):
    """The ``repo`` object attached to every public event."""

    name: str

    class Config:
        extra = "allow"


class ActivityEvent(BaseModel):
    """
    Minimal model for one entry of the public events feed.
    Only fields used by this app are typed; ``payload`` is passed through as-is.
    """

    # The public events schema allows a null type; such events are never rendered.
    type: Optional[str] = None
    repo: RepoRef
    payload: dict[str, Any] = {}

    class Config:
        extra = "allow"
