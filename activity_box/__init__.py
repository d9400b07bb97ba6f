"""Recent GitHub activity, pinned to a gist."""

__version__ = "0.1.0"
