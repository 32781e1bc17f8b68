"""Shared runtime exception types."""

from __future__ import annotations


class ClockDisposedError(RuntimeError):
    """Raised when a disposed game clock is asked to schedule or cancel work."""
