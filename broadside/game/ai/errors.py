"""Attack strategy error types."""

from __future__ import annotations


class TargetingStateError(RuntimeError):
    """Strategy was driven in a way its search state cannot reconcile."""


class SearchExhaustedError(RuntimeError):
    """No untried coordinate remains on the board."""
