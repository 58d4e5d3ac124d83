"""Exception hierarchy for whistbot."""

from __future__ import annotations

__all__ = ["WhistError", "InvalidActionError", "InvalidHandError", "InconsistentTrickError"]


class WhistError(Exception):
    """Base exception for the project."""

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"{self.__class__.__name__}({self.args})"


class InvalidActionError(WhistError):
    """Raised when an invalid move is attempted."""


class InvalidHandError(WhistError):
    """Raised when a decision is requested for an empty hand."""


class InconsistentTrickError(WhistError):
    """Raised when a trick's plays contradict the turn sequence."""
