"""Exception hierarchy for transitnet.

Every error is a synchronous precondition violation; callers decide whether
to recover. An unreachable destination is a normal result, not an error.
"""

from __future__ import annotations


class TransitNetError(Exception):
    """Base class for all package-specific errors."""


class NotFoundError(TransitNetError, KeyError):
    """A referenced vertex or arc does not exist."""

    def __str__(self) -> str:
        # KeyError would repr() the message and wrap it in quotes
        return str(self.args[0]) if self.args else ""


class VertexNotFoundError(NotFoundError):
    """Raised when a vertex id is not present in the network."""


class ArcNotFoundError(NotFoundError):
    """Raised when an (origin, destination) arc is not present in the network."""


class AlreadyExistsError(TransitNetError, ValueError):
    """Attempted to add a vertex or arc that is already present."""


class VertexExistsError(AlreadyExistsError):
    """Raised by ``add_vertex`` on a duplicate id."""


class ArcExistsError(AlreadyExistsError):
    """Raised by ``add_arc`` on a duplicate (origin, destination) pair."""


class InvalidVertexError(TransitNetError, ValueError):
    """Raised for vertex ids that are not non-negative integers."""


class HeapError(TransitNetError):
    """Base class for priority heap misuse."""


class EmptyHeapError(HeapError, IndexError):
    """``find_min`` or ``delete_min`` on a heap with no entries."""


class InvalidHandleError(HeapError, ValueError):
    """Stale or foreign handle, or a key increase passed to ``decrease_key``."""


class NegativeCycleError(TransitNetError, RuntimeError):
    """A negative-weight cycle reachable from the origin was found."""


__all__ = [
    "TransitNetError",
    "NotFoundError",
    "VertexNotFoundError",
    "ArcNotFoundError",
    "AlreadyExistsError",
    "VertexExistsError",
    "ArcExistsError",
    "InvalidVertexError",
    "HeapError",
    "EmptyHeapError",
    "InvalidHandleError",
    "NegativeCycleError",
]
