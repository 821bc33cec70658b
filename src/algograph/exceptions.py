from __future__ import annotations


class AlgographError(Exception):
    """Base exception for algograph errors."""


class InvalidVertexError(AlgographError, IndexError):
    """Raised when a vertex id falls outside [0, V)."""

    def __init__(self, vertex: int, vertex_count: int):
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(f"vertex {vertex} is not between 0 and {vertex_count - 1}")


class GraphFormatError(AlgographError, ValueError):
    """Raised when a graph description cannot be parsed."""


class PriorityQueueError(AlgographError):
    """Base class for indexed priority queue precondition failures."""


class QueueUnderflowError(PriorityQueueError):
    """Raised when removing from an empty priority queue."""


class DuplicateIndexError(PriorityQueueError):
    """Raised when inserting an index that is already on the queue."""


class MissingIndexError(PriorityQueueError):
    """Raised when an operation targets an index that is not on the queue."""


class KeyOrderError(PriorityQueueError):
    """Raised when decrease_key is handed a key larger than the current one."""
