"""Exception types raised by spgraph."""

from __future__ import annotations

from typing import Optional


class SPGraphError(Exception):
    """Base class for spgraph errors."""


class NegativeCycleError(SPGraphError):
    """A negative-weight cycle is reachable from the query source.

    Attributes:
        source: Source vertex of the failed run.
        iterations: Number of dequeue iterations performed before giving up.
    """

    def __init__(self, source: int, iterations: int) -> None:
        self.source = source
        self.iterations = iterations
        super().__init__(
            f"Graph contains a negative weight cycle reachable from vertex {source} "
            f"(gave up after {iterations} iterations)"
        )


class InvalidVertexError(SPGraphError, IndexError):
    """A vertex id lies outside ``[0, vertex_count)``."""

    def __init__(self, vertex: object, vertex_count: int) -> None:
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"Vertex {vertex!r} is out of range for a graph with "
            f"{vertex_count} vertices"
        )


class NoPathError(SPGraphError):
    """No path exists from source to target under the requested metric."""

    def __init__(self, source: int, target: int, metric: Optional[str] = None) -> None:
        self.source = source
        self.target = target
        self.metric = metric
        by = f" by {metric}" if metric else ""
        super().__init__(f"No path{by} from vertex {source} to vertex {target}")
