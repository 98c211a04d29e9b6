"""Append-only directed graph over a fixed vertex range.

Vertices are the integers ``0 .. vertex_count - 1`` and are not stored
individually. Edges are kept in insertion order; parallel edges between the
same ordered pair are allowed and never merged.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from spgraph.algorithms.path_utils import reconstruct_path
from spgraph.algorithms.spf import cost_spf, time_spf
from spgraph.exceptions import InvalidVertexError
from spgraph.types.base import Cost, VertexID
from spgraph.types.dto import Edge, ShortestPaths


def _check_number(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"Edge {name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"Edge {name} must be finite, got {value!r}")


class Graph:
    """
    Directed, optionally dual-weighted graph.

    Each edge carries a ``weight`` (cost) and optionally a ``time``. The vertex
    count is fixed at construction; edges can only be added.

    Args:
        vertex_count: Number of vertices, must be a positive integer.

    Raises:
        ValueError: If `vertex_count` is not a positive integer.
    """

    def __init__(self, vertex_count: int) -> None:
        if (
            isinstance(vertex_count, bool)
            or not isinstance(vertex_count, int)
            or vertex_count <= 0
        ):
            raise ValueError(
                f"vertex_count must be a positive integer, got {vertex_count!r}"
            )
        self._vertex_count = vertex_count
        self._edges: List[Edge] = []
        # Outgoing edges per vertex, in insertion order
        self._out: List[List[Edge]] = [[] for _ in range(vertex_count)]

    @classmethod
    def from_edges(
        cls,
        vertex_count: int,
        edges: Iterable[Sequence],
    ) -> "Graph":
        """Build a graph from ``(source, target, weight[, time])`` tuples or `Edge`s."""
        graph = cls(vertex_count)
        for item in edges:
            if isinstance(item, Edge):
                graph.add_edge(item.source, item.target, item.weight, item.time)
            else:
                graph.add_edge(*item)
        return graph

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """All edges in insertion order (read-only snapshot)."""
        return tuple(self._edges)

    def __len__(self) -> int:
        return self._vertex_count

    def __iter__(self) -> Iterator[VertexID]:
        return iter(range(self._vertex_count))

    def __contains__(self, vertex: object) -> bool:
        return (
            isinstance(vertex, int)
            and not isinstance(vertex, bool)
            and 0 <= vertex < self._vertex_count
        )

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self._vertex_count}, edges={len(self._edges)})"

    def check_vertex(self, vertex: VertexID) -> VertexID:
        """
        Return `vertex` if it is a valid id in this graph.

        Raises:
            InvalidVertexError: If `vertex` is not an integer in range.
        """
        if vertex not in self:
            raise InvalidVertexError(vertex, self._vertex_count)
        return vertex

    def add_edge(
        self,
        source: VertexID,
        target: VertexID,
        weight: Cost,
        time: Optional[Cost] = None,
    ) -> None:
        """
        Append a directed edge ``source -> target``.

        Args:
            source: Tail vertex.
            target: Head vertex.
            weight: Edge cost, may be negative.
            time: Optional traversal time; edges without one are invisible
                to time-based queries.

        Raises:
            InvalidVertexError: If an endpoint is out of range.
            ValueError: If `weight` or `time` is not a finite number.
        """
        self.check_vertex(source)
        self.check_vertex(target)
        _check_number("weight", weight)
        if time is not None:
            _check_number("time", time)

        edge = Edge(source, target, weight, time)
        self._edges.append(edge)
        self._out[source].append(edge)

    def with_edge(
        self,
        source: VertexID,
        target: VertexID,
        weight: Cost,
        time: Optional[Cost] = None,
    ) -> "Graph":
        """Return a copy of this graph with one more edge; `self` is unchanged."""
        graph = self.copy()
        graph.add_edge(source, target, weight, time)
        return graph

    def copy(self) -> "Graph":
        return Graph.from_edges(self._vertex_count, self._edges)

    def out_edges(self, vertex: VertexID) -> Sequence[Edge]:
        """Edges leaving `vertex`, in insertion order."""
        return self._out[self.check_vertex(vertex)]

    def shortest_paths_by_cost(self, source: VertexID) -> ShortestPaths:
        """Run the cost relaxation from `source`; see `cost_spf`."""
        return cost_spf(self, source)

    def shortest_paths_by_time(self, source: VertexID) -> ShortestPaths:
        """Run the time relaxation from `source`; see `time_spf`."""
        return time_spf(self, source)

    @staticmethod
    def reconstruct_path(
        predecessors: Sequence[Optional[VertexID]], target: VertexID
    ) -> Tuple[VertexID, ...]:
        """Trace `target` back through `predecessors`; see `reconstruct_path`."""
        return reconstruct_path(predecessors, target)
