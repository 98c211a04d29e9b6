"""Immutable records exchanged between the graph, algorithms and queries.

``CostPath`` and ``TimePath`` are the result records consumed by renderers;
``to_dict()`` yields their plain ``{path, distance}`` / ``{path, time}`` shape.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from spgraph.types.base import Cost, Metric, VertexID


@dataclass(frozen=True)
class Edge:
    """A directed edge ``source -> target``.

    Attributes:
        source: Tail vertex.
        target: Head vertex.
        weight: Cost used by cost-based queries.
        time: Traversal time used by time-based queries; None if unknown.
    """

    source: VertexID
    target: VertexID
    weight: Cost
    time: Optional[Cost] = None

    @property
    def has_time(self) -> bool:
        return self.time is not None


@dataclass(frozen=True)
class ShortestPaths:
    """Single-source result of one algorithm run.

    Attributes:
        source: Vertex the run started from.
        metric: Which edge attribute was minimized.
        distances: Best distance (or time) per vertex; ``inf`` if unreached.
        predecessors: Predecessor per vertex on the shortest-path tree;
            None for the source and for unreached vertices.
    """

    source: VertexID
    metric: Metric
    distances: Tuple[Cost, ...]
    predecessors: Tuple[Optional[VertexID], ...]

    def is_reachable(self, vertex: VertexID) -> bool:
        return not math.isinf(self.distances[vertex])


def _jsonable(value: Cost) -> Optional[Cost]:
    return None if math.isinf(value) else value


@dataclass(frozen=True)
class CostPath:
    """Cheapest path to one target.

    Attributes:
        path: Vertices from source to target. For an unreachable target this
            is the degenerate ``(target,)``.
        distance: Total edge weight; ``inf`` when unreachable.
    """

    path: Tuple[VertexID, ...]
    distance: Cost

    @property
    def reachable(self) -> bool:
        return not math.isinf(self.distance)

    def to_dict(self) -> Dict[str, Any]:
        return {"path": list(self.path), "distance": _jsonable(self.distance)}


@dataclass(frozen=True)
class TimePath:
    """Fastest path to one target.

    Attributes:
        path: Vertices from source to target, or ``(target,)`` if unreachable.
        time: Total traversal time; ``inf`` when unreachable.
    """

    path: Tuple[VertexID, ...]
    time: Cost

    @property
    def reachable(self) -> bool:
        return not math.isinf(self.time)

    def to_dict(self) -> Dict[str, Any]:
        return {"path": list(self.path), "time": _jsonable(self.time)}
