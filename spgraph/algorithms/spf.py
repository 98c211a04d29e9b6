"""Single-source shortest paths over a `spgraph.graph.Graph`.

Two relaxation algorithms share one queue discipline: pending vertices sit in
a `PriorityQueue` ordered by their *current* entry in the distance array.

- `cost_spf` minimizes edge ``weight``. Negative weights are allowed; the
  number of dequeue iterations is capped at ``vertex_count * edge_count`` and
  hitting the cap with work still queued is reported as a negative cycle.
- `time_spf` minimizes edge ``time`` over time-bearing edges only. It is a
  Dijkstra-style relaxation and assumes all times are non-negative; this
  precondition is not checked.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

from spgraph.algorithms.priority_queue import PriorityQueue
from spgraph.exceptions import NegativeCycleError
from spgraph.logging import get_logger
from spgraph.types.base import INF, Cost, Metric, VertexID
from spgraph.types.dto import ShortestPaths

if TYPE_CHECKING:
    from spgraph.graph.core import Graph

logger = get_logger(__name__)


def _init_arrays(
    graph: Graph, source: VertexID
) -> Tuple[List[Cost], List[Optional[VertexID]]]:
    graph.check_vertex(source)
    distances: List[Cost] = [INF] * graph.vertex_count
    predecessors: List[Optional[VertexID]] = [None] * graph.vertex_count
    distances[source] = 0
    return distances, predecessors


def cost_spf(graph: Graph, source: VertexID) -> ShortestPaths:
    """
    Compute minimum total ``weight`` from `source` to every vertex.

    Args:
        graph: Graph to search.
        source: Start vertex.

    Returns:
        ShortestPaths with ``metric == Metric.COST``. Unreached vertices keep
        an infinite distance and a None predecessor.

    Raises:
        InvalidVertexError: If `source` is out of range.
        NegativeCycleError: If the iteration cap is reached with vertices
            still pending relaxation.
    """
    distances, predecessors = _init_arrays(graph, source)
    edge_count = graph.edge_count
    max_iterations = graph.vertex_count * edge_count

    # Comparator reads the live array, so priorities follow later relaxations
    queue: PriorityQueue[VertexID] = PriorityQueue(
        lambda a, b: distances[a] - distances[b]
    )
    in_queue = [False] * graph.vertex_count
    iterations = 0

    # Without edges nothing can be relaxed and the cap would be zero
    if edge_count:
        queue.enqueue(source)
        in_queue[source] = True

    while queue and iterations < max_iterations:
        u = queue.dequeue()
        in_queue[u] = False

        for edge in graph.out_edges(u):
            v = edge.target
            candidate = distances[u] + edge.weight
            if candidate < distances[v]:
                distances[v] = candidate
                predecessors[v] = u
                if not in_queue[v]:
                    queue.enqueue(v)
                    in_queue[v] = True

        iterations += 1

    if queue:
        logger.warning(
            "Negative weight cycle detected from vertex %d after %d iterations",
            source,
            iterations,
        )
        raise NegativeCycleError(source, iterations)

    logger.debug(
        "cost_spf from %d finished in %d iterations (cap %d)",
        source,
        iterations,
        max_iterations,
    )
    return ShortestPaths(
        source=source,
        metric=Metric.COST,
        distances=tuple(distances),
        predecessors=tuple(predecessors),
    )


def time_spf(graph: Graph, source: VertexID) -> ShortestPaths:
    """
    Compute minimum total ``time`` from `source` to every vertex.

    Edges whose ``time`` is None are skipped. Correct only when every time
    used is non-negative; a negative time cycle makes this loop forever.

    Args:
        graph: Graph to search.
        source: Start vertex.

    Returns:
        ShortestPaths with ``metric == Metric.TIME``.

    Raises:
        InvalidVertexError: If `source` is out of range.
    """
    times, predecessors = _init_arrays(graph, source)

    queue: PriorityQueue[VertexID] = PriorityQueue(lambda a, b: times[a] - times[b])
    queue.enqueue(source)
    iterations = 0

    while queue:
        u = queue.dequeue()
        for edge in graph.out_edges(u):
            if edge.time is None:
                continue
            v = edge.target
            candidate = times[u] + edge.time
            if candidate < times[v]:
                times[v] = candidate
                predecessors[v] = u
                # Stale duplicates fail the comparison above when dequeued
                queue.enqueue(v)
        iterations += 1

    logger.debug("time_spf from %d finished in %d iterations", source, iterations)
    return ShortestPaths(
        source=source,
        metric=Metric.TIME,
        distances=tuple(times),
        predecessors=tuple(predecessors),
    )


def run_spf(graph: Graph, source: VertexID, metric: Metric) -> ShortestPaths:
    """Dispatch to `cost_spf` or `time_spf` by `metric`."""
    if metric == Metric.COST:
        return cost_spf(graph, source)
    if metric == Metric.TIME:
        return time_spf(graph, source)
    raise ValueError(f"Unsupported metric: {metric!r}")
