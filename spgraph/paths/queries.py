"""Single- and multi-target shortest path queries.

Multi-target queries run the underlying algorithm once and reuse its distance
and predecessor arrays for every target. Negative-cycle failures propagate
unchanged. How unreachable targets are reported is controlled by
`spgraph.config.QueryConfig`.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Union

from spgraph.algorithms.spf import run_spf
from spgraph.config import QUERY_CONFIG, QueryConfig
from spgraph.exceptions import NoPathError
from spgraph.graph.core import Graph
from spgraph.logging import get_logger
from spgraph.types.base import Metric, VertexID
from spgraph.types.dto import CostPath, ShortestPaths, TimePath

logger = get_logger(__name__)

PathRecord = Union[CostPath, TimePath]


def _unique_targets(graph: Graph, targets: Iterable[VertexID]) -> List[VertexID]:
    result: List[VertexID] = []
    seen = set()
    for target in targets:
        graph.check_vertex(target)
        if target not in seen:
            seen.add(target)
            result.append(target)
    return result


def _record(
    spf_result: ShortestPaths, target: VertexID, cfg: QueryConfig
) -> PathRecord:
    if cfg.raise_on_unreachable and not spf_result.is_reachable(target):
        raise NoPathError(spf_result.source, target, spf_result.metric.name.lower())
    path = Graph.reconstruct_path(spf_result.predecessors, target)
    value = spf_result.distances[target]
    if spf_result.metric == Metric.COST:
        return CostPath(path=path, distance=value)
    return TimePath(path=path, time=value)


def shortest_paths(
    graph: Graph,
    source: VertexID,
    targets: Iterable[VertexID],
    metric: Metric = Metric.COST,
    config: Optional[QueryConfig] = None,
) -> Dict[VertexID, PathRecord]:
    """
    Shortest paths from `source` to each of `targets` under `metric`.

    Args:
        graph: Graph to query.
        source: Start vertex.
        targets: Destination vertices. Duplicates collapse into one entry.
        metric: ``Metric.COST`` (edge weight) or ``Metric.TIME`` (edge time).
        config: Query options; defaults to `spgraph.config.QUERY_CONFIG`.

    Returns:
        Mapping of target to `CostPath` or `TimePath`, in request order.

    Raises:
        NegativeCycleError: Cost queries only, see `cost_spf`.
        InvalidVertexError: If `source` or a target is out of range.
        NoPathError: If a target is unreachable and ``config.unreachable`` is
            ``UnreachablePolicy.RAISE``.
    """
    cfg = config or QUERY_CONFIG
    graph.check_vertex(source)
    wanted = _unique_targets(graph, targets)

    spf_result = run_spf(graph, source, metric)
    logger.debug(
        "Resolving %d %s path(s) from vertex %d",
        len(wanted),
        metric.name.lower(),
        source,
    )
    return {target: _record(spf_result, target, cfg) for target in wanted}


def shortest_path(
    graph: Graph,
    source: VertexID,
    target: VertexID,
    metric: Metric = Metric.COST,
    config: Optional[QueryConfig] = None,
) -> PathRecord:
    """Shortest path from `source` to `target` under `metric`."""
    return shortest_paths(graph, source, [target], metric, config)[target]


def cheapest_path(
    graph: Graph,
    source: VertexID,
    target: VertexID,
    config: Optional[QueryConfig] = None,
) -> CostPath:
    """Minimum-weight path from `source` to `target`."""
    return shortest_path(graph, source, target, Metric.COST, config)


def cheapest_paths(
    graph: Graph,
    source: VertexID,
    targets: Iterable[VertexID],
    config: Optional[QueryConfig] = None,
) -> Dict[VertexID, CostPath]:
    """Minimum-weight paths from `source` to every vertex in `targets`."""
    return shortest_paths(graph, source, targets, Metric.COST, config)


def fastest_path(
    graph: Graph,
    source: VertexID,
    target: VertexID,
    config: Optional[QueryConfig] = None,
) -> TimePath:
    """Minimum-time path from `source` to `target`, over time-bearing edges."""
    return shortest_path(graph, source, target, Metric.TIME, config)


def fastest_paths(
    graph: Graph,
    source: VertexID,
    targets: Iterable[VertexID],
    config: Optional[QueryConfig] = None,
) -> Dict[VertexID, TimePath]:
    """Minimum-time paths from `source` to every vertex in `targets`."""
    return shortest_paths(graph, source, targets, Metric.TIME, config)
