"""spgraph: cheapest and fastest paths in small weighted directed graphs.

A `Graph` holds a fixed number of integer vertices and an append-only list of
directed edges, each with a cost (``weight``) and optionally a ``time``.

Primary API:
    Graph - vertex range plus edge list, with single-source algorithms
    cheapest_path(), cheapest_paths() - minimize total weight
    fastest_path(), fastest_paths() - minimize total time
    load_graph_yaml(), load_graph_file() - build a Graph from a document
    to_networkx(), from_networkx() - convert to/from NetworkX

Example:
    from spgraph import Graph, cheapest_path, fastest_path

    g = Graph(3)
    g.add_edge(0, 1, weight=2, time=5)
    g.add_edge(1, 2, weight=2, time=1)
    g.add_edge(0, 2, weight=10, time=4)

    cheapest_path(g, 0, 2)  # CostPath(path=(0, 1, 2), distance=4)
    fastest_path(g, 0, 2)   # TimePath(path=(0, 2), time=4)
"""

from __future__ import annotations

from spgraph import logging
from spgraph._version import __version__
from spgraph.algorithms.priority_queue import PriorityQueue
from spgraph.algorithms.path_utils import reconstruct_path
from spgraph.config import QUERY_CONFIG, QueryConfig
from spgraph.exceptions import (
    InvalidVertexError,
    NegativeCycleError,
    NoPathError,
    SPGraphError,
)
from spgraph.graph.convert import from_networkx, to_networkx
from spgraph.graph.core import Graph
from spgraph.graph.io import (
    graph_from_dict,
    graph_to_dict,
    load_graph_file,
    load_graph_yaml,
)
from spgraph.paths import (
    cheapest_path,
    cheapest_paths,
    fastest_path,
    fastest_paths,
    shortest_path,
    shortest_paths,
)
from spgraph.types.base import INF, Metric, UnreachablePolicy
from spgraph.types.dto import CostPath, Edge, ShortestPaths, TimePath

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Edge",
    "PriorityQueue",
    # Queries
    "cheapest_path",
    "cheapest_paths",
    "fastest_path",
    "fastest_paths",
    "shortest_path",
    "shortest_paths",
    "reconstruct_path",
    # Types
    "Metric",
    "UnreachablePolicy",
    "INF",
    # Results
    "CostPath",
    "TimePath",
    "ShortestPaths",
    # Configuration
    "QueryConfig",
    "QUERY_CONFIG",
    # Errors
    "SPGraphError",
    "NegativeCycleError",
    "InvalidVertexError",
    "NoPathError",
    # I/O
    "load_graph_yaml",
    "load_graph_file",
    "graph_from_dict",
    "graph_to_dict",
    "to_networkx",
    "from_networkx",
    # Logging
    "logging",
]
