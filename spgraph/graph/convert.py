"""Graph conversion utilities between `Graph` and NetworkX graphs.

Each inserted edge becomes one keyed edge of a ``networkx.MultiDiGraph`` so
parallel edges survive the round trip. Edge attributes are ``weight`` and,
when the edge has one, ``time``.
"""

from typing import Optional

import networkx as nx

from spgraph.graph.core import Graph


def to_networkx(graph: Graph) -> nx.MultiDiGraph:
    """Convert a `Graph` to a NetworkX MultiDiGraph.

    Args:
        graph: The graph to convert.

    Returns:
        A MultiDiGraph with nodes ``0..vertex_count-1``. Edge keys are the
        insertion indices of the edges.
    """
    nx_graph = nx.MultiDiGraph()
    nx_graph.add_nodes_from(range(graph.vertex_count))
    for index, edge in enumerate(graph.edges):
        attrs = {"weight": edge.weight}
        if edge.has_time:
            attrs["time"] = edge.time
        nx_graph.add_edge(edge.source, edge.target, key=index, **attrs)
    return nx_graph


def from_networkx(
    nx_graph: nx.Graph,
    weight: str = "weight",
    time: Optional[str] = "time",
    default_weight: float = 1,
) -> Graph:
    """Convert a NetworkX graph to a `Graph`.

    Nodes must be exactly the integers ``0..n-1``. Undirected graphs are not
    accepted since `Graph` edges are directed.

    Args:
        nx_graph: Directed NetworkX graph (DiGraph or MultiDiGraph).
        weight: Edge attribute holding the cost.
        time: Edge attribute holding the traversal time; None to ignore times.
        default_weight: Cost for edges without a `weight` attribute.

    Returns:
        A new `Graph` with edges added in NetworkX iteration order.

    Raises:
        ValueError: If the graph is undirected, empty, or its nodes are not
            ``0..n-1``.
    """
    if not nx_graph.is_directed():
        raise ValueError("from_networkx() requires a directed NetworkX graph")
    count = nx_graph.number_of_nodes()
    if count == 0:
        raise ValueError("Cannot build a Graph from an empty NetworkX graph")
    if set(nx_graph.nodes) != set(range(count)):
        raise ValueError(
            f"NetworkX node labels must be the integers 0..{count - 1}; "
            "use networkx.convert_node_labels_to_integers() first"
        )

    graph = Graph(count)
    for u, v, data in nx_graph.edges(data=True):
        edge_time = data.get(time) if time is not None else None
        graph.add_edge(u, v, data.get(weight, default_weight), edge_time)
    return graph
