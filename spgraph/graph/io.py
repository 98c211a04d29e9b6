"""Declarative graph input.

A graph document is a mapping with a vertex count and an edge list::

    vertices: 5
    edges:
      - {source: 0, target: 1, weight: 2, time: 5}
      - {source: 1, target: 2, weight: -1}

Documents are validated against the packaged JSON schema
``spgraph/schemas/graph.json`` before any edge is added.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Union

import jsonschema
import yaml

from spgraph.graph.core import Graph
from spgraph.logging import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def _graph_schema() -> Dict[str, Any]:
    with (
        resources.files("spgraph.schemas")
        .joinpath("graph.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def graph_from_dict(data: Dict[str, Any]) -> Graph:
    """Build a `Graph` from a parsed graph document.

    Raises:
        ValueError: If `data` is not a mapping.
        jsonschema.ValidationError: If `data` does not match the schema.
        InvalidVertexError: If an edge endpoint is ``>= vertices``.
    """
    if not isinstance(data, dict):
        raise ValueError("The graph document must map to a dictionary at top-level.")
    jsonschema.validate(data, _graph_schema())

    graph = Graph(data["vertices"])
    for entry in data.get("edges") or []:
        graph.add_edge(
            entry["source"], entry["target"], entry["weight"], entry.get("time")
        )
    logger.debug(
        "Loaded graph with %d vertices and %d edges",
        graph.vertex_count,
        graph.edge_count,
    )
    return graph


def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    """Return the graph document describing `graph`.

    Edges without a time omit the ``time`` key.
    """
    edges = []
    for edge in graph.edges:
        entry: Dict[str, Any] = {
            "source": edge.source,
            "target": edge.target,
            "weight": edge.weight,
        }
        if edge.has_time:
            entry["time"] = edge.time
        edges.append(entry)
    return {"vertices": graph.vertex_count, "edges": edges}


def load_graph_yaml(yaml_str: str) -> Graph:
    """Parse a YAML (or JSON) graph document."""
    data = yaml.safe_load(yaml_str)
    if data is None:
        raise ValueError("The graph document is empty.")
    return graph_from_dict(data)


def load_graph_file(path: Union[str, Path]) -> Graph:
    """Read and parse a graph document from `path`."""
    text = Path(path).read_text(encoding="utf-8")
    return load_graph_yaml(text)
