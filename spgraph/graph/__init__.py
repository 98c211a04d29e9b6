"""Graph primitives and helpers.

This package provides the append-only directed graph type `Graph` and helper
modules for conversion to/from NetworkX (`convert`) and declarative YAML
input (`io`).
"""

from spgraph.graph.core import Graph

__all__ = ["Graph"]
