"""Path queries built on the single-source algorithms.

Each query runs one algorithm from the source and reconstructs a path per
requested target from the resulting predecessor array:

- ``cheapest_path`` / ``cheapest_paths`` minimize edge weight.
- ``fastest_path`` / ``fastest_paths`` minimize edge time.
"""

from spgraph.paths.queries import (
    cheapest_path,
    cheapest_paths,
    fastest_path,
    fastest_paths,
    shortest_path,
    shortest_paths,
)

__all__ = [
    "cheapest_path",
    "cheapest_paths",
    "fastest_path",
    "fastest_paths",
    "shortest_path",
    "shortest_paths",
]
