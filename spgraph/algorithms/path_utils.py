from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from spgraph.types.base import VertexID


def reconstruct_path(
    predecessors: Sequence[Optional[VertexID]],
    target: VertexID,
) -> Tuple[VertexID, ...]:
    """
    Walk a predecessor array backwards from `target` and return the path.

    The walk stops at the first vertex whose predecessor is None. For a
    reachable target that is the source; for an unreachable one it is the
    target itself, so the result degenerates to ``(target,)``. Callers tell
    the two apart by the paired distance or by comparing ``path[0]`` with
    the source.

    Args:
        predecessors: Predecessor per vertex, None marking "no predecessor".
        target: Vertex the path should end at.

    Returns:
        Vertices in source -> target order.

    Raises:
        ValueError: If the predecessor links contain a cycle.
    """
    path: List[VertexID] = []
    current: Optional[VertexID] = target
    # A simple path never visits more vertices than the array holds
    max_len = len(predecessors)
    while current is not None:
        if len(path) >= max_len:
            raise ValueError(
                f"Predecessor links form a cycle while tracing vertex {target}"
            )
        path.append(current)
        current = predecessors[current]
    path.reverse()
    return tuple(path)
