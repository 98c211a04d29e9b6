"""Shared graph fixtures.

Edges are written as ``(source, target, weight[, time])``.
"""

from __future__ import annotations

import pytest

from spgraph.graph.core import Graph


@pytest.fixture
def route5() -> Graph:
    # weight / time
    #
    #      2/5        2/1        1/1        1/1
    #   0 ─────► 1 ─────► 2 ─────► 3 ─────► 4
    #   │                 ▲
    #   └─────────────────┘
    #          10/10
    return Graph.from_edges(
        5,
        [
            (0, 1, 2, 5),
            (1, 2, 2, 1),
            (0, 2, 10, 10),
            (2, 3, 1, 1),
            (3, 4, 1, 1),
        ],
    )


@pytest.fixture
def neg_cycle() -> Graph:
    # 0 ─1─► 1 ─(-3)─► 2 ─1─► 0, total -1
    return Graph.from_edges(3, [(0, 1, 1), (1, 2, -3), (2, 0, 1)])


@pytest.fixture
def neg_dag() -> Graph:
    #        4
    #   0 ───────► 1 ──1──► 3
    #   │          ▲
    #   1         -2
    #   └───► 2 ───┘
    return Graph.from_edges(4, [(0, 1, 4), (0, 2, 1), (2, 1, -2), (1, 3, 1)])


@pytest.fixture
def split() -> Graph:
    # Vertices 2 and 3 are not reachable from 0
    return Graph.from_edges(4, [(0, 1, 1, 1), (2, 3, 1, 1), (3, 2, 1, 1)])


@pytest.fixture
def parallel() -> Graph:
    # Three parallel 0->1 edges, the last one without a time
    return Graph.from_edges(2, [(0, 1, 5, 1), (0, 1, 3, 9), (0, 1, 4)])


@pytest.fixture
def untimed_shortcut() -> Graph:
    # 0->1 is cheapest but has no time, so time queries must detour via 2
    return Graph.from_edges(3, [(0, 1, 1), (0, 2, 5, 5), (2, 1, 1, 1)])
