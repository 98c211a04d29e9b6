import math

import pytest

from spgraph.config import QueryConfig
from spgraph.exceptions import InvalidVertexError, NegativeCycleError, NoPathError
from spgraph.paths import (
    cheapest_path,
    cheapest_paths,
    fastest_path,
    fastest_paths,
    shortest_path,
    shortest_paths,
)
from spgraph.types.base import Metric, UnreachablePolicy
from spgraph.types.dto import CostPath, TimePath

STRICT = QueryConfig(unreachable=UnreachablePolicy.RAISE)


class TestCheapest:
    def test_route5(self, route5):
        assert cheapest_path(route5, 0, 4) == CostPath(path=(0, 1, 2, 3, 4), distance=6)

    def test_negative_weights(self, neg_dag):
        assert cheapest_path(neg_dag, 0, 3) == CostPath(path=(0, 2, 1, 3), distance=0)

    def test_source_is_target(self, route5):
        assert cheapest_path(route5, 2, 2) == CostPath(path=(2,), distance=0)

    def test_negative_cycle_propagates(self, neg_cycle):
        with pytest.raises(NegativeCycleError):
            cheapest_path(neg_cycle, 0, 2)
        with pytest.raises(NegativeCycleError):
            cheapest_paths(neg_cycle, 0, [1, 2])

    def test_unreachable_is_implicit_by_default(self, split):
        rec = cheapest_path(split, 0, 3)
        assert rec.path == (3,)
        assert math.isinf(rec.distance)
        assert not rec.reachable

    def test_unreachable_raises_when_configured(self, split):
        with pytest.raises(NoPathError) as exc_info:
            cheapest_path(split, 0, 3, config=STRICT)
        assert exc_info.value.source == 0
        assert exc_info.value.target == 3
        assert exc_info.value.metric == "cost"

    def test_multi_target(self, route5):
        result = cheapest_paths(route5, 0, [4, 2, 0])
        assert list(result) == [4, 2, 0]
        assert result[2] == CostPath(path=(0, 1, 2), distance=4)
        assert result[0] == CostPath(path=(0,), distance=0)

    def test_multi_target_duplicates_collapse(self, route5):
        result = cheapest_paths(route5, 0, [3, 3, 1])
        assert list(result) == [3, 1]

    def test_multi_target_empty(self, route5):
        assert cheapest_paths(route5, 0, []) == {}

    def test_multi_target_mixed_reachability(self, split):
        result = cheapest_paths(split, 0, [1, 2])
        assert result[1].reachable
        assert not result[2].reachable
        with pytest.raises(NoPathError):
            cheapest_paths(split, 0, [1, 2], config=STRICT)


class TestFastest:
    def test_route5(self, route5):
        assert fastest_path(route5, 0, 4) == TimePath(path=(0, 1, 2, 3, 4), time=8)

    def test_direct_edge_wins_when_faster(self, route5):
        g = route5.with_edge(0, 2, 10, 3)
        assert fastest_path(g, 0, 4) == TimePath(path=(0, 2, 3, 4), time=5)
        # Cost view is unchanged by the faster but expensive edge
        assert cheapest_path(g, 0, 4).path == (0, 1, 2, 3, 4)

    def test_untimed_edges_never_appear(self, untimed_shortcut):
        assert fastest_path(untimed_shortcut, 0, 1) == TimePath(path=(0, 2, 1), time=6)
        assert cheapest_path(untimed_shortcut, 0, 1) == CostPath((0, 1), 1)

    def test_unreachable(self, split):
        rec = fastest_path(split, 0, 2)
        assert rec.path == (2,)
        assert math.isinf(rec.time)
        with pytest.raises(NoPathError, match="by time"):
            fastest_path(split, 0, 2, config=STRICT)

    def test_ignores_negative_cost_cycle(self, neg_cycle):
        # No time-bearing edges: nothing but the source is reachable
        assert fastest_path(neg_cycle, 0, 0) == TimePath(path=(0,), time=0)

    def test_multi_target(self, route5):
        result = fastest_paths(route5, 0, [1, 4])
        assert result == {
            1: TimePath(path=(0, 1), time=5),
            4: TimePath(path=(0, 1, 2, 3, 4), time=8),
        }


@pytest.mark.parametrize("source,target", [(-1, 0), (5, 0), (0, 5), (0, -2)])
def test_invalid_vertices(route5, source, target):
    with pytest.raises(InvalidVertexError):
        cheapest_path(route5, source, target)
    with pytest.raises(InvalidVertexError):
        fastest_paths(route5, source, [target])


def test_batch_matches_single(route5, neg_dag, untimed_shortcut):
    for g in (route5, neg_dag, untimed_shortcut):
        for t in range(g.vertex_count):
            assert cheapest_paths(g, 0, [t])[t] == cheapest_path(g, 0, t)
            assert fastest_paths(g, 0, [t])[t] == fastest_path(g, 0, t)


def test_idempotent(route5):
    assert cheapest_paths(route5, 0, range(5)) == cheapest_paths(route5, 0, range(5))
    assert fastest_paths(route5, 0, range(5)) == fastest_paths(route5, 0, range(5))


def test_generic_dispatch(route5):
    assert shortest_path(route5, 0, 4) == cheapest_path(route5, 0, 4)
    assert shortest_path(route5, 0, 4, Metric.TIME) == fastest_path(route5, 0, 4)
    assert shortest_paths(route5, 0, [4], Metric.TIME) == fastest_paths(route5, 0, [4])


def test_batch_runs_algorithm_once(route5, monkeypatch):
    from spgraph.paths import queries

    calls = []
    real = queries.run_spf

    def counting(graph, source, metric):
        calls.append(metric)
        return real(graph, source, metric)

    monkeypatch.setattr(queries, "run_spf", counting)
    cheapest_paths(route5, 0, [1, 2, 3, 4])
    fastest_paths(route5, 0, [1, 2, 3, 4])
    assert calls == [Metric.COST, Metric.TIME]


def test_records_to_dict(route5, split):
    assert cheapest_path(route5, 0, 4).to_dict() == {
        "path": [0, 1, 2, 3, 4],
        "distance": 6,
    }
    assert fastest_path(split, 0, 3).to_dict() == {"path": [3], "time": None}
