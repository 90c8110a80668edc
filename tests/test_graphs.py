import pytest

from olympiad.graphs import (
    cheapest_with_free_edges,
    dijkstra,
    escape_steps,
    has_negative_cycle,
    relax_all,
    round_trip_total,
)

SAMPLE = [(1, 2, 2), (2, 3, 2), (2, 4, 1), (1, 3, 5), (3, 4, 3), (1, 4, 4)]

DELIVERY = [
    (2, 3, 5), (1, 5, 5), (3, 5, 6), (1, 2, 8), (1, 3, 8),
    (5, 3, 4), (4, 1, 8), (4, 5, 3), (3, 5, 6), (5, 4, 2),
]

FREE_SAMPLE = [(0, 1, 5), (1, 2, 5), (2, 3, 5), (3, 4, 5), (2, 3, 3), (0, 2, 100)]


def test_relax_all_sample():
    assert relax_all(4, SAMPLE, 1) == [0, 2, 4, 3]


def test_dijkstra_matches_relaxation():
    dist = dijkstra(4, SAMPLE, 1)
    assert [dist[node] for node in range(1, 5)] == relax_all(4, SAMPLE, 1)


@pytest.mark.parametrize("edges, n", [(SAMPLE, 4), (DELIVERY, 5)])
def test_dijkstra_respects_every_edge(edges, n):
    dist = dijkstra(n, edges, 1)
    assert dist[1] == 0
    for u, v, w in edges:
        if u in dist:
            assert dist[v] <= dist[u] + w


def test_unreachable_nodes():
    edges = [(1, 2, 3)]
    assert 3 not in dijkstra(3, edges, 1)
    assert relax_all(3, edges, 1)[2] is None


def test_out_of_range_node_raises():
    with pytest.raises(ValueError):
        dijkstra(2, [(1, 3, 1)], 1)


def test_round_trip_sample():
    assert round_trip_total(5, DELIVERY) == 83


def test_round_trip_on_symmetric_graph_doubles_distances():
    one_way = [(1, 2, 4), (2, 3, 1), (1, 3, 7), (3, 4, 2)]
    both = one_way + [(v, u, w) for u, v, w in one_way]
    dist = dijkstra(4, both, 1)
    assert round_trip_total(4, both) == 2 * sum(dist[node] for node in range(2, 5))


def test_round_trip_skips_nodes_without_return():
    assert round_trip_total(2, [(1, 2, 9)]) == 0


def test_no_negative_cycle():
    edges = [(1, 2, 2), (1, 3, 4), (2, 3, 1), (3, 1, -3)]
    assert has_negative_cycle(3, edges) is False


def test_negative_cycle_found():
    edges = [(1, 2, 3), (2, 3, 4), (3, 1, -8)]
    assert has_negative_cycle(3, edges) is True


def test_free_edges_sample():
    assert cheapest_with_free_edges(5, FREE_SAMPLE, 1, 0, 4) == 8


def test_no_free_edges_equals_undirected_shortest_path():
    edges = [(1, 2, 4), (2, 3, 1), (1, 3, 7), (3, 4, 2)]
    both = edges + [(v, u, w) for u, v, w in edges]
    assert cheapest_with_free_edges(4, edges, 0, 1, 4) == dijkstra(4, both, 1)[4]


def test_enough_free_edges_costs_nothing():
    path = [(0, 1, 5), (1, 2, 6), (2, 3, 7)]
    assert cheapest_with_free_edges(3, path, len(path), 0, 3) == 0


def test_free_edges_unreachable_target():
    assert cheapest_with_free_edges(3, [(0, 1, 5)], 1, 0, 3) is None


@pytest.mark.parametrize("length", [1, 2, 3, 4, 5])
def test_escape_corridor_within_health(length):
    grid = [[2] + [1] * (length - 1) + [3]]
    assert escape_steps(grid) == length


def test_escape_corridor_too_long():
    grid = [[2] + [1] * 5 + [3]]
    assert escape_steps(grid) is None


def test_escape_refill_extends_range():
    row = [2, 1, 1, 4, 1, 1, 1, 1, 3]
    assert escape_steps([row]) == len(row) - 1


def test_escape_blocked_by_wall():
    assert escape_steps([[2, 0, 3]]) is None


def test_escape_requires_start_and_exit():
    with pytest.raises(ValueError):
        escape_steps([[1, 1, 3]])