import io
import random

import pytest

from studykit.shortest_paths import (
    dijkstra,
    dijkstra_with_predecessors,
    floyd_warshall,
    longest_round_trip,
    main,
)

PARTY_EDGES = [
    (1, 2, 4), (1, 3, 2), (1, 4, 7), (2, 1, 1),
    (2, 3, 5), (3, 1, 2), (3, 4, 4), (4, 2, 3),
]


def _random_graph(seed, vertex_count=7, edge_count=18):
    rng = random.Random(seed)
    return [
        (rng.randint(1, vertex_count), rng.randint(1, vertex_count), rng.randint(0, 20))
        for _ in range(edge_count)
    ]


def test_dijkstra_small_graph():
    edges = [(1, 2, 2), (2, 3, 3), (1, 3, 10)]
    assert dijkstra(3, edges, 1) == {1: 0, 2: 2, 3: 5}


def test_dijkstra_unreachable_is_none():
    distances = dijkstra(3, [(1, 2, 4)], 1)
    assert distances[3] is None
    assert distances[2] == 4


def test_invalid_vertex_raises():
    with pytest.raises(ValueError):
        dijkstra(2, [(1, 3, 1)], 1)
    with pytest.raises(ValueError):
        dijkstra(2, [(1, 2, 1)], 5)
    with pytest.raises(ValueError):
        floyd_warshall(2, [(0, 1, 1)])


def test_floyd_keeps_cheapest_parallel_edge():
    table = floyd_warshall(2, [(1, 2, 9), (1, 2, 4)])
    assert table[0][1] == 4
    assert table[1][0] is None
    assert table[0][0] == table[1][1] == 0


@pytest.mark.parametrize("seed", range(8))
def test_floyd_matches_dijkstra(seed):
    edges = _random_graph(seed)
    table = floyd_warshall(7, edges)
    for start in range(1, 8):
        distances = dijkstra(7, edges, start)
        assert [distances[v] for v in range(1, 8)] == table[start - 1]


@pytest.mark.parametrize("seed", range(8))
def test_floyd_triangle_inequality(seed):
    table = floyd_warshall(7, _random_graph(seed))
    for a in range(7):
        for b in range(7):
            for c in range(7):
                if None not in (table[a][b], table[b][c]):
                    assert table[a][c] is not None
                    assert table[a][c] <= table[a][b] + table[b][c]


@pytest.mark.parametrize("seed", range(8))
def test_predecessors_trace_shortest_paths(seed):
    edges = _random_graph(seed)
    cheapest = {}
    for u, v, c in edges:
        cheapest[(u, v)] = min(c, cheapest.get((u, v), c))
    distances, predecessors = dijkstra_with_predecessors(7, edges, 1)
    assert predecessors[1] is None
    for vertex, distance in distances.items():
        if distance is None or vertex == 1:
            continue
        total, node = 0, vertex
        while node != 1:
            parent = predecessors[node]
            total += cheapest[(parent, node)]
            node = parent
        assert total == distance
    assert distances == dijkstra(7, edges, 1)


def test_longest_round_trip_example():
    assert longest_round_trip(4, PARTY_EDGES, 2) == 10


def test_longest_round_trip_combines_both_directions():
    away = dijkstra(4, PARTY_EDGES, 3)
    expected = max(dijkstra(4, PARTY_EDGES, v)[3] + away[v] for v in range(1, 5))
    assert longest_round_trip(4, PARTY_EDGES, 3) == expected


def test_longest_round_trip_unreachable_raises():
    with pytest.raises(ValueError):
        longest_round_trip(3, [(1, 2, 1), (2, 1, 1)], 1)


def test_main_floyd_prints_zero_for_unreachable(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1\n1 2 5\n"))
    assert main(["floyd"]) == 0
    assert capsys.readouterr().out == "0 5 \n0 0 \n"


def test_main_dijkstra_prints_inf(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3 1 1\n1 2 6\n"))
    assert main(["dijkstra"]) == 0
    assert capsys.readouterr().out.split() == ["0", "6", "INF"]


def test_main_round_trip(monkeypatch, capsys):
    data = "4 8 2\n" + "\n".join(f"{a} {b} {c}" for a, b, c in PARTY_EDGES)
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main(["round-trip"]) == 0
    assert capsys.readouterr().out.strip() == str(longest_round_trip(4, PARTY_EDGES, 2))