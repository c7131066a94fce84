"""Shortest paths in weighted directed graphs with vertices numbered from 1."""

from __future__ import annotations

import argparse
import heapq
import math
import sys
from collections.abc import Iterable, Iterator, Sequence

Edge = tuple[int, int, int]


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 1 <= vertex <= vertex_count:
        raise ValueError(f"vertex {vertex} is not in 1..{vertex_count}")


def _adjacency(
    vertex_count: int, edges: Iterable[Edge], reverse: bool = False
) -> list[list[tuple[int, int]]]:
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(vertex_count + 1)]
    for source, target, cost in edges:
        _check_vertex(source, vertex_count)
        _check_vertex(target, vertex_count)
        if reverse:
            source, target = target, source
        adjacency[source].append((target, cost))
    return adjacency


def _search(
    adjacency: list[list[tuple[int, int]]], vertex_count: int, start: int
) -> tuple[dict[int, int | None], dict[int, int | None]]:
    _check_vertex(start, vertex_count)
    distance = [math.inf] * (vertex_count + 1)
    previous: list[int | None] = [None] * (vertex_count + 1)
    distance[start] = 0
    queue = [(0, start)]
    while queue:
        cost, vertex = heapq.heappop(queue)
        if cost != distance[vertex]:
            continue
        for neighbour, weight in adjacency[vertex]:
            candidate = cost + weight
            if candidate < distance[neighbour]:
                distance[neighbour] = candidate
                previous[neighbour] = vertex
                heapq.heappush(queue, (candidate, neighbour))
    distances = {
        v: (None if math.isinf(distance[v]) else distance[v])
        for v in range(1, vertex_count + 1)
    }
    predecessors = {v: previous[v] for v in range(1, vertex_count + 1)}
    return distances, predecessors


def floyd_warshall(vertex_count: int, edges: Iterable[Edge]) -> list[list[int | None]]:
    """Return all-pairs distances.

    Row ``i`` and column ``j`` hold the distance from vertex ``i + 1`` to
    vertex ``j + 1``, or None when it is unreachable. Parallel edges keep
    the cheapest cost.
    """
    board = [
        [0 if i == j else math.inf for j in range(vertex_count)]
        for i in range(vertex_count)
    ]
    for source, target, cost in edges:
        _check_vertex(source, vertex_count)
        _check_vertex(target, vertex_count)
        row = board[source - 1]
        row[target - 1] = min(cost, row[target - 1])
    for via in range(vertex_count):
        via_row = board[via]
        for row in board:
            through = row[via]
            if math.isinf(through):
                continue
            for end, cost in enumerate(via_row):
                if through + cost < row[end]:
                    row[end] = through + cost
    return [[None if math.isinf(d) else d for d in row] for row in board]


def dijkstra(
    vertex_count: int, edges: Iterable[Edge], start: int
) -> dict[int, int | None]:
    """Return the distance from start to every vertex, None when unreachable."""
    distances, _ = _search(_adjacency(vertex_count, edges), vertex_count, start)
    return distances


def dijkstra_with_predecessors(
    vertex_count: int, edges: Iterable[Edge], start: int
) -> tuple[dict[int, int | None], dict[int, int | None]]:
    """Return distances and, for each vertex, its predecessor on a shortest path."""
    return _search(_adjacency(vertex_count, edges), vertex_count, start)


def longest_round_trip(vertex_count: int, edges: Iterable[Edge], target: int) -> int:
    """Return the longest shortest round trip between any vertex and target.

    For every vertex the cost of reaching target and coming back is the sum
    of the two shortest distances; the largest such sum is returned.
    """
    edges = list(edges)
    away, _ = _search(_adjacency(vertex_count, edges), vertex_count, target)
    back, _ = _search(_adjacency(vertex_count, edges, reverse=True), vertex_count, target)
    longest = 0
    for vertex in range(1, vertex_count + 1):
        there, home = back[vertex], away[vertex]
        if there is None or home is None:
            raise ValueError(f"vertex {vertex} cannot make a round trip to {target}")
        longest = max(longest, there + home)
    return longest


def _tokens() -> Iterator[int]:
    return iter(int(token) for token in sys.stdin.read().split())


def _read(tokens: Iterator[int], count: int) -> list[int]:
    values = [next(tokens, None) for _ in range(count)]
    if None in values:
        raise SystemExit("unexpected end of input")
    return values  # type: ignore[return-value]


def _read_edges(tokens: Iterator[int], count: int) -> list[Edge]:
    return [tuple(_read(tokens, 3)) for _ in range(count)]  # type: ignore[misc]


def main(argv: Sequence[str] | None = None) -> int:
    """Read a graph from standard input and print shortest-path results."""
    parser = argparse.ArgumentParser(
        prog="studykit-paths", description="Shortest paths in weighted graphs."
    )
    parser.add_argument(
        "algorithm",
        choices=("floyd", "dijkstra", "round-trip"),
        help="floyd: n m edges; dijkstra: V E start edges; round-trip: N M X edges",
    )
    args = parser.parse_args(argv)
    tokens = _tokens()

    if args.algorithm == "floyd":
        vertex_count, edge_count = _read(tokens, 2)
        table = floyd_warshall(vertex_count, _read_edges(tokens, edge_count))
        for row in table:
            print("".join(f"{0 if d is None else d} " for d in row))
    elif args.algorithm == "dijkstra":
        vertex_count, edge_count, start = _read(tokens, 3)
        distances = dijkstra(vertex_count, _read_edges(tokens, edge_count), start)
        for vertex in range(1, vertex_count + 1):
            d = distances[vertex]
            print("INF" if d is None else d)
    else:
        vertex_count, edge_count, target = _read(tokens, 3)
        print(longest_round_trip(vertex_count, _read_edges(tokens, edge_count), target))
    return 0


if __name__ == "__main__":
    sys.exit(main())