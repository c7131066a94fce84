"""Shortest paths on a four-connected grid with the A* search."""

from __future__ import annotations

import argparse
import heapq
import itertools
import sys
from collections.abc import Iterator, Sequence

Cell = tuple[int, int]
Grid = Sequence[Sequence[int]]

DEFAULT_GRID: tuple[tuple[int, ...], ...] = (
    (0, 1, 0, 0, 0),
    (0, 1, 0, 1, 0),
    (0, 0, 0, 1, 0),
    (0, 1, 1, 1, 0),
    (0, 0, 0, 0, 0),
)

DIRECTIONS: tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def manhattan(a: Cell, b: Cell) -> int:
    """Return the Manhattan distance between two cells."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _is_open(grid: Grid, rows: int, cols: int, cell: Cell) -> bool:
    x, y = cell
    return 0 <= x < rows and 0 <= y < cols and grid[x][y] == 0


def a_star(grid: Grid, start: Cell, goal: Cell) -> list[Cell]:
    """Find a shortest path from start to goal.

    Cells holding 0 are open, anything else is an obstacle. The path is
    returned as a list of cells from start to goal, or an empty list when
    the goal cannot be reached.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one row and one column")
    rows, cols = len(grid), len(grid[0])
    start = (start[0], start[1])
    goal = (goal[0], goal[1])
    if not (0 <= start[0] < rows and 0 <= start[1] < cols):
        raise ValueError(f"start {start} lies outside the grid")

    order = itertools.count()
    open_heap: list[tuple[int, int, int, Cell, Cell | None]] = [
        (manhattan(start, goal), next(order), 0, start, None)
    ]
    parents: dict[Cell, Cell | None] = {}

    while open_heap:
        _, _, cost, cell, parent = heapq.heappop(open_heap)
        if cell in parents:
            continue
        parents[cell] = parent

        if cell == goal:
            path: list[Cell] = []
            node: Cell | None = cell
            while node is not None:
                path.append(node)
                node = parents[node]
            path.reverse()
            return path

        x, y = cell
        for dx, dy in DIRECTIONS:
            neighbour = (x + dx, y + dy)
            if neighbour not in parents and _is_open(grid, rows, cols, neighbour):
                heapq.heappush(
                    open_heap,
                    (
                        cost + 1 + manhattan(neighbour, goal),
                        next(order),
                        cost + 1,
                        neighbour,
                        cell,
                    ),
                )
    return []


def _integers(stream) -> Iterator[int]:
    for line in stream:
        for token in line.split():
            yield int(token)


def _take(tokens: Iterator[int], count: int) -> list[int]:
    values = list(itertools.islice(tokens, count))
    if len(values) < count:
        raise SystemExit("unexpected end of input")
    return values


def main(argv: Sequence[str] | None = None) -> int:
    """Read a grid and two cells from standard input and print a path."""
    parser = argparse.ArgumentParser(
        prog="studykit-astar", description="Find a grid path with A* search."
    )
    parser.parse_args(argv)

    tokens = _integers(sys.stdin)
    print("Choose an option:")
    print("1. Enter grid manually")
    print("2. Use default grid")
    (choice,) = _take(tokens, 1)

    if choice == 1:
        print("Enter grid dimensions (rows cols): ", end="")
        rows, cols = _take(tokens, 2)
        print("Enter grid (0 for open, 1 for obstacle):")
        print(f"Input format: Enter {cols} numbers per row, separated by spaces.")
        grid: Grid = [_take(tokens, cols) for _ in range(rows)]
    else:
        grid = DEFAULT_GRID
        print("Using default grid:")
        for row in grid:
            print("".join(f"{cell} " for cell in row))

    print("Enter start coordinates (x y): ", end="")
    start = tuple(_take(tokens, 2))
    print("Enter goal coordinates (x y): ", end="")
    goal = tuple(_take(tokens, 2))

    path = a_star(grid, start, goal)
    if path:
        print("Path found:")
        print("".join(f"({x}, {y}) " for x, y in path))
    else:
        print("No path found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())