"""Random obstacle maps and a bidirectional breadth-first reachability search.

A map is a list of rows; ``grid[y][x]`` is 0 for an open cell and 1 for
an obstacle.  Points are ``(x, y)`` pairs.  Moves go to any of the eight
neighbouring cells, diagonals included.
"""

from __future__ import annotations

import random
from collections.abc import Sequence

__all__ = [
    "DIRECTIONS",
    "OBSTACLE",
    "generate_random_map",
    "bidirectional_bfs",
]

OBSTACLE = 1
DIRECTIONS = (
    (1, 0), (-1, 0), (0, 1), (0, -1),
    (1, 1), (-1, -1), (1, -1), (-1, 1),
)

Point = tuple[int, int]


def generate_random_map(
    width: int, height: int, obstacle_prob: float, seed: int | None = None
) -> list[list[int]]:
    """A ``height``-by-``width`` map where each cell is an obstacle with ``obstacle_prob``.

    The top-left and bottom-right corners are always left open.
    """
    if width < 1 or height < 1:
        raise ValueError("map dimensions must be positive")
    if not 0.0 <= obstacle_prob <= 1.0:
        raise ValueError("obstacle probability must lie between 0 and 1")
    rng = random.Random(seed)
    corners = {(0, 0), (width - 1, height - 1)}
    return [
        [
            0 if (x, y) in corners else int(rng.random() < obstacle_prob)
            for x in range(width)
        ]
        for y in range(height)
    ]


def _check_point(grid: Sequence[Sequence[int]], point: Point) -> None:
    x, y = point
    if not (0 <= y < len(grid) and 0 <= x < len(grid[y])):
        raise ValueError(f"point {point} lies outside the map")


def _expand(
    grid: Sequence[Sequence[int]],
    frontier: list[Point],
    mine: set[Point],
    theirs: set[Point],
) -> list[Point] | None:
    """Advance one frontier by a level; None once it touches the other side."""
    height = len(grid)
    following: list[Point] = []
    for x, y in frontier:
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if not (0 <= ny < height and 0 <= nx < len(grid[ny])):
                continue
            if grid[ny][nx] == OBSTACLE:
                continue
            cell = (nx, ny)
            if cell in mine:
                continue
            mine.add(cell)
            if cell in theirs:
                return None
            following.append(cell)
    return following


def bidirectional_bfs(grid: Sequence[Sequence[int]], start: Point, end: Point) -> bool:
    """Whether ``end`` can be reached from ``start``, searching from both ends at once."""
    if not grid:
        raise ValueError("map is empty")
    _check_point(grid, start)
    _check_point(grid, end)

    seen_forward = {start}
    seen_backward = {end}
    forward = [start]
    backward = [end]
    while forward and backward:
        advanced = _expand(grid, forward, seen_forward, seen_backward)
        if advanced is None:
            return True
        forward = advanced
        advanced = _expand(grid, backward, seen_backward, seen_forward)
        if advanced is None:
            return True
        backward = advanced
    return False