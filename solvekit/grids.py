"""Problems on rectangular grids of integers."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Sequence

_DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def get_maximum_gold(grid: Sequence[Sequence[int]]) -> int:
    """Most gold collectable on a path that never revisits a cell or steps on 0."""
    cells = [list(row) for row in grid]
    rows = len(cells)
    cols = len(cells[0]) if rows else 0

    def collect(r: int, c: int) -> int:
        if not (0 <= r < rows and 0 <= c < cols) or cells[r][c] == 0:
            return 0
        gold = cells[r][c]
        cells[r][c] = 0
        best = max(collect(r + dr, c + dc) for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)))
        cells[r][c] = gold
        return gold + best

    return max(
        (collect(r, c) for r in range(rows) for c in range(cols) if cells[r][c] > 0),
        default=0,
    )


def _thief_distances(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    n = len(grid)
    distance: list[list[int | None]] = [[None] * n for _ in range(n)]
    queue: deque[tuple[int, int]] = deque()
    for r, row in enumerate(grid):
        for c, value in enumerate(row):
            if value:
                distance[r][c] = 0
                queue.append((r, c))
    if not queue:
        raise ValueError("grid must contain at least one thief")
    while queue:
        r, c = queue.popleft()
        for dr, dc in _DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < n and 0 <= nc < n and distance[nr][nc] is None:
                distance[nr][nc] = distance[r][c] + 1
                queue.append((nr, nc))
    return distance  # type: ignore[return-value]


def maximum_safeness_factor(grid: Sequence[Sequence[int]]) -> int:
    """Best, over all paths from the top-left to the bottom-right cell, of the
    smallest Manhattan distance to a thief (cells holding 1) along the path."""
    n = len(grid)
    if n == 0:
        raise ValueError("grid must not be empty")
    if grid[0][0] or grid[n - 1][n - 1]:
        return 0

    distance = _thief_distances(grid)
    visited = [[False] * n for _ in range(n)]
    heap = [(-distance[0][0], 0, 0)]
    while heap:
        neg_safe, neg_r, neg_c = heapq.heappop(heap)
        safe, r, c = -neg_safe, -neg_r, -neg_c
        if r == n - 1 and c == n - 1:
            return safe
        visited[r][c] = True
        for dr, dc in _DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < n and 0 <= nc < n and not visited[nr][nc]:
                heapq.heappush(heap, (-min(safe, distance[nr][nc]), -nr, -nc))
                visited[nr][nc] = True
    return -1


def matrix_score(grid: Sequence[Sequence[int]]) -> int:
    """Highest sum of rows read as binary numbers after flipping rows and columns."""
    rows = [list(row) if row[0] else [1 - v for v in row] for row in grid]
    n_rows = len(rows)
    columns = [
        col if index == 0 or 2 * sum(col) >= n_rows else tuple(1 - v for v in col)
        for index, col in enumerate(zip(*rows))
    ]
    total = 0
    for row in zip(*columns):
        value = 0
        for bit in row:
            value = value * 2 + bit
        total += value
    return total


def row_and_maximum_ones(mat: Sequence[Sequence[int]]) -> list[int]:
    """Return ``[row index, count]`` for the first row with the most ones."""
    if not mat:
        raise ValueError("matrix must not be empty")
    counts = [list(row).count(1) for row in mat]
    best = max(counts)
    return [counts.index(best), best]