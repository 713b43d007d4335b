"""Grid searches."""

from __future__ import annotations

from collections import deque
from typing import Sequence

EMPTY, FRESH, ROTTEN = 0, 1, 2
_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange is left, or -1 if one never rots.

    Cells hold 0 (empty), 1 (fresh) or 2 (rotten); each minute rot spreads
    to the four neighbours. ``grid`` is not modified.
    """
    if not grid:
        return 0
    reached = [[cell == ROTTEN for cell in row] for row in grid]
    queue: deque[tuple[int, int, int]] = deque(
        (r, c, 0)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == ROTTEN
    )
    fresh = sum(row.count(FRESH) for row in map(list, grid))
    rotted = 0
    elapsed = 0
    while queue:
        row, col, minute = queue.popleft()
        elapsed = max(elapsed, minute)
        for dr, dc in _STEPS:
            r, c = row + dr, col + dc
            if (
                0 <= r < len(grid)
                and 0 <= c < len(grid[r])
                and not reached[r][c]
                and grid[r][c] == FRESH
            ):
                reached[r][c] = True
                rotted += 1
                queue.append((r, c, minute + 1))
    return elapsed if rotted == fresh else -1