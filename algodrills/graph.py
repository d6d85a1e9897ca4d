"""Grid path search and the snakes-and-ladders shortest game."""

from __future__ import annotations

from collections import deque

WALL = 0
SOURCE = 1
DESTINATION = 2

BOARD_END = 30
DIE_FACES = 6

_STEPS = ((-1, 0), (1, 0), (0, 1), (0, -1))


def path_exists(grid):
    """Tell whether the source cell (1) reaches a destination cell (2) through non-wall cells.

    Cells hold 0 for a wall, 1 for the source, 2 for a destination and 3 for open ground.
    When several cells hold 1, the last one in row-major order is the source.
    """
    rows = [list(row) for row in grid]
    start = None
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell == SOURCE:
                start = (r, c)
    if start is None:
        raise ValueError("grid has no source cell")

    seen = {start}
    stack = [start]
    while stack:
        r, c = stack.pop()
        if rows[r][c] == DESTINATION:
            return True
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if (
                0 <= nr < len(rows)
                and 0 <= nc < len(rows[nr])
                and (nr, nc) not in seen
                and rows[nr][nc] != WALL
            ):
                seen.add((nr, nc))
                stack.append((nr, nc))
    return False


def snake_ladder_min_throws(jumps):
    """Return the fewest die throws from cell 1 to cell 30, or None if it cannot be reached.

    ``jumps`` maps the foot of a ladder or the head of a snake to where it leads;
    it may be a mapping or an iterable of ``(from, to)`` pairs.
    """
    moves = dict(jumps)
    seen = {1}
    queue = deque([(1, 0)])
    while queue:
        cell, throws = queue.popleft()
        if cell == BOARD_END:
            return throws
        for target in range(cell + 1, min(cell + DIE_FACES, BOARD_END) + 1):
            landing = moves.get(target, target)
            if landing not in seen:
                seen.add(landing)
                queue.append((landing, throws + 1))
    return None