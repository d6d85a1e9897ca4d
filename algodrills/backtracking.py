"""Backtracking exercises: N queens, boggle word search and rat-in-a-maze paths."""

from __future__ import annotations

_NEIGHBOURS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)

# Order matters only for the search; results are sorted afterwards.
_MAZE_MOVES = (("L", 0, -1), ("D", 1, 0), ("U", -1, 0), ("R", 0, 1))


def n_queens(n):
    """Return every placement of ``n`` non-attacking queens on an ``n`` x ``n`` board.

    Each placement lists, column by column, the 1-based row of that column's queen.
    Placements come in lexicographic order; an unsolvable board gives an empty list.
    """
    solutions = []
    rows = []
    used_rows = set()
    used_diagonals = set()
    used_anti_diagonals = set()

    def place(col):
        if col == n:
            solutions.append([row + 1 for row in rows])
            return
        for row in range(n):
            if (
                row in used_rows
                or row - col in used_diagonals
                or row + col in used_anti_diagonals
            ):
                continue
            rows.append(row)
            used_rows.add(row)
            used_diagonals.add(row - col)
            used_anti_diagonals.add(row + col)
            place(col + 1)
            rows.pop()
            used_rows.discard(row)
            used_diagonals.discard(row - col)
            used_anti_diagonals.discard(row + col)

    if n >= 0:
        place(0)
    return solutions


def boggle_words(dictionary, board):
    """Return, sorted, the dictionary words that can be traced on ``board``.

    A word is traced through horizontally, vertically or diagonally adjacent
    cells, using each cell at most once. A path stops growing as soon as it
    spells a dictionary word, and each word is reported once.
    """
    words = list(dictionary)
    grid = [list(row) for row in board]
    remaining = set(words)
    max_len = max((len(word) for word in words), default=0)
    found = []

    def explore(r, c, prefix, visited):
        word = prefix + grid[r][c]
        if len(word) > max_len:
            return
        if word in remaining:
            found.append(word)
            remaining.discard(word)
            return
        visited = visited | {(r, c)}
        for dr, dc in _NEIGHBOURS:
            nr, nc = r + dr, c + dc
            if (
                0 <= nr < len(grid)
                and 0 <= nc < len(grid[nr])
                and (nr, nc) not in visited
            ):
                explore(nr, nc, word, visited)

    for r, row in enumerate(grid):
        for c in range(len(row)):
            explore(r, c, "", frozenset())
    return sorted(found)


def rat_in_maze_paths(maze):
    """Return, sorted, every path from the top-left to the bottom-right of a square maze.

    Cells holding 1 are open and 0 are blocked. Paths are strings of the moves
    ``U``, ``D``, ``L`` and ``R`` and never visit a cell twice.
    """
    grid = [list(row) for row in maze]
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError("maze must be square")
    if not size or grid[0][0] == 0 or grid[-1][-1] == 0:
        return []

    paths = []
    visited = set()

    def walk(r, c, path):
        if r == size - 1 and c == size - 1:
            paths.append(path)
            return
        if not (0 <= r < size and 0 <= c < size):
            return
        if grid[r][c] != 1 or (r, c) in visited:
            return
        visited.add((r, c))
        for move, dr, dc in _MAZE_MOVES:
            walk(r + dr, c + dc, path + move)
        visited.discard((r, c))

    walk(0, 0, "")
    return sorted(paths)