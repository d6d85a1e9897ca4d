import pytest

from algodrills.backtracking import boggle_words, n_queens, rat_in_maze_paths


def _no_attacks(rows):
    n = len(rows)
    if sorted(rows) != list(range(1, n + 1)):
        return False
    for a in range(n):
        for b in range(a + 1, n):
            if abs(rows[a] - rows[b]) == b - a:
                return False
    return True


def test_n_queens_four():
    assert n_queens(4) == [[2, 4, 1, 3], [3, 1, 4, 2]]


@pytest.mark.parametrize("n", [2, 3])
def test_n_queens_unsolvable(n):
    assert n_queens(n) == []


@pytest.mark.parametrize("n", [5, 6, 7])
def test_n_queens_solutions_are_valid_and_sorted(n):
    solutions = n_queens(n)
    assert solutions
    assert all(_no_attacks(rows) for rows in solutions)
    assert solutions == sorted(solutions)
    assert len({tuple(rows) for rows in solutions}) == len(solutions)


def test_n_queens_mirror_symmetry():
    solutions = {tuple(rows) for rows in n_queens(6)}
    mirrored = {tuple(7 - r for r in rows) for rows in solutions}
    assert solutions == mirrored


def test_boggle_example():
    dictionary = ["GEEKS", "FOR", "QUIZ", "GO"]
    board = [["G", "I", "Z"], ["U", "E", "K"], ["Q", "S", "E"]]
    assert boggle_words(dictionary, board) == ["GEEKS", "QUIZ"]


def test_boggle_no_cell_reuse():
    assert boggle_words(["AA"], ["A"]) == []
    assert boggle_words(["AA"], ["AA"]) == ["AA"]


def test_boggle_path_stops_at_word():
    assert boggle_words(["A", "AB"], ["AB"]) == ["A"]


def test_boggle_results_are_subset_and_unique():
    dictionary = ["AB", "BA", "ABC", "CAB", "ZZ"]
    found = boggle_words(dictionary, ["AB", "CA"])
    assert set(found) <= set(dictionary)
    assert "ZZ" not in found
    assert found == sorted(set(found))


def _follow(maze, path):
    n = len(maze)
    r = c = 0
    seen = {(0, 0)}
    step = {"U": (-1, 0), "D": (1, 0), "L": (0, -1), "R": (0, 1)}
    for move in path:
        dr, dc = step[move]
        r, c = r + dr, c + dc
        if not (0 <= r < n and 0 <= c < n) or maze[r][c] != 1 or (r, c) in seen:
            return False
        seen.add((r, c))
    return (r, c) == (n - 1, n - 1)


def test_rat_in_maze_example():
    maze = [[1, 0, 0, 0], [1, 1, 0, 1], [1, 1, 0, 0], [0, 1, 1, 1]]
    assert rat_in_maze_paths(maze) == ["DDRDRR", "DRDDRR"]


def test_rat_in_maze_open_grid_paths_are_valid():
    maze = [[1] * 3 for _ in range(3)]
    paths = rat_in_maze_paths(maze)
    assert paths == sorted(paths)
    assert len(set(paths)) == len(paths)
    assert all(_follow(maze, path) for path in paths)
    assert "DDRR" in paths and "RRDD" in paths


def test_rat_in_maze_blocked_corners():
    assert rat_in_maze_paths([[0, 1], [1, 1]]) == []
    assert rat_in_maze_paths([[1, 1], [1, 0]]) == []


def test_rat_in_maze_single_cell():
    assert rat_in_maze_paths([[1]]) == [""]


def test_rat_in_maze_not_square():
    with pytest.raises(ValueError):
        rat_in_maze_paths([[1, 1, 1], [1, 1, 1]])