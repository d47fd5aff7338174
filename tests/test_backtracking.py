import pytest

from algokit.backtracking import is_safe, solve_n_queens


def _queens(solution):
    return [(r, line.index("Q")) for r, line in enumerate(solution)]


def test_four_queens_count():
    assert len(solve_n_queens(4)) == 2


def test_eight_queens_count():
    assert len(solve_n_queens(8)) == 92


def test_two_has_no_solution():
    assert solve_n_queens(2) == []


@pytest.mark.parametrize("n", [1, 4, 5, 6])
def test_solutions_are_valid(n):
    solutions = solve_n_queens(n)
    assert len({tuple(s) for s in solutions}) == len(solutions)
    for solution in solutions:
        assert len(solution) == n
        assert all(len(line) == n and line.count("Q") == 1 for line in solution)
        queens = _queens(solution)
        assert len({c for _, c in queens}) == n
        assert len({r - c for r, c in queens}) == n
        assert len({r + c for r, c in queens}) == n


@pytest.mark.parametrize("n", [4, 5, 6])
def test_solutions_closed_under_mirror(n):
    solutions = {tuple(s) for s in solve_n_queens(n)}
    mirrored = {tuple(line[::-1] for line in s) for s in solutions}
    assert mirrored == solutions


def test_is_safe_checks_column_and_diagonals():
    board = ["Q...", "....", "....", "...."]
    assert is_safe(board, 1, 0) is False
    assert is_safe(board, 1, 1) is False
    assert is_safe(board, 1, 2) is True
    assert is_safe(board, 3, 3) is False


def test_is_safe_right_diagonal():
    board = ["...Q", "....", "....", "...."]
    assert is_safe(board, 1, 2) is False
    assert is_safe(board, 1, 1) is True


def test_is_safe_empty_board():
    board = ["...."] * 4
    assert all(is_safe(board, r, c) for r in range(4) for c in range(4))


def test_every_queen_is_safe_in_solution():
    for solution in solve_n_queens(6):
        for row, col in _queens(solution):
            assert is_safe(solution, row, col)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        solve_n_queens(-1)