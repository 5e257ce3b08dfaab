import matplotlib

matplotlib.use("Agg")

import pytest

from board import Board, Square


@pytest.fixture
def empty_board():
    return Board.empty()


def _is_valid_placement(board: Board) -> bool:
    """Check a finished board from its pieces alone."""
    queens = board.pieces(Square.QUEEN)
    knights = board.pieces(Square.KNIGHT)

    def queen_hits(a, b):
        return a[0] == b[0] or a[1] == b[1] or abs(a[0] - b[0]) == abs(a[1] - b[1])

    def knight_hits(a, b):
        return sorted((abs(a[0] - b[0]), abs(a[1] - b[1]))) == [1, 2]

    for i, q in enumerate(queens):
        if any(queen_hits(q, other) for other in queens[i + 1:]):
            return False
        if any(queen_hits(q, k) or knight_hits(q, k) for k in knights):
            return False
    for i, k in enumerate(knights):
        if any(knight_hits(k, other) for other in knights[i + 1:]):
            return False
    return True


@pytest.fixture
def valid_placement():
    return _is_valid_placement
