import pytest

from attacks import can_place_knight, knight_targets, place_knight, place_queen
from board import Square


def test_place_queen_marks_lines_and_diagonals(empty_board):
    place_queen(empty_board, 4, 4)
    assert empty_board[4, 4] is Square.QUEEN
    assert empty_board.pieces(Square.QUEEN) == [(4, 4)]
    # row, column and both diagonals
    for pos in [(4, 0), (4, 7), (0, 4), (7, 4), (0, 0), (7, 7), (1, 7), (7, 1)]:
        assert empty_board[pos] is Square.ATTACKED
    assert len(list(empty_board.open_squares())) == 64 - 28


def test_place_queen_in_corner(empty_board):
    place_queen(empty_board, 0, 7)
    assert empty_board[7, 0] is Square.ATTACKED
    assert empty_board[1, 5] is Square.OPEN
    assert len(list(empty_board.open_squares())) == 64 - 22


def test_place_knight_marks_its_moves(empty_board):
    place_knight(empty_board, 4, 4)
    assert empty_board[4, 4] is Square.KNIGHT
    assert sorted(knight_targets(4, 4)) == [
        (2, 3), (2, 5), (3, 2), (3, 6), (5, 2), (5, 6), (6, 3), (6, 5),
    ]
    for pos in knight_targets(4, 4):
        assert empty_board[pos] is Square.ATTACKED
    assert len(list(empty_board.open_squares())) == 55


def test_knight_in_corner_has_two_moves(empty_board):
    assert sorted(knight_targets(0, 0)) == [(1, 2), (2, 1)]
    place_knight(empty_board, 0, 0)
    assert len(list(empty_board.open_squares())) == 61


@pytest.mark.parametrize("x, y", [(5, 6), (6, 5), (3, 6), (6, 3)])
def test_knight_may_not_attack_centre_queen(empty_board, x, y):
    empty_board.cells[4, 4] = Square.QUEEN
    assert not can_place_knight(empty_board, x, y)


@pytest.mark.parametrize("x, y", [(1, 6), (2, 5), (2, 3), (1, 2)])
def test_knight_may_not_attack_edge_queen(empty_board, x, y):
    empty_board.cells[0, 4] = Square.QUEEN
    assert not can_place_knight(empty_board, x, y)


def test_knight_next_to_queen_is_legal(empty_board):
    empty_board.cells[4, 4] = Square.QUEEN
    assert can_place_knight(empty_board, 5, 5)


def test_can_place_knight_ignores_other_knights(empty_board):
    place_knight(empty_board, 4, 4)
    assert can_place_knight(empty_board, 5, 6)
