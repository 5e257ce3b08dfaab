from typing import Iterator, Tuple

from board import Board, Square
from constants import BOARD_SIZE, DIAGONALS, KNIGHT_MOVES


def on_board(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def knight_targets(x: int, y: int) -> Iterator[Tuple[int, int]]:
    """Squares a knight on (x, y) attacks, at most eight."""
    for dx, dy in KNIGHT_MOVES:
        nx, ny = x + dx, y + dy
        if on_board(nx, ny):
            yield nx, ny


def _sweep(board: Board, x: int, y: int, dx: int, dy: int) -> None:
    # walk away from (x, y) until the edge, marking each square
    x, y = x + dx, y + dy
    while on_board(x, y):
        board.cells[x, y] = Square.ATTACKED
        x, y = x + dx, y + dy


def place_queen(board: Board, x: int, y: int) -> None:
    """Put a queen on (x, y) and mark every square she attacks.

    (x, y) must be OPEN. Mutates board in place.
    """
    board.cells[x, :] = Square.ATTACKED
    board.cells[:, y] = Square.ATTACKED
    for dx, dy in DIAGONALS:
        _sweep(board, x, y, dx, dy)
    board.cells[x, y] = Square.QUEEN


def place_knight(board: Board, x: int, y: int) -> None:
    """Put a knight on (x, y) and mark the squares it attacks."""
    for nx, ny in knight_targets(x, y):
        board.cells[nx, ny] = Square.ATTACKED
    board.cells[x, y] = Square.KNIGHT


def can_place_knight(board: Board, x: int, y: int) -> bool:
    """True if a knight on (x, y) would not attack any queen.

    The state of (x, y) itself is not looked at; callers check it is OPEN.
    Queens already mark what they attack, but a knight attacks differently,
    so the reverse direction has to be checked here.
    """
    for nx, ny in knight_targets(x, y):
        if board.cells[nx, ny] == Square.QUEEN:
            return False
    return True
