"""
Depth-first counting of queen and knight placements.

Every search call takes a board and a scan cursor (x, y) in row-major order.
Placing a piece always happens on a copy of the board; the board passed in
is never modified, so the rest of the scan still sees the square as skipped.

Insights the search relies on:
  1. Queens attack along rows, so after a queen in row x the next queen is
     looked for from row x + 1 on, and m queens never fit in fewer than m rows.
  2. Attacks are symmetric between two queens, so for queens an OPEN square
     is enough. Knights attack differently, hence can_place_knight.
  3. Mirroring a solution across the centre line between columns 3 and 4
     gives another solution with the same rows, so the first queen can be
     kept to columns 0-3 and the count doubled (half_solutions).
  4. Six queens leave at most 2x2 free squares on their free rows and
     columns, not enough for six knights, so five is the interesting case.
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from attacks import can_place_knight, place_knight, place_queen
from board import Board
from constants import BOARD_SIZE, HALF_SIZE, MIN_HALVING_QUEENS


def _cursor(x: int, y: int) -> int:
    return x * BOARD_SIZE + y


def count_knights(board: Board, n: int, x: int = 0, y: int = 0) -> int:
    """Number of ways to add n knights on squares at or after (x, y)."""
    if n == 0:
        return 1
    total = 0
    for kx, ky in board.open_squares(_cursor(x, y)):
        if not can_place_knight(board, kx, ky):
            continue
        branch = board.copy()
        place_knight(branch, kx, ky)
        total += count_knights(branch, n - 1, kx, ky + 1)
    return total


def count_queens_knights(board: Board, m: int, n: int, x: int = 0, y: int = 0) -> int:
    """Number of ways to add m queens (from (x, y) on) and then n knights.

    Once the queens are down the knights are searched over the whole board.
    """
    if m == 0:
        return count_knights(board, n, 0, 0)
    total = 0
    for qx, qy in board.open_squares(_cursor(x, y)):
        if m > BOARD_SIZE - qx:
            break
        branch = board.copy()
        place_queen(branch, qx, qy)
        total += count_queens_knights(branch, m - 1, n, qx + 1, 0)
    return total


def _first_squares(x: int, y: int) -> Iterator[Tuple[int, int]]:
    # squares the first queen may take in the symmetry-reduced search
    for index in range(_cursor(x, y), HALF_SIZE * BOARD_SIZE):
        qx, qy = divmod(index, BOARD_SIZE)
        if qy < HALF_SIZE:
            yield qx, qy


def half_solutions(m: int, n: int, x: int = 0, y: int = 0) -> int:
    """Count placements whose first queen lies in the top-left quadrant.

    This is exactly half of count_queens_knights(Board.empty(), m, n): the
    column mirror of every solution is also a solution, and exactly one of
    the pair has its first queen in columns 0-3.

    Rows below 3 are never tried for the first queen. With fewer than
    MIN_HALVING_QUEENS queens the first one can sit lower than that, and the
    count would silently miss those placements, so such queen counts raise
    ValueError instead of returning a wrong half.
    """
    if not MIN_HALVING_QUEENS <= m <= BOARD_SIZE:
        raise ValueError(
            f"half_solutions needs {MIN_HALVING_QUEENS}..{BOARD_SIZE} queens, got {m}"
        )
    total = 0
    for qx, qy in _first_squares(x, y):
        branch = Board.empty()
        place_queen(branch, qx, qy)
        total += count_queens_knights(branch, m - 1, n, qx + 1, 0)
    return total


def _first_knights(board: Board, n: int, x: int, y: int) -> Optional[Board]:
    if n == 0:
        return board
    for kx, ky in board.open_squares(_cursor(x, y)):
        if not can_place_knight(board, kx, ky):
            continue
        branch = board.copy()
        place_knight(branch, kx, ky)
        found = _first_knights(branch, n - 1, kx, ky + 1)
        if found is not None:
            return found
    return None


def _first_queens_knights(board: Board, m: int, n: int, x: int, y: int) -> Optional[Board]:
    if m == 0:
        return _first_knights(board, n, 0, 0)
    for qx, qy in board.open_squares(_cursor(x, y)):
        if m > BOARD_SIZE - qx:
            break
        branch = board.copy()
        place_queen(branch, qx, qy)
        found = _first_queens_knights(branch, m - 1, n, qx + 1, 0)
        if found is not None:
            return found
    return None


def first_placement(m: int, n: int) -> Optional[Board]:
    """First complete placement in scan order, or None if there is none."""
    return _first_queens_knights(Board.empty(), m, n, 0, 0)
