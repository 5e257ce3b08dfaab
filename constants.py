"""
Central defaults for the queens-and-knights counter.

This module provides:
 - BOARD_SIZE: the board is always 8x8
 - QUEENS / KNIGHTS: the default problem (five of each)
 - KNIGHT_MOVES / DIAGONALS: move tables shared by the attack functions
 - MIN_HALVING_QUEENS: smallest queen count the symmetry-reduced search serves
"""

from __future__ import annotations

from typing import Tuple

# Problem constant: fixed board size
BOARD_SIZE = 8
SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE

# The first queen is only tried in this many rows and columns
HALF_SIZE = BOARD_SIZE // 2

# Default problem: "five queens and five knights". Six of each has no solution.
QUEENS = 5
KNIGHTS = 5

# With m queens in distinct rows the topmost one sits in row <= BOARD_SIZE - m,
# which stays inside the searched half only for m >= HALF_SIZE + 1.
MIN_HALVING_QUEENS = HALF_SIZE + 1

KNIGHT_MOVES: Tuple[Tuple[int, int], ...] = (
    (-1, -2), (-1, 2), (-2, -1), (-2, 1),
    (1, -2), (1, 2), (2, -1), (2, 1),
)

DIAGONALS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 1), (1, -1), (1, 1),
)
