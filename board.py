import enum
from typing import Iterator, List, Tuple

import numpy as np

from constants import BOARD_SIZE


class Square(enum.IntEnum):
    OPEN = 0        # unoccupied, unattacked
    ATTACKED = 1    # unoccupied, no piece may go here
    QUEEN = 2
    KNIGHT = 3


class Board:
    """An 8x8 grid of Square values, indexed [x, y] (row, column).

    The cells live in a small numpy array so that copying a board is a single
    buffer copy. Search code copies before every placement and leaves the
    original untouched for the branch that skips the square.
    """

    def __init__(self, cells: np.ndarray | None = None):
        if cells is None:
            self.cells = np.full((BOARD_SIZE, BOARD_SIZE), Square.OPEN, dtype=np.int8)
        else:
            self.cells = cells

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    def copy(self) -> "Board":
        return Board(self.cells.copy())

    def __getitem__(self, pos: Tuple[int, int]) -> Square:
        x, y = pos
        return Square(int(self.cells[x, y]))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    __hash__ = None

    def open_squares(self, start: int = 0) -> Iterator[Tuple[int, int]]:
        """Yield (x, y) of every OPEN square at or after row-major index start.

        The flat index x * BOARD_SIZE + y doubles as the scan cursor, so a
        column of BOARD_SIZE rolls over to the next row.
        """
        flat = self.cells.ravel()[start:]
        for index in np.flatnonzero(flat == Square.OPEN):
            yield divmod(int(index) + start, BOARD_SIZE)

    def pieces(self, kind: Square) -> List[Tuple[int, int]]:
        xs, ys = np.nonzero(self.cells == kind)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]

    def __repr__(self) -> str:
        return (
            f"Board(queens={self.pieces(Square.QUEEN)}, "
            f"knights={self.pieces(Square.KNIGHT)})"
        )
