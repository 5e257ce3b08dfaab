"""Self-check suite run by `app.py test`.

Each check returns the failure messages it produced. run_checks runs all of
them, so one broken check never hides the result of another.
"""

from typing import Callable, List

from attacks import can_place_knight, place_knight, place_queen
from board import Board, Square
from search import count_knights, count_queens_knights, half_solutions


def _expect(name: str, expected: int, found: int) -> List[str]:
    if found != expected:
        return [f"[check] {name}: should be {expected}, but got {found}"]
    return []


def check_placing_one_knight() -> List[str]:
    failures = _expect("placing_one_knight", 64, count_knights(Board.empty(), 1))

    # 9 squares taken by the knight and its attacks
    board = Board.empty()
    place_knight(board, 4, 4)
    failures += _expect("placing_one_knight", 55, count_knights(board, 1))

    # 28 attacked by the queen, 8 more would attack her
    board = Board.empty()
    place_queen(board, 4, 4)
    failures += _expect("placing_one_knight", 28, count_knights(board, 1))
    return failures


def _lone_queen(x: int, y: int) -> Board:
    # a queen with no attack marks, so only the knight-to-queen test can fail
    cells = Board.empty().cells
    cells[x, y] = Square.QUEEN
    return Board(cells)


def check_can_place_knight() -> List[str]:
    failures = []
    cases = (
        ((4, 4), [(5, 6), (6, 5), (3, 6), (6, 3)], [(5, 5)]),
        ((0, 4), [(1, 6), (2, 5), (2, 3), (1, 2)], []),
    )
    for (qx, qy), illegal, legal in cases:
        board = _lone_queen(qx, qy)
        for x, y in illegal:
            if can_place_knight(board, x, y):
                failures.append(f"[check] can_place_knight: {qx},{qy}; {x},{y}")
        for x, y in legal:
            if not can_place_knight(board, x, y):
                failures.append(f"[check] can_place_knight: {qx},{qy}; {x},{y}")
    return failures


def check_eight_queens() -> List[str]:
    failures = _expect("eight_queens", 92, count_queens_knights(Board.empty(), 8, 0))
    failures += _expect("eight_queens (half)", 46, half_solutions(8, 0))
    return failures


def check_half_finder() -> List[str]:
    failures = []
    for m, n in ((5, 0), (5, 6)):
        full = count_queens_knights(Board.empty(), m, n)
        half = half_solutions(m, n)
        if half * 2 != full:
            failures.append(
                f"[check] half_finder ({m} queens, {n} knights): {full} found by full finder, "
                f"but {half} found by half finder"
            )
    return failures


def check_six_queens_knights() -> List[str]:
    return _expect("six_queens_knights", 0, count_queens_knights(Board.empty(), 6, 6))


CHECKS: List[Callable[[], List[str]]] = [
    check_placing_one_knight,
    check_can_place_knight,
    check_eight_queens,
    check_half_finder,
    check_six_queens_knights,
]


def run_checks() -> List[str]:
    failures: List[str] = []
    for check in CHECKS:
        failures.extend(check())
    return failures
