import argparse

import time
from typing import List, Optional

from constants import BOARD_SIZE, KNIGHTS, MIN_HALVING_QUEENS, QUEENS
from search import first_placement, half_solutions
from verification import run_checks
import view


# ---------------------------
# Run modes
# ---------------------------

def run_tests() -> List[str]:
    """Run the self-check suite and print one line per failure."""
    failures = run_checks()
    for message in failures:
        print(message)
    return failures


def run_count(queens: int, knights: int, verbose: bool = False) -> int:
    start = time.perf_counter()
    half = half_solutions(queens, knights)
    total = half * 2
    print(total)
    if verbose:
        duration = time.perf_counter() - start
        print(f"Counted {total} placements ({half} in the searched half) in {duration:.2f}s")
    return total


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Count placements of non-attacking queens and knights on an 8x8 board")
    parser.add_argument("mode", nargs="?", default=None, help='"test" runs the self-check suite instead of counting')
    parser.add_argument(
        "--queens",
        type=int,
        default=QUEENS,
        choices=range(MIN_HALVING_QUEENS, BOARD_SIZE + 1),
        metavar="M",
        help=f"Queens to place ({MIN_HALVING_QUEENS}-{BOARD_SIZE}, default {QUEENS})",
    )
    parser.add_argument(
        "--knights",
        type=int,
        default=KNIGHTS,
        choices=range(0, BOARD_SIZE + 1),
        metavar="N",
        help=f"Knights to place (0-{BOARD_SIZE}, default {KNIGHTS})",
    )
    parser.add_argument("--show", action="store_true", help="Print the first placement found as a board")
    parser.add_argument("--plot", action="store_true", help="Draw the first placement found with matplotlib")
    parser.add_argument("--verbose", action="store_true", help="Print a config banner and timing")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.mode == "test":
            run_tests()
            return

        if args.verbose:
            print(f"Config | board={BOARD_SIZE}x{BOARD_SIZE} | queens={args.queens} knights={args.knights}")
        run_count(args.queens, args.knights, verbose=args.verbose)

        if args.show or args.plot:
            board = first_placement(args.queens, args.knights)
            if args.show:
                view.print_board_box(board, title="\nFirst placement:")
            if args.plot:
                if board is None:
                    print("[view] no placement to plot")
                else:
                    view.plot_board(board, title=f"{args.queens} queens and {args.knights} knights")
    except KeyboardInterrupt:
        print("\nInterrupted by user.")


if __name__ == "__main__":
    main()
