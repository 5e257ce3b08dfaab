from board import Board, Square
from constants import BOARD_SIZE
import numpy as np
import matplotlib.pyplot as plt

SYMBOLS = {
    Square.OPEN: '.',
    Square.ATTACKED: '.',
    Square.QUEEN: 'Q',
    Square.KNIGHT: 'N',
}


#####################################################################################
## Console
def board_box(board: Board) -> str:
    border = "+" + "-" * (BOARD_SIZE * 2 + 1) + "+"
    lines = [border]
    for x in range(BOARD_SIZE):
        row = " ".join(SYMBOLS[board[x, y]] for y in range(BOARD_SIZE))
        lines.append(f"| {row} |")
    lines.append(border)
    return "\n".join(lines)


def print_board_box(board, title=None):
    if title:
        print(title)
    if board is None:
        print("[view] no placement to show")
        return
    print(board_box(board))


#####################################################################################
## Use of matplotlib
## Grey background, alternating tiles, Q for queens and N for knights drawn in the
## colour opposite to the tile underneath
def plot_board(board: Board, title=None, show=True):
    fig, ax = plt.subplots(figsize=(8, 8))
    fig.patch.set_facecolor('grey')
    ax.set_facecolor('grey')

    ##Create a chessboard
    chessboard = np.zeros((BOARD_SIZE, BOARD_SIZE))
    for i in range(BOARD_SIZE):
        for j in range(BOARD_SIZE):
            if (i + j) % 2 == 0:
                chessboard[i, j] = 1  ##White tiles
    ax.imshow(chessboard, cmap='binary', interpolation='nearest')

    for kind in (Square.QUEEN, Square.KNIGHT):
        for x, y in board.pieces(kind):
            colour = 'white' if (x + y) % 2 == 0 else 'black'
            ax.text(y, x, SYMBOLS[kind], fontsize=(200 / BOARD_SIZE), ha='center', va='center',
                    color=colour, weight='bold')

    ax.set_xticks([])
    ax.set_yticks([])
    plt.title(title or 'Queens and knights', color='white', fontsize=16)
    plt.tight_layout()
    if show:
        plt.show()
    return fig
