from __future__ import annotations
from typing import TYPE_CHECKING, Iterator, Tuple

from nrow.config import COMPUTER, EMPTY, HUMAN
from nrow.types import Score

if TYPE_CHECKING:
    from nrow.core.board import Board

Coord = Tuple[int, int]  # (row, col)

# right, down, down-right, down-left
DIRECTIONS: Tuple[Coord, ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


def _in_bounds(size: int, r: int, c: int) -> bool:
    return 0 <= r < size and 0 <= c < size


def line_starts(size: int, dr: int, dc: int) -> Iterator[Coord]:
    """
    Yield the first cell of every line running in direction (dr, dc).
    A cell starts a line when stepping backwards from it leaves the board.
    """
    for r in range(size):
        for c in range(size):
            if not _in_bounds(size, r - dr, c - dc):
                yield r, c


def scan_line(board: Board, start: Coord, direction: Coord, symbol: str) -> bool:
    """Walk one line keeping a running count of consecutive ``symbol`` cells."""
    g = board.grid
    r, c = start
    dr, dc = direction
    run = 0
    while _in_bounds(board.size, r, c):
        if g[r][c] == symbol:
            run += 1
            if run >= board.length_to_win:
                return True
        else:
            run = 0
        r += dr
        c += dc
    return False


def has_win(board: Board, symbol: str) -> bool:
    if board.length_to_win > board.size:
        return False

    for direction in DIRECTIONS:
        for start in line_starts(board.size, *direction):
            if scan_line(board, start, direction, symbol):
                return True
    return False


def is_full(board: Board) -> bool:
    return all(cell != EMPTY for row in board.grid for cell in row)


def is_draw(board: Board) -> bool:
    return not has_win(board, HUMAN) and not has_win(board, COMPUTER) and is_full(board)


def evaluate(board: Board) -> Score:
    # Computer is checked first; a board holding both wins scores for the computer.
    if has_win(board, COMPUTER):
        return Score.COMPUTER_WINS
    if has_win(board, HUMAN):
        return Score.HUMAN_WINS
    if is_draw(board):
        return Score.DRAW
    return Score.UNDECIDED
