from __future__ import annotations
from typing import List

from nrow.core.board import Board
from nrow.types import Cell, Move


class MoveHistory:
    """
    Undo stack for search drivers.
    Board has no erase operation, so backtracking restores cells from here.
    """

    def __init__(self) -> None:
        self._moves: List[Move] = []

    def __len__(self) -> int:
        return len(self._moves)

    def play(self, board: Board, row: int, col: int, symbol: Cell) -> None:
        self._moves.append(Move(row, col, board.grid[row][col]))
        board.place(row, col, symbol)

    def undo(self, board: Board) -> Move:
        if not self._moves:
            raise IndexError("Cannot undo: no moves played.")
        move = self._moves.pop()
        board.grid[move.row][move.col] = move.previous
        return move
