# src/nrow/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from nrow.config import BOARD_SIZE, EMPTY, LENGTH_TO_WIN, MAX_LEVELS, TABLE_SIZE
from nrow.core import rules
from nrow.memo.record import Record
from nrow.memo.table import HashDictionary
from nrow.types import Cell, Score


@dataclass(slots=True)
class Board:
    size: int = BOARD_SIZE
    length_to_win: int = LENGTH_TO_WIN
    max_levels: int = MAX_LEVELS  # search depth budget, read by the driver
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.size < 1:
            raise ValueError(f"Board size must be positive, got {self.size}.")
        if self.length_to_win < 1:
            raise ValueError(f"Length to win must be positive, got {self.length_to_win}.")
        if self.max_levels < 0:
            raise ValueError(f"Max levels cannot be negative, got {self.max_levels}.")
        if not self.grid:
            self.grid = [[EMPTY for _ in range(self.size)] for _ in range(self.size)]

    def copy(self) -> "Board":
        b = Board(self.size, self.length_to_win, self.max_levels)
        b.grid = [row[:] for row in self.grid]
        return b

    def place(self, row: int, col: int, symbol: Cell) -> None:
        """
        Put ``symbol`` at (row, col).
        No validation: callers check ``is_empty`` first.
        """
        self.grid[row][col] = symbol

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row][col] == EMPTY

    def encode(self) -> str:
        """Row-major key, one character per cell, length size * size."""
        return "".join("".join(row) for row in self.grid)

    def has_win(self, symbol: str) -> bool:
        return rules.has_win(self, symbol)

    def is_full(self) -> bool:
        return rules.is_full(self)

    def is_draw(self) -> bool:
        return rules.is_draw(self)

    def evaluate(self) -> Score:
        return rules.evaluate(self)

    # Table helpers

    def create_dictionary(self) -> HashDictionary:
        return HashDictionary(TABLE_SIZE)

    def repeated_configuration(self, table: HashDictionary) -> int:
        return table.get(self.encode())

    def add_configuration(self, table: HashDictionary, score: int) -> bool:
        return table.put(Record(self.encode(), score))

    def render(self) -> str:
        sep = "\n" + "+".join("-" * self.size) + "\n"
        return sep.join("|".join(row) for row in self.grid)
