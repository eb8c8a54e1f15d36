# src/nrow/types.py

from __future__ import annotations
from enum import IntEnum
from typing import Literal, NamedTuple

Player = Literal["X", "O"]
Cell = Literal["X", "O", " "]


class Score(IntEnum):
    HUMAN_WINS = 0
    UNDECIDED = 1
    DRAW = 2
    COMPUTER_WINS = 3


# Returned by lookups that miss; outside the Score domain on purpose.
NOT_FOUND = -1


class Move(NamedTuple):
    row: int
    col: int
    previous: Cell
