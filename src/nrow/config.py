# src/nrow/config.py

from __future__ import annotations

BOARD_SIZE = 3
LENGTH_TO_WIN = 3
MAX_LEVELS = 9

HUMAN = "X"
COMPUTER = "O"
EMPTY = " "

# Prime-ish table size, around 8000 slots
TABLE_SIZE = 7971

# Profiling output
PROFILE_DIR = "data/profiles"
PROFILE_SAMPLE_EVERY = 100
