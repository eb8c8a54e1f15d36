from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Record:
    key: str
    score: int
