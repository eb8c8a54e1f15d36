from __future__ import annotations

import argparse
import csv
from dataclasses import dataclass, field
import logging
from pathlib import Path
import time
from typing import List

from nrow.config import (
    BOARD_SIZE,
    COMPUTER,
    HUMAN,
    LENGTH_TO_WIN,
    MAX_LEVELS,
    PROFILE_DIR,
    PROFILE_SAMPLE_EVERY,
    TABLE_SIZE,
)
from nrow.core.board import Board
from nrow.game.actions import MoveHistory
from nrow.log import setup_logging
from nrow.memo.table import HashDictionary
from nrow.types import NOT_FOUND, Score

logger = logging.getLogger(__name__)

PROFILE_COLUMNS = [
    "inserts",
    "records",
    "collisions",
    "occupied_buckets",
    "longest_chain",
    "load_factor",
    "collision_rate",
]


@dataclass
class ProfileResult:
    rows: List[dict] = field(default_factory=list)
    bucket_lengths: List[int] = field(default_factory=list)
    hits: int = 0
    inserts: int = 0


def _other(p: str) -> str:
    return COMPUTER if p == HUMAN else HUMAN


def _sample(table: HashDictionary, inserts: int) -> dict:
    s = table.stats()
    return {
        "inserts": inserts,
        "records": s.records,
        "collisions": s.collisions,
        "occupied_buckets": s.occupied_buckets,
        "longest_chain": s.longest_chain,
        "load_factor": round(s.load_factor, 6),
        "collision_rate": round(s.collisions / inserts, 6) if inserts else 0.0,
    }


def profile_table(
    size: int = BOARD_SIZE,
    length_to_win: int = LENGTH_TO_WIN,
    max_levels: int = MAX_LEVELS,
    table_size: int = TABLE_SIZE,
    sample_every: int = PROFILE_SAMPLE_EVERY,
) -> ProfileResult:
    """
    Fill a table with every configuration reachable within ``max_levels`` plies.

    Human moves first. Each new configuration is scored with ``evaluate`` and
    cached; configurations already in the table and finished games are not
    expanded further.
    """
    if sample_every < 1:
        raise ValueError(f"sample_every must be positive, got {sample_every}.")

    board = Board(size, length_to_win, max_levels)
    table = HashDictionary(table_size)
    history = MoveHistory()
    result = ProfileResult()

    def visit(to_play: str, level: int) -> None:
        for r in range(board.size):
            for c in range(board.size):
                if not board.is_empty(r, c):
                    continue

                history.play(board, r, c, to_play)
                if board.repeated_configuration(table) != NOT_FOUND:
                    result.hits += 1
                else:
                    score = board.evaluate()
                    board.add_configuration(table, score)
                    result.inserts += 1
                    if result.inserts % sample_every == 0:
                        result.rows.append(_sample(table, result.inserts))
                    if score == Score.UNDECIDED and level + 1 < board.max_levels:
                        visit(_other(to_play), level + 1)
                history.undo(board)

    if board.max_levels > 0:
        visit(HUMAN, 0)

    if not result.rows or result.rows[-1]["inserts"] != result.inserts:
        result.rows.append(_sample(table, result.inserts))
    result.bucket_lengths = table.bucket_lengths()

    logger.info(
        "Profiled %dx%d (win %d, levels %d): %d inserts, %d hits",
        size, size, length_to_win, max_levels, result.inserts, result.hits,
    )
    return result


def export_profile(result: ProfileResult, outdir: Path) -> tuple[Path, Path]:
    outdir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    profile_path = outdir / f"table_profile_{ts}.csv"
    buckets_path = outdir / f"table_buckets_{ts}.csv"

    with open(profile_path, "w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=PROFILE_COLUMNS)
        w.writeheader()
        w.writerows(result.rows)

    with open(buckets_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(["bucket", "chain_length"])
        for i, n in enumerate(result.bucket_lengths):
            w.writerow([i, n])

    return profile_path, buckets_path


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Profile memoization table occupancy on a full game-tree walk.")
    ap.add_argument("--size", type=int, default=BOARD_SIZE, help="Board size N (N x N)")
    ap.add_argument("--win", type=int, default=LENGTH_TO_WIN, help="Run length needed to win")
    ap.add_argument("--levels", type=int, default=MAX_LEVELS, help="Maximum plies to explore")
    ap.add_argument("--table-size", type=int, default=TABLE_SIZE, help="Number of buckets")
    ap.add_argument("--sample-every", type=int, default=PROFILE_SAMPLE_EVERY, help="Record stats every N inserts")
    ap.add_argument("--outdir", type=str, default=PROFILE_DIR, help="Directory for exported CSVs")
    ap.add_argument("--no-export", action="store_true", help="Print the summary only")
    ap.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    start = time.perf_counter()
    result = profile_table(
        size=args.size,
        length_to_win=args.win,
        max_levels=args.levels,
        table_size=args.table_size,
        sample_every=args.sample_every,
    )
    elapsed = time.perf_counter() - start

    last = result.rows[-1]
    print(f"Configurations stored: {last['records']:,}  (lookups hit: {result.hits:,})")
    print(f"Buckets used: {last['occupied_buckets']:,}/{args.table_size:,}  longest chain: {last['longest_chain']}")
    print(f"Load factor: {last['load_factor']:.3f}  collision rate: {last['collision_rate']:.3f}")
    print(f"Elapsed: {elapsed:.3f}s")

    if not args.no_export:
        profile_path, buckets_path = export_profile(result, Path(args.outdir))
        print(f"Wrote CSV: {profile_path}")
        print(f"Wrote CSV: {buckets_path}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
