from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import pandas as pd


PROFILE_COLS = [
    "inserts",
    "records",
    "collisions",
    "occupied_buckets",
    "longest_chain",
    "load_factor",
    "collision_rate",
]

BUCKET_COLS = ["bucket", "chain_length"]


@dataclass(frozen=True)
class LoadSpec:
    csv_path: Path
    required_cols: tuple[str, ...] = tuple(PROFILE_COLS)


def _coerce_numeric(df: pd.DataFrame, cols: Iterable[str]) -> pd.DataFrame:
    out = df.copy()
    for c in cols:
        if c in out.columns:
            out[c] = pd.to_numeric(out[c], errors="coerce")
    return out


def load_csv(spec: LoadSpec) -> pd.DataFrame:
    if not spec.csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {spec.csv_path}")

    df = pd.read_csv(spec.csv_path)
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in spec.required_cols if c not in df.columns]
    if missing:
        raise ValueError(f"CSV missing required columns {missing}. Columns: {list(df.columns)}")

    df = _coerce_numeric(df, spec.required_cols)
    return df.dropna(subset=list(spec.required_cols)).reset_index(drop=True)


def load_profile(csv_path: Path) -> pd.DataFrame:
    return load_csv(LoadSpec(csv_path=csv_path)).sort_values("inserts").reset_index(drop=True)


def load_buckets(csv_path: Path) -> pd.DataFrame:
    df = load_csv(LoadSpec(csv_path=csv_path, required_cols=tuple(BUCKET_COLS)))
    df["chain_length"] = df["chain_length"].astype(int)
    return df


def load_latest_from_dir(results_dir: Path, pattern: str = "table_profile_*.csv") -> Path:
    if not results_dir.exists():
        raise FileNotFoundError(f"Profile directory not found: {results_dir}")

    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")

    # Filenames include timestamp, lexicographic sort works
    return files[-1]


def buckets_path_for(profile_path: Path) -> Path:
    """table_profile_<ts>.csv -> table_buckets_<ts>.csv in the same directory."""
    name = profile_path.name.replace("table_profile_", "table_buckets_", 1)
    return profile_path.with_name(name)
