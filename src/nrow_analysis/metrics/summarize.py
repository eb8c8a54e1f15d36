from __future__ import annotations

import pandas as pd


def _require_cols(df: pd.DataFrame, cols: list[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}. Present: {list(df.columns)}")


def chain_length_distribution(buckets: pd.DataFrame) -> pd.DataFrame:
    """Number of buckets per chain length, with the share of all buckets."""
    _require_cols(buckets, ["chain_length"])

    counts = buckets["chain_length"].value_counts().sort_index()
    out = counts.rename_axis("chain_length").reset_index(name="buckets")
    total = out["buckets"].sum()
    out["share"] = out["buckets"] / total if total else 0.0
    return out


def final_stats(profile: pd.DataFrame) -> pd.Series:
    _require_cols(profile, ["inserts"])
    if profile.empty:
        raise ValueError("Profile is empty.")
    return profile.sort_values("inserts").iloc[-1]


def numeric_summary(df: pd.DataFrame) -> pd.DataFrame:
    num = df.select_dtypes(include="number")
    if num.empty:
        return pd.DataFrame()
    return num.describe(percentiles=[0.05, 0.25, 0.5, 0.75, 0.95]).T


def expected_chain_length(buckets: pd.DataFrame) -> float:
    """Average chain length seen by a successful lookup (records weighted by their chain)."""
    _require_cols(buckets, ["chain_length"])
    lengths = buckets["chain_length"]
    records = lengths.sum()
    if records == 0:
        return 0.0
    # A record at depth k costs k probes; a chain of n costs n(n+1)/2 in total.
    return float((lengths * (lengths + 1) / 2).sum() / records)
