from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pandas as pd
import matplotlib.pyplot as plt


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _finish(fig, outdir: Path, filename: str, *, show: bool) -> Path | None:
    if show:
        plt.show()
        return None
    _ensure_dir(outdir)
    path = outdir / filename
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return path


def plot_chain_histogram(dist: pd.DataFrame, outdir: Path, *, show: bool) -> Path | None:
    """Bar chart of how many buckets hold each chain length."""
    if dist.empty or "chain_length" not in dist.columns:
        return None

    fig = plt.figure()
    plt.bar(dist["chain_length"].astype(int), dist["buckets"].astype(int))
    plt.title("Buckets by chain length")
    plt.xlabel("chain length")
    plt.ylabel("buckets")
    return _finish(fig, outdir, "hist_chain_length.png", show=show)


def plot_growth(profile: pd.DataFrame, outdir: Path, cols: Iterable[str], *, show: bool) -> list[Path]:
    if "inserts" not in profile.columns:
        return []

    written: list[Path] = []
    for c in cols:
        if c not in profile.columns or not pd.api.types.is_numeric_dtype(profile[c]):
            continue

        fig = plt.figure()
        plt.plot(profile["inserts"], profile[c])
        plt.title(f"{c} vs inserts")
        plt.xlabel("inserts")
        plt.ylabel(c)
        path = _finish(fig, outdir, f"trend_{c}.png", show=show)
        if path is not None:
            written.append(path)
    return written
