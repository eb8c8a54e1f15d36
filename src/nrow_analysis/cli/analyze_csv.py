from __future__ import annotations

import argparse
import logging
from pathlib import Path

from nrow.log import setup_logging

from ..io.load_profile import buckets_path_for, load_buckets, load_latest_from_dir, load_profile
from ..metrics.summarize import chain_length_distribution, expected_chain_length, final_stats, numeric_summary
from ..plots.chart import plot_chain_histogram, plot_growth

logger = logging.getLogger(__name__)

DEFAULT_TREND_PLOTS = [
    "collision_rate",
    "load_factor",
    "longest_chain",
    "occupied_buckets",
]


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Analyze memoization table profile CSVs.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a table_profile CSV. If omitted, uses latest in --profile-dir.")
    ap.add_argument("--buckets-csv", type=str, default=None, help="Path to the matching table_buckets CSV (derived from --csv by default)")
    ap.add_argument("--profile-dir", type=str, default="data/profiles", help="Directory containing table_profile_*.csv")
    ap.add_argument("--pattern", type=str, default="table_profile_*.csv", help="Glob pattern for selecting latest file")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    setup_logging()

    outdir = Path(args.outdir)

    if args.csv:
        csv_path = Path(args.csv)
    else:
        csv_path = load_latest_from_dir(Path(args.profile_dir), pattern=args.pattern)
    buckets_csv = Path(args.buckets_csv) if args.buckets_csv else buckets_path_for(csv_path)

    profile = load_profile(csv_path)
    logger.info("Loaded %d profile samples from %s", len(profile), csv_path)

    last = final_stats(profile)
    print(f"\nLoaded: {csv_path}")
    print(f"Records: {int(last['records']):,}  Collisions: {int(last['collisions']):,}")
    print(f"Load factor: {last['load_factor']:.3f}  Longest chain: {int(last['longest_chain'])}")

    desc = numeric_summary(profile)
    if not desc.empty:
        print("\n=== Numeric summary ===")
        print(desc.to_string())

    dist = None
    if buckets_csv.exists():
        buckets = load_buckets(buckets_csv)
        dist = chain_length_distribution(buckets)
        print("\n=== Chain lengths ===")
        print(dist.to_string(index=False))
        print(f"\nExpected probes per hit: {expected_chain_length(buckets):.3f}")
    else:
        logger.warning("No bucket CSV at %s, skipping chain-length analysis", buckets_csv)

    if not args.no_plots:
        plot_growth(profile, outdir, DEFAULT_TREND_PLOTS, show=args.show)
        if dist is not None:
            plot_chain_histogram(dist, outdir, show=args.show)
        if not args.show:
            print(f"\nSaved figures to: {outdir.resolve()}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
