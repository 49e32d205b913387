"""
01_summarize.py
~~~~~~~~~~~~~~~
Stage 01: count FARS accidents per month for the requested years.

Reads ``accident_<year>.csv.bz2`` from ``paths.data`` and writes

* ``outputs/tables/monthly_summary.csv``: one row per month, one column per year;
* ``outputs/figs/monthly_summary.png``: the same counts as one line per year.

Years that cannot be loaded are reported as warnings and left out.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from fars_analysis.analysis import fars_summarize_years, plot_summary
from fars_analysis.config import DEFAULT_CONFIG_PATH, data_dir, load_config, outputs_dir, summary_years
from fars_analysis.utils import ensure_dirs, save_figure


def run_summary(cfg, years: Sequence) -> Path:
    out_tabs = outputs_dir(cfg) / "tables"
    out_figs = outputs_dir(cfg) / "figs"
    ensure_dirs(out_tabs, out_figs)

    summary = fars_summarize_years(years, data_dir=data_dir(cfg))
    out_csv = out_tabs / "monthly_summary.csv"
    summary.to_csv(out_csv, index=False)
    print(f"Saved monthly summary → {out_csv}  shape={summary.shape}")

    ax = plot_summary(summary)
    out_png = save_figure(out_figs / "monthly_summary.png", ax.figure)
    print(f"Saved monthly plot → {out_png}")
    return out_csv


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(
        description="Stage 01 – summarize FARS accidents by month for one or more years."
    )
    ap.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    ap.add_argument(
        "--years",
        nargs="+",
        default=None,
        help="Years to summarize (default: summary.years from the config).",
    )
    args = ap.parse_args(argv)
    cfg = load_config(Path(args.config))
    years = args.years if args.years else summary_years(cfg)
    if not years:
        ap.error("no years given and summary.years is empty in the config")
    run_summary(cfg, years)


if __name__ == "__main__":
    main()
