"""
02_map_state.py
~~~~~~~~~~~~~~~
Stage 02: plot the accident locations of one state for one year.

Writes ``outputs/figs/state_<STATE>_<YEAR>.png``. A missing year file or an
unknown state code stops the script with the underlying error. When the state
has no plottable accidents nothing is written.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import matplotlib.pyplot as plt

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from fars_analysis.analysis import fars_map_state
from fars_analysis.config import DEFAULT_CONFIG_PATH, data_dir, load_config, outputs_dir
from fars_analysis.utils import coerce_int, ensure_dirs, save_figure


def run_map(cfg, state: int, year: int) -> Optional[Path]:
    map_cfg = cfg.get("map", {}) or {}
    out_figs = outputs_dir(cfg) / "figs"
    ensure_dirs(out_figs)

    ax = fars_map_state(
        state,
        year,
        data_dir=data_dir(cfg),
        boundaries=map_cfg.get("boundaries"),
        marker_size=float(map_cfg.get("marker_size", 1)),
    )
    if ax is None:
        plt.close("all")
        return None
    out_png = save_figure(out_figs / f"state_{state}_{year}.png", ax.figure)
    print(f"Saved state map → {out_png}")
    return out_png


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(
        description="Stage 02 – map FARS accident locations for one state and year."
    )
    ap.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    ap.add_argument("--state", required=True, type=coerce_int, help="FARS STATE code.")
    ap.add_argument("--year", required=True, type=coerce_int, help="Data year.")
    args = ap.parse_args(argv)
    run_map(load_config(Path(args.config)), args.state, args.year)


if __name__ == "__main__":
    main()
