#!/usr/bin/env python3
"""
run_pipeline.py
~~~~~~~~~~~~~~~
Runs the stages in order:

01_summarize  → monthly table + line plot for ``summary.years``
02_map_state  → state map, only when ``--state`` is given
"""

from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from fars_analysis.config import data_dir, load_config

SCRIPTS = Path(__file__).resolve().parent


def _run(step: Sequence[str]) -> None:
    print(f"\nRunning: {' '.join(step)}")
    subprocess.run(step, check=True)


def _ensure_data_dir(config_path: str) -> Path:
    directory = data_dir(load_config(config_path))
    if not directory.is_dir():
        raise FileNotFoundError(
            f"Expected FARS files under '{directory}'. Place accident_<year>.csv.bz2 there and rerun."
        )
    return directory


def build_steps(config_path: str, state: int | None, map_year: int | None) -> Iterable[list[str]]:
    exe = [sys.executable]
    steps = [exe + [str(SCRIPTS / "01_summarize.py"), "--config", config_path]]
    if state is not None and map_year is not None:
        steps.append(
            exe
            + [
                str(SCRIPTS / "02_map_state.py"),
                "--config",
                config_path,
                "--state",
                str(state),
                "--year",
                str(map_year),
            ]
        )
    return steps


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run the FARS summary and map stages.")
    parser.add_argument("--config", default="config.yaml", help="Path to config file.")
    parser.add_argument("--state", type=int, default=None, help="STATE code to map; omit to skip the map.")
    parser.add_argument("--map-year", type=int, default=None, help="Year for the state map.")
    args = parser.parse_args(argv)
    if args.state is not None and args.map_year is None:
        parser.error("--map-year is required with --state")

    _ensure_data_dir(args.config)
    for step in build_steps(args.config, args.state, args.map_year):
        _run(step)

    print("\nPipeline complete. See outputs/ for artefacts.")


if __name__ == "__main__":
    main()
