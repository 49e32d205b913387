from __future__ import annotations

import os
import warnings
from numbers import Real
from pathlib import Path
from typing import Union

import matplotlib.pyplot as plt
import pandas as pd

FILENAME_TEMPLATE = "accident_{year}.csv.bz2"

YearLike = Union[int, float, str]


def ensure_dirs(*dirs: Path) -> None:
    for d in dirs:
        d.mkdir(parents=True, exist_ok=True)


def save_figure(path: Path, fig=None) -> Path:
    """Write ``fig`` (or the current figure) to ``path`` and close it."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig = fig if fig is not None else plt.gcf()
    fig.savefig(path, bbox_inches="tight")
    plt.close(fig)
    return path


def coerce_int(value: YearLike) -> int:
    """Parse a year or state code into an int.

    Accepts ints, real numbers and numeric strings ("2013", " 2014 ", "2015.0").
    Fractional values are truncated toward zero. Raises ``TypeError`` for
    booleans/None/other objects and ``ValueError`` for non-numeric text, NaN
    or infinity.
    """
    if isinstance(value, bool) or value is None:
        raise TypeError(f"Cannot interpret {value!r} as an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            value = float(text)
    if isinstance(value, Real):
        try:
            return int(value)
        except OverflowError as exc:
            raise ValueError(f"Cannot interpret {value!r} as an integer") from exc
    raise TypeError(f"Cannot interpret {value!r} as an integer")


def make_filename(year: YearLike) -> str:
    """Name of the FARS file for ``year``. Does not check that it exists."""
    return FILENAME_TEMPLATE.format(year=coerce_int(year))


def year_path(year: YearLike, data_dir: str | os.PathLike | None = None) -> Path:
    filename = make_filename(year)
    if data_dir is None:
        return Path(filename)
    return Path(data_dir) / filename


def fars_read(filename: str | os.PathLike) -> pd.DataFrame:
    """Read one yearly FARS file into a DataFrame with every column as parsed."""
    if not Path(filename).exists():
        raise FileNotFoundError(f"file '{filename}' does not exist")
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", category=pd.errors.DtypeWarning)
        warnings.simplefilter("ignore", category=pd.errors.ParserWarning)
        df = pd.read_csv(filename, low_memory=False)
    return df


__all__ = [
    "FILENAME_TEMPLATE",
    "coerce_int",
    "ensure_dirs",
    "fars_read",
    "make_filename",
    "save_figure",
    "year_path",
]
