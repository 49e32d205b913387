from __future__ import annotations

import os
from typing import Optional, Tuple

import geodatasets
import geopandas as gpd
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from ..utils.io import YearLike, coerce_int, fars_read, year_path

# FARS codes unknown positions with out-of-range values (e.g. 999.9999, 99.9999).
LONGITUDE_SENTINEL = 900.0
LATITUDE_SENTINEL = 90.0

NO_ACCIDENTS_MESSAGE = "no accidents to plot"

# geodatasets name drawn when no boundary file is given.
DEFAULT_BOUNDARIES = "naturalearth.land"


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """Return a copy with sentinel LONGITUD/LATITUDE values replaced by NaN."""
    df = df.copy()
    lon = pd.to_numeric(df["LONGITUD"], errors="coerce")
    lat = pd.to_numeric(df["LATITUDE"], errors="coerce")
    df["LONGITUD"] = lon.mask(lon > LONGITUDE_SENTINEL)
    df["LATITUDE"] = lat.mask(lat > LATITUDE_SENTINEL)
    return df


def _range(values: pd.Series) -> Tuple[float, float]:
    lo, hi = float(np.nanmin(values)), float(np.nanmax(values))
    if lo == hi:
        lo, hi = lo - 0.5, hi + 0.5
    return lo, hi


def _resolve_boundaries(boundaries: str | os.PathLike | None) -> str | os.PathLike:
    """A local vector file, or a geodatasets name resolved to its cached download."""
    if boundaries is None:
        boundaries = DEFAULT_BOUNDARIES
    if os.path.exists(boundaries):
        return boundaries
    return geodatasets.get_path(str(boundaries))


def _draw_base_map(ax: plt.Axes, boundaries: str | os.PathLike | None) -> None:
    outlines = gpd.read_file(_resolve_boundaries(boundaries))
    if outlines.crs is not None:
        outlines = outlines.to_crs("EPSG:4326")
    outlines.boundary.plot(ax=ax, color="black", linewidth=0.6, zorder=1)
    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")
    ax.grid(True, linewidth=0.3, alpha=0.5)


def fars_map_state(
    state_num,
    year: YearLike,
    data_dir: str | os.PathLike | None = None,
    ax: Optional[plt.Axes] = None,
    boundaries: str | os.PathLike | None = None,
    marker_size: float = 1.0,
) -> Optional[plt.Axes]:
    """Plot accident locations for one state and year.

    Raises ``FileNotFoundError`` if the year's file is missing and
    ``ValueError`` if ``state_num`` does not occur in its STATE column. Prints a
    message and returns None when there is nothing to draw; otherwise returns
    the Axes holding the map.
    """
    data = fars_read(year_path(year, data_dir))
    state_num = coerce_int(state_num)

    if state_num not in set(pd.to_numeric(data["STATE"], errors="coerce").dropna().astype(int)):
        raise ValueError(f"invalid STATE number: {state_num}")
    data_sub = _filter_state(data, state_num)
    if data_sub.empty:
        print(NO_ACCIDENTS_MESSAGE)
        return None

    data_sub = sanitize_coordinates(data_sub)
    lon, lat = data_sub["LONGITUD"], data_sub["LATITUDE"]
    known = lon.notna() & lat.notna()
    if not known.any():
        print(NO_ACCIDENTS_MESSAGE)
        return None

    if ax is None:
        _, ax = plt.subplots(figsize=(8, 6))
    _draw_base_map(ax, boundaries)
    ax.scatter(lon[known], lat[known], s=marker_size, marker=".", color="black", zorder=2)
    ax.set_xlim(*_range(lon))
    ax.set_ylim(*_range(lat))
    ax.set_title(f"FARS accidents: state {state_num}, {coerce_int(year)}")
    return ax


def _filter_state(data: pd.DataFrame, state_num: int) -> pd.DataFrame:
    state = pd.to_numeric(data["STATE"], errors="coerce")
    return data[state == state_num]


__all__ = [
    "LATITUDE_SENTINEL",
    "LONGITUDE_SENTINEL",
    "DEFAULT_BOUNDARIES",
    "NO_ACCIDENTS_MESSAGE",
    "fars_map_state",
    "sanitize_coordinates",
]
