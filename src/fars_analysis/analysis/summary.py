from __future__ import annotations

import os
from typing import Iterable, Optional, Union

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from ..data.years import fars_read_years
from ..utils.io import YearLike

MONTHS = list(range(1, 13))


def fars_summarize_years(
    years: Union[YearLike, Iterable[YearLike]],
    data_dir: str | os.PathLike | None = None,
) -> pd.DataFrame:
    """Count accidents per month for each year.

    Returns one row per month present in the data (``MONTH`` column) and one
    integer-labelled column per loaded year. Month/year pairs without records
    are NaN. Years that fail to load are skipped with a warning; if none load,
    the result is an empty frame with only the ``MONTH`` column.
    """
    frames = [df for df in fars_read_years(years, data_dir=data_dir) if df is not None]
    if not frames:
        return pd.DataFrame(columns=["MONTH"])

    combined = pd.concat(frames, ignore_index=True)
    counts = combined.groupby(["year", "MONTH"]).size().rename("n").reset_index()
    summary = counts.pivot(index="MONTH", columns="year", values="n")
    summary = summary.sort_index().sort_index(axis=1).reset_index()
    summary.columns.name = None
    return summary


def plot_summary(summary: pd.DataFrame, ax: Optional[plt.Axes] = None) -> plt.Axes:
    """Draw monthly accident counts as one line per year."""
    if ax is None:
        _, ax = plt.subplots(figsize=(9, 5))
    long_df = summary.melt(id_vars="MONTH", var_name="year", value_name="accidents").dropna()
    if not long_df.empty:
        long_df["year"] = long_df["year"].astype(str)
        sns.lineplot(data=long_df, x="MONTH", y="accidents", hue="year", marker="o", ax=ax)
    ax.set_xticks(MONTHS)
    ax.set_xlabel("Month")
    ax.set_ylabel("Accidents")
    ax.set_title("FARS accidents by month")
    return ax


__all__ = ["fars_summarize_years", "plot_summary", "MONTHS"]
