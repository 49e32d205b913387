from __future__ import annotations

import os
import warnings
from collections.abc import Iterable
from typing import List, Optional, Union

import pandas as pd

from ..utils.io import YearLike, coerce_int, fars_read, year_path

REDUCED_COLUMNS = ["MONTH", "year"]


class InvalidYearWarning(UserWarning):
    """A year in a batch could not be loaded and was left out."""


def _as_year_list(years: Union[YearLike, Iterable[YearLike]]) -> List[YearLike]:
    if isinstance(years, (str, bytes)) or not isinstance(years, Iterable):
        return [years]
    return list(years)


def _read_reduced(year: YearLike, data_dir: str | os.PathLike | None) -> pd.DataFrame:
    year_int = coerce_int(year)
    df = fars_read(year_path(year_int, data_dir))
    df = df.assign(year=year_int)
    return df[REDUCED_COLUMNS]


def fars_read_years(
    years: Union[YearLike, Iterable[YearLike]],
    data_dir: str | os.PathLike | None = None,
) -> List[Optional[pd.DataFrame]]:
    """Load each year's MONTH column tagged with its year.

    Years that cannot be coerced or loaded produce an ``InvalidYearWarning``
    and a ``None`` slot; the remaining years are still returned in input order.
    """
    out: List[Optional[pd.DataFrame]] = []
    for year in _as_year_list(years):
        try:
            out.append(_read_reduced(year, data_dir))
        except Exception:
            warnings.warn(f"invalid year: {year}", InvalidYearWarning, stacklevel=2)
            out.append(None)
    return out


__all__ = ["InvalidYearWarning", "fars_read_years", "REDUCED_COLUMNS"]
