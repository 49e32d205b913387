"""Monthly summaries and state-level accident maps."""

from .mapping import (
    LATITUDE_SENTINEL,
    LONGITUDE_SENTINEL,
    fars_map_state,
    sanitize_coordinates,
)
from .summary import fars_summarize_years, plot_summary

__all__ = [
    "LATITUDE_SENTINEL",
    "LONGITUDE_SENTINEL",
    "fars_map_state",
    "fars_summarize_years",
    "plot_summary",
    "sanitize_coordinates",
]
