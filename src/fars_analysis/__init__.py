"""Monthly summaries and state maps for yearly FARS accident files."""

from .analysis import fars_map_state, fars_summarize_years, plot_summary, sanitize_coordinates
from .data import InvalidYearWarning, fars_read_years
from .utils import fars_read, make_filename

__version__ = "0.1.0"

__all__ = [
    "fars_map_state",
    "fars_read",
    "fars_read_years",
    "fars_summarize_years",
    "make_filename",
    "plot_summary",
    "sanitize_coordinates",
    "InvalidYearWarning",
]
