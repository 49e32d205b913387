"""Multi-year ingestion of FARS accident files."""

from .years import InvalidYearWarning, fars_read_years

__all__ = ["InvalidYearWarning", "fars_read_years"]
