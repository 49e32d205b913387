"""Utility helpers for FARS file naming, reading, and artefact directories."""

from .io import coerce_int, ensure_dirs, fars_read, make_filename, save_figure, year_path

__all__ = ["coerce_int", "ensure_dirs", "fars_read", "make_filename", "save_figure", "year_path"]
