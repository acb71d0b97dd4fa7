"""Comps pipeline.

Public API:
    suggest_mapping(headers)
    normalize_row(row, mapping) / normalize_rows(rows, mapping)
    compute_stats(comps)
    build_report(table, mapping=None, subject=None)
    export_comps(comps, ...)
"""
from .mapping import suggest_mapping, clean_mapping  # noqa: F401
from .normalize import normalize_row, normalize_rows, to_number  # noqa: F401
from .stats import compute_stats  # noqa: F401
from .report import build_report  # noqa: F401
from .export import export_comps  # noqa: F401

__all__ = [
    "suggest_mapping",
    "clean_mapping",
    "normalize_row",
    "normalize_rows",
    "to_number",
    "compute_stats",
    "build_report",
    "export_comps",
]
