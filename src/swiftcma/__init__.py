"""swiftcma package root.

Turns an MLS comparable-sales export into canonical comp records, market
statistics and a report payload. See :mod:`swiftcma.comps` for the pipeline
and :mod:`swiftcma.ingest` for reading CSV/XLSX files.
"""

__all__ = ["read_table", "build_report"]


def read_table(*args, **kwargs):  # type: ignore[no-untyped-def]
	# Local import so importing the package root stays cheap
	from .ingest import read_table as _read_table  # noqa: WPS433
	return _read_table(*args, **kwargs)


def build_report(*args, **kwargs):  # type: ignore[no-untyped-def]
	from .comps.report import build_report as _build_report  # noqa: WPS433
	return _build_report(*args, **kwargs)
