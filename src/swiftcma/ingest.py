"""Read an uploaded MLS export (CSV, XLSX or legacy XLS) into headers + row dicts.

Every cell comes back as a string (or is absent when a CSV row is short);
typing happens later in :mod:`swiftcma.comps.normalize`.
"""
from __future__ import annotations

import csv
import io
import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import chardet
import pandas as pd

from swiftcma.config.settings import get_settings
from swiftcma.errors import EmptyTableError, SwiftCMAError, TableParseError, TableTooLargeError
from swiftcma.logging_config import get_logger

logger = get_logger(__name__)

PREVIEW_CHARS = 500
DELIMITERS = (',', ';')
# OLE2 (legacy .xls) and zip (.xlsx) containers; never parsed as CSV text
BINARY_SIGNATURES = (b'\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1', b'PK\x03\x04')


@dataclass(frozen=True)
class Table:
    headers: List[str]
    rows: List[Dict[str, Any]] = field(default_factory=list)


def decode_bytes(data: bytes) -> str:
    try:
        return data.decode('utf-8-sig')
    except UnicodeDecodeError:
        guess = chardet.detect(data)
        encoding = guess.get('encoding') or 'latin-1'
        logger.info("Input is not UTF-8; decoding as %s (confidence %.2f)", encoding, guess.get('confidence') or 0.0)
        return data.decode(encoding, errors='replace')


def _parse_with(text: str, delimiter: str) -> Table:
    reader = csv.reader(io.StringIO(text), delimiter=delimiter)
    headers: Optional[List[str]] = None
    rows: List[Dict[str, Any]] = []
    for cells in reader:
        if not any(c.strip() for c in cells):
            continue
        if headers is None:
            headers = cells
            continue
        rows.append({h: v for h, v in zip(headers, cells)})
    return Table(headers=headers or [], rows=rows)


def parse_csv_text(text: str) -> Table:
    """Parse CSV text, trying comma first and then semicolon."""
    if text.startswith('\ufeff'):
        text = text[1:]
    first_line = text.split('\n', 1)[0]
    table: Optional[Table] = None
    for delimiter in DELIMITERS:
        try:
            candidate = _parse_with(text, delimiter)
        except csv.Error as e:
            logger.debug("CSV parse with %r failed: %s", delimiter, e)
            continue
        single_column = len(candidate.headers) < 2 and ';' in first_line
        if candidate.rows and not (delimiter == ',' and single_column):
            return _check(candidate)
        table = table or candidate
    if table is None:
        raise TableParseError(f"CSV parse failed. Preview: {text[:PREVIEW_CHARS]}", preview=text[:PREVIEW_CHARS])
    return _check(table)


def _read_excel(data: bytes, engine: str | None = None) -> Table:
    df = pd.read_excel(io.BytesIO(data), sheet_name=0, engine=engine, dtype=str, keep_default_na=False)
    headers = [str(c) for c in df.columns]
    df.columns = headers
    return Table(headers=headers, rows=df.to_dict(orient='records'))


def _check(table: Table) -> Table:
    if not table.headers:
        raise EmptyTableError("CSV has no headers", hint="First row must be a header row.")
    if not table.rows:
        raise EmptyTableError(
            "CSV contained no data rows",
            hint="Export as CSV (comma-delimited) and ensure header row is present.",
        )
    max_rows = get_settings().MAX_ROWS
    if max_rows is not None and len(table.rows) > max_rows:
        raise TableTooLargeError(f"table has {len(table.rows)} rows; limit is {max_rows}")
    return table


def read_table_bytes(data: bytes, original_name: str | None = None) -> Table:
    lower = (original_name or '').lower()
    if lower.endswith(('.xlsx', '.xls')):
        try:
            engine = 'xlrd' if data.startswith(BINARY_SIGNATURES[0]) else 'openpyxl'
            return _check(_read_excel(data, engine))
        except SwiftCMAError:
            raise
        except Exception as e:
            if data.startswith(BINARY_SIGNATURES):
                raise TableParseError(
                    f"Could not read spreadsheet {original_name}: {e}",
                    preview=repr(data[:64]),
                ) from e
            # not a real workbook; try as text CSV
            logger.warning("Spreadsheet parse failed, trying as text CSV: %s", e)
    return parse_csv_text(decode_bytes(data))


def read_table(path: str | os.PathLike, original_name: str | None = None) -> Table:
    """Read a CSV/XLSX file; ``original_name`` overrides the name used to pick the format."""
    with open(path, 'rb') as f:
        data = f.read()
    table = read_table_bytes(data, original_name or os.fspath(path))
    logger.info("Read %d rows x %d columns from %s", len(table.rows), len(table.headers), original_name or path)
    return table
