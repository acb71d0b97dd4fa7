from __future__ import annotations

import math
import numbers
import re
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

from swiftcma.errors import EmptyTableError, MappingError
from .config import NUMERIC_FIELDS
from .mapping import clean_mapping

# Leading decimal number, the way a spreadsheet cell like "1,800 sq ft" reads
_LEADING_NUMBER = re.compile(r'^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')


def to_number(v: Any) -> Optional[float]:
    """Coerce a raw cell to a number, or ``None`` when it has no usable value.

    Numbers pass through unchanged (NaN counts as missing). Strings lose ``$``
    and ``,`` before parsing. Never raises.
    """
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, numbers.Real):
        return None if math.isnan(v) else v
    s = str(v).replace('$', '').replace(',', '').strip()
    if not s:
        return None
    m = _LEADING_NUMBER.match(s)
    if not m:
        return None
    n = float(m.group(0))
    return n if math.isfinite(n) else None


def _apply(row: Mapping, cleaned: Dict[str, Optional[str]]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for hdr, key in cleaned.items():
        if not key:
            continue
        val = row.get(hdr)
        if key in NUMERIC_FIELDS:
            val = to_number(val)
        out[key] = val
    return out


def normalize_row(row: Mapping, mapping: Mapping) -> Dict[str, Any]:
    return _apply(row, clean_mapping(mapping))


def has_address(comp: Mapping) -> bool:
    addr = comp.get('address')
    if isinstance(addr, float) and math.isnan(addr):
        return False
    return bool(addr)


def normalize_rows(rows: Iterable[Mapping], mapping: Mapping) -> List[Dict[str, Any]]:
    """Normalize every row and keep only comps that carry an address.

    An empty table is a structural failure, not an empty result.
    """
    mapping = clean_mapping(mapping)
    rows = list(rows)
    if not rows:
        raise EmptyTableError("table contains no data rows")
    comps: List[Dict[str, Any]] = []
    for i, row in enumerate(rows, 1):
        if not isinstance(row, Mapping):
            raise MappingError(f"row {i} is not a header -> value mapping")
        comp = _apply(row, mapping)
        if has_address(comp):
            comps.append(comp)
    return comps
