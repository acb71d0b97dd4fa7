from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Optional

from swiftcma.errors import MappingError
from .config import CANONICAL_FIELDS, FALLBACK_RULES, SYNONYMS

_NON_ALNUM = re.compile(r'[^a-z0-9]+')


def normalize_header(value: Any) -> str:
    """Lowercase and drop everything but ``a-z``/``0-9``.

    ``"Sold Price"``, ``"sold_price"`` and ``"SOLD-PRICE "`` all become
    ``"soldprice"``.
    """
    if value is None:
        return ''
    return _NON_ALNUM.sub('', str(value).strip().lower())


_NORMALIZED_SYNONYMS = [
    (field, [normalize_header(s) for s in SYNONYMS[field]]) for field in CANONICAL_FIELDS
]


def _fallback(nh: str) -> Optional[str]:
    for any_of, none_of, field in FALLBACK_RULES:
        if any(n in nh for n in none_of):
            continue
        if any(all(k in nh for k in group) for group in any_of):
            return field
    return None


def match_header(header: Any) -> Optional[str]:
    nh = normalize_header(header)
    if not nh:
        return None
    for field, phrases in _NORMALIZED_SYNONYMS:
        if any(p and p in nh for p in phrases):
            return field
    return _fallback(nh)


def suggest_mapping(headers: Iterable[Any]) -> Dict[str, Optional[str]]:
    """Map each raw header to a canonical field name (or ``None``).

    Keys keep the header exactly as it appeared in the table. Two headers may
    map to the same field; nothing is deduplicated here.
    """
    if headers is None or isinstance(headers, (str, bytes)):
        raise MappingError(f"headers must be a sequence of strings, got {type(headers).__name__}")
    return {h: match_header(h) for h in headers}


def clean_mapping(mapping: Any) -> Dict[str, Optional[str]]:
    """Accept an externally edited mapping, demoting unknown field names to ``None``.

    Raises :class:`MappingError` only when ``mapping`` is not a mapping at all.
    """
    if not isinstance(mapping, Mapping):
        raise MappingError(
            f"mapping must be a header -> field mapping, got {type(mapping).__name__}",
            hint="Map at least address and a price field (Sold or List).",
        )
    out: Dict[str, Optional[str]] = {}
    for header, field in mapping.items():
        out[header] = field if isinstance(field, str) and field in SYNONYMS else None
    return out
