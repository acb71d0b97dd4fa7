from __future__ import annotations
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Iterable, List, Optional

from .config import LIST_HIGH_FACTOR, LIST_LOW_FACTOR


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties away from zero (``2.5 -> 3``)."""
    return int(Decimal(x).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _truthy(v: Any) -> bool:
    # zero, None and NaN all count as missing
    if v is None:
        return False
    if isinstance(v, float) and math.isnan(v):
        return False
    return bool(v)


def _rounded_mean(series: List[float]) -> Optional[int]:
    if not series:
        return None
    return round_half_up(sum(series) / len(series))


def compute_stats(comps: Iterable[Dict[str, Any]]) -> Dict[str, Optional[int]]:
    """Market summary over normalized comps.

    Only comps with both a sold price and a living area feed the price
    figures; DOM is averaged over every comp. The list band is anchored on the
    lower-middle sold price (``sold_prices[n // 2]``), not an averaged median.
    """
    comps = list(comps)
    sold = [c for c in comps if _truthy(c.get('sold_price')) and _truthy(c.get('sqft'))]
    sold_prices = sorted(c['sold_price'] for c in sold)
    ppsf = [c['sold_price'] / (c['sqft'] or 1) for c in sold]
    ppsf = [p for p in ppsf if _truthy(p)]
    doms = [c.get('dom') for c in comps]
    doms = [d for d in doms if _truthy(d)]
    median = sold_prices[len(sold_prices) // 2] if sold_prices else None
    return {
        'avg_sold_price': _rounded_mean(sold_prices),
        'avg_price_per_sqft': _rounded_mean(ppsf),
        'avg_dom': _rounded_mean(doms),
        'suggested_list_low': round_half_up(median * LIST_LOW_FACTOR) if median else None,
        'suggested_list_high': round_half_up(median * LIST_HIGH_FACTOR) if median else None,
    }
