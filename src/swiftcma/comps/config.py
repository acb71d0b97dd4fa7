from __future__ import annotations
from typing import Dict, Sequence, Tuple

# Declaration order is the tie-break when a header matches several fields.
CANONICAL_FIELDS: Tuple[str, ...] = (
    'address',
    'list_price',
    'sold_price',
    'beds',
    'baths',
    'sqft',
    'dom',
    'status',
    'photo_url',
    'year_built',
    'lot_sqft',
    'distance_mi',
)

TEXT_FIELDS = frozenset({'address', 'status', 'photo_url'})
NUMERIC_FIELDS = frozenset(f for f in CANONICAL_FIELDS if f not in TEXT_FIELDS)

SYNONYMS: Dict[str, Sequence[str]] = {
    'address': ['property address', 'street address', 'address', 'addr'],
    'list_price': ['list price', 'listprice', 'asking price'],
    'sold_price': ['sold price', 'sale price', 'closed price', 'price sold'],
    'beds': ['bedrooms', 'beds', 'br'],
    'baths': ['bathrooms', 'baths', 'ba', 'bath'],
    'sqft': ['sqft', 'living area', 'square feet', 'square footage', 'above grade sqft'],
    'dom': ['dom', 'cdom', 'days on market', 'cumulative days on market'],
    'status': ['status', 'sale status', 'prop status'],
    'photo_url': ['photo url', 'primary photo', 'image url'],
    'year_built': ['year built', 'yr built', 'built'],
    'lot_sqft': ['lot sqft', 'lot size', 'lot area'],
    'distance_mi': ['distance', 'distance (mi)', 'mi'],
}

# Tried in order only when no synonym matched: (all of, none of, field).
# A rule with several "all of" groups matches when any group does.
FALLBACK_RULES: Sequence[Tuple[Sequence[Sequence[str]], Sequence[str], str]] = [
    ([['price']], ['list'], 'sold_price'),
    ([['list', 'price']], [], 'list_price'),
    ([['sqft'], ['square']], [], 'sqft'),
    ([['bed']], [], 'beds'),
    ([['bath']], [], 'baths'),
    ([['dom']], [], 'dom'),
    ([['status']], [], 'status'),
]

LIST_LOW_FACTOR = 0.95
LIST_HIGH_FACTOR = 1.08
