"""
Categorisation Module for the Ledger Engine.

Buckets transactions through:
- Preprocessing (note normalization)
- Keyword matching (deficit, service)
- Fallback to advances for everything else
"""

from .engine import (
    LedgerCategorizer,
    CategoryTotals,
    CategorySummary,
    categorize,
    DEFICIT,
    SERVICE,
    ADVANCES,
)
from .preprocess import normalize_notes, contains_any

__all__ = [
    # Main categorizer
    "LedgerCategorizer",
    "CategoryTotals",
    "CategorySummary",
    "categorize",
    "DEFICIT",
    "SERVICE",
    "ADVANCES",
    # Preprocessing utilities
    "normalize_notes",
    "contains_any",
]
