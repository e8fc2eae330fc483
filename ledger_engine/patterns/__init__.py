"""
Ledger Pattern Definitions.

Contains the keyword lists used to:
- Locate the debit, credit and notes columns
- Bucket transactions into deficit, service and advances
- Clean notes before extracting a person's name
"""

from .ledger_patterns import (
    COLUMN_PATTERNS,
    REQUIRED_COLUMNS,
    CATEGORY_PATTERNS,
    NAME_REMOVAL_WORDS,
    NAME_NOISE_PATTERN,
)

__all__ = [
    "COLUMN_PATTERNS",
    "REQUIRED_COLUMNS",
    "CATEGORY_PATTERNS",
    "NAME_REMOVAL_WORDS",
    "NAME_NOISE_PATTERN",
]
