"""
Names Module for the Ledger Engine.

Extracts person names from notes and aggregates transactions per name,
marking the most frequent one as canonical.
"""

from .name_extractor import NameExtractor, extract_name
from .name_aggregator import (
    NameAggregator,
    NameRecord,
    NamesResult,
    aggregate_names,
    select_canonical,
)

__all__ = [
    "NameExtractor",
    "extract_name",
    "NameAggregator",
    "NameRecord",
    "NamesResult",
    "aggregate_names",
    "select_canonical",
]
