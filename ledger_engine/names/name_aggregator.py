"""
Per-name aggregation of ledger transactions.

Groups transactions by the name extracted from their notes and picks the
most frequent name as canonical. Every other name is a variant (usually a
misspelling or partial form of the same person).
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from ..ingestion.row_parser import Transaction
from .name_extractor import NameExtractor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NameRecord:
    """Totals for every transaction carrying one extracted name."""
    name: str
    debit: float
    credit: float
    net: float
    count: int

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "debit": self.debit,
            "credit": self.credit,
            "net": self.net,
            "count": self.count,
        }


@dataclass(frozen=True)
class NamesResult:
    """Canonical name, its variants and the per-name records."""
    canonical_name: str = ""
    variant_names: Tuple[str, ...] = ()
    name_records: Dict[str, NameRecord] = field(default_factory=dict)

    @property
    def has_names(self) -> bool:
        return bool(self.canonical_name or self.variant_names)

    @property
    def name_frequency(self) -> Dict[str, int]:
        """Occurrences per name, in first-seen order."""
        return {name: record.count for name, record in self.name_records.items()}

    def ordered_records(self) -> List[Tuple[NameRecord, bool]]:
        """Records as (record, is_canonical), canonical first then variants."""
        ordered = []
        if self.canonical_name in self.name_records:
            ordered.append((self.name_records[self.canonical_name], True))
        for name in self.variant_names:
            ordered.append((self.name_records[name], False))
        return ordered


def select_canonical(frequencies: Dict[str, int]) -> str:
    """
    Pick the most frequent name.

    Scans in insertion order; only a strictly higher count replaces the
    current pick, so the first name to reach the maximum keeps it.
    """
    canonical = ""
    max_frequency = 0
    for name, frequency in frequencies.items():
        if frequency > max_frequency:
            max_frequency = frequency
            canonical = name
    return canonical


class NameAggregator:
    """Aggregates transactions by extracted name."""

    def __init__(self, extractor: Optional[NameExtractor] = None):
        self.extractor = extractor or NameExtractor()

    def aggregate(self, transactions: Iterable[Transaction]) -> NamesResult:
        """
        Build per-name totals and select the canonical name.

        Transactions whose notes yield no name are left out.
        """
        frequencies: Dict[str, int] = {}
        sums: Dict[str, List[float]] = {}

        for txn in transactions:
            name = self.extractor.extract(txn.notes)
            if not name:
                continue
            frequencies[name] = frequencies.get(name, 0) + 1
            if name not in sums:
                sums[name] = [0.0, 0.0]
            sums[name][0] += txn.debit
            sums[name][1] += txn.credit

        records = {
            name: NameRecord(
                name=name,
                debit=debit,
                credit=credit,
                net=debit - credit,
                count=frequencies[name],
            )
            for name, (debit, credit) in sums.items()
        }

        canonical = select_canonical(frequencies)
        variants = tuple(name for name in records if name != canonical)

        logger.debug(
            "Found %d distinct names; canonical=%r (%d occurrences)",
            len(records), canonical, frequencies.get(canonical, 0)
        )
        return NamesResult(
            canonical_name=canonical,
            variant_names=variants,
            name_records=records,
        )


def aggregate_names(transactions: Iterable[Transaction]) -> NamesResult:
    """Aggregate names with the default extractor."""
    return NameAggregator().aggregate(transactions)
