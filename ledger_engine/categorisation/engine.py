"""
Ledger Categorizer.
Buckets transactions into deficit, service and advances by note keywords and
totals their debit, credit and net amounts.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ..ingestion.row_parser import Transaction
from ..patterns.ledger_patterns import CATEGORY_PATTERNS
from .preprocess import contains_any, normalize_notes

logger = logging.getLogger(__name__)

DEFICIT = "deficit"
SERVICE = "service"
ADVANCES = "advances"


@dataclass(frozen=True)
class CategoryTotals:
    """Debit, credit and net totals for one bucket."""
    debit: float = 0.0
    credit: float = 0.0
    net: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {"debit": self.debit, "credit": self.credit, "net": self.net}


@dataclass(frozen=True)
class CategorySummary:
    """Totals for the three ledger buckets."""
    deficit: CategoryTotals
    service: CategoryTotals
    advances: CategoryTotals

    @property
    def grand_total(self) -> float:
        """Sum of the three bucket nets."""
        return self.deficit.net + self.service.net + self.advances.net

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {
            DEFICIT: self.deficit.to_dict(),
            SERVICE: self.service.to_dict(),
            ADVANCES: self.advances.to_dict(),
        }


class LedgerCategorizer:
    """Categorizes ledger transactions by keywords found in their notes."""

    def __init__(self, category_patterns: Optional[Dict[str, Dict]] = None):
        """Initialize the categorizer with the category keyword dictionary.

        Args:
            category_patterns: Overrides the default keyword lists
        """
        patterns = category_patterns or CATEGORY_PATTERNS
        self.deficit_keywords = patterns[DEFICIT]["keywords"]
        self.service_keywords = patterns[SERVICE]["keywords"]

    def categorize_notes(self, notes: str) -> List[str]:
        """
        Return the buckets a note falls into.

        Deficit and service are checked independently, so a note carrying
        both keywords lands in both. Advances takes everything else.
        """
        text = normalize_notes(notes)
        is_deficit = contains_any(text, self.deficit_keywords)
        is_service = contains_any(text, self.service_keywords)

        buckets = []
        if is_deficit:
            buckets.append(DEFICIT)
        if is_service:
            buckets.append(SERVICE)
        if not is_deficit and not is_service:
            buckets.append(ADVANCES)
        return buckets

    def categorize_transactions(self, transactions: Iterable[Transaction]) -> CategorySummary:
        """
        Total every transaction into its buckets.

        Args:
            transactions: Parsed ledger transactions

        Returns:
            CategorySummary with net = debit - credit per bucket
        """
        sums = {
            DEFICIT: [0.0, 0.0],
            SERVICE: [0.0, 0.0],
            ADVANCES: [0.0, 0.0],
        }
        double_counted = 0

        for txn in transactions:
            buckets = self.categorize_notes(txn.notes)
            if len(buckets) > 1:
                double_counted += 1
            for bucket in buckets:
                sums[bucket][0] += txn.debit
                sums[bucket][1] += txn.credit

        if double_counted:
            logger.debug(
                "%d transactions matched both deficit and service keywords", double_counted
            )

        totals = {
            bucket: CategoryTotals(debit=debit, credit=credit, net=debit - credit)
            for bucket, (debit, credit) in sums.items()
        }
        summary = CategorySummary(
            deficit=totals[DEFICIT],
            service=totals[SERVICE],
            advances=totals[ADVANCES],
        )
        logger.debug("Category totals: %s", summary.to_dict())
        return summary


def categorize(transactions: Iterable[Transaction]) -> CategorySummary:
    """Categorize transactions with the default keyword lists."""
    return LedgerCategorizer().categorize_transactions(transactions)
