"""
Ledger analysis pipeline.

raw grid -> RowParser -> transactions -> {LedgerCategorizer, NameAggregator}
-> AnalysisResult. Everything here is a pure function of its input; a fresh
result is built on every call.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO, Dict, Optional, Sequence, Tuple, Union

from .categorisation.engine import CategorySummary, CategoryTotals, LedgerCategorizer
from .ingestion.row_parser import RowParser, Transaction
from .ingestion.spreadsheet_loader import load_grid
from .names.name_aggregator import NameAggregator, NamesResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """Category totals and per-name aggregation for one ledger sheet."""
    categories: CategorySummary
    names: NamesResult
    transactions: Tuple[Transaction, ...] = ()

    @property
    def deficit(self) -> CategoryTotals:
        return self.categories.deficit

    @property
    def service(self) -> CategoryTotals:
        return self.categories.service

    @property
    def advances(self) -> CategoryTotals:
        return self.categories.advances

    @property
    def grand_total(self) -> float:
        return self.categories.grand_total

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form, names listed canonical first."""
        return {
            "categories": self.categories.to_dict(),
            "grand_total": self.grand_total,
            "transaction_count": len(self.transactions),
            "canonical_name": self.names.canonical_name,
            "variant_names": list(self.names.variant_names),
            "names": [
                dict(record.to_dict(), is_canonical=is_canonical)
                for record, is_canonical in self.names.ordered_records()
            ],
        }


class LedgerAnalyzer:
    """Runs the full ledger pipeline."""

    def __init__(
        self,
        parser: Optional[RowParser] = None,
        categorizer: Optional[LedgerCategorizer] = None,
        aggregator: Optional[NameAggregator] = None
    ):
        self.parser = parser or RowParser()
        self.categorizer = categorizer or LedgerCategorizer()
        self.aggregator = aggregator or NameAggregator()

    def analyze_transactions(self, transactions: Sequence[Transaction]) -> AnalysisResult:
        transactions = tuple(transactions)
        return AnalysisResult(
            categories=self.categorizer.categorize_transactions(transactions),
            names=self.aggregator.aggregate(transactions),
            transactions=transactions,
        )

    def analyze_grid(self, grid: Sequence[Optional[Sequence[Any]]]) -> AnalysisResult:
        """
        Analyze a raw grid.

        Raises:
            EmptyDataError: If the grid has no data rows
            MissingColumnsError: If a required column is missing
        """
        result = self.analyze_transactions(self.parser.parse(grid))
        logger.info(
            "Analyzed %d transactions: grand total %.2f, canonical name %r",
            len(result.transactions), result.grand_total, result.names.canonical_name
        )
        return result

    def analyze_file(
        self,
        source: Union[str, Path, BinaryIO],
        filename: Optional[str] = None
    ) -> AnalysisResult:
        """
        Load the first sheet of a spreadsheet file and analyze it.

        Raises:
            UnsupportedFileTypeError: If the extension is not xlsx or csv
            SpreadsheetReadError: If the file cannot be decoded
        """
        return self.analyze_grid(load_grid(source, filename=filename))


def analyze_grid(grid: Sequence[Optional[Sequence[Any]]]) -> AnalysisResult:
    """Analyze a raw grid with default settings."""
    return LedgerAnalyzer().analyze_grid(grid)


def analyze_file(
    source: Union[str, Path, BinaryIO],
    filename: Optional[str] = None
) -> AnalysisResult:
    """Analyze a spreadsheet file with default settings."""
    return LedgerAnalyzer().analyze_file(source, filename=filename)
