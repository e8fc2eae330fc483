"""
Row parsing for ledger sheets.

Turns a raw grid (first row headers, remaining rows data) into an ordered
tuple of immutable Transaction records.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple

from ..config.analysis_config import ANALYSIS_CONFIG
from .column_resolver import ColumnResolver
from .errors import EmptyDataError, MissingColumnsError
from .number_normalizer import normalize_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transaction:
    """A single parsed ledger row."""
    debit: float
    credit: float
    notes: str


def _cell(row: Sequence[Any], index: int) -> Any:
    # Short rows read missing trailing cells as absent
    if index < len(row):
        return row[index]
    return None


def notes_text(value: Any) -> str:
    """
    Convert a notes cell to trimmed text.

    Falsy cells (None, '', 0, NaN) give the empty note.
    """
    if value is None:
        return ""
    if isinstance(value, float) and math.isnan(value):
        return ""
    if not value:
        return ""
    return str(value).strip()


class RowParser:
    """Parses a raw spreadsheet grid into transactions."""

    def __init__(self, resolver: Optional[ColumnResolver] = None):
        self.resolver = resolver or ColumnResolver()

    def parse(self, grid: Sequence[Optional[Sequence[Any]]]) -> Tuple[Transaction, ...]:
        """
        Parse the grid into transactions.

        Args:
            grid: Raw rows; the first row holds the headers

        Returns:
            Transactions in source row order

        Raises:
            EmptyDataError: If the grid has fewer than two rows
            MissingColumnsError: If debit, credit or notes cannot be located
        """
        if len(grid) < ANALYSIS_CONFIG["min_grid_rows"]:
            raise EmptyDataError(len(grid))

        indices = self.resolver.resolve(grid[0] or [])
        missing = self.resolver.missing(indices)
        if missing:
            raise MissingColumnsError(missing, self.resolver.describe(missing))

        debit_index = indices["debit"]
        credit_index = indices["credit"]
        notes_index = indices["notes"]

        transactions = []
        skipped = 0
        for row in grid[1:]:
            if not row:
                skipped += 1
                continue

            debit = normalize_number(_cell(row, debit_index))
            credit = normalize_number(_cell(row, credit_index))
            notes = notes_text(_cell(row, notes_index))

            if debit != 0 or credit != 0 or notes != "":
                transactions.append(Transaction(debit=debit, credit=credit, notes=notes))
            else:
                skipped += 1

        logger.info(
            "Parsed %d transactions from %d data rows (%d empty rows skipped)",
            len(transactions), len(grid) - 1, skipped
        )
        return tuple(transactions)


def parse_grid(grid: Sequence[Optional[Sequence[Any]]]) -> Tuple[Transaction, ...]:
    """Parse a raw grid with the default column aliases."""
    return RowParser().parse(grid)
