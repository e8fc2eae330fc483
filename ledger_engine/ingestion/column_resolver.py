"""
Column discovery for ledger sheets.

Maps the header row onto the debit, credit and notes columns by alias
substring matching. Aliases are tried in priority order; for each alias the
headers are scanned left to right and the first containing header wins.
"""

import logging
import math
from typing import Any, Dict, List, Optional, Sequence

from ..patterns.ledger_patterns import COLUMN_PATTERNS, REQUIRED_COLUMNS

logger = logging.getLogger(__name__)


def header_text(cell: Any) -> str:
    """Stringify and trim a header cell; absent cells become ''."""
    if cell is None:
        return ""
    if isinstance(cell, float) and math.isnan(cell):
        return ""
    return str(cell).strip()


def find_column_index(headers: Sequence[str], aliases: Sequence[str]) -> Optional[int]:
    """
    Find the first header containing one of the aliases.

    Args:
        headers: Header row, already stringified
        aliases: Alias terms in priority order

    Returns:
        Column index, or None if no header contains any alias

    Example:
        >>> find_column_index(["Date", "Debit Amount", "Notes"], ["مدين", "debit"])
        1
    """
    lowered = [h.lower() for h in headers]
    for alias in aliases:
        term = alias.lower()
        for index, header in enumerate(lowered):
            if term in header:
                return index
    return None


class ColumnResolver:
    """Resolves semantic ledger columns from a header row."""

    def __init__(self, column_patterns: Optional[Dict[str, Dict]] = None):
        self.column_patterns = column_patterns or COLUMN_PATTERNS

    def resolve(self, header_row: Sequence[Any]) -> Dict[str, Optional[int]]:
        """
        Resolve every configured column.

        Returns:
            Mapping of column key to index (None when unresolved)
        """
        headers = [header_text(cell) for cell in header_row]
        indices = {
            key: find_column_index(headers, pattern["aliases"])
            for key, pattern in self.column_patterns.items()
        }
        logger.debug("Resolved column indices %s from headers %s", indices, headers)
        return indices

    def missing(self, indices: Dict[str, Optional[int]]) -> List[str]:
        """Required column keys left unresolved, in resolution order."""
        return [key for key in REQUIRED_COLUMNS if indices.get(key) is None]

    def describe(self, keys: Sequence[str]) -> List[str]:
        """Display labels for column keys; unknown keys are returned as-is."""
        return [self.column_patterns.get(key, {}).get("description", key) for key in keys]
