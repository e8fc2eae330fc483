"""
Ingestion Module for the Ledger Engine.

Turns an uploaded spreadsheet into typed transactions:
- Spreadsheet decoding (first sheet to raw grid)
- Column discovery (debit, credit, notes)
- Numeric normalization of amount cells
- Row parsing into Transaction records
"""

from .errors import (
    LedgerDataError,
    EmptyDataError,
    MissingColumnsError,
    UnsupportedFileTypeError,
    SpreadsheetReadError,
)
from .number_normalizer import normalize_number
from .column_resolver import ColumnResolver, find_column_index, header_text
from .row_parser import RowParser, Transaction, parse_grid, notes_text
from .spreadsheet_loader import load_grid, dataframe_to_grid

__all__ = [
    # Errors
    "LedgerDataError",
    "EmptyDataError",
    "MissingColumnsError",
    "UnsupportedFileTypeError",
    "SpreadsheetReadError",
    # Parsing
    "normalize_number",
    "ColumnResolver",
    "find_column_index",
    "header_text",
    "RowParser",
    "Transaction",
    "parse_grid",
    "notes_text",
    # Loading
    "load_grid",
    "dataframe_to_grid",
]
