"""
Ledger Engine - Debit/Credit Ledger Summaries.

Reads a ledger spreadsheet (debit, credit, notes) and produces category
totals plus a per-person breakdown derived from the notes.

Main Components:
    - patterns: Column aliases and category keywords
    - config: Analysis and dashboard configuration
    - ingestion: Spreadsheet loading, column discovery and row parsing
    - categorisation: Deficit / service / advances totals
    - names: Name extraction and canonical-name aggregation
"""

from .analyzer import (
    AnalysisResult,
    LedgerAnalyzer,
    analyze_grid,
    analyze_file,
)

from .ingestion import (
    Transaction,
    RowParser,
    ColumnResolver,
    normalize_number,
    parse_grid,
    load_grid,
    LedgerDataError,
    EmptyDataError,
    MissingColumnsError,
    UnsupportedFileTypeError,
    SpreadsheetReadError,
)

from .categorisation import (
    LedgerCategorizer,
    CategoryTotals,
    CategorySummary,
)

from .names import (
    NameExtractor,
    NameAggregator,
    NameRecord,
    NamesResult,
    extract_name,
)

from .config import (
    ANALYSIS_CONFIG,
    DASHBOARD_CONFIG,
)

from .patterns import (
    COLUMN_PATTERNS,
    CATEGORY_PATTERNS,
    NAME_REMOVAL_WORDS,
)


__version__ = "1.0.0"
__all__ = [
    # Pipeline
    "AnalysisResult",
    "LedgerAnalyzer",
    "analyze_grid",
    "analyze_file",
    # Ingestion
    "Transaction",
    "RowParser",
    "ColumnResolver",
    "normalize_number",
    "parse_grid",
    "load_grid",
    "LedgerDataError",
    "EmptyDataError",
    "MissingColumnsError",
    "UnsupportedFileTypeError",
    "SpreadsheetReadError",
    # Categorisation
    "LedgerCategorizer",
    "CategoryTotals",
    "CategorySummary",
    # Names
    "NameExtractor",
    "NameAggregator",
    "NameRecord",
    "NamesResult",
    "extract_name",
    # Configuration
    "ANALYSIS_CONFIG",
    "DASHBOARD_CONFIG",
    "COLUMN_PATTERNS",
    "CATEGORY_PATTERNS",
    "NAME_REMOVAL_WORDS",
]
