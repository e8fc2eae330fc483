"""
Errors raised while turning a raw spreadsheet grid into transactions.
"""

from typing import List, Optional


class LedgerDataError(ValueError):
    """Base class for ledger input problems reported back to the caller."""
    pass


class EmptyDataError(LedgerDataError):
    """Raised when the grid has no data rows below the header row."""

    def __init__(self, row_count: int = 0):
        self.row_count = row_count
        super().__init__(
            "الملف يجب أن يحتوي على بيانات / "
            f"The file must contain a header row and at least one data row (got {row_count} rows)"
        )


class MissingColumnsError(LedgerDataError):
    """Raised when one or more required columns cannot be found in the header row."""

    def __init__(self, missing: List[str], labels: Optional[List[str]] = None):
        self.missing = list(missing)
        self.labels = list(labels) if labels else list(self.missing)
        super().__init__(
            "لم يتم العثور على الأعمدة المطلوبة (المدين، الدائن، الملاحظات) / "
            f"Required columns not found: {', '.join(self.labels)} "
            f"(missing: {', '.join(self.missing)})"
        )


class UnsupportedFileTypeError(LedgerDataError):
    """Raised when a spreadsheet file has an extension the loader cannot read."""
    pass


class SpreadsheetReadError(LedgerDataError):
    """Raised when a spreadsheet file is corrupt or not in the format its extension claims."""
    pass
