"""
Test suite for ledger row parsing.

Tests cover:
- Empty grid and missing column errors
- Row retention rule (non-zero amount or non-empty notes)
- Short, absent and empty rows
- Notes trimming and falsy notes cells
"""

import unittest

from ledger_engine.ingestion.errors import (
    EmptyDataError,
    LedgerDataError,
    MissingColumnsError,
)
from ledger_engine.ingestion.row_parser import RowParser, Transaction, notes_text, parse_grid


HEADERS = ["Debit", "Credit", "Notes"]


class TestGridErrors(unittest.TestCase):
    """Test fatal grid problems."""

    def test_empty_grid(self):
        """Test that an empty grid raises EmptyDataError."""
        with self.assertRaises(EmptyDataError):
            parse_grid([])

    def test_header_only(self):
        """Test that a header without data rows raises EmptyDataError."""
        with self.assertRaises(EmptyDataError) as ctx:
            parse_grid([HEADERS])
        self.assertEqual(ctx.exception.row_count, 1)

    def test_missing_columns(self):
        """Test that a missing notes column raises MissingColumnsError."""
        with self.assertRaises(MissingColumnsError) as ctx:
            parse_grid([["Debit", "Credit", "Date"], [1, 2, "2024-01-01"]])
        self.assertEqual(ctx.exception.missing, ["notes"])
        self.assertIn("notes", str(ctx.exception))

    def test_missing_columns_message_uses_labels(self):
        """Test that the error names the missing columns by label."""
        with self.assertRaises(MissingColumnsError) as ctx:
            parse_grid([["Amount", "Credit"], [1, 2]])
        self.assertEqual(ctx.exception.missing, ["debit", "notes"])
        self.assertEqual(ctx.exception.labels, ["Debit", "Notes"])
        self.assertIn("Required columns not found: Debit, Notes", str(ctx.exception))


    def test_errors_share_base_class(self):
        """Test that both errors are LedgerDataError and ValueError."""
        self.assertTrue(issubclass(EmptyDataError, LedgerDataError))
        self.assertTrue(issubclass(MissingColumnsError, ValueError))


class TestRowRetention(unittest.TestCase):
    """Test which rows become transactions."""

    def setUp(self):
        self.parser = RowParser()

    def test_fully_empty_row_dropped(self):
        """Test that debit=0, credit=0, notes='' is dropped."""
        result = self.parser.parse([HEADERS, [0, 0, ""]])
        self.assertEqual(result, ())

    def test_notes_only_row_kept(self):
        """Test that a row with notes 'x' is kept even with zero amounts."""
        result = self.parser.parse([HEADERS, [0, 0, "x"]])
        self.assertEqual(result, (Transaction(debit=0.0, credit=0.0, notes="x"),))

    def test_amount_only_row_kept(self):
        """Test that a row with only a credit amount is kept."""
        result = self.parser.parse([HEADERS, [None, "50", None]])
        self.assertEqual(result, (Transaction(debit=0.0, credit=50.0, notes=""),))

    def test_absent_and_empty_rows_skipped(self):
        """Test that None and [] rows are skipped."""
        result = self.parser.parse([HEADERS, None, [], [10, 0, "a note"]])
        self.assertEqual(len(result), 1)

    def test_short_row_reads_missing_cells_as_absent(self):
        """Test that trailing cells missing from a row count as blank."""
        result = self.parser.parse([HEADERS, [25]])
        self.assertEqual(result, (Transaction(debit=25.0, credit=0.0, notes=""),))

    def test_order_preserved(self):
        """Test that transactions keep source row order."""
        result = self.parser.parse([
            HEADERS,
            [1, 0, "first"],
            [0, 0, ""],
            [2, 0, "second"],
            [3, 0, "third"],
        ])
        self.assertEqual([t.notes for t in result], ["first", "second", "third"])

    def test_columns_in_any_order(self):
        """Test that values are read from the resolved columns."""
        grid = [["الملاحظات", "Date", "الدائن", "المدين"], ["  سلف احمد  ", "2024", "1,000", "250"]]
        result = self.parser.parse(grid)
        self.assertEqual(result, (Transaction(debit=250.0, credit=1000.0, notes="سلف احمد"),))

    def test_transactions_are_immutable(self):
        """Test that parsed transactions cannot be modified."""
        txn = self.parser.parse([HEADERS, [1, 0, "x"]])[0]
        with self.assertRaises(AttributeError):
            txn.debit = 5


class TestNotesText(unittest.TestCase):
    """Test notes cell conversion."""

    def test_falsy_cells(self):
        """Test that None, '', 0 and NaN produce empty notes."""
        for value in [None, "", 0, float("nan")]:
            self.assertEqual(notes_text(value), "")

    def test_trimmed(self):
        """Test that notes are trimmed."""
        self.assertEqual(notes_text("  hello \n"), "hello")

    def test_numbers_stringified(self):
        """Test that numeric notes are stringified."""
        self.assertEqual(notes_text(12), "12")


if __name__ == '__main__':
    unittest.main()
