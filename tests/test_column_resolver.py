"""
Test suite for ledger column discovery.

Tests cover:
- English and Arabic header aliases
- Substring matching and alias priority
- Unresolved columns
"""

import unittest

from ledger_engine.ingestion.column_resolver import (
    ColumnResolver,
    find_column_index,
    header_text,
)


class TestFindColumnIndex(unittest.TestCase):
    """Test alias matching against a header row."""

    def test_substring_match(self):
        """Test that aliases match anywhere inside a header."""
        headers = ["Date", "Total Debit (SAR)", "Notes"]
        self.assertEqual(find_column_index(headers, ["debit"]), 1)

    def test_case_insensitive(self):
        """Test that matching ignores case."""
        self.assertEqual(find_column_index(["DEBIT"], ["debit"]), 0)

    def test_alias_priority_beats_column_order(self):
        """Test that an earlier alias wins even if a later alias matches an earlier column."""
        headers = ["Description", "Notes"]
        self.assertEqual(find_column_index(headers, ["notes", "description"]), 1)

    def test_first_matching_header_wins(self):
        """Test that the leftmost header containing the alias is chosen."""
        headers = ["Debit", "Debit 2"]
        self.assertEqual(find_column_index(headers, ["debit"]), 0)

    def test_not_found(self):
        """Test that no match returns None."""
        self.assertIsNone(find_column_index(["Date", "Amount"], ["debit"]))


class TestColumnResolver(unittest.TestCase):
    """Test resolution of the three required columns."""

    def setUp(self):
        self.resolver = ColumnResolver()

    def test_english_headers(self):
        """Test that Debit/Credit/Notes resolve to 0/1/2."""
        indices = self.resolver.resolve(["Debit", "Credit", "Notes"])
        self.assertEqual(indices, {"debit": 0, "credit": 1, "notes": 2})
        self.assertEqual(self.resolver.missing(indices), [])

    def test_arabic_headers(self):
        """Test that Arabic headers resolve to 0/1/2."""
        indices = self.resolver.resolve(["المدين", "الدائن", "الملاحظات"])
        self.assertEqual(indices, {"debit": 0, "credit": 1, "notes": 2})

    def test_arabic_short_forms(self):
        """Test that headers without the definite article still resolve."""
        indices = self.resolver.resolve(["ملاحظات", "دائن", "مدين"])
        self.assertEqual(indices, {"debit": 2, "credit": 1, "notes": 0})

    def test_description_alias_for_notes(self):
        """Test that 'Description' is accepted for notes."""
        indices = self.resolver.resolve(["Debit", "Credit", "Description"])
        self.assertEqual(indices["notes"], 2)

    def test_headers_are_trimmed_and_stringified(self):
        """Test that padded and non-string headers are handled."""
        indices = self.resolver.resolve(["  Debit  ", None, 3, "Credit", "Notes"])
        self.assertEqual(indices, {"debit": 0, "credit": 3, "notes": 4})

    def test_missing_columns_reported_in_order(self):
        """Test that unresolved required columns are listed."""
        indices = self.resolver.resolve(["Date", "Credit"])
        self.assertEqual(self.resolver.missing(indices), ["debit", "notes"])

    def test_describe_uses_column_labels(self):
        """Test that column keys map to their display labels."""
        self.assertEqual(self.resolver.describe(["debit", "notes"]), ["Debit", "Notes"])
        self.assertEqual(self.resolver.describe(["amount"]), ["amount"])



class TestHeaderText(unittest.TestCase):
    """Test header cell stringification."""

    def test_absent_cells(self):
        """Test that None and NaN headers become empty strings."""
        self.assertEqual(header_text(None), "")
        self.assertEqual(header_text(float("nan")), "")

    def test_numbers(self):
        """Test that numeric headers are stringified."""
        self.assertEqual(header_text(2024), "2024")


if __name__ == '__main__':
    unittest.main()
