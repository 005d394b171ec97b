"""Tests for hashbench.formatting — shared text formatting helpers."""

from __future__ import annotations

import unittest

from hashbench.formatting import format_section_header, format_table


class TestFormatTable(unittest.TestCase):
    def test_basic(self) -> None:
        text = format_table(["Name", "Value"], [["a", "1"], ["bbb", "22"]], indent=0)
        self.assertEqual(text.splitlines(), ["Name  Value", "a     1", "bbb   22"])

    def test_right_alignment(self) -> None:
        text = format_table(["Op", "ns"], [["size", "5"], ["x", "123"]], alignments=["l", "r"])
        lines = text.splitlines()
        self.assertEqual(lines[1], "  size    5")
        self.assertEqual(lines[2], "  x     123")

    def test_short_rows_padded(self) -> None:
        text = format_table(["A", "B"], [["only"]], indent=0)
        self.assertEqual(text.splitlines()[1], "only")

    def test_empty_headers(self) -> None:
        self.assertEqual(format_table([], [["x"]]), "")


class TestFormatSectionHeader(unittest.TestCase):
    def test_width(self) -> None:
        header = format_section_header("Totals", width=30)
        self.assertTrue(header.startswith("─── Totals "))
        self.assertEqual(len(header), 30)


if __name__ == "__main__":
    unittest.main()
