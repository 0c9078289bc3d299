#!/usr/bin/env python3
"""Tests for verse table export (tbc/excel_export.py)"""

import csv

import pytest
from openpyxl import load_workbook

from tbc.excel_export import export_verse_rows, iter_verse_rows
from tbc.toolbox import update_chapter


@pytest.fixture
def parsed_mark(mark):
    update_chapter(mark, ["\\tx Heading", "\\vs ", "\\tx One", "\\tx Two"], 1)
    update_chapter(mark, ["\\vs 3", "\\tx Three"], 2)
    return mark


class TestVerseRows:
    def test_sections_skipped(self, parsed_mark):
        rows = [(r.book, r.chapter, r.verse, r.text) for r in iter_verse_rows(parsed_mark)]
        assert rows == [
            ("MRK", 1, 1, "One"),
            ("MRK", 1, 2, "Two"),
            ("MRK", 2, 3, "Three"),
        ]


class TestExport:
    def test_csv(self, parsed_mark, tmp_path):
        path = tmp_path / "mark.csv"
        assert export_verse_rows(parsed_mark, path) == 3
        with open(path, encoding="utf-8", newline="") as f:
            rows = list(csv.reader(f))
        assert rows[0] == ["book", "chapter", "verse", "text"]
        assert rows[3] == ["MRK", "2", "3", "Three"]

    def test_xlsx(self, parsed_mark, tmp_path):
        path = tmp_path / "mark.xlsx"
        export_verse_rows(parsed_mark, path)
        wb = load_workbook(filename=str(path), read_only=True)
        ws = wb["MRK"]
        rows = list(ws.iter_rows(values_only=True))
        wb.close()
        assert rows[0] == ("book", "chapter", "verse", "text")
        assert rows[1] == ("MRK", 1, 1, "One")
        assert len(rows) == 4

    def test_unsupported_suffix(self, parsed_mark, tmp_path):
        with pytest.raises(ValueError, match="Unsupported"):
            export_verse_rows(parsed_mark, tmp_path / "mark.ods")
