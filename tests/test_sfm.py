#!/usr/bin/env python3
"""Tests for SFM output (tbc/sfm.py)"""

import pytest

from tbc.model import Unit
from tbc.sfm import book_to_sfm, sfm_filename, write_sfm
from tbc.toolbox import update_chapter


class TestBookToSfm:
    def test_header_and_units(self, jude):
        update_chapter(jude, ["\\tx Greeting", "\\vs (section title)", "\\tx Jude, a servant", "\\tx To those"], 1)
        assert book_to_sfm(jude) == (
            "\\id JUD slt\n"
            "\\usfm 3.0\n"
            "\\h Jude\n"
            "\\toc Jude\n"
            "\\mt Jude\n"
            "\\c 1\n"
            "\\s1 Greeting\n"
            "\\p\n"
            "\\v 1 Jude, a servant\n"
            "\\v 2 To those\n"
        )

    def test_round_trip_vs_file(self, mark):
        update_chapter(mark, ["\\vs 1", "\\tx In the beginning"], 1)
        text = book_to_sfm(mark)
        assert "\\c 1\n\\v 1 In the beginning\n\\c 2\n" in text

    def test_unparsed_chapters_still_get_chapter_line(self, mark):
        text = book_to_sfm(mark)
        assert "\\c 0" not in text
        assert text.count("\\c ") == 16
        assert text.endswith("\\c 16\n")

    def test_invalid_unit_type(self, jude):
        update_chapter(jude, ["\\tx One"], 1)
        jude.content[1].content.append(Unit(type="footnote", number=2, text="x"))
        with pytest.raises(ValueError, match="footnote"):
            book_to_sfm(jude)


class TestWriteSfm:
    def test_filename(self, mark):
        assert sfm_filename(mark) == "42MRKslt.SFM"

    def test_write(self, jude, tmp_path):
        update_chapter(jude, ["\\tx One"], 1)
        path = write_sfm(jude, tmp_path / "out")
        assert path == tmp_path / "out" / "66JUDslt.SFM"
        assert path.read_text(encoding="utf-8").endswith("\\c 1\n\\v 1 One\n")
