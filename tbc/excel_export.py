"""
Excel and CSV export helpers for the Toolbox Converter.

This module:
- Flattens a parsed Book into verse rows: (book, chapter, verse, text).
- Writes them to .xlsx files via openpyxl or .csv files via csv module.

The header row uses the column names that verse-table importers
(book / chapter / verse / text) already recognize, so translators can
review a parsed book in a spreadsheet before it goes to Paratext.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List

from .model import UNIT_VERSE, Book
from .util import info


try:
    from openpyxl import Workbook
except ImportError:  # pragma: no cover
    Workbook = None  # type: ignore[assignment,misc]


HEADERS: List[str] = ["book", "chapter", "verse", "text"]


@dataclass
class VerseRow:
    book: str          # Book code (e.g. MRK)
    chapter: int
    verse: int
    text: str


def iter_verse_rows(book: Book) -> Iterator[VerseRow]:
    """
    Yield one VerseRow per verse unit, in chapter/content order.
    Section headings and padding chapters are skipped.
    """
    for chapter in book.content:
        if chapter.number == 0 or chapter.content is None:
            continue
        for unit in chapter.content:
            if unit.type != UNIT_VERSE:
                continue
            yield VerseRow(
                book=book.info.code,
                chapter=chapter.number,
                verse=unit.number,
                text=unit.text or "",
            )


def export_verse_rows(book: Book, path: Path) -> int:
    """
    Write the verses of `book` to an .xlsx or .csv file.

    Returns
    -------
    int
        Number of verse rows written.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    rows = list(iter_verse_rows(book))
    path.parent.mkdir(parents=True, exist_ok=True)

    if suffix == ".csv":
        _write_csv(path, rows)
    elif suffix in (".xlsx", ".xlsm"):
        _write_xlsx(path, rows, sheet_title=book.info.code)
    else:
        raise ValueError(f"Unsupported export format: {suffix}. Expected .csv, .xlsx or .xlsm")

    info(f"Exported {len(rows)} verse rows to: {path}")
    return len(rows)


def _write_csv(path: Path, rows: List[VerseRow]) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(HEADERS)
        for r in rows:
            writer.writerow([r.book, r.chapter, r.verse, r.text])


def _write_xlsx(path: Path, rows: List[VerseRow], sheet_title: str) -> None:
    if Workbook is None:
        raise RuntimeError(
            "openpyxl is not installed. Install it with: pip install openpyxl"
        )

    wb = Workbook()
    ws = wb.active
    ws.title = sheet_title
    ws.append(HEADERS)
    for r in rows:
        ws.append([r.book, r.chapter, r.verse, r.text])
    wb.save(str(path))
