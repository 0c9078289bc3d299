"""
SFM (USFM 3.0) output for Book objects.

The layout is a fixed header block followed by, per chapter,
a \\c line and its sections and verses in content order:

    \\id MRK slt
    \\usfm 3.0
    \\h Mark
    \\toc Mark
    \\mt Mark
    \\c 1
    \\s1 Heading
    \\p
    \\v 1 Verse text
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from . import config
from .model import UNIT_SECTION, UNIT_VERSE, Book
from .util import info

ID_MARKER = "\\id "
USFM_MARKER = "\\usfm "
HEADER_MARKER = "\\h "
TOC_MARKER = "\\toc "
MAIN_TITLE_MARKER = "\\mt "
CHAPTER_MARKER = "\\c "
SECTION_MARKER = "\\s1 "
PARAGRAPH_MARKER = "\n\\p"
VERSE_MARKER = "\\v "


def book_to_sfm(book: Book) -> str:
    """
    Render `book` as SFM text.

    Raises ValueError for any unit whose type is not 'section' or 'verse'.
    """
    meta = book.info
    lines: List[str] = [
        f"{ID_MARKER}{meta.code} {book.header.project_name}",
        f"{USFM_MARKER}{config.USFM_VERSION}",
        f"{HEADER_MARKER}{meta.name}",
        f"{TOC_MARKER}{meta.name}",
        f"{MAIN_TITLE_MARKER}{meta.name}",
    ]

    for chapter in book.content:
        if chapter.number == 0:
            continue
        lines.append(f"{CHAPTER_MARKER}{chapter.number}")
        for unit in chapter.content or []:
            if unit.type == UNIT_SECTION:
                lines.append(f"{SECTION_MARKER}{unit.text}{PARAGRAPH_MARKER}")
            elif unit.type == UNIT_VERSE:
                lines.append(f"{VERSE_MARKER}{unit.number} {unit.text}")
            else:
                raise ValueError(
                    f"Invalid type on {unit.to_dict()!r} in chapter {chapter.number}. "
                    "Looking for 'section' or 'verse'."
                )

    return "\n".join(lines) + "\n"


def sfm_filename(book: Book) -> str:
    """File name Paratext expects, e.g. '42MRKslt.SFM'."""
    return f"{book.info.num}{book.info.code}{book.header.project_name}.SFM"


def write_sfm(book: Book, output_dir: Path) -> Path:
    """
    Render `book` and write it into `output_dir`. Returns the file path.
    """
    text = book_to_sfm(book)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / sfm_filename(book)
    path.write_text(text, encoding="utf-8")
    info(f"Wrote SFM: {path}")
    return path
