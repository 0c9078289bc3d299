"""
Toolbox loading logic for the Toolbox Converter.

This module:
- Infers book and chapter from each Toolbox filename.
- Creates one padded Book per distinct book.
- Parses each file into its chapter, one file at a time.
- Reports parse warnings through the console helpers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .books import PLACEHOLDER, get_book_by_name
from .files import get_text_files_inside
from .model import Book, ParseWarning
from .toolbox import get_book_and_chapter, initialize_book, parse_file
from .util import info, warn


@dataclass
class LoadResult:
    books: Dict[str, Book] = field(default_factory=dict)  # book name -> Book
    warnings: List[ParseWarning] = field(default_factory=list)
    parsed_files: int = 0
    skipped_files: int = 0


def report_warnings(warnings: Iterable[ParseWarning]) -> None:
    for w in warnings:
        warn(str(w))


def parse_toolbox_files(
    files: Iterable[Path],
    project_name: str,
    vs_labels: Optional[str] = None,
    report: bool = True,
) -> LoadResult:
    """
    Parse Toolbox text files into Book objects.

    Parameters
    ----------
    files:
        Toolbox text files. Each filename must carry a book token and a
        chapter number (e.g. 'Mark_Ch01.txt').
    project_name:
        Paratext project name stored in each book header.
    vs_labels:
        Verse-label convention; see tbc.config.vs_labels().
    report:
        If True, print progress and each warning as it is collected.

    Returns
    -------
    LoadResult with books in first-seen order.
    """
    result = LoadResult()

    for file in files:
        file = Path(file)
        book_name, chapter_number, name_warning = get_book_and_chapter(file)
        if name_warning is not None:
            result.warnings.append(name_warning)
            if report:
                warn(str(name_warning))
        if book_name == PLACEHOLDER.name:
            result.skipped_files += 1
            continue

        book_info = get_book_by_name(book_name)
        if chapter_number < 1 or chapter_number > book_info.chapters:
            w = ParseWarning(
                "filename",
                f"Chapter {chapter_number} is out of range for {book_name} "
                f"(1..{book_info.chapters}); skipping.",
                file=str(file),
            )
            result.warnings.append(w)
            if report:
                warn(str(w))
            result.skipped_files += 1
            continue

        book = result.books.get(book_name)
        if book is None:
            book = initialize_book(book_name, project_name)
            result.books[book_name] = book

        if report:
            info(f"Parsing {file.name} -> {book_name} {chapter_number}")
        file_warnings = parse_file(book, file, chapter_number, vs_labels=vs_labels)
        result.warnings.extend(file_warnings)
        if report:
            report_warnings(file_warnings)
        result.parsed_files += 1

    if report:
        info(
            f"Parsed {result.parsed_files} file(s) into {len(result.books)} book(s); "
            f"skipped {result.skipped_files}; {len(result.warnings)} warning(s)."
        )
    return result


def parse_toolbox_directory(
    directory: Path,
    project_name: str,
    vs_labels: Optional[str] = None,
) -> LoadResult:
    """
    Parse every .txt file found under `directory` (recursively).
    """
    files = get_text_files_inside(directory)
    if not files:
        warn(f"No .txt files found under: {directory}")
    return parse_toolbox_files(files, project_name, vs_labels=vs_labels)
