"""
Toolbox text file parsing for the Toolbox Converter.

This module:
- Reads a Toolbox text file and normalizes its line endings.
- Detects whether verse numbers are explicit (\\vs N) or implied by \\tx lines.
- Infers book name and chapter number from the filename.
- Walks the lines and assembles verses and section headings into a chapter.

Parsing never prints. Every recoverable problem is returned as a
ParseWarning so the caller decides how to report it.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from . import config
from .books import PLACEHOLDER, get_book_by_name, resolve_book_name
from .model import (
    SECTION_NUMBER,
    UNIT_VERSE,
    UNIT_SECTION,
    Book,
    Chapter,
    Header,
    Marker,
    Mode,
    ParseWarning,
    Unit,
)


MODE_PATTERN = re.compile(r"\\vs\s+\d+")
LINE_PATTERN = re.compile(r"(\\[A-Za-z]+)\s(.*)")
VS_NUMBER_PATTERN = re.compile(r"\\vs\s+\*?\d+")
VS_PATTERN = re.compile(r"\\vs\s+\*?(\d+|\(section title\))([a-z])?.*")
FILENAME_PATTERN = re.compile(r"([0-9A-Za-z]+)_(?:[Cc]h?)?(\d+)[_\s]?.*\.txt$")

SECTION_TITLE = "(section title)"

IGNORED_MARKERS = frozenset({Marker.C, Marker.REF, Marker.T})


def normalize_text(text: str) -> List[str]:
    """
    Split raw Toolbox text into lines.

    Runs of blank lines collapse into a single line break and a trailing
    empty line is dropped.
    """
    text = re.sub(r"(?:\r?\n){2,}", "\n", text)
    lines = re.split(r"\r?\n", text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def read_toolbox_lines(path: Path) -> List[str]:
    """
    Read a Toolbox text file into normalized lines.

    Raises FileNotFoundError / OSError if the file cannot be read.
    """
    text = Path(path).read_text(encoding="utf-8-sig")
    return normalize_text(text)


def detect_mode(lines: Sequence[str]) -> Mode:
    """
    VS_AS_VERSE if any line carries a numeric \\vs marker, else TX_AS_VERSE.
    """
    for line in lines:
        if MODE_PATTERN.search(line):
            return Mode.VS_AS_VERSE
    return Mode.TX_AS_VERSE


def detect_vs_labels(lines: Sequence[str]) -> str:
    """
    'trailing' if a \\tx line comes before the first numeric \\vs line
    (the label closes the text above it), else 'leading'.
    """
    for line in lines:
        match = LINE_PATTERN.match(line)
        if match is None:
            continue
        if Marker.from_token(match.group(1)) is Marker.TX:
            return config.VS_LABELS_TRAILING
        if VS_NUMBER_PATTERN.match(line):
            return config.VS_LABELS_LEADING
    return config.VS_LABELS_LEADING


def get_book_and_chapter(file: Path) -> Tuple[str, int, Optional[ParseWarning]]:
    """
    Extract a book name and chapter number from a filename such as
    'Mark_Ch01_v2.txt' or 'Gen_3.txt'.

    Returns
    -------
    (book_name, chapter_number, warning)
        ('Placeholder', 0, warning) when the name cannot be interpreted.
    """
    filename = Path(file).name
    match = FILENAME_PATTERN.search(filename)
    if not match:
        return (
            PLACEHOLDER.name,
            0,
            ParseWarning("filename", f"Unable to determine info from: {filename}", file=str(file)),
        )

    token = match.group(1)
    book, repaired = resolve_book_name(token)
    if book.name == PLACEHOLDER.name:
        return (
            PLACEHOLDER.name,
            0,
            ParseWarning(
                "filename",
                f"Unknown book {token!r} in filename: {filename}",
                file=str(file),
            ),
        )

    warning = None
    if repaired:
        warning = ParseWarning(
            "filename",
            f"Book {token!r} in filename {filename} read as {book.name!r} (close match)",
            file=str(file),
        )
    return book.name, int(match.group(2)), warning


def initialize_book(book_name: str, project_name: str) -> Book:
    """
    Create a Book for `book_name` with one padding chapter per expected
    chapter. content[0] is extra padding since chapters are 1-based.
    """
    book_info = get_book_by_name(book_name)
    book = Book(header=Header(project_name=project_name, book_info=book_info))
    for i in range(book_info.chapters + 1):
        book.content.append(Chapter(number=i))
    return book


class ChapterAssembler:
    """
    Single-pass state machine that turns Toolbox lines into chapter units.

    State is the running verse counter plus the chapter's last unit. The
    assembler owns the chapter for the duration of one feed() run.
    """

    def __init__(
        self,
        chapter: Chapter,
        mode: Mode,
        vs_labels: str = config.VS_LABELS_LEADING,
        file: Optional[str] = None,
    ) -> None:
        units: List[Unit] = [] if chapter.content is None else chapter.content
        chapter.content = units
        self.chapter = chapter
        self.units = units
        self.mode = mode
        self.vs_labels = vs_labels
        self.file = file
        self.verse_num = 1
        self.warnings: List[ParseWarning] = []

    def _warn(self, kind: str, message: str, line_number: int, line: str) -> None:
        self.warnings.append(
            ParseWarning(kind, message, line_number=line_number, line=line, file=self.file)
        )

    def feed(self, lines: Sequence[str]) -> List[ParseWarning]:
        for line_number, line in enumerate(lines, start=1):
            self.feed_line(line, line_number)
        return self.warnings

    def feed_line(self, line: str, line_number: int = 0) -> None:
        match = LINE_PATTERN.match(line)
        if not match:
            self._warn("malformed-line", f'Unable to parse line: "{line}" - skipping...', line_number, line)
            return

        token, content = match.group(1), match.group(2)
        marker = Marker.from_token(token)

        if marker in IGNORED_MARKERS:
            return
        if marker is Marker.TX:
            self._text(content)
        elif marker is Marker.VS:
            self._verse_label(line, line_number)
        else:
            self._warn("unexpected-marker", f"Skipping unexpected marker: {token}", line_number, line)

    def _text(self, content: str) -> None:
        if self.mode is Mode.TX_AS_VERSE:
            self.units.append(Unit(type=UNIT_VERSE, number=self.verse_num, text=content))
            self.verse_num += 1
            return

        last = self.chapter.last_unit
        if last is not None and last.type == UNIT_VERSE and last.number == self.verse_num:
            # continuation of the current verse
            last.text = (last.text or "") + content
        else:
            self.units.append(Unit(type=UNIT_VERSE, number=self.verse_num, text=content))

    def _make_section(self, line: str, line_number: int) -> bool:
        last = self.chapter.last_unit
        if last is None:
            self._warn("section-without-text", "Warning, section without text", line_number, line)
            return False
        last.type = UNIT_SECTION
        last.number = SECTION_NUMBER
        return True

    def _verse_label(self, line: str, line_number: int) -> None:
        if self.mode is Mode.TX_AS_VERSE:
            # the preceding \tx was a heading, so it gives back its verse slot
            if self._make_section(line, line_number):
                self.verse_num -= 1
            return

        match = VS_PATTERN.match(line)
        if not match:
            self._warn(
                "unrecognized-verse-label",
                f"Unrecognized verse label: {line}",
                line_number,
                line,
            )
            return

        label = match.group(1)
        if label == SECTION_TITLE:
            self._make_section(line, line_number)
            return

        # Letter suffixes (8a, 8b) are dropped: sub-verses share one number.
        number = int(label)
        if self.vs_labels == config.VS_LABELS_LEADING:
            self.verse_num = number
        elif self.units:
            self.verse_num = number + 1
        else:
            # a trailing label must close some text
            self._warn("section-without-text", "Warning, section without text", line_number, line)


def update_chapter(
    book: Book,
    lines: Sequence[str],
    chapter_number: int,
    mode: Optional[Mode] = None,
    vs_labels: Optional[str] = None,
    file: Optional[str] = None,
) -> List[ParseWarning]:
    """
    Assemble `lines` into chapter `chapter_number` of `book`.

    Parameters
    ----------
    book:
        Book to modify in place.
    lines:
        Normalized Toolbox lines for this chapter.
    chapter_number:
        1-based chapter to fill; IndexError if outside the book.
    mode:
        Verse numbering mode; detected from `lines` when None.
    vs_labels:
        'leading' or 'trailing'. When None, TBC_VS_LABELS is used if set,
        otherwise the convention is detected from `lines`.
    file:
        Source path, only used in warnings.

    Returns
    -------
    List of ParseWarning records, in line order.
    """
    chapter = book.chapter(chapter_number)
    if mode is None:
        mode = detect_mode(lines)
    if vs_labels is None:
        vs_labels = config.vs_labels() or detect_vs_labels(lines)

    assembler = ChapterAssembler(chapter, mode, vs_labels=vs_labels, file=file)
    return assembler.feed(lines)


def parse_file(
    book: Book,
    file: Path,
    chapter_number: int,
    vs_labels: Optional[str] = None,
) -> List[ParseWarning]:
    """
    Parse a Toolbox text file into chapter `chapter_number` of `book`.
    """
    lines = read_toolbox_lines(file)
    return update_chapter(book, lines, chapter_number, vs_labels=vs_labels, file=str(file))
