"""
Data model definitions for the Toolbox Converter.

For now we define:
- BookInfo   : canonical book metadata from the registry
- Header     : project name + book metadata
- Unit       : a verse, a section heading, or a padding placeholder
- Chapter    : one chapter's ordered units (or a padding placeholder)
- Book       : header + chapters, index-aligned with chapter number
- Mode       : how verse boundaries are signalled in a Toolbox file
- Marker     : the Toolbox markers we recognize
- ParseWarning: a non-fatal diagnostic raised while parsing
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


UNIT_PADDING = "padding"
UNIT_VERSE = "verse"
UNIT_SECTION = "section"

# Sections are not numbered; every section carries this sentinel.
SECTION_NUMBER = 1


class Mode(str, Enum):
    """Per-file verse numbering convention."""
    TX_AS_VERSE = "TX_AS_VERSE"  # each \tx line is a verse
    VS_AS_VERSE = "VS_AS_VERSE"  # \vs lines carry the verse numbers


class Marker(str, Enum):
    """Toolbox markers. Anything else becomes UNKNOWN."""
    TX = "\\tx"
    VS = "\\vs"
    C = "\\c"
    REF = "\\ref"
    T = "\\t"
    UNKNOWN = ""

    @classmethod
    def from_token(cls, token: str) -> "Marker":
        try:
            marker = cls(token)
        except ValueError:
            return cls.UNKNOWN
        return marker


@dataclass
class BookInfo:
    """
    Canonical metadata for a single book.

    num is the two-digit Paratext book number as a string ('01', '41').
    """
    name: str
    num: str
    code: str
    chapters: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "num": self.num,
            "code": self.code,
            "chapters": self.chapters,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BookInfo":
        return cls(
            name=str(data["name"]),
            num=str(data["num"]),
            code=str(data["code"]),
            chapters=int(data["chapters"]),
        )


@dataclass
class Header:
    project_name: str
    book_info: BookInfo

    def to_dict(self) -> Dict[str, Any]:
        return {
            "projectName": self.project_name,
            "bookInfo": self.book_info.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Header":
        return cls(
            project_name=str(data.get("projectName", "")),
            book_info=BookInfo.from_dict(data["bookInfo"]),
        )


@dataclass
class Unit:
    """
    A content record inside a chapter.

    type  : 'verse', 'section' or 'padding'
    number: verse number, SECTION_NUMBER for sections
    text  : None only for padding
    """
    type: str
    number: int
    text: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type, "number": self.number}
        if self.text is not None:
            data["text"] = self.text
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Unit":
        text = data.get("text")
        return cls(
            type=str(data["type"]),
            number=int(data["number"]),
            text=None if text is None else str(text),
        )


@dataclass
class Chapter:
    """
    One chapter of a book.

    A chapter that has not been parsed yet is a padding placeholder and
    has content=None.
    """
    number: int
    content: Optional[List[Unit]] = None

    @property
    def is_padding(self) -> bool:
        return self.content is None

    @property
    def last_unit(self) -> Optional[Unit]:
        if not self.content:
            return None
        return self.content[-1]

    def to_dict(self) -> Dict[str, Any]:
        if self.content is None:
            return {"type": UNIT_PADDING, "number": self.number}
        return {
            "number": self.number,
            "content": [u.to_dict() for u in self.content],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Chapter":
        number = int(data["number"])
        if "content" not in data:
            return cls(number=number)
        return cls(
            number=number,
            content=[Unit.from_dict(u) for u in data["content"]],
        )


@dataclass
class Book:
    """
    Root aggregate for one book.

    content[0] is unused padding; chapters are 1-based so content[n]
    holds chapter n.
    """
    header: Header
    content: List[Chapter] = field(default_factory=list)

    @property
    def info(self) -> BookInfo:
        return self.header.book_info

    def chapter(self, number: int) -> Chapter:
        """
        Return chapter `number`, raising IndexError outside 1..chapters.
        """
        if number < 1 or number >= len(self.content):
            raise IndexError(
                f"Chapter {number} is out of range for {self.info.name} "
                f"(1..{len(self.content) - 1})"
            )
        return self.content[number]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "header": self.header.to_dict(),
            "content": [c.to_dict() for c in self.content],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Book":
        return cls(
            header=Header.from_dict(data["header"]),
            content=[Chapter.from_dict(c) for c in data.get("content", [])],
        )


@dataclass(frozen=True)
class ParseWarning:
    """
    A recoverable problem found while parsing a Toolbox file.

    kind is one of: 'malformed-line', 'unexpected-marker',
    'section-without-text', 'unrecognized-verse-label', 'filename'.
    """
    kind: str
    message: str
    line_number: Optional[int] = None
    line: Optional[str] = None
    file: Optional[str] = None

    def __str__(self) -> str:
        where = ""
        if self.file:
            where = f"{self.file}"
            if self.line_number is not None:
                where += f":{self.line_number}"
            where += ": "
        return f"{where}{self.message}"
