"""
JSON persistence for Book objects.
"""

from __future__ import annotations

import json
from pathlib import Path

from .model import Book
from .util import info


def save_book_json(book: Book, path: Path) -> Path:
    """
    Write `book` as indented JSON and return the path written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(book.to_dict(), indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    info(f"Wrote JSON: {path}")
    return path


def load_book_json(path: Path) -> Book:
    """
    Load a Book from a JSON file.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    ValueError
        If the file is not valid JSON or does not describe a book.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON file {path}: {e}") from e

    try:
        return Book.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"JSON file {path} is not a valid book object: {e!r}") from e
