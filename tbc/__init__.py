"""
tbc - Toolbox Converter core package

This package contains the core functionality for the Toolbox Converter:
- config: Project configuration and versioning
- paths: Path management and output directory setup
- util: Utility functions for console output
- books: Canonical book registry
- toolbox: Toolbox text parsing (mode detection + verse/section assembly)
- loader: Multi-file / directory parsing into Book objects
- sfm: SFM (USFM) output
- jsonio: Book JSON persistence
- excel_export: Verse table export for review
"""

from . import config
from .util import info, warn, ok, error
from .model import Book, Chapter, Unit, BookInfo, Header, Mode, Marker, ParseWarning
from .books import get_book_by_name, get_book_by_code, PLACEHOLDER
from .toolbox import detect_mode, get_book_and_chapter, initialize_book, update_chapter, parse_file
from .loader import parse_toolbox_files, parse_toolbox_directory
from .sfm import book_to_sfm, write_sfm
from .jsonio import save_book_json, load_book_json
from .excel_export import export_verse_rows

__version__ = config.__version__
__all__ = [
    "config",
    "info",
    "warn",
    "ok",
    "error",
    "Book",
    "Chapter",
    "Unit",
    "BookInfo",
    "Header",
    "Mode",
    "Marker",
    "ParseWarning",
    "get_book_by_name",
    "get_book_by_code",
    "PLACEHOLDER",
    "detect_mode",
    "get_book_and_chapter",
    "initialize_book",
    "update_chapter",
    "parse_file",
    "parse_toolbox_files",
    "parse_toolbox_directory",
    "book_to_sfm",
    "write_sfm",
    "save_book_json",
    "load_book_json",
    "export_verse_rows",
]
