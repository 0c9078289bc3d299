#!/usr/bin/env python
"""
converter.py – command-line entry point for the Toolbox Converter

Usage:

  python converter.py -t Mark_Ch01.txt -p slt
      Parse a single Toolbox text file and write 42MRKslt.SFM

  python converter.py -d path/to/toolbox/files -p slt --write-json
      Parse every .txt file under a directory, write one SFM (and JSON)
      file per book

  python converter.py -j 42MRKslt.json -p slt
      Write SFM from a previously saved book JSON file

  python converter.py -t Mark_Ch01.txt -p slt --export mark.xlsx
      Also export the verses as a book/chapter/verse/text table
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from tbc import config
from tbc.paths import ensure_output_dir
from tbc.util import info, ok, error
from tbc.model import Book
from tbc.loader import parse_toolbox_files, parse_toolbox_directory
from tbc.jsonio import save_book_json, load_book_json
from tbc.sfm import write_sfm, sfm_filename
from tbc.excel_export import export_verse_rows


# ---------- Helpers ----------


def _check_inputs(args: argparse.Namespace) -> bool:
    """
    Validate required options and input paths. Prints an error and returns
    False on the first problem.
    """
    if not args.project_name:
        error("Project name required")
        return False
    if args.text and not Path(args.text).is_file():
        error(f"Can't open Toolbox text file {args.text}")
        return False
    if args.directory and not Path(args.directory).is_dir():
        error(f"Can't open directory {args.directory}")
        return False
    if args.json and not Path(args.json).is_file():
        error(f"Can't open JSON file {args.json}")
        return False
    return True


def _load_books(args: argparse.Namespace) -> Optional[List[Book]]:
    if args.json:
        try:
            book = load_book_json(Path(args.json))
        except ValueError as e:
            error(f"Invalid JSON file. Exiting ({e})")
            return None
        return [book]

    if args.text:
        result = parse_toolbox_files([Path(args.text)], args.project_name, vs_labels=args.vs_labels)
    elif args.directory:
        result = parse_toolbox_directory(Path(args.directory), args.project_name, vs_labels=args.vs_labels)
    else:
        error("No text file, directory or JSON file given. Exiting")
        return None

    if not result.books:
        error("No book could be determined from the given files. Exiting")
        return None
    return list(result.books.values())


# ---------- Parser setup ----------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="converter",
        description=(
            f"{config.APP_NAME} (v{config.__version__}): 1) parse Toolbox text files "
            "into book objects, 2) write them out as .SFM files for Paratext."
        ),
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=config.__version__,
    )
    parser.add_argument(
        "-t",
        "--text",
        type=str,
        default=None,
        help="Path to a Toolbox text file",
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=str,
        default=None,
        help="Path to a directory containing Toolbox text files",
    )
    parser.add_argument(
        "-j",
        "--json",
        type=str,
        default=None,
        help="Path to a book JSON file",
    )
    parser.add_argument(
        "-p",
        "--project-name",
        type=str,
        default=None,
        help="Name of the Paratext project (required)",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=str,
        default=None,
        help="Directory for generated files (default: TBC_OUTPUT_DIR or current directory)",
    )
    parser.add_argument(
        "--write-json",
        action="store_true",
        help="Also write each parsed book as JSON next to the SFM file",
    )
    parser.add_argument(
        "--export",
        type=str,
        default=None,
        help="Export verses to a .xlsx or .csv table (single-book runs only)",
    )
    parser.add_argument(
        "--vs-labels",
        choices=config.VS_LABEL_CHOICES,
        default=None,
        help="How \\vs numbers relate to \\tx lines (default: TBC_VS_LABELS or 'leading')",
    )
    return parser


# ---------- Main ----------


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not _check_inputs(args):
        return 1

    books = _load_books(args)
    if books is None:
        return 1

    output_dir = ensure_output_dir(Path(args.output_dir) if args.output_dir else None)
    info(f"Output directory: {output_dir}")

    for book in books:
        try:
            write_sfm(book, output_dir)
        except ValueError as e:
            error(str(e))
            return 1
        if args.write_json:
            save_book_json(book, output_dir / Path(sfm_filename(book)).with_suffix(".json").name)

    if args.export:
        if len(books) != 1:
            error(f"--export needs exactly one book; got {len(books)}")
            return 1
        try:
            export_verse_rows(books[0], Path(args.export))
        except (ValueError, RuntimeError) as e:
            error(str(e))
            return 1

    ok(f"Converted {len(books)} book(s).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
