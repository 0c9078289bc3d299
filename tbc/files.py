"""
File discovery helpers for Toolbox text files.
"""

from __future__ import annotations

from pathlib import Path
from typing import List


def get_text_files_inside(directory: Path) -> List[Path]:
    """
    Recursively collect all .txt files under `directory`, sorted by path.
    """
    directory = Path(directory)
    files: List[Path] = []
    for item in sorted(directory.iterdir()):
        if item.is_dir():
            files.extend(get_text_files_inside(item))
        elif item.suffix.lower() == ".txt":
            files.append(item)
    return files
