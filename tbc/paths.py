"""
Path configuration for the Toolbox Converter.
"""

from __future__ import annotations

from pathlib import Path

from . import config

PACKAGE_DIR = Path(__file__).parent
DATA_DIR = PACKAGE_DIR / "data"
CANON_PATH = DATA_DIR / "canon.json"


def ensure_output_dir(path: Path | None = None) -> Path:
    """
    Ensure the output directory exists and return it.

    If no path is given, TBC_OUTPUT_DIR (or the current directory) is used.
    """
    out = Path(path) if path is not None else Path(config.output_dir())
    out.mkdir(parents=True, exist_ok=True)
    return out
