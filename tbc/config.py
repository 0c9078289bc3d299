"""
Project configuration and versioning for the Toolbox Converter.

Settings can be overridden through environment variables:
- TBC_OUTPUT_DIR : default directory for generated SFM/JSON files
- TBC_VS_LABELS  : 'leading' or 'trailing' verse-label convention
"""

from __future__ import annotations

import os
from typing import Optional

from .util import warn

APP_NAME = "Toolbox Converter"
__version__ = "0.3.0"

USFM_VERSION = "3.0"

VS_LABELS_LEADING = "leading"
VS_LABELS_TRAILING = "trailing"
VS_LABEL_CHOICES = (VS_LABELS_LEADING, VS_LABELS_TRAILING)


def output_dir() -> str:
    """Default output directory for generated files."""
    return os.getenv("TBC_OUTPUT_DIR", "") or "."


def vs_labels() -> Optional[str]:
    """
    Verse-label convention used for files that carry explicit \\vs numbers.

    leading : '\\vs N' names the verse of the \\tx lines that follow it.
    trailing: '\\vs N' closes verse N after its text, so the next verse
              is N + 1. A trailing label with no text above it is
              skipped with a 'section without text' warning.

    Returns None when TBC_VS_LABELS is unset (or invalid); the parser
    then detects the convention from each file.
    """
    value = os.getenv("TBC_VS_LABELS", "").strip().lower()
    if not value:
        return None
    if value not in VS_LABEL_CHOICES:
        warn(f"Unknown TBC_VS_LABELS value {value!r}; detecting per file.")
        return None
    return value
