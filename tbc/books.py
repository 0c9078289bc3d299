"""
Book registry for the Toolbox Converter.

Loads the canon from tbc/data/canon.json and resolves book names, codes
and common abbreviations to canonical BookInfo records. Anything that
cannot be resolved maps to the PLACEHOLDER book.
"""

from __future__ import annotations

import difflib
import json
import re
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .model import BookInfo
from .paths import CANON_PATH
from .util import warn


PLACEHOLDER = BookInfo(name="Placeholder", num="00", code="000", chapters=0)

# Close-match threshold used to repair typos in filename book tokens.
FUZZY_CUTOFF = 0.8
# Tokens shorter than this are never repaired.
FUZZY_MIN_LENGTH = 5
# A runner-up from another book this close to the best match makes it ambiguous.
FUZZY_MARGIN = 0.1


def _normalize_key(value: str) -> str:
    return re.sub(r"[^0-9a-z]", "", value.lower())


@lru_cache(maxsize=None)
def load_canon(canon_path: Path = CANON_PATH) -> Dict[int, Dict[str, Any]]:
    """
    Load the canon definition.

    Returns
    -------
    dict:
        Map of book_num -> { "code", "name", "testament", "chapters", "aliases" }
    """
    if not canon_path.exists():
        warn(f"canon.json not found at: {canon_path}")
        return {}

    data = json.loads(canon_path.read_text(encoding="utf-8"))

    result: Dict[int, Dict[str, Any]] = {}
    for entry in data:
        num = int(entry["book_num"])
        result[num] = {
            "code": entry["code"],
            "name": entry["name"],
            "testament": entry.get("testament", "unknown"),
            "chapters": int(entry["chapters"]),
            "aliases": list(entry.get("aliases", [])),
        }
    return result


@lru_cache(maxsize=None)
def _book_lookup() -> Dict[str, int]:
    """
    Build a mapping from normalized book strings to book_num.

    Keys include the code (GEN), the full name (Genesis) and any aliases,
    lowercased with spaces and punctuation removed.
    """
    lookup: Dict[str, int] = {}
    for num, meta in load_canon().items():
        for key in [meta["code"], meta["name"], *meta["aliases"]]:
            lookup[_normalize_key(key)] = num
    return lookup


def _to_book_info(num: int) -> BookInfo:
    meta = load_canon()[num]
    return BookInfo(
        name=meta["name"],
        num=f"{num:02d}",
        code=meta["code"],
        chapters=meta["chapters"],
    )


def _close_match(key: str, lookup: Dict[str, int]) -> Optional[int]:
    """
    Best close match for `key`, or None when the match is too weak or
    ambiguous (a different book scores within FUZZY_MARGIN of the best).
    """
    if len(key) < FUZZY_MIN_LENGTH:
        return None

    scored: List[Tuple[float, int]] = []
    matcher = difflib.SequenceMatcher()
    matcher.set_seq2(key)
    for candidate, num in lookup.items():
        matcher.set_seq1(candidate)
        ratio = matcher.ratio()
        if ratio >= FUZZY_CUTOFF:
            scored.append((ratio, num))
    if not scored:
        return None

    scored.sort(reverse=True)
    best_ratio, best_num = scored[0]
    for ratio, num in scored[1:]:
        if num != best_num and best_ratio - ratio < FUZZY_MARGIN:
            return None
    return best_num


def resolve_book_name(name: str) -> Tuple[BookInfo, bool]:
    """
    Resolve a book name (or code/abbreviation) to its canonical BookInfo.

    Returns
    -------
    (book, repaired)
        repaired is True when the name only matched after typo repair,
        e.g. 'Genisis' -> Genesis. Unknown or ambiguous names ('Sam',
        'Kings') return (PLACEHOLDER, False).
    """
    key = _normalize_key(name)
    if not key:
        return PLACEHOLDER, False

    lookup = _book_lookup()
    num = lookup.get(key)
    if num is not None:
        return _to_book_info(num), False

    num = _close_match(key, lookup)
    if num is None:
        return PLACEHOLDER, False
    return _to_book_info(num), True


def get_book_by_name(name: str) -> BookInfo:
    """
    Resolve a book name to its canonical BookInfo; see resolve_book_name.
    """
    return resolve_book_name(name)[0]


def get_book_by_code(code: str) -> BookInfo:
    """
    Resolve a 3-character book code ('GEN', '1CO'). '000' and unknown
    codes return PLACEHOLDER.
    """
    code = code.strip().upper()
    for num, meta in load_canon().items():
        if meta["code"] == code:
            return _to_book_info(num)
    return PLACEHOLDER
