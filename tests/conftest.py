import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from tbc.toolbox import initialize_book


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("TBC_VS_LABELS", raising=False)
    monkeypatch.delenv("TBC_OUTPUT_DIR", raising=False)


@pytest.fixture
def mark():
    return initialize_book("Mark", "slt")


@pytest.fixture
def jude():
    return initialize_book("Jude", "slt")


def write_toolbox(path: Path, text: str) -> Path:
    path.write_bytes(text.encode("utf-8"))
    return path
