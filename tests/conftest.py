from __future__ import annotations

import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import pytest

from app.services.formatting import FormatOptions, Formatter

DATA_DIR = Path(__file__).parent / "data"


def _load(name: str):
    return json.loads((DATA_DIR / name).read_text(encoding="utf-8"))


@pytest.fixture
def caixa_payload() -> dict[str, object]:
    """Payload as served by the official Caixa endpoint (single object)."""
    return _load("caixa_megasena.json")


@pytest.fixture
def generic_payload() -> list[dict[str, object]]:
    """Community API payload: a list whose first element is the draw."""
    return _load("generic_megasena.json")


@pytest.fixture
def formatter() -> Formatter:
    return Formatter(FormatOptions(locale="pt_BR", currency="BRL", date_format="short"))
