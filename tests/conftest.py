"""
Pytest configuration: ensure project root is on sys.path for imports and
provide small dictionary documents for the store and search tests.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from dictsearch.dictionary import EntryStore  # noqa: E402


def make_entry(word: str, **fields: str) -> dict:
    entry = {
        "word": word,
        "meaning": f"meaning of {word}",
        "source": "Field notes",
        "bookName": "Collected Words",
        "pageNo": "12",
        "time": "1890",
        "grammar": "noun",
        "derivation": "unknown",
    }
    entry.update(fields)
    return entry


@pytest.fixture
def document() -> dict:
    return {
        "1": make_entry("serendipity", meaning="a pleasant surprise"),
        "2": make_entry("Apple", meaning="a fruit"),
        "3": make_entry("ephemeral", grammar="adjective"),
    }


@pytest.fixture
def write_dictionary(tmp_path):
    def _write(data, name: str = "dictionary.json") -> Path:
        path = tmp_path / name
        if isinstance(data, bytes):
            path.write_bytes(data)
        elif isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        else:
            path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def store(document, write_dictionary) -> EntryStore:
    loaded = EntryStore(write_dictionary(document))
    loaded.load()
    return loaded
