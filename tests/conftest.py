"""Shared pytest configuration and fixtures for lexicon engine tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from omani_lexicon.core.query import build_index
from omani_lexicon.core.store import RecordStore

SAMPLE_ENTRIES: List[Dict[str, Any]] = [
    {
        "lex": "kitāb",
        "lex_arb": "كتاب",
        "root": "ktb",
        "def": "book",
        "pos": "noun",
        "sem": "education",
        "dialect": "Muscat",
        "ref": "Holes 2016",
        "pg": 112,
        "id": "1",
    },
    {
        "lex": "kataba",
        "lex_arb": "كتب",
        "root": "ktb",
        "def": "to write",
        "pos": "verb",
        "sem": "education",
        "dialect": "Muscat",
    },
    {"lex": "maktab", "root": "ktb", "def": "office", "pos": "noun", "sem": "work", "dialect": "Dhofar"},
    {"lex": "bayt", "root": "byt", "def": "house", "pos": "noun", "sem": "home"},
    {"lex": "hala", "root": "  ", "def": "welcome", "pos": "interjection", "dialect": "Muscat"},
    {"lex": "yalla", "def": "let's go", "pos": "interjection"},
]

# Five entries fuzzy-match "book"; only "book" and "booking" are nouns.
BOOK_ENTRIES: List[Dict[str, Any]] = [
    {"lex": "booking", "pos": "noun"},
    {"lex": "bookish", "pos": "adjective"},
    {"lex": "book", "pos": "noun"},
    {"lex": "bookcase", "pos": "other"},
    {"lex": "books", "pos": "plural"},
    {"lex": "tree", "pos": "noun"},
    {"lex": "house", "pos": "noun"},
]


@pytest.fixture
def sample_store() -> RecordStore:
    return RecordStore.from_records(SAMPLE_ENTRIES)


@pytest.fixture
def sample_index(sample_store: RecordStore):
    return build_index(sample_store.records)


@pytest.fixture
def book_store() -> RecordStore:
    return RecordStore.from_records(BOOK_ENTRIES)


@pytest.fixture
def book_index(book_store: RecordStore):
    return build_index(book_store.records)


@pytest.fixture
def lexicon_json(tmp_path: Path) -> Path:
    """Write SAMPLE_ENTRIES as a dataset file and return its path."""
    path = tmp_path / "lexicon-data.json"
    path.write_text(json.dumps(SAMPLE_ENTRIES, ensure_ascii=False), encoding="utf-8")
    return path
