"""Shared fixtures: a small corpus and a shell wired to a temp bookmark file."""

import pytest

import config
from bible_loader import parse_bible
from book_index import build_book_index
from shell import BibleShell

MOCK_DATA = {
    "OT": {
        "Genesis": {
            "1": {"1": "In the beginning..."},
        },
        "Exodus": {
            "1": {"1": "Now these are the names..."},
        },
    },
    "NT": {
        "Matthew": {
            "1": {"1": "The book of the generation..."},
        },
        "John": {
            "3": {
                "16": "For God so loved...",
                "17": "For God sent not his Son...",
            },
        },
        "1 John": {
            "1": {"1": "That which was from the beginning..."},
        },
    },
}


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", False)


@pytest.fixture
def bible():
    return parse_bible(MOCK_DATA)


@pytest.fixture
def book_index(bible):
    return build_book_index(bible)


@pytest.fixture
def bookmark_file(tmp_path):
    return tmp_path / "bookmarks.json"


@pytest.fixture
def shell(bible, bookmark_file):
    return BibleShell(bible, bookmark_file=bookmark_file)
