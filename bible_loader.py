# bible_loader.py
import json
from pathlib import Path
from types import MappingProxyType
from thefuzz import process

import config

TESTAMENTS = ("OT", "NT")


class BibleLoadError(ValueError):
    pass


def sorted_keys(mapping):
    """Keys in numeric order when every key is an integer, else lexicographic."""
    keys = list(mapping)
    try:
        return sorted(keys, key=int)
    except ValueError:
        return sorted(keys)


def normalize(name: str) -> str:
    return name.lower().replace(" ", "")


def _freeze(node, where, depth):
    if depth == 3:
        if not isinstance(node, str):
            raise BibleLoadError(f"{where}: verse text must be a string")
        return node
    if not isinstance(node, dict):
        raise BibleLoadError(f"{where}: expected an object")
    frozen = {}
    for key, child in node.items():
        frozen[key] = _freeze(child, f"{where}/{key}", depth + 1)
    return MappingProxyType(frozen)


def parse_bible(data):
    """
    Build a Bible from decoded JSON (or raw bytes/str of it).

    Raises BibleLoadError if the data is empty or does not have the
    testament -> book -> chapter -> verse shape.
    """
    if isinstance(data, (bytes, str)):
        if not data.strip():
            raise BibleLoadError("data is empty")
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise BibleLoadError(f"JSON structure mismatch: {e}") from e
    if not isinstance(data, dict):
        raise BibleLoadError("JSON structure mismatch: top level must be an object")

    testaments = {}
    for name in TESTAMENTS:
        if name not in data:
            raise BibleLoadError(f"JSON structure mismatch: missing '{name}'")
        testaments[name] = _freeze(data[name], "/" + name, 0)
    return Bible(testaments)


def load_bible(data_path):
    path = Path(data_path)
    try:
        with open(path, encoding="utf-8") as f:
            raw = f.read()
    except OSError as e:
        raise BibleLoadError(f"could not read {path}: {e}") from e
    bible = parse_bible(raw)
    books = sum(len(bible.testament(t)) for t in TESTAMENTS)
    print(f"[bible_loader] Loaded {books} books from {path.name}")
    return bible


class Bible:
    def __init__(self, testaments):
        self.testaments = MappingProxyType(dict(testaments))

    def testament(self, name):
        return self.testaments.get(name, MappingProxyType({}))

    def book_key(self, testament, name):
        """Actual key of a book, matched ignoring case and spaces."""
        target = normalize(name)
        for key in self.testament(testament):
            if normalize(key) == target:
                return key
        return None

    def get_book(self, testament, name):
        key = self.book_key(testament, name)
        if key is None:
            return None
        return self.testament(testament)[key]

    def get_chapter(self, testament, book, chapter):
        bk = self.get_book(testament, book)
        if bk is None:
            return None
        return bk.get(chapter)

    def get_verse(self, testament, book, chapter, verse):
        ch = self.get_chapter(testament, book, chapter)
        if ch is None:
            return None
        return ch.get(str(verse))

    def entity(self, location):
        """Mapping selected by a location of 0-3 segments, or None if dangling."""
        node = self.testaments
        for depth, segment in enumerate(location):
            if depth == 1:
                segment = self.book_key(location[0], segment)
            if segment is None or segment not in node:
                return None
            node = node[segment]
        return node

    def children(self, location):
        node = self.entity(location)
        if node is None:
            return []
        return sorted_keys(node)

    def book_names(self):
        return [name for t in TESTAMENTS for name in sorted_keys(self.testament(t))]

    def suggest_book(self, token):
        names = self.book_names()
        if not names or not token.strip():
            return None
        choices = {name: normalize(name) for name in names}
        match = process.extractOne(normalize(token), choices, score_cutoff=config.FUZZY_THRESHOLD)
        if match is None:
            return None
        # dict choices give (value, score, key)
        return match[2]
