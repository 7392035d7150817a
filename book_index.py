# book_index.py
from types import MappingProxyType

from bible_loader import TESTAMENTS, normalize, sorted_keys

# Common abbreviations that are not prefixes of the book's own name.
MANUAL_ALIASES = {
    "mt": "matthew",
    "mk": "mark",
    "lk": "luke",
    "jn": "john",
    "php": "philippians",
}


def build_book_index(bible):
    """
    Map every lowercase, space-stripped book prefix to its absolute path.

    Testaments are walked OT then NT and books in sorted order; the first
    book to reach a prefix keeps it. Manual aliases are applied last and
    override whatever prefix owner they collide with.
    """
    index = {}
    paths_by_key = {}
    for testament in TESTAMENTS:
        index[testament.lower()] = "/" + testament
        for name in sorted_keys(bible.testament(testament)):
            full_path = f"/{testament}/{name}"
            clean_key = normalize(name)
            paths_by_key.setdefault(clean_key, full_path)
            for i in range(1, len(clean_key) + 1):
                index.setdefault(clean_key[:i], full_path)

    for alias, book_key in MANUAL_ALIASES.items():
        if book_key in paths_by_key:
            index[alias] = paths_by_key[book_key]
    return MappingProxyType(index)


def split_path(path):
    """'/NT/1 John' -> ['NT', '1 John']; '/' -> []."""
    return [part for part in path.strip("/").split("/") if part]
