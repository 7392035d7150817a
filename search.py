# search.py
import re
from dataclasses import dataclass

from bible_loader import TESTAMENTS, sorted_keys


@dataclass
class SearchHit:
    book: str
    chapter: str
    verse: str
    text: str
    start: int  # span of the first match in text
    end: int

    @property
    def reference(self):
        return f"{self.book} {self.chapter}:{self.verse}"


def clean_query(query: str) -> str:
    return query.replace('"', "").lower()


def _search_chapter(book, chapter_key, chapter, pattern):
    for verse in sorted_keys(chapter):
        text = chapter[verse]
        match = pattern.search(text)
        if match:
            yield SearchHit(book, chapter_key, verse, text, match.start(), match.end())


def _search_book(book_name, book, pattern):
    for chapter_key in sorted_keys(book):
        yield from _search_chapter(book_name, chapter_key, book[chapter_key], pattern)


def _search_testament(testament, pattern):
    for book_name in sorted_keys(testament):
        yield from _search_book(book_name, testament[book_name], pattern)


def search(bible, location, query):
    """
    Case-insensitive substring search scoped by how deep `location` is:
    whole corpus, one testament, one book, or one chapter.
    """
    query = clean_query(query)
    if not query:
        return []
    pattern = re.compile(re.escape(query), re.IGNORECASE)
    depth = len(location)
    if depth == 0:
        return [hit for t in TESTAMENTS for hit in _search_testament(bible.testament(t), pattern)]
    if depth == 1:
        return list(_search_testament(bible.testament(location[0]), pattern))
    book = bible.get_book(location[0], location[1])
    if book is None:
        return []
    if depth == 2:
        return list(_search_book(location[1], book, pattern))
    chapter = book.get(location[2])
    if chapter is None:
        return []
    return list(_search_chapter(location[1], location[2], chapter, pattern))
