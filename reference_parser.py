# reference_parser.py
"""
Free-form reading references: "john 3:16-18, 20", "1 cor 13", "3:16 + rom 8:28".

Parsing never raises on user input. Every segment resolves to a location
plus one of the result objects below, which console.py knows how to print.
"""
import re
from dataclasses import dataclass, field
from typing import List, Optional

from bible_loader import sorted_keys
from book_index import split_path

# Only these exact spellings separate references; "And" stays part of the text.
MULTI_REF_SPLIT = re.compile(r" (?:\+|and|AND) ")
VERSE_NUMBER = re.compile(r"[0-9]+")


@dataclass
class VerseLine:
    number: str
    text: str


@dataclass
class EndOfChapter:
    pass


@dataclass
class VerseNotFound:
    verse: str


@dataclass
class InvalidRange:
    segment: str


@dataclass
class Reading:
    book: str
    chapter: str
    selector: str
    lines: list = field(default_factory=list)


@dataclass
class BookListing:
    book: str
    chapters: List[str]


@dataclass
class ReadFailure:
    reason: str  # "no_book" or "chapter_not_found"
    detail: str = ""


@dataclass
class ResolvedReference:
    location: List[str]
    jumped: bool
    result: object


def split_references(text: str) -> List[str]:
    return [part.strip() for part in MULTI_REF_SPLIT.split(text) if part.strip()]


def match_book(tokens, book_index):
    """
    Greedy multi-token book match.

    Concatenates lowercased tokens left to right and keeps the longest run
    that is a book index key. Returns (path, tokens_consumed), or (None, 0).
    """
    best_path, consumed = None, 0
    key = ""
    for i, token in enumerate(tokens, start=1):
        key += token.lower()
        path = book_index.get(key)
        if path is not None:
            best_path, consumed = path, i
    return best_path, consumed


def parse_verse_selector(selector, chapter):
    """
    Expand "16-18, 20" against one chapter.

    Ranges stop at the first missing verse with an EndOfChapter marker;
    a missing single verse or a non-numeric range is reported and the
    next comma segment is still read.
    """
    lines = []
    for raw in selector.split(","):
        segment = raw.strip()
        if not segment:
            continue
        if "-" in segment:
            start_text, _, end_text = segment.partition("-")
            start_text, end_text = start_text.strip(), end_text.strip()
            if not (VERSE_NUMBER.fullmatch(start_text) and VERSE_NUMBER.fullmatch(end_text)):
                lines.append(InvalidRange(segment))
                continue
            start, end = int(start_text), int(end_text)
            for number in range(start, end + 1):
                text = chapter.get(str(number))
                if text is None:
                    lines.append(EndOfChapter())
                    break
                lines.append(VerseLine(str(number), text))
            continue
        text = chapter.get(segment)
        if text is None:
            lines.append(VerseNotFound(segment))
        else:
            lines.append(VerseLine(segment, text))
    return lines


def whole_chapter(chapter):
    return [VerseLine(key, chapter[key]) for key in sorted_keys(chapter)]


class ReferenceParser:
    def __init__(self, bible, book_index):
        self.bible = bible
        self.book_index = book_index

    def _is_local(self, token, location):
        # At book depth a bare chapter number beats a one-token book
        # prefix such as "1" -> "1 Chronicles".
        if len(location) != 2:
            return False
        book = self.bible.get_book(location[0], location[1])
        return book is not None and token.lower() in book

    def resolve_target(self, segment, location):
        """
        Decide where one reference segment reads from.

        Returns (location, remaining_text, jumped).
        """
        tokens = segment.split()
        if not tokens:
            return list(location), "", False

        path, consumed = match_book(tokens, self.book_index)
        if path is not None:
            if consumed > 1 or not self._is_local(tokens[0], location):
                return split_path(path), " ".join(tokens[consumed:]), True
        return list(location), segment, False

    def read(self, location, args):
        if len(location) < 2:
            return ReadFailure("no_book")
        testament, book_name = location[0], location[1]
        book = self.bible.get_book(testament, book_name)
        if book is None:
            return ReadFailure("no_book")

        if len(location) == 2:
            tokens = args.replace(":", " ").split()
            if not tokens:
                return BookListing(book_name, sorted_keys(book))
            chapter_key, selector = tokens[0], " ".join(tokens[1:])
        else:
            chapter_key, selector = location[2], args.strip()

        chapter = book.get(chapter_key)
        if chapter is None:
            return ReadFailure("chapter_not_found", chapter_key)
        if not selector:
            return Reading(book_name, chapter_key, "", whole_chapter(chapter))
        return Reading(book_name, chapter_key, selector, parse_verse_selector(selector, chapter))

    def parse(self, text, location) -> List[ResolvedReference]:
        """
        Resolve every reference in `text`, left to right.

        Each segment starts from where the previous one landed, so
        "john 3:16 + 17" reads John 3:16 and then all of John 17.
        """
        location = list(location)
        resolved = []
        for segment in split_references(text) or [""]:
            location, rest, jumped = self.resolve_target(segment, location)
            resolved.append(ResolvedReference(location, jumped, self.read(location, rest)))
        return resolved

    def final_location(self, resolved: List[ResolvedReference]) -> Optional[List[str]]:
        """Location the last jump landed on, or None if nothing jumped."""
        jumps = [ref.location for ref in resolved if ref.jumped]
        return jumps[-1] if jumps else None
