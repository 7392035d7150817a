# console.py
import config
from reference_parser import (
    BookListing,
    EndOfChapter,
    InvalidRange,
    ReadFailure,
    Reading,
    VerseLine,
    VerseNotFound,
)

# ANSI colors (blank when NO_COLOR is set)
_ANSI = {
    "reset": "\033[0m",
    "green": "\033[32m",
    "blue": "\033[34m",
    "yellow": "\033[33m",
    "cyan": "\033[36m",
    "red": "\033[31m",
    "gray": "\033[90m",
    "bold": "\033[1m",
}


def color(name):
    return _ANSI[name] if config.USE_COLOR else ""


def paint(name, text):
    return f"{color(name)}{text}{color('reset')}"


def error(message):
    print(paint("red", message))


def clear_screen():
    print("\033[H\033[2J", end="")


def print_header():
    clear_screen()
    print(paint("cyan", "╔══════════════════════════════════════╗\n"
                        "║            BIBLE SHELL               ║\n"
                        "╚══════════════════════════════════════╝"))
    print(f"{color('gray')}Type {paint('green', 'help')}{color('gray')} to see all commands.")
    print(f"Type {paint('green', 'manna')}{color('gray')} for a random verse.{color('reset')}")
    print()


def prompt(path_string):
    return f"{color('blue')}📖 {color('green')}{path_string} ${color('reset')} "


# --- listings ---

def render_root():
    print(paint("gray", "── Bible Root ──"))
    print(paint("blue", "OT  ") + "(Old Testament)")
    print(paint("blue", "NT  ") + "(New Testament)")


def render_dirs(title, keys):
    print(paint("gray", f"── {title} ──"))
    for key in keys:
        print(paint("blue", f"DIR  {key}"))


def verse_line(number, text):
    return f"{color('yellow')}{number:>3}: {color('reset')}{text}"


def render_chapter(chapter_key, lines):
    print(paint("gray", f"── Reading {chapter_key} ──"))
    for line in lines:
        print(verse_line(line.number, line.text))


# --- reading ---

def render_result(result):
    if isinstance(result, ReadFailure):
        if result.reason == "chapter_not_found":
            error(f"Chapter {result.detail} not found.")
        else:
            error("Error: Select a book first.")
        return
    if isinstance(result, BookListing):
        render_dirs("Chapters", result.chapters)
        return
    if isinstance(result, Reading) and not result.selector:
        render_chapter(result.chapter, result.lines)
        return

    print()
    print(paint("cyan", f"Reading {result.book} {result.chapter}:{result.selector}"))
    for line in result.lines:
        if isinstance(line, VerseLine):
            print(verse_line(line.number, line.text))
        elif isinstance(line, EndOfChapter):
            print(paint("gray", "     (End of chapter)"))
        elif isinstance(line, InvalidRange):
            error(f"Invalid range: {line.segment}")
        elif isinstance(line, VerseNotFound):
            error(f"Verse {line.verse} not found.")
    print()


# --- search ---

def highlight(hit):
    return hit.text[:hit.start] + paint("red", hit.text[hit.start:hit.end]) + hit.text[hit.end:]


def render_search(query, hits):
    for hit in hits:
        print(f"{paint('cyan', '[' + hit.reference + ']')} {highlight(hit)}")
    if not hits:
        print("No matches.")
    else:
        print(paint("gray", f"Found {len(hits)} matches."))


# --- bookmarks / misc ---

def render_bookmarks(items):
    print(paint("cyan", "══ Saved Bookmarks ══"))
    if not items:
        print("  (No bookmarks yet)")
    for name, path in items:
        print(f"  {color('yellow')}{name:<10}{color('reset')} -> {path}")


def render_random(book, chapter, verse, text):
    print()
    print(paint("cyan", f"[Random] {book} {chapter}:{verse}"))
    print(paint("bold", text))
    print()


HELP_SECTIONS = [
    ("NAVIGATION", [
        ("cd <book>", "Teleport (e.g. 'cd rom', 'cd 1 cor')"),
        ("cd <chapter>", "Enter chapter (e.g. 'cd 1')"),
        ("cd /OT/Genesis", "Absolute path"),
        ("cd ..", "Go back one level"),
        ("cd -", "Jump to previous location (Undo)"),
        ("ls", "List the current level"),
        ("pwd", "Show the current path"),
    ]),
    ("READING", [
        ("cat <ref>", "Read (e.g. 'cat 3:16', '3:16-18')"),
        ("cat <book...>", "Quick read (e.g. 'cat john 3:16')"),
        ("cat <a> + <b>", "Several passages (e.g. 'cat gen 1:1 + jn 1:1')"),
    ]),
    ("MEMORY", [
        ("mark <name>", "Save current spot"),
        ("goto <name>", "Jump to saved spot"),
        ("marks", "List all bookmarks"),
    ]),
    ("TOOLS", [
        ("grep <word>", "Search contextually"),
        ("manna", "Random verse"),
        ("clear", "Clear screen"),
        ("exit", "Quit"),
    ]),
]


def print_help():
    print()
    print(paint("cyan", "═══ BIBLE SHELL MANUAL ═══"))
    for title, rows in HELP_SECTIONS:
        print(paint("blue", f"\n[ {title} ]"))
        for usage, description in rows:
            print(f"  {paint('green', f'{usage:<16}')} {description}")
    print()
