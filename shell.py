# shell.py
import random

import console
from book_index import build_book_index
from bookmarks import BookmarkStore
from bible_loader import TESTAMENTS, sorted_keys
from navigator import Navigator
from reference_parser import ReferenceParser
from search import clean_query, search


class BibleShell:
    def __init__(self, bible, bookmark_file=None, rng=None):
        self.bible = bible
        self.book_index = build_book_index(bible)
        self.nav = Navigator(bible, self.book_index)
        self.parser = ReferenceParser(bible, self.book_index)
        self.bookmarks = BookmarkStore(bookmark_file)
        self.rng = rng or random.Random()
        self.running = True

        self.commands = {
            "exit": self.do_exit,
            "quit": self.do_exit,
            "ls": self.do_ls,
            "ll": self.do_ls,
            "pwd": self.do_pwd,
            "cd": self.do_cd,
            "cat": self.do_cat,
            "read": self.do_cat,
            "grep": self.do_grep,
            "search": self.do_grep,
            "mark": self.do_mark,
            "goto": self.do_goto,
            "jump": self.do_goto,
            "marks": self.do_marks,
            "manna": self.do_manna,
            "random": self.do_manna,
            "help": self.do_help,
            "clear": self.do_clear,
            "cls": self.do_clear,
        }

    @property
    def location(self):
        return self.nav.location

    def path_string(self):
        return self.nav.path_string()

    def run_command(self, line: str) -> bool:
        """Run one input line. Returns False once the shell should stop."""
        parts = line.split()
        if not parts:
            return self.running
        cmd, args = parts[0], " ".join(parts[1:])
        name = cmd.lower()
        handler = self.commands.get(name)
        if handler is not None:
            handler(args)
        elif name[0].isdigit():
            # "3:16" or "1 cor 13" read without typing cat
            self.do_cat(" ".join(parts))
        else:
            print(f"Command '{cmd}' not found.")
        return self.running

    # --- navigation ---

    def do_cd(self, arg):
        if arg in ("", "/"):
            self.nav.absolute_move("/")
            return
        if arg == "-":
            if not self.nav.swap_to_previous():
                console.error("No history.")
            return
        if arg == "..":
            self.nav.step_out()
            return
        if arg.startswith("/"):
            failed = self.nav.absolute_move(arg)
            if failed is not None:
                console.error(f"❌ Path element '{failed}' not found.")
            return
        if not self.nav.change_directory(arg):
            self._not_found("Path", arg)

    def _not_found(self, kind, token):
        console.error(f"❌ {kind} '{token}' not found.")
        suggestion = self.bible.suggest_book(token)
        if suggestion:
            print(f"   Did you mean '{suggestion}'?")

    def do_ls(self, _args=""):
        loc = self.nav.location
        if not loc:
            console.render_root()
        elif len(loc) == 1:
            console.render_dirs("Books", self.bible.children(loc))
        elif len(loc) == 2:
            console.render_dirs("Chapters", self.bible.children(loc))
        else:
            result = self.parser.read(loc, "")
            console.render_chapter(result.chapter, result.lines)

    def do_pwd(self, _args=""):
        print(self.path_string())

    # --- reading ---

    def do_cat(self, args):
        resolved = self.parser.parse(args, self.nav.location)
        target = self.parser.final_location(resolved)
        if target is not None and target != self.nav.location:
            self.nav.jump_to("/" + "/".join(target))
        for ref in resolved:
            console.render_result(ref.result)

    def do_grep(self, args):
        if not args:
            print("Usage: grep <word>")
            return
        query = clean_query(args)
        print(console.paint("gray", f"Searching for '{query}'..."))
        hits = search(self.bible, self.nav.location, query)
        console.render_search(query, hits)

    # --- bookmarks ---

    def do_mark(self, name):
        if not name:
            print("Usage: mark <name>")
            return
        path = self.path_string()
        self.bookmarks.mark(name, path)
        print(console.paint("green", f"Marked '{name}' at {path}"))

    def do_goto(self, name):
        target = self.bookmarks.get(name)
        if target is None:
            console.error(f"Bookmark '{name}' not found.")
            return
        if not self.nav.jump_to(target):
            console.error(f"Bookmark '{name}' points to missing path {target}.")

    def do_marks(self, _args=""):
        console.render_bookmarks(self.bookmarks.items())

    # --- tools ---

    def random_verse(self):
        """Pick each level uniformly: testament, then book, chapter, verse."""
        node = self.bible.testament(self.rng.choice(TESTAMENTS))
        picked = []
        for _ in range(3):
            if not node:
                return None
            key = self.rng.choice(sorted_keys(node))
            picked.append(key)
            node = node[key]
        return (*picked, node)

    def do_manna(self, _args=""):
        picked = self.random_verse()
        if picked is None:
            console.error("No verses loaded.")
            return
        console.render_random(*picked)

    def do_help(self, _args=""):
        console.print_help()

    def do_clear(self, _args=""):
        console.clear_screen()

    def do_exit(self, _args=""):
        self.running = False
