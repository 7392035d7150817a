"""End-to-end tests through BibleShell.run_command."""

import random

import pytest

from shell import BibleShell


def run(shell, capsys, command):
    shell.run_command(command)
    return capsys.readouterr().out


class TestNavigation:
    """cd in its different forms."""

    @pytest.mark.parametrize("start, command, expected", [
        ([], "cd ot", "/OT"),
        ([], "cd nt", "/NT"),
        (["OT"], "cd gen", "/OT/Genesis"),
        (["OT", "Genesis"], "cd 1", "/OT/Genesis/1"),
        (["OT", "Genesis"], "cd ..", "/OT"),
        (["OT", "Genesis", "1"], "cd /", "/"),
        (["OT", "Genesis", "1"], "cd", "/"),
        (["OT"], "cd john", "/NT/John"),
        ([], "cd 1john", "/NT/1 John"),
        ([], "cd 1 john", "/NT/1 John"),
        ([], "cat john 3:16", "/NT/John"),
        (["NT", "Matthew"], "cat 1", "/NT/Matthew"),
        (["OT"], "cd fakebook", "/OT"),
        ([], "CD /nt/john/3", "/NT/John/3"),
    ])
    def test_moves(self, shell, start, command, expected):
        shell.nav.location = list(start)
        shell.run_command(command)
        assert shell.path_string() == expected

    def test_failed_absolute_path(self, shell, capsys):
        shell.nav.location = ["OT", "Genesis"]
        out = run(shell, capsys, "cd /NT/Jude/1")
        assert "Path element 'Jude' not found." in out
        assert shell.location == ["OT", "Genesis"]

    def test_not_found_suggests(self, shell, capsys):
        out = run(shell, capsys, "cd mathew")
        assert "Path 'mathew' not found." in out
        assert "Did you mean 'Matthew'?" in out
        assert shell.location == []

    def test_undo(self, shell, capsys):
        shell.run_command("cd /OT/Genesis")
        shell.run_command("cd -")
        assert shell.path_string() == "/"
        shell.run_command("cd -")
        assert shell.path_string() == "/OT/Genesis"

    def test_undo_without_history(self, shell, capsys):
        out = run(shell, capsys, "cd -")
        assert "No history." in out
        assert shell.location == []

    def test_undo_after_read_jump(self, shell):
        shell.nav.location = ["OT", "Exodus"]
        shell.run_command("cat jn 3:16")
        shell.run_command("cd -")
        assert shell.path_string() == "/OT/Exodus"

    def test_pwd(self, shell, capsys):
        shell.nav.location = ["NT", "1 John"]
        assert run(shell, capsys, "pwd").strip() == "/NT/1 John"


class TestReading:
    """cat / read."""

    def test_single_verse(self, shell, capsys):
        shell.nav.location = ["NT", "John"]
        out = run(shell, capsys, "cat 3:16")
        assert "Reading John 3:16" in out
        assert " 16: For God so loved..." in out

    def test_multi_reference(self, shell, capsys):
        out = run(shell, capsys, "cat Genesis 1:1 + John 3:16")
        assert "In the beginning" in out
        assert "For God so loved" in out
        assert shell.path_string() == "/NT/John"

    def test_range_past_end(self, shell, capsys):
        shell.nav.location = ["NT", "John"]
        out = run(shell, capsys, "cat 3:16-18")
        assert out.index("For God so loved") < out.index("For God sent not") < out.index("(End of chapter)")

    def test_invalid_range(self, shell, capsys):
        shell.nav.location = ["NT", "John"]
        out = run(shell, capsys, "read 3:16-bad")
        assert "Invalid range: 16-bad" in out
        assert shell.location == ["NT", "John"]

    def test_missing_verse(self, shell, capsys):
        shell.nav.location = ["NT", "John"]
        assert "Verse 99 not found." in run(shell, capsys, "cat 3:99")

    def test_missing_chapter(self, shell, capsys):
        shell.nav.location = ["NT", "John"]
        assert "Chapter 99 not found." in run(shell, capsys, "cat 99")

    def test_whole_chapter(self, shell, capsys):
        shell.nav.location = ["NT", "John", "3"]
        out = run(shell, capsys, "cat")
        assert "── Reading 3 ──" in out
        assert "For God sent not" in out

    def test_book_lists_chapters(self, shell, capsys):
        shell.nav.location = ["NT", "John"]
        out = run(shell, capsys, "cat")
        assert "── Chapters ──" in out
        assert "DIR  3" in out

    def test_needs_book(self, shell, capsys):
        assert "Select a book first." in run(shell, capsys, "cat 3:16")

    def test_implicit_cat(self, shell, capsys):
        shell.nav.location = ["NT", "John"]
        assert "For God so loved" in run(shell, capsys, "3:16")

    def test_implicit_cat_with_book(self, shell, capsys):
        out = run(shell, capsys, "1 john 1:1")
        assert "That which was from the beginning" in out
        assert shell.path_string() == "/NT/1 John"


class TestListing:
    """ls at each depth."""

    def test_root(self, shell, capsys):
        out = run(shell, capsys, "ls")
        assert "OT" in out and "NT" in out

    def test_testament(self, shell, capsys):
        shell.nav.location = ["NT"]
        out = run(shell, capsys, "ll")
        assert out.index("DIR  1 John") < out.index("DIR  John") < out.index("DIR  Matthew")

    def test_chapter(self, shell, capsys):
        shell.nav.location = ["NT", "John", "3"]
        out = run(shell, capsys, "ls")
        assert " 16: For God so loved..." in out


class TestGrep:
    """Scoped search output."""

    def test_root_scope(self, shell, capsys):
        out = run(shell, capsys, "grep the")
        assert "[Genesis 1:1]" in out
        assert "[Matthew 1:1]" in out
        assert "Found 4 matches." in out

    def test_testament_scope(self, shell, capsys):
        shell.nav.location = ["OT"]
        out = run(shell, capsys, "search the")
        assert "[Genesis 1:1]" in out
        assert "[Matthew 1:1]" not in out

    def test_book_scope(self, shell, capsys):
        shell.nav.location = ["NT", "Matthew"]
        out = run(shell, capsys, "grep book")
        assert "[Matthew 1:1] The book of the generation..." in out

    def test_no_matches(self, shell, capsys):
        assert "No matches." in run(shell, capsys, "grep zebra")

    def test_usage(self, shell, capsys):
        assert "Usage: grep <word>" in run(shell, capsys, "grep")


class TestBookmarks:
    """mark / goto / marks."""

    def test_mark_and_jump(self, shell, capsys):
        shell.nav.location = ["OT", "Genesis"]
        shell.run_command("mark testgen")
        shell.run_command("cd /")
        shell.run_command("jump testgen")
        assert shell.path_string() == "/OT/Genesis"

    def test_jump_is_undoable(self, shell):
        shell.nav.location = ["OT", "Genesis"]
        shell.run_command("mark g")
        shell.nav.location = ["NT"]
        shell.run_command("goto g")
        shell.run_command("cd -")
        assert shell.path_string() == "/NT"

    def test_persisted(self, shell, bible, bookmark_file):
        shell.nav.location = ["NT", "John", "3"]
        shell.run_command("mark love")
        fresh = BibleShell(bible, bookmark_file=bookmark_file)
        fresh.run_command("goto love")
        assert fresh.path_string() == "/NT/John/3"

    def test_unknown(self, shell, capsys):
        assert "Bookmark 'nope' not found." in run(shell, capsys, "goto nope")

    def test_list(self, shell, capsys):
        assert "(No bookmarks yet)" in run(shell, capsys, "marks")
        shell.run_command("mark root")
        assert "/" in run(shell, capsys, "marks").split("->")[-1]

    def test_mark_usage(self, shell, capsys):
        assert "Usage: mark <name>" in run(shell, capsys, "mark")


class FirstChoice:
    """Stand-in rng that always picks the first candidate."""

    def choice(self, seq):
        return seq[0]


class TestManna:
    """Random verse."""

    def test_levels_picked_in_order(self, bible, bookmark_file):
        app = BibleShell(bible, bookmark_file=bookmark_file, rng=FirstChoice())
        assert app.random_verse() == ("Exodus", "1", "1", "Now these are the names...")

    def test_verse_exists(self, bible, bookmark_file, capsys):
        app = BibleShell(bible, bookmark_file=bookmark_file, rng=random.Random(7))
        for _ in range(20):
            testament_books = {**bible.testament("OT"), **bible.testament("NT")}
            book, chapter, verse, text = app.random_verse()
            assert testament_books[book][chapter][verse] == text
        app.run_command("manna")
        assert "[Random]" in capsys.readouterr().out


class TestDispatch:

    def test_unknown_command(self, shell, capsys):
        assert "Command 'frobnicate' not found." in run(shell, capsys, "frobnicate")

    def test_exit(self, shell):
        assert shell.run_command("exit") is False
        assert shell.running is False

    def test_blank_line(self, shell, capsys):
        assert shell.run_command("   ") is True
        assert capsys.readouterr().out == ""

    def test_help(self, shell, capsys):
        out = run(shell, capsys, "help")
        assert "NAVIGATION" in out and "grep <word>" in out
