# navigator.py
from bible_loader import normalize
from book_index import split_path


class Navigator:
    """
    Current location in the Testament -> Book -> Chapter tree.

    Every move is validated before it is committed, so `location` never
    points at something missing from the corpus. `previous` is only
    recorded for jumps (absolute cd, teleport, bookmark), which makes
    `cd -` undo big moves and not single relative steps.
    """

    def __init__(self, bible, book_index):
        self.bible = bible
        self.book_index = book_index
        self.location = []
        self.previous = None

    def path_string(self):
        return "/" + "/".join(self.location)

    def remember(self):
        self.previous = list(self.location)

    # --- relative moves ---

    def step_out(self):
        if self.location:
            self.location.pop()

    def _child_for(self, location, token):
        """Segment that `token` names below `location`, or None."""
        depth = len(location)
        if depth == 0:
            clean = token.lower()
            return clean.upper() if clean in ("ot", "nt") else None
        if depth == 1:
            return self.bible.book_key(location[0], token)
        if depth == 2:
            book = self.bible.get_book(location[0], location[1])
            if book is not None and token in book:
                return token
        return None

    def step_in(self, token):
        child = self._child_for(self.location, token)
        if child is None:
            return False
        self.location.append(child)
        return True

    # --- jumps ---

    def _walk(self, path):
        target = []
        for part in split_path(path):
            child = self._child_for(target, part)
            if child is None:
                return None, part
            target.append(child)
        return target, None

    def absolute_move(self, path):
        """
        Walk `path` from the root one component at a time.

        Returns None on success, or the first component that could not be
        entered. A failed walk leaves both location and previous untouched.
        """
        target, failed = self._walk(path)
        if failed is not None:
            return failed
        self.remember()
        self.location = target
        return None

    def lookup(self, token):
        """Absolute path the book index holds for `token`, or None."""
        return self.book_index.get(normalize(token))

    def teleport(self, token):
        target = self.lookup(token)
        if target is None:
            return False
        return self.jump_to(target)

    def jump_to(self, path):
        # bookmarks may point at paths missing from the loaded corpus
        return self.absolute_move(path) is None

    def swap_to_previous(self):
        if self.previous is None:
            return False
        self.location, self.previous = self.previous, self.location
        return True

    def change_directory(self, token):
        """Local step first, then the global index. False if neither matched."""
        if self.step_in(token):
            return True
        return self.teleport(token)
