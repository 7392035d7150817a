# bookmarks.py
import json
import os
import tempfile
from pathlib import Path

import config


class BookmarkStore:
    """Name -> absolute path, rewritten in full on every save."""

    def __init__(self, path=None):
        self.path = Path(path or config.BOOKMARK_FILE)
        self.marks = self.load()

    def load(self):
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, ValueError) as e:
            print(f"[bookmarks] Could not read {self.path}: {e}")
            return {}
        if not isinstance(raw, dict):
            print(f"[bookmarks] Ignoring {self.path}: expected an object")
            return {}
        return {str(name): str(path) for name, path in raw.items()}

    def save(self):
        # the old file stays intact until the new one is fully written
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=self.path.name, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self.marks, f, indent=2)
            os.replace(tmp_name, self.path)
        except (OSError, TypeError, ValueError) as e:
            print(f"[bookmarks] Could not write {self.path}: {e}")
            if tmp_name is not None and os.path.exists(tmp_name):
                os.remove(tmp_name)
            return False
        return True

    def mark(self, name, path):
        self.marks[name] = path
        return self.save()

    def get(self, name):
        return self.marks.get(name)

    def items(self):
        return sorted(self.marks.items())
