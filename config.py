# config.py
import os

# Defaults (you can override with env vars)
DATA_PATH = os.getenv("BIBLE_DATA", "./bible/bible.json")
BOOKMARK_FILE = os.getenv("BIBLE_BOOKMARKS", os.path.expanduser("~/.bible_bookmarks"))
FUZZY_THRESHOLD = int(os.getenv("BIBLE_FUZZY_THRESHOLD", "70"))
USE_COLOR = not os.getenv("NO_COLOR")
