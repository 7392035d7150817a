# main.py
import sys

import config
import console
from bible_loader import BibleLoadError, load_bible
from shell import BibleShell


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    try:
        bible = load_bible(config.DATA_PATH)
    except BibleLoadError as e:
        console.error(f"CRITICAL: {e}")
        return 1

    app = BibleShell(bible)

    # One-shot mode: bible-shell cat john 3:16
    if argv:
        app.run_command(" ".join(argv))
        return 0

    console.print_header()
    while app.running:
        try:
            user_input = input(console.prompt(app.path_string()))
        except (EOFError, KeyboardInterrupt):
            print()
            break
        app.run_command(user_input)
    print("👋 Goodbye. May your study be blessed.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
