"""CLI / terminal mode for prefixtrie."""

from __future__ import annotations

import argparse
import logging

from prefixtrie.wordlist import WordList

log = logging.getLogger("prefixtrie")


def _yes_no(found: bool) -> str:
    return "yes" if found else "no"


def print_usage() -> None:
    print("Commands:")
    print("  add WORD        -- insert a word")
    print("  word WORD       -- is WORD a full inserted word?")
    print("  prefix PREFIX   -- does any word start with PREFIX?")
    print("  help            -- show this list")
    print("  quit            -- leave")


def run_queries(word_list: WordList, words: list[str], prefixes: list[str]) -> None:
    """Answer one-shot queries given on the command line."""
    for w in words:
        print(f"word   {w!r}: {_yes_no(word_list.is_valid(w))}")
    for p in prefixes:
        print(f"prefix {p!r}: {_yes_no(word_list.has_prefix(p))}")


def run_cli(word_list: WordList) -> None:
    """Interactive query loop on the terminal."""
    print("\n" + "=" * 60)
    print("  PREFIXTRIE -- Word / Prefix Lookup")
    print("=" * 60)
    print(f"  {len(word_list):,} words loaded.")
    print()
    print_usage()
    print()

    while True:
        try:
            inp = input("  trie> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp:
            continue

        parts = inp.split(maxsplit=1)
        cmd = parts[0].lower()
        arg = parts[1].strip() if len(parts) > 1 else ""
        if cmd == "quit":
            break
        if cmd == "help":
            print_usage()
            continue

        if cmd == "add" and arg:
            word_list.add(arg)
            log.debug("Inserted %r", arg)
            print(f"  Added {arg!r}")
        elif cmd == "word":
            print(f"  {_yes_no(word_list.is_valid(arg))}")
        elif cmd == "prefix":
            print(f"  {_yes_no(word_list.has_prefix(arg))}")
        else:
            print("  Format: add WORD | word WORD | prefix PREFIX | help | quit")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="prefixtrie -- exact-word and prefix lookups over a word list",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to word list file (one word per line)")
    parser.add_argument("--word", action="append", default=[],
                        help="Check a full word and exit (repeatable)")
    parser.add_argument("--prefix", action="append", default=[],
                        help="Check a prefix and exit (repeatable)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    word_list = WordList(args.dict)

    if args.word or args.prefix:
        run_queries(word_list, args.word, args.prefix)
        return

    run_cli(word_list)


if __name__ == "__main__":
    main()
