"""CLI / terminal mode for the name-frequency index."""

from __future__ import annotations

import argparse
import logging

from namefreq.constants import KEY_FIELD_WIDTH
from namefreq.dataset import NameDataset
from namefreq.trie import format_entry

log = logging.getLogger("namefreq")


def show_lookup(dataset: NameDataset, name: str) -> None:
    record = dataset.lookup(name)
    if record is None:
        print(f"  '{name}' not found.")
    else:
        print("  " + format_entry(name.strip().lower(), record, dataset.width))


def show_completions(dataset: NameDataset, text: str) -> None:
    lines = dataset.complete(text)
    for line in lines:
        print("  " + line)
    print(f"  {len(lines)} name(s) starting with '{text}'.")


def print_help() -> None:
    print("Commands:")
    print("  find NAME       -- frequencies recorded for NAME   (e.g. find sam)")
    print("  starts TEXT     -- names longer than TEXT that start with it")
    print("  TEXT            -- same as 'starts TEXT'")
    print("  help            -- show this list")
    print("  quit            -- leave")
    print()


def run_cli(dataset: NameDataset) -> None:
    """Interactive query prompt."""
    print("\n" + "=" * 60)
    print(f"  NAME FREQUENCIES -- {len(dataset):,} names from {dataset.source}")
    print("=" * 60)
    print()
    print_help()

    while True:
        try:
            inp = input("  name> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp:
            continue
        parts = inp.split(maxsplit=1)
        cmd = parts[0].lower()
        if cmd in ("quit", "exit"):
            break
        if cmd == "help":
            print_help()
        elif cmd == "find":
            if len(parts) < 2:
                print("  Format: find NAME")
                continue
            show_lookup(dataset, parts[1])
        elif cmd == "starts":
            if len(parts) < 2:
                print("  Format: starts TEXT")
                continue
            show_completions(dataset, parts[1])
        else:
            show_completions(dataset, inp)


# Entry point

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Name frequency index -- look up names and list completions by prefix",
    )
    parser.add_argument("--data", type=str, default=None,
                        help="Path to a name,gender,count dataset file")
    parser.add_argument("--width", type=int, default=KEY_FIELD_WIDTH,
                        help="Width of the name column in listings")
    parser.add_argument("--search", action="append", default=[], metavar="NAME",
                        help="Look up NAME and exit (repeatable)")
    parser.add_argument("--prefix", action="append", default=[], metavar="TEXT",
                        help="List names starting with TEXT and exit (repeatable)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    dataset = NameDataset(args.data, width=args.width)

    if not args.search and not args.prefix:
        run_cli(dataset)
        return

    for name in args.search:
        show_lookup(dataset, name)
    for text in args.prefix:
        show_completions(dataset, text)


if __name__ == "__main__":
    main()
