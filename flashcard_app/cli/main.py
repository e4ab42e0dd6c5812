"""Main CLI entry point for flashcard_app."""

import argparse
import logging
import sys

from flashcard_app import __version__
from flashcard_app.cli.commands import decks, lookup, study


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="flashcard-app",
        description="Study flashcard decks and look up word translations",
        epilog="Use 'flashcard-app <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--data-dir", default=None, help="Directory holding decks and cache")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # flashcard-app decks
    subparsers.add_parser(
        "decks",
        help="List all decks",
        description="List stored decks with their card counts",
    )

    # flashcard-app add <deck> <front> <back>
    add_parser = subparsers.add_parser(
        "add",
        help="Add a card to a deck",
        description="Append a card to a deck, creating the deck if needed",
    )
    add_parser.add_argument("deck", help="Deck name")
    add_parser.add_argument("front", help="Front text")
    add_parser.add_argument("back", nargs="?", default="", help="Back text")

    # flashcard-app import <deck> <csv>
    import_parser = subparsers.add_parser(
        "import",
        help="Import cards from CSV",
        description="Import front/back pairs from a two-column CSV file",
    )
    import_parser.add_argument("deck", help="Deck name")
    import_parser.add_argument("csv_file", help="Path to CSV file")

    # flashcard-app study <deck>
    study_parser = subparsers.add_parser(
        "study",
        help="Study a deck",
        description="Review a deck in rounds until every card is known",
    )
    study_parser.add_argument("deck", help="Deck name")
    study_parser.add_argument("--seed", type=int, default=None, help="Seed for card order")
    study_parser.add_argument(
        "--back-first",
        action="store_true",
        help="Show the back of each card first",
    )

    # flashcard-app lookup <word>
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Look up a word translation",
        description="Look up an English word and translate each part of speech",
    )
    lookup_parser.add_argument("word", help="Word to look up")
    lookup_parser.add_argument(
        "--add-to",
        metavar="DECK",
        default=None,
        help="Add the word and its translations as a card to DECK",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to appropriate command
    if args.command == "decks":
        return decks.list_command(args)
    elif args.command == "add":
        return decks.add_command(args)
    elif args.command == "import":
        return decks.import_command(args)
    elif args.command == "study":
        return study.study_command(args)
    elif args.command == "lookup":
        return lookup.lookup_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
