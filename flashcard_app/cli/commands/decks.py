"""CLI commands for managing decks."""

from pathlib import Path

from flashcard_app.cli.commands._common import config_from_args
from flashcard_app.exceptions import FlashcardAppException
from flashcard_app.presenters import ConsolePresenter
from flashcard_app.services import DeckService


def list_command(args) -> int:
    """Execute the decks subcommand.

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    deck_service = DeckService(config_from_args(args))

    decks = deck_service.load()
    if not decks:
        presenter.show_info("No decks yet. Add one with 'flashcard-app add <deck> <front> <back>'")
        return 0

    presenter.show_info(f"Decks ({len(decks)}):")
    for deck in decks:
        valid = len(deck.valid_cards())
        presenter.show_info(f"  {deck.name:30s} {valid} card(s)")
    return 0


def add_command(args) -> int:
    """Execute the add subcommand.

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    deck_service = DeckService(config_from_args(args))

    if not args.front.strip() and not args.back.strip():
        presenter.show_error("A card needs a front or a back")
        return 1

    try:
        deck_service.add_card(args.deck, args.front, args.back)
    except FlashcardAppException as e:
        presenter.show_error(f"Error: {e}")
        return 1

    presenter.show_info(f"Added card to '{args.deck}'")
    return 0


def import_command(args) -> int:
    """Execute the import subcommand.

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()
    deck_service = DeckService(config_from_args(args))

    csv_file = Path(args.csv_file)
    if not csv_file.exists():
        presenter.show_error(f"CSV file not found: {csv_file}")
        return 1

    try:
        count = deck_service.import_csv(args.deck, csv_file)
    except FlashcardAppException as e:
        presenter.show_error(f"Error: {e}")
        return 1

    presenter.show_info(f"Imported {count} card(s) into '{args.deck}'")
    return 0
