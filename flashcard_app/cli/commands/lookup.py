"""CLI command for looking up word translations."""

from flashcard_app.cli.commands._common import config_from_args
from flashcard_app.exceptions import FlashcardAppException
from flashcard_app.interfaces import DictionaryProvider
from flashcard_app.presenters import ConsolePresenter
from flashcard_app.services import DeckService, DictionaryService, combine_definitions


def lookup_command(args, provider: DictionaryProvider | None = None) -> int:
    """Execute the lookup subcommand.

    Args:
        args: Parsed command-line arguments
        provider: Lookup backend (defaults to DictionaryService)

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    config = config_from_args(args)
    presenter = ConsolePresenter()
    provider = provider or DictionaryService(config)

    result = provider.lookup(args.word)
    if not result.success:
        presenter.show_error(result.error_message)
        return 1

    presenter.show_info(f"{result.word}:")
    for definition in result.definitions:
        presenter.show_info(f"  {definition.display_text}")

    if args.add_to:
        try:
            DeckService(config).add_card(
                args.add_to, result.word, combine_definitions(result.definitions)
            )
        except FlashcardAppException as e:
            presenter.show_error(f"Error: {e}")
            return 1
        presenter.show_info(f"Added '{result.word}' to '{args.add_to}'")

    return 0
