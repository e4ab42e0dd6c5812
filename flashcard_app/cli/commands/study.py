"""CLI command for studying a deck in the terminal."""

import random

from flashcard_app.cli.commands._common import config_from_args
from flashcard_app.exceptions import FlashcardAppException
from flashcard_app.orchestration import StudyRunner
from flashcard_app.presenters import ConsolePresenter
from flashcard_app.services import DeckService


def study_command(args) -> int:
    """Execute the study subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = finished, 1 = failure or aborted)
    """
    overrides = {"show_back_first": args.back_first}
    if args.seed is not None:
        overrides["shuffle_seed"] = args.seed
    config = config_from_args(args, **overrides)
    presenter = ConsolePresenter()

    try:
        deck = DeckService(config).get_deck(args.deck)
    except FlashcardAppException as e:
        presenter.show_error(f"Error: {e}")
        return 1

    runner = StudyRunner(
        presenter,
        rng=random.Random(config.shuffle_seed),
        back_first=config.show_back_first,
    )
    stats = runner.run(deck)
    return 0 if stats is not None else 1
