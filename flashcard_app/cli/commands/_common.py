"""Helpers shared by CLI commands."""

from flashcard_app.config import FlashcardConfig, create_default_config


def config_from_args(args, **overrides) -> FlashcardConfig:
    """Create a config honouring the global --data-dir option."""
    data_dir = getattr(args, "data_dir", None)
    if data_dir:
        overrides["data_dir"] = data_dir
    return create_default_config(**overrides)
