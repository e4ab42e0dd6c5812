"""Default configuration values for Flashcard App."""

from .config import FlashcardConfig


def create_default_config(**overrides) -> FlashcardConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        FlashcardConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            shuffle_seed=42,
            request_timeout=5.0
        )
    """
    return FlashcardConfig(**overrides)
