"""Deck storage related exceptions."""

from .base import FlashcardAppException


class DeckStorageError(FlashcardAppException):
    """Raised when decks cannot be written or imported."""

    pass


class DeckNotFoundError(FlashcardAppException):
    """Raised when a named deck does not exist."""

    pass
