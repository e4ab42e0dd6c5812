"""Custom exceptions for Flashcard App."""

from .base import FlashcardAppException
from .lookup import LookupServiceError
from .storage import DeckNotFoundError, DeckStorageError

__all__ = [
    "FlashcardAppException",
    "DeckStorageError",
    "DeckNotFoundError",
    "LookupServiceError",
]
