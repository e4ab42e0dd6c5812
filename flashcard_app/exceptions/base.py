"""Base exception classes for Flashcard App."""


class FlashcardAppException(Exception):
    """Base exception for all Flashcard App errors.

    All custom exceptions in the flashcard_app package should inherit
    from this base class for consistent error handling.
    """

    pass
