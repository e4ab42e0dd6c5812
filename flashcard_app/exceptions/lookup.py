"""Word lookup exceptions."""

from .base import FlashcardAppException


class LookupServiceError(FlashcardAppException):
    """Raised when the lookup service cannot be configured or reached."""

    pass
