"""Interface protocols for Flashcard App."""

from .dictionary_provider import DictionaryProvider
from .presenter import StudyPresenterProtocol

__all__ = ["DictionaryProvider", "StudyPresenterProtocol"]
