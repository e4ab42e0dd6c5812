"""Data models for Flashcard App."""

from .card import Card, Deck
from .study import SessionState, StudyAction, StudyStats
from .word import WordDefinition, WordLookupResult

__all__ = [
    "Card",
    "Deck",
    "SessionState",
    "StudyAction",
    "StudyStats",
    "WordDefinition",
    "WordLookupResult",
]
