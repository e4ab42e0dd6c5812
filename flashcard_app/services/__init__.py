"""Business logic services for Flashcard App."""

from .deck_editor import DeckEditor, combine_definitions
from .deck_service import DeckService
from .dictionary_service import DictionaryService
from .rate_limiter import RateLimiter
from .study_session import StudySession
from .study_stats import SessionClock, build_stats
from .word_cache_service import WordCacheService

__all__ = [
    "DeckEditor",
    "combine_definitions",
    "DeckService",
    "DictionaryService",
    "RateLimiter",
    "StudySession",
    "SessionClock",
    "build_stats",
    "WordCacheService",
]
