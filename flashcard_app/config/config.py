"""Configuration classes for Flashcard App."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FlashcardConfig:
    """Immutable application configuration.

    Frozen so that services built from it cannot drift apart while a
    study session or lookup is in progress.
    """

    # Storage settings
    data_dir: Path = field(default_factory=lambda: Path.home() / ".flashcard_app")
    decks_filename: str = "flashcards.json"
    cache_filename: str = "word_cache.json"

    # Lookup settings
    datamuse_api_url: str = "https://api.datamuse.com/words"
    translate_api_url: str = "https://translate.googleapis.com/translate_a/single"
    source_language: str = "en"
    target_language: str = "zh-TW"
    request_timeout: float = 10.0  # Seconds per HTTP request
    max_requests_per_minute: int = 60
    user_agent: str = "FlashcardApp/1.0"

    # Cache settings
    cache_ttl_days: int = 30
    cache_max_entries: int = 5000

    # Study settings
    shuffle_seed: int | None = None  # None = non-deterministic order
    show_back_first: bool = False

    def __post_init__(self):
        """Convert string paths to Path objects if needed."""
        if isinstance(self.data_dir, str):
            object.__setattr__(self, "data_dir", Path(self.data_dir))

    @property
    def decks_path(self) -> Path:
        """Location of the deck storage file."""
        return self.data_dir / self.decks_filename

    @property
    def cache_path(self) -> Path:
        """Location of the word lookup cache file."""
        return self.data_dir / self.cache_filename
