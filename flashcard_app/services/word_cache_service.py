"""File-based cache for word lookup results."""

import json
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable

from flashcard_app.models import WordLookupResult

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WordCacheService:
    """Cache successful lookups in a JSON file to reduce API calls.

    Entries expire after ``ttl_days``; only the newest ``max_entries``
    are kept when the cache is loaded.
    """

    def __init__(
        self,
        cache_path: Path,
        ttl_days: int = 30,
        max_entries: int = 5000,
        now: Callable[[], datetime] = _utcnow,
    ):
        """Initialize the cache.

        Args:
            cache_path: JSON file holding cached entries
            ttl_days: Days before an entry expires
            max_entries: Maximum number of entries kept
            now: Function returning the current UTC time
        """
        self._cache_path = cache_path
        self._ttl = timedelta(days=ttl_days)
        self._max_entries = max_entries
        self._now = now
        self._cache: dict[str, dict] = {}
        self._loaded = False

    def get(self, word: str) -> WordLookupResult | None:
        """Get a cached result for a word, or None if missing or expired."""
        self._ensure_loaded()
        entry = self._cache.get(self._key(word))
        if entry is None or self._is_expired(entry):
            return None
        return WordLookupResult.from_dict(entry)

    def set(self, word: str, result: WordLookupResult) -> None:
        """Cache a result. Failed or empty results are ignored."""
        if not result.success or not result.definitions:
            return
        self._ensure_loaded()
        entry = result.to_dict()
        entry["cached_at"] = self._now().isoformat()
        self._cache[self._key(word)] = entry
        self._save()

    def clear(self) -> None:
        """Remove all cached entries and the cache file."""
        self._cache = {}
        self._loaded = True
        try:
            self._cache_path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Could not remove word cache: {e}")

    def stats(self) -> tuple[int, int]:
        """Get cache statistics.

        Returns:
            Tuple of (entry count, file size in KB)
        """
        self._ensure_loaded()
        size_kb = self._cache_path.stat().st_size // 1024 if self._cache_path.exists() else 0
        return len(self._cache), size_kb

    @staticmethod
    def _key(word: str) -> str:
        return word.strip().lower()

    def _cached_at(self, entry: dict) -> datetime:
        try:
            return datetime.fromisoformat(entry["cached_at"])
        except (KeyError, TypeError, ValueError):
            return datetime.min.replace(tzinfo=timezone.utc)

    def _is_expired(self, entry: dict) -> bool:
        return self._now() - self._cached_at(entry) > self._ttl

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return

        data: dict = {}
        if self._cache_path.exists():
            try:
                loaded = json.loads(self._cache_path.read_text(encoding="utf-8"))
                if isinstance(loaded, dict):
                    data = loaded
            except (json.JSONDecodeError, OSError) as e:
                logger.warning(f"Word cache unreadable, starting fresh: {e}")

        fresh = [
            (key, entry)
            for key, entry in data.items()
            if isinstance(entry, dict) and not self._is_expired(entry)
        ]
        fresh.sort(key=lambda item: self._cached_at(item[1]), reverse=True)
        self._cache = dict(fresh[: self._max_entries])
        self._loaded = True

    def _save(self) -> None:
        try:
            self._cache_path.parent.mkdir(parents=True, exist_ok=True)
            self._cache_path.write_text(
                json.dumps(self._cache, ensure_ascii=False, separators=(",", ":")),
                encoding="utf-8",
            )
        except OSError as e:
            logger.warning(f"Could not write word cache: {e}")
