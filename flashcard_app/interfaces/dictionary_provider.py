"""Protocol for word lookup providers."""

from typing import Protocol

from flashcard_app.models import WordLookupResult


class DictionaryProvider(Protocol):
    """Interface for a backend that can look up and translate words.

    The editor only needs ``lookup``; any source (online API, offline
    table, test double) implements this protocol.
    """

    @property
    def name(self) -> str:
        """Human-readable name for this provider."""
        ...

    def lookup(self, word: str) -> WordLookupResult:
        """Look up a single word.

        Args:
            word: Word to look up (any case, surrounding whitespace allowed).

        Returns:
            Lookup result. Failures are reported through ``success`` and
            ``error_message`` rather than raised.
        """
        ...
