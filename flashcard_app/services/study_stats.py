"""Session timing and final statistics for study sessions."""

import time
from typing import Callable

from flashcard_app.models import StudyStats


class SessionClock:
    """Monotonic stopwatch measuring a study session's wall time.

    There is no pause: the clock only starts, stops, or resets.
    """

    def __init__(self, time_source: Callable[[], float] = time.monotonic):
        """Initialize a stopped clock.

        Args:
            time_source: Function returning monotonic seconds
        """
        self._time_source = time_source
        self._started_at: float | None = None
        self._elapsed = 0.0

    def start(self) -> None:
        """Reset the clock and start measuring."""
        self._elapsed = 0.0
        self._started_at = self._time_source()

    def stop(self) -> None:
        """Stop measuring, keeping the elapsed time. No-op when stopped."""
        if self._started_at is None:
            return
        self._elapsed += self._time_source() - self._started_at
        self._started_at = None

    def reset(self) -> None:
        """Stop the clock and clear the elapsed time."""
        self._started_at = None
        self._elapsed = 0.0

    @property
    def running(self) -> bool:
        return self._started_at is not None

    @property
    def elapsed(self) -> float:
        """Elapsed seconds, including the running interval if any."""
        if self._started_at is None:
            return self._elapsed
        return self._elapsed + (self._time_source() - self._started_at)


def build_stats(
    total_cards: int, known_cards: int, total_rounds: int, elapsed: float
) -> StudyStats:
    """Build the final statistics of a completed session.

    Args:
        total_cards: Number of valid cards in the session
        known_cards: Number of cards marked known
        total_rounds: Rounds played (0 for an empty deck)
        elapsed: Session duration in seconds

    Returns:
        StudyStats for the session
    """
    return StudyStats(
        total_cards=total_cards,
        known_cards=known_cards,
        total_rounds=total_rounds,
        duration=max(elapsed, 0.0),
        unknown_cards=total_cards - known_cards,
    )
