"""Data models for study sessions."""

from dataclasses import dataclass
from enum import Enum

from .card import Card


class SessionState(Enum):
    """Lifecycle state of a study session."""

    IDLE = "idle"
    ACTIVE = "active"
    FINISHED = "finished"
    ABORTED = "aborted"

    @property
    def is_terminal(self) -> bool:
        """True once the session can no longer accept classifications."""
        return self in (SessionState.FINISHED, SessionState.ABORTED)


@dataclass(frozen=True)
class StudyAction:
    """A single classification recorded for undo."""

    card: Card
    was_unknown: bool


@dataclass(frozen=True)
class StudyStats:
    """Final statistics of a completed study session."""

    total_cards: int = 0
    known_cards: int = 0
    total_rounds: int = 0
    duration: float = 0.0  # Seconds
    unknown_cards: int = 0  # Always 0 on completion, every card is known

    @property
    def duration_text(self) -> str:
        """Human-readable duration, e.g. '2 min 5 s' or '42 s'."""
        total_seconds = int(self.duration)
        minutes, seconds = divmod(total_seconds, 60)
        if minutes >= 1:
            return f"{minutes} min {seconds} s"
        return f"{seconds} s"

    @property
    def accuracy(self) -> float | None:
        """Known cards as a percentage of total, or None for an empty session."""
        if self.total_cards == 0:
            return None
        return self.known_cards / self.total_cards * 100

    @property
    def accuracy_text(self) -> str:
        """Accuracy as a whole percentage, 'N/A' for an empty session."""
        accuracy = self.accuracy
        if accuracy is None:
            return "N/A"
        return f"{accuracy:.0f}%"
