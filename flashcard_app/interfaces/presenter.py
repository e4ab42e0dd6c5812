"""Presenter protocol for study output abstraction."""

from typing import Protocol

from flashcard_app.models import Card, Deck, StudyStats


class StudyPresenterProtocol(Protocol):
    """Interface for presenting a study session to the user (CLI, GUI, etc).

    The study loop renders through this protocol so the same session
    driver works with any presentation layer.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        ...

    def show_error(self, message: str) -> None:
        """Display an error message."""
        ...

    def show_card(self, card: Card, flipped: bool) -> None:
        """Display the presented card.

        Args:
            card: The card being studied
            flipped: True when the back face is shown
        """
        ...

    def show_progress(self, progress_text: str, round_label: str) -> None:
        """Display session progress.

        Args:
            progress_text: Remaining-cards text
            round_label: Current round description
        """
        ...

    def show_study_result(self, deck: Deck, stats: StudyStats) -> None:
        """Display the final statistics of a completed session."""
        ...
