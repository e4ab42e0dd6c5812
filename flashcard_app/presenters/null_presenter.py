"""Null presenter for testing (no output)."""

from flashcard_app.models import Card, Deck, StudyStats


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_card(self, card: Card, flipped: bool) -> None:
        """Display the presented card (no-op)."""
        pass

    def show_progress(self, progress_text: str, round_label: str) -> None:
        """Display session progress (no-op)."""
        pass

    def show_study_result(self, deck: Deck, stats: StudyStats) -> None:
        """Display the final statistics of a completed session (no-op)."""
        pass
