"""Console presenter for CLI output."""

from flashcard_app.models import Card, Deck, StudyStats


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_card(self, card: Card, flipped: bool) -> None:
        """Display the presented card."""
        side = "Back" if flipped else "Front"
        text = card.back if flipped else card.front
        print("\n" + "-" * 40)
        print(f"  [{side}] {text or '(empty)'}")
        print("-" * 40)

    def show_progress(self, progress_text: str, round_label: str) -> None:
        """Display session progress."""
        print(f"{round_label} | {progress_text}")

    def show_study_result(self, deck: Deck, stats: StudyStats) -> None:
        """Display the final statistics of a completed session."""
        print(f"\nStudy Complete: {deck.name}")
        print(f"  Cards studied: {stats.total_cards}")
        print(f"  Cards known: {stats.known_cards}")
        print(f"  Rounds: {stats.total_rounds}")
        print(f"  Accuracy: {stats.accuracy_text}")
        print(f"  Time elapsed: {stats.duration_text}")
