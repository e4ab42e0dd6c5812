"""Orchestrator for running a study session from text commands."""

import random
from collections.abc import Callable

from flashcard_app.interfaces import StudyPresenterProtocol
from flashcard_app.models import Deck, SessionState, StudyStats
from flashcard_app.services import StudySession

# Single-key commands accepted by the runner
COMMANDS = {
    "k": "known",
    "u": "unknown",
    "f": "flip",
    "z": "undo",
    "q": "quit",
}

HELP_TEXT = "[k] known  [u] unknown  [f] flip  [z] undo  [q] quit"


class StudyRunner:
    """Drive a StudySession with commands read from a text source."""

    def __init__(
        self,
        presenter: StudyPresenterProtocol,
        read_command: Callable[[str], str] | None = None,
        rng: random.Random | None = None,
        back_first: bool = False,
    ):
        """Initialize the study runner.

        Args:
            presenter: Output presenter
            read_command: Function returning the next command (defaults to ``input``)
            rng: Random source for card order
            back_first: Show the back of each card before the front
        """
        self.presenter = presenter
        self._read_command = read_command or input
        self._back_first = back_first
        self.result: StudyStats | None = None
        self.aborted = False
        self.session = StudySession(on_finish=self._on_finish, on_abort=self._on_abort, rng=rng)

    def run(self, deck: Deck) -> StudyStats | None:
        """Study a deck until it is finished or the user quits.

        Args:
            deck: Deck to study

        Returns:
            Final stats, or None if the session was aborted
        """
        self.presenter.show_info(f"Studying '{deck.name}'")
        self.presenter.show_info(HELP_TEXT)
        self.session.load_deck(deck)

        while self.session.state is SessionState.ACTIVE:
            self._render()
            try:
                raw = self._read_command("> ")
            except EOFError:
                self.session.abort()
                break
            self.handle_command(raw)

        return self.result

    def handle_command(self, raw: str) -> bool:
        """Apply one command to the session.

        Returns:
            True if the command was recognized
        """
        command = COMMANDS.get(raw.strip().lower()[:1])
        session = self.session

        if command == "known":
            session.mark_known()
        elif command == "unknown":
            session.mark_unknown()
        elif command == "flip":
            session.flip()
        elif command == "undo":
            if not session.can_undo:
                self.presenter.show_warning("Nothing to undo in this round")
            session.undo()
        elif command == "quit":
            session.abort()
        else:
            self.presenter.show_warning(f"Unknown command: {raw.strip()!r}. {HELP_TEXT}")
            return False
        return True

    def _render(self) -> None:
        session = self.session
        if session.current_card is None:
            return
        self.presenter.show_progress(session.progress_text, session.round_label)
        self.presenter.show_card(session.current_card, session.is_flipped != self._back_first)

    def _on_finish(self, deck: Deck, stats: StudyStats) -> None:
        self.result = stats
        if stats.total_cards == 0:
            self.presenter.show_warning(f"Deck '{deck.name}' has no cards to study")
        self.presenter.show_study_result(deck, stats)

    def _on_abort(self) -> None:
        self.aborted = True
        self.presenter.show_info("Study session ended early")
