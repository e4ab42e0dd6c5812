"""Main application window switching between decks, editor, study and results."""

import logging
import random

from PyQt6.QtWidgets import QMainWindow, QMessageBox, QStackedWidget

from flashcard_app.config import FlashcardConfig
from flashcard_app.exceptions import DeckStorageError
from flashcard_app.gui.widgets import (
    DeckEditorWidget,
    DeckListWidget,
    ResultsWidget,
    StudyWidget,
)
from flashcard_app.interfaces import DictionaryProvider
from flashcard_app.models import Deck, StudyStats
from flashcard_app.services import DeckService, DictionaryService

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Top-level window; owns navigation between the screens."""

    def __init__(
        self,
        config: FlashcardConfig,
        deck_service: DeckService | None = None,
        provider: DictionaryProvider | None = None,
    ):
        """Initialize the main window.

        Args:
            config: Application configuration
            deck_service: Deck storage (defaults to the configured file)
            provider: Word lookup backend for the editor (defaults to DictionaryService)
        """
        super().__init__()
        self.config = config
        self.deck_service = deck_service or DeckService(config)

        self.setWindowTitle("Flashcard App")
        self.resize(720, 520)

        self.stack = QStackedWidget()
        self.deck_list = DeckListWidget()
        self.editor_view = DeckEditorWidget(provider=provider or DictionaryService(config))
        self.study_view = StudyWidget(
            rng=random.Random(config.shuffle_seed),
            back_first=config.show_back_first,
        )
        self.results_view = ResultsWidget()
        for widget in (self.deck_list, self.editor_view, self.study_view, self.results_view):
            self.stack.addWidget(widget)
        self.setCentralWidget(self.stack)

        self.deck_list.study_requested.connect(self.start_study)
        self.deck_list.edit_requested.connect(self.open_editor)
        self.deck_list.new_deck_requested.connect(lambda: self.open_editor(None))
        self.editor_view.saved.connect(self.save_deck)
        self.editor_view.cancelled.connect(self.show_decks)
        self.study_view.finished.connect(self.show_results)
        self.study_view.aborted.connect(self.show_decks)
        self.results_view.restart_requested.connect(self.start_study)
        self.results_view.home_requested.connect(self.show_decks)

        self.show_decks()

    def show_decks(self) -> None:
        self.deck_list.set_decks(self.deck_service.load())
        self.stack.setCurrentWidget(self.deck_list)

    def open_editor(self, deck: Deck | None) -> None:
        """Edit a deck, or create one when deck is None."""
        self.editor_view.load(deck)
        self.stack.setCurrentWidget(self.editor_view)

    def save_deck(self, deck: Deck) -> None:
        try:
            self.deck_service.save_deck(deck)
        except DeckStorageError as e:
            logger.error(str(e))
            QMessageBox.critical(self, "Save Failed", f"The deck could not be saved:\n\n{e}")
            return
        self.show_decks()

    def start_study(self, deck: Deck) -> None:
        self.stack.setCurrentWidget(self.study_view)
        # An empty deck finishes inside start() and switches to results
        self.study_view.start(deck)

    def show_results(self, deck: Deck, stats: StudyStats) -> None:
        logger.info(f"Finished '{deck.name}' in {stats.duration_text}")
        self.results_view.show_stats(deck, stats)
        self.stack.setCurrentWidget(self.results_view)
