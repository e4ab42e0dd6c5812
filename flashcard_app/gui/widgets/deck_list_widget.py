"""Deck picker shown on the home screen."""

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from flashcard_app.models import Deck


class DeckListWidget(QWidget):
    """List of decks with New, Edit and Study buttons."""

    study_requested = pyqtSignal(object)  # Deck
    edit_requested = pyqtSignal(object)  # Deck
    new_deck_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._decks: list[Deck] = []
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        layout = QVBoxLayout()
        layout.addWidget(QLabel("Decks"))

        self.deck_list = QListWidget()
        self.deck_list.itemDoubleClicked.connect(lambda item: self._on_study())
        layout.addWidget(self.deck_list)

        buttons = QHBoxLayout()
        self.new_button = QPushButton("New Deck")
        self.new_button.clicked.connect(lambda: self.new_deck_requested.emit())
        buttons.addWidget(self.new_button)
        buttons.addStretch()
        self.edit_button = QPushButton("Edit")
        self.edit_button.clicked.connect(self._on_edit)
        buttons.addWidget(self.edit_button)
        self.study_button = QPushButton("Study")
        self.study_button.clicked.connect(self._on_study)
        buttons.addWidget(self.study_button)
        layout.addLayout(buttons)

        self.setLayout(layout)

    def set_decks(self, decks: list[Deck]) -> None:
        """Replace the listed decks."""
        self._decks = list(decks)
        self.deck_list.clear()
        for deck in self._decks:
            item = QListWidgetItem(f"{deck.name}  ({len(deck.valid_cards())} cards)")
            self.deck_list.addItem(item)
        if self._decks:
            self.deck_list.setCurrentRow(0)
        self.study_button.setEnabled(bool(self._decks))
        self.edit_button.setEnabled(bool(self._decks))

    def selected_deck(self) -> Deck | None:
        row = self.deck_list.currentRow()
        if 0 <= row < len(self._decks):
            return self._decks[row]
        return None

    def _on_study(self) -> None:
        deck = self.selected_deck()
        if deck is not None:
            self.study_requested.emit(deck)

    def _on_edit(self) -> None:
        deck = self.selected_deck()
        if deck is not None:
            self.edit_requested.emit(deck)
