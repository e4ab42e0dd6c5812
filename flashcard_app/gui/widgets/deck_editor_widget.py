"""Editor for creating a deck or changing its cards."""

import logging

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from flashcard_app.gui.workers import LookupWorker
from flashcard_app.interfaces import DictionaryProvider
from flashcard_app.models import Deck, WordDefinition, WordLookupResult
from flashcard_app.services import DeckEditor

logger = logging.getLogger(__name__)

FRONT_COLUMN = 0
BACK_COLUMN = 1


class DeckEditorWidget(QWidget):
    """Edit a deck's name and cards, with dictionary lookup for the back.

    Emits ``saved`` with the deck to store, or ``cancelled`` when the user
    leaves without saving (or saves with no card filled in).
    """

    saved = pyqtSignal(object)  # Deck
    cancelled = pyqtSignal()

    def __init__(self, provider: DictionaryProvider | None = None, parent=None):
        """Initialize the editor widget.

        Args:
            provider: Lookup backend; lookups are disabled without one
            parent: Optional parent widget
        """
        super().__init__(parent)
        self.provider = provider
        self.editor = DeckEditor()
        self._suggestions: list[WordDefinition] = []
        self._suggestion_row = -1
        self.worker_thread: LookupWorker | None = None
        self._setup_ui()
        self._refresh_table()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        layout = QVBoxLayout()

        self.title_label = QLabel()
        self.title_label.setObjectName("section-title")
        layout.addWidget(self.title_label)

        self.name_edit = QLineEdit()
        self.name_edit.setPlaceholderText("Deck name")
        layout.addWidget(self.name_edit)

        self.card_table = QTableWidget(0, 2)
        self.card_table.setHorizontalHeaderLabels(["Front", "Back"])
        self.card_table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self.card_table.itemChanged.connect(self._on_item_changed)
        layout.addWidget(self.card_table)

        card_buttons = QHBoxLayout()
        self.add_button = QPushButton("Add Card")
        self.add_button.clicked.connect(self.add_card)
        card_buttons.addWidget(self.add_button)
        self.remove_button = QPushButton("Remove Card")
        self.remove_button.clicked.connect(self.remove_card)
        card_buttons.addWidget(self.remove_button)
        card_buttons.addStretch()
        self.lookup_button = QPushButton("Look Up Word")
        self.lookup_button.clicked.connect(self.look_up)
        card_buttons.addWidget(self.lookup_button)
        layout.addLayout(card_buttons)

        self.message_label = QLabel()
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)

        # Lookup suggestions, hidden until a lookup succeeds
        self.suggestion_panel = QWidget()
        panel_layout = QVBoxLayout()
        panel_layout.setContentsMargins(0, 0, 0, 0)
        self.suggestion_list = QListWidget()
        panel_layout.addWidget(self.suggestion_list)

        panel_buttons = QHBoxLayout()
        self.select_all_button = QPushButton("Select All")
        self.select_all_button.clicked.connect(lambda: self.set_all_selected(True))
        panel_buttons.addWidget(self.select_all_button)
        self.deselect_all_button = QPushButton("Clear")
        self.deselect_all_button.clicked.connect(lambda: self.set_all_selected(False))
        panel_buttons.addWidget(self.deselect_all_button)
        panel_buttons.addStretch()
        self.hide_button = QPushButton("Hide")
        self.hide_button.clicked.connect(self.hide_suggestions)
        panel_buttons.addWidget(self.hide_button)
        self.confirm_button = QPushButton("Use Selected")
        self.confirm_button.clicked.connect(self.confirm_selection)
        panel_buttons.addWidget(self.confirm_button)
        panel_layout.addLayout(panel_buttons)

        self.suggestion_panel.setLayout(panel_layout)
        self.suggestion_panel.setVisible(False)
        layout.addWidget(self.suggestion_panel)

        buttons = QHBoxLayout()
        buttons.addStretch()
        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.cancel)
        buttons.addWidget(self.cancel_button)
        self.save_button = QPushButton("Save")
        self.save_button.clicked.connect(self.save)
        buttons.addWidget(self.save_button)
        layout.addLayout(buttons)

        self.setLayout(layout)

    # ------------------------------------------------------------------
    # Deck editing
    # ------------------------------------------------------------------

    def load(self, deck: Deck | None) -> None:
        """Open a deck for editing, or start a new one when deck is None."""
        self.editor = DeckEditor(deck)
        self.title_label.setText(self.editor.title)
        self.name_edit.setText(self.editor.name)
        self.message_label.clear()
        self.hide_suggestions()
        self._refresh_table()
        self.card_table.setCurrentCell(0, FRONT_COLUMN)

    def add_card(self) -> None:
        self.editor.add_card()
        self._refresh_table()
        self.card_table.setCurrentCell(len(self.editor.cards) - 1, FRONT_COLUMN)

    def remove_card(self) -> None:
        if self.editor.remove_card(self.card_table.currentRow()):
            self.hide_suggestions()
            self._refresh_table()

    def save(self) -> None:
        self.editor.name = self.name_edit.text()
        deck = self.editor.build_deck()
        if deck is None:
            self.cancelled.emit()
            return
        self.saved.emit(deck)

    def cancel(self) -> None:
        self.cancelled.emit()

    def _refresh_table(self) -> None:
        """Rebuild the table from the editor's cards."""
        self.card_table.blockSignals(True)
        self.card_table.setRowCount(len(self.editor.cards))
        for row, card in enumerate(self.editor.cards):
            self.card_table.setItem(row, FRONT_COLUMN, QTableWidgetItem(card.front))
            self.card_table.setItem(row, BACK_COLUMN, QTableWidgetItem(card.back))
        self.card_table.blockSignals(False)

        self.remove_button.setEnabled(bool(self.editor.cards))
        self.lookup_button.setEnabled(self.provider is not None and bool(self.editor.cards))

    def _on_item_changed(self, item: QTableWidgetItem) -> None:
        if item.column() == FRONT_COLUMN:
            self.editor.update_card(item.row(), front=item.text())
            # Suggestions belong to the word that was looked up
            if item.row() == self._suggestion_row:
                self.hide_suggestions()
        else:
            self.editor.update_card(item.row(), back=item.text())

    # ------------------------------------------------------------------
    # Dictionary lookup
    # ------------------------------------------------------------------

    def look_up(self) -> None:
        """Look up the front of the selected card in the background."""
        row = self.card_table.currentRow()
        if self.provider is None or not 0 <= row < len(self.editor.cards):
            return

        word = self.editor.cards[row].front.strip()
        if not word:
            self.message_label.setText("Enter a word on the front first")
            return

        self.hide_suggestions()
        self._suggestion_row = row
        self.message_label.setText(f"Looking up '{word}'...")
        self.lookup_button.setEnabled(False)

        self.worker_thread = LookupWorker(self.provider, word, self)
        self.worker_thread.result_ready.connect(self.show_suggestions)
        self.worker_thread.error.connect(self._on_lookup_error)
        self.worker_thread.finished.connect(lambda: self.lookup_button.setEnabled(True))
        self.worker_thread.start()

    def show_suggestions(self, result: WordLookupResult) -> None:
        """List the senses of a lookup result for selection."""
        if not result.success or not result.definitions:
            self.message_label.setText(result.error_message or "No translations found")
            self.hide_suggestions()
            return

        self.message_label.clear()
        self._suggestions = list(result.definitions)
        self.suggestion_list.clear()
        for definition in self._suggestions:
            item = QListWidgetItem(definition.display_text)
            item.setFlags(item.flags() | Qt.ItemFlag.ItemIsUserCheckable)
            item.setCheckState(
                Qt.CheckState.Checked if definition.selected else Qt.CheckState.Unchecked
            )
            self.suggestion_list.addItem(item)
        self.suggestion_panel.setVisible(True)

    def set_all_selected(self, selected: bool) -> None:
        state = Qt.CheckState.Checked if selected else Qt.CheckState.Unchecked
        for i in range(self.suggestion_list.count()):
            self.suggestion_list.item(i).setCheckState(state)

    def confirm_selection(self) -> None:
        """Write the checked senses to the card the lookup was made for."""
        for i, definition in enumerate(self._suggestions):
            item = self.suggestion_list.item(i)
            definition.selected = item.checkState() == Qt.CheckState.Checked

        if self.editor.apply_selection(self._suggestion_row, self._suggestions):
            self._refresh_table()
            self.hide_suggestions()

    def hide_suggestions(self) -> None:
        self._suggestions = []
        self._suggestion_row = -1
        self.suggestion_list.clear()
        self.suggestion_panel.setVisible(False)

    def _on_lookup_error(self, message: str) -> None:
        logger.warning(message)
        self.message_label.setText(message)
