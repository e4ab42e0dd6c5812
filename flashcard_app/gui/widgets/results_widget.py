"""Results view shown after a completed study session."""

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from flashcard_app.models import Deck, StudyStats


class StatCard(QFrame):
    """Card widget for displaying a single statistic."""

    def __init__(self, value: str = "0", label: str = "", parent=None):
        super().__init__(parent)
        self.setObjectName("stat-card")

        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self.value_label = QLabel(value)
        self.value_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        value_font = QFont()
        value_font.setPixelSize(28)
        value_font.setWeight(QFont.Weight.Bold)
        self.value_label.setFont(value_font)
        layout.addWidget(self.value_label)

        self.label_widget = QLabel(label.upper())
        self.label_widget.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.label_widget)

        self.setLayout(layout)

    def set_value(self, value: str) -> None:
        self.value_label.setText(value)


class ResultsWidget(QWidget):
    """Show the stats of a finished session with Restart and Home actions."""

    restart_requested = pyqtSignal(object)  # Deck
    home_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._deck: Deck | None = None
        self._setup_ui()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        layout = QVBoxLayout()

        self.title_label = QLabel("Study Complete")
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title_font = QFont()
        title_font.setPixelSize(22)
        title_font.setWeight(QFont.Weight.Bold)
        self.title_label.setFont(title_font)
        layout.addWidget(self.title_label)

        cards_row = QHBoxLayout()
        self.total_card = StatCard(label="Cards")
        self.rounds_card = StatCard(label="Rounds")
        self.accuracy_card = StatCard(label="Accuracy")
        self.duration_card = StatCard(label="Time")
        for card in (self.total_card, self.rounds_card, self.accuracy_card, self.duration_card):
            cards_row.addWidget(card)
        layout.addLayout(cards_row)

        buttons = QHBoxLayout()
        self.restart_button = QPushButton("Study Again")
        self.restart_button.clicked.connect(self._on_restart)
        self.home_button = QPushButton("Back to Decks")
        self.home_button.clicked.connect(self.home_requested.emit)
        buttons.addStretch()
        buttons.addWidget(self.restart_button)
        buttons.addWidget(self.home_button)
        layout.addLayout(buttons)

        self.setLayout(layout)

    def show_stats(self, deck: Deck, stats: StudyStats) -> None:
        """Display the stats for a completed session."""
        self._deck = deck
        self.title_label.setText(f"Study Complete: {deck.name}")
        self.total_card.set_value(str(stats.total_cards))
        self.rounds_card.set_value(str(stats.total_rounds))
        self.accuracy_card.set_value(stats.accuracy_text)
        self.duration_card.set_value(stats.duration_text)

    def _on_restart(self) -> None:
        if self._deck is not None:
            self.restart_requested.emit(self._deck)
