"""Study view bound to a StudySession."""

import logging
import random

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont, QKeySequence, QShortcut
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from flashcard_app.models import Deck, StudyStats
from flashcard_app.services import StudySession

logger = logging.getLogger(__name__)


class StudyWidget(QWidget):
    """Card review screen.

    Every button and shortcut calls into the session and then re-renders
    from the session's state, so the view never keeps its own copy.

    Shortcuts: Right = known, Left = unknown, Space = flip,
    Ctrl+Z = undo, Esc = exit.
    """

    finished = pyqtSignal(object, object)  # Deck, StudyStats
    aborted = pyqtSignal()

    def __init__(self, rng: random.Random | None = None, back_first: bool = False, parent=None):
        """Initialize the study widget.

        Args:
            rng: Random source for card order
            back_first: Show the back of each card first
            parent: Optional parent widget
        """
        super().__init__(parent)
        self._back_first = back_first
        self.session = StudySession(
            on_finish=self._on_session_finished,
            on_abort=self._on_session_aborted,
            rng=rng,
        )
        self._setup_ui()
        self._setup_shortcuts()

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        layout = QVBoxLayout()

        header = QHBoxLayout()
        self.round_label = QLabel("")
        self.progress_label = QLabel("")
        self.progress_label.setAlignment(Qt.AlignmentFlag.AlignRight)
        header.addWidget(self.round_label)
        header.addWidget(self.progress_label)
        layout.addLayout(header)

        self.card_label = QLabel("")
        self.card_label.setObjectName("card-face")
        self.card_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.card_label.setWordWrap(True)
        self.card_label.setMinimumHeight(240)
        card_font = QFont()
        card_font.setPixelSize(28)
        self.card_label.setFont(card_font)
        self.card_label.mousePressEvent = lambda event: self.flip()
        layout.addWidget(self.card_label, stretch=1)

        self.side_label = QLabel("")
        self.side_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.side_label)

        buttons = QHBoxLayout()
        self.unknown_button = QPushButton("Unknown (←)")
        self.unknown_button.clicked.connect(self.mark_unknown)
        self.flip_button = QPushButton("Flip (Space)")
        self.flip_button.clicked.connect(self.flip)
        self.known_button = QPushButton("Known (→)")
        self.known_button.clicked.connect(self.mark_known)
        buttons.addWidget(self.unknown_button)
        buttons.addWidget(self.flip_button)
        buttons.addWidget(self.known_button)
        layout.addLayout(buttons)

        footer = QHBoxLayout()
        self.undo_button = QPushButton("Undo (Ctrl+Z)")
        self.undo_button.clicked.connect(self.undo)
        self.exit_button = QPushButton("Exit (Esc)")
        self.exit_button.clicked.connect(self.abort)
        footer.addWidget(self.undo_button)
        footer.addStretch()
        footer.addWidget(self.exit_button)
        layout.addLayout(footer)

        self.setLayout(layout)

    def _setup_shortcuts(self) -> None:
        bindings = [
            ("Right", self.mark_known),
            ("Left", self.mark_unknown),
            ("Space", self.flip),
            (QKeySequence.StandardKey.Undo, self.undo),
            ("Esc", self.abort),
        ]
        for key, handler in bindings:
            shortcut = QShortcut(QKeySequence(key), self)
            shortcut.activated.connect(handler)

    def start(self, deck: Deck) -> None:
        """Begin studying a deck."""
        self.session.load_deck(deck)
        self.refresh()

    def mark_known(self) -> None:
        self.session.mark_known()
        self.refresh()

    def mark_unknown(self) -> None:
        self.session.mark_unknown()
        self.refresh()

    def flip(self) -> None:
        self.session.flip()
        self.refresh()

    def undo(self) -> None:
        self.session.undo()
        self.refresh()

    def abort(self) -> None:
        self.session.abort()

    def refresh(self) -> None:
        """Re-render the view from the session state."""
        session = self.session
        card = session.current_card

        self.round_label.setText(session.round_label)
        self.progress_label.setText(session.progress_text)

        if card is None:
            self.card_label.setText("")
            self.side_label.setText("")
        else:
            show_back = session.is_flipped != self._back_first
            self.card_label.setText(card.back if show_back else card.front)
            self.side_label.setText("Back" if show_back else "Front")

        has_card = card is not None
        self.known_button.setEnabled(has_card)
        self.unknown_button.setEnabled(has_card)
        self.flip_button.setEnabled(has_card)
        self.undo_button.setEnabled(session.can_undo)

    def _on_session_finished(self, deck: Deck, stats: StudyStats) -> None:
        logger.debug(f"Study widget finished deck '{deck.name}'")
        self.finished.emit(deck, stats)

    def _on_session_aborted(self) -> None:
        self.aborted.emit()
