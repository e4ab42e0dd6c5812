"""JSON-file backed deck storage."""

import csv
import json
import logging
from pathlib import Path

from flashcard_app.config import FlashcardConfig
from flashcard_app.exceptions import DeckNotFoundError, DeckStorageError
from flashcard_app.models import Card, Deck

logger = logging.getLogger(__name__)


class DeckService:
    """Service for loading and saving the user's decks.

    All decks live in a single JSON file (a list of deck objects).
    """

    def __init__(self, config: FlashcardConfig):
        """Initialize the deck service.

        Args:
            config: Configuration providing the storage location
        """
        self.config = config
        self._file_path = config.decks_path

    def load(self) -> list[Deck]:
        """Load all decks for display.

        A missing, empty or unreadable file yields an empty list.

        Returns:
            Decks in stored order
        """
        try:
            return self._read()
        except DeckStorageError as e:
            logger.warning(str(e))
            return []

    def _read(self) -> list[Deck]:
        """Read the deck file, failing loudly on unreadable content.

        Every method that writes starts from this so a corrupt file is
        never replaced by a partial deck list.

        Raises:
            DeckStorageError: If the file exists but cannot be read or parsed
        """
        if not self._file_path.exists():
            return []

        try:
            text = self._file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DeckStorageError(f"Error reading deck file {self._file_path}: {e}") from e

        if not text.strip():
            return []

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DeckStorageError(f"Error parsing deck file {self._file_path}: {e}") from e

        if not isinstance(data, list):
            raise DeckStorageError(f"Unexpected deck file format in {self._file_path}")

        return [Deck.from_dict(item) for item in data if isinstance(item, dict)]

    def save(self, decks: list[Deck]) -> None:
        """Write all decks, replacing the stored file.

        Args:
            decks: Decks to store

        Raises:
            DeckStorageError: If the file cannot be written
        """
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps([deck.to_dict() for deck in decks], indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            raise DeckStorageError(f"Error saving decks to {self._file_path}: {e}") from e

    def get_deck(self, name: str) -> Deck:
        """Find a deck by name (case-insensitive).

        Raises:
            DeckNotFoundError: If no deck has that name
        """
        for deck in self.load():
            if deck.name.casefold() == name.casefold():
                return deck
        raise DeckNotFoundError(f"Deck not found: {name}")

    def add_card(self, deck_name: str, front: str, back: str) -> Card:
        """Append a card to a deck, creating the deck if needed.

        Returns:
            The created card

        Raises:
            DeckStorageError: If the existing file is unreadable or cannot be written
        """
        decks = self._read()
        deck = self._find_or_create(decks, deck_name)
        card = Card(front=front, back=back)
        deck.cards.append(card)
        self.save(decks)
        return card

    def save_deck(self, deck: Deck) -> None:
        """Store an edited deck, replacing the stored deck with the same id.

        A deck not yet stored is appended.

        Raises:
            DeckStorageError: If the existing file is unreadable or cannot be written
        """
        decks = self._read()
        for i, existing in enumerate(decks):
            if existing.id == deck.id:
                decks[i] = deck
                break
        else:
            decks.append(deck)
        self.save(decks)
        logger.info(f"Saved deck '{deck.name}' with {deck.card_count} cards")

    def import_csv(self, deck_name: str, csv_path: Path) -> int:
        """Import front/back pairs from a two-column CSV file.

        Rows with fewer than two columns use an empty back.

        Args:
            deck_name: Target deck (created if missing)
            csv_path: CSV file to read

        Returns:
            Number of cards imported

        Raises:
            DeckStorageError: If the CSV or deck file cannot be read
        """
        try:
            with open(csv_path, encoding="utf-8", newline="") as f:
                rows = list(csv.reader(f))
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            raise DeckStorageError(f"Error reading CSV file {csv_path}: {e}") from e

        decks = self._read()
        deck = self._find_or_create(decks, deck_name)

        imported = 0
        for row in rows:
            if not row:
                continue
            front = row[0].strip()
            back = row[1].strip() if len(row) > 1 else ""
            card = Card(front=front, back=back)
            if not card.is_valid:
                continue
            deck.cards.append(card)
            imported += 1

        self.save(decks)
        logger.info(f"Imported {imported} cards into '{deck.name}'")
        return imported

    @staticmethod
    def _find_or_create(decks: list[Deck], name: str) -> Deck:
        for deck in decks:
            if deck.name.casefold() == name.casefold():
                return deck
        deck = Deck(name=name)
        decks.append(deck)
        return deck
