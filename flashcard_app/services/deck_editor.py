"""Editing state for creating a deck or changing an existing one."""

import logging
from dataclasses import replace

from flashcard_app.models import Card, Deck, WordDefinition

logger = logging.getLogger(__name__)

# Name given to a deck saved with a blank name
UNTITLED_DECK_NAME = "Untitled Deck"


def combine_definitions(definitions: list[WordDefinition]) -> str:
    """Join definitions into card-back text, e.g. '(n.) 蘋果; (v.) 吃'."""
    return "; ".join(d.display_text for d in definitions)


class DeckEditor:
    """Working copy of a deck open in the editor.

    The deck passed in is never modified. ``build_deck`` produces the deck
    to store once the user saves.
    """

    def __init__(self, deck: Deck | None = None):
        """Initialize the editor.

        Args:
            deck: Deck to edit, or None to create a new deck with one blank card
        """
        self.is_new = deck is None
        if deck is None:
            deck = Deck(name="", cards=[Card()])
        self.name = deck.name
        self.cards: list[Card] = list(deck.cards)
        self._deck_id = deck.id

    @property
    def title(self) -> str:
        return "Create New Deck" if self.is_new else "Edit Deck"

    def add_card(self) -> Card:
        """Append a blank card."""
        card = Card()
        self.cards.append(card)
        return card

    def remove_card(self, index: int) -> bool:
        """Remove the card at ``index``.

        Returns:
            True if a card was removed
        """
        if not 0 <= index < len(self.cards):
            return False
        del self.cards[index]
        return True

    def update_card(self, index: int, front: str | None = None, back: str | None = None) -> Card:
        """Replace the card at ``index`` with new text, keeping its id.

        Raises:
            IndexError: If there is no card at ``index``
        """
        changes = {}
        if front is not None:
            changes["front"] = front
        if back is not None:
            changes["back"] = back
        self.cards[index] = replace(self.cards[index], **changes)
        return self.cards[index]

    def apply_selection(self, index: int, definitions: list[WordDefinition]) -> bool:
        """Fill a card from the selected lookup definitions.

        The front becomes the looked-up word and the back lists every
        selected translation.

        Args:
            index: Card to fill
            definitions: Lookup suggestions; only ``selected`` ones are used

        Returns:
            False if nothing was selected or the card no longer exists
        """
        selected = [d for d in definitions if d.selected]
        if not selected or not 0 <= index < len(self.cards):
            return False
        self.update_card(index, front=selected[0].word, back=combine_definitions(selected))
        return True

    def build_deck(self) -> Deck | None:
        """Produce the deck to store.

        Cards with a blank front and back are dropped, and a blank name
        becomes ``UNTITLED_DECK_NAME``.

        Returns:
            The deck, or None when no card is left (nothing to save)
        """
        self.cards = [card for card in self.cards if card.is_valid]
        if not self.cards:
            logger.debug("Editor saved without any cards, discarding")
            return None

        name = self.name.strip() or UNTITLED_DECK_NAME
        return Deck(name=name, cards=list(self.cards), id=self._deck_id)
