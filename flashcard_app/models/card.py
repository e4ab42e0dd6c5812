"""Data models for cards and decks."""

from dataclasses import dataclass, field
from uuid import uuid4


@dataclass(frozen=True)
class Card:
    """A single flashcard.

    Cards are immutable; editing a card replaces it in its deck.
    """

    front: str = ""
    back: str = ""
    id: str = field(default_factory=lambda: str(uuid4()))

    @property
    def is_valid(self) -> bool:
        """True when the card has a non-blank front or back."""
        return bool(self.front.strip() or self.back.strip())

    def to_dict(self) -> dict:
        return {"id": self.id, "front": self.front, "back": self.back}

    @classmethod
    def from_dict(cls, data: dict) -> "Card":
        return cls(
            front=data.get("front", "") or "",
            back=data.get("back", "") or "",
            id=data.get("id") or str(uuid4()),
        )


@dataclass
class Deck:
    """A named, ordered collection of cards."""

    name: str = "New Deck"
    cards: list[Card] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid4()))

    def valid_cards(self) -> list[Card]:
        """Get the cards that can be studied, in deck order.

        A card listed more than once (same id) is returned once, at its
        first position.

        Returns:
            Cards with a non-blank front or back
        """
        seen: set[str] = set()
        cards = []
        for card in self.cards:
            if card.is_valid and card.id not in seen:
                seen.add(card.id)
                cards.append(card)
        return cards

    @property
    def card_count(self) -> int:
        """Get total number of cards in the deck."""
        return len(self.cards)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "cards": [card.to_dict() for card in self.cards],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Deck":
        return cls(
            name=data.get("name", "New Deck"),
            cards=[Card.from_dict(c) for c in data.get("cards", []) if isinstance(c, dict)],
            id=data.get("id") or str(uuid4()),
        )
