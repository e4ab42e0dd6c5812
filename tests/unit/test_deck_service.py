"""Tests for DeckService."""

import pytest

from flashcard_app.exceptions import DeckNotFoundError, DeckStorageError
from flashcard_app.models import Card, Deck
from flashcard_app.services import DeckService


class TestDeckService:
    """Tests for DeckService."""

    @pytest.fixture
    def service(self, test_config):
        return DeckService(test_config)

    def test_load_missing_file(self, service):
        assert service.load() == []

    def test_load_empty_file(self, service, test_config):
        test_config.decks_path.parent.mkdir(parents=True)
        test_config.decks_path.write_text("   ", encoding="utf-8")
        assert service.load() == []

    def test_load_corrupt_json(self, service, test_config):
        test_config.decks_path.parent.mkdir(parents=True)
        test_config.decks_path.write_text("{not json", encoding="utf-8")
        assert service.load() == []

    def test_load_unexpected_format(self, service, test_config):
        test_config.decks_path.parent.mkdir(parents=True)
        test_config.decks_path.write_text('{"name": "x"}', encoding="utf-8")
        assert service.load() == []

    def test_save_and_load(self, service, test_config):
        decks = [
            Deck(
                name="Fruit",
                cards=[Card("apple", "蘋果", id="a"), Card("orange", "橘子", id="o")],
            ),
            Deck(name="Empty"),
        ]
        service.save(decks)

        assert test_config.decks_path.exists()
        assert service.load() == decks

    def test_save_keeps_unicode_readable(self, service, test_config):
        service.save([Deck(name="Fruit", cards=[Card("apple", "蘋果")])])
        assert "蘋果" in test_config.decks_path.read_text(encoding="utf-8")

    def test_save_failure_raises(self, service, test_config):
        # A file where the data directory should be
        test_config.data_dir.parent.mkdir(parents=True, exist_ok=True)
        test_config.data_dir.write_text("blocker", encoding="utf-8")
        with pytest.raises(DeckStorageError):
            service.save([Deck(name="x")])

    def test_get_deck_case_insensitive(self, service):
        service.save([Deck(name="Fruit")])
        assert service.get_deck("fruit").name == "Fruit"

    def test_get_deck_missing(self, service):
        with pytest.raises(DeckNotFoundError):
            service.get_deck("nope")

    def test_add_card_creates_deck(self, service):
        card = service.add_card("Verbs", "run", "跑")
        deck = service.get_deck("Verbs")
        assert deck.cards == [card]

    def test_add_card_appends(self, service):
        service.add_card("Verbs", "run", "跑")
        service.add_card("verbs", "eat", "吃")
        assert [c.front for c in service.get_deck("Verbs").cards] == ["run", "eat"]
        assert len(service.load()) == 1

    def test_save_deck_appends_new(self, service):
        service.save([Deck(name="Fruit", id="f")])
        service.save_deck(Deck(name="Verbs", cards=[Card("run", "跑")], id="v"))
        assert [d.name for d in service.load()] == ["Fruit", "Verbs"]

    def test_save_deck_replaces_same_id(self, service):
        service.save([Deck(name="Fruit", id="f"), Deck(name="Verbs", id="v")])
        service.save_deck(Deck(name="Renamed", cards=[Card("run", "跑", id="r")], id="f"))

        decks = service.load()
        assert [d.name for d in decks] == ["Renamed", "Verbs"]
        assert decks[0].cards == [Card("run", "跑", id="r")]

    def test_import_csv(self, service, temp_dir):
        csv_file = temp_dir / "cards.csv"
        csv_file.write_text('apple,蘋果\nbook,"書, 書籍"\nlonely\n,\n\n', encoding="utf-8")

        count = service.import_csv("Imported", csv_file)

        assert count == 3
        cards = service.get_deck("Imported").cards
        assert [(c.front, c.back) for c in cards] == [
            ("apple", "蘋果"),
            ("book", "書, 書籍"),
            ("lonely", ""),
        ]

    def test_import_csv_missing_file(self, service, temp_dir):
        with pytest.raises(DeckStorageError):
            service.import_csv("x", temp_dir / "missing.csv")


class TestCorruptDeckFile:
    """Writes must never replace a deck file that could not be parsed."""

    TRUNCATED = '[{"name": "Verbs", "cards": [{"front": "run"'

    @pytest.fixture
    def service(self, test_config):
        test_config.decks_path.parent.mkdir(parents=True)
        test_config.decks_path.write_text(self.TRUNCATED, encoding="utf-8")
        return DeckService(test_config)

    def test_load_still_returns_empty(self, service):
        assert service.load() == []

    def test_add_card_raises_and_keeps_file(self, service, test_config):
        with pytest.raises(DeckStorageError):
            service.add_card("New", "a", "b")
        assert test_config.decks_path.read_text(encoding="utf-8") == self.TRUNCATED

    def test_save_deck_raises_and_keeps_file(self, service, test_config):
        with pytest.raises(DeckStorageError):
            service.save_deck(Deck(name="New", cards=[Card("a", "b")]))
        assert test_config.decks_path.read_text(encoding="utf-8") == self.TRUNCATED

    def test_import_csv_raises_and_keeps_file(self, service, test_config, temp_dir):
        csv_file = temp_dir / "cards.csv"
        csv_file.write_text("apple,蘋果\n", encoding="utf-8")
        with pytest.raises(DeckStorageError):
            service.import_csv("New", csv_file)
        assert test_config.decks_path.read_text(encoding="utf-8") == self.TRUNCATED

    def test_unexpected_format_also_protected(self, test_config):
        test_config.decks_path.parent.mkdir(parents=True)
        test_config.decks_path.write_text('{"name": "x"}', encoding="utf-8")
        with pytest.raises(DeckStorageError):
            DeckService(test_config).add_card("New", "a", "b")
        assert "x" in test_config.decks_path.read_text(encoding="utf-8")
