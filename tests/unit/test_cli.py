"""Tests for CLI commands."""

from argparse import Namespace
from unittest.mock import patch

from flashcard_app.cli.commands import decks, lookup, study
from flashcard_app.config import create_default_config
from flashcard_app.models import WordDefinition, WordLookupResult
from flashcard_app.services import DeckService


def _args(data_dir, **kwargs):
    return Namespace(data_dir=str(data_dir), **kwargs)


class StubProvider:
    """DictionaryProvider returning a fixed result."""

    name = "stub"

    def __init__(self, result):
        self.result = result
        self.words = []

    def lookup(self, word):
        self.words.append(word)
        return self.result


class TestDeckCommands:
    """Tests for decks, add and import commands."""

    def test_list_empty(self, tmp_path, capsys):
        assert decks.list_command(_args(tmp_path)) == 0
        assert "No decks yet" in capsys.readouterr().out

    def test_add_then_list(self, tmp_path, capsys):
        assert decks.add_command(_args(tmp_path, deck="Fruit", front="apple", back="蘋果")) == 0
        assert decks.list_command(_args(tmp_path)) == 0
        out = capsys.readouterr().out
        assert "Fruit" in out
        assert "1 card(s)" in out

    def test_add_blank_card_fails(self, tmp_path):
        assert decks.add_command(_args(tmp_path, deck="Fruit", front=" ", back="")) == 1

    def test_import(self, tmp_path):
        csv_file = tmp_path / "cards.csv"
        csv_file.write_text("a,1\nb,2\n", encoding="utf-8")
        assert decks.import_command(_args(tmp_path, deck="Letters", csv_file=str(csv_file))) == 0
        config = create_default_config(data_dir=tmp_path)
        assert len(DeckService(config).get_deck("Letters").cards) == 2

    def test_import_missing_file(self, tmp_path):
        args = _args(tmp_path, deck="Letters", csv_file=str(tmp_path / "missing.csv"))
        assert decks.import_command(args) == 1


class TestStudyCommand:
    """Tests for the study command."""

    def test_missing_deck(self, tmp_path, capsys):
        args = _args(tmp_path, deck="Nope", seed=None, back_first=False)
        assert study.study_command(args) == 1
        assert "Deck not found" in capsys.readouterr().out

    def test_study_to_completion(self, tmp_path, capsys):
        decks.add_command(_args(tmp_path, deck="Fruit", front="apple", back="蘋果"))
        decks.add_command(_args(tmp_path, deck="Fruit", front="book", back="書"))
        args = _args(tmp_path, deck="Fruit", seed=3, back_first=False)

        with patch("builtins.input", side_effect=["u", "k", "k"]):
            assert study.study_command(args) == 0

        out = capsys.readouterr().out
        assert "Study Complete: Fruit" in out
        assert "Rounds: 2" in out

    def test_quit_returns_failure(self, tmp_path):
        decks.add_command(_args(tmp_path, deck="Fruit", front="apple", back="蘋果"))
        args = _args(tmp_path, deck="Fruit", seed=None, back_first=False)
        with patch("builtins.input", side_effect=["q"]):
            assert study.study_command(args) == 1


class TestLookupCommand:
    """Tests for the lookup command."""

    def test_offline_lookup_adds_card(self, tmp_path, capsys):
        args = _args(tmp_path, word="apple", add_to="Fruit")
        assert lookup.lookup_command(args) == 0
        assert "(n.) 蘋果" in capsys.readouterr().out

        deck = DeckService(create_default_config(data_dir=tmp_path)).get_deck("Fruit")
        assert deck.cards[0].front == "apple"
        assert deck.cards[0].back == "(n.) 蘋果"

    def test_failed_lookup(self, tmp_path, capsys):
        failed = WordLookupResult(word="qzx", error_message="Word not found")
        provider = StubProvider(failed)
        assert lookup.lookup_command(_args(tmp_path, word="qzx", add_to=None), provider) == 1
        assert "Word not found" in capsys.readouterr().out

    def test_lookup_prints_definitions(self, tmp_path, capsys):
        found = WordLookupResult(
            word="happy",
            definitions=[
                WordDefinition(word="happy", part_of_speech="adjective", translation="快樂的")
            ],
            success=True,
        )
        provider = StubProvider(found)
        assert lookup.lookup_command(_args(tmp_path, word="happy", add_to=None), provider) == 0
        assert provider.words == ["happy"]
        assert "(adj.) 快樂的" in capsys.readouterr().out

    def test_add_to_joins_senses_on_one_line(self, tmp_path):
        found = WordLookupResult(
            word="fine",
            definitions=[
                WordDefinition(word="fine", part_of_speech="adjective", translation="好的"),
                WordDefinition(word="fine", part_of_speech="noun", translation="罰款"),
            ],
            success=True,
        )
        args = _args(tmp_path, word="fine", add_to="Words")

        assert lookup.lookup_command(args, StubProvider(found)) == 0

        deck = DeckService(create_default_config(data_dir=tmp_path)).get_deck("Words")
        assert deck.cards[0].back == "(adj.) 好的; (n.) 罰款"
