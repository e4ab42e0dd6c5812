"""Tests for StudyRunner."""

import random

from flashcard_app.models import Card, Deck, SessionState
from flashcard_app.orchestration import StudyRunner


class RecordingPresenter:
    """Presenter that records everything shown."""

    def __init__(self):
        self.infos = []
        self.warnings = []
        self.errors = []
        self.cards = []
        self.progress = []
        self.results = []

    def show_info(self, message):
        self.infos.append(message)

    def show_warning(self, message):
        self.warnings.append(message)

    def show_error(self, message):
        self.errors.append(message)

    def show_card(self, card, flipped):
        self.cards.append((card.id, flipped))

    def show_progress(self, progress_text, round_label):
        self.progress.append((progress_text, round_label))

    def show_study_result(self, deck, stats):
        self.results.append((deck, stats))


def _scripted(commands):
    """Return a read function yielding commands, then raising EOFError."""
    remaining = list(commands)

    def _read(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return _read


class TestStudyRunner:
    """Tests for StudyRunner."""

    def test_all_known_finishes(self, make_deck):
        presenter = RecordingPresenter()
        runner = StudyRunner(presenter, _scripted(["k", "k", "k"]), rng=random.Random(1))

        stats = runner.run(make_deck(3))

        assert stats is not None
        assert stats.total_rounds == 1
        assert runner.aborted is False
        assert len(presenter.results) == 1
        assert presenter.progress[0] == ("Remaining: 3", "Round 1")

    def test_missed_cards_come_back(self, make_deck):
        presenter = RecordingPresenter()
        runner = StudyRunner(presenter, _scripted(["u", "k", "k"]), rng=random.Random(1))

        stats = runner.run(make_deck(2))

        assert stats.total_rounds == 2
        assert presenter.progress[-1] == ("Remaining: 1", "Reviewing missed cards (round 2)")

    def test_flip_and_back_first(self, make_deck):
        presenter = RecordingPresenter()
        runner = StudyRunner(
            presenter, _scripted(["f", "k"]), rng=random.Random(1), back_first=True
        )

        runner.run(make_deck(1))

        assert [flipped for _, flipped in presenter.cards] == [True, False]

    def test_undo_command(self, make_deck):
        presenter = RecordingPresenter()
        runner = StudyRunner(presenter, _scripted(["u", "z", "k", "k"]), rng=random.Random(1))

        stats = runner.run(make_deck(2))

        assert stats.total_rounds == 1
        assert presenter.cards[0][0] == presenter.cards[2][0]

    def test_undo_with_nothing_to_undo_warns(self, make_deck):
        presenter = RecordingPresenter()
        runner = StudyRunner(presenter, _scripted(["z", "k"]), rng=random.Random(1))
        runner.run(make_deck(1))
        assert presenter.warnings == ["Nothing to undo in this round"]

    def test_unknown_command_warns(self, make_deck):
        presenter = RecordingPresenter()
        runner = StudyRunner(presenter, _scripted(["?", "known"]), rng=random.Random(1))
        stats = runner.run(make_deck(1))
        assert stats is not None
        assert presenter.warnings[0].startswith("Unknown command")

    def test_quit_aborts(self, make_deck):
        presenter = RecordingPresenter()
        runner = StudyRunner(presenter, _scripted(["k", "q"]), rng=random.Random(1))

        assert runner.run(make_deck(3)) is None
        assert runner.aborted is True
        assert runner.session.state is SessionState.ABORTED
        assert presenter.results == []

    def test_end_of_input_aborts(self, make_deck):
        runner = StudyRunner(RecordingPresenter(), _scripted([]), rng=random.Random(1))
        assert runner.run(make_deck(2)) is None
        assert runner.aborted is True

    def test_empty_deck_reports_zero_stats(self):
        presenter = RecordingPresenter()
        runner = StudyRunner(presenter, _scripted([]))

        stats = runner.run(Deck(name="Blank", cards=[Card(front=" ", back="")]))

        assert stats.total_cards == 0
        assert stats.total_rounds == 0
        assert presenter.warnings == ["Deck 'Blank' has no cards to study"]
        assert presenter.cards == []
