"""Pytest configuration and shared fixtures."""

import random

import pytest

from flashcard_app.config import FlashcardConfig
from flashcard_app.models import Card, Deck
from flashcard_app.presenters import NullPresenter
from flashcard_app.services import SessionClock, StudySession


@pytest.fixture
def temp_dir(tmp_path):
    """Provide a temporary directory for test files."""
    return tmp_path


@pytest.fixture
def test_config(temp_dir):
    """Provide a test configuration with temporary paths."""
    return FlashcardConfig(
        data_dir=temp_dir / "data",
        request_timeout=1.0,
        shuffle_seed=1234,
    )


@pytest.fixture
def null_presenter():
    """Provide a null presenter for testing (no output)."""
    return NullPresenter()


@pytest.fixture
def make_card():
    """Factory fixture for creating Card instances with sensible defaults."""

    def _make(front="apple", back="蘋果", id=None):
        if id is None:
            return Card(front=front, back=back)
        return Card(front=front, back=back, id=id)

    return _make


@pytest.fixture
def make_deck(make_card):
    """Factory fixture for a deck of ``count`` valid cards named c1..cN."""

    def _make(count=3, name="Test Deck", extra_cards=None):
        cards = [
            make_card(front=f"front {i}", back=f"back {i}", id=f"c{i}")
            for i in range(1, count + 1)
        ]
        cards.extend(extra_cards or [])
        return Deck(name=name, cards=cards)

    return _make


class FakeTimeSource:
    """Manually advanced monotonic clock."""

    def __init__(self, start=100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_time():
    """Provide a manually advanced time source."""
    return FakeTimeSource()


class RecordingCallbacks:
    """Records completion and abort notifications for assertion."""

    def __init__(self):
        self.finished = []
        self.aborts = 0

    def on_finish(self, deck, stats) -> None:
        self.finished.append((deck, stats))

    def on_abort(self) -> None:
        self.aborts += 1


@pytest.fixture
def recording_callbacks():
    """Provide callbacks that record every notification."""
    return RecordingCallbacks()


@pytest.fixture
def make_session(recording_callbacks, fake_time):
    """Factory fixture for a StudySession wired to recording callbacks."""

    def _make(seed=0):
        return StudySession(
            on_finish=recording_callbacks.on_finish,
            on_abort=recording_callbacks.on_abort,
            rng=random.Random(seed),
            clock=SessionClock(fake_time),
        )

    return _make
