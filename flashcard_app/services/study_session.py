"""Adaptive study session: randomized rounds with requeueing and undo."""

import logging
import random
from collections import deque
from typing import Callable

from flashcard_app.models import Card, Deck, SessionState, StudyAction, StudyStats
from flashcard_app.services.study_stats import SessionClock, build_stats

logger = logging.getLogger(__name__)

FinishCallback = Callable[[Deck, StudyStats], None]
AbortCallback = Callable[[], None]


def shuffled(cards: list[Card], rng: random.Random) -> list[Card]:
    """Return a uniformly random permutation of cards.

    ``random.Random.shuffle`` is a Fisher-Yates shuffle, so every
    ordering is equally likely.

    Args:
        cards: Cards to permute (not modified)
        rng: Random source

    Returns:
        New list with the cards in random order
    """
    result = list(cards)
    rng.shuffle(result)
    return result


class StudySession:
    """State machine for studying one deck.

    Cards are shown in random order. Each presented card is marked known
    or unknown; unknown cards are reshuffled into another round until every
    card has been marked known once. The last classification of the
    current round can be undone.

    All operations are total: calls that make no sense in the current state
    (classifying with no card shown, undo with an empty history, anything
    after the session ended) are ignored.

    Not thread-safe. Callers must drive a session from a single thread.
    """

    def __init__(
        self,
        on_finish: FinishCallback | None = None,
        on_abort: AbortCallback | None = None,
        rng: random.Random | None = None,
        clock: SessionClock | None = None,
    ):
        """Initialize an idle session.

        Args:
            on_finish: Called once with (deck, stats) when every card is known
            on_abort: Called once when the session is aborted
            rng: Random source for shuffling (seed it for deterministic order)
            clock: Session stopwatch
        """
        self._on_finish = on_finish
        self._on_abort = on_abort
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else SessionClock()

        self._queue: deque[Card] = deque()
        self._unknown: list[Card] = []
        self._known: list[Card] = []
        self._history: list[StudyAction] = []
        self._round = 0
        self._total = 0

        self.deck: Deck | None = None
        self.current_card: Card | None = None
        self.is_flipped = False
        self.is_reviewing_missed = False
        self.state = SessionState.IDLE
        self.stats: StudyStats | None = None

    # ------------------------------------------------------------------
    # Session setup
    # ------------------------------------------------------------------

    def load_deck(self, deck: Deck) -> None:
        """Start a new session on a deck, discarding any previous state.

        Blank cards are skipped and a card listed twice is studied once.
        A deck with no valid cards finishes immediately with zero stats.

        Args:
            deck: Deck to study (its cards are never modified)
        """
        self.deck = deck
        valid_cards = deck.valid_cards()

        self._queue = deque(shuffled(valid_cards, self._rng))
        self._unknown = []
        self._known = []
        self._history = []
        self._total = len(valid_cards)
        self.current_card = None
        self.is_flipped = False
        self.is_reviewing_missed = False
        self.stats = None

        if self._total == 0:
            logger.info(f"Deck '{deck.name}' has no valid cards, finishing immediately")
            self._round = 0
            self._clock.reset()
            self._finish()
            return

        logger.debug(f"Loaded deck '{deck.name}' with {self._total} valid cards")
        self._round = 1
        self.state = SessionState.ACTIVE
        self._clock.start()
        self._present_next()

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------

    def mark_known(self) -> None:
        """Mark the presented card as known and advance."""
        self._classify(was_unknown=False)

    def mark_unknown(self) -> None:
        """Mark the presented card as unknown and advance."""
        self._classify(was_unknown=True)

    def undo(self) -> None:
        """Reverse the most recent classification of the current round.

        The card shown now goes back to the front of the queue and the
        undone card is presented again, front side up.
        """
        if not self.can_undo:
            return

        action = self._history.pop()
        if action.was_unknown:
            self._unknown.remove(action.card)
        else:
            self._known.remove(action.card)

        self._queue.appendleft(self.current_card)
        self.current_card = action.card
        self.is_flipped = False

    def flip(self) -> None:
        """Toggle which face of the presented card is shown."""
        if self.state is not SessionState.ACTIVE or self.current_card is None:
            return
        self.is_flipped = not self.is_flipped

    def abort(self) -> None:
        """End the session without completion stats."""
        if self.state.is_terminal:
            return
        self._clock.stop()
        self.state = SessionState.ABORTED
        logger.info(f"Study session aborted after {self._clock.elapsed:.1f}s")
        if self._on_abort is not None:
            self._on_abort()

    # ------------------------------------------------------------------
    # Observable state
    # ------------------------------------------------------------------

    @property
    def can_undo(self) -> bool:
        return (
            self.state is SessionState.ACTIVE
            and self.current_card is not None
            and bool(self._history)
        )

    @property
    def remaining(self) -> int:
        """Cards left in the current round, including the presented one."""
        return len(self._queue) + (1 if self.current_card is not None else 0)

    @property
    def round_number(self) -> int:
        return self._round

    @property
    def total_cards(self) -> int:
        """Number of valid cards in the session."""
        return self._total

    @property
    def progress_text(self) -> str:
        if self.deck is not None and self._total == 0:
            return "No cards available"
        return f"Remaining: {self.remaining}"

    @property
    def round_label(self) -> str:
        if self.is_reviewing_missed:
            return f"Reviewing missed cards (round {self._round})"
        return f"Round {self._round}"

    @property
    def elapsed(self) -> float:
        return self._clock.elapsed

    @property
    def queue(self) -> tuple[Card, ...]:
        """Cards waiting in the current round, next card first."""
        return tuple(self._queue)

    @property
    def unknown_cards(self) -> tuple[Card, ...]:
        """Cards marked unknown this round, in classification order."""
        return tuple(self._unknown)

    @property
    def known_cards(self) -> tuple[Card, ...]:
        """Cards marked known so far, in classification order."""
        return tuple(self._known)

    @property
    def history_size(self) -> int:
        return len(self._history)

    def check_invariant(self) -> bool:
        """Check that queue, presented card, unknown and known partition the deck.

        Returns:
            True when every valid card is in exactly one place
        """
        placed = list(self._queue) + self._unknown + self._known
        if self.current_card is not None:
            placed.append(self.current_card)
        if len(placed) != self._total:
            return False
        return len({card.id for card in placed}) == self._total

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _classify(self, was_unknown: bool) -> None:
        if self.state is not SessionState.ACTIVE or self.current_card is None:
            return

        card = self.current_card
        self._history.append(StudyAction(card=card, was_unknown=was_unknown))
        if was_unknown:
            self._unknown.append(card)
        else:
            self._known.append(card)
        self._present_next()

    def _present_next(self) -> None:
        """Present the next card, starting a new round or finishing as needed."""
        self.is_flipped = False

        if self._queue:
            self.current_card = self._queue.popleft()
            return

        self.current_card = None

        if self._unknown:
            self._start_next_round()
            return

        self._finish()

    def _start_next_round(self) -> None:
        self._round += 1
        self.is_reviewing_missed = True
        self._queue = deque(shuffled(self._unknown, self._rng))
        self._unknown = []
        self._history = []
        logger.debug(f"Starting round {self._round} with {len(self._queue)} missed cards")
        self.current_card = self._queue.popleft()

    def _finish(self) -> None:
        self._clock.stop()
        self.current_card = None
        self.state = SessionState.FINISHED
        self.stats = build_stats(
            total_cards=self._total,
            known_cards=len(self._known),
            total_rounds=self._round,
            elapsed=self._clock.elapsed,
        )
        logger.info(
            f"Study session finished: {self.stats.known_cards}/{self.stats.total_cards} "
            f"cards in {self.stats.total_rounds} round(s)"
        )
        if self._on_finish is not None and self.deck is not None:
            self._on_finish(self.deck, self.stats)
