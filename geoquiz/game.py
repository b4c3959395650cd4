"""Round and session orchestration: ten questions per round, repeated until the player stops."""

import logging
import random
from collections.abc import Callable, Sequence

from geoquiz.console import QuizIO
from geoquiz.judge import judge_answer
from geoquiz.models import AttemptOutcome, CountryRecord, RoundCounts, SessionTotals
from geoquiz.questions import generate_question

logger = logging.getLogger(__name__)

QUESTIONS_PER_ROUND = 10

PLAY_AGAIN_PROMPT = "Play again? (Yes/No): "


class RoundTracker:
    """Folds question outcomes into the counts of a single round."""

    def __init__(self, questions: int = QUESTIONS_PER_ROUND) -> None:
        self._questions = questions
        self.counts = RoundCounts()

    @property
    def is_complete(self) -> bool:
        return self.counts.total >= self._questions

    def record_outcome(self, outcome: AttemptOutcome) -> None:
        if self.is_complete:
            raise RuntimeError(f"Round already has {self._questions} outcomes")

        if outcome is AttemptOutcome.CORRECT_FIRST_TRY:
            self.counts.correct_first += 1
        elif outcome is AttemptOutcome.CORRECT_SECOND_TRY:
            self.counts.correct_second += 1
        else:
            self.counts.incorrect += 1


def round_summary_lines(counts: RoundCounts) -> list[str]:
    return [
        "-- Game Summary --",
        "1 word game played",
        f"{counts.correct_first} correct answers on the first attempt",
        f"{counts.correct_second} correct answers on the second attempt",
        f"{counts.incorrect} incorrect answers on two attempts each",
    ]


def ask_question(country: CountryRecord, rng: random.Random, io: QuizIO) -> AttemptOutcome:
    """Generate one question for ``country``, show it, and judge the answers."""
    question = generate_question(country, rng)
    io.say(question.prompt)
    return judge_answer(question, io)


def play_round(catalog: Sequence[CountryRecord], rng: random.Random, io: QuizIO) -> RoundCounts:
    """Play one full round and print its summary.

    Raises:
        ValueError: If the catalog is empty.
    """
    if not catalog:
        raise ValueError("No countries loaded")

    tracker = RoundTracker()
    while not tracker.is_complete:
        country = catalog[rng.randrange(len(catalog))]
        tracker.record_outcome(ask_question(country, rng, io))
        io.say()

    for line in round_summary_lines(tracker.counts):
        io.say(line)
    io.say()

    logger.info(
        "Round complete: %d first, %d second, %d incorrect",
        tracker.counts.correct_first,
        tracker.counts.correct_second,
        tracker.counts.incorrect,
    )
    return tracker.counts


def ask_play_again(io: QuizIO) -> bool:
    """Re-prompt until the player answers yes or no (any case)."""
    while True:
        reply = io.ask(PLAY_AGAIN_PROMPT).casefold()
        if reply == "yes":
            return True
        if reply == "no":
            return False
        io.say("Please enter Yes or No.")


def run_session(
    catalog: Sequence[CountryRecord],
    rng: random.Random,
    io: QuizIO,
    on_round_complete: Callable[[RoundCounts], None] | None = None,
) -> SessionTotals:
    """Play rounds until the player declines another, returning the cumulative totals.

    Args:
        catalog: Countries to draw questions from.
        rng: Single random source for the whole session.
        io: Console channel for prompts and feedback.
        on_round_complete: Optional callback invoked after each round is folded in.
    """
    totals = SessionTotals()

    keep_playing = True
    while keep_playing:
        counts = play_round(catalog, rng, io)
        totals.fold_round(counts)
        if on_round_complete:
            on_round_complete(counts)

        keep_playing = ask_play_again(io)
        io.say()

    logger.info("Session finished after %d round(s)", totals.games_played)
    return totals
