"""Two-attempt answer judging."""

import logging

from geoquiz.console import QuizIO
from geoquiz.models import AttemptOutcome, Question

logger = logging.getLogger(__name__)

FIRST_PROMPT = "Your answer: "
SECOND_PROMPT = "Your second answer: "


def _matches(guess: str, answer: str) -> bool:
    return guess.lower() == answer.lower()


def judge_answer(question: Question, io: QuizIO) -> AttemptOutcome:
    """Read at most two answers for ``question`` and classify the result.

    The expected answer is only revealed after the second miss.
    """
    if _matches(io.ask(FIRST_PROMPT), question.answer):
        io.say("CORRECT")
        logger.debug("Correct on first attempt: %s", question.answer)
        return AttemptOutcome.CORRECT_FIRST_TRY

    io.say("INCORRECT. Try once more.")

    if _matches(io.ask(SECOND_PROMPT), question.answer):
        io.say("CORRECT")
        logger.debug("Correct on second attempt: %s", question.answer)
        return AttemptOutcome.CORRECT_SECOND_TRY

    io.say("INCORRECT.")
    io.say(f"The correct answer was {question.answer}")
    logger.debug("Incorrect on both attempts: %s", question.answer)
    return AttemptOutcome.INCORRECT_BOTH
