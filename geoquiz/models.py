"""Dataclasses for the word game: countries, questions, outcomes and counters."""

from dataclasses import dataclass
from enum import Enum

from geoquiz.errors import ValidationError

FACTS_PER_COUNTRY = 3


def _require_text(value: str | None, field_name: str) -> None:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} can not be empty")


@dataclass(frozen=True)
class CountryRecord:
    name: str
    capital: str
    facts: tuple[str, str, str]

    def __post_init__(self) -> None:
        _require_text(self.name, "name")
        _require_text(self.capital, "capital")
        if self.facts is None or len(self.facts) != FACTS_PER_COUNTRY:
            raise ValidationError(f"a country needs exactly {FACTS_PER_COUNTRY} facts")
        for i, fact in enumerate(self.facts, start=1):
            _require_text(fact, f"fact{i}")
        # Facts given as a list are stored as a tuple
        object.__setattr__(self, "facts", tuple(self.facts))


@dataclass(frozen=True)
class Question:
    prompt: str
    answer: str


class AttemptOutcome(Enum):
    CORRECT_FIRST_TRY = "correct_first_try"
    CORRECT_SECOND_TRY = "correct_second_try"
    INCORRECT_BOTH = "incorrect_both"


@dataclass
class RoundCounts:
    correct_first: int = 0
    correct_second: int = 0
    incorrect: int = 0

    @property
    def total(self) -> int:
        return self.correct_first + self.correct_second + self.incorrect


@dataclass
class SessionTotals:
    games_played: int = 0
    correct_first: int = 0
    correct_second: int = 0
    incorrect: int = 0

    def fold_round(self, counts: RoundCounts) -> None:
        """Add one finished round. games_played always grows by exactly one."""
        self.games_played += 1
        self.correct_first += counts.correct_first
        self.correct_second += counts.correct_second
        self.incorrect += counts.incorrect
