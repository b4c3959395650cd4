"""Shared pytest fixtures."""

from datetime import datetime
from pathlib import Path

import pytest

from geoquiz.console import QuizIO
from geoquiz.models import CountryRecord, Question
from geoquiz.score import ScoreRecord


class ScriptedIO(QuizIO):
    """Test double QuizIO: replays canned answers and records everything printed."""

    def __init__(self, answers: list[str] | None = None) -> None:
        self._answers = list(answers or [])
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def ask(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise EOFError("no scripted answers left")
        return self._answers.pop(0).strip()

    def say(self, text: str = "") -> None:
        self.lines.append(text)

    @property
    def remaining(self) -> int:
        return len(self._answers)


class ScriptedRandom:
    """Stands in for random.Random: randrange returns scripted values in order."""

    def __init__(self, values: list[int]) -> None:
        self._values = list(values)
        self.calls: list[int] = []

    def randrange(self, stop: int) -> int:
        self.calls.append(stop)
        if not self._values:
            raise AssertionError("randrange called more times than scripted")
        value = self._values.pop(0)
        assert 0 <= value < stop, f"scripted value {value} out of range for randrange({stop})"
        return value


@pytest.fixture
def sample_country() -> CountryRecord:
    return CountryRecord(
        name="Canada",
        capital="Ottawa",
        facts=(
            "It has the longest coastline of any country.",
            "Its flag features a red maple leaf.",
            "It shares the world's longest international border with one neighbour.",
        ),
    )


@pytest.fixture
def second_country() -> CountryRecord:
    return CountryRecord(
        name="New Zealand",
        capital="Wellington",
        facts=(
            "Its native Maori call it Aotearoa.",
            "It was the first country to give women the vote.",
            "Sheep outnumber people there.",
        ),
    )


@pytest.fixture
def sample_question() -> Question:
    return Question(prompt='What is the capital city of "Canada"?', answer="Ottawa")


@pytest.fixture
def sample_score_record() -> ScoreRecord:
    return ScoreRecord(
        timestamp=datetime(2025, 11, 12, 10, 25, 30),
        games_played=1,
        correct_first=6,
        correct_second=2,
        incorrect=1,
    )


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """A countries directory with two bucket files; the rest are absent."""
    directory = tmp_path / "countries"
    directory.mkdir()
    (directory / "c.txt").write_text(
        "Canada:Ottawa\n"
        "It has the longest coastline of any country.\n"
        "Its flag features a red maple leaf.\n"
        "It shares the world's longest international border with one neighbour.\n",
        encoding="utf-8",
    )
    (directory / "j.txt").write_text(
        "Japan:Tokyo\n"
        "It is made up of more than six thousand islands.\n"
        "Mount Fuji is its highest peak.\n"
        "Its bullet trains are called Shinkansen.\n",
        encoding="utf-8",
    )
    return directory
