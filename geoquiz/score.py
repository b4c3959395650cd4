"""Score records and the append-only score file.

Block format written by ``append_score`` (one record, six lines):

    Date and Time: 2025-11-12 10:25:30
    Games Played: 1
    Correct First Attempts: 6
    Correct Second Attempts: 2
    Incorrect Attempts: 1
    Score: 14 points

``read_scores`` scans for the "Date and Time:" marker and skips anything else,
so the file may also hold the totals blocks written by ``append_totals``.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from geoquiz.errors import ScoreParseError, ValidationError
from geoquiz.models import SessionTotals

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

DATE_LABEL = "Date and Time:"
GAMES_LABEL = "Games Played:"
FIRST_LABEL = "Correct First Attempts:"
SECOND_LABEL = "Correct Second Attempts:"
INCORRECT_LABEL = "Incorrect Attempts:"
SCORE_LABEL = "Score:"

POINTS_FIRST_ATTEMPT = 2
POINTS_SECOND_ATTEMPT = 1

# Lines following the marker: four counts, then the stored score
_BLOCK_TAIL = 5


@dataclass(frozen=True)
class ScoreRecord:
    timestamp: datetime
    games_played: int
    correct_first: int
    correct_second: int
    incorrect: int

    def __post_init__(self) -> None:
        if not isinstance(self.timestamp, datetime):
            raise ValidationError("timestamp is required")
        counts = (self.games_played, self.correct_first, self.correct_second, self.incorrect)
        if not all(isinstance(c, int) and not isinstance(c, bool) for c in counts):
            raise ValidationError(f"counts must be integers: {counts}")
        if any(c < 0 for c in counts):
            raise ValidationError(f"counts cannot be negative: {counts}")

    @property
    def score(self) -> int:
        return self.correct_first * POINTS_FIRST_ATTEMPT + self.correct_second * POINTS_SECOND_ATTEMPT

    @classmethod
    def from_totals(cls, totals: SessionTotals, timestamp: datetime | None = None) -> "ScoreRecord":
        """Snapshot session totals, stamped with ``timestamp`` or now (to the second)."""
        when = timestamp if timestamp is not None else datetime.now().replace(microsecond=0)
        return cls(
            timestamp=when,
            games_played=totals.games_played,
            correct_first=totals.correct_first,
            correct_second=totals.correct_second,
            incorrect=totals.incorrect,
        )

    def to_text(self) -> str:
        lines = [
            f"{DATE_LABEL} {self.timestamp.strftime(TIMESTAMP_FORMAT)}",
            f"{GAMES_LABEL} {self.games_played}",
            f"{FIRST_LABEL} {self.correct_first}",
            f"{SECOND_LABEL} {self.correct_second}",
            f"{INCORRECT_LABEL} {self.incorrect}",
            f"{SCORE_LABEL} {self.score} points",
        ]
        return "".join(line + "\n" for line in lines)

    __str__ = to_text


def append_score(record: ScoreRecord, path: Path) -> Path:
    """Append one six-line record block to ``path``, creating the file if needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8", newline="\n") as f:
        f.write(record.to_text())
    logger.info("Score record appended to: %s", path)
    return path


def append_totals(totals: SessionTotals, path: Path) -> Path:
    """Append the dash-prefixed session totals block followed by one blank line."""
    games_label = "word game played" if totals.games_played == 1 else "word games played"
    lines = [
        f"- {totals.games_played} {games_label}",
        f"- {totals.correct_first} correct answers on the first attempt",
        f"- {totals.correct_second} correct answers on the second attempt",
        f"- {totals.incorrect} incorrect answers on two attempts each",
        "",
    ]
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8", newline="\n") as f:
        f.write("".join(line + "\n" for line in lines))
    logger.info("Session totals appended to: %s", path)
    return path


def _parse_timestamp(line: str) -> datetime:
    text = line[len(DATE_LABEL):].strip()
    try:
        return datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise ScoreParseError(line, "Invalid timestamp") from exc


def _parse_count(line: str, label: str) -> int:
    """Return the first token after ``label`` as a non-negative int."""
    trimmed = line.strip()
    if not trimmed.startswith(label):
        raise ScoreParseError(line, f"Expected {label!r}")

    tokens = trimmed[len(label):].split()
    if not tokens:
        raise ScoreParseError(line, "Missing number")
    try:
        value = int(tokens[0])
    except ValueError as exc:
        raise ScoreParseError(line, "Not a number") from exc
    if value < 0:
        raise ScoreParseError(line, "Negative number")
    return value


def _build_record(timestamp: datetime, tail: list[str]) -> ScoreRecord:
    games_line, first_line, second_line, incorrect_line, _score_line = tail
    return ScoreRecord(
        timestamp=timestamp,
        games_played=_parse_count(games_line, GAMES_LABEL),
        correct_first=_parse_count(first_line, FIRST_LABEL),
        correct_second=_parse_count(second_line, SECOND_LABEL),
        incorrect=_parse_count(incorrect_line, INCORRECT_LABEL),
    )


def parse_scores(lines: Iterable[str]) -> list[ScoreRecord]:
    """Parse records out of an iterable of lines.

    Seeks a "Date and Time:" marker, then consumes exactly five more lines.
    Lines outside a block are ignored; a block cut short by the end of input
    is dropped.

    Raises:
        ScoreParseError: If a block's timestamp or one of its count lines is malformed.
    """
    records: list[ScoreRecord] = []
    timestamp: datetime | None = None
    tail: list[str] = []

    for raw in lines:
        line = raw.strip()
        if timestamp is None:
            if line.startswith(DATE_LABEL):
                timestamp = _parse_timestamp(line)
                tail = []
            continue

        tail.append(line)
        if len(tail) == _BLOCK_TAIL:
            records.append(_build_record(timestamp, tail))
            timestamp = None

    if timestamp is not None:
        logger.debug("Dropping truncated score block at end of input (%d/%d lines)", len(tail), _BLOCK_TAIL)
    return records


def read_scores(path: Path) -> list[ScoreRecord]:
    """Read every complete record block from ``path``.

    Raises:
        OSError: If the file cannot be opened or read.
        ScoreParseError: On a malformed block.
    """
    with path.open("r", encoding="utf-8") as f:
        records = parse_scores(f)
    logger.info("Read %d score record(s) from: %s", len(records), path)
    return records
