"""Country data loading from per-letter files (a.txt .. z.txt)."""

import logging
import string
from collections.abc import Iterator
from pathlib import Path

from geoquiz.models import FACTS_PER_COUNTRY, CountryRecord

logger = logging.getLogger(__name__)


def _split_header(line: str) -> tuple[str, str] | None:
    """Split "Name:Capital" into its two parts, or None if the header is malformed."""
    parts = [p.strip() for p in line.split(":")]
    if len(parts) != 2 or not all(parts):
        return None
    return parts[0], parts[1]


def _read_records(lines: Iterator[str], source: Path) -> Iterator[CountryRecord]:
    for raw in lines:
        line = raw.strip()
        if not line:
            continue

        header = _split_header(line)
        if header is None:
            logger.debug("Skipping malformed header in %s: %r", source.name, line)
            continue

        facts = [next(lines, None) for _ in range(FACTS_PER_COUNTRY)]
        if any(f is None for f in facts):
            logger.warning("Incomplete fact block for %s in %s, stopping", header[0], source.name)
            return

        name, capital = header
        yield CountryRecord(name=name, capital=capital, facts=tuple(f.strip() for f in facts))


def load_countries(directory: Path) -> list[CountryRecord]:
    """Load every country from a.txt .. z.txt in ``directory``; missing files are skipped.

    Records are keyed by name, so a later duplicate replaces an earlier one.

    Raises:
        ValidationError: If a record has a blank fact.
        OSError: If an existing file cannot be read.
    """
    countries: dict[str, CountryRecord] = {}

    for letter in string.ascii_lowercase:
        file_path = directory / f"{letter}.txt"
        if not file_path.exists():
            continue
        with file_path.open("r", encoding="utf-8") as f:
            for record in _read_records(iter(f), file_path):
                countries[record.name] = record

    logger.info("Loaded %d countries from: %s", len(countries), directory)
    return list(countries.values())
