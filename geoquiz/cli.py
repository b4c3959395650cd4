"""Click CLI: config loading, main menu, word game sessions and score history."""

import logging
import random
import sys
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from config.config_loader import SCORE_FORMATS, AppConfig, load_config
from geoquiz.console import QuizIO, RichConsoleIO
from geoquiz.errors import ScoreParseError, ValidationError
from geoquiz.game import run_session
from geoquiz.models import RoundCounts, SessionTotals
from geoquiz.output import print_menu, print_score_history
from geoquiz.score import ScoreRecord, append_score, append_totals, read_scores
from geoquiz.world import load_countries

logger = logging.getLogger(__name__)

console = Console(legacy_windows=False)

CMD_WORD = "W"
CMD_SCORES = "S"
CMD_QUIT = "Q"

_INVALID_CHOICE = "Invalid input. Please enter W, S, or Q."


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _parse_menu_choice(line: str) -> str | None:
    """Return the upper-cased first character of a menu reply, or None for blank input."""
    line = line.strip()
    if not line:
        return None
    return line[0].upper()


def _load_history(score_file: Path) -> list[ScoreRecord]:
    """Read past records; a score file that does not exist yet means no history."""
    if not score_file.exists():
        return []
    return read_scores(score_file)


def _save_session(totals: SessionTotals, score_file: Path, score_format: str) -> Path:
    if score_format == "totals":
        return append_totals(totals, score_file)
    return append_score(ScoreRecord.from_totals(totals), score_file)


def _log_round(counts: RoundCounts) -> None:
    logger.info(
        "Round finished: %d first-attempt, %d second-attempt, %d incorrect",
        counts.correct_first, counts.correct_second, counts.incorrect,
    )


def _run_word_game(config: AppConfig, io: QuizIO, rng: random.Random) -> SessionTotals | None:
    """Play one word game session and append its totals.

    Returns None when the game could not start (no data or unreadable files).
    """
    defaults = config.defaults
    try:
        catalog = load_countries(defaults.data_dir)
    except (OSError, UnicodeDecodeError, ValidationError) as exc:
        logger.error("Failed to load countries from %s: %s", defaults.data_dir, exc)
        io.say(f"Error: could not start Word game ({exc}).")
        io.say()
        return None

    if not catalog:
        io.say(f"Error: could not start Word game (no countries found in {defaults.data_dir}).")
        io.say()
        return None

    totals = run_session(catalog, rng, io, on_round_complete=_log_round)
    saved = _save_session(totals, defaults.score_file, defaults.score_format)
    io.say(f"Thanks for playing! Totals were saved to {saved.name}")
    return totals


def _show_scores(score_file: Path, out: Console = console) -> bool:
    """Print the score history. Returns False if the file could not be decoded or parsed."""
    try:
        records = _load_history(score_file)
    except (ScoreParseError, UnicodeDecodeError) as exc:
        logger.error("Corrupt score file %s: %s", score_file, exc)
        out.print(f"[bold red]Error:[/bold red] could not read {score_file}: {exc}")
        return False
    print_score_history(records, out)
    return True


def _menu_loop(config: AppConfig, io: QuizIO, rng: random.Random) -> None:
    while True:
        print_menu()
        choice = _parse_menu_choice(io.ask("Your choice: "))

        if choice == CMD_WORD:
            _run_word_game(config, io, rng)
        elif choice == CMD_SCORES:
            _show_scores(config.defaults.score_file)
            io.say()
        elif choice == CMD_QUIT:
            break
        else:
            io.say(_INVALID_CHOICE)
            io.say()

    io.say("Goodbye.")


@click.command()
@click.option("--data-dir", default=None, type=click.Path(file_okay=False),
              help="Directory with a.txt .. z.txt country files (default: from config)")
@click.option("--score-file", default=None, type=click.Path(dir_okay=False),
              help="Score file to append to (default: from config)")
@click.option("--format", "score_format", default=None, type=click.Choice(SCORE_FORMATS),
              help="Score block written at session end (default: from config)")
@click.option("--seed", default=None, type=int, help="Seed for reproducible questions")
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False),
              help="Alternative settings.yaml")
@click.option("--scores", "show_scores", is_flag=True, help="Print the score history and exit")
@click.option("--verbose", is_flag=True, help="Enable DEBUG-level logging")
def main(
    data_dir: str | None,
    score_file: str | None,
    score_format: str | None,
    seed: int | None,
    config_path: str | None,
    show_scores: bool,
    verbose: bool,
) -> None:
    """Geography word game -- ten questions per round, two attempts each.

    \b
    Examples:
      python -m geoquiz.cli
      python -m geoquiz.cli --seed 42 --format totals
      python -m geoquiz.cli --scores
    """
    load_dotenv()
    _setup_logging(verbose)

    try:
        config = load_config(Path(config_path)) if config_path else load_config()
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        sys.exit(1)

    # CLI flags win over settings.yaml and environment
    if data_dir:
        config.defaults.data_dir = Path(data_dir)
    if score_file:
        config.defaults.score_file = Path(score_file)
    if score_format:
        config.defaults.score_format = score_format
    if seed is not None:
        config.defaults.seed = seed

    if show_scores:
        if not _show_scores(config.defaults.score_file):
            sys.exit(1)
        return

    rng = random.Random(config.defaults.seed)
    io = RichConsoleIO(console)

    try:
        _menu_loop(config, io, rng)
    except EOFError:
        console.print()
        logger.warning("Input closed, exiting without saving the current session")
    except OSError as exc:
        console.print(f"[bold red]Error:[/bold red] score file problem: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
