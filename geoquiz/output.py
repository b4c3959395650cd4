"""Rich console rendering for the menu and the score history."""

from rich.console import Console
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from geoquiz.score import TIMESTAMP_FORMAT, ScoreRecord

console = Console(legacy_windows=False)

MENU_LINES = [
    "=== Main Menu ===",
    "Press W to play the Word game.",
    "Press S to see past scores.",
    "Press Q to quit.",
]


def print_menu(out: Console = console) -> None:
    for line in MENU_LINES:
        out.print(line, markup=False, highlight=False)


def build_score_table(records: list[ScoreRecord]) -> Table:
    """One row per record; the score column is recomputed, never read from the file."""
    table = Table(title="Score History", header_style="bold cyan")
    table.add_column("Date and Time")
    table.add_column("Games", justify="right")
    table.add_column("First", justify="right")
    table.add_column("Second", justify="right")
    table.add_column("Incorrect", justify="right")
    table.add_column("Score", justify="right", style="bold green")

    for rec in records:
        table.add_row(
            rec.timestamp.strftime(TIMESTAMP_FORMAT),
            str(rec.games_played),
            str(rec.correct_first),
            str(rec.correct_second),
            str(rec.incorrect),
            str(rec.score),
        )
    return table


def print_score_history(records: list[ScoreRecord], out: Console = console) -> None:
    out.print(Rule("[bold cyan]Past Scores[/bold cyan]"))
    if not records:
        out.print(Text("No scores recorded yet.", style="dim"))
        return

    out.print(build_score_table(records))
    best = max(records, key=lambda r: r.score)
    out.print(
        Text(
            f"Best: {best.score} points on {best.timestamp.strftime(TIMESTAMP_FORMAT)} | "
            f"Sessions: {len(records)}",
            style="dim",
        )
    )
