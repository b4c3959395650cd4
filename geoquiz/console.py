"""Line-based console channel used by the quiz engine."""

from abc import ABC, abstractmethod

from rich.console import Console


class QuizIO(ABC):
    """Abstract line channel: the engine asks for answers and prints feedback through it."""

    @abstractmethod
    def ask(self, prompt: str) -> str:
        """Show ``prompt`` and return the next input line, trimmed.

        Raises:
            EOFError: When the input stream is closed.
        """
        ...

    @abstractmethod
    def say(self, text: str = "") -> None:
        """Print one line of text."""
        ...


class RichConsoleIO(QuizIO):
    """QuizIO backed by a rich Console. Markup is off so country text prints verbatim."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(legacy_windows=False)

    def ask(self, prompt: str) -> str:
        return self._console.input(prompt, markup=False).strip()

    def say(self, text: str = "") -> None:
        self._console.print(text, markup=False, highlight=False)
