"""Exceptions raised by the quiz core."""


class ValidationError(ValueError):
    """Raised when a record is constructed with missing, blank or negative fields."""


class ScoreParseError(ValueError):
    """Raised when a stored score line does not match its expected label or number."""

    def __init__(self, line: str, message: str) -> None:
        self.line = line
        super().__init__(f"{message}: {line!r}")
