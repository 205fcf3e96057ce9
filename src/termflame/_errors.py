from typing import Any


class TermflameError(Exception):
    """Exceptions raised in this package."""


class ProfileParseError(TermflameError):
    """A profile could not be turned into samples."""

    def __init__(self, message: str, *, lineno: int, line: str) -> None:
        super().__init__(f"line {lineno}: {message}: {line!r}")
        self.lineno = lineno
        self.line = line


class TermflameCommandError(TermflameError):
    """Exceptions raised from this package's CLI commands."""

    def __init__(self, *args: Any, exit_code: int) -> None:
        super().__init__(*args)
        self.exit_code = exit_code
