"""Line source for the interactive loop, backed by readline."""

import contextlib
import readline
from collections.abc import Iterable

from tinysh.completion import setup_completion


class LineReader:
    """Reads prompted lines and keeps a persistent per-line log.

    Every remembered line is also appended to `log_file` as soon as it
    is entered, so the next session can pick it up.
    """

    def __init__(self, log_file: str | None = None, candidates: Iterable[str] = ()) -> None:
        self.log_file = log_file
        setup_completion(candidates)

    def seed(self, lines: Iterable[str]) -> None:
        """Make earlier lines available for up-arrow recall."""
        for line in lines:
            readline.add_history(line)

    def read_line(self, prompt: str) -> str:
        """Read one line; raises EOFError at end of input."""
        return input(prompt)

    def remember(self, line: str) -> None:
        readline.add_history(line)
        if self.log_file is None:
            return
        with contextlib.suppress(PermissionError, OSError):
            with open(self.log_file, "a", encoding="utf-8") as f:
                f.write(line + "\n")
