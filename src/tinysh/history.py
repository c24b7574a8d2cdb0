"""In-memory command history with plain-text file persistence."""

import os
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

DEFAULT_HISTORY_FILE = "/tmp/shell_history"


def history_file_path(environ: Mapping[str, str] | None = None) -> str:
    """HISTFILE if set, else the default location."""
    if environ is None:
        environ = os.environ
    return environ.get("HISTFILE") or DEFAULT_HISTORY_FILE


@dataclass(frozen=True)
class HistoryEntry:
    index: int
    text: str


class History:
    """Append-only, 1-indexed log of entered command lines.

    Blank lines are never stored, whether typed or read from a file.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[HistoryEntry]:
        for i, text in enumerate(self._lines, start=1):
            yield HistoryEntry(i, text)

    def record(self, line: str) -> HistoryEntry | None:
        line = line.strip()
        if not line:
            return None
        self._lines.append(line)
        return HistoryEntry(len(self._lines), line)

    def tail(self, n: int) -> list[HistoryEntry]:
        """The last `n` entries, oldest first."""
        if n <= 0:
            return []
        start = max(len(self._lines) - n, 0)
        return [HistoryEntry(i + 1, self._lines[i]) for i in range(start, len(self._lines))]

    def load(self, path: str) -> int:
        """Append the lines of `path` to the log, returning how many were added.

        Raises FileNotFoundError (leaving the log untouched) if `path`
        does not exist. Bytes that are not valid UTF-8 become U+FFFD.
        """
        with open(path, encoding="utf-8", errors="replace") as f:
            loaded = [line.rstrip("\n") for line in f]

        before = len(self._lines)
        for line in loaded:
            self.record(line)
        return len(self._lines) - before

    def save(self, path: str, truncate: bool = False) -> None:
        """Write every entry to `path`, followed by one blank line.

        The file is appended to unless `truncate` is set, in which case
        its previous contents are replaced.
        """
        mode = "w" if truncate else "a"
        with open(path, mode, encoding="utf-8") as f:
            for text in self._lines:
                f.write(text + "\n")
            f.write("\n")
            f.flush()
