"""Readline tab completion for command names and paths."""

import os
import readline
from collections.abc import Iterable


class Completer:
    """Readline completer over a fixed set of command names.

    The first word of a line completes from `candidates`; every later
    word completes as a path.
    """

    def __init__(self, candidates: Iterable[str]) -> None:
        self.candidates = sorted(set(candidates))
        self._matches: list[str] = []

    def __call__(self, text: str, state: int) -> str | None:
        if state == 0:
            before = readline.get_line_buffer()[: readline.get_begidx()]
            if before.strip():
                self._matches = complete_path(text)
            else:
                self._matches = complete_command(text, self.candidates)
        return self._matches[state] if state < len(self._matches) else None


def setup_completion(candidates: Iterable[str]) -> Completer:
    """Install a Completer for `candidates` as the readline completer."""
    completer = Completer(candidates)
    readline.set_completer(completer)
    readline.set_completer_delims(" \t\n")
    readline.parse_and_bind("tab: complete")
    return completer


def complete_command(text: str, candidates: Iterable[str]) -> list[str]:
    """Command names starting with `text`, each followed by a space."""
    return sorted({name + " " for name in candidates if name.startswith(text)})


def complete_path(text: str) -> list[str]:
    """Entries matching `text`; directories get a trailing '/'."""
    head, prefix = os.path.split(text)
    try:
        with os.scandir(head or ".") as entries:
            found = [
                os.path.join(head, e.name) + ("/" if e.is_dir() else "")
                for e in entries
                if e.name.startswith(prefix)
            ]
    except OSError:
        return []
    return sorted(found)
