"""Locate executables on PATH."""

import os
import stat

_EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def _search_dirs(path: str | None) -> list[str]:
    if path is None:
        path = os.environ.get("PATH", "")
    return [d for d in path.split(os.pathsep) if d]


def is_executable(filename: str) -> bool:
    """True for a regular file with at least one execute bit set."""
    try:
        st = os.stat(filename)
    except OSError:
        return False
    return stat.S_ISREG(st.st_mode) and bool(st.st_mode & _EXEC_BITS)


def find_executable(name: str, path: str | None = None) -> str | None:
    """Return the first PATH entry holding an executable called `name`.

    Directories are searched left to right; missing or unreadable ones
    are skipped. Names containing a separator are not looked up.
    """
    if not name or os.sep in name:
        return None

    for directory in _search_dirs(path):
        candidate = os.path.join(directory, name)
        if is_executable(candidate):
            return candidate
    return None


def path_executables(path: str | None = None) -> frozenset[str]:
    """Names of all executables found in the PATH directories."""
    commands: set[str] = set()

    for directory in _search_dirs(path):
        try:
            entries = os.listdir(directory)
        except OSError:
            continue
        for entry in entries:
            if is_executable(os.path.join(directory, entry)):
                commands.add(entry)

    return frozenset(commands)
