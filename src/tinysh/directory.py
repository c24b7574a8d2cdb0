"""Working directory helpers: home lookup, cd targets, prompt display."""

import os
from collections.abc import Mapping


def home_directory(environ: Mapping[str, str] | None = None) -> str:
    if environ is None:
        environ = os.environ
    return environ.get("HOME") or os.path.expanduser("~")


def display_path(cwd: str, home: str) -> str:
    """Abbreviate `home` to '~' when it is a literal prefix of `cwd`."""
    if home and cwd.startswith(home):
        return "~" + cwd[len(home) :]
    return cwd


def cd_target(arg: str, cwd: str, home: str) -> str:
    """Work out where `cd arg` should go.

    Arguments starting with '/' or '~' have every '~' replaced by the
    home directory and are otherwise used as is. Anything else is
    taken relative to `cwd`.
    """
    if arg.startswith(("/", "~")):
        return arg.replace("~", home)
    return os.path.join(cwd, arg)


def change_directory(target: str) -> None:
    os.chdir(target)
