"""Run external programs in the foreground."""

import subprocess


class ProgramError(OSError):
    """An external program could not be started."""


def run_program(path: str, name: str, args: list[str]) -> int:
    """Run the executable at `path` and wait for it to finish.

    The child sees `name` as argv[0] and shares the shell's stdin,
    stdout and stderr, so interactive programs work unchanged.
    Returns the exit status (negative if killed by a signal).
    """
    try:
        result = subprocess.run([name, *args], executable=path)
    except OSError as e:
        raise ProgramError(e.errno, e.strerror or str(e), path) from e
    return result.returncode
