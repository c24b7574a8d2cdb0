"""Main shell loop: prompt, read, dispatch, repeat."""

import contextlib
import os
import sys

from tinysh.builtins import BUILTIN_REGISTRY
from tinysh.directory import display_path, home_directory
from tinysh.history import History, history_file_path
from tinysh.lineedit import LineReader
from tinysh.process import ProgramError, run_program
from tinysh.resolver import find_executable, path_executables
from tinysh.tokenizer import Command, parse_command


class Shell:
    """Shell state and main loop."""

    def __init__(self, home: str | None = None, history_file: str | None = None) -> None:
        self.home: str = home if home is not None else home_directory()
        self.history_file: str = history_file or history_file_path()
        self.history = History()
        self.last_exit_code: int = 0

    def load_history(self) -> None:
        """Pre-load the configured history file, if there is one."""
        with contextlib.suppress(FileNotFoundError, PermissionError, OSError):
            self.history.load(self.history_file)

    def get_prompt(self) -> str:
        try:
            cwd = os.getcwd()
        except OSError:
            cwd = "?"
        return f"{display_path(cwd, self.home)} $ "

    def command_candidates(self) -> list[str]:
        """Everything the first word of a line may complete to."""
        return sorted(set(BUILTIN_REGISTRY) | path_executables())

    def run_command(self, line: str) -> None:
        """Dispatch one line: builtins first, then executables on PATH."""
        cmd = parse_command(line.strip())
        if cmd is None:
            return

        handler = BUILTIN_REGISTRY.get(cmd.name)
        if handler is not None:
            self.last_exit_code = handler(cmd.args, self)
            return

        path = find_executable(cmd.name)
        if path is None:
            print(f"{cmd.name}: command not found", file=sys.stderr)
            self.last_exit_code = 127
            return

        self.last_exit_code = self._run_external(path, cmd)

    def _run_external(self, path: str, cmd: Command) -> int:
        try:
            code = run_program(path, cmd.name, cmd.args)
        except ProgramError as e:
            print(f"{cmd.name}: {e.strerror}", file=sys.stderr)
            return 126

        if code != 0:
            print(f"{cmd.name}: exited with status {code}", file=sys.stderr)
        return code

    def accept_line(self, line: str, reader: LineReader | None = None) -> None:
        """Record a line entered at the prompt, then run it."""
        line = line.strip()
        if not line:
            return

        self.history.record(line)
        if reader is not None:
            reader.remember(line)

        try:
            self.run_command(line)
        except KeyboardInterrupt:
            # Ctrl-C abandons the current command, not the session
            print()
            self.last_exit_code = 130

    def run(self, reader: LineReader | None = None) -> None:
        """Main shell loop."""
        if reader is None:
            reader = LineReader(self.history_file, self.command_candidates())
            reader.seed(entry.text for entry in self.history)

        while True:
            try:
                line = reader.read_line(self.get_prompt())
            except (EOFError, KeyboardInterrupt):
                print()
                break

            self.accept_line(line, reader)


def main() -> None:
    """Entry point."""
    shell = Shell()
    shell.load_history()
    shell.run()
