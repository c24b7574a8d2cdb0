"""Built-in shell commands."""

import os
import sys
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from tinysh.directory import cd_target, change_directory
from tinysh.history import HistoryEntry
from tinysh.resolver import find_executable

if TYPE_CHECKING:
    from tinysh.shell import Shell

BuiltinHandler: TypeAlias = Callable[[list[str], "Shell"], int]


def builtin_exit(args: list[str], shell: "Shell") -> int:
    if not args:
        sys.exit(0)
    sys.exit(0 if args[-1].strip() == "0" else 1)


def builtin_echo(args: list[str], shell: "Shell") -> int:
    if not args:
        print("echo: missing operand", file=sys.stderr)
        return 1
    print(" ".join(args))
    return 0


def builtin_type(args: list[str], shell: "Shell") -> int:
    if not args:
        print("type: missing operand", file=sys.stderr)
        return 1

    name = args[0]
    match name:
        case n if n in BUILTIN_REGISTRY:
            print(f"{name} is a shell builtin")
        case _:
            path = find_executable(name)
            if path is None:
                print(f"{name}: command not found", file=sys.stderr)
                return 1
            print(f"{name} is {path}")
    return 0


def builtin_pwd(args: list[str], shell: "Shell") -> int:
    try:
        print(os.getcwd())
    except OSError as e:
        print(f"pwd: {e.strerror or e}", file=sys.stderr)
        return 1
    return 0


def builtin_cd(args: list[str], shell: "Shell") -> int:
    if not args:
        arg, target = shell.home, shell.home
    else:
        arg = args[0]
        try:
            cwd = os.getcwd()
        except OSError as e:
            print(f"cd: {e.strerror or e}", file=sys.stderr)
            return 1
        target = cd_target(arg, cwd, shell.home)

    try:
        change_directory(target)
    except (FileNotFoundError, NotADirectoryError):
        print(f"cd: {arg}: No such file or directory", file=sys.stderr)
        return 1
    except PermissionError:
        print(f"cd: {arg}: Permission denied", file=sys.stderr)
        return 1
    return 0


def builtin_ls(args: list[str], shell: "Shell") -> int:
    try:
        with os.scandir(os.getcwd()) as entries:
            names = [entry.name for entry in entries]
    except OSError as e:
        print(f"ls: {e.strerror or e}", file=sys.stderr)
        return 1
    for name in names:
        print(name)
    return 0


def _print_entries(entries: list[HistoryEntry]) -> None:
    for entry in entries:
        print(f"  {entry.index}  {entry.text}")


def _history_load(shell: "Shell", path: str) -> int:
    try:
        shell.history.load(path)
    except FileNotFoundError:
        print(f"history: {path}: No such file or directory", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"history: {path}: {e.strerror or e}", file=sys.stderr)
        return 1
    return 0


def _history_save(shell: "Shell", path: str, truncate: bool) -> int:
    try:
        shell.history.save(path, truncate=truncate)
    except OSError as e:
        print(f"history: {path}: {e.strerror or e}", file=sys.stderr)
        return 1
    return 0


def builtin_history(args: list[str], shell: "Shell") -> int:
    match args:
        case ["-r", path]:
            return _history_load(shell, path)
        case ["-a", path]:
            return _history_save(shell, path, truncate=False)
        case ["-w", path]:
            return _history_save(shell, path, truncate=True)
        case ["-r"]:
            return _history_load(shell, shell.history_file)
        case [count]:
            try:
                n = int(count)
            except ValueError:
                print("history: argument should be a number", file=sys.stderr)
                return 1
            _print_entries(shell.history.tail(n))
        case _:
            _print_entries(list(shell.history))
    return 0


def builtin_clear(args: list[str], shell: "Shell") -> int:
    print("\033[2J\033[H", end="", flush=True)
    return 0


BUILTIN_REGISTRY: dict[str, BuiltinHandler] = {
    "exit": builtin_exit,
    "echo": builtin_echo,
    "type": builtin_type,
    "pwd": builtin_pwd,
    "cd": builtin_cd,
    "ls": builtin_ls,
    "history": builtin_history,
    "clear": builtin_clear,
}
