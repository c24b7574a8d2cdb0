"""Split shell input into a command name and its arguments."""

from dataclasses import dataclass, field


@dataclass
class Command:
    """A single command: the name to dispatch on and its arguments."""

    name: str
    args: list[str] = field(default_factory=list)


def tokenize(line: str) -> list[str]:
    """Tokenize a shell input line on runs of whitespace.

    There is no quoting or escaping: every run of non-space characters
    is one token, so 'echo "a b"' -> ['echo', '"a', 'b"'].
    """
    return line.split()


def parse_command(line: str) -> Command | None:
    """Build a Command from a raw line, or None if the line is blank."""
    tokens = tokenize(line)
    if not tokens:
        return None
    return Command(name=tokens[0], args=tokens[1:])
