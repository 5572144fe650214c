"""
Command domain entities: tokenizer and the closed set of shell commands.

A command line is parsed up front into one of the frozen dataclasses below.
Each variant carries exactly the arguments its verb consumes; anything that
does not match a known verb with enough arguments becomes ``InvalidCommand``.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class HelpCommand:
    pass


@dataclass(frozen=True)
class PwdCommand:
    pass


@dataclass(frozen=True)
class ListCommand:
    pass


@dataclass(frozen=True)
class ChangeDirectoryCommand:
    path: str


@dataclass(frozen=True)
class MakeDirectoryCommand:
    name: str


@dataclass(frozen=True)
class CopyCommand:
    source: str
    destination: str


@dataclass(frozen=True)
class MoveCommand:
    source: str
    destination: str


@dataclass(frozen=True)
class RemoveCommand:
    name: str


@dataclass(frozen=True)
class ExitCommand:
    pass


@dataclass(frozen=True)
class InvalidCommand:
    verb: str


Command = Union[
    HelpCommand,
    PwdCommand,
    ListCommand,
    ChangeDirectoryCommand,
    MakeDirectoryCommand,
    CopyCommand,
    MoveCommand,
    RemoveCommand,
    ExitCommand,
    InvalidCommand,
]


def tokenize(line: str, collapse_whitespace: bool = False) -> list[str]:
    """
    Split a command line into tokens.

    By default the line is split on every single space, so consecutive
    spaces produce empty tokens (``"cd  foo"`` gives ``["cd", "", "foo"]``).
    With ``collapse_whitespace`` the line is split on runs of whitespace and
    empty tokens are dropped. Quoting is never honored.

    Args:
        line: Raw input line without its trailing newline
        collapse_whitespace: Use whitespace-run splitting instead

    Returns:
        List of tokens; the first one is the verb
    """
    if collapse_whitespace:
        return line.split()
    return line.split(" ")


def parse_command(verb: str, args: list[str]) -> Command:
    """
    Map a verb and its positional arguments to a command variant.

    Extra arguments beyond what a verb needs are ignored.

    Args:
        verb: First token of the command line
        args: Remaining tokens

    Returns:
        The parsed command, or ``InvalidCommand`` for an unknown verb or
        missing arguments
    """
    if verb == "exit":
        return ExitCommand()
    if verb == "help":
        return HelpCommand()
    if verb == "ls":
        return ListCommand()
    if verb == "pwd":
        return PwdCommand()
    if verb == "cd" and len(args) >= 1:
        return ChangeDirectoryCommand(args[0])
    if verb == "mkdir" and len(args) >= 1:
        return MakeDirectoryCommand(args[0])
    if verb == "cp" and len(args) >= 2:
        return CopyCommand(args[0], args[1])
    if verb == "mv" and len(args) >= 2:
        return MoveCommand(args[0], args[1])
    if verb == "rm" and len(args) >= 1:
        return RemoveCommand(args[0])
    return InvalidCommand(verb)
