"""
Command engine: owns the working directory and executes shell commands.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from file_manager.entities.command import (
    ChangeDirectoryCommand,
    Command,
    CopyCommand,
    ExitCommand,
    HelpCommand,
    InvalidCommand,
    ListCommand,
    MakeDirectoryCommand,
    MoveCommand,
    PwdCommand,
    RemoveCommand,
    parse_command,
)
from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_system_port import FileSystemPort
from file_manager.use_cases.files.list_files import ListFilesUseCase

INVALID_COMMAND = "Invalid command. Type 'help' for available commands."
MISSING_SOURCE = "Source file does not exist"
MISSING_TARGET = "File or directory does not exist"

HELP_LINES = [
    "",
    "Available Commands:",
    "ls              - List files and directories",
    "cd <path>       - Change directory",
    "mkdir <name>    - Create new directory",
    "cp <src> <dest> - Copy file",
    "mv <src> <dest> - Move file",
    "rm <name>       - Remove file",
    "pwd             - Print working directory",
    "help            - Show this help message",
    "exit            - Exit program",
]


@dataclass
class CommandResult:
    """Rendered output of one command."""

    lines: list[str] = field(default_factory=list)
    should_exit: bool = False


class CommandEngine:
    """
    Interprets parsed commands against an in-memory working directory.

    The working directory is never applied to the process with chdir; every
    argument path is resolved against it before reaching the filesystem port.
    Errors from the port are rendered as a single output line and never
    propagate to the caller.
    """

    def __init__(
        self,
        file_system: FileSystemPort,
        list_files_use_case: Optional[ListFilesUseCase] = None,
        working_directory: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the engine.

        Args:
            file_system: Port for filesystem primitives
            list_files_use_case: Use case used by 'ls'; built from file_system if None
            working_directory: Initial directory, canonicalized; defaults to the
                process current directory
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)
        self._list_files = list_files_use_case or ListFilesUseCase(
            file_system, self._logger
        )
        if working_directory is None:
            self._working_directory = file_system.current_directory()
        else:
            self._working_directory = file_system.canonicalize(working_directory)

    @property
    def working_directory(self) -> str:
        return self._working_directory

    def resolve(self, argument: str) -> str:
        """
        Resolve a command argument to a path.

        '..' is the parent of the working directory, a leading '/' is kept as
        absolute, anything else is joined onto the working directory. No
        further normalization is done.
        """
        if argument == "..":
            return self._file_system.parent_of(self._working_directory)
        if argument.startswith("/"):
            return argument
        return self._file_system.join(self._working_directory, argument)

    def execute(self, verb: str, args: list[str]) -> CommandResult:
        """
        Parse and run a single command.

        Args:
            verb: First token of the command line
            args: Positional arguments

        Returns:
            CommandResult with the rendered output lines
        """
        return self.run(parse_command(verb, args))

    def run(self, command: Command) -> CommandResult:
        self._logger.debug(f"Running {command!r} in {self._working_directory}")
        if isinstance(command, ExitCommand):
            return CommandResult(should_exit=True)
        if isinstance(command, HelpCommand):
            return CommandResult(list(HELP_LINES))
        if isinstance(command, PwdCommand):
            return CommandResult([self._working_directory])
        if isinstance(command, ListCommand):
            return self._list_directory()
        if isinstance(command, ChangeDirectoryCommand):
            return self._change_directory(command.path)
        if isinstance(command, MakeDirectoryCommand):
            return self._create_directory(command.name)
        if isinstance(command, CopyCommand):
            return self._copy_file(command.source, command.destination)
        if isinstance(command, MoveCommand):
            return self._move_file(command.source, command.destination)
        if isinstance(command, RemoveCommand):
            return self._remove(command.name)
        if isinstance(command, InvalidCommand):
            self._logger.info(f"Rejected command: {command.verb!r}")
        return CommandResult([INVALID_COMMAND])

    def _list_directory(self) -> CommandResult:
        try:
            entries = self._list_files.execute(self._working_directory)
        except FileRepositoryError as e:
            return CommandResult([f"Error listing directory: {e}"])
        lines = ["", f"Contents of {self._working_directory}:"]
        lines.extend(entry.render() for entry in entries)
        return CommandResult(lines)

    def _change_directory(self, path: str) -> CommandResult:
        target = self.resolve(path)
        try:
            if not (
                self._file_system.exists(target)
                and self._file_system.is_directory(target)
            ):
                return CommandResult([f"Directory does not exist: {target}"])
            canonical = self._file_system.canonicalize(target)
        except FileRepositoryError as e:
            return CommandResult([f"Error changing directory: {e}"])
        self._working_directory = canonical
        self._logger.info(f"Working directory is now {canonical}")
        return CommandResult([f"Changed directory to: {canonical}"])

    def _create_directory(self, name: str) -> CommandResult:
        target = self.resolve(name)
        try:
            self._file_system.create_directory(target)
        except FileRepositoryError as e:
            return CommandResult([f"Error creating directory: {e}"])
        return CommandResult([f"Created directory: {target}"])

    def _copy_file(self, source: str, destination: str) -> CommandResult:
        source_path = self.resolve(source)
        destination_path = self.resolve(destination)
        try:
            if not self._file_system.exists(source_path):
                return CommandResult([MISSING_SOURCE])
            self._file_system.copy(source_path, destination_path)
        except FileRepositoryError as e:
            return CommandResult([f"Error copying file: {e}"])
        return CommandResult([f"Copied {source} to {destination}"])

    def _move_file(self, source: str, destination: str) -> CommandResult:
        source_path = self.resolve(source)
        destination_path = self.resolve(destination)
        try:
            if not self._file_system.exists(source_path):
                return CommandResult([MISSING_SOURCE])
            self._file_system.rename(source_path, destination_path)
        except FileRepositoryError as e:
            return CommandResult([f"Error moving file: {e}"])
        return CommandResult([f"Moved {source} to {destination}"])

    def _remove(self, name: str) -> CommandResult:
        target = self.resolve(name)
        try:
            if not self._file_system.exists(target):
                return CommandResult([MISSING_TARGET])
            self._file_system.remove_all(target)
        except FileRepositoryError as e:
            return CommandResult([f"Error removing file: {e}"])
        return CommandResult([f"Removed: {name}"])
