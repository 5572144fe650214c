"""
Local file system adapter implementation of the filesystem port.
"""

import logging
import os
import shutil
from pathlib import Path

from typing_extensions import override

from file_manager.entities.directory_entry import DirectoryEntry, EntryKind
from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_system_port import FileSystemPort


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the filesystem port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    @override
    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def iterate_directory(self, path: str) -> list[DirectoryEntry]:
        """
        Enumerate the entries of a directory.

        The scandir handle is closed before returning, on success and on error.

        Args:
            path: Directory to enumerate

        Returns:
            List of DirectoryEntry entities in host order

        Raises:
            FileRepositoryError: If the directory cannot be read
        """
        self._logger.debug(f"Enumerating directory: {path}")
        try:
            entries: list[DirectoryEntry] = []
            with os.scandir(path) as it:
                for item in it:
                    kind = EntryKind.DIRECTORY if item.is_dir() else EntryKind.OTHER
                    entries.append(DirectoryEntry(item.name, kind))
            return entries
        except (OSError, ValueError) as e:
            raise FileRepositoryError(str(e)) from e

    @override
    def canonicalize(self, path: str) -> str:
        try:
            return str(Path(path).resolve(strict=True))
        except (OSError, ValueError) as e:
            raise FileRepositoryError(str(e)) from e

    @override
    def create_directory(self, path: str) -> None:
        self._logger.debug(f"Creating directory: {path}")
        try:
            os.mkdir(path)
        except (OSError, ValueError) as e:
            raise FileRepositoryError(str(e)) from e

    @override
    def copy(self, source: str, destination: str) -> None:
        """
        Copy file contents and permission bits from source to destination.

        An existing destination file is replaced. Directory sources and
        directory destinations are rejected by the host.

        Raises:
            FileRepositoryError: If the copy fails
        """
        self._logger.debug(f"Copying {source} to {destination}")
        try:
            shutil.copyfile(source, destination)
            shutil.copymode(source, destination)
        except (OSError, ValueError) as e:
            raise FileRepositoryError(str(e)) from e

    @override
    def rename(self, source: str, destination: str) -> None:
        self._logger.debug(f"Renaming {source} to {destination}")
        try:
            os.rename(source, destination)
        except (OSError, ValueError) as e:
            raise FileRepositoryError(str(e)) from e

    @override
    def remove_all(self, path: str) -> None:
        """
        Remove a file or symlink directly, or a directory recursively.

        Raises:
            FileRepositoryError: If removal fails
        """
        self._logger.debug(f"Removing: {path}")
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                shutil.rmtree(path)
            else:
                os.remove(path)
        except (OSError, ValueError) as e:
            raise FileRepositoryError(str(e)) from e

    @override
    def parent_of(self, path: str) -> str:
        return os.path.dirname(path.rstrip(os.sep)) or os.sep

    @override
    def join(self, base: str, part: str) -> str:
        return os.path.join(base, part)

    @override
    def current_directory(self) -> str:
        try:
            return self.canonicalize(os.getcwd())
        except (OSError, ValueError) as e:
            raise FileRepositoryError(str(e)) from e
