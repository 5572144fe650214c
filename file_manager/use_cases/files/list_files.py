"""
Use case for listing the entries of a directory in display order.
"""

import logging
from typing import Optional

from file_manager.entities.directory_entry import DirectoryEntry
from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_system_port import FileSystemPort


class ListFilesUseCase:
    """Use case for listing a directory, directories first then by name."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port for filesystem primitives
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, directory: str) -> list[DirectoryEntry]:
        """
        List all entries in a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            DirectoryEntry entities, directories before everything else and
            each group in ascending order of the raw name

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            self._logger.info(f"Listing entries in directory: {directory}")
            entries = self._file_system.iterate_directory(directory)
            self._logger.info(f"Found {len(entries)} entries")
            return sorted(entries, key=DirectoryEntry.sort_key)
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing entries: {e}")
            raise FileRepositoryError(f"Failed to list {directory}: {str(e)}")
