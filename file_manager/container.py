"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from file_manager.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_manager.ports.files.file_system_port import FileSystemPort
from file_manager.use_cases.files.list_files import ListFilesUseCase
from file_manager.use_cases.shell.command_engine import CommandEngine


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_file_system(self) -> FileSystemPort:
        """
        Get filesystem adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_system"]

    def get_list_files_use_case(self) -> ListFilesUseCase:
        """
        Get list files use case with injected dependencies.

        Returns:
            Configured ListFilesUseCase
        """
        if "list_files_use_case" not in self._instances:
            file_system = self.get_file_system()
            self._instances["list_files_use_case"] = ListFilesUseCase(
                file_system, self._logger
            )
        return self._instances["list_files_use_case"]

    def get_command_engine(self, working_directory: Optional[str] = None) -> CommandEngine:
        """
        Get the command engine with injected dependencies.

        Args:
            working_directory: Initial working directory; defaults to the
                process current directory. Only honored on first creation.

        Returns:
            Configured CommandEngine
        """
        if "command_engine" not in self._instances:
            self._instances["command_engine"] = CommandEngine(
                self.get_file_system(),
                self.get_list_files_use_case(),
                working_directory=working_directory,
                logger=self._logger,
            )
        return self._instances["command_engine"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
