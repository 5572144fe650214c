"""
Filesystem port interface defining the contract for host filesystem primitives.
"""

from abc import ABC, abstractmethod

from file_manager.entities.directory_entry import DirectoryEntry


class FileSystemPort(ABC):
    """Port interface for filesystem primitives.

    Implementations never print. Host failures are raised as
    FileRepositoryError carrying the host message.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if something exists at the path."""
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """Return True if the path is a directory (following symlinks)."""
        pass

    @abstractmethod
    def iterate_directory(self, path: str) -> list[DirectoryEntry]:
        """
        Enumerate the entries of a directory.

        Args:
            path: Directory to enumerate

        Returns:
            Entries in host order (unsorted)

        Raises:
            FileRepositoryError: If the directory cannot be read
        """
        pass

    @abstractmethod
    def canonicalize(self, path: str) -> str:
        """
        Resolve '.', '..' and symbolic links against the real filesystem.

        Raises:
            FileRepositoryError: If any component does not exist
        """
        pass

    @abstractmethod
    def create_directory(self, path: str) -> None:
        """
        Create a single directory; parents must already exist.

        Raises:
            FileRepositoryError: If creation fails, including when the target exists
        """
        pass

    @abstractmethod
    def copy(self, source: str, destination: str) -> None:
        """
        Copy a file, replacing an existing destination file.

        Raises:
            FileRepositoryError: If the copy fails
        """
        pass

    @abstractmethod
    def rename(self, source: str, destination: str) -> None:
        """
        Rename a path with a single host call.

        Raises:
            FileRepositoryError: If the rename fails (e.g. across devices)
        """
        pass

    @abstractmethod
    def remove_all(self, path: str) -> None:
        """
        Remove a file, or a directory with all of its contents.

        Raises:
            FileRepositoryError: If removal fails
        """
        pass

    @abstractmethod
    def parent_of(self, path: str) -> str:
        """Return the parent of a path ('/' is its own parent)."""
        pass

    @abstractmethod
    def join(self, base: str, part: str) -> str:
        """Join two path components; an absolute part replaces the base."""
        pass

    @abstractmethod
    def current_directory(self) -> str:
        """Return the process current directory as a canonical absolute path."""
        pass
