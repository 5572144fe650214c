"""
Directory entry domain entity.
"""

from dataclasses import dataclass
from enum import Enum


class EntryKind(Enum):
    """Kind discriminant of a directory entry."""

    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True)
class DirectoryEntry:
    """
    A single name found while listing a directory.

    Entries are produced per listing and are not retained between commands.
    """

    name: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def sort_key(self) -> tuple[bool, str]:
        """Directories first, then ordinal comparison of the raw name."""
        return (not self.is_dir, self.name)

    def render(self) -> str:
        """Render the entry as a listing line."""
        prefix = "[DIR]" if self.is_dir else "[FILE]"
        return f"{prefix} {self.name}"
