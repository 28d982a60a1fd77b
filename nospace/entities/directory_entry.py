"""
Directory entry domain entities.

A listing line in a transcript is either a file with a size or a
sub-directory; both carry a name. ``DirectoryEntry`` is the union of the two.
"""

from dataclasses import dataclass
from typing import Union

from nospace.exceptions import FilesystemError

MAX_FILE_SIZE = 2**64 - 1


@dataclass(frozen=True)
class File:
    """
    File entry with its size in the transcript's units.
    """

    name: str
    size: int

    def __post_init__(self):
        if not self.name:
            raise FilesystemError("File name must be a non-empty string")
        if not 0 <= self.size <= MAX_FILE_SIZE:
            raise FilesystemError(
                f"File size must fit an unsigned 64-bit integer: {self.size}"
            )

    @property
    def is_dir(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{self.name} (file, size={self.size})"


@dataclass(frozen=True)
class Directory:
    """
    Directory entry. Its size is derived from its contents, never stored.
    """

    name: str

    def __post_init__(self):
        if not self.name:
            raise FilesystemError("Directory name must be a non-empty string")

    @property
    def is_dir(self) -> bool:
        return True

    def __str__(self) -> str:
        return f"{self.name} (dir)"


DirectoryEntry = Union[File, Directory]
