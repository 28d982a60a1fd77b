"""
Transcript command entities produced by the command parser.
"""

from dataclasses import dataclass
from typing import Union

from nospace.entities.directory_entry import DirectoryEntry


@dataclass(frozen=True)
class Root:
    """``cd /`` target."""

    def __str__(self) -> str:
        return "/"


@dataclass(frozen=True)
class Parent:
    """``cd ..`` target."""

    def __str__(self) -> str:
        return ".."


@dataclass(frozen=True)
class Child:
    """``cd <name>`` target."""

    name: str

    def __str__(self) -> str:
        return self.name


Target = Union[Root, Parent, Child]


@dataclass(frozen=True)
class ChangeDirectory:
    """Move the current directory to ``target``."""

    target: Target

    def __str__(self) -> str:
        return f"$ cd {self.target}"


@dataclass(frozen=True)
class ListDirectory:
    """Listing of the current directory, in transcript order."""

    entries: tuple[DirectoryEntry, ...] = ()

    def __str__(self) -> str:
        return f"$ ls ({len(self.entries)} entries)"


Command = Union[ChangeDirectory, ListDirectory]
