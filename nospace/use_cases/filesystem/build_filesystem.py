"""
Use case for replaying a transcript into a filesystem tree.
"""

import logging
from typing import Iterable, Optional

from nospace.entities.command import (
    ChangeDirectory,
    Child,
    Command,
    ListDirectory,
    Parent,
    Root,
)
from nospace.entities.filesystem import Filesystem, NodeId
from nospace.exceptions import NavigationError
from nospace.parsing.command_parser import CommandParser


class BuildFilesystemUseCase:
    """Use case for building a frozen filesystem tree from transcript text."""

    def __init__(
        self,
        parser: Optional[CommandParser] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            parser: Parser turning text into commands
            logger: Logger instance to use for logging
        """
        self._logger = logger or logging.getLogger(__name__)
        self._parser = parser or CommandParser(self._logger)

    def execute(self, text: str) -> Filesystem:
        """
        Parse ``text`` and replay its commands.

        Args:
            text: Full transcript text

        Returns:
            The frozen filesystem tree

        Raises:
            NavigationError: If the transcript leaves the root with ``cd ..``
        """
        filesystem = self.replay(self._parser.parse(text))
        self._logger.info(f"Built filesystem with {len(filesystem)} nodes")
        return filesystem

    def replay(self, commands: Iterable[Command]) -> Filesystem:
        """
        Replay already parsed commands into a new tree.

        Args:
            commands: Commands in transcript order

        Returns:
            The frozen filesystem tree

        Raises:
            NavigationError: If a ``cd ..`` is issued at the root
        """
        filesystem = Filesystem()
        cursor = filesystem.root

        for command in commands:
            if isinstance(command, ChangeDirectory):
                cursor = self._change_directory(filesystem, cursor, command)
            elif isinstance(command, ListDirectory):
                for entry in command.entries:
                    filesystem.append(cursor, entry)

        return filesystem.freeze()

    def _change_directory(
        self, filesystem: Filesystem, cursor: NodeId, command: ChangeDirectory
    ) -> NodeId:
        target = command.target
        # Only expected as the first command; later ones are ignored.
        if isinstance(target, Root):
            return cursor

        if isinstance(target, Parent):
            parent = filesystem.parent(cursor)
            if parent is None:
                raise NavigationError("Cannot change to the parent of the root directory")
            return parent

        if isinstance(target, Child):
            child = filesystem.find_child_directory(cursor, target.name)
            if child is None:
                self._logger.debug(
                    f"No directory '{target.name}' in '{filesystem.get(cursor).name}', staying put"
                )
                return cursor
            return child

        return cursor
