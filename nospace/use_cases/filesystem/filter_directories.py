"""
Use case for selecting directories by aggregate size.
"""

import logging
from typing import Callable, Optional

from nospace.entities.directory_entry import File
from nospace.entities.filesystem import Filesystem, NodeId

SizePredicate = Callable[[int], bool]


def _never(size: int) -> bool:
    return False


class FilterDirectoriesUseCase:
    """Use case for aggregating directory sizes with a size predicate."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self, filesystem: Filesystem, predicate: SizePredicate
    ) -> list[tuple[str, int]]:
        """
        Find every directory, the root included, whose aggregate size
        satisfies ``predicate``.

        Args:
            filesystem: Tree to query
            predicate: Test applied to each directory's aggregate size

        Returns:
            ``(name, size)`` pairs in post-order, deepest directories first
        """
        dirs: list[tuple[str, int]] = []
        self._filter_subdirs(filesystem, predicate, filesystem.root, dirs)
        self._logger.debug(f"{len(dirs)} directories matched")
        return dirs

    def total_size(self, filesystem: Filesystem) -> int:
        """Aggregate size of the whole tree."""
        return self._filter_subdirs(filesystem, _never, filesystem.root, [])

    def _filter_subdirs(
        self,
        filesystem: Filesystem,
        predicate: SizePredicate,
        dir_id: NodeId,
        dirs: list[tuple[str, int]],
    ) -> int:
        # One running total per open directory; a directory is recorded when
        # its end edge is reached, after all of its descendants.
        totals: list[int] = []
        size = 0
        for edge, node_id in filesystem.traverse(dir_id):
            entry = filesystem.get(node_id)
            if isinstance(entry, File):
                if edge == "start":
                    totals[-1] += entry.size
                continue
            if edge == "start":
                totals.append(0)
                continue

            size = totals.pop()
            if predicate(size):
                dirs.append((entry.name, size))
            if totals:
                totals[-1] += size
        return size
