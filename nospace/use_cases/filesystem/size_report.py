"""
Use case for the directory size report.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from nospace.entities.filesystem import Filesystem
from nospace.exceptions import FilesystemError
from nospace.use_cases.filesystem.filter_directories import FilterDirectoriesUseCase

SMALL_DIRECTORY_LIMIT = 100000
DISK_CAPACITY = 70000000
REQUIRED_FREE_SPACE = 30000000


@dataclass(frozen=True)
class SizeReport:
    """
    Answers for one tree.

    ``directory_to_free_size`` is 0 when the disk already has
    REQUIRED_FREE_SPACE available, in which case no directory needs deleting
    (otherwise every directory would qualify).
    """

    total_size: int
    small_directories_total: int
    space_to_free: int
    directory_to_free_size: int


class SizeReportUseCase:
    """Use case answering the two directory size questions for a tree."""

    def __init__(
        self,
        filter_directories: Optional[FilterDirectoriesUseCase] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            filter_directories: Size aggregation use case
            logger: Logger instance to use for logging
        """
        self._logger = logger or logging.getLogger(__name__)
        self._filter_directories = filter_directories or FilterDirectoriesUseCase(
            self._logger
        )

    def small_directories_total(self, filesystem: Filesystem) -> int:
        """Sum of the sizes of directories at most SMALL_DIRECTORY_LIMIT."""
        dirs = self._filter_directories.execute(
            filesystem, lambda size: size <= SMALL_DIRECTORY_LIMIT
        )
        return sum(size for _name, size in dirs)

    def space_to_free(self, filesystem: Filesystem) -> int:
        """
        Space that must be freed to reach REQUIRED_FREE_SPACE.

        Raises:
            FilesystemError: If the tree is larger than the disk
        """
        used = self._filter_directories.total_size(filesystem)
        if used > DISK_CAPACITY:
            raise FilesystemError(
                f"Used space {used} exceeds disk capacity {DISK_CAPACITY}"
            )
        return max(0, REQUIRED_FREE_SPACE - (DISK_CAPACITY - used))

    def directory_to_free(self, filesystem: Filesystem) -> int:
        """
        Size of the smallest directory whose deletion frees enough space.

        Returns 0 when the disk already has enough free space.

        Raises:
            FilesystemError: If the tree is larger than the disk
        """
        needed = self.space_to_free(filesystem)
        if needed == 0:
            self._logger.info("Enough free space already, nothing to delete")
            return 0

        # Traverses the tree a second time; aggregates are not cached.
        dirs = self._filter_directories.execute(
            filesystem, lambda size: size >= needed
        )
        return min(size for _name, size in dirs)

    def execute(self, filesystem: Filesystem) -> SizeReport:
        """
        Compute the full report.

        Args:
            filesystem: Frozen tree to report on

        Returns:
            SizeReport with both answers

        Raises:
            FilesystemError: If the tree is larger than the disk
        """
        report = SizeReport(
            total_size=self._filter_directories.total_size(filesystem),
            small_directories_total=self.small_directories_total(filesystem),
            space_to_free=self.space_to_free(filesystem),
            directory_to_free_size=self.directory_to_free(filesystem),
        )
        self._logger.info(
            f"[Part 1] Sum of directory sizes under {SMALL_DIRECTORY_LIMIT}: {report.small_directories_total}"
        )
        self._logger.info(
            f"[Part 2] Size of directory to free: {report.directory_to_free_size}"
        )
        return report
