"""
Tests for the SizeReportUseCase.
"""

import pytest

from nospace.entities.directory_entry import Directory, File
from nospace.entities.filesystem import Filesystem
from nospace.exceptions import FilesystemError
from nospace.use_cases.filesystem.size_report import SizeReport, SizeReportUseCase


def _tree(*files: tuple[str, int]) -> Filesystem:
    fs = Filesystem()
    sub = fs.append(fs.root, Directory("sub"))
    for name, size in files:
        fs.append(sub, File(name, size))
    return fs.freeze()


class TestSizeReportUseCase:
    """Test cases for the SizeReportUseCase."""

    def test_small_directories_total(self, example_filesystem):
        assert SizeReportUseCase().small_directories_total(example_filesystem) == 95437

    def test_space_to_free(self, example_filesystem):
        assert SizeReportUseCase().space_to_free(example_filesystem) == 8381165

    def test_directory_to_free(self, example_filesystem):
        assert SizeReportUseCase().directory_to_free(example_filesystem) == 24933642

    def test_execute(self, example_filesystem, mock_logger):
        report = SizeReportUseCase(logger=mock_logger).execute(example_filesystem)

        assert report == SizeReport(
            total_size=48381165,
            small_directories_total=95437,
            space_to_free=8381165,
            directory_to_free_size=24933642,
        )
        mock_logger.info.assert_any_call(
            "[Part 1] Sum of directory sizes under 100000: 95437"
        )
        mock_logger.info.assert_any_call("[Part 2] Size of directory to free: 24933642")

    def test_enough_space_already(self, mock_logger):
        report = SizeReportUseCase(logger=mock_logger).execute(_tree(("f", 10)))

        assert report.space_to_free == 0
        assert report.directory_to_free_size == 0

    def test_root_is_the_only_candidate(self):
        fs = _tree(("a", 20000000), ("b", 25000000))
        fs_root_only = Filesystem()
        fs_root_only.append(fs_root_only.root, File("a", 20000000))
        fs_root_only.append(fs_root_only.root, File("b", 25000000))

        assert SizeReportUseCase().directory_to_free(fs) == 45000000
        assert SizeReportUseCase().directory_to_free(fs_root_only.freeze()) == 45000000

    def test_disk_overflow(self):
        with pytest.raises(FilesystemError, match="exceeds disk capacity"):
            SizeReportUseCase().directory_to_free(_tree(("huge", 70000001)))
