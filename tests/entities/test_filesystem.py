"""
Tests for the Filesystem arena entity.
"""

import pytest

from nospace.entities.directory_entry import Directory, File
from nospace.entities.filesystem import Filesystem
from nospace.exceptions import FilesystemError


class TestFilesystem:
    """Test cases for the Filesystem entity."""

    def test_new_filesystem_has_root(self):
        fs = Filesystem()

        assert len(fs) == 1
        assert fs.get(fs.root) == Directory("/")
        assert fs.parent(fs.root) is None
        assert fs.children(fs.root) == ()

    def test_append_preserves_order(self):
        fs = Filesystem()
        a = fs.append(fs.root, Directory("a"))
        b = fs.append(fs.root, File("b", 1))

        assert fs.children(fs.root) == (a, b)
        assert fs.parent(a) == fs.root
        assert fs.parent(b) == fs.root

    def test_append_duplicates(self):
        """Test that appending the same entry twice keeps both nodes."""
        fs = Filesystem()
        fs.append(fs.root, File("b", 1))
        fs.append(fs.root, File("b", 1))

        assert len(fs.children(fs.root)) == 2

    def test_append_to_file(self):
        fs = Filesystem()
        f = fs.append(fs.root, File("b", 1))

        with pytest.raises(FilesystemError, match="Cannot append to file"):
            fs.append(f, File("c", 2))

    def test_append_after_freeze(self):
        fs = Filesystem().freeze()

        assert fs.frozen is True
        with pytest.raises(FilesystemError, match="frozen"):
            fs.append(fs.root, Directory("a"))

    def test_unknown_node(self):
        with pytest.raises(FilesystemError, match="Unknown node: 7"):
            Filesystem().get(7)

    def test_find_child_directory_first_match_wins(self):
        fs = Filesystem()
        fs.append(fs.root, File("a", 3))
        first = fs.append(fs.root, Directory("a"))
        fs.append(fs.root, Directory("a"))

        assert fs.find_child_directory(fs.root, "a") == first
        assert fs.find_child_directory(fs.root, "missing") is None

    def test_children_is_a_copy(self):
        fs = Filesystem()
        fs.append(fs.root, Directory("a"))
        children = fs.children(fs.root)

        fs.append(fs.root, Directory("b"))
        assert len(children) == 1

    def test_traverse_edges(self):
        fs = Filesystem()
        a = fs.append(fs.root, Directory("a"))
        f = fs.append(a, File("f", 1))
        b = fs.append(fs.root, File("b", 2))

        assert list(fs.traverse()) == [
            ("start", fs.root),
            ("start", a),
            ("start", f),
            ("end", f),
            ("end", a),
            ("start", b),
            ("end", b),
            ("end", fs.root),
        ]

    def test_files(self):
        fs = Filesystem()
        a = fs.append(fs.root, Directory("a"))
        fs.append(a, File("f", 1))
        fs.append(fs.root, File("b", 2))

        assert list(fs.files()) == [File("f", 1), File("b", 2)]

    def test_render(self, example_filesystem):
        """Test the indented dump of the example tree."""
        assert str(example_filesystem) == (
            "- / (dir)\n"
            "  - a (dir)\n"
            "    - e (dir)\n"
            "      - i (file, size=584)\n"
            "    - f (file, size=29116)\n"
            "    - g (file, size=2557)\n"
            "    - h.lst (file, size=62596)\n"
            "  - b.txt (file, size=14848514)\n"
            "  - c.dat (file, size=8504156)\n"
            "  - d (dir)\n"
            "    - j (file, size=4060174)\n"
            "    - d.log (file, size=8033020)\n"
            "    - d.ext (file, size=5626152)\n"
            "    - k (file, size=7214296)\n"
        )

    def test_render_empty(self):
        assert Filesystem().render() == "- / (dir)\n"

    def test_repr(self):
        assert repr(Filesystem()) == "Filesystem(nodes=1, frozen=False)"
