"""
Filesystem tree entity.

All nodes live in one list and are addressed by integer handles. Each node
keeps its parent handle and the ordered handles of its children. The tree
grows by appends only and is frozen once the transcript has been replayed.
"""

from dataclasses import dataclass, field
from typing import Iterator, Literal, Optional

from nospace.entities.directory_entry import Directory, DirectoryEntry, File
from nospace.exceptions import FilesystemError

NodeId = int

ROOT_NAME = "/"


@dataclass
class Node:
    entry: DirectoryEntry
    parent: Optional[NodeId] = None
    children: list[NodeId] = field(default_factory=list)


class Filesystem:
    """Arena of directory entries rooted at ``/``."""

    def __init__(self):
        self._nodes: list[Node] = [Node(Directory(ROOT_NAME))]
        self._frozen = False

    @property
    def root(self) -> NodeId:
        return 0

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "Filesystem":
        """Mark the tree read-only and return it."""
        self._frozen = True
        return self

    def _node(self, node_id: NodeId) -> Node:
        if not 0 <= node_id < len(self._nodes):
            raise FilesystemError(f"Unknown node: {node_id}")
        return self._nodes[node_id]

    def append(self, parent_id: NodeId, entry: DirectoryEntry) -> NodeId:
        """
        Append a new node holding ``entry`` as the last child of ``parent_id``.

        Args:
            parent_id: Handle of the directory receiving the entry
            entry: File or directory to add

        Returns:
            Handle of the new node

        Raises:
            FilesystemError: If the tree is frozen, the parent is unknown or
                the parent is a file
        """
        if self._frozen:
            raise FilesystemError("Cannot append to a frozen filesystem")
        parent = self._node(parent_id)
        if not parent.entry.is_dir:
            raise FilesystemError(f"Cannot append to file: {parent.entry.name}")

        node_id = len(self._nodes)
        self._nodes.append(Node(entry, parent=parent_id))
        parent.children.append(node_id)
        return node_id

    def get(self, node_id: NodeId) -> DirectoryEntry:
        return self._node(node_id).entry

    def parent(self, node_id: NodeId) -> Optional[NodeId]:
        return self._node(node_id).parent

    def children(self, node_id: NodeId) -> tuple[NodeId, ...]:
        return tuple(self._node(node_id).children)

    def find_child_directory(self, node_id: NodeId, name: str) -> Optional[NodeId]:
        """Return the first direct child directory called ``name``, if any."""
        for child_id in self._node(node_id).children:
            entry = self._nodes[child_id].entry
            if isinstance(entry, Directory) and entry.name == name:
                return child_id
        return None

    def files(self) -> Iterator[File]:
        """Yield every file entry in insertion order."""
        for node in self._nodes:
            if isinstance(node.entry, File):
                yield node.entry

    def traverse(
        self, node_id: Optional[NodeId] = None
    ) -> Iterator[tuple[Literal["start", "end"], NodeId]]:
        """
        Walk the subtree below ``node_id`` (the root by default).

        Yields a ``("start", id)`` edge when a node is entered and an
        ``("end", id)`` edge once all of its descendants have been walked.
        """
        start = self.root if node_id is None else node_id
        self._node(start)
        stack: list[tuple[NodeId, bool]] = [(start, False)]
        while stack:
            current, done = stack.pop()
            if done:
                yield "end", current
                continue
            yield "start", current
            stack.append((current, True))
            for child_id in reversed(self._nodes[current].children):
                stack.append((child_id, False))

    def render(self) -> str:
        """Indented dump of the tree, two spaces per level."""
        lines: list[str] = []
        depth = 0
        for edge, node_id in self.traverse():
            if edge == "start":
                lines.append(f"{'  ' * depth}- {self._nodes[node_id].entry}\n")
                depth += 1
            else:
                depth -= 1
        return "".join(lines)

    def __len__(self) -> int:
        return len(self._nodes)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Filesystem(nodes={len(self._nodes)}, frozen={self._frozen})"
