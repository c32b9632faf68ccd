from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the immutable node types used to represent a filesystem that has
been reconstructed from a shell command trace. Nodes are frozen, and
directory children are stored as tuples, so subtrees can be shared safely
between successive versions of a tree.
"""

from dataclasses import dataclass, field
from typing import List, Tuple, Union

from tracetree.domain.constants import ROOT_NAME

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileNode:
    """
    Represents a leaf entry (file) in the directory tree.

    Attributes:
        name: Own name of the file (not the full path).
        size_bytes: Intrinsic file size, exposed through size().
    """
    name: str
    size_bytes: int

    def is_directory(self) -> bool:
        return False

    def size(self) -> int:
        return self.size_bytes

    def is_dir_with_name(self, name: str) -> bool:
        return False

    def is_same(self, other: Node) -> bool:
        """Structural equivalence: same kind, same name and same size."""
        return (
            isinstance(other, FileNode)
            and self.name == other.name
            and self.size_bytes == other.size_bytes
        )


@dataclass(frozen=True, eq=False, repr=False)
class DirectoryNode:
    """
    Represents a directory entry with an ordered sequence of children.

    The size of a directory is never stored. It is derived from the children
    each time it is requested.

    Walks over the children use an explicit stack. Equality, hashing and
    repr are written by hand rather than generated from the fields, so no
    operation recurses once per level of nesting.

    Attributes:
        name: Own name of the directory.
        children: Child nodes in insertion order.
    """
    name: str
    children: Tuple[Node, ...] = field(default_factory=tuple)

    def is_directory(self) -> bool:
        return True

    def size(self) -> int:
        """Sum the sizes of every descendant file."""
        total = 0
        stack: List[Node] = list(self.children)
        while stack:
            node = stack.pop()
            if isinstance(node, DirectoryNode):
                stack.extend(node.children)
            else:
                total += node.size_bytes
        return total

    def is_dir_with_name(self, name: str) -> bool:
        return self.name == name

    def is_same(self, other: Node) -> bool:
        """
        Structural equivalence: same name and pairwise-equivalent children.

        Args:
            other: Node to compare against.

        Returns:
            bool: True if both trees have the same shape, names and sizes.
        """
        pending: List[Tuple[Node, Node]] = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if isinstance(left, FileNode):
                if not left.is_same(right):
                    return False
                continue
            if not isinstance(right, DirectoryNode):
                return False
            if left.name != right.name or len(left.children) != len(right.children):
                return False
            pending.extend(zip(left.children, right.children))
        return True

    def with_children(self, children: Tuple[Node, ...]) -> DirectoryNode:
        """Return a new directory with the same name and the given children."""
        return DirectoryNode(name=self.name, children=children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirectoryNode):
            return NotImplemented
        return self.is_same(other)

    def __hash__(self) -> int:
        # Equivalent trees share name and child count
        return hash((self.name, len(self.children)))

    def __repr__(self) -> str:
        return f"DirectoryNode(name={self.name!r}, children=<{len(self.children)} nodes>)"


Node = Union[FileNode, DirectoryNode]


def make_root() -> DirectoryNode:
    """Create the empty root directory of a new tree."""
    return DirectoryNode(name=ROOT_NAME)
