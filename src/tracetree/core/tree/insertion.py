from __future__ import annotations

"""
Path-Addressed Tree Insertion.

Implements copy-on-write insertion into the immutable tree model. Only the
directories on the path from the root to the target are rebuilt; every
other subtree of the previous version is reused by reference. The descent is
a loop over the path, followed by a bottom-up rebuild of the visited
directories, so the depth of the tree is not bounded by the call stack.
"""

from typing import List, Optional, Sequence, Tuple, cast

from tracetree.domain.tree_models import DirectoryNode, FileNode, Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def insert_node(root: Node, path: Sequence[str], new_child: Node) -> Node:
    """
    Return a new tree with new_child appended to the directory at path.

    The path lists directory names below the root (the root itself is
    implicit). When several siblings share the name of a path segment, the
    first one in child order is descended into. The input tree is left
    untouched.

    Args:
        root: Current version of the tree.
        path: Directory names leading from root to the target directory.
        new_child: Node to append to the target's children.

    Returns:
        Node: The new root.
    """
    if isinstance(root, FileNode):
        return FileNode(name=root.name, size_bytes=root.size_bytes)

    trail: List[Tuple[DirectoryNode, int]] = []
    current = root
    for segment in path:
        index = _first_directory_index(current, segment)
        if index is None:
            # No target: the walked path is rebuilt with its children unchanged
            rebuilt = current.with_children(current.children)
            break
        trail.append((current, index))
        current = cast(DirectoryNode, current.children[index])
    else:
        rebuilt = current.with_children(current.children + (new_child,))

    for parent, index in reversed(trail):
        children = parent.children
        rebuilt = parent.with_children(children[:index] + (rebuilt,) + children[index + 1:])

    return rebuilt

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _first_directory_index(directory: DirectoryNode, name: str) -> Optional[int]:
    """Position of the first child directory called name, if any."""
    for index, child in enumerate(directory.children):
        if child.is_dir_with_name(name):
            return index
    return None
