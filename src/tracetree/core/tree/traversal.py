from __future__ import annotations

"""
Tree Aggregation and Traversal.

Provides the pre-order flattening of a tree and bottom-up size aggregation
used by the queries. Both walks keep their own stack, so trace depth is not
limited by the interpreter's recursion limit.
"""

from typing import Dict, Iterator, List, Tuple

from tracetree.domain.tree_models import DirectoryNode, Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def flatten(root: Node) -> List[Node]:
    """
    List every node of the tree in pre-order.

    The node itself comes first, followed by the flattening of each child
    in child order.

    Args:
        root: Tree (or subtree) to flatten.

    Returns:
        List[Node]: All nodes, root first.
    """
    nodes: List[Node] = []
    stack: List[Node] = [root]
    while stack:
        node = stack.pop()
        nodes.append(node)
        if isinstance(node, DirectoryNode):
            stack.extend(reversed(node.children))
    return nodes


def iter_directories(root: Node) -> Iterator[DirectoryNode]:
    """Yield the directories of flatten(root), in pre-order."""
    for node in flatten(root):
        if isinstance(node, DirectoryNode):
            yield node


def directory_sizes(root: Node) -> List[Tuple[DirectoryNode, int]]:
    """
    Pair every directory with its total size.

    Sizes are aggregated bottom-up once per call instead of re-descending
    from every directory. Subtrees shared by reference are summed once.

    Args:
        root: Tree to aggregate.

    Returns:
        List[Tuple[DirectoryNode, int]]: Directories in pre-order with sizes.
    """
    memo = subtree_sizes(root)
    return [(d, memo[id(d)]) for d in iter_directories(root)]


def subtree_sizes(root: Node) -> Dict[int, int]:
    """
    Compute the size of every node of the tree in a single post-order walk.

    Args:
        root: Tree to aggregate.

    Returns:
        Dict[int, int]: Size keyed by id() of each node reachable from root.
    """
    memo: Dict[int, int] = {}
    stack: List[Tuple[Node, bool]] = [(root, False)]

    while stack:
        node, expanded = stack.pop()
        key = id(node)
        if key in memo:
            continue

        if not isinstance(node, DirectoryNode):
            memo[key] = node.size_bytes
        elif expanded:
            memo[key] = sum(memo[id(child)] for child in node.children)
        else:
            # Revisit once every child has a size
            stack.append((node, True))
            stack.extend((child, False) for child in node.children)

    return memo


def total_size(root: Node) -> int:
    return root.size()


def count_nodes(root: Node) -> Tuple[int, int]:
    """Return (directory_count, file_count) for the tree."""
    nodes = flatten(root)
    dirs = sum(1 for n in nodes if n.is_directory())
    return dirs, len(nodes) - dirs
