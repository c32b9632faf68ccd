from __future__ import annotations

"""
Tree Renderer.

Converts the immutable tree model into a visual ASCII representation
annotated with node kinds and sizes.
"""

from typing import Dict, List, Tuple

from tracetree.core.tree.traversal import subtree_sizes
from tracetree.domain.tree_models import DirectoryNode, Node

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_tree(root: Node) -> List[str]:
    """
    Render a tree as a list of lines.

    The root is printed on its own line; children follow in insertion order
    with standard ASCII connectors (├──, └──).

    Args:
        root: Tree to render.

    Returns:
        List[str]: Visual lines of the tree.
    """
    sizes = subtree_sizes(root)
    lines: List[str] = [_label(root, sizes)]
    if isinstance(root, DirectoryNode):
        render_tree_structure(root, lines, sizes)
    return lines


def render_tree_structure(
        directory: DirectoryNode,
        lines: List[str],
        sizes: Dict[int, int],
        prefix: str = "",
) -> None:
    """
    Append the children of a directory, and theirs, to the accumulator.

    Args:
        directory: Directory whose children are rendered.
        lines: Accumulator list for output strings.
        sizes: Node sizes keyed by id(), as returned by subtree_sizes().
        prefix: Indentation prefix of the directory's children.
    """
    stack: List[Tuple[Node, str, bool]] = []
    _push_children(stack, directory, prefix)

    while stack:
        node, node_prefix, is_last = stack.pop()
        connector = "└── " if is_last else "├── "
        lines.append(f"{node_prefix}{connector}{_label(node, sizes)}")

        if isinstance(node, DirectoryNode):
            _push_children(stack, node, node_prefix + ("    " if is_last else "│   "))

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _push_children(stack: List[Tuple[Node, str, bool]], directory: DirectoryNode, prefix: str) -> None:
    """Push children in reverse so the first child is rendered first."""
    last = len(directory.children) - 1
    for i in range(last, -1, -1):
        stack.append((directory.children[i], prefix, i == last))


def _label(node: Node, sizes: Dict[int, int]) -> str:
    kind = "dir" if node.is_directory() else "file"
    return f"{node.name} ({kind}, size={sizes[id(node)]})"
