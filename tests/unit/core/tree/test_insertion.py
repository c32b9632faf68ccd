from __future__ import annotations

"""
Unit tests for path-addressed, copy-on-write insertion.
"""

import sys

from tracetree.core.tree.insertion import insert_node
from tracetree.core.tree.traversal import flatten
from tracetree.domain.tree_models import DirectoryNode, FileNode


def _tree_before() -> DirectoryNode:
    return DirectoryNode("a", (
        FileNode("b", 5),
        DirectoryNode("c", (
            FileNode("e", 5),
            DirectoryNode("f", (FileNode("g", 5), FileNode("h", 5))),
        )),
        FileNode("d", 5),
    ))


def _tree_after() -> DirectoryNode:
    return DirectoryNode("a", (
        FileNode("b", 5),
        DirectoryNode("c", (
            FileNode("e", 5),
            DirectoryNode("f", (FileNode("g", 5), FileNode("h", 5), FileNode("i", 5))),
        )),
        FileNode("d", 5),
    ))


def test_insert_at_nested_path():
    result = insert_node(_tree_before(), ["c", "f"], FileNode("i", 5))
    assert result.is_same(_tree_after())


def test_insert_at_empty_path_appends_to_root():
    root = DirectoryNode("/", (FileNode("x", 1),))
    result = insert_node(root, [], DirectoryNode("y"))

    assert [c.name for c in result.children] == ["x", "y"]
    assert result.children[1].is_directory()


def test_insert_into_file_is_a_clone():
    f = FileNode("x", 7)
    result = insert_node(f, [], FileNode("y", 1))

    assert result == f
    assert result is not f


def test_previous_root_is_untouched():
    before = _tree_before()
    snapshot = _tree_before()

    insert_node(before, ["c", "f"], FileNode("i", 5))

    assert before.is_same(snapshot)


def test_siblings_off_the_path_are_shared():
    before = _tree_before()
    after = insert_node(before, ["c", "f"], FileNode("i", 5))

    # Off-path children are reused by reference
    assert after.children[0] is before.children[0]
    assert after.children[2] is before.children[2]
    assert after.children[1].children[0] is before.children[1].children[0]
    assert after.children[1].children[1].children[0] is before.children[1].children[1].children[0]

    # On-path directories are rebuilt
    assert after is not before
    assert after.children[1] is not before.children[1]


def test_insertion_is_purely_additive():
    before = _tree_before()
    new_child = FileNode("i", 5)
    after = insert_node(before, ["c", "f"], new_child)

    before_nodes = flatten(before)
    after_nodes = flatten(after)
    assert len(after_nodes) == len(before_nodes) + 1
    assert new_child in after_nodes
    assert after.size() == before.size() + 5


def test_duplicate_sibling_names_use_first_match():
    first = DirectoryNode("dup")
    second = DirectoryNode("dup")
    root = DirectoryNode("/", (first, second))

    result = insert_node(root, ["dup"], FileNode("x", 1))

    assert [c.name for c in result.children[0].children] == ["x"]
    assert result.children[1] is second


def test_file_with_matching_name_is_not_descended():
    root = DirectoryNode("/", (FileNode("c", 3), DirectoryNode("c")))
    result = insert_node(root, ["c"], FileNode("x", 1))

    assert result.children[0] == FileNode("c", 3)
    assert result.children[1].children == (FileNode("x", 1),)


def test_unknown_path_leaves_tree_equivalent():
    before = _tree_before()
    result = insert_node(before, ["missing"], FileNode("x", 1))
    assert result.is_same(before)


def test_insert_at_the_bottom_of_a_deep_tree(deep_tree):
    path = []
    node = deep_tree
    while node.children[0].is_directory():
        node = node.children[0]
        path.append(node.name)
    assert len(path) > sys.getrecursionlimit()

    result = insert_node(deep_tree, path, FileNode("g", 2))

    assert result.size() == 3
    assert deep_tree.size() == 1

    bottom = result
    for _ in path:
        bottom = bottom.children[0]
    assert [c.name for c in bottom.children] == ["f", "g"]


def test_insert_shares_the_untouched_part_of_a_deep_tree(deep_tree):
    result = insert_node(deep_tree, ["a", "a"], FileNode("g", 2))

    # Only root, a and a/a are rebuilt; the chain from a/a/a down is reused
    assert result.children[0] is not deep_tree.children[0]
    old_grandchild = deep_tree.children[0].children[0]
    new_grandchild = result.children[0].children[0]
    assert new_grandchild.children[0] is old_grandchild.children[0]
    assert new_grandchild.children[1] == FileNode("g", 2)
