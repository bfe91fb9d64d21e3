from __future__ import annotations

"""
Unit tests for the Tree Shape Guard.

Frozen nodes cannot normally form a cycle, so the cycle test forces one
with object.__setattr__.
"""

import pytest

from menutree.core.builder import new_group, new_leaf
from menutree.core.guard import check_tree, tree_depth
from menutree.domain.errors import MenuDepthError


def _chain(depth: int):
    node = new_leaf("bottom", "/bottom")
    for i in range(depth):
        node = new_group(f"level-{i}", [node])
    return node


def test_check_tree_returns_depth(plain_menu):
    assert check_tree(plain_menu) == 2
    assert tree_depth(plain_menu) == 2


def test_lone_leaf_has_depth_zero():
    leaf = new_leaf("x", "/x")
    assert check_tree(leaf) == 0
    assert tree_depth(leaf) == 0


def test_check_tree_allows_limit_exactly():
    assert check_tree(_chain(5), max_depth=5) == 5


def test_check_tree_rejects_excessive_depth():
    with pytest.raises(MenuDepthError) as exc:
        check_tree(_chain(6), max_depth=5)
    assert exc.value.depth == 6
    assert exc.value.label == "bottom"
    assert "cycle or excessive depth detected" in str(exc.value)


def test_check_tree_handles_deep_chains_without_recursion():
    assert check_tree(_chain(5000), max_depth=10000) == 5000


def test_check_tree_detects_cycle():
    inner = new_group("Inner", [new_leaf("x", "/x")])
    outer = new_group("Outer", [inner])
    object.__setattr__(inner, "members", (outer,))

    with pytest.raises(MenuDepthError) as exc:
        check_tree(outer, max_depth=1000)
    assert exc.value.label == "Outer"


def test_check_tree_allows_shared_subtrees():
    shared = new_group("Shared", [new_leaf("x", "/x")])
    tree = new_group("Root", [shared, shared])
    assert check_tree(tree) == 2
