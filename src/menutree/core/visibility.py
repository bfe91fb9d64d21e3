from __future__ import annotations

"""
Visibility Filter.

Decides which nodes are shown for a query mask and produces pruned copies
of a tree. A node is shown when ``query_mask & node.visibility`` is
non-zero; a group additionally needs at least one shown child.

Filtering never mutates its input. Groups are rebuilt, leaves are shared.
The rebuilt groups carry ``ALWAYS_VISIBLE`` instead of their original mask,
so filtering an already filtered tree with another mask only re-applies the
leaves' masks.
"""

from typing import List

from menutree.domain.constants import ALWAYS_VISIBLE
from menutree.domain.menu_models import MenuGroup, MenuLeaf, MenuNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def is_visible(node: MenuNode, query_mask: int) -> bool:
    """
    Tell whether a node is shown for the given query mask.

    Empty groups are never visible, regardless of their own mask.

    Args:
        node: Node to evaluate.
        query_mask: Caller's permission bits.

    Returns:
        bool: True if the node survives filtering.
    """
    if (query_mask & node.visibility) == 0:
        return False
    if not node.is_group:
        return True
    return any(is_visible(child, query_mask) for child in node.children)


def filtered(node: MenuNode, query_mask: int) -> MenuNode:
    """
    Return a copy of the tree with every invisible node removed.

    Leaves are returned unchanged. For a group, the visible children are
    filtered recursively in their original order; the result may have no
    children at all when none of them is visible.

    Args:
        node: Root of the tree to filter.
        query_mask: Caller's permission bits.

    Returns:
        MenuNode: The pruned tree.
    """
    if not node.is_group:
        return node

    kept = tuple(
        filtered(child, query_mask)
        for child in node.children
        if is_visible(child, query_mask)
    )
    return MenuGroup(label=node.label, members=kept, visibility=ALWAYS_VISIBLE)


def visible_leaves(node: MenuNode, query_mask: int) -> List[MenuLeaf]:
    """Collect the leaves of ``filtered(node, query_mask)`` in document order."""
    return collect_leaves(filtered(node, query_mask))


def collect_leaves(node: MenuNode) -> List[MenuLeaf]:
    """Collect every leaf under ``node`` in document order, without filtering."""
    leaves: List[MenuLeaf] = []
    _collect_leaves(node, leaves)
    return leaves


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _collect_leaves(node: MenuNode, acc: List[MenuLeaf]) -> None:
    if isinstance(node, MenuLeaf):
        acc.append(node)
        return
    for child in node.children:
        _collect_leaves(child, acc)
