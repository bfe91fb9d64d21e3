from __future__ import annotations

"""
Tree Shape Guard.

The core walks trees recursively and assumes they are acyclic and of
reasonable depth. This module offers an opt-in check for callers that load
menus from untrusted sources: it walks iteratively, so it cannot itself
run out of stack, and fails fast with ``MenuDepthError``.
"""

import logging
from typing import List, Set, Tuple

from menutree.domain.constants import DEFAULT_MAX_DEPTH
from menutree.domain.errors import MenuDepthError
from menutree.domain.menu_models import MenuNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def check_tree(node: MenuNode, max_depth: int = DEFAULT_MAX_DEPTH) -> int:
    """
    Verify that a tree is acyclic and no deeper than ``max_depth``.

    Args:
        node: Root of the tree.
        max_depth: Deepest allowed level (root is level 0).

    Returns:
        int: Actual depth of the tree.

    Raises:
        MenuDepthError: If a node is its own ancestor or the limit is exceeded.
    """
    deepest = 0
    ancestors: List[int] = []
    on_path: Set[int] = set()

    # (node, depth, leaving) - a second visit with leaving=True pops the path
    stack: List[Tuple[MenuNode, int, bool]] = [(node, 0, False)]

    while stack:
        current, depth, leaving = stack.pop()
        if leaving:
            on_path.discard(ancestors.pop())
            continue

        if id(current) in on_path:
            logger.warning(f"Cycle detected at '{current.label}' (depth {depth}).")
            raise MenuDepthError(
                f"cycle or excessive depth detected at '{current.label}'",
                label=current.label,
                depth=depth,
            )
        if depth > max_depth:
            logger.warning(f"Menu depth limit {max_depth} exceeded at '{current.label}'.")
            raise MenuDepthError(
                f"cycle or excessive depth detected at '{current.label}'",
                label=current.label,
                depth=depth,
            )

        deepest = max(deepest, depth)
        if not current.is_group:
            continue

        ancestors.append(id(current))
        on_path.add(id(current))
        stack.append((current, depth, True))
        for child in reversed(current.children):
            stack.append((child, depth + 1, False))

    return deepest


def tree_depth(node: MenuNode) -> int:
    """Return the depth of an acyclic tree (a lone leaf has depth 0)."""
    if not node.is_group or not node.children:
        return 0
    return 1 + max(tree_depth(child) for child in node.children)
