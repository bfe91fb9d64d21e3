from __future__ import annotations

"""
Menu Node Factories.

Permissive constructors for leaves and groups. Nothing is validated:
empty labels, empty actions and any integer mask are accepted as given.
"""

from typing import Iterable

from menutree.domain.constants import ALWAYS_VISIBLE
from menutree.domain.menu_models import MenuGroup, MenuLeaf, MenuNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def new_group(label: str, children: Iterable[MenuNode]) -> MenuGroup:
    """Return a group that is visible whenever one of its children is."""
    return MenuGroup(label=label, members=tuple(children), visibility=ALWAYS_VISIBLE)


def new_group_masked(label: str, children: Iterable[MenuNode], mask: int) -> MenuGroup:
    """
    Return a group with an explicit visibility mask.

    Hiding a group hides everything below it, whatever the children's
    own masks say.
    """
    return MenuGroup(label=label, members=tuple(children), visibility=mask)


def new_leaf(label: str, action: str) -> MenuLeaf:
    """Return an always-visible leaf."""
    return MenuLeaf(label=label, action=action, visibility=ALWAYS_VISIBLE)


def new_leaf_masked(label: str, action: str, mask: int) -> MenuLeaf:
    """Return a leaf with an explicit visibility mask."""
    return MenuLeaf(label=label, action=action, visibility=mask)
