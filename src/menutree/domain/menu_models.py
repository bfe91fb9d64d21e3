from __future__ import annotations

"""
Menu Tree Data Models.

A menu is a tree of nodes. Leaves are actionable entries (label + action),
groups are labelled containers of ordered children. Every node carries an
opaque visibility mask which is AND-ed against a caller's query mask.

Nodes are frozen value objects. Trees must be acyclic; nothing here checks
that (see ``menutree.core.guard`` for an opt-in check).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Tuple

from menutree.domain.constants import ALWAYS_VISIBLE

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class MenuNode(ABC):
    """
    Common read-only surface of leaves and groups.

    These accessors are all a template needs to walk a (filtered) menu
    without knowing which concrete class it is looking at.
    """

    label: str
    action: str
    visibility: int

    @property
    @abstractmethod
    def is_group(self) -> bool:
        """True for container nodes."""

    @property
    @abstractmethod
    def children(self) -> Tuple["MenuNode", ...]:
        """Ordered child nodes. Empty for leaves."""


@dataclass(frozen=True)
class MenuLeaf(MenuNode):
    """
    Represents a terminal menu entry.

    Attributes:
        label: Display text, or a translation key.
        action: Action to take when selected, e.g. a URL path.
        visibility: Visibility mask; ``ALWAYS_VISIBLE`` when unrestricted.
    """
    label: str
    action: str = ""
    visibility: int = ALWAYS_VISIBLE

    @property
    def is_group(self) -> bool:
        return False

    @property
    def children(self) -> Tuple[MenuNode, ...]:
        return ()


@dataclass(frozen=True)
class MenuGroup(MenuNode):
    """
    Represents a submenu.

    A group has no action of its own. Its visibility is derived: it is
    shown only when its own mask matches and at least one child is shown,
    so an empty group is never visible.

    Attributes:
        label: Display text, or a translation key.
        members: Ordered child nodes.
        visibility: Visibility mask; ``ALWAYS_VISIBLE`` when unrestricted.
    """
    label: str
    members: Tuple[MenuNode, ...] = field(default_factory=tuple)
    visibility: int = ALWAYS_VISIBLE

    @property
    def action(self) -> str:
        return ""

    @property
    def is_group(self) -> bool:
        return True

    @property
    def children(self) -> Tuple[MenuNode, ...]:
        return self.members

    @property
    def items(self) -> Tuple[MenuNode, ...]:
        # Same name as the export key, for templates written against it
        return self.members
