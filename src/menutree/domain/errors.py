from __future__ import annotations

"""
Menu Tree Error Taxonomy.

The core operations are total over acyclic trees and never raise these.
They are used by the optional guard and by the definition loader.
"""


class MenuTreeError(ValueError):
    """Base class for every error raised by this package."""


class MenuDepthError(MenuTreeError):
    """
    Raised by the depth guard when a tree contains a cycle or is nested
    deeper than the configured limit.

    Attributes:
        label: Label of the node where the walk stopped.
        depth: Depth of that node (root is 0).
    """

    def __init__(self, message: str, label: str = "", depth: int = 0) -> None:
        super().__init__(message)
        self.label = label
        self.depth = depth


class MenuDefinitionError(MenuTreeError):
    """
    Raised when a raw menu definition cannot be turned into a tree.

    Attributes:
        location: Dotted path of the offending entry, e.g. ``items[1].label``.
    """

    def __init__(self, message: str, location: str = "") -> None:
        if location:
            message = f"{location}: {message}"
        super().__init__(message)
        self.location = location
