from __future__ import annotations

"""
menutree - hierarchical menus with bitmask visibility.

Build a tree with the node factories, prune it for a viewer with
``filtered(tree, mask)``, then render the result as text or export it as
JSON-ready dictionaries. Trees are immutable and must be acyclic.
"""

from menutree.config import get_default_config, validate_config
from menutree.core.builder import (
    new_group,
    new_group_masked,
    new_leaf,
    new_leaf_masked,
)
from menutree.core.exporter import to_json, to_structured
from menutree.core.guard import check_tree, tree_depth
from menutree.core.loader import from_definition, load_definition_file
from menutree.core.renderer import render, to_string
from menutree.core.service import MenuView, prepare_menu
from menutree.core.visibility import collect_leaves, filtered, is_visible, visible_leaves
from menutree.domain.constants import ALWAYS_VISIBLE
from menutree.domain.errors import (
    MenuDefinitionError,
    MenuDepthError,
    MenuTreeError,
)
from menutree.domain.menu_models import MenuGroup, MenuLeaf, MenuNode

__version__ = "1.0.0"

__all__ = [
    "ALWAYS_VISIBLE",
    "MenuDefinitionError",
    "MenuDepthError",
    "MenuGroup",
    "MenuLeaf",
    "MenuNode",
    "MenuTreeError",
    "MenuView",
    "check_tree",
    "collect_leaves",
    "filtered",
    "from_definition",
    "get_default_config",
    "is_visible",
    "load_definition_file",
    "new_group",
    "new_group_masked",
    "new_leaf",
    "new_leaf_masked",
    "prepare_menu",
    "render",
    "to_json",
    "to_string",
    "to_structured",
    "tree_depth",
    "validate_config",
    "visible_leaves",
]
