from __future__ import annotations

"""
Menu Preparation Service.

Single entry point for callers that want a menu ready for output: it
validates settings, optionally checks the tree shape, filters for the
caller's mask and renders both output forms in one pass.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from menutree.config import validate_config
from menutree.core.exporter import to_json, to_structured
from menutree.core.guard import check_tree
from menutree.core.renderer import to_string
from menutree.core.visibility import collect_leaves, filtered
from menutree.domain.menu_models import MenuNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class MenuView:
    """
    Filtered menu together with its rendered forms.

    Attributes:
        query_mask: Mask the tree was filtered with.
        tree: The filtered tree.
        text: Indented text rendering of ``tree``.
        data: Structured export of ``tree``.
        json_text: JSON serialization of ``data``.
        visible_leaf_count: Number of leaves that survived filtering.
    """
    query_mask: int
    tree: MenuNode
    text: str
    data: Dict[str, Any] = field(default_factory=dict)
    json_text: str = ""
    visible_leaf_count: int = 0


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def prepare_menu(
        tree: MenuNode,
        query_mask: Optional[int] = None,
        config: Optional[Dict[str, Any]] = None,
) -> MenuView:
    """
    Filter a menu for a viewer and render it.

    Args:
        tree: Unfiltered menu.
        query_mask: Viewer's permission bits; falls back to the configured
            ``query_mask`` when omitted.
        config: Raw settings, normalized with ``validate_config``.

    Returns:
        MenuView: The filtered tree and its renderings.

    Raises:
        MenuDepthError: If the depth guard is enabled and the tree fails it.
    """
    cfg, warnings = validate_config(config)
    for w in warnings:
        logger.warning(w)

    mask = cfg["query_mask"] if query_mask is None else query_mask

    if cfg["enable_depth_guard"]:
        depth = check_tree(tree, max_depth=cfg["max_depth"])
        logger.debug(f"Menu '{tree.label}' passed depth guard (depth {depth}).")

    result = filtered(tree, mask)
    leaf_count = len(collect_leaves(result))
    logger.debug(f"Menu '{tree.label}' filtered with mask {mask:#x}: {leaf_count} visible entries.")

    return MenuView(
        query_mask=mask,
        tree=result,
        text=to_string(result),
        data=to_structured(result),
        json_text=to_json(result, indent=cfg["json_indent"]),
        visible_leaf_count=leaf_count,
    )
