from __future__ import annotations

"""
Structured-Form Exporter.

Converts a menu tree into nested dictionaries ready for JSON encoding.
Leaves become ``{"label", "action"}``, groups ``{"label", "items"}``.
Visibility masks are internal and never exported, so callers should
export the filtered tree rather than the raw one.
"""

import json
from typing import Any, Dict

from menutree.domain.constants import KEY_ACTION, KEY_ITEMS, KEY_LABEL
from menutree.domain.menu_models import MenuNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def to_structured(node: MenuNode) -> Dict[str, Any]:
    """
    Export a node as an ordered mapping.

    Groups always carry ``items``, empty when they have no children.

    Args:
        node: Root of the subtree to export.

    Returns:
        Dict[str, Any]: JSON-compatible nested mapping.
    """
    if not node.is_group:
        return {KEY_LABEL: node.label, KEY_ACTION: node.action}

    return {
        KEY_LABEL: node.label,
        KEY_ITEMS: [to_structured(child) for child in node.children],
    }


def to_json(node: MenuNode, indent: int = 2) -> str:
    """
    Serialize a node to a JSON document.

    Args:
        node: Root of the subtree to serialize.
        indent: Spaces per nesting level; 0 or less yields compact output.

    Returns:
        str: JSON text with non-ASCII labels kept as-is.
    """
    return json.dumps(
        to_structured(node),
        indent=indent if indent > 0 else None,
        ensure_ascii=False,
    )
