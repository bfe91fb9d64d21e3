from __future__ import annotations

"""
Menu Definition Loader.

Builds menu trees from plain data such as a parsed JSON configuration file.
Accepts the same shape the exporter produces, plus an optional ``mask``
entry per node:

    {"label": "Admin", "mask": "0x80", "items": [
        {"label": "Users", "action": "/admin/users"}
    ]}

Unlike the node factories, this boundary validates its input and reports
the location of the first malformed entry.
"""

import json
import logging
import os
from typing import Any, List

from menutree.core.builder import (
    new_group,
    new_group_masked,
    new_leaf,
    new_leaf_masked,
)
from menutree.domain.constants import (
    KEY_ACTION,
    KEY_ITEMS,
    KEY_LABEL,
    KEY_MASK,
    MASK_MAX,
    MASK_MIN,
)
from menutree.domain.errors import MenuDefinitionError
from menutree.domain.menu_models import MenuNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def from_definition(data: Any) -> MenuNode:
    """
    Convert a raw menu definition into a tree.

    A mapping with ``items`` becomes a group, one with ``action`` a leaf.
    Masks may be integers or numeric strings (``"0x80"``, ``"128"``).

    Args:
        data: Decoded definition, usually a dict.

    Returns:
        MenuNode: Root of the constructed tree.

    Raises:
        MenuDefinitionError: If an entry is malformed.
    """
    return _build_node(data, "root")


def load_definition_file(path: str) -> MenuNode:
    """
    Read a UTF-8 JSON definition file and build its tree.

    Args:
        path: Filesystem path of the JSON document.

    Returns:
        MenuNode: Root of the constructed tree.

    Raises:
        MenuDefinitionError: If the file cannot be read, decoded, or built.
    """
    logger.debug(f"Loading menu definition from: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        logger.error(f"Cannot read menu definition '{path}': {e}")
        raise MenuDefinitionError(f"cannot read file: {e}", location=os.path.basename(path)) from e
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in menu definition '{path}': {e}")
        raise MenuDefinitionError(f"invalid JSON: {e}", location=os.path.basename(path)) from e

    return from_definition(data)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _build_node(data: Any, location: str) -> MenuNode:
    if not isinstance(data, dict):
        raise MenuDefinitionError(
            f"expected an object, received {type(data).__name__}", location=location
        )

    label = data.get(KEY_LABEL, "")
    if not isinstance(label, str):
        raise MenuDefinitionError("'label' must be a string", location=location)

    has_items = KEY_ITEMS in data
    has_action = KEY_ACTION in data
    if has_items and has_action:
        raise MenuDefinitionError("entry cannot have both 'action' and 'items'", location=location)
    if not has_items and not has_action:
        raise MenuDefinitionError("entry needs either 'action' or 'items'", location=location)

    mask = _parse_mask(data.get(KEY_MASK), location) if KEY_MASK in data else None

    # Scenario A: Group
    if has_items:
        raw_items = data[KEY_ITEMS]
        if not isinstance(raw_items, list):
            raise MenuDefinitionError("'items' must be a list", location=location)
        children: List[MenuNode] = [
            _build_node(item, _child_location(location, i))
            for i, item in enumerate(raw_items)
        ]
        if mask is None:
            return new_group(label, children)
        return new_group_masked(label, children, mask)

    # Scenario B: Leaf
    action = data[KEY_ACTION]
    if not isinstance(action, str):
        raise MenuDefinitionError("'action' must be a string", location=location)
    if mask is None:
        return new_leaf(label, action)
    return new_leaf_masked(label, action, mask)


def _parse_mask(value: Any, location: str) -> int:
    """Accept ints and int literals in any base Python understands, within int64."""
    if isinstance(value, bool):
        raise MenuDefinitionError("'mask' must be an integer, not a bool", location=location)

    mask = None
    if isinstance(value, int):
        mask = value
    elif isinstance(value, str):
        try:
            mask = int(value.strip(), 0)
        except ValueError:
            pass
    if mask is None:
        raise MenuDefinitionError(f"invalid 'mask' value: {value!r}", location=location)

    if not MASK_MIN <= mask <= MASK_MAX:
        raise MenuDefinitionError(
            f"'mask' {value!r} is outside the signed 64-bit range", location=location
        )
    return mask


def _child_location(parent: str, index: int) -> str:
    prefix = "" if parent == "root" else f"{parent}."
    return f"{prefix}{KEY_ITEMS}[{index}]"
