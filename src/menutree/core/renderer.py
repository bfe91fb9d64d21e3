from __future__ import annotations

"""
Text Renderer.

Turns a menu tree into indented plain text: one line per node, one tab per
nesting level, leaves as ``label: action``. The exact layout is relied on by
callers and tests, so it must not change (no trailing newline).
"""

from typing import List

from menutree.domain.constants import INDENT_UNIT
from menutree.domain.menu_models import MenuNode

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render(node: MenuNode, indent_level: int = 0) -> str:
    """
    Render a node and its descendants, prefixing every line with
    ``indent_level`` tabs (children get one more).

    Args:
        node: Root of the subtree to render.
        indent_level: Number of leading tabs for the first line.

    Returns:
        str: Multi-line text without trailing newline.
    """
    lines: List[str] = []
    _render_lines(node, indent_level, lines)
    return "\n".join(lines)


def to_string(node: MenuNode) -> str:
    """Render a tree starting at column zero."""
    return render(node, 0)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render_lines(node: MenuNode, indent_level: int, lines: List[str]) -> None:
    prefix = INDENT_UNIT * indent_level

    # Case A: Leaf
    if not node.is_group:
        lines.append(f"{prefix}{node.label}: {node.action}")
        return

    # Case B: Group, children one level deeper
    lines.append(f"{prefix}{node.label}")
    for child in node.children:
        _render_lines(child, indent_level + 1, lines)
