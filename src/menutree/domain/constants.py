from __future__ import annotations

"""
Domain Constants.

Shared sentinel values and serialization keys for the menu tree model.
"""

# Mask value that matches every non-zero query mask
ALWAYS_VISIBLE: int = -1

# Structured export keys (stable, consumed by templates and API clients)
KEY_LABEL: str = "label"
KEY_ACTION: str = "action"
KEY_ITEMS: str = "items"

# Only understood by the definition loader, never exported
KEY_MASK: str = "mask"

INDENT_UNIT: str = "\t"

DEFAULT_MAX_DEPTH: int = 256

# Signed 64-bit range accepted for masks read from definitions
MASK_MIN: int = -(1 << 63)
MASK_MAX: int = (1 << 63) - 1
