from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports uninstalled.
2. Provides the sample menus shared by the unit tests.
"""

import os
import sys
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from menutree.core.builder import (  # noqa: E402
    new_group,
    new_group_masked,
    new_leaf,
    new_leaf_masked,
)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def plain_menu():
    """Nested menu where every node uses the default mask."""
    return new_group("Root", [
        new_leaf("A", "/a"),
        new_group("B", [
            new_leaf("B0", "/b0"),
            new_leaf("B1", "/b1"),
        ]),
        new_leaf("C", "/c"),
    ])


@pytest.fixture
def masked_menu():
    """Menu with a submenu whose entries are restricted to various bits."""
    return new_group("Test Case 1", [
        new_group("Filter Me Out", [
            new_leaf_masked("Thing 1", "/1", 0x10),
            new_leaf_masked("Thing 2", "/2", 0x10),
            new_leaf_masked("Thing 3", "/3", 0x08),
        ]),
        new_leaf("Keep Me", "/keep"),
    ])


@pytest.fixture
def site_menu():
    """Website navigation with a public part, an admin entry and a FAQ entry."""
    return new_group("", [
        new_leaf("About", "/about"),
        new_group("Locations", [
            new_leaf("Berlin", "/locations/Berlin"),
            new_leaf("Seoul", "/locations/Seoul"),
        ]),
        new_leaf_masked("Admin", "/admin", 0x80),
        new_leaf_masked("FAQ", "/faq", 0x01),
    ])


@pytest.fixture
def group_masked_menu():
    """Menu whose submenu is restricted by the group's own mask."""
    return new_group("Test Case 2", [
        new_leaf("Hello", "/hello"),
        new_group_masked("你好", [
            new_leaf("很棒", "/great"),
        ], 0x0F),
    ])


@pytest.fixture
def site_definition() -> Dict[str, Any]:
    """Raw definition equivalent to ``site_menu``."""
    return {
        "label": "",
        "items": [
            {"label": "About", "action": "/about"},
            {"label": "Locations", "items": [
                {"label": "Berlin", "action": "/locations/Berlin"},
                {"label": "Seoul", "action": "/locations/Seoul"},
            ]},
            {"label": "Admin", "action": "/admin", "mask": "0x80"},
            {"label": "FAQ", "action": "/faq", "mask": 1},
        ],
    }
