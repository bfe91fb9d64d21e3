from __future__ import annotations

"""
Unit tests for the Menu Definition Loader.

Verifies construction from plain data, mask parsing and the location
reported for malformed entries.
"""

import pytest

from menutree.core.builder import new_group, new_group_masked, new_leaf, new_leaf_masked
from menutree.core.loader import from_definition
from menutree.domain.errors import MenuDefinitionError


def test_from_definition_builds_equal_tree(site_definition, site_menu):
    assert from_definition(site_definition) == site_menu


def test_from_definition_leaf_root():
    assert from_definition({"label": "About", "action": "/about"}) == new_leaf("About", "/about")


@pytest.mark.parametrize("raw, expected", [(128, 0x80), ("0x80", 0x80), ("128", 128), ("0b101", 5), (-1, -1)])
def test_mask_formats(raw, expected):
    node = from_definition({"label": "x", "action": "/x", "mask": raw})
    assert node == new_leaf_masked("x", "/x", expected)


def test_group_mask_is_applied():
    node = from_definition({"label": "G", "mask": "0x0f", "items": [{"label": "x", "action": "/x"}]})
    assert node == new_group_masked("G", [new_leaf("x", "/x")], 0x0F)


def test_missing_label_defaults_to_empty():
    assert from_definition({"items": []}) == new_group("", [])


@pytest.mark.parametrize(
    "data, location",
    [
        ("not a mapping", "root"),
        ({"label": 3, "action": "/x"}, "root"),
        ({"label": "x"}, "root"),
        ({"label": "x", "action": "/x", "items": []}, "root"),
        ({"label": "G", "items": "nope"}, "root"),
        ({"label": "G", "items": [{"label": "ok", "action": "/ok"}, {"label": "bad", "action": 5}]}, "items[1]"),
        ({"label": "G", "items": [{"label": "S", "items": [{"label": "m", "action": "/m", "mask": "zz"}]}]},
         "items[0].items[0]"),
        ({"label": "x", "action": "/x", "mask": True}, "root"),
        ({"label": "x", "action": "/x", "mask": 1.5}, "root"),
    ],
)
def test_malformed_definitions_report_location(data, location):
    with pytest.raises(MenuDefinitionError) as exc:
        from_definition(data)
    assert exc.value.location == location
    assert str(exc.value).startswith(f"{location}: ")


@pytest.mark.parametrize("raw", [-(1 << 63), (1 << 63) - 1, "0x7FFFFFFFFFFFFFFF", "-0x8000000000000000"])
def test_mask_at_int64_bounds_is_accepted(raw):
    node = from_definition({"label": "x", "action": "/x", "mask": raw})
    assert node.visibility == (int(raw, 0) if isinstance(raw, str) else raw)


@pytest.mark.parametrize("raw", [1 << 63, -(1 << 63) - 1, "0x1FFFFFFFFFFFFFFFF", "0xFFFFFFFFFFFFFFFF"])
def test_mask_outside_int64_is_rejected(raw):
    data = {"label": "G", "items": [{"label": "x", "action": "/x", "mask": raw}]}
    with pytest.raises(MenuDefinitionError) as exc:
        from_definition(data)
    assert exc.value.location == "items[0]"
    assert "64-bit" in str(exc.value)
