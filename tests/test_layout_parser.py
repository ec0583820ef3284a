"""Unit tests for layout slot parsing.

These tests cover :func:`artia_pages.layout.parse_slot_value`, the parser that
turns operator-supplied slot settings into component descriptors. They focus
on the grammar (segments, parameters, boolean values) and on the rule that
malformed or unknown segments are dropped instead of raising.

Usage
-----
Run ``pytest tests/test_layout_parser.py -v``. No fixtures are required.
"""

from __future__ import annotations

import pytest

from artia_pages.errors import InvalidInputError
from artia_pages.layout import SlotComponentKind, parse_slot_value


def test_single_component_has_empty_props() -> None:
    """A bare component name parses to one descriptor without props."""
    components = parse_slot_value("hero")
    assert len(components) == 1, f"expected one component, got {components!r}"
    assert components[0].kind is SlotComponentKind.HERO, (
        f"expected hero kind, got {components[0].kind!r}"
    )
    assert dict(components[0].props) == {}, "expected no props for a bare name"


def test_parameters_and_order_are_preserved() -> None:
    """Parameters attach to their segment and segments keep source order."""
    components = parse_slot_value("navigation:root=/content;title=My Nav,author")
    kinds = [component.kind for component in components]
    assert kinds == [SlotComponentKind.NAVIGATION, SlotComponentKind.AUTHOR], (
        f"expected navigation then author, got {kinds!r}"
    )
    assert dict(components[0].props) == {"root": "/content", "title": "My Nav"}, (
        f"unexpected navigation props {dict(components[0].props)!r}"
    )
    assert dict(components[1].props) == {}, "author should carry no props"


def test_none_unknown_and_empty_segments_are_dropped() -> None:
    """``none``, unknown kinds, and empty segments never produce components."""
    assert parse_slot_value("none,bogus,") == (), "expected an empty assignment"


@pytest.mark.parametrize("raw", [None, "", "   ", ",,", " , "])
def test_blank_values_yield_empty_assignment(raw: str | None) -> None:
    """Absent and whitespace-only settings denote an empty slot."""
    assert parse_slot_value(raw) == (), f"expected no components for {raw!r}"


def test_names_match_case_insensitively_after_trimming() -> None:
    """Kind names ignore case and surrounding whitespace."""
    components = parse_slot_value("  TOC , History ")
    kinds = [component.kind for component in components]
    assert kinds == [SlotComponentKind.TOC, SlotComponentKind.HISTORY], (
        f"expected toc and history, got {kinds!r}"
    )


def test_boolean_values_are_case_sensitive() -> None:
    """Only exact ``true``/``false`` become booleans."""
    (component,) = parse_slot_value("bookmenu:open=true;sticky=false;flag=True")
    assert component.props["open"] is True, "expected open=True"
    assert component.props["sticky"] is False, "expected sticky=False"
    assert component.props["flag"] == "True", "expected 'True' to stay a string"


def test_pairs_without_equals_are_ignored() -> None:
    """Only pairs lacking ``=`` are skipped; an empty key is still a pair."""
    (component,) = parse_slot_value("recent:limit = 5 ;orphan;=value;label=a=b")
    assert dict(component.props) == {"limit": "5", "": "value", "label": "a=b"}, (
        f"unexpected props {dict(component.props)!r}"
    )


def test_props_are_read_only() -> None:
    """Parsed props cannot be modified by consumers."""
    (component,) = parse_slot_value("search:placeholder=Find")
    with pytest.raises(TypeError):
        component.props["placeholder"] = "changed"  # type: ignore[index]


def test_renderer_id_follows_kind() -> None:
    """Each descriptor exposes the renderer identifier of its kind."""
    (component,) = parse_slot_value("featured")
    assert component.renderer_id == "LayoutFeaturedBooks", (
        f"unexpected renderer id {component.renderer_id!r}"
    )


def test_non_string_input_is_rejected() -> None:
    """Values that are neither strings nor None raise the invalid-input error."""
    with pytest.raises(InvalidInputError):
        parse_slot_value(42)  # type: ignore[arg-type]
