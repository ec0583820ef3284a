"""Unit tests for :class:`artia_pages.layout.LayoutResolver`."""

from __future__ import annotations

import dataclasses as dc

import pytest

from artia_pages.errors import InvalidInputError
from artia_pages.layout import (
    PAGE_TYPES,
    SLOT_POSITIONS,
    LayoutResolver,
    LayoutSettings,
    parse_slot_value,
)

SAMPLE_VALUES = [
    "",
    "none",
    "hero",
    "bogus",
    "navigation:root=/novels,author",
    " , toc ,",
    "NONE,Search",
]


@pytest.fixture
def resolver() -> LayoutResolver:
    """Return a resolver with a typical reading-page layout."""
    settings = LayoutSettings(
        home_center="hero,featured,recent:limit=6",
        read_left="navigation:root=/novels;title=Novels",
        read_right="toc,history",
        read_bottom="none",
    )
    return LayoutResolver(settings)


@pytest.mark.parametrize("raw", SAMPLE_VALUES)
def test_enabled_iff_parse_is_not_empty(raw: str) -> None:
    """``is_slot_enabled`` agrees with the parser for every slot."""
    for page in PAGE_TYPES:
        for position in SLOT_POSITIONS:
            settings = dc.replace(LayoutSettings(), **{f"{page}_{position}": raw})
            resolver = LayoutResolver(settings)
            expected = len(parse_slot_value(raw)) > 0
            assert resolver.is_slot_enabled(page, position) is expected, (
                f"{page}.{position}={raw!r} should be enabled={expected}"
            )


def test_sidebar_flags(resolver: LayoutResolver) -> None:
    """Sidebar helpers reflect the left and right slots."""
    assert resolver.has_left_sidebar("read"), "read page should have a left sidebar"
    assert resolver.has_right_sidebar("read"), "read page should have a right sidebar"
    assert not resolver.has_left_sidebar("home"), "home page has no left sidebar"


def test_renderer_ids_keep_order(resolver: LayoutResolver) -> None:
    """Renderer identifiers are listed in source order."""
    assert resolver.get_renderer_ids("home", "center") == [
        "LayoutHeroSection",
        "LayoutFeaturedBooks",
        "LayoutRecentContent",
    ], "unexpected home center renderer ids"
    assert resolver.get_first_renderer_id("read", "right") == "LayoutTableOfContents"


def test_first_renderer_id_absent_for_empty_slot(resolver: LayoutResolver) -> None:
    """A slot configured as ``none`` has no first renderer."""
    assert resolver.get_first_renderer_id("read", "bottom") is None
    assert resolver.get_renderer_ids("read", "bottom") == []


def test_slot_components_carry_props(resolver: LayoutResolver) -> None:
    """Slot components expose the props written in the setting."""
    (navigation,) = resolver.slot_components("read", "left")
    assert dict(navigation.props) == {"root": "/novels", "title": "Novels"}


def test_raw_value_is_returned_untouched(resolver: LayoutResolver) -> None:
    """The raw accessor returns the configured text as written."""
    assert resolver.raw_slot_value("read", "bottom") == "none"


def test_layout_config_covers_every_slot(resolver: LayoutResolver) -> None:
    """``layout_config`` maps all ten slots."""
    config = resolver.layout_config()
    assert set(config) == set(PAGE_TYPES)
    for page in PAGE_TYPES:
        assert set(config[page]) == set(SLOT_POSITIONS), f"missing slots for {page}"
    assert list(resolver.enabled_slots()) == [
        ("home", "center"),
        ("read", "left"),
        ("read", "right"),
    ]


@pytest.mark.parametrize(
    ("mode", "expected"),
    [("app", "app"), (" APP ", "app"), ("content", "content"), ("", "content"), ("x", "content")],
)
def test_layout_mode(mode: str, expected: str) -> None:
    """Only ``app`` selects app mode; everything else is content mode."""
    resolver = LayoutResolver(LayoutSettings(mode=mode))
    assert resolver.layout_mode == expected
    assert resolver.is_app_mode is (expected == "app")
    assert resolver.is_content_mode is (expected == "content")


def test_unknown_slot_is_rejected(resolver: LayoutResolver) -> None:
    """Queries outside the page/position vocabulary raise invalid input."""
    with pytest.raises(InvalidInputError):
        resolver.is_slot_enabled("about", "left")  # type: ignore[arg-type]
    with pytest.raises(InvalidInputError):
        resolver.is_slot_enabled("home", "middle")  # type: ignore[arg-type]


def test_settings_are_not_modified(resolver: LayoutResolver) -> None:
    """Resolving slots leaves the settings value unchanged."""
    before = dc.asdict(resolver.settings)
    resolver.layout_config()
    assert dc.asdict(resolver.settings) == before
