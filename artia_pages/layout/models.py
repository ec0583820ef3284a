"""Typed values describing page layout slots and their components."""

from __future__ import annotations

import dataclasses as dc
import enum
import types
import typing as typ

PageType = typ.Literal["home", "read"]
SlotPosition = typ.Literal["top", "left", "center", "right", "bottom"]
LayoutMode = typ.Literal["content", "app"]

PAGE_TYPES: tuple[PageType, ...] = ("home", "read")
SLOT_POSITIONS: tuple[SlotPosition, ...] = ("top", "left", "center", "right", "bottom")

PropValue = str | bool


class SlotComponentKind(enum.StrEnum):
    """Components an operator can place into a layout slot."""

    AUTHOR = "author"
    NAVIGATION = "navigation"
    BOOKMENU = "bookmenu"
    TOC = "toc"
    HISTORY = "history"
    HERO = "hero"
    FEATURED = "featured"
    RECENT = "recent"
    SEARCH = "search"
    NONE = "none"


RENDERER_IDS: typ.Mapping[SlotComponentKind, str] = types.MappingProxyType(
    {
        SlotComponentKind.AUTHOR: "LayoutSidebarAuthor",
        SlotComponentKind.NAVIGATION: "LayoutSidebarNav",
        SlotComponentKind.BOOKMENU: "LayoutSidebarBookMenu",
        SlotComponentKind.TOC: "LayoutTableOfContents",
        SlotComponentKind.HISTORY: "LayoutHistoryTimeline",
        SlotComponentKind.HERO: "LayoutHeroSection",
        SlotComponentKind.FEATURED: "LayoutFeaturedBooks",
        SlotComponentKind.RECENT: "LayoutRecentContent",
        SlotComponentKind.SEARCH: "LayoutSearch",
        SlotComponentKind.NONE: "",
    }
)


@dc.dataclass(frozen=True, slots=True)
class ParsedSlotComponent:
    """One component entry parsed from a slot setting.

    Attributes
    ----------
    kind : SlotComponentKind
        Component type named by the segment.
    props : Mapping[str, str | bool]
        Read-only parameters given after the ``:`` separator.
    """

    kind: SlotComponentKind
    props: typ.Mapping[str, PropValue] = dc.field(
        default_factory=lambda: types.MappingProxyType({})
    )

    @property
    def renderer_id(self) -> str:
        """Return the renderer identifier for this component's kind."""
        return RENDERER_IDS[self.kind]


@dc.dataclass(frozen=True, slots=True)
class LayoutSettings:
    """Raw slot strings for every page type and position, plus the mode."""

    home_top: str = ""
    home_left: str = ""
    home_center: str = ""
    home_right: str = ""
    home_bottom: str = ""
    read_top: str = ""
    read_left: str = ""
    read_center: str = ""
    read_right: str = ""
    read_bottom: str = ""
    mode: str = "content"

    def raw_value(self, page: PageType, position: SlotPosition) -> str:
        """Return the raw setting for ``page`` and ``position``."""
        return getattr(self, f"{page}_{position}")


SlotAssignment = tuple[ParsedSlotComponent, ...]


__all__ = [
    "PAGE_TYPES",
    "RENDERER_IDS",
    "SLOT_POSITIONS",
    "LayoutMode",
    "LayoutSettings",
    "PageType",
    "ParsedSlotComponent",
    "PropValue",
    "SlotAssignment",
    "SlotComponentKind",
    "SlotPosition",
]
