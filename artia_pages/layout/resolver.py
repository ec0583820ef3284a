"""Answer layout questions for page templates from slot settings.

:class:`LayoutResolver` wraps a :class:`LayoutSettings` value and exposes the
queries the rendering layer asks while laying out a page: which components sit
in a slot, whether a sidebar is present, and which renderer identifiers to
instantiate. Every query re-parses the raw setting it needs, so the resolver
holds no derived state and the settings object is never modified.

Example
-------
>>> from artia_pages.layout import LayoutResolver, LayoutSettings
>>> resolver = LayoutResolver(LayoutSettings(read_left="navigation,author"))
>>> resolver.get_renderer_ids("read", "left")
['LayoutSidebarNav', 'LayoutSidebarAuthor']
>>> resolver.has_right_sidebar("read")
False
"""

from __future__ import annotations

import typing as typ

from artia_pages.errors import InvalidInputError

from .models import (
    PAGE_TYPES,
    SLOT_POSITIONS,
    LayoutMode,
    LayoutSettings,
    PageType,
    SlotAssignment,
    SlotPosition,
)
from .parser import parse_slot_value


def _check_slot(page: str, position: str) -> None:
    """Reject page types or positions outside the known vocabulary."""
    if page not in PAGE_TYPES:
        msg = f"Unknown page type '{page}'. Expected one of: {', '.join(PAGE_TYPES)}"
        raise InvalidInputError(msg)
    if position not in SLOT_POSITIONS:
        expected = ", ".join(SLOT_POSITIONS)
        msg = f"Unknown slot position '{position}'. Expected one of: {expected}"
        raise InvalidInputError(msg)


class LayoutResolver:
    """Resolve slot assignments and derived flags from layout settings."""

    def __init__(self, settings: LayoutSettings) -> None:
        self.settings = settings

    @property
    def layout_mode(self) -> LayoutMode:
        """Return ``"app"`` when configured, otherwise ``"content"``."""
        mode = (self.settings.mode or "").strip().lower()
        return "app" if mode == "app" else "content"

    @property
    def is_content_mode(self) -> bool:
        """Return True when top and bottom slots span the full width."""
        return self.layout_mode == "content"

    @property
    def is_app_mode(self) -> bool:
        """Return True when the sidebars extend to the top of the page."""
        return self.layout_mode == "app"

    def raw_slot_value(self, page: PageType, position: SlotPosition) -> str:
        """Return the unparsed setting for the slot."""
        _check_slot(page, position)
        return self.settings.raw_value(page, position)

    def slot_components(self, page: PageType, position: SlotPosition) -> SlotAssignment:
        """Return the parsed components assigned to the slot, in order."""
        return parse_slot_value(self.raw_slot_value(page, position))

    def is_slot_enabled(self, page: PageType, position: SlotPosition) -> bool:
        """Return True when at least one component occupies the slot."""
        return bool(self.slot_components(page, position))

    def has_left_sidebar(self, page: PageType) -> bool:
        """Return True when the left slot of ``page`` is populated."""
        return self.is_slot_enabled(page, "left")

    def has_right_sidebar(self, page: PageType) -> bool:
        """Return True when the right slot of ``page`` is populated."""
        return self.is_slot_enabled(page, "right")

    def get_renderer_ids(self, page: PageType, position: SlotPosition) -> list[str]:
        """Return renderer identifiers for the slot, skipping empty tokens."""
        return [
            component.renderer_id
            for component in self.slot_components(page, position)
            if component.renderer_id
        ]

    def get_first_renderer_id(
        self, page: PageType, position: SlotPosition
    ) -> str | None:
        """Return the first renderer identifier for single-component callers."""
        renderer_ids = self.get_renderer_ids(page, position)
        return renderer_ids[0] if renderer_ids else None

    def layout_config(self) -> dict[PageType, dict[SlotPosition, SlotAssignment]]:
        """Return every slot assignment keyed by page type and position."""
        return {
            page: {
                position: self.slot_components(page, position)
                for position in SLOT_POSITIONS
            }
            for page in PAGE_TYPES
        }

    def enabled_slots(self) -> typ.Iterator[tuple[PageType, SlotPosition]]:
        """Yield ``(page, position)`` pairs whose slots hold components."""
        for page in PAGE_TYPES:
            for position in SLOT_POSITIONS:
                if self.is_slot_enabled(page, position):
                    yield page, position


__all__ = ["LayoutResolver"]
