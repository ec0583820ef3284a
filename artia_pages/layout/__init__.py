"""Slot-based page layout configuration.

Operators choose which components appear in each region of the home and
reading pages through ten short settings (``ARTIA_LAYOUT_HOME_LEFT`` and
friends). This subpackage parses those settings into typed descriptors
(:func:`parse_slot_value`) and answers layout questions about them
(:class:`LayoutResolver`).

Examples
--------
>>> from artia_pages.layout import LayoutResolver, LayoutSettings
>>> resolver = LayoutResolver(LayoutSettings(home_center="hero,recent:limit=5"))
>>> resolver.is_slot_enabled("home", "center")
True
>>> resolver.get_first_renderer_id("home", "center")
'LayoutHeroSection'
"""

from .models import (
    PAGE_TYPES,
    RENDERER_IDS,
    SLOT_POSITIONS,
    LayoutMode,
    LayoutSettings,
    PageType,
    ParsedSlotComponent,
    SlotAssignment,
    SlotComponentKind,
    SlotPosition,
)
from .parser import parse_slot_value
from .resolver import LayoutResolver

__all__ = [
    "PAGE_TYPES",
    "RENDERER_IDS",
    "SLOT_POSITIONS",
    "LayoutMode",
    "LayoutResolver",
    "LayoutSettings",
    "PageType",
    "ParsedSlotComponent",
    "SlotAssignment",
    "SlotComponentKind",
    "SlotPosition",
    "parse_slot_value",
]
