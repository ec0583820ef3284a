r"""Parse layout slot settings into component descriptors.

A slot setting is operator-supplied text such as
``"navigation:root=/novels;title=Novels,author"``: comma-separated segments,
each naming a component and optionally carrying ``key=value`` parameters
after a colon. Parsing never fails on malformed text; segments that do not
name a known component are dropped so a typo in the environment cannot break
page rendering.

Example
-------
>>> from artia_pages.layout.parser import parse_slot_value
>>> [c.kind.value for c in parse_slot_value("hero, featured")]
['hero', 'featured']
>>> dict(parse_slot_value("bookmenu:title=Contents;open=true")[0].props)
{'title': 'Contents', 'open': True}
"""

from __future__ import annotations

import types

from artia_pages.errors import InvalidInputError

from .models import ParsedSlotComponent, PropValue, SlotAssignment, SlotComponentKind

SEGMENT_SEPARATOR = ","
PARAMS_SEPARATOR = ":"
PAIR_SEPARATOR = ";"
KEY_VALUE_SEPARATOR = "="
_BOOLEAN_VALUES: dict[str, bool] = {"true": True, "false": False}


def _parse_kind(name: str) -> SlotComponentKind | None:
    """Return the component kind named by ``name``, or None if unknown."""
    try:
        return SlotComponentKind(name.strip().lower())
    except ValueError:
        return None


def _parse_params(text: str) -> dict[str, PropValue]:
    """Parse ``key=value`` pairs separated by semicolons.

    Pairs without ``=`` are skipped; an empty key is kept as ``""``.
    """
    props: dict[str, PropValue] = {}
    for pair in text.split(PAIR_SEPARATOR):
        if KEY_VALUE_SEPARATOR not in pair:
            continue
        key, value = pair.split(KEY_VALUE_SEPARATOR, 1)
        value = value.strip()
        props[key.strip()] = _BOOLEAN_VALUES.get(value, value)
    return props


def _parse_segment(segment: str) -> ParsedSlotComponent | None:
    """Parse one comma-separated segment into a component descriptor."""
    name, _sep, params = segment.strip().partition(PARAMS_SEPARATOR)
    kind = _parse_kind(name)
    if kind is None or kind is SlotComponentKind.NONE:
        return None
    return ParsedSlotComponent(
        kind=kind, props=types.MappingProxyType(_parse_params(params))
    )


def parse_slot_value(raw: str | None) -> SlotAssignment:
    """Split a raw slot setting into ordered component descriptors.

    Parameters
    ----------
    raw : str or None
        Setting text in the ``name[:key=value;...][,name...]`` form. ``None``
        and blank strings denote an empty slot.

    Returns
    -------
    tuple[ParsedSlotComponent, ...]
        Components in the order they appear in ``raw``. ``none`` and unknown
        names are omitted.

    Raises
    ------
    InvalidInputError
        If ``raw`` is neither a string nor ``None``.
    """
    if raw is None:
        return ()
    if not isinstance(raw, str):
        msg = f"Slot value must be a string, got {type(raw).__name__}."
        raise InvalidInputError(msg)
    if not raw.strip():
        return ()
    components: list[ParsedSlotComponent] = []
    for segment in raw.split(SEGMENT_SEPARATOR):
        component = _parse_segment(segment)
        if component is not None:
            components.append(component)
    return tuple(components)


__all__ = ["parse_slot_value"]
