"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import typing as typ

from artia_pages._constants import ENV_PREFIX, LAYOUT_ENV_TEMPLATE
from artia_pages.errors import SiteConfigError
from artia_pages.layout import PAGE_TYPES, SLOT_POSITIONS

TRUE_VALUES = frozenset({"true", "1", "yes", "on"})


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_bool(value: object | None, *, default: bool = False) -> bool:
    """Interpret YAML booleans and ``"true"``-style strings."""
    match value:
        case None:
            return default
        case bool():
            return value
        case str() as text:
            return text.strip().lower() in TRUE_VALUES
        case _:
            return bool(value)


def _section(raw: typ.Mapping[str, typ.Any], key: str) -> dict[str, typ.Any]:
    """Return ``raw[key]`` as a mapping, rejecting other types."""
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"Section '{key}' must be a mapping."
        raise SiteConfigError(msg)
    return dict(value)


def _slot_text(value: object | None) -> str:
    """Normalize a YAML slot value, joining lists with commas."""
    if value is None:
        return ""
    if isinstance(value, list):
        return ",".join(str(entry) for entry in value)
    return str(value)


def _layout_fields(layout: typ.Mapping[str, typ.Any]) -> dict[str, str]:
    """Flatten ``layout.<page>.<position>`` entries into settings fields."""
    fields: dict[str, str] = {}
    for page in PAGE_TYPES:
        page_slots = _section(layout, page)
        for position in SLOT_POSITIONS:
            fields[f"{page}_{position}"] = _slot_text(page_slots.get(position))
    mode = _optional_str(layout.get("mode"))
    if mode:
        fields["mode"] = mode
    return fields


def _layout_env_overrides(environ: typ.Mapping[str, str]) -> dict[str, str]:
    """Collect ``ARTIA_LAYOUT_*`` overrides present in ``environ``."""
    overrides: dict[str, str] = {}
    for page in PAGE_TYPES:
        for position in SLOT_POSITIONS:
            name = LAYOUT_ENV_TEMPLATE.format(page=page.upper(), position=position.upper())
            if name in environ:
                overrides[f"{page}_{position}"] = environ[name]
    mode = environ.get(f"{ENV_PREFIX}LAYOUT_MODE")
    if mode is not None:
        overrides["mode"] = mode
    return overrides


def _env_value(environ: typ.Mapping[str, str], name: str) -> str | None:
    """Return ``ARTIA_<name>`` from ``environ`` when set."""
    return environ.get(f"{ENV_PREFIX}{name}")


__all__ = [
    "_env_value",
    "_layout_env_overrides",
    "_layout_fields",
    "_optional_str",
    "_parse_bool",
    "_section",
]
