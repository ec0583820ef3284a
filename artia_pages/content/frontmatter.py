"""Parse YAML metadata blocks attached to content files."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from artia_pages.errors import ContentLoadError

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_yaml_mapping(text: str, source: Path | str = "<string>") -> dict[str, typ.Any]:
    """Parse ``text`` as a YAML 1.2 mapping.

    Parameters
    ----------
    text : str
        YAML document; blank text yields an empty mapping.
    source : Path or str, optional
        Name reported in error messages.

    Raises
    ------
    ContentLoadError
        If the YAML is malformed or not a mapping.
    """
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(text) or {}
    except YAMLError as exc:
        msg = f"Invalid YAML metadata in '{source}': {exc}"
        raise ContentLoadError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"Metadata in '{source}' must be a mapping."
        raise ContentLoadError(msg)
    return dict(loaded)


def parse_front_matter(
    front_matter: str, source: Path | str = "<string>"
) -> dict[str, typ.Any]:
    """Parse a ``---`` delimited block as returned by ``split_front_matter``."""
    if not front_matter:
        return {}
    payload = "\n".join(front_matter.splitlines()[1:-1])
    return load_yaml_mapping(payload, source)


__all__ = ["load_yaml_mapping", "parse_front_matter"]
