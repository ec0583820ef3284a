"""Load site configuration YAML and environment overrides into dataclasses."""

from __future__ import annotations

import dataclasses as dc
import os
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from artia_pages.contact import ContactSettings
from artia_pages.errors import SiteConfigError
from artia_pages.layout import LayoutSettings

from .helpers import (
    _env_value,
    _layout_env_overrides,
    _layout_fields,
    _optional_str,
    _parse_bool,
    _section,
)
from .models import SiteConfig


def _read_yaml(path: Path) -> dict[str, typ.Any]:
    """Return the top-level mapping stored in ``path``."""
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    return dict(loaded)


def load_site_config(
    path: Path | None = None, environ: typ.Mapping[str, str] | None = None
) -> SiteConfig:
    """Load the site configuration, letting ``ARTIA_*`` variables win.

    Parameters
    ----------
    path : Path, optional
        YAML file such as ``config/site.yaml``. When omitted, only defaults and
        the environment apply.
    environ : Mapping[str, str], optional
        Environment to read overrides from; defaults to ``os.environ``.

    Returns
    -------
    SiteConfig
        Site, layout, and contact settings ready for the resolvers.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    SiteConfigError
        If the YAML document or one of its sections is not a mapping.

    Examples
    --------
    >>> from pathlib import Path
    >>> from artia_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.layout.read_left  # doctest: +SKIP
    'navigation:root=/novels'
    """
    env = os.environ if environ is None else environ
    raw: dict[str, typ.Any] = {}
    if path is not None:
        if not path.exists():
            msg = f"Configuration file '{path}' not found."
            raise FileNotFoundError(msg)
        raw = _read_yaml(path)

    site = _section(raw, "site")
    content = _section(raw, "content")
    defaults = SiteConfig()

    site_name = (
        _env_value(env, "SITE_NAME")
        or _optional_str(site.get("name"))
        or defaults.site_name
    )
    content_dir = _env_value(env, "CONTENT_DIR") or content.get("dir")
    return SiteConfig(
        site_name=site_name,
        site_slogan=_optional_str(site.get("slogan")) or "",
        site_url=_optional_str(site.get("url")) or "",
        theme=_env_value(env, "THEME")
        or _optional_str(site.get("theme"))
        or defaults.theme,
        default_locale=_optional_str(site.get("default_locale")) or defaults.default_locale,
        copyright=_optional_str(site.get("copyright")) or "",
        content_dir=Path(content_dir) if content_dir else defaults.content_dir,
        layout=_build_layout_settings(_section(raw, "layout"), env),
        contact=_build_contact_settings(_section(raw, "contact"), env, site_name),
    )


def _build_layout_settings(
    layout: typ.Mapping[str, typ.Any], environ: typ.Mapping[str, str]
) -> LayoutSettings:
    """Merge YAML slot settings with ``ARTIA_LAYOUT_*`` overrides."""
    fields = _layout_fields(layout)
    fields.update(_layout_env_overrides(environ))
    return dc.replace(LayoutSettings(), **fields)


def _build_contact_settings(
    contact: typ.Mapping[str, typ.Any],
    environ: typ.Mapping[str, str],
    site_name: str,
) -> ContactSettings:
    """Build contact settings from YAML and ``ARTIA_CONTACT_*``/``ARTIA_MAIL_*``."""
    base = ContactSettings()
    enabled_raw = _env_value(environ, "CONTACT_ENABLED")
    enabled = (
        _parse_bool(enabled_raw)
        if enabled_raw is not None
        else _parse_bool(contact.get("enabled"), default=base.enabled)
    )
    return ContactSettings(
        enabled=enabled,
        from_name=_env_value(environ, "MAIL_FROM_NAME")
        or _optional_str(contact.get("from_name"))
        or base.from_name,
        from_email=_env_value(environ, "MAIL_FROM_EMAIL")
        or _optional_str(contact.get("from_email"))
        or base.from_email,
        subject_prefix=_env_value(environ, "MAIL_SUBJECT_PREFIX")
        or _optional_str(contact.get("subject_prefix"))
        or base.subject_prefix,
        recipient=_env_value(environ, "MAIL_TO")
        or _optional_str(contact.get("to"))
        or base.recipient,
        site_name=site_name,
    )


__all__ = ["load_site_config"]
