"""Typed dataclasses describing the site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from artia_pages.contact import ContactSettings
from artia_pages.errors import SiteConfigError
from artia_pages.layout import LayoutSettings


@dc.dataclass(slots=True)
class SiteConfig:
    """Site-wide settings merged from ``site.yaml`` and the environment."""

    site_name: str = "Artia"
    site_slogan: str = ""
    site_url: str = ""
    theme: str = "classic"
    default_locale: str = "zh-TW"
    copyright: str = ""
    content_dir: Path = Path("content")
    layout: LayoutSettings = dc.field(default_factory=LayoutSettings)
    contact: ContactSettings = dc.field(default_factory=ContactSettings)


__all__ = ["SiteConfig", "SiteConfigError"]
