"""Load and validate the site configuration for Artia pages.

This subpackage parses the project's ``site.yaml`` file, applies ``ARTIA_*``
environment overrides, and produces a :class:`SiteConfig` carrying the layout
slot settings, theme, content directory, and contact-form settings consumed by
the rest of the package. The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from artia_pages.config import load_site_config
>>> config = load_site_config(environ={"ARTIA_LAYOUT_HOME_LEFT": "author"})
>>> config.layout.home_left
'author'
>>> config.theme
'classic'
"""

from .loader import load_site_config
from .models import SiteConfig, SiteConfigError

__all__ = ["SiteConfig", "SiteConfigError", "load_site_config"]
