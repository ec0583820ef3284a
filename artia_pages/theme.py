"""Theme-scoped CSS class names.

Stylesheets for each theme target classes of the form
``artia-<component>-theme-<theme>``; templates ask :class:`ThemeClassNames`
for them instead of hard-coding the active theme.

Example
-------
>>> from artia_pages.theme import ThemeClassNames
>>> names = ThemeClassNames("dark")
>>> names.t("header", "logo")
'artia-header-logo-theme-dark'
>>> names.t(["card", "card-title"])
'artia-card-theme-dark artia-card-title-theme-dark'
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

from artia_pages._constants import DEFAULT_THEME, THEME_CLASS_TEMPLATE

if typ.TYPE_CHECKING:
    from artia_pages.config import SiteConfig


class ThemeClassNames:
    """Build class names for the active theme."""

    def __init__(self, theme: str | None = None) -> None:
        self.theme = (theme or "").strip() or DEFAULT_THEME

    @classmethod
    def from_config(cls, config: SiteConfig) -> ThemeClassNames:
        """Return class names for the theme configured in ``config``."""
        return cls(config.theme)

    def _name(self, component: str) -> str:
        return THEME_CLASS_TEMPLATE.format(name=component, theme=self.theme)

    def t(self, component: str | cabc.Sequence[str], element: str | None = None) -> str:
        """Return the class for a component, a component element, or a list."""
        if not isinstance(component, str):
            return " ".join(self._name(name) for name in component)
        if element:
            return self._name(f"{component}-{element}")
        return self._name(component)

    def tc(self, component: str, extra_classes: str | None = None) -> str:
        """Return the component class followed by ``extra_classes``."""
        theme_class = self._name(component)
        return f"{theme_class} {extra_classes}" if extra_classes else theme_class


__all__ = ["ThemeClassNames"]
