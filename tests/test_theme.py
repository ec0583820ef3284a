from __future__ import annotations

import pytest

from artia_pages.config import load_site_config
from artia_pages.theme import ThemeClassNames


@pytest.mark.parametrize("theme", [None, "", "  "])
def test_blank_theme_falls_back_to_classic(theme: str | None) -> None:
    assert ThemeClassNames(theme).t("header") == "artia-header-theme-classic"


def test_element_classes_join_component_and_element() -> None:
    names = ThemeClassNames("dark")
    assert names.t("header", "logo") == "artia-header-logo-theme-dark"


def test_component_lists_produce_space_separated_classes() -> None:
    names = ThemeClassNames("dark")
    assert names.t(["card", "card-title"]) == (
        "artia-card-theme-dark artia-card-title-theme-dark"
    )


def test_tc_appends_extra_classes() -> None:
    names = ThemeClassNames("ink")
    assert names.tc("button", "is-primary wide") == (
        "artia-button-theme-ink is-primary wide"
    )
    assert names.tc("button") == "artia-button-theme-ink"


def test_from_config_uses_configured_theme() -> None:
    config = load_site_config(environ={"ARTIA_THEME": "sepia"})
    names = ThemeClassNames.from_config(config)
    assert names.t("footer") == "artia-footer-theme-sepia"
