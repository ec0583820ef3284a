"""Common literal values used across artia_pages.

These constants keep environment variable names, file names, and markup
tokens centralized so the loader, the CLI, and tests can import the same
values without drifting. Intended for internal use within the package.

Examples
--------
>>> from artia_pages import _constants
>>> _constants.LAYOUT_ENV_TEMPLATE.format(page="HOME", position="LEFT")
'ARTIA_LAYOUT_HOME_LEFT'
>>> _constants.THEME_CLASS_TEMPLATE.format(name="header", theme="dark")
'artia-header-theme-dark'
"""

ENV_PREFIX = "ARTIA_"
LAYOUT_ENV_TEMPLATE = "ARTIA_LAYOUT_{page}_{position}"
DEFAULT_CONFIG_FILE = "config/site.yaml"
DIR_META_FILE = "_dir.yml"
MARKDOWN_SUFFIX = ".md"

DEFAULT_THEME = "classic"
THEME_CLASS_TEMPLATE = "artia-{name}-theme-{theme}"

LINE_BREAK = "<br>"
NBSP = "&nbsp;"
EMSP = "&emsp;"
TAB_WIDTH = 4
