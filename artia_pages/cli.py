"""Cyclopts CLI entrypoint for inspecting and preparing Artia site content.

The ``artia`` console script wraps the package's building blocks so operators
can check what the site will do before deploying: preprocess or render a
markdown file, print the sorted navigation tree of a content directory, show
which components each layout slot resolves to, and generate or test password
digests for protected pages.

Examples
--------
Print the navigation outline for the configured content directory:

>>> from artia_pages.cli import app
>>> app(["nav", "--prioritize-folders"])  # doctest: +SKIP

Render a chapter into an HTML fragment:

>>> app(["render", "content/novels/ch-1.md"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_FILE
from ._logging import configure_logging
from .config import SiteConfig, load_site_config
from .content import ContentItem, load_content_tree, sort_content_items
from .layout import LayoutResolver
from .preprocess import preprocess_file
from .protected import find_content, hash_password, resolve_content_path, unlock_content
from .rendering import HtmlContentRenderer
from .theme import ThemeClassNames

DEFAULT_CONFIG = Path(DEFAULT_CONFIG_FILE)

app = App(name="artia", config=cyclopts.config.Env("ARTIA_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path | None, Parameter(help="Path to site config", env_var="ARTIA_CONFIG")
]


def _load_config(config: Path | None) -> SiteConfig:
    """Load ``config``, tolerating a missing default file."""
    if config is None:
        return load_site_config(DEFAULT_CONFIG if DEFAULT_CONFIG.exists() else None)
    return load_site_config(config)


def _emit(text: str, output: Path | None) -> None:
    """Write ``text`` to ``output`` or print it."""
    if output is None:
        print(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    print(f"wrote {output}")


def _outline(items: list[ContentItem], depth: int = 0) -> list[str]:
    """Return indented ``title (path)`` lines for a sorted record tree."""
    lines: list[str] = []
    for item in items:
        label = item.title or item.path.rsplit("/", 1)[-1]
        marker = " [locked]" if item.is_protected else ""
        lines.append(f"{'  ' * depth}{label} ({item.path}){marker}")
        if item.children:
            lines.extend(_outline(item.children, depth + 1))
    return lines


@app.command(help="Preprocess a markdown file so line breaks and spacing survive.")
def preprocess(
    path: typ.Annotated[Path, Parameter(help="Markdown file to preprocess")],
    *,
    output: typ.Annotated[
        Path | None, Parameter(help="Write the result here instead of stdout")
    ] = None,
) -> None:
    """Print or write the preprocessed form of ``path``."""
    _emit(preprocess_file(path), output)


@app.command(help="Render a markdown file into an HTML fragment.")
def render(
    path: typ.Annotated[Path, Parameter(help="Markdown file to render")],
    *,
    output: typ.Annotated[
        Path | None, Parameter(help="Write the HTML here instead of stdout")
    ] = None,
    pygments_style: typ.Annotated[
        str, Parameter(help="Pygments style for code blocks")
    ] = "github-dark",
    with_css: typ.Annotated[
        bool, Parameter(help="Prepend the code highlighting stylesheet")
    ] = False,
) -> None:
    """Preprocess and render ``path`` with the markdown pipeline."""
    renderer = HtmlContentRenderer(pygments_style)
    document = renderer.render_document(path.read_text(encoding="utf-8"))
    html = document.html
    if with_css:
        html = f"<style>\n{renderer.stylesheet}</style>\n{html}"
    _emit(html, output)


@app.command(help="Print the sorted navigation tree of the content directory.")
def nav(
    *,
    config: ConfigOption = None,
    content_dir: typ.Annotated[
        Path | None, Parameter(help="Override the content directory")
    ] = None,
    prioritize_folders: typ.Annotated[
        bool, Parameter(help="List folders and books before pages")
    ] = False,
    filter_pages: typ.Annotated[
        bool, Parameter(help="Keep only anchored records and pages")
    ] = False,
    flat: typ.Annotated[
        bool, Parameter(help="Sort only the top level")
    ] = False,
) -> None:
    """Load, sort, and print the content tree.

    Parameters
    ----------
    config : Path or None, optional
        Site configuration file; ``config/site.yaml`` is used when present.
    content_dir : Path or None, optional
        Content root overriding the configured one.
    prioritize_folders : bool, optional
        Order folders and books ahead of pages.
    filter_pages : bool, optional
        Drop records that are neither anchored nor pages.
    flat : bool, optional
        Leave nested children in filesystem order.
    """
    site_config = _load_config(config)
    items = load_content_tree(content_dir or site_config.content_dir)
    ordered = sort_content_items(
        items,
        prioritize_folders=prioritize_folders,
        recursive=not flat,
        filter_pages=filter_pages,
    )
    for line in _outline(ordered):
        print(line)


@app.command(help="Show which components each layout slot resolves to.")
def layout(*, config: ConfigOption = None) -> None:
    """Print the layout mode and every populated slot."""
    resolver = LayoutResolver(_load_config(config).layout)
    print(f"mode: {resolver.layout_mode}")
    for page, position in resolver.enabled_slots():
        renderer_ids = ", ".join(resolver.get_renderer_ids(page, position))
        print(f"{page}.{position}: {renderer_ids}")


@app.command(help="Print theme-scoped CSS classes for components.")
def theme(
    components: typ.Annotated[
        list[str], Parameter(help="Component names such as header or card")
    ],
    *,
    element: typ.Annotated[
        str | None, Parameter(help="Element within each component, such as logo")
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Print one class per component for the configured theme."""
    names = ThemeClassNames.from_config(_load_config(config))
    for component in components:
        print(names.t(component, element))


@app.command(name="hash-password", help="Print the passwordHash value for a protected page.")
def digest(
    password: typ.Annotated[str, Parameter(help="Password to digest")],
) -> None:
    """Print the SHA-256 digest to paste into ``passwordHash`` front-matter."""
    print(hash_password(password))


@app.command(help="Check the password gate for a content path.")
def unlock(
    path: typ.Annotated[str, Parameter(help="Site path such as /novels/ch-1")],
    *,
    password: typ.Annotated[
        str | None, Parameter(help="Password to try")
    ] = None,
    config: ConfigOption = None,
    content_dir: typ.Annotated[
        Path | None, Parameter(help="Override the content directory")
    ] = None,
) -> None:
    """Look up ``path`` and report whether the body is available."""
    site_config = _load_config(config)
    items = load_content_tree(content_dir or site_config.content_dir)
    slug = [segment for segment in path.split("/") if segment]
    result = unlock_content(find_content(items, resolve_content_path(slug)), password)
    if not result.protected:
        status = "public"
    elif result.password_required:
        status = "password required"
    else:
        status = "unlocked"
    print(f"{result.item.path}: {status}")
    if result.item.body is not None:
        print(result.item.body)


def main() -> None:
    """Configure logging and invoke the Cyclopts application.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    configure_logging()
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
