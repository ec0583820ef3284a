"""Render preprocessed markdown into HTML fragments.

The renderer mirrors the markdown pipeline the site hands documents to after
:func:`artia_pages.preprocess.preprocess` has run: python-markdown with fenced
code, Pygments highlighting, and tables. Raw HTML produced by the preprocessor
(``<br>`` markers and ``&nbsp;`` entities) passes straight through.
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from artia_pages.content.frontmatter import parse_front_matter
from artia_pages.preprocess import FENCED_BLOCK_PATTERN, preprocess, split_front_matter

CODE_LANGUAGE_PATTERN = re.compile(r"```([A-Za-z0-9_+#.-]+)?")
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')


@dc.dataclass(slots=True)
class RenderedDocument:
    """Front-matter metadata alongside the rendered HTML body.

    Attributes
    ----------
    meta : dict[str, Any]
        Parsed front-matter mapping; empty when the document has none.
    html : str
        HTML fragment for the document body.
    """

    meta: dict[str, typ.Any]
    html: str


class HtmlContentRenderer:
    """Render markdown and code snippets with consistent styling."""

    def __init__(self, pygments_style: str = "github-dark") -> None:
        """Initialize a renderer with the Pygments style used for code blocks."""
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render already-preprocessed markdown into HTML."""
        if not text.strip():
            return ""
        md = Markdown(
            extensions=["fenced_code", "codehilite", "tables", "sane_lists"],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        html = md.convert(text)
        return self._annotate_codehilite(html, text)

    def render_document(self, document: str) -> RenderedDocument:
        """Preprocess ``document``, parse its front-matter, and render the body.

        Raises
        ------
        ContentLoadError
            If the front-matter is not a YAML mapping.
        """
        front_matter, body = split_front_matter(preprocess(document))
        return RenderedDocument(
            meta=parse_front_matter(front_matter), html=self.markdown(body)
        )

    def _annotate_codehilite(self, html: str, source_markdown: str) -> str:
        """Attach language metadata to each highlighted block."""
        languages: list[str] = []
        for block in FENCED_BLOCK_PATTERN.finditer(source_markdown):
            label = CODE_LANGUAGE_PATTERN.match(block.group(0))
            languages.append((label.group(1) if label else None) or "text")
        if not languages:
            return html
        lang_iter = iter(languages)

        def _repl(match: re.Match[str]) -> str:
            lang = next(lang_iter, "text")
            return (
                f'<div class="codehilite" data-language="{escape(lang, quote=True)}">'
            )

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))


__all__ = ["HtmlContentRenderer", "RenderedDocument"]
