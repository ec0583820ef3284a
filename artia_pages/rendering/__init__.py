"""Markdown-to-HTML rendering for preprocessed content documents."""

from .renderer import HtmlContentRenderer, RenderedDocument

__all__ = ["HtmlContentRenderer", "RenderedDocument"]
