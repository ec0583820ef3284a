"""Content, layout, and markdown utilities for the Artia publishing site.

This package holds the pieces of the site that are plain data
transformations: parsing the layout slot settings, ordering content records
for navigation, and preprocessing markdown so authors' line breaks survive
rendering. It also carries the small collaborators around them (content
loading, the password gate, contact-form handling) and the ``artia`` CLI.

Exports
-------
- ``app``: Cyclopts application behind the ``artia`` command.
- ``main``: Convenience function that configures logging and runs ``app``.

Examples
--------
>>> from artia_pages import main
>>> main()  # doctest: +SKIP
>>> from artia_pages import app
>>> app(["layout"])  # doctest: +SKIP
mode: content
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
