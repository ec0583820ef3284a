"""Dataclasses describing loaded content records."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


@dc.dataclass(slots=True)
class ContentItem:
    """A page or folder in the content tree.

    Attributes
    ----------
    path : str
        Site path such as ``/novels/chapter-1``; unique among siblings.
    title : str | None
        Display title from front-matter or the folder's ``_dir.yml``.
    type : str | None
        Content type, typically ``page``, ``folder`` or ``book``.
    sort_anchor : tuple[float, ...] | None
        Explicit ordering vector; ``None`` when the record has none.
    children : list[ContentItem] | None
        Nested records for folders; ``None`` for leaves.
    id : str | None
        Optional stable identifier from front-matter.
    description : str | None
        Short summary from front-matter.
    password_hash : str | None
        SHA-256 hex digest gating the body, when the record is protected.
    body : str | None
        Preprocessed markdown body without front-matter.
    meta : dict[str, Any]
        Remaining front-matter keys.
    """

    path: str
    title: str | None = None
    type: str | None = None
    sort_anchor: tuple[float, ...] | None = None
    children: list[ContentItem] | None = None
    id: str | None = None
    description: str | None = None
    password_hash: str | None = None
    body: str | None = None
    meta: dict[str, typ.Any] = dc.field(default_factory=dict)

    @property
    def is_folder(self) -> bool:
        """Return True for records that group other records."""
        return self.type in {"folder", "book"}

    @property
    def is_protected(self) -> bool:
        """Return True when a password digest guards the body."""
        return bool(self.password_hash)


__all__ = ["ContentItem"]
