"""Order content records for navigation menus and listings.

The comparator applied by :func:`sort_content_items` is, in order: folder
weight (when requested), explicit ``sort_anchor`` vectors, titles, and finally
paths. Because paths are unique among siblings the result is a deterministic
total order.

Example
-------
>>> from artia_pages.content import ContentItem, sort_content_items
>>> items = [ContentItem("/b", sort_anchor=(2,)), ContentItem("/a", sort_anchor=(1,))]
>>> [item.path for item in sort_content_items(items)]
['/a', '/b']
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import functools
import itertools
import locale

from artia_pages.errors import InvalidInputError

from .models import ContentItem

FOLDER_TYPES = frozenset({"folder", "book"})


@dc.dataclass(frozen=True, slots=True)
class SortOptions:
    """Flags controlling :func:`sort_content_items`.

    Attributes
    ----------
    prioritize_folders : bool
        Place ``folder`` and ``book`` records before everything else.
    recursive : bool
        Sort ``children`` lists with the same options.
    filter_pages : bool
        Keep only records with a ``sort_anchor`` or of type ``page``.
    """

    prioritize_folders: bool = False
    recursive: bool = False
    filter_pages: bool = False


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def compare_anchors(a: ContentItem, b: ContentItem) -> int:
    """Compare two records by their sort anchors.

    Missing anchors count as empty vectors and missing trailing elements as
    zero, so ``(1,)`` and ``(1, 0)`` compare equal.

    Returns
    -------
    int
        Negative when ``a`` sorts first, positive when ``b`` does, zero on a tie.
    """
    a_anchor = a.sort_anchor or ()
    b_anchor = b.sort_anchor or ()
    for a_val, b_val in itertools.zip_longest(a_anchor, b_anchor, fillvalue=0):
        if a_val != b_val:
            return _sign(a_val - b_val)
    return 0


def _type_weight(item: ContentItem) -> int:
    return 0 if item.type in FOLDER_TYPES else 1


def _collate(a: str, b: str) -> int:
    """Compare case-insensitively first, then by the raw text."""
    return _sign(locale.strcoll(a.casefold(), b.casefold())) or _sign(
        locale.strcoll(a, b)
    )


def _compare_titles(a: ContentItem, b: ContentItem) -> int:
    if a.title and b.title:
        return _collate(a.title, b.title)
    if a.title:
        return -1
    if b.title:
        return 1
    return 0


def _compare_paths(a: ContentItem, b: ContentItem) -> int:
    a_path = a.path or ""
    b_path = b.path or ""
    return (a_path > b_path) - (a_path < b_path)


def _comparator(options: SortOptions) -> cabc.Callable[[ContentItem, ContentItem], int]:
    def _compare(a: ContentItem, b: ContentItem) -> int:
        if options.prioritize_folders:
            weight = _type_weight(a) - _type_weight(b)
            if weight:
                return weight
        return compare_anchors(a, b) or _compare_titles(a, b) or _compare_paths(a, b)

    return _compare


def _keep(item: ContentItem) -> bool:
    return item.sort_anchor is not None or item.type == "page"


def sort_content_items(
    items: cabc.Sequence[ContentItem] | None,
    options: SortOptions | None = None,
    *,
    prioritize_folders: bool = False,
    recursive: bool = False,
    filter_pages: bool = False,
) -> list[ContentItem]:
    """Return ``items`` in navigation order without mutating them.

    Parameters
    ----------
    items : Sequence[ContentItem] or None
        Sibling records to order. ``None`` is treated as an empty sequence.
    options : SortOptions, optional
        Sorting flags. When omitted, the keyword flags build one.
    prioritize_folders, recursive, filter_pages : bool, optional
        Shorthand for the matching :class:`SortOptions` fields.

    Returns
    -------
    list[ContentItem]
        A new list. With ``recursive`` set, records that have children are
        replaced by copies holding sorted children; a copy whose children all
        get filtered out carries ``children=None``.

    Raises
    ------
    InvalidInputError
        If ``items`` is not a sequence of :class:`ContentItem`.
    """
    if options is None:
        options = SortOptions(
            prioritize_folders=prioritize_folders,
            recursive=recursive,
            filter_pages=filter_pages,
        )
    if items is None:
        return []
    if isinstance(items, str) or not isinstance(items, cabc.Sequence):
        msg = f"Expected a sequence of ContentItem, got {type(items).__name__}."
        raise InvalidInputError(msg)
    if not all(isinstance(item, ContentItem) for item in items):
        msg = "Every entry passed to sort_content_items must be a ContentItem."
        raise InvalidInputError(msg)

    candidates = [item for item in items if _keep(item)] if options.filter_pages else items
    ordered = sorted(candidates, key=functools.cmp_to_key(_comparator(options)))
    if not options.recursive:
        return ordered

    result: list[ContentItem] = []
    for item in ordered:
        if item.children is None:
            result.append(item)
            continue
        children = sort_content_items(item.children, options)
        result.append(dc.replace(item, children=children or None))
    return result


__all__ = ["SortOptions", "compare_anchors", "sort_content_items"]
