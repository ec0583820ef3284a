"""Load a directory of markdown files into a :class:`ContentItem` tree.

Each ``*.md`` file becomes a page record whose site path mirrors its location
under the content root (``novels/ch-1.md`` → ``/novels/ch-1``). Every
sub-directory becomes a ``folder`` record holding its children; a ``_dir.yml``
file inside the directory can override the folder's title, type, and sort
anchor. Bodies are run through :func:`artia_pages.preprocess.preprocess`
before being stored, mirroring the content hook of the site.

Example
-------
>>> from pathlib import Path
>>> from artia_pages.content import load_content_tree
>>> tree = load_content_tree(Path("content"))  # doctest: +SKIP
>>> [item.path for item in tree]  # doctest: +SKIP
['/about', '/novels']
"""

from __future__ import annotations

import typing as typ

import structlog

from artia_pages._constants import DIR_META_FILE, MARKDOWN_SUFFIX
from artia_pages.errors import ContentLoadError
from artia_pages.preprocess import preprocess, split_front_matter

from .frontmatter import load_yaml_mapping, parse_front_matter
from .models import ContentItem

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = structlog.get_logger(__name__)

INDEX_STEM = "index"
_TYPED_KEYS = frozenset(
    {"title", "type", "sortAnchor", "description", "passwordHash", "id"}
)


def _parse_anchor(value: object, source: Path) -> tuple[float, ...] | None:
    """Normalize a ``sortAnchor`` value into a numeric tuple."""
    match value:
        case None:
            return None
        case bool():
            msg = f"sortAnchor in '{source}' must be numeric."
            raise ContentLoadError(msg)
        case int() | float():
            return (value,)
        case list() | tuple():
            anchor: list[float] = []
            for entry in value:
                if isinstance(entry, bool) or not isinstance(entry, int | float):
                    msg = f"sortAnchor in '{source}' must only contain numbers."
                    raise ContentLoadError(msg)
                anchor.append(entry)
            return tuple(anchor)
        case _:
            msg = f"sortAnchor in '{source}' must be a number or a list of numbers."
            raise ContentLoadError(msg)


def _optional_str(value: object | None) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _site_path(relative_parts: tuple[str, ...]) -> str:
    """Return the site path for a file or folder relative to the content root."""
    parts = list(relative_parts)
    if parts and parts[-1] == INDEX_STEM and len(parts) > 1:
        parts.pop()
    return "/" + "/".join(parts)


def load_content_file(path: Path, root: Path) -> ContentItem:
    """Build a page record from a single markdown file.

    Parameters
    ----------
    path : Path
        Markdown file to load.
    root : Path
        Content root used to derive the record's site path.

    Returns
    -------
    ContentItem
        Page record with front-matter fields mapped and the preprocessed body.

    Raises
    ------
    ContentLoadError
        If the front-matter is not a valid YAML mapping or ``sortAnchor`` is
        not numeric.
    """
    text = path.read_text(encoding="utf-8")
    front_matter, _body = split_front_matter(text)
    meta = parse_front_matter(front_matter, path)
    _front, body = split_front_matter(preprocess(text))
    relative = path.relative_to(root).with_suffix("")
    return ContentItem(
        path=_site_path(relative.parts),
        title=_optional_str(meta.get("title")),
        type=_optional_str(meta.get("type")) or "page",
        sort_anchor=_parse_anchor(meta.get("sortAnchor"), path),
        id=_optional_str(meta.get("id")),
        description=_optional_str(meta.get("description")),
        password_hash=_optional_str(meta.get("passwordHash")),
        body=body,
        meta={key: value for key, value in meta.items() if key not in _TYPED_KEYS},
    )


def _load_folder(directory: Path, root: Path) -> ContentItem:
    """Build a folder record, recursing into the directory's entries."""
    meta_path = directory / DIR_META_FILE
    meta: dict[str, typ.Any] = {}
    if meta_path.is_file():
        meta = load_yaml_mapping(meta_path.read_text(encoding="utf-8"), meta_path)
    return ContentItem(
        path=_site_path(directory.relative_to(root).parts),
        title=_optional_str(meta.get("title")),
        type=_optional_str(meta.get("type")) or "folder",
        sort_anchor=_parse_anchor(meta.get("sortAnchor"), meta_path),
        children=_load_directory(directory, root),
        meta={key: value for key, value in meta.items() if key not in _TYPED_KEYS},
    )


def _load_directory(directory: Path, root: Path) -> list[ContentItem]:
    items: list[ContentItem] = []
    for entry in sorted(directory.iterdir()):
        if entry.name.startswith("."):
            logger.debug("content.skipped", path=str(entry), reason="hidden")
            continue
        if entry.is_dir():
            items.append(_load_folder(entry, root))
        elif entry.suffix.lower() == MARKDOWN_SUFFIX:
            items.append(load_content_file(entry, root))
    return items


def load_content_tree(root: Path) -> list[ContentItem]:
    """Load every markdown file under ``root`` into an unsorted record tree.

    Parameters
    ----------
    root : Path
        Content directory to walk.

    Returns
    -------
    list[ContentItem]
        Top-level records in filesystem order. Pass the result to
        :func:`artia_pages.content.sort_content_items` for navigation order.

    Raises
    ------
    FileNotFoundError
        If ``root`` is not an existing directory.
    ContentLoadError
        If any file carries invalid metadata.
    """
    if not root.is_dir():
        msg = f"Content directory '{root}' not found."
        raise FileNotFoundError(msg)
    items = _load_directory(root, root)
    logger.info("content.loaded", root=str(root), top_level=len(items))
    return items


def iter_content(items: typ.Iterable[ContentItem]) -> typ.Iterator[ContentItem]:
    """Yield every record in ``items`` depth-first, parents before children."""
    for item in items:
        yield item
        if item.children:
            yield from iter_content(item.children)


__all__ = ["iter_content", "load_content_file", "load_content_tree"]
