"""Password gate for protected content records.

A content record becomes protected by carrying a ``passwordHash`` front-matter
key holding the SHA-256 hex digest of its password. Readers who have not
supplied a password receive the record with its body redacted so titles and
descriptions stay visible (and indexable); a matching password returns the
full record, and a wrong one is rejected.

Example
-------
>>> from artia_pages.content import ContentItem
>>> from artia_pages.protected import hash_password, unlock_content
>>> item = ContentItem("/diary", body="text", password_hash=hash_password("secret"))
>>> unlock_content(item).item.body is None
True
>>> unlock_content(item, "secret").authenticated
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import hashlib
import hmac
from urllib.parse import unquote

import structlog

from artia_pages.content import ContentItem, iter_content
from artia_pages.errors import ContentNotFoundError, InvalidPasswordError

logger = structlog.get_logger(__name__)

INDEX_PATH = "/index"


@dc.dataclass(frozen=True, slots=True)
class ProtectedContent:
    """Gate result returned for a content lookup.

    Attributes
    ----------
    item : ContentItem
        The record; its ``body`` is ``None`` when a password is still required.
    protected : bool
        Whether the record carries a password digest.
    password_required : bool
        True when the body was withheld because no password was supplied.
    authenticated : bool
        True when the supplied password matched.
    """

    item: ContentItem
    protected: bool = False
    password_required: bool = False
    authenticated: bool = False


def hash_password(password: str) -> str:
    """Return the SHA-256 hex digest stored in ``passwordHash`` front-matter."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def verify_password(password: str, password_hash: str) -> bool:
    """Return True when ``password`` hashes to ``password_hash``.

    Stored digests are compared as UTF-8 bytes, so a malformed value that is
    not hex simply fails to match.
    """
    expected = password_hash.strip().lower().encode("utf-8")
    return hmac.compare_digest(hash_password(password).encode("utf-8"), expected)


def resolve_content_path(slug: str | cabc.Sequence[str] | None) -> str:
    """Turn a catch-all route slug into a site path.

    Parameters
    ----------
    slug : str, sequence of str, or None
        URL-encoded path segments as captured from the request route.

    Returns
    -------
    str
        ``/``-joined decoded segments, or ``/index`` when no slug was given.
    """
    if isinstance(slug, str):
        return "/" + unquote(slug) if slug else INDEX_PATH
    if slug:
        return "/" + "/".join(unquote(segment) for segment in slug)
    return INDEX_PATH


def find_content(items: cabc.Iterable[ContentItem], path: str) -> ContentItem:
    """Return the record at ``path``, falling back to an ``id`` match.

    A folder's ``index.md`` shares the folder's path; on such a collision the
    page wins so its body and password gate are reachable. The fallback
    compares each record's ``id`` with the last segment of ``path`` so links
    built from stable identifiers keep resolving after a file is renamed.

    Raises
    ------
    ContentNotFoundError
        If neither lookup finds a record.
    """
    records = list(iter_content(items))
    matches = [record for record in records if record.path == path]
    if matches:
        documents = [record for record in matches if record.children is None]
        return documents[0] if documents else matches[0]
    possible_id = path.rstrip("/").rsplit("/", 1)[-1]
    for record in records:
        if record.id and record.id == possible_id:
            return record
    msg = f"Content not found: {path}"
    raise ContentNotFoundError(msg)


def unlock_content(item: ContentItem, password: str | None = None) -> ProtectedContent:
    """Apply the password gate to ``item``.

    Parameters
    ----------
    item : ContentItem
        Record to serve.
    password : str, optional
        Password supplied by the reader.

    Returns
    -------
    ProtectedContent
        The record unchanged when unprotected, a body-redacted copy when no
        password was given, or the full record once the password matches.

    Raises
    ------
    InvalidPasswordError
        If ``password`` does not match the stored digest.
    """
    if not item.password_hash:
        return ProtectedContent(item=item)
    if not password:
        logger.info("content.password_required", path=item.path)
        return ProtectedContent(
            item=dc.replace(item, body=None), protected=True, password_required=True
        )
    if not verify_password(password, item.password_hash):
        logger.warning("content.password_rejected", path=item.path)
        msg = "Invalid password"
        raise InvalidPasswordError(msg)
    logger.info("content.unlocked", path=item.path)
    return ProtectedContent(item=item, protected=True, authenticated=True)


__all__ = [
    "ProtectedContent",
    "find_content",
    "hash_password",
    "resolve_content_path",
    "unlock_content",
    "verify_password",
]
