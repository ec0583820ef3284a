"""Exception types shared across the artia_pages package.

Each error subclasses the builtin exception a caller would reasonably expect
(``TypeError`` for bad arguments, ``LookupError`` for missing content, and so
on) so generic ``except`` clauses keep working, while ``ArtiaError`` lets the
CLI report any domain failure uniformly.
"""

from __future__ import annotations


class ArtiaError(Exception):
    """Base class for errors raised by artia_pages."""


class InvalidInputError(ArtiaError, TypeError):
    """Raised when a core helper receives input of the wrong shape."""


class SiteConfigError(ArtiaError, ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class ContentLoadError(ArtiaError, ValueError):
    """Raised when a content file cannot be parsed."""


class ContentNotFoundError(ArtiaError, LookupError):
    """Raised when no content record matches the requested path."""


class InvalidPasswordError(ArtiaError, PermissionError):
    """Raised when a protected record is unlocked with the wrong password."""


class MailDeliveryError(ArtiaError, RuntimeError):
    """Raised by mail senders when a message cannot be handed off."""


__all__ = [
    "ArtiaError",
    "ContentLoadError",
    "ContentNotFoundError",
    "InvalidInputError",
    "InvalidPasswordError",
    "MailDeliveryError",
    "SiteConfigError",
]
