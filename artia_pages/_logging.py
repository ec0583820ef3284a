"""structlog configuration for the artia command and embedding applications."""

from __future__ import annotations

import logging
import os
import sys
import typing as typ

import structlog

DEFAULT_LEVEL = "INFO"


def _level_number(level: str) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value."""
    number = logging.getLevelName(level.strip().upper())
    return number if isinstance(number, int) else logging.INFO


def configure_logging(
    level: str | None = None,
    *,
    json: bool | None = None,
    environ: typ.Mapping[str, str] | None = None,
) -> None:
    """Configure structlog processors, level filtering, and rendering.

    Parameters
    ----------
    level : str, optional
        Minimum level name; falls back to ``ARTIA_LOG_LEVEL`` then ``INFO``.
    json : bool, optional
        Emit JSON lines instead of console output; falls back to
        ``ARTIA_LOG_JSON``.
    environ : Mapping[str, str], optional
        Environment consulted for the fallbacks; defaults to ``os.environ``.
    """
    env = os.environ if environ is None else environ
    resolved_level = level or env.get("ARTIA_LOG_LEVEL") or DEFAULT_LEVEL
    if json is None:
        json = env.get("ARTIA_LOG_JSON", "").strip().lower() == "true"
    renderer: structlog.typing.Processor = (
        structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            _level_number(resolved_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


__all__ = ["configure_logging"]
