r"""Preserve typed line breaks and spacing in markdown prose.

Markdown collapses runs of whitespace and joins consecutive lines into one
paragraph, which loses the layout authors of fiction and poetry type on
purpose. :func:`preprocess` rewrites a document before it reaches the
markdown renderer so that every line break and indent survives, while leaving
front-matter and fenced code blocks byte-for-byte intact.

Lines that carry markdown block syntax (headings, list items, quotes, tables,
rules, fences) are passed through untouched so the document structure still
parses; only plain text lines are rewritten.

Example
-------
>>> from artia_pages.preprocess import preprocess
>>> preprocess("a\nb")
'a<br>\nb'
>>> preprocess("  indented")
'&nbsp;&nbsp;indented'
"""

from __future__ import annotations

import re
import typing as typ
import uuid

from artia_pages._constants import EMSP, LINE_BREAK, MARKDOWN_SUFFIX, NBSP, TAB_WIDTH
from artia_pages.errors import InvalidInputError

if typ.TYPE_CHECKING:
    from pathlib import Path

FRONT_MATTER_PATTERN = re.compile(r"\A---\r?\n.*?\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)
FENCED_BLOCK_PATTERN = re.compile(r"```.*?(?:```|\Z)", re.DOTALL)
LEADING_SPACE_PATTERN = re.compile("^[ \u3000]+")
INTERIOR_SPACE_PATTERN = re.compile(r" {2,}")
MARKDOWN_SYNTAX_PATTERNS = (
    re.compile(r"^#{1,6}\s"),
    re.compile(r"^[*+-]\s"),
    re.compile(r"^\d+\.\s"),
    re.compile(r"^>"),
    re.compile(r"^\|"),
    re.compile(r"^(?:---|\*\*\*|___)"),
    re.compile(r"^```"),
)
_LEADING_ENTITIES = {" ": NBSP, "\u3000": EMSP}


def split_front_matter(document: str) -> tuple[str, str]:
    """Return ``(front_matter, body)``; the front-matter keeps its delimiters.

    An unterminated ``---`` block is not front-matter, so the whole document
    is returned as the body.
    """
    match = FRONT_MATTER_PATTERN.match(document)
    if match is None:
        return "", document
    return match.group(0), document[match.end() :]


class _CodeBlockVault:
    """Swap fenced blocks for placeholders and restore them later."""

    def __init__(self) -> None:
        self._token = uuid.uuid4().hex
        self._blocks: list[str] = []
        self._pattern = re.compile(rf"\x00{self._token}:(\d+)\x00")

    def protect(self, text: str) -> str:
        def _stash(match: re.Match[str]) -> str:
            self._blocks.append(match.group(0))
            return f"\x00{self._token}:{len(self._blocks) - 1}\x00"

        return FENCED_BLOCK_PATTERN.sub(_stash, text)

    def holds_placeholder(self, line: str) -> bool:
        return self._pattern.search(line) is not None

    def restore(self, text: str) -> str:
        return self._pattern.sub(lambda match: self._blocks[int(match.group(1))], text)


def is_markdown_syntax_line(line: str) -> bool:
    """Return True when ``line`` opens a markdown block construct."""
    stripped = line.strip()
    if not stripped:
        return False
    return any(pattern.match(stripped) for pattern in MARKDOWN_SYNTAX_PATTERNS)


def _rewrite_spacing(line: str) -> str:
    """Convert leading, tabbed, and repeated spaces into entities."""
    leading = LEADING_SPACE_PATTERN.match(line)
    prefix = ""
    if leading is not None:
        prefix = "".join(_LEADING_ENTITIES[char] for char in leading.group(0))
        line = line[leading.end() :]
    line = line.replace("\t", NBSP * TAB_WIDTH)
    line = INTERIOR_SPACE_PATTERN.sub(lambda match: NBSP * len(match.group(0)), line)
    return prefix + line


def _rewrite_body(body: str, vault: _CodeBlockVault) -> str:
    """Apply the line-break and spacing rules to text outside code blocks."""
    body = body.replace("\r\n", "\n")
    ends_with_newline = body.endswith("\n")
    lines = body.split("\n")
    if ends_with_newline:
        lines.pop()

    result: list[str] = []
    blank_run = 0
    last_index = len(lines) - 1
    for index, line in enumerate(lines):
        if not line.strip():
            blank_run += 1
            continue

        verbatim = is_markdown_syntax_line(line) or vault.holds_placeholder(line)
        if blank_run:
            if not verbatim:
                result.append(LINE_BREAK * blank_run)
            result.append("")
            blank_run = 0

        if verbatim:
            result.append(line)
            continue
        rewritten = _rewrite_spacing(line)
        if index < last_index or ends_with_newline:
            rewritten += LINE_BREAK
        result.append(rewritten)

    if blank_run > 1:
        result.append(LINE_BREAK * blank_run)

    rewritten_body = "\n".join(result)
    if ends_with_newline and result:
        rewritten_body += "\n"
    return rewritten_body


def preprocess(document: str) -> str:
    r"""Rewrite ``document`` so its typed layout survives markdown rendering.

    Parameters
    ----------
    document : str
        Raw markdown, optionally starting with a ``---`` front-matter block.

    Returns
    -------
    str
        The front-matter, unchanged, followed by the rewritten body. Fenced
        code blocks are restored exactly as written.

    Raises
    ------
    InvalidInputError
        If ``document`` is not a string.

    Examples
    --------
    >>> preprocess("---\ntitle: Hi\n---\nline")
    '---\ntitle: Hi\n---\nline'
    >>> preprocess("```\ncode  here\n```")
    '```\ncode  here\n```'
    """
    if not isinstance(document, str):
        msg = f"Markdown document must be a string, got {type(document).__name__}."
        raise InvalidInputError(msg)
    if not document:
        return ""

    front_matter, body = split_front_matter(document)
    vault = _CodeBlockVault()
    protected = vault.protect(body)
    return front_matter + vault.restore(_rewrite_body(protected, vault))


def preprocess_file(path: Path) -> str:
    """Read ``path`` and preprocess it when it is a markdown file."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() != MARKDOWN_SUFFIX:
        return text
    return preprocess(text)


__all__ = [
    "FENCED_BLOCK_PATTERN",
    "is_markdown_syntax_line",
    "preprocess",
    "preprocess_file",
    "split_front_matter",
]
