"""Tests for the ``artia`` command-line interface."""

from __future__ import annotations

from pathlib import Path

import pytest

from artia_pages import cli
from artia_pages.errors import InvalidPasswordError
from artia_pages.protected import hash_password


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a content tree and run from a directory without a default config."""
    root = tmp_path / "content"
    _write(root / "index.md", "---\ntitle: Home\n---\nWelcome")
    _write(root / "about.md", "---\ntitle: About\nsortAnchor: 2\n---\nHi")
    _write(root / "novels" / "_dir.yml", "title: Novels\ntype: book\nsortAnchor: 1\n")
    _write(
        root / "novels" / "ch-1.md",
        f"---\ntitle: Chapter 1\npasswordHash: {hash_password('secret')}\n---\nOnce\nupon",
    )
    monkeypatch.chdir(tmp_path)
    for name in ("ARTIA_CONTENT_DIR", "ARTIA_CONFIG", "ARTIA_THEME"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


def test_nav_prints_sorted_outline(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli.nav(content_dir=workspace / "content")
    lines = capsys.readouterr().out.splitlines()
    assert lines[-4:] == [
        "Home (/index)",
        "Novels (/novels)",
        "  Chapter 1 (/novels/ch-1) [locked]",
        "About (/about)",
    ], f"unexpected outline {lines!r}"


def test_nav_prioritizes_folders(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli.nav(content_dir=workspace / "content", prioritize_folders=True)
    lines = capsys.readouterr().out.splitlines()
    assert lines[-4] == "Novels (/novels)"


def test_layout_lists_enabled_slots(
    workspace: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = _write(
        workspace / "site.yaml",
        "layout:\n  read:\n    left: navigation\n    right: \"toc,history\"\n",
    )
    cli.layout(config=config)
    lines = capsys.readouterr().out.splitlines()
    assert lines[-3:] == [
        "mode: content",
        "read.left: LayoutSidebarNav",
        "read.right: LayoutTableOfContents, LayoutHistoryTimeline",
    ]


def test_hash_password_command_is_registered(capsys: pytest.CaptureFixture[str]) -> None:
    command, bound, _ = cli.app.parse_args(["hash-password", "secret"])
    command(*bound.args, **bound.kwargs)
    assert capsys.readouterr().out.strip() == hash_password("secret")


def test_preprocess_writes_output_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path / "poem.md", "one\ntwo")
    target = tmp_path / "out" / "poem.md"
    cli.preprocess(source, output=target)
    assert target.read_text(encoding="utf-8") == "one<br>\ntwo"
    assert capsys.readouterr().out.strip() == f"wrote {target}"


def test_render_can_embed_stylesheet(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = _write(tmp_path / "page.md", "one\ntwo")
    cli.render(source, with_css=True)
    out = capsys.readouterr().out
    assert out.startswith("<style>\n")
    assert "<p>one<br>\ntwo</p>" in out


def test_unlock_reports_gate_state(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    content_dir = workspace / "content"
    cli.unlock("/novels/ch-1", content_dir=content_dir)
    assert capsys.readouterr().out.splitlines()[-1] == "/novels/ch-1: password required"

    cli.unlock("novels/ch-1", password="secret", content_dir=content_dir)
    assert capsys.readouterr().out.splitlines()[-3:] == [
        "/novels/ch-1: unlocked",
        "Once<br>",
        "upon",
    ]

    cli.unlock("/about", content_dir=content_dir)
    assert capsys.readouterr().out.splitlines()[-2:] == ["/about: public", "Hi"]


def test_unlock_rejects_wrong_password(workspace: Path) -> None:
    with pytest.raises(InvalidPasswordError):
        cli.unlock("/novels/ch-1", password="nope", content_dir=workspace / "content")


def test_theme_prints_configured_classes(
    workspace: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = _write(workspace / "site.yaml", "site:\n  theme: dark\n")
    cli.theme(["header", "card"], element="title", config=config)
    assert capsys.readouterr().out.splitlines() == [
        "artia-header-title-theme-dark",
        "artia-card-title-theme-dark",
    ]
