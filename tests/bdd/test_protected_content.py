"""Behaviour tests for unlocking password-protected chapters."""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_bdd import given, scenarios, then, when

from artia_pages.content import load_content_tree
from artia_pages.errors import InvalidPasswordError
from artia_pages.protected import (
    ProtectedContent,
    find_content,
    hash_password,
    resolve_content_path,
    unlock_content,
)

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "protected_content.feature"
)
scenarios(FEATURE_FILE)

PASSWORD = "moonlight"


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a content directory with a protected chapter")
def given_protected_chapter(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Load a tree whose only chapter is guarded by a password digest."""
    chapter = tmp_path / "content" / "diary" / "secret.md"
    chapter.parent.mkdir(parents=True)
    chapter.write_text(
        f"---\ntitle: Secret Entry\npasswordHash: {hash_password(PASSWORD)}\n---\n"
        "Only for friends",
        encoding="utf-8",
    )
    scenario_state["items"] = load_content_tree(tmp_path / "content")


def _open(scenario_state: dict[str, object], password: str | None) -> None:
    items = scenario_state["items"]
    assert isinstance(items, list), "content tree missing from scenario state"
    record = find_content(items, resolve_content_path(["diary", "secret"]))
    try:
        scenario_state["result"] = unlock_content(record, password)
    except InvalidPasswordError as exc:
        scenario_state["error"] = exc


def _result(scenario_state: dict[str, object]) -> ProtectedContent:
    result = scenario_state.get("result")
    assert isinstance(result, ProtectedContent), "gate result missing from scenario state"
    return result


@when("a reader opens the chapter without a password")
def when_open_without_password(scenario_state: dict[str, object]) -> None:
    """Request the chapter without credentials."""
    _open(scenario_state, None)


@when("the reader supplies the correct password")
def when_correct_password(scenario_state: dict[str, object]) -> None:
    """Request the chapter with the right password."""
    _open(scenario_state, PASSWORD)


@when("the reader supplies a wrong password")
def when_wrong_password(scenario_state: dict[str, object]) -> None:
    """Request the chapter with a guess."""
    _open(scenario_state, "sunlight")


@then("the chapter title is shown but the body is withheld")
def then_body_withheld(scenario_state: dict[str, object]) -> None:
    """Assert the redacted record keeps its title."""
    result = _result(scenario_state)
    assert result.password_required, "a password should be required"
    assert result.item.title == "Secret Entry"
    assert result.item.body is None


@then("the chapter body is returned")
def then_body_returned(scenario_state: dict[str, object]) -> None:
    """Assert the full body is available after authenticating."""
    result = _result(scenario_state)
    assert result.authenticated, "the reader should be authenticated"
    assert result.item.body == "Only for friends"


@then("the request is rejected as an invalid password")
def then_rejected(scenario_state: dict[str, object]) -> None:
    """Assert the wrong password raised the gate's error."""
    error = scenario_state.get("error")
    assert isinstance(error, InvalidPasswordError), "expected InvalidPasswordError"
    assert str(error) == "Invalid password"
    assert "result" not in scenario_state
