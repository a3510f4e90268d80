from __future__ import annotations

from typing import List

import pytest

from wgdeck.adapters.textual import EditorUIHooks, TextualEditorAdapter, normalize_key
from wgdeck.editor import EditorMode, EditSession, KeyInput, Outcome, SessionView


def make_adapter(text: str = "", **hooks) -> TextualEditorAdapter:
    hooks.setdefault("update_view", lambda view: None)
    return TextualEditorAdapter(EditSession("wg0", text), EditorUIHooks(**hooks))


@pytest.mark.parametrize(
    ("key", "character", "expected"),
    [
        ("escape", None, KeyInput("ESC")),
        ("enter", "\r", KeyInput("ENTER")),
        ("backspace", None, KeyInput("BACKSPACE")),
        ("left", None, KeyInput("LEFT")),
        ("a", "a", KeyInput("a", text="a")),
        ("D", "D", KeyInput("D", text="D")),
        ("question_mark", "?", KeyInput("?", text="?")),
        ("space", " ", KeyInput(" ", text=" ")),
        ("ctrl+s", None, KeyInput("s", ("ctrl",))),
        ("ctrl+s", "\x13", KeyInput("s", ("ctrl",))),
        ("f1", None, None),
        ("tab", "\t", None),
    ],
)
def test_normalize_key(key: str, character: str | None, expected: KeyInput | None) -> None:
    assert normalize_key(key, character) == expected


def test_adapter_updates_view_and_status() -> None:
    views: List[SessionView] = []
    statuses: List[str] = []
    adapter = make_adapter(
        "ab", update_view=views.append, update_status=statuses.append
    )

    adapter.handle_textual_key("i", character="i")
    adapter.handle_textual_key("x", character="x")
    adapter.handle_textual_key("escape")

    assert views[0].lines == ("ab",)
    assert views[-1].lines == ("xab",)
    assert views[-1].mode is EditorMode.NAVIGATION
    assert "enter_insertion" in statuses
    assert "exit_insertion" in statuses


def test_adapter_returns_outcome_on_save() -> None:
    adapter = make_adapter("abc")

    assert adapter.handle_textual_key("ctrl+s") is Outcome.SAVED


def test_adapter_ignores_unknown_keys() -> None:
    views: List[SessionView] = []
    adapter = make_adapter(update_view=views.append)

    assert adapter.handle_textual_key("f5") is None
    assert len(views) == 1


def test_adapter_relays_bus_events() -> None:
    events: List[tuple[str, object | None]] = []
    adapter = make_adapter(
        handle_event=lambda name, payload: events.append((name, payload))
    )

    adapter.handle_textual_key("question_mark", character="?")
    adapter.handle_textual_key("j", character="j")
    adapter.handle_textual_key("o", character="o")

    names = [name for name, _ in events]
    assert names == ["overlay.toggle", "overlay.toggle", "buffer.edit", "mode.switch"]


def test_adapter_logs_state_transitions() -> None:
    lines: List[str] = []
    adapter = make_adapter(log=lines.append)

    adapter.handle_textual_key("i", character="i")

    assert any(line.startswith("key ->") for line in lines)
    assert any("mode='insertion'" in line for line in lines)
