"""Command palette widget tests."""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import pytest
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QDialog

from cloud_toolbar.dialogs.command_palette import CommandPalette
from cloud_toolbar.toolbar.actions import ActionCatalog, ToolbarAction
from cloud_toolbar.toolbar.engine import resolve
from cloud_toolbar.toolbar.shortcuts import modifier_label
from cloud_toolbar.toolbar.types import ActionResult


class EchoAction(ToolbarAction):
    """Offers one result per word of the query, or three defaults."""

    id = "echo"
    label = "Echo"

    def get_results(self, context):  # type: ignore[no-untyped-def]
        words = context.query.split()
        return [
            ActionResult(label=word, args={"word": word}, score=100 - i)
            for i, word in enumerate(words)
        ]


class DefaultsAction(ToolbarAction):
    id = "defaults"
    label = "Defaults"

    def get_results(self, context):  # type: ignore[no-untyped-def]
        return []

    def get_default_result(self, context):  # type: ignore[no-untyped-def]
        return ActionResult(label="Default", score=1)


CATALOG = ActionCatalog([EchoAction(), DefaultsAction()])


class Harness:
    def __init__(self) -> None:
        self.queries: list[str] = []
        self.executed: list[str] = []
        self.replacement: str | None = None

    def resolver(self, query: str):  # type: ignore[no-untyped-def]
        self.queries.append(query)
        return resolve(query, [], catalog=CATALOG)

    def executor(self, result, update_text) -> None:  # type: ignore[no-untyped-def]
        self.executed.append(result.label)
        if self.replacement is not None:
            update_text(self.replacement)


@pytest.fixture
def harness() -> Harness:
    return Harness()


@pytest.fixture
def palette(qtbot, harness) -> CommandPalette:
    dialog = CommandPalette(harness.resolver, harness.executor, debounce_ms=0)
    qtbot.addWidget(dialog)
    return dialog


def test_initial_results_with_shortcut_hints(palette, harness) -> None:
    assert harness.queries == [""]
    assert palette.list.count() == 1
    assert palette.list.item(0).text() == f"Default\t{modifier_label()}+1"
    assert palette.current_index() == 0


def test_typing_re_resolves(qtbot, palette, harness) -> None:
    qtbot.keyClicks(palette.input, "alpha beta")

    qtbot.waitUntil(lambda: harness.queries[-1] == "alpha beta")
    assert [palette.list.item(i).text().split("\t")[0] for i in range(2)] == ["alpha", "beta"]


def test_arrow_keys_move_highlight(qtbot, palette) -> None:
    palette.set_query("a b c")

    qtbot.keyClick(palette.input, Qt.Key.Key_Down)
    qtbot.keyClick(palette.input, Qt.Key.Key_Down)
    qtbot.keyClick(palette.input, Qt.Key.Key_Down)
    assert palette.current_index() == 2

    qtbot.keyClick(palette.input, Qt.Key.Key_Up)
    assert palette.current_index() == 1


def test_enter_runs_highlighted_result(qtbot, palette, harness) -> None:
    palette.set_query("a b")
    qtbot.keyClick(palette.input, Qt.Key.Key_Down)
    qtbot.keyClick(palette.input, Qt.Key.Key_Return)

    assert harness.executed == ["b"]
    assert palette.result() == QDialog.DialogCode.Accepted
    assert palette.selected_result is not None
    assert palette.selected_result.args == {"word": "b"}


def test_modifier_digit_runs_bound_result(qtbot, palette, harness) -> None:
    palette.set_query("a b c")
    qtbot.keyClick(palette.input, Qt.Key.Key_3, Qt.KeyboardModifier.ControlModifier)

    assert harness.executed == ["c"]


def test_modifier_with_shift_is_ignored(qtbot, palette, harness) -> None:
    palette.set_query("a b c")
    modifiers = Qt.KeyboardModifier.ControlModifier | Qt.KeyboardModifier.ShiftModifier
    qtbot.keyClick(palette.input, Qt.Key.Key_2, modifiers)

    assert harness.executed == []


def test_unbound_shortcut_does_nothing(palette, harness) -> None:
    palette.set_query("a")
    assert palette.execute_index(5) is False
    assert harness.executed == []


def test_replacing_text_keeps_palette_open(palette, harness) -> None:
    harness.replacement = "Browse "
    palette.set_query("a")
    palette.execute_index(0)

    assert palette.query() == "Browse "
    assert palette.result() != QDialog.DialogCode.Accepted
    assert harness.queries[-1] == "Browse "


def test_escape_rejects(qtbot, palette) -> None:
    qtbot.keyClick(palette.input, Qt.Key.Key_Escape)
    assert palette.result() == QDialog.DialogCode.Rejected
