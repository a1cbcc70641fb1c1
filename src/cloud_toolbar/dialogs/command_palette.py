"""Command palette dialog.

A frameless input with a ranked result list underneath. Typing re-resolves
the query after a short debounce; Up/Down move the highlight, Enter runs
the highlighted result, Escape closes, and the platform modifier plus a
digit or letter runs the result bound to that key.

Running a result closes the palette unless the action replaced the query
text, which is how drill-down actions (e.g. "Browse" without a remote)
keep the palette open for the next choice.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import logging
from collections.abc import Callable

from PySide6.QtCore import QEvent, QObject, Qt, QTimer
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QDialog,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
    QWidget,
)

from ..toolbar.engine import ResolvedResult
from ..toolbar.shortcuts import index_for_key, modifier_label, shortcut_key

logger = logging.getLogger(__name__)

Resolver = Callable[[str], list[ResolvedResult]]
Executor = Callable[[ResolvedResult, Callable[[str], None]], None]


class CommandPalette(QDialog):
    """Searchable list of toolbar results."""

    def __init__(
        self,
        resolver: Resolver,
        executor: Executor,
        debounce_ms: int = 40,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._resolver = resolver
        self._executor = executor
        self._text_replaced = False
        self.results: list[ResolvedResult] = []
        self.selected_result: ResolvedResult | None = None

        self.setWindowTitle("Toolbar")
        self.setWindowFlags(Qt.WindowType.Dialog | Qt.WindowType.FramelessWindowHint)
        self.setMinimumWidth(560)

        self.input = QLineEdit(self)
        self.input.setPlaceholderText("Type a command, a path or a remote…")
        self.input.setClearButtonEnabled(True)
        self.input.installEventFilter(self)

        self.list = QListWidget(self)
        self.list.setUniformItemSizes(True)
        self.list.itemActivated.connect(self._on_item_activated)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.addWidget(self.input)
        layout.addWidget(self.list)

        self._debounce = QTimer(self)
        self._debounce.setSingleShot(True)
        self._debounce.setInterval(max(0, debounce_ms))
        self._debounce.timeout.connect(self.refresh)
        self.input.textChanged.connect(lambda _text: self._debounce.start())

        self.refresh()

    def query(self) -> str:
        return self.input.text()

    def set_query(self, text: str) -> None:
        """Replace the query in place and re-resolve immediately."""
        self._text_replaced = True
        self.input.setText(text)
        self.input.setCursorPosition(len(text))
        self.refresh()

    def refresh(self) -> None:
        """Resolve the current query and rebuild the list."""
        self._debounce.stop()
        self.results = self._resolver(self.input.text())
        self._populate()

    def _populate(self) -> None:
        modifier = modifier_label()
        self.list.clear()
        for index, result in enumerate(self.results):
            text = result.label
            key = shortcut_key(index)
            if key:
                text = f"{text}\t{modifier}+{key}"
            item = QListWidgetItem(text)
            if result.description:
                item.setToolTip(result.description)
            item.setData(Qt.ItemDataRole.UserRole, index)
            self.list.addItem(item)
        if self.results:
            self.list.setCurrentRow(0)

    def current_index(self) -> int:
        return self.list.currentRow()

    def move_highlight(self, step: int) -> None:
        if not self.results:
            return
        row = self.list.currentRow() + step
        row = max(0, min(row, len(self.results) - 1))
        self.list.setCurrentRow(row)

    def execute_index(self, index: int) -> bool:
        """Run the result at ``index``; False when there is none."""
        if not 0 <= index < len(self.results):
            return False
        self.list.setCurrentRow(index)
        self.execute(self.results[index])
        return True

    def execute(self, result: ResolvedResult) -> None:
        self._text_replaced = False
        self.selected_result = result
        logger.debug("Executing %s with %r", result.action_id, result.args)
        self._executor(result, self.set_query)
        if not self._text_replaced:
            self.accept()

    def _on_item_activated(self, item: QListWidgetItem) -> None:
        self.execute_index(int(item.data(Qt.ItemDataRole.UserRole)))

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802
        if watched is self.input and event.type() == QEvent.Type.KeyPress:
            if self._handle_key(event):  # type: ignore[arg-type]
                return True
        return super().eventFilter(watched, event)

    def _handle_key(self, event: QKeyEvent) -> bool:
        key = event.key()
        modifiers = event.modifiers()

        if key == Qt.Key.Key_Down:
            self.move_highlight(1)
            return True
        if key == Qt.Key.Key_Up:
            self.move_highlight(-1)
            return True
        if key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            # Enter right after typing should act on fresh results
            if self._debounce.isActive():
                self.refresh()
            self.execute_index(max(self.current_index(), 0))
            return True
        if key == Qt.Key.Key_Escape:
            self.reject()
            return True

        # Qt maps the macOS Command key to ControlModifier
        blocked = Qt.KeyboardModifier.AltModifier | Qt.KeyboardModifier.ShiftModifier
        if modifiers & Qt.KeyboardModifier.ControlModifier and not modifiers & blocked:
            code = int(key.value) if hasattr(key, "value") else int(key)
            if ord("0") <= code <= ord("Z"):
                index = index_for_key(chr(code))
                if index is not None:
                    if self._debounce.isActive():
                        self.refresh()
                    return self.execute_index(index)
        return False
