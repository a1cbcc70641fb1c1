"""Application exception types and global exception handling.

This module defines the exceptions raised inside the toolbar and the
control API client, and installs a custom exception hook that:
- Logs every uncaught exception with its traceback
- Displays an error dialog with the full trace in the details pane

The exception hook is installed early in application startup so nothing
escapes the Qt event loop silently.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import contextlib
import logging
import sys
import traceback

from PySide6.QtWidgets import QApplication, QMessageBox, QWidget

logger = logging.getLogger(__name__)


class ToolbarError(Exception):
    """Base class for errors raised by the toolbar."""


class UnknownActionError(ToolbarError, KeyError):
    """Raised when an action id is not registered in the catalog."""

    def __init__(self, action_id: str) -> None:
        super().__init__(action_id)
        self.action_id = action_id

    def __str__(self) -> str:
        return f"Unknown toolbar action: {self.action_id}"


class ControlApiError(ToolbarError):
    """Raised when a control API call fails.

    Attributes:
        endpoint: The rc endpoint that was called, e.g. ``mount/unmount``
        status: HTTP status code, None for transport failures
    """

    def __init__(self, endpoint: str, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.status = status


def _default_error_dialog(exc_type, exc, tb, parent: QWidget | None) -> QMessageBox:
    dialog = QMessageBox(parent)
    dialog.setIcon(QMessageBox.Icon.Critical)
    dialog.setWindowTitle("Unexpected error")
    dialog.setText(f"{exc_type.__name__}: {exc}")
    # The details pane has its own copy support
    dialog.setDetailedText("".join(traceback.format_exception(exc_type, exc, tb)))
    return dialog


def install_exception_hook(
    error_dialog_factory=None,
) -> None:
    """Log uncaught exceptions and present a user-friendly dialog.

    Args:
        error_dialog_factory: Optional callable(exc_type, exc, tb, parent)
            that creates and returns an error dialog. If None, a
            QMessageBox with the traceback in its details is used.
    """

    def excepthook(exc_type, exc, tb):  # type: ignore[no-untyped-def]
        logger.critical("Uncaught exception", exc_info=(exc_type, exc, tb))

        with contextlib.suppress(Exception):
            app = QApplication.instance()
            if not app:
                return

            parent: QWidget | None = None
            if isinstance(app, QApplication):
                for widget in app.topLevelWidgets():
                    if widget.isVisible() and hasattr(widget, "windowTitle"):
                        parent = widget
                        break

            factory = error_dialog_factory or _default_error_dialog
            dialog = factory(exc_type, exc, tb, parent)
            dialog.exec()

    sys.excepthook = excepthook
