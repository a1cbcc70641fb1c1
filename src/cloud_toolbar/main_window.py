"""Main application window implementation.

This module provides the main window class that implements:
- Periodic polling of the sync engine's control API on a worker thread
- The command palette (toolbar) with its keyboard shortcuts
- The effect surface toolbar actions use when a result is selected
  (dialogs, notifications, clipboard, opening windows and URLs)

Per-operation screens live outside this package; ``open_window`` emits
``window_requested`` for them.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from PySide6.QtCore import QTimer, QUrl, Signal, Slot
from PySide6.QtGui import QAction, QDesktopServices, QGuiApplication, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from .core.exceptions import ControlApiError
from .core.paths import APP_NAME
from .core.settings import Settings
from .core.single_instance import SHOW_MESSAGE, SingleInstanceGuard
from .core.workers import Worker, WorkerPool, WorkRequest
from .dialogs.command_palette import CommandPalette
from .rclone.client import ControlClient
from .toolbar.engine import ResolvedResult, resolve
from .toolbar.live import LiveResourceCache, MountInfo, ServeInfo
from .toolbar.types import PressContext

logger = logging.getLogger(__name__)


@dataclass
class PollResult:
    """Everything fetched by one poll. Sections that failed are None."""

    remotes: list[str] | None = None
    remote_types: dict[str, str] | None = None
    mounts: list[MountInfo] | None = None
    serves: list[ServeInfo] | None = None
    vfs: list[str] | None = None
    errors: list[str] = field(default_factory=list)


def poll_control_api(client: ControlClient) -> PollResult:
    """Fetch remotes and live resources, tolerating per-endpoint failures."""
    result = PollResult()
    sections: list[tuple[str, Callable[[], object]]] = [
        ("remotes", client.list_remotes),
        ("remote_types", client.remote_types),
        ("mounts", client.list_mounts),
        ("serves", client.list_serves),
        ("vfs", client.list_vfs),
    ]
    for name, fetch in sections:
        try:
            setattr(result, name, fetch())
        except ControlApiError as exc:
            logger.debug("Polling %s failed: %s", name, exc)
            result.errors.append(f"{exc.endpoint}: {exc}")
    return result


class MainWindow(QMainWindow):
    """Main application window hosting the toolbar and the control API poller."""

    window_requested = Signal(str, str)

    def __init__(
        self,
        settings: Settings,
        client: ControlClient | None = None,
        instance_guard: SingleInstanceGuard | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings
        self.client: ControlClient | None = client or ControlClient(
            settings.host_url, settings.auth_user, settings.auth_password
        )
        self.live_cache = LiveResourceCache()
        self.pool = WorkerPool()
        self.remotes: list[str] = []
        self.remote_types: dict[str, str] = {}
        self.instance_guard = instance_guard
        self.palette: CommandPalette | None = None
        self._poll_worker: Worker | None = None
        self.action_palette: QAction
        self.action_refresh: QAction
        self.action_quit: QAction
        self.action_about: QAction
        self.status_label: QLabel

        self.setWindowTitle(APP_NAME)

        self._build_actions()
        self._build_menus()
        self._build_central()

        self._poll_timer = QTimer(self)
        self._poll_timer.setInterval(max(1000, settings.poll_interval_ms))
        self._poll_timer.timeout.connect(self.refresh_state)

        if instance_guard is not None:
            instance_guard.set_message_handler(self._on_instance_message)

        self._setup_command_palette()

    def _build_actions(self) -> None:
        self.action_palette = QAction("Open Toolbar", self)
        self.action_palette.triggered.connect(self.show_command_palette)

        self.action_refresh = QAction("Refresh", self)
        self.action_refresh.setShortcut(QKeySequence.StandardKey.Refresh)
        self.action_refresh.triggered.connect(self.refresh_state)

        self.action_quit = QAction("Quit", self)
        self.action_quit.setShortcut(QKeySequence.StandardKey.Quit)
        self.action_quit.triggered.connect(self.on_quit)

        self.action_about = QAction("About", self)
        # On macOS this places the action in the application menu
        self.action_about.setMenuRole(QAction.MenuRole.AboutRole)
        self.action_about.triggered.connect(self.on_about)

    def _build_menus(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction(self.action_palette)
        file_menu.addAction(self.action_refresh)
        file_menu.addSeparator()
        file_menu.addAction(self.action_quit)

        help_menu = self.menuBar().addMenu("&Help")
        help_menu.addAction(self.action_about)

    def _build_central(self) -> None:
        central = QWidget(self)
        layout = QVBoxLayout(central)

        hint = QLabel("Press Ctrl+K to open the toolbar.", central)
        layout.addWidget(hint)

        self.status_label = QLabel("Not connected", central)
        layout.addWidget(self.status_label)

        open_button = QPushButton("Open Toolbar", central)
        open_button.clicked.connect(self.show_command_palette)
        layout.addWidget(open_button)
        layout.addStretch(1)

        self.setCentralWidget(central)

    # Control API polling

    def start_polling(self) -> None:
        self.refresh_state()
        self._poll_timer.start()

    def stop_polling(self) -> None:
        self._poll_timer.stop()
        self.pool.cancel_all()

    @Slot()
    def refresh_state(self) -> None:
        """Poll the control API in the background unless a poll is running."""
        if self.client is None or self._poll_worker is not None:
            return
        client = self.client

        def done(result: PollResult) -> None:
            self._poll_worker = None
            self.apply_poll_result(result)

        def error(message: str) -> None:
            self._poll_worker = None
            self.status_label.setText(f"Poll failed: {message}")

        def cancelled() -> None:
            self._poll_worker = None

        self._poll_worker = self.pool.submit(
            WorkRequest(
                fn=lambda _ctx: poll_control_api(client),
                on_done=done,
                on_error=error,
                on_cancel=cancelled,
            )
        )

    def apply_poll_result(self, result: PollResult) -> None:
        if result.remotes is not None:
            self.remotes = result.remotes
        if result.remote_types is not None:
            self.remote_types = result.remote_types
        self.live_cache.update(mounts=result.mounts, serves=result.serves, vfs=result.vfs)

        if result.remotes is None:
            self.status_label.setText(f"Not connected to {self.settings.host_url}")
        else:
            live = self.live_cache.snapshot()
            self.status_label.setText(
                f"{len(self.remotes)} remotes · {len(live.mounts)} mounts · "
                f"{len(live.serves)} serves · {len(live.vfs)} caches"
            )

        if self.palette is not None and self.palette.isVisible():
            self.palette.refresh()

    # Toolbar

    def _setup_command_palette(self) -> None:
        """Register the toolbar keyboard shortcuts."""
        shortcut = QShortcut(QKeySequence("Ctrl+K"), self)
        shortcut.activated.connect(self.show_command_palette)

        # Alternative shortcut (Ctrl+Shift+P like VS Code)
        shortcut_alt = QShortcut(QKeySequence("Ctrl+Shift+P"), self)
        shortcut_alt.activated.connect(self.show_command_palette)

    def resolve_query(self, query: str) -> list[ResolvedResult]:
        return resolve(
            query,
            self.remotes,
            self.remote_types,
            self.live_cache.snapshot(),
            host_is_local=self.settings.host_is_local,
        )

    def execute_result(self, result: ResolvedResult, update_text: Callable[[str], None]) -> None:
        """Run a selected result's action with this window as its services."""
        context = PressContext(
            open_window=self.open_window,
            update_text=update_text,
            services=self,
        )
        try:
            result.press(context)
        except Exception as exc:
            logger.exception("Failed to execute %s", result.action_id)
            QMessageBox.critical(self, "Toolbar", f"Could not run {result.label}.\n\n{exc}")

    @Slot()
    def show_command_palette(self) -> None:
        if self.palette is not None:
            self.palette.activateWindow()
            return

        palette = CommandPalette(
            self.resolve_query, self.execute_result, self.settings.debounce_ms, self
        )
        # Centered horizontally near the top of the window
        palette.move(
            self.geometry().center().x() - palette.width() // 2,
            self.geometry().top() + 50,
        )
        self.palette = palette
        try:
            palette.exec()
        finally:
            self.palette = None
            palette.deleteLater()

    def _on_instance_message(self, message: bytes) -> None:
        if message != SHOW_MESSAGE:
            logger.warning("Ignoring unknown instance message %r", message)
            return
        self.showNormal()
        self.raise_()
        self.activateWindow()
        QTimer.singleShot(0, self.show_command_palette)

    # Services used by toolbar actions

    def open_window(self, name: str, url: str) -> None:
        logger.info("Opening window %s at %s", name, url)
        if url.startswith(("http://", "https://")):
            self.open_url(url)
            return
        self.window_requested.emit(name, url)
        self.statusBar().showMessage(f"{name}: {url}", 3000)

    def notify(self, title: str, body: str) -> None:
        logger.info("%s: %s", title, body)
        self.statusBar().showMessage(f"{title}: {body}", 5000)

    def confirm(self, title: str, text: str) -> bool:
        reply = QMessageBox.question(
            self,
            title,
            text,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        return reply == QMessageBox.StandardButton.Yes

    def show_message(self, title: str, text: str, *, error: bool = False) -> None:
        if error:
            QMessageBox.critical(self, title, text)
        else:
            QMessageBox.information(self, title, text)

    def copy_to_clipboard(self, text: str) -> None:
        QGuiApplication.clipboard().setText(text)

    def reveal_path(self, path: str) -> None:
        if not Path(path).exists():
            raise FileNotFoundError(f"Mount point {path} does not exist")
        if not QDesktopServices.openUrl(QUrl.fromLocalFile(path)):
            raise OSError(f"Could not open {path} in the file manager")

    def open_url(self, url: str) -> None:
        QDesktopServices.openUrl(QUrl(url))

    def quit_app(self) -> None:
        self.on_quit()

    @Slot()
    def on_about(self) -> None:
        from .core.paths import app_version

        QMessageBox.about(
            self,
            f"About {APP_NAME}",
            f"{APP_NAME} {app_version()}\n\nCommand toolbar for the sync engine control API.",
        )

    @Slot()
    def on_quit(self) -> None:
        """Stop polling and close the window."""
        self.stop_polling()
        self.close()

    def closeEvent(self, event) -> None:  # type: ignore[override]
        """Stop background polling before closing."""
        self.stop_polling()
        if self.instance_guard is not None:
            self.instance_guard.close()
        super().closeEvent(event)
