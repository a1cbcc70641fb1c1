"""Shared pytest fixtures for GUI and toolbar tests."""

# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QSettings

from cloud_toolbar.core.exceptions import ControlApiError
from cloud_toolbar.core.settings import Settings
from cloud_toolbar.main_window import MainWindow
from cloud_toolbar.toolbar.live import LiveResourceCache, MountInfo, ServeInfo


class FakeClient:
    """Control client double that records calls instead of doing HTTP."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple]] = []
        self.remotes = ["gdrive", "s3"]
        self.types = {"gdrive": "drive", "s3": "s3"}
        self.mounts: list[MountInfo] = []
        self.serves: list[ServeInfo] = []
        self.vfs: list[str] = []
        self.fail: set[str] = set()

    def _record(self, name: str, *args):  # type: ignore[no-untyped-def]
        self.calls.append((name, args))
        if name in self.fail:
            raise ControlApiError(name, f"{name} failed")

    def list_remotes(self) -> list[str]:
        self._record("list_remotes")
        return list(self.remotes)

    def remote_types(self) -> dict[str, str]:
        self._record("remote_types")
        return dict(self.types)

    def list_mounts(self) -> list[MountInfo]:
        self._record("list_mounts")
        return list(self.mounts)

    def list_serves(self) -> list[ServeInfo]:
        self._record("list_serves")
        return list(self.serves)

    def list_vfs(self) -> list[str]:
        self._record("list_vfs")
        return list(self.vfs)

    def unmount(self, mount_point: str) -> None:
        self._record("unmount", mount_point)

    def unmount_all(self) -> None:
        self._record("unmount_all")

    def stop_serve(self, serve_id: str) -> None:
        self._record("stop_serve", serve_id)

    def stop_all_serves(self) -> None:
        self._record("stop_all_serves")

    def forget_vfs(self, fs: str | None = None) -> None:
        self._record("forget_vfs", fs)

    def cleanup(self, remote: str) -> dict:
        self._record("cleanup", remote)
        return {"jobid": 1}


class FakeServices:
    """DesktopServices double recording every effect."""

    def __init__(self, settings: Settings, client: FakeClient | None = None) -> None:
        self.client = client
        self.live_cache = LiveResourceCache()
        self.settings = settings
        self.notifications: list[tuple[str, str]] = []
        self.messages: list[tuple[str, str, bool]] = []
        self.clipboard: list[str] = []
        self.revealed: list[str] = []
        self.opened_urls: list[str] = []
        self.confirm_answer = True
        self.confirmations: list[str] = []
        self.quit_called = False
        self.reveal_error: OSError | None = None

    def notify(self, title: str, body: str) -> None:
        self.notifications.append((title, body))

    def confirm(self, title: str, text: str) -> bool:
        self.confirmations.append(title)
        return self.confirm_answer

    def show_message(self, title: str, text: str, *, error: bool = False) -> None:
        self.messages.append((title, text, error))

    def copy_to_clipboard(self, text: str) -> None:
        self.clipboard.append(text)

    def reveal_path(self, path: str) -> None:
        if self.reveal_error is not None:
            raise self.reveal_error
        self.revealed.append(path)

    def open_url(self, url: str) -> None:
        self.opened_urls.append(url)

    def quit_app(self) -> None:
        self.quit_called = True


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Provide a Settings instance backed by a throwaway INI file."""
    store = QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)
    return Settings(store)


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def services(settings, fake_client) -> FakeServices:
    return FakeServices(settings, fake_client)


@pytest.fixture
def main_window(qtbot, settings, fake_client) -> MainWindow:
    """Provide a constructed MainWindow attached to qtbot."""
    window = MainWindow(settings=settings, client=fake_client)  # type: ignore[arg-type]
    qtbot.addWidget(window)
    return window
