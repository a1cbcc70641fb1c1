"""Main window tests: polling, resolution and the services surface."""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import pytest

from cloud_toolbar import main_window as main_window_module
from cloud_toolbar.core.single_instance import SHOW_MESSAGE
from cloud_toolbar.main_window import PollResult, poll_control_api
from cloud_toolbar.toolbar.live import MountInfo


def test_poll_collects_every_section(fake_client) -> None:
    fake_client.mounts = [MountInfo("gdrive:", "/mnt/g")]
    fake_client.fail.add("list_serves")

    result = poll_control_api(fake_client)

    assert result.remotes == ["gdrive", "s3"]
    assert result.remote_types == {"gdrive": "drive", "s3": "s3"}
    assert result.mounts == [MountInfo("gdrive:", "/mnt/g")]
    assert result.serves is None
    assert result.vfs == []
    assert result.errors == ["list_serves: list_serves failed"]


def test_window_title(main_window) -> None:
    assert main_window.windowTitle() == "Cloud Toolbar"


def test_refresh_state_updates_remotes(qtbot, main_window) -> None:
    main_window.refresh_state()

    qtbot.waitUntil(lambda: main_window.remotes == ["gdrive", "s3"])
    assert main_window.remote_types["gdrive"] == "drive"
    assert "2 remotes" in main_window.status_label.text()


def test_failed_poll_keeps_previous_state(main_window) -> None:
    main_window.apply_poll_result(PollResult(remotes=["gdrive"], vfs=["gdrive:"]))
    main_window.apply_poll_result(PollResult(errors=["config/listremotes: down"]))

    assert main_window.remotes == ["gdrive"]
    assert main_window.live_cache.snapshot().vfs == ("gdrive:",)
    assert main_window.status_label.text().startswith("Not connected")


def test_resolve_query_uses_polled_remotes(main_window) -> None:
    main_window.apply_poll_result(PollResult(remotes=["gdrive"], remote_types={"gdrive": "drive"}))

    results = main_window.resolve_query("browse gdrive")

    assert results[0].label == "Browse gdrive"


def test_execute_result_opens_window(qtbot, main_window) -> None:
    (result,) = [r for r in main_window.resolve_query("settings") if r.action_id == "settings"]

    with qtbot.waitSignal(main_window.window_requested) as blocker:
        main_window.execute_result(result, lambda _text: None)

    assert blocker.args == ["Settings", "/settings"]


def test_execute_result_reports_failures(main_window, monkeypatch) -> None:
    shown: list[str] = []
    monkeypatch.setattr(
        main_window_module.QMessageBox,
        "critical",
        lambda _parent, _title, text: shown.append(text),
    )

    class ExplodingResult:
        action_id = "boom"
        label = "Boom"

        def press(self, _context) -> None:  # type: ignore[no-untyped-def]
            raise RuntimeError("exploded")

    main_window.execute_result(ExplodingResult(), lambda _text: None)  # type: ignore[arg-type]

    assert shown == ["Could not run Boom.\n\nexploded"]


def test_instance_message_opens_palette(qtbot, main_window, monkeypatch) -> None:
    opened: list[bool] = []
    monkeypatch.setattr(main_window, "show_command_palette", lambda: opened.append(True))

    main_window._on_instance_message(b"unknown")
    main_window._on_instance_message(SHOW_MESSAGE)

    qtbot.waitUntil(lambda: opened == [True])


def test_clipboard_and_notify(qapp, main_window) -> None:
    main_window.copy_to_clipboard("/mnt/g")
    main_window.notify("Copied!", "Mount point copied to clipboard")

    assert qapp.clipboard().text() == "/mnt/g"
    assert main_window.statusBar().currentMessage() == "Copied!: Mount point copied to clipboard"


def test_reveal_missing_path_raises(main_window, tmp_path) -> None:
    with pytest.raises(FileNotFoundError, match="does not exist"):
        main_window.reveal_path(str(tmp_path / "gone"))
