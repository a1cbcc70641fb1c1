"""Exception types and the global exception hook."""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import sys

from cloud_toolbar.core.exceptions import (
    ControlApiError,
    ToolbarError,
    UnknownActionError,
    install_exception_hook,
)


def test_exception_hierarchy() -> None:
    error = ControlApiError("serve/stop", "no such serve", status=500)

    assert isinstance(error, ToolbarError)
    assert (error.endpoint, error.status, str(error)) == ("serve/stop", 500, "no such serve")
    assert isinstance(UnknownActionError("x"), KeyError)


def test_hook_logs_and_shows_dialog(qapp, monkeypatch, caplog) -> None:
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    shown: list[tuple] = []

    class FakeDialog:
        def __init__(self, *args) -> None:  # type: ignore[no-untyped-def]
            self.args = args

        def exec(self) -> int:
            shown.append(self.args)
            return 0

    install_exception_hook(FakeDialog)
    try:
        raise RuntimeError("kaboom")
    except RuntimeError:
        sys.excepthook(*sys.exc_info())

    assert "Uncaught exception" in caplog.text
    ((exc_type, exc, _tb, _parent),) = shown
    assert exc_type is RuntimeError
    assert str(exc) == "kaboom"
