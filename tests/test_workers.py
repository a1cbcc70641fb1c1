"""Background worker pool tests."""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import pytest

from cloud_toolbar.core.workers import WorkCancelled, WorkContext, WorkerPool, WorkRequest


def test_done_callback_receives_result(qtbot) -> None:
    pool = WorkerPool()
    done: list[int] = []

    pool.submit(WorkRequest(fn=lambda _ctx: 21 * 2, on_done=done.append))

    qtbot.waitUntil(lambda: done == [42])
    qtbot.waitUntil(lambda: pool.active_count == 0)


def test_errors_are_reported(qtbot) -> None:
    pool = WorkerPool()
    errors: list[str] = []

    def fail(_ctx: WorkContext) -> None:
        raise ValueError("bad input")

    pool.submit(WorkRequest(fn=fail, on_error=errors.append))

    qtbot.waitUntil(lambda: errors == ["bad input"])


def test_cancellation(qtbot) -> None:
    pool = WorkerPool()
    cancelled: list[bool] = []

    def work(ctx: WorkContext) -> None:
        ctx.cancel()
        ctx.check_cancelled()

    pool.submit(WorkRequest(fn=work, on_cancel=lambda: cancelled.append(True)))

    qtbot.waitUntil(lambda: cancelled == [True])


def test_check_cancelled_raises() -> None:
    context = WorkContext()
    context.check_cancelled()
    context.cancel()

    assert context.cancelled is True
    with pytest.raises(WorkCancelled):
        context.check_cancelled()
