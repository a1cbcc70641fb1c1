"""Background work execution on Qt's thread pool.

Work functions run on a pool thread and receive a ``WorkContext`` for
cooperative cancellation. Their outcome is delivered back to the GUI
thread through Qt signals, so callbacks may touch widgets directly.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal

logger = logging.getLogger(__name__)


class WorkCancelled(Exception):
    """Raised inside a work function when cancellation was requested."""


class WorkContext:
    """Handle passed to work functions for cancellation checks."""

    def __init__(self) -> None:
        self._cancel_event = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def cancel(self) -> None:
        self._cancel_event.set()

    def check_cancelled(self) -> None:
        if self._cancel_event.is_set():
            raise WorkCancelled()


@dataclass
class WorkRequest:
    """A unit of background work and the GUI-thread callbacks for its outcome."""

    fn: Callable[[WorkContext], Any]
    on_done: Callable[[Any], None] | None = None
    on_error: Callable[[str], None] | None = None
    on_cancel: Callable[[], None] | None = None


class _WorkerSignals(QObject):
    done = Signal(object)
    error = Signal(str)
    cancelled = Signal()
    finished = Signal()


class Worker(QRunnable):
    def __init__(self, request: WorkRequest) -> None:
        super().__init__()
        self.setAutoDelete(False)
        self.request = request
        self.context = WorkContext()
        # Created on the submitting thread, so connected slots run there
        self.signals = _WorkerSignals()
        if request.on_done:
            self.signals.done.connect(request.on_done)
        if request.on_error:
            self.signals.error.connect(request.on_error)
        if request.on_cancel:
            self.signals.cancelled.connect(request.on_cancel)

    def cancel(self) -> None:
        self.context.cancel()

    def run(self) -> None:
        try:
            result = self.request.fn(self.context)
        except WorkCancelled:
            self.signals.cancelled.emit()
        except Exception as exc:
            logger.exception("Background work failed")
            self.signals.error.emit(str(exc))
        else:
            if self.context.cancelled:
                self.signals.cancelled.emit()
            else:
                self.signals.done.emit(result)
        finally:
            self.signals.finished.emit()


class WorkerPool:
    """Submits work requests and keeps workers alive until they finish."""

    def __init__(self, pool: QThreadPool | None = None) -> None:
        self._pool = pool or QThreadPool.globalInstance()
        self._active: set[Worker] = set()

    def submit(self, request: WorkRequest) -> Worker:
        worker = Worker(request)
        self._active.add(worker)
        worker.signals.finished.connect(lambda: self._active.discard(worker))
        self._pool.start(worker)
        return worker

    @property
    def active_count(self) -> int:
        return len(self._active)

    def cancel_all(self) -> None:
        for worker in list(self._active):
            worker.cancel()

    def wait(self, timeout_ms: int = -1) -> bool:
        return self._pool.waitForDone(timeout_ms)
