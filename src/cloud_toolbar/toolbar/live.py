"""Live resource snapshots (active mounts, serve instances and VFS caches).

The application polls the control API and stores the latest lists in a
``LiveResourceCache``. Actions never read the cache directly; the engine
receives an immutable ``LiveResources`` snapshot taken at call time.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import threading
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class MountInfo:
    fs: str
    mount_point: str
    mounted_on: str = ""


@dataclass(frozen=True)
class ServeInfo:
    id: str
    addr: str
    type: str | None = None
    fs: str | None = None
    password: str | None = None


@dataclass(frozen=True)
class LiveResources:
    mounts: tuple[MountInfo, ...] = ()
    serves: tuple[ServeInfo, ...] = ()
    vfs: tuple[str, ...] = field(default_factory=tuple)

    def find_serve(self, serve_id: str) -> ServeInfo | None:
        for serve in self.serves:
            if serve.id == serve_id:
                return serve
        return None


class LiveResourceCache:
    """Thread-safe holder for the most recently polled live resources."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current = LiveResources()

    def snapshot(self) -> LiveResources:
        with self._lock:
            return self._current

    def update(
        self,
        mounts: Iterable[MountInfo] | None = None,
        serves: Iterable[ServeInfo] | None = None,
        vfs: Iterable[str] | None = None,
    ) -> None:
        """Replace any of the three lists. Lists passed as None are kept."""
        with self._lock:
            current = self._current
            self._current = LiveResources(
                mounts=tuple(mounts) if mounts is not None else current.mounts,
                serves=tuple(serves) if serves is not None else current.serves,
                vfs=tuple(vfs) if vfs is not None else current.vfs,
            )

    def discard_mount(self, mount_point: str) -> None:
        mounts = [m for m in self.snapshot().mounts if m.mount_point != mount_point]
        self.update(mounts=mounts)

    def clear_mounts(self) -> None:
        self.update(mounts=())

    def discard_serve(self, serve_id: str) -> None:
        serves = [s for s in self.snapshot().serves if s.id != serve_id]
        self.update(serves=serves)

    def clear_serves(self) -> None:
        self.update(serves=())

    def discard_vfs(self, fs: str) -> None:
        self.update(vfs=[v for v in self.snapshot().vfs if v != fs])

    def clear_vfs(self) -> None:
        self.update(vfs=())

    def find_serve(self, serve_id: str) -> ServeInfo | None:
        return self.snapshot().find_serve(serve_id)


def format_mount_label(mount: MountInfo) -> str:
    return f"MOUNT · {mount.fs} · {mount.mount_point}"


def format_serve_label(serve: ServeInfo) -> str:
    kind = serve.type.upper() if serve.type else "SERVE"
    fs = serve.fs or "unknown"
    return f"{kind} · {fs} · {serve.addr}"


def format_serve_info(serve: ServeInfo) -> str:
    """Multi-line serve details suitable for the clipboard."""
    parts = [f"ID: {serve.id}", f"Address: {serve.addr}"]
    if serve.password:
        parts.append(f"Password: {serve.password}")
    if serve.type:
        parts.append(f"Type: {serve.type.upper()}")
    if serve.fs:
        parts.append(f"Source: {serve.fs}")
    return "\n".join(parts)
