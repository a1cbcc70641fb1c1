"""Live resource cache and formatting tests."""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

from cloud_toolbar.toolbar.live import (
    LiveResourceCache,
    MountInfo,
    ServeInfo,
    format_mount_label,
    format_serve_info,
    format_serve_label,
)

MOUNT = MountInfo("gdrive:", "/mnt/gdrive", "2024-01-01T00:00:00Z")
SERVE = ServeInfo("1", ":8080")


def test_update_keeps_unspecified_lists() -> None:
    cache = LiveResourceCache()
    cache.update(mounts=[MOUNT], vfs=["gdrive:"])
    cache.update(serves=[SERVE])

    snapshot = cache.snapshot()
    assert snapshot.mounts == (MOUNT,)
    assert snapshot.serves == (SERVE,)
    assert snapshot.vfs == ("gdrive:",)


def test_snapshots_are_immutable_views() -> None:
    cache = LiveResourceCache()
    cache.update(mounts=[MOUNT])
    before = cache.snapshot()

    cache.clear_mounts()

    assert before.mounts == (MOUNT,)
    assert cache.snapshot().mounts == ()


def test_discard_and_find() -> None:
    cache = LiveResourceCache()
    other = ServeInfo("2", ":9090", type="webdav")
    cache.update(serves=[SERVE, other], vfs=["a:", "b:"])

    cache.discard_serve("1")
    cache.discard_vfs("a:")

    assert cache.find_serve("1") is None
    assert cache.find_serve("2") == other
    assert cache.snapshot().vfs == ("b:",)

    cache.clear_serves()
    cache.clear_vfs()
    assert cache.snapshot().serves == ()
    assert cache.snapshot().vfs == ()


def test_labels() -> None:
    assert format_mount_label(MOUNT) == "MOUNT · gdrive: · /mnt/gdrive"
    assert format_serve_label(SERVE) == "SERVE · unknown · :8080"
    assert format_serve_label(ServeInfo("2", ":21", type="ftp", fs="s3:")) == "FTP · s3: · :21"


def test_serve_info_skips_missing_fields() -> None:
    assert format_serve_info(SERVE) == "ID: 1\nAddress: :8080"
