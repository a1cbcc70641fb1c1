"""Application identity and well-known locations."""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

from importlib import metadata
from pathlib import Path

from PySide6.QtCore import QStandardPaths

APP_NAME = "Cloud Toolbar"
ORG_NAME = "RichLewis007"
DIST_NAME = "cloud-toolbar"
PROJECT_URL = "https://github.com/RichLewis007/Tree-Cloud-Drive"


def app_version() -> str:
    """Installed package version, or a development marker."""
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0+dev"


def log_dir() -> Path:
    """Per-user directory for log files (not created here)."""
    location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
    base = Path(location) if location else Path.home() / f".{DIST_NAME}"
    return base / "logs"
