"""Persistent application settings.

Settings are stored with QSettings under the organization and application
names from ``core.paths``. Tests and tools can inject their own QSettings
instance (for example an INI file in a temporary directory).
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

from PySide6.QtCore import QSettings

from ..rclone.constants import DEFAULT_HOST_URL
from .paths import APP_NAME, ORG_NAME

LOCAL_HOST_ID = "local"


class Settings:
    """Typed accessors over the application's QSettings store."""

    def __init__(self, store: QSettings | None = None) -> None:
        self.store = store if store is not None else QSettings(ORG_NAME, APP_NAME)

    def _str(self, key: str, default: str = "") -> str:
        value = self.store.value(key, default)
        return str(value) if value is not None else default

    def _int(self, key: str, default: int) -> int:
        value = self.store.value(key, default)
        try:
            return int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return default

    # Control API host

    @property
    def host_url(self) -> str:
        return self._str("host/url", DEFAULT_HOST_URL)

    @host_url.setter
    def host_url(self, value: str) -> None:
        self.store.setValue("host/url", value)

    @property
    def host_id(self) -> str:
        return self._str("host/id", LOCAL_HOST_ID)

    @host_id.setter
    def host_id(self, value: str) -> None:
        self.store.setValue("host/id", value)

    @property
    def host_is_local(self) -> bool:
        return self.host_id == LOCAL_HOST_ID

    @property
    def auth_user(self) -> str | None:
        return self._str("host/auth_user") or None

    @auth_user.setter
    def auth_user(self, value: str | None) -> None:
        self.store.setValue("host/auth_user", value or "")

    @property
    def auth_password(self) -> str | None:
        return self._str("host/auth_password") or None

    @auth_password.setter
    def auth_password(self, value: str | None) -> None:
        self.store.setValue("host/auth_password", value or "")

    # Toolbar behaviour

    @property
    def debounce_ms(self) -> int:
        """Delay between the last keystroke and re-resolving the query."""
        return self._int("toolbar/debounce_ms", 40)

    @debounce_ms.setter
    def debounce_ms(self, value: int) -> None:
        self.store.setValue("toolbar/debounce_ms", int(value))

    @property
    def poll_interval_ms(self) -> int:
        """How often remotes and live resources are refreshed."""
        return self._int("toolbar/poll_interval_ms", 5000)

    @poll_interval_ms.setter
    def poll_interval_ms(self, value: int) -> None:
        self.store.setValue("toolbar/poll_interval_ms", int(value))

    @property
    def log_level(self) -> str:
        return self._str("logging/level", "INFO").upper()

    @log_level.setter
    def log_level(self, value: str) -> None:
        self.store.setValue("logging/level", value.upper())

    def sync(self) -> None:
        self.store.sync()
