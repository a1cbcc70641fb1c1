"""HTTP client for the sync engine's remote control (rc) API.

Every rc endpoint is a POST taking a JSON object and returning a JSON
object. Failures surface as ``ControlApiError`` carrying the endpoint and
the message the engine reported in its ``error`` field.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import logging
from typing import Any

import requests

from ..core.exceptions import ControlApiError
from ..toolbar.live import MountInfo, ServeInfo
from .constants import DEFAULT_HOST_URL

logger = logging.getLogger(__name__)


class ControlClient:
    """Thin wrapper over the rc endpoints the desktop shell needs."""

    def __init__(
        self,
        base_url: str = DEFAULT_HOST_URL,
        user: str | None = None,
        password: str | None = None,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        if user:
            self.session.auth = (user, password or "")

    def call(self, endpoint: str, **params: Any) -> dict[str, Any]:
        """POST ``params`` to ``endpoint`` and return the decoded reply.

        Raises:
            ControlApiError: On transport errors, non-2xx replies or
                replies that are not a JSON object
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        logger.debug("rc %s %s", endpoint, params)
        try:
            response = self.session.post(url, json=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ControlApiError(endpoint, f"Could not reach {url}: {exc}") from exc

        try:
            payload = response.json()
        except ValueError:
            payload = None

        if not response.ok:
            message = payload.get("error") if isinstance(payload, dict) else None
            raise ControlApiError(
                endpoint,
                message or f"{endpoint} failed with HTTP {response.status_code}",
                status=response.status_code,
            )
        if not isinstance(payload, dict):
            raise ControlApiError(endpoint, f"{endpoint} returned an invalid reply")
        return payload

    # Listing

    def list_remotes(self) -> list[str]:
        return list(self.call("config/listremotes").get("remotes") or [])

    def remote_types(self) -> dict[str, str]:
        dump = self.call("config/dump")
        return {
            name: config["type"]
            for name, config in dump.items()
            if isinstance(config, dict) and isinstance(config.get("type"), str)
        }

    def list_mounts(self) -> list[MountInfo]:
        reply = self.call("mount/listmounts")
        mount_points = reply.get("mountPoints")
        if not isinstance(mount_points, list):
            raise ControlApiError("mount/listmounts", "Failed to get mount points")
        return [
            MountInfo(
                fs=item.get("Fs", ""),
                mount_point=item.get("MountPoint", ""),
                mounted_on=item.get("MountedOn", ""),
            )
            for item in mount_points
        ]

    def list_serves(self) -> list[ServeInfo]:
        serves = []
        for item in self.call("serve/list").get("list") or []:
            params = item.get("params") or {}
            opt = params.get("opt") or {}
            serves.append(
                ServeInfo(
                    id=str(item.get("id", "")),
                    addr=item.get("addr", ""),
                    type=params.get("type"),
                    fs=params.get("fs"),
                    password=opt.get("pass") or opt.get("password"),
                )
            )
        return serves

    def list_vfs(self) -> list[str]:
        return list(self.call("vfs/list").get("vfses") or [])

    # Operations

    def unmount(self, mount_point: str) -> None:
        self.call("mount/unmount", mountPoint=mount_point)

    def unmount_all(self) -> None:
        self.call("mount/unmountall")

    def stop_serve(self, serve_id: str) -> None:
        self.call("serve/stop", id=serve_id)

    def stop_all_serves(self) -> None:
        self.call("serve/stopall")

    def forget_vfs(self, fs: str | None = None) -> None:
        if fs:
            self.call("vfs/forget", fs=fs)
        else:
            self.call("vfs/forget")

    def cleanup(self, remote: str) -> dict[str, Any]:
        """Start an async cleanup job; returns the reply holding ``jobid``."""
        fs = remote if remote.endswith(":") else f"{remote}:"
        return self.call("operations/cleanup", fs=fs, _async=True)
