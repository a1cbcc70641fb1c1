"""Toolbar action catalog.

Each action decides on its own whether it is relevant to the current query
and proposes scored candidates; the engine only collects, deduplicates and
sorts them. The catalog is built once, in a fixed order that also breaks
score ties, and actions are looked up by their stable string id when the
user selects a result.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import base64
import functools
import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode

from ..core.exceptions import ControlApiError, UnknownActionError
from ..core.paths import PROJECT_URL
from ..rclone.constants import SUPPORTS_CLEANUP, SUPPORTS_PURGE
from .live import format_mount_label, format_serve_info, format_serve_label
from .matching import (
    LIVE_PRIMARY_SCORE,
    LIVE_STOP_ALL_SCORE,
    LIVE_STOP_SCORE,
    destination_label,
    find_first_url,
    find_serve_type,
    format_url_label,
    matches_keyword,
    normalize_path_for_args,
    path_pair_results,
    source_results,
    unique_remotes,
)
from .types import (
    ActionArgs,
    ActionContext,
    ActionPath,
    ActionResult,
    DefaultContext,
    DesktopServices,
    PressContext,
)

if TYPE_CHECKING:
    from ..rclone.client import ControlClient

logger = logging.getLogger(__name__)


def string_arg(args: ActionArgs, key: str) -> str | None:
    """Return ``args[key]`` when it is a non-empty string, else None."""
    value = args.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def build_command_url(route: str, args: ActionArgs) -> str:
    """Build ``route?key=value`` from the non-empty string arguments.

    Keys starting with an underscore are internal to the action and are
    never forwarded to a window.
    """
    params = {
        key: value
        for key, value in args.items()
        if not key.startswith("_") and isinstance(value, str) and value
    }
    return f"{route}?{urlencode(params)}" if params else route


class ToolbarAction:
    """Base class for toolbar actions.

    Subclasses set the class attributes and implement ``get_results`` and
    ``on_press``. Actions with a ``default_score`` contribute one result
    when the query is empty.
    """

    id: str = ""
    label: str = ""
    description: str | None = None
    keywords: tuple[str, ...] = ()
    default_score: float | None = None

    def result(
        self,
        score: float,
        args: ActionArgs | None = None,
        label: str | None = None,
        description: str | None = None,
    ) -> ActionResult:
        return ActionResult(
            label=label or self.label,
            description=description or self.description,
            args=dict(args or {}),
            score=score,
        )

    def default_args(self) -> ActionArgs:
        return {}

    def base_result(self) -> ActionResult:
        return self.result(self.default_score or 0, self.default_args())

    def is_relevant(self, query: str) -> bool:
        """True when the query is empty or its first word matches a keyword."""
        return not query or matches_keyword(query, self.keywords)

    def get_default_result(self, context: DefaultContext) -> ActionResult | None:
        if self.default_score is None:
            return None
        return self.base_result()

    def get_results(self, context: ActionContext) -> list[ActionResult]:
        raise NotImplementedError

    def on_press(self, args: ActionArgs, context: PressContext) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"


class WindowAction(ToolbarAction):
    """An action whose default effect opens its operation window."""

    route: str = ""
    window_label: str = ""

    def open_window(self, args: ActionArgs, context: PressContext) -> None:
        url = build_command_url(self.route, args)
        logger.debug("Opening %s window at %s", self.window_label, url)
        context.open_window(self.window_label, url)

    def on_press(self, args: ActionArgs, context: PressContext) -> None:
        self.open_window(args, context)


class KeywordAction(WindowAction):
    """A screen shortcut offered only when the query names it."""

    def get_results(self, context: ActionContext) -> list[ActionResult]:
        if context.query and matches_keyword(context.query, self.keywords):
            return [self.base_result()]
        return []


def _services(action: ToolbarAction, context: PressContext) -> DesktopServices | None:
    if context.services is None:
        logger.warning("Action %s needs application services, ignoring press", action.id)
    return context.services


def _client(services: DesktopServices, title: str) -> ControlClient | None:
    if services.client is None:
        services.show_message(title, "Not connected to the sync engine.", error=True)
    return services.client


# Transfers


class TransferAction(WindowAction):
    arrow = "→"

    def get_results(self, context: ActionContext) -> list[ActionResult]:
        if not self.is_relevant(context.query):
            return []
        if not context.paths:
            return [self.base_result()]
        return path_pair_results(self.label, self.description, context.paths, self.arrow)


class CopyAction(TransferAction):
    id = "copy"
    label = "Copy"
    description = "Copy files from a source to a destination without deleting destination files."
    keywords = ("copy", "cp", "transfer")
    default_score = 50
    route = "/copy"
    window_label = "Copy"


class MoveAction(TransferAction):
    id = "move"
    label = "Move"
    description = "Move files from a source to a destination and delete them from the source."
    keywords = ("move", "mv")
    default_score = 48
    route = "/move"
    window_label = "Move"


class SyncAction(TransferAction):
    id = "sync"
    label = "Sync"
    description = "Sync source to destination, updating existing files and removing stale ones."
    keywords = ("sync", "synchronise", "synchronize")
    default_score = 46
    route = "/sync"
    window_label = "Sync"
    arrow = "↔"


class BisyncAction(TransferAction):
    id = "bisync"
    label = "Bisync"
    description = "Bi-directional sync keeping source and destination in parity."
    keywords = ("bisync",)
    default_score = 44
    route = "/bisync"
    window_label = "Bisync"
    arrow = "↔"


# Live resources


class MountAction(WindowAction):
    id = "mount"
    label = "Mount"
    description = "Mount a remote to the local filesystem with VFS options."
    keywords = ("mount",)
    default_score = 42
    route = "/mount"
    window_label = "Mount"

    def get_results(self, context: ActionContext) -> list[ActionResult]:
        # Live entries are listed only when the query is empty or names this action
        if not self.is_relevant(context.query):
            return []

        results: list[ActionResult] = []
        mounts = context.live.mounts

        for mount in mounts:
            mount_label = format_mount_label(mount)
            if context.host_is_local:
                results.append(
                    self.result(
                        LIVE_PRIMARY_SCORE,
                        {"_action": "open", "_mountPoint": mount.mount_point},
                        label=f"Open {mount_label}",
                        description="Open mount point in file explorer",
                    )
                )
            else:
                results.append(
                    self.result(
                        LIVE_PRIMARY_SCORE,
                        {"_action": "copy_info", "_mountPoint": mount.mount_point},
                        label=f"Copy {mount_label}",
                        description="Press Enter to copy mount details to clipboard",
                    )
                )
            results.append(
                self.result(
                    LIVE_STOP_SCORE,
                    {"_action": "stop", "_mountPoint": mount.mount_point},
                    label=f"Stop {mount_label}",
                    description="Unmount this path",
                )
            )

        if len(mounts) >= 2:
            results.append(
                self.result(
                    LIVE_STOP_ALL_SCORE,
                    {"_action": "stop_all"},
                    label=f"Stop All Mounts ({len(mounts)} active)",
                    description="Unmount all active mounts",
                )
            )

        if context.paths:
            results.extend(source_results(self.label, self.description, context.paths))
        else:
            results.append(self.base_result())
        return results

    def on_press(self, args: ActionArgs, context: PressContext) -> None:
        action = string_arg(args, "_action")
        if action is None:
            self.open_window(args, context)
            return

        services = _services(self, context)
        if services is None:
            return
        mount_point = string_arg(args, "_mountPoint")

        if action == "open" and mount_point:
            try:
                services.reveal_path(mount_point)
            except OSError as exc:
                logger.error("Failed to open mount %s: %s", mount_point, exc)
                message = str(exc) or "Failed to open mount point"
                services.show_message("Open Mount", message, error=True)
            return

        if action == "copy_info" and mount_point:
            services.copy_to_clipboard(mount_point)
            services.notify("Copied!", "Mount point copied to clipboard")
            return

        if action == "stop" and mount_point:
            question = "Are you sure you want to unmount this path?"
            if not services.confirm("Confirm Unmount", question):
                return
            client = _client(services, "Stop Mount")
            if client is None:
                return
            try:
                client.unmount(mount_point)
            except ControlApiError as exc:
                logger.error("Failed to stop mount %s: %s", mount_point, exc)
                services.show_message("Stop Mount", str(exc), error=True)
                return
            services.live_cache.discard_mount(mount_point)
            services.notify("Mount Stopped", f"Mount point {mount_point} has been unmounted")
            return

        if action == "stop_all":
            question = "Are you sure you want to unmount ALL paths?"
            if not services.confirm("Confirm Stop All", question):
                return
            client = _client(services, "Stop All Mounts")
            if client is None:
                return
            try:
                client.unmount_all()
            except ControlApiError as exc:
                logger.error("Failed to stop all mounts: %s", exc)
                services.show_message("Stop All Mounts", str(exc), error=True)
                return
            services.live_cache.clear_mounts()
            services.notify("All Mounts Stopped", "All mount instances have been unmounted")
            return

        logger.warning("Ignoring mount press with args %r", args)


class ServeAction(WindowAction):
    id = "serve"
    label = "Serve"
    description = "Serve a remote over HTTP, WebDAV, SFTP, FTP and Restic."
    keywords = ("serve", "http", "webdav", "sftp", "ftp", "restic")
    default_score = 40
    route = "/serve"
    window_label = "Serve"

    def get_results(self, context: ActionContext) -> list[ActionResult]:
        # Live entries are listed only when the query is empty or names this action
        if not self.is_relevant(context.query):
            return []

        results: list[ActionResult] = []
        serves = context.live.serves

        for serve in serves:
            serve_label = format_serve_label(serve)
            results.append(
                self.result(
                    LIVE_PRIMARY_SCORE,
                    {"_action": "copy_info", "_serveId": serve.id},
                    label=f"📋 {serve_label}",
                    description="Press Enter to copy serve details to clipboard",
                )
            )
            results.append(
                self.result(
                    LIVE_STOP_SCORE,
                    {"_action": "stop", "_serveId": serve.id},
                    label=f"⏹ Stop {serve_label}",
                    description="Stop this serve instance",
                )
            )

        if len(serves) >= 2:
            results.append(
                self.result(
                    LIVE_STOP_ALL_SCORE,
                    {"_action": "stop_all"},
                    label=f"⏹ Stop All Serves ({len(serves)} active)",
                    description="Stop all running serve instances",
                )
            )

        if not context.paths:
            results.append(self.base_result())
            return results

        protocol = find_serve_type(context.query)
        verb = f"Serve {protocol}" if protocol else "Serve"
        extra = {"initialType": protocol} if protocol else None
        results.extend(source_results(verb, self.description, context.paths, extra_args=extra))
        return results

    def on_press(self, args: ActionArgs, context: PressContext) -> None:
        action = string_arg(args, "_action")
        if action is None:
            self.open_window(args, context)
            return

        services = _services(self, context)
        if services is None:
            return
        serve_id = string_arg(args, "_serveId")

        if action == "copy_info" and serve_id:
            serve = services.live_cache.find_serve(serve_id)
            if serve is None:
                services.show_message(
                    "Serve Info", "Serve instance not found. It may have been stopped.", error=True
                )
                return
            services.copy_to_clipboard(format_serve_info(serve))
            services.show_message("Serve Info", "Serve details copied to clipboard")
            return

        if action == "stop" and serve_id:
            client = _client(services, "Stop Serve")
            if client is None:
                return
            try:
                client.stop_serve(serve_id)
            except ControlApiError as exc:
                logger.error("Failed to stop serve %s: %s", serve_id, exc)
                services.show_message("Stop Serve", str(exc), error=True)
                return
            services.live_cache.discard_serve(serve_id)
            services.notify("Serve Stopped", f"Serve instance {serve_id} has been stopped")
            return

        if action == "stop_all":
            client = _client(services, "Stop All Serves")
            if client is None:
                return
            try:
                client.stop_all_serves()
            except ControlApiError as exc:
                logger.error("Failed to stop all serves: %s", exc)
                services.show_message("Stop All Serves", str(exc), error=True)
                return
            services.live_cache.clear_serves()
            services.notify("All Serves Stopped", "All serve instances have been stopped")
            return

        logger.warning("Ignoring serve press with args %r", args)


class DownloadAction(WindowAction):
    id = "download"
    label = "Download"
    description = "Download a URL directly into a remote or local path."
    keywords = ("download", "url", "copyurl", "copyto")
    default_score = 45
    route = "/download"
    window_label = "Download"

    def get_results(self, context: ActionContext) -> list[ActionResult]:
        url = find_first_url(context.query)
        if url is None and not self.is_relevant(context.query):
            return []
        url_label = format_url_label(url) if url else None

        if context.paths:
            results = []
            for path in context.paths:
                destination = destination_label(path)
                args: ActionArgs = {"initialDestination": normalize_path_for_args(path)}
                if url:
                    args["initialUrl"] = url
                    label = f"Download {url_label} to {destination}"
                    score = 190 if path.is_local else 200
                else:
                    label = f"Download to {destination}"
                    score = 150 if path.is_local else 160
                results.append(self.result(score, args, label=label))
            return results

        if url:
            return [self.result(170, {"initialUrl": url}, label=f"Download {url_label}")]
        return [self.base_result()]


# Path operations


class DeleteAction(WindowAction):
    id = "delete"
    label = "Delete"
    description = "Delete files or folders from a remote or local path."
    keywords = ("delete", "remove", "rm")
    default_score = 38
    route = "/delete"
    window_label = "Delete"

    def candidate_paths(self, context: ActionContext) -> Sequence[ActionPath]:
        return context.paths

    def get_results(self, context: ActionContext) -> list[ActionResult]:
        if not self.is_relevant(context.query):
            return []
        paths = self.candidate_paths(context)
        if not paths:
            return [self.base_result()]
        return source_results(self.label, self.description, paths, remote_score=150)


class PurgeAction(DeleteAction):
    id = "purge"
    label = "Purge"
    description = "Purge an entire path from a remote, deleting everything."
    keywords = ("purge", "empty")
    default_score = 36
    route = "/purge"
    window_label = "Purge"

    def candidate_paths(self, context: ActionContext) -> Sequence[ActionPath]:
        return [p for p in context.paths if p.remote_type in SUPPORTS_PURGE]


class CleanupAction(ToolbarAction):
    id = "cleanup"
    label = "Cleanup"
    description = "Cleanup a remote by removing trashed and partial files."
    keywords = ("cleanup", "clean")

    def get_results(self, context: ActionContext) -> list[ActionResult]:
        if not self.is_relevant(context.query):
            return []
        supported = [p for p in context.paths if p.remote_type in SUPPORTS_CLEANUP]
        remotes = unique_remotes(supported)
        if not remotes:
            return [self.result(36)]
        return [
            self.result(150, {"remote": remote}, label=f"Cleanup {remote}") for remote in remotes
        ]

    def on_press(self, args: ActionArgs, context: PressContext) -> None:
        services = _services(self, context)
        if services is None:
            return
        remote = string_arg(args, "remote")
        if remote is None:
            services.notify("Error", "Please enter a remote name to cleanup")
            return
        client = _client(services, "Cleanup")
        if client is None:
            return
        try:
            client.cleanup(remote)
        except ControlApiError as exc:
            logger.error("Failed to start cleanup for %s: %s", remote, exc)
            services.notify("Cleanup Failed", f"Could not start cleanup for {remote}")
            return
        services.notify("Cleanup Started", f"Cleanup started for {remote}")


class BrowseAction(ToolbarAction):
    id = "browse"
    label = "Browse"
    description = "Browse files and folders in a remote."
    keywords = ("browse", "explore", "open", "view", "files")
    default_score = 37

    def base_result(self) -> ActionResult:
        return self.result(37, description="Specify a remote to browse its files")

    def get_results(self, context: ActionContext) -> list[ActionResult]:
        if not self.is_relevant(context.query):
            return []

        named = unique_remotes(context.paths)
        if named:
            return [self.result(150, {"remote": r}, label=f"Browse {r}") for r in named]

        if not context.remotes:
            return [self.base_result()]
        results = [self.result(140, {"remote": r}, label=f"Browse {r}") for r in context.remotes]
        results.append(
            self.result(50, {"_action": "back"}, label="Back", description="Return to menu")
        )
        return results

    def on_press(self, args: ActionArgs, context: PressContext) -> None:
        if string_arg(args, "_action") == "back":
            context.update_text("")
            return

        remote = string_arg(args, "remote")
        if remote is None:
            # Drill down: keep the palette open and ask for a remote
            context.update_text("Browse ")
            return

        services = _services(self, context)
        if services is None:
            return
        settings = services.settings
        if not settings.host_url:
            services.notify("Error", "No host URL found")
            return
        url = browse_url(settings.host_url, remote, settings.auth_user, settings.auth_password)
        context.open_window("Browse", url)


def browse_url(
    host_url: str,
    remote: str,
    user: str | None = None,
    password: str | None = None,
) -> str:
    """URL of the bundled web browser page pointed at ``remote``."""
    target = f"{host_url.rstrip('/')}/[{remote}:]/"
    url = f"browse.html?url={quote(target, safe='')}"
    if user:
        token = base64.b64encode(f"{user}:{password or ''}".encode()).decode("ascii")
        url += f"&auth={quote(token, safe='')}"
    return url


class VfsAction(ToolbarAction):
    id = "vfs"
    label = "VFS"
    description = "Forget the local cache for one or all remotes."
    keywords = ("vfs", "cache", "forget")
    default_score = 35

    def base_result(self) -> ActionResult:
        return self.result(35, description="Specify a cache to forget")

    def get_results(self, context: ActionContext) -> list[ActionResult]:
        # Live entries are listed only when the query is empty or names this action
        if not self.is_relevant(context.query):
            return []

        caches = context.live.vfs
        if not caches:
            return [
                self.result(
                    35, {"_action": "back"}, label="Back", description="No active VFS caches"
                )
            ]

        results = [
            self.result(
                LIVE_PRIMARY_SCORE,
                {"_action": "forget", "_fs": fs},
                label=f"Forget {fs}",
                description="Clear the VFS directory cache",
            )
            for fs in caches
        ]
        if len(caches) >= 2:
            results.append(
                self.result(
                    LIVE_STOP_ALL_SCORE,
                    {"_action": "forget_all"},
                    label=f"Forget All VFS Caches ({len(caches)} active)",
                    description="Clear all VFS directory caches",
                )
            )
        return results

    def on_press(self, args: ActionArgs, context: PressContext) -> None:
        action = string_arg(args, "_action")
        if action is None:
            context.update_text("VFS ")
            return
        if action == "back":
            context.update_text("")
            return

        services = _services(self, context)
        if services is None:
            return
        client = _client(services, "VFS Forget")
        if client is None:
            return

        fs = string_arg(args, "_fs")
        if action == "forget" and fs:
            try:
                client.forget_vfs(fs)
            except ControlApiError as exc:
                logger.error("Failed to forget VFS cache %s: %s", fs, exc)
                services.show_message("VFS Forget", str(exc), error=True)
                return
            services.live_cache.discard_vfs(fs)
            services.notify("VFS Cache Cleared", f"Directory cache for {fs} has been cleared")
        elif action == "forget_all":
            try:
                client.forget_vfs()
            except ControlApiError as exc:
                logger.error("Failed to forget all VFS caches: %s", exc)
                services.show_message("VFS Forget All", str(exc), error=True)
                return
            services.live_cache.clear_vfs()
            services.notify("All VFS Caches Cleared", "All VFS directory caches have been cleared")
        else:
            logger.warning("Ignoring vfs press with args %r", args)


# Screens and settings


class SettingsAction(KeywordAction):
    id = "settings"
    label = "Settings"
    description = "Open the Settings screen."
    keywords = ("settings", "config", "preferences")
    default_score = 34
    route = "/settings"
    window_label = "Settings"


class GithubAction(KeywordAction):
    id = "github"
    label = "GitHub"
    description = "Open an issue or check out the GitHub repository."
    keywords = ("github", "issue", "bug", "feature")
    default_score = 32

    def on_press(self, args: ActionArgs, context: PressContext) -> None:
        services = _services(self, context)
        if services is not None:
            services.open_url(PROJECT_URL)


class TransfersAction(KeywordAction):
    id = "transfers"
    label = "Transfers"
    description = "Open the Transfers screen."
    keywords = ("transfer", "job", "task")
    default_score = 30
    route = "/transfers"
    window_label = "Transfers"


class SchedulesAction(KeywordAction):
    id = "schedules"
    label = "Schedules"
    description = "Open the Schedules screen."
    keywords = ("schedule", "cron", "task")
    route = "/schedules"
    window_label = "Schedules"

    def get_results(self, context: ActionContext) -> list[ActionResult]:
        if context.query and matches_keyword(context.query, self.keywords):
            return [self.result(28)]
        return []


class TemplatesAction(KeywordAction):
    id = "templates"
    label = "Templates"
    description = "Open the Templates screen."
    keywords = ("template", "example")
    default_score = 28
    route = "/templates"
    window_label = "Templates"


class RemoteCreateAction(KeywordAction):
    id = "remoteCreate"
    label = "New Remote"
    description = "Create a new remote."
    keywords = ("new", "remote", "create")
    default_score = 26
    route = "/settings"
    window_label = "Settings"

    def default_args(self) -> ActionArgs:
        return {"tab": "remotes", "action": "create"}


class RemoteSettingsAction(WindowAction):
    """One candidate per remote named in the query, opening its settings."""

    route = "/settings"
    window_label = "Settings"
    settings_action = ""
    label_format = "{remote}"

    def get_results(self, context: ActionContext) -> list[ActionResult]:
        if not self.is_relevant(context.query):
            return []
        return [
            self.result(
                140,
                {"tab": "remotes", "action": self.settings_action, "remote": remote},
                label=self.label_format.format(remote=remote),
            )
            for remote in unique_remotes(context.paths)
        ]


class RemoteEditAction(RemoteSettingsAction):
    id = "remoteEdit"
    label = "Edit Remote"
    description = "Edit a remote."
    keywords = ("edit", "remote", "update", "change")
    settings_action = "edit"
    label_format = "Edit {remote}"


class RemoteAutoMountAction(RemoteSettingsAction):
    id = "remoteAutoMount"
    label = "Auto Mount"
    description = "Configure auto mount options for a remote."
    keywords = ("mount", "remote", "update", "change")
    settings_action = "auto-mount"
    label_format = "Configure auto mount for {remote}"


class RemoteListAction(KeywordAction):
    id = "remoteList"
    label = "Show Remotes"
    description = "Show all configured remotes."
    keywords = ("remote", "list", "show")
    default_score = 31
    route = "/settings"
    window_label = "Settings"

    def default_args(self) -> ActionArgs:
        return {"tab": "remotes"}


class QuitAction(KeywordAction):
    id = "quit"
    label = "Quit"
    description = "Quit the application."
    keywords = ("quit", "exit", "close")
    default_score = 20

    def on_press(self, args: ActionArgs, context: PressContext) -> None:
        services = _services(self, context)
        if services is not None:
            services.quit_app()


# Catalog


class ActionCatalog:
    """Ordered, immutable collection of actions indexed by id."""

    def __init__(self, actions: Iterable[ToolbarAction]) -> None:
        self._actions = tuple(actions)
        self._by_id: dict[str, ToolbarAction] = {}
        for action in self._actions:
            if action.id in self._by_id:
                raise ValueError(f"Duplicate toolbar action id: {action.id}")
            self._by_id[action.id] = action

    def __iter__(self) -> Iterator[ToolbarAction]:
        return iter(self._actions)

    def __len__(self) -> int:
        return len(self._actions)

    def __contains__(self, action_id: object) -> bool:
        return action_id in self._by_id

    def get(self, action_id: str) -> ToolbarAction:
        try:
            return self._by_id[action_id]
        except KeyError:
            raise UnknownActionError(action_id) from None

    def ids(self) -> list[str]:
        return [action.id for action in self._actions]


ACTION_TYPES: tuple[type[ToolbarAction], ...] = (
    CopyAction,
    MoveAction,
    SyncAction,
    BisyncAction,
    MountAction,
    ServeAction,
    DownloadAction,
    CleanupAction,
    BrowseAction,
    DeleteAction,
    PurgeAction,
    SettingsAction,
    GithubAction,
    TransfersAction,
    SchedulesAction,
    TemplatesAction,
    RemoteCreateAction,
    RemoteEditAction,
    RemoteAutoMountAction,
    RemoteListAction,
    QuitAction,
    VfsAction,
)


@functools.lru_cache(maxsize=1)
def default_catalog() -> ActionCatalog:
    """The application's action catalog, built on first use."""
    return ActionCatalog(action_type() for action_type in ACTION_TYPES)


def get_action(action_id: str) -> ToolbarAction:
    return default_catalog().get(action_id)
