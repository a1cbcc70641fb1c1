"""Data types shared by the toolbar extractor, action catalog and engine.

Everything here lives only for the duration of one query evaluation,
except the action definitions themselves, which are built once at startup.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from .live import LiveResources

if TYPE_CHECKING:
    from ..core.settings import Settings
    from ..rclone.client import ControlClient
    from .live import LiveResourceCache

ActionArgs = dict[str, Any]


@dataclass(frozen=True)
class ActionPath:
    """A path-like token classified by the extractor.

    Attributes:
        full: Canonical local path or ``remote:path`` string used for execution
        readable: Shortened form used for display only
        is_local: True for local filesystem paths
        remote_name: Canonically-cased configured remote, if matched
        remote_type: Backend type of that remote, if known
    """

    full: str
    readable: str
    is_local: bool
    remote_name: str | None = None
    remote_type: str | None = None


@dataclass
class ActionResult:
    """An unranked candidate proposed by one action."""

    label: str
    description: str | None = None
    args: ActionArgs = field(default_factory=dict)
    score: float = 0


@dataclass(frozen=True)
class ActionContext:
    """Input given to every action's ``get_results``."""

    query: str
    full_query: str
    paths: tuple[ActionPath, ...] = ()
    remotes: tuple[str, ...] = ()
    live: LiveResources = field(default_factory=LiveResources)
    host_is_local: bool = True


@dataclass(frozen=True)
class DefaultContext:
    """Input given to ``get_default_result`` when the query is empty."""

    remotes: tuple[str, ...] = ()


class DesktopServices(Protocol):
    """Effects the surrounding application exposes to ``on_press`` bodies."""

    client: ControlClient | None
    live_cache: LiveResourceCache
    settings: Settings

    def notify(self, title: str, body: str) -> None: ...

    def confirm(self, title: str, text: str) -> bool: ...

    def show_message(self, title: str, text: str, *, error: bool = False) -> None: ...

    def copy_to_clipboard(self, text: str) -> None: ...

    def reveal_path(self, path: str) -> None: ...

    def open_url(self, url: str) -> None: ...

    def quit_app(self) -> None: ...


@dataclass
class PressContext:
    """Capabilities handed to an action when the user selects one of its results.

    Attributes:
        open_window: Callable(name, url) opening a named application window
        update_text: Callable(text) replacing the palette query in place
        services: Application effect surface, None when running headless
    """

    open_window: Callable[[str, str], None]
    update_text: Callable[[str], None]
    services: DesktopServices | None = None
