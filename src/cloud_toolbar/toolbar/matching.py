"""Matching and scoring helpers shared by toolbar actions.

The engine imposes no matching algorithm of its own. These helpers hold the
conventions actions follow so that keyword matching and path scoring feel
the same across the whole catalog.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from urllib.parse import urlsplit

from ..rclone.constants import SERVE_TYPES
from .extractor import clean_token
from .types import ActionArgs, ActionPath, ActionResult

# Scores for path-driven candidates
PAIR_SCORE = 200
REMOTE_SOURCE_SCORE = 160
REMOTE_DESTINATION_SCORE = 155
LOCAL_PATH_SCORE = 140

# Scores for live-resource candidates
LIVE_PRIMARY_SCORE = 180
LIVE_STOP_SCORE = 175
LIVE_STOP_ALL_SCORE = 170

_SIMPLE_URL_RE = re.compile(r"^[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}([/:?]\S*)?$")


def first_word(query: str) -> str:
    words = query.split()
    return words[0].lower() if words else ""


def matches_keyword(query: str, keywords: Iterable[str]) -> bool:
    """Loose keyword test on the first word of ``query``.

    The word matches when it is a substring of a keyword or a keyword is a
    substring of it, case-insensitively. Short words therefore match many
    keywords ("c" matches "copy", "cleanup", "config", ...).
    """
    word = first_word(query)
    if not word:
        return False
    for keyword in keywords:
        lowered = keyword.lower()
        if word in lowered or lowered in word:
            return True
    return False


def normalize_path_for_args(path: ActionPath) -> str:
    """Return the form of ``path`` passed to operation windows.

    A bare remote name becomes ``name:/`` so it addresses the remote root.
    """
    if not path.is_local and ":" not in path.full:
        return f"{path.full}:/"
    return path.full


def destination_label(path: ActionPath) -> str:
    if not path.is_local and path.remote_name:
        return path.remote_name
    return path.readable


def path_pair_results(
    verb: str,
    description: str | None,
    paths: Sequence[ActionPath],
    arrow: str = "→",
) -> list[ActionResult]:
    """Build source/destination candidates for a transfer-style action.

    With exactly two paths a combined source to destination candidate is
    emitted at ``PAIR_SCORE``. Every path also gets its own candidate; the
    last of several paths is guessed as the destination, the others as
    sources.
    """
    results: list[ActionResult] = []

    if len(paths) == 2:
        source, destination = paths
        results.append(
            ActionResult(
                label=f"{verb} {source.readable} {arrow} {destination.readable}",
                description=description,
                args={
                    "initialSource": normalize_path_for_args(source),
                    "initialDestination": normalize_path_for_args(destination),
                },
                score=PAIR_SCORE,
            )
        )

    for index, path in enumerate(paths):
        is_destination = len(paths) > 1 and index == len(paths) - 1
        key = "initialDestination" if is_destination else "initialSource"
        if path.is_local:
            score = LOCAL_PATH_SCORE
        elif is_destination:
            score = REMOTE_DESTINATION_SCORE
        else:
            score = REMOTE_SOURCE_SCORE
        results.append(
            ActionResult(
                label=f"{verb} {path.readable}",
                description=description,
                args={key: normalize_path_for_args(path)},
                score=score,
            )
        )

    return results


def source_results(
    verb: str,
    description: str | None,
    paths: Iterable[ActionPath],
    remote_score: float = REMOTE_SOURCE_SCORE,
    extra_args: ActionArgs | None = None,
) -> list[ActionResult]:
    """One candidate per path, each used as the operation source."""
    results = []
    for path in paths:
        args: ActionArgs = {"initialSource": normalize_path_for_args(path)}
        if extra_args:
            args.update(extra_args)
        results.append(
            ActionResult(
                label=f"{verb} {path.readable}",
                description=description,
                args=args,
                score=LOCAL_PATH_SCORE if path.is_local else remote_score,
            )
        )
    return results


def unique_remotes(paths: Iterable[ActionPath]) -> list[str]:
    """Remote names referenced by ``paths``, in first-seen order."""
    seen: list[str] = []
    for path in paths:
        if path.is_local or not path.remote_name:
            continue
        if path.remote_name not in seen:
            seen.append(path.remote_name)
    return seen


def find_serve_type(query: str) -> str | None:
    lowered = query.lower()
    for kind in SERVE_TYPES:
        if kind in lowered:
            return kind
    return None


def find_first_url(query: str) -> str | None:
    """Return the first URL-looking token, adding ``https://`` to bare hosts."""
    for raw in query.split():
        token = clean_token(raw)
        if not token:
            continue
        if "://" in token:
            return token
        if _SIMPLE_URL_RE.match(token):
            return f"https://{token}"
    return None


def format_url_label(url: str) -> str:
    """Short label for a URL: its last path segment, else its host."""
    parts = urlsplit(url)
    segments = [segment for segment in parts.path.split("/") if segment]
    if segments:
        return segments[-1]
    if parts.hostname:
        return parts.hostname
    segments = [segment for segment in url.rstrip("/").split("/") if segment]
    return segments[-1] if segments else url
