"""Path and token extraction for the toolbar query.

Splits free text into tokens, classifies each one as a local path, a
``remote:path`` reference or plain keyword text, and returns the
classified paths together with the query text that remains once the
path tokens are cut out.

Tokenization rules, applied left to right:
- A token starting with a quote character runs to the matching quote
  (or to the end of input when the quote is never closed)
- A configured remote whose name contains a space is consumed as one
  token when it is followed by whitespace, a colon or end of input
- Anything else is a run of non-whitespace characters
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .types import ActionPath

QUOTE_CHARS = "\"'`"
LOCAL_PREFIXES = ("/", "~/", "./", "../")

_TOKEN_TRIM_RE = re.compile(r"^[\"'`]+|[\"'`.,;!?]+$")
_WINDOWS_DRIVE_RE = re.compile(r"^[a-zA-Z]:[\\/]")
_NON_WHITESPACE_RE = re.compile(r"\S+")
_SEPARATORS_RE = re.compile(r"[/\\]+")


@dataclass(frozen=True)
class Token:
    """A raw token and the span of input it was read from."""

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class Extraction:
    query: str
    paths: tuple[ActionPath, ...] = ()


def tokenize(text: str, remotes: Iterable[str] = ()) -> list[Token]:
    """Split ``text`` into quote-aware tokens.

    Args:
        text: Input text, positions in the returned tokens refer to it
        remotes: Configured remote names; names containing spaces are
            recognized as single tokens without quoting

    Returns:
        Tokens in input order
    """
    spaced = sorted((r for r in remotes if " " in r), key=len, reverse=True)
    tokens: list[Token] = []
    pos = 0
    length = len(text)

    while pos < length:
        char = text[pos]
        if char.isspace():
            pos += 1
            continue

        if char in QUOTE_CHARS:
            close = text.find(char, pos + 1)
            if close == -1:
                tokens.append(Token(text[pos + 1 :], pos, length))
                break
            tokens.append(Token(text[pos + 1 : close], pos, close + 1))
            pos = close + 1
            continue

        end = _match_spaced_remote(text, pos, spaced)
        if end is None:
            match = _NON_WHITESPACE_RE.match(text, pos)
            end = match.end() if match else length
        tokens.append(Token(text[pos:end], pos, end))
        pos = end

    return tokens


def _match_spaced_remote(text: str, pos: int, spaced: list[str]) -> int | None:
    for remote in spaced:
        candidate_end = pos + len(remote)
        if text[pos:candidate_end].lower() != remote.lower():
            continue
        if candidate_end == len(text) or text[candidate_end].isspace():
            return candidate_end
        if text[candidate_end] == ":":
            # "My Drive:/docs" stays one token so the sub-path is kept
            match = _NON_WHITESPACE_RE.match(text, candidate_end)
            return match.end() if match else len(text)
    return None


def clean_token(token: str) -> str:
    """Strip leading quotes and trailing quotes or sentence punctuation."""
    return _TOKEN_TRIM_RE.sub("", token)


def split_remote_path(token: str) -> tuple[str, str] | None:
    """Split a ``name:rest`` token, or return None if it has no remote shape.

    URLs (``scheme://``) and Windows drive paths (``C:\\`` or ``C:/``) are
    not remote paths.
    """
    if "://" in token:
        return None
    name, colon, rest = token.partition(":")
    if not colon or not name:
        return None
    if is_drive_letter(name) and rest[:1] in ("/", "\\"):
        return None
    return name, rest


def is_drive_letter(name: str) -> bool:
    return len(name) == 1 and name.isascii() and name.isalpha()


def is_local_path(token: str) -> bool:
    return token.startswith(LOCAL_PREFIXES) or bool(_WINDOWS_DRIVE_RE.match(token))


def collapse_segments(segments: list[str], separator: str) -> str:
    """Keep the first segment and the last two, eliding everything between."""
    if len(segments) <= 2:
        return separator.join(segments)
    return separator.join([segments[0], "...", segments[-2], segments[-1]])


def remote_readable(full: str) -> str:
    """Render ``remote:path`` as ``remote:/first/.../parent/last``."""
    name, _, rest = full.partition(":")
    segments = [segment for segment in rest.split("/") if segment]
    return f"{name}:/{collapse_segments(segments, '/')}"


def local_readable(full: str, separator: str = os.sep) -> str:
    """Render a local path with the same collapsing rule as remote paths.

    Drive-letter paths keep ``C:`` plus the separator typed after it as the
    leading element. Absolute paths keep a leading separator; relative
    paths are rendered without one.
    """
    if _WINDOWS_DRIVE_RE.match(full):
        drive_sep = full[2]
        segments = [s for s in _SEPARATORS_RE.split(full[3:]) if s]
        return f"{full[:2]}{drive_sep}{collapse_segments(segments, drive_sep)}"

    segments = [s for s in _SEPARATORS_RE.split(full) if s]
    body = collapse_segments(segments, separator)
    if full.startswith(("/", "\\")):
        return f"{separator}{body}"
    return body or full


def extract_paths(
    text: str,
    remotes: Iterable[str],
    remote_types: Mapping[str, str] | None = None,
    separator: str = os.sep,
) -> Extraction:
    """Extract classified paths and the residual keyword query from ``text``.

    Args:
        text: Raw toolbar input
        remotes: Configured remote names
        remote_types: Optional remote name to backend type map
        separator: Separator used when rendering local readable paths

    Returns:
        The residual query and the paths in first-seen order, deduplicated
        case-insensitively on their full form
    """
    trimmed = text.strip()
    remote_list = list(remotes)
    types = remote_types or {}
    by_lower = {remote.lower(): remote for remote in remote_list}

    seen: set[str] = set()
    paths: list[ActionPath] = []
    spans: list[tuple[int, int]] = []

    for token in tokenize(trimmed, remote_list):
        cleaned = clean_token(token.text)
        if not cleaned:
            continue
        path = _classify(cleaned, by_lower, types, separator)
        if path is None:
            continue
        spans.append((token.start, token.end))
        key = path.full.lower()
        if key in seen:
            continue
        seen.add(key)
        paths.append(path)

    return Extraction(query=_cut_spans(trimmed, spans), paths=tuple(paths))


def _classify(
    cleaned: str,
    by_lower: Mapping[str, str],
    remote_types: Mapping[str, str],
    separator: str,
) -> ActionPath | None:
    remote = by_lower.get(cleaned.lower())
    if remote is not None:
        return ActionPath(
            full=remote,
            readable=remote_readable(remote),
            is_local=False,
            remote_name=remote,
            remote_type=remote_types.get(remote),
        )

    parts = split_remote_path(cleaned)
    if parts is not None:
        name, rest = parts
        remote = by_lower.get(name.lower())
        if remote is None:
            return None
        full = f"{remote}:{rest}"
        return ActionPath(
            full=full,
            readable=remote_readable(full),
            is_local=False,
            remote_name=remote,
            remote_type=remote_types.get(remote),
        )

    if is_local_path(cleaned):
        return ActionPath(
            full=cleaned,
            readable=local_readable(cleaned, separator),
            is_local=True,
        )

    return None


def _cut_spans(text: str, spans: list[tuple[int, int]]) -> str:
    pieces: list[str] = []
    last = 0
    for start, end in spans:
        pieces.append(text[last:start])
        last = end
    pieces.append(text[last:])
    # Inner whitespace is kept: words around a cut must not form a remote name
    return "".join(pieces).strip()
