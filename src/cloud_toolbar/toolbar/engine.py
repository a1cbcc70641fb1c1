"""Toolbar resolution engine.

Turns a raw query into the ordered list of results shown in the command
palette:

1. Extract paths and the residual keyword query from the trimmed input
2. Ask every action for candidates (or for its default result when the
   input is empty)
3. Deduplicate candidates by ``(action id, args)``, keeping the best score
4. Fall back to the default results when nothing survived
5. Sort by descending score; ties keep catalog order

Resolution is synchronous and performs no I/O. Live resources come in as
an immutable snapshot, so calling ``resolve`` twice with the same inputs
returns the same list.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from .actions import ActionCatalog, ToolbarAction, default_catalog
from .extractor import extract_paths
from .live import LiveResources
from .types import ActionArgs, ActionContext, ActionResult, DefaultContext, PressContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ResolvedResult:
    """A deduplicated, scored result ready for display and selection."""

    id: str
    action_id: str
    label: str
    description: str | None
    args: ActionArgs
    score: float
    catalog: ActionCatalog = field(repr=False)

    def resolve(self) -> ToolbarAction:
        """Look up the originating action by its id."""
        return self.catalog.get(self.action_id)

    def press(self, context: PressContext) -> None:
        """Run the originating action's effect with this result's args."""
        self.resolve().on_press(dict(self.args), context)


def identity_key(action_id: str, args: ActionArgs) -> str:
    return f"{action_id}:{json.dumps(args, sort_keys=True, default=str)}"


def resolve(
    query: str,
    remotes: Iterable[str],
    remote_types: Mapping[str, str] | None = None,
    live: LiveResources | None = None,
    *,
    catalog: ActionCatalog | None = None,
    host_is_local: bool = True,
    separator: str = os.sep,
) -> list[ResolvedResult]:
    """Resolve ``query`` into ranked toolbar results.

    Args:
        query: Raw toolbar input
        remotes: Configured remote names
        remote_types: Optional remote name to backend type map
        live: Snapshot of active mounts, serves and VFS caches
        catalog: Actions to consult, defaults to the application catalog
        host_is_local: Whether the control API runs on this machine
        separator: Separator used to render local readable paths

    Returns:
        Results sorted by descending score
    """
    catalog = catalog or default_catalog()
    remote_list = tuple(remotes)
    trimmed = query.strip()

    if trimmed:
        extraction = extract_paths(trimmed, remote_list, remote_types, separator)
        context = ActionContext(
            query=extraction.query,
            full_query=trimmed,
            paths=extraction.paths,
            remotes=remote_list,
            live=live or LiveResources(),
            host_is_local=host_is_local,
        )
        results = collect_results(catalog, context)
        if not results:
            logger.debug("No candidates for %r, using default results", trimmed)
            results = default_results(catalog, remote_list)
    else:
        results = default_results(catalog, remote_list)

    results.sort(key=lambda result: result.score, reverse=True)
    return results


def collect_results(catalog: ActionCatalog, context: ActionContext) -> list[ResolvedResult]:
    """Gather every action's candidates and deduplicate them."""
    collected: list[ResolvedResult] = []
    for action in catalog:
        try:
            candidates = action.get_results(context)
        except Exception:
            logger.exception("Action %s failed to produce results", action.id)
            continue
        collected.extend(_map_result(catalog, action, candidate) for candidate in candidates)
    return dedupe_results(collected)


def default_results(catalog: ActionCatalog, remotes: Iterable[str]) -> list[ResolvedResult]:
    """One result per action that defines a default, in catalog order."""
    context = DefaultContext(remotes=tuple(remotes))
    results: list[ResolvedResult] = []
    for action in catalog:
        try:
            candidate = action.get_default_result(context)
        except Exception:
            logger.exception("Action %s failed to produce its default result", action.id)
            continue
        if candidate is not None:
            results.append(_map_result(catalog, action, candidate))
    return results


def dedupe_results(results: Iterable[ResolvedResult]) -> list[ResolvedResult]:
    """Keep the highest-scoring result per id, at its first-seen position."""
    best: dict[str, ResolvedResult] = {}
    for result in results:
        existing = best.get(result.id)
        if existing is None or result.score > existing.score:
            best[result.id] = result
    return list(best.values())


def _map_result(
    catalog: ActionCatalog, action: ToolbarAction, result: ActionResult
) -> ResolvedResult:
    args = dict(result.args or {})
    return ResolvedResult(
        id=identity_key(action.id, args),
        action_id=action.id,
        label=result.label or action.label,
        description=result.description if result.description is not None else action.description,
        args=args,
        score=result.score or 0,
        catalog=catalog,
    )
