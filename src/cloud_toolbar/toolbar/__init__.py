"""Command palette query engine.

Free text goes through the extractor, every action in the catalog proposes
candidates, and the engine returns a ranked, deduplicated result list.
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from .engine import ResolvedResult, resolve

__all__ = ["ResolvedResult", "resolve"]
