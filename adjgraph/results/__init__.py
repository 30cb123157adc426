"""Immutable result containers for coloring and shortest-path runs."""

from adjgraph.results.coloring import ColorClass, ColoringResult
from adjgraph.results.shortest_paths import (
    RelaxationHistoryEntry,
    ShortestPathResult,
)

__all__ = [
    "ColorClass",
    "ColoringResult",
    "RelaxationHistoryEntry",
    "ShortestPathResult",
]
