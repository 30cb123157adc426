"""adjgraph: graph algorithms over adjacency matrices.

adjgraph parses adjacency matrices from text and runs two classical
algorithms on them, returning immutable results that a presentation layer can
replay at its own pace.

Primary API:
    parse_unweighted() / parse_weighted() - Text to validated Matrix
    color_graph() - Recursive Largest First vertex coloring
    shortest_paths() - Bellman-Ford with per-pass history and negative-cycle check
    run() - Parse and dispatch on an algorithm identifier ("rlf" | "bellman")

Example:
    from adjgraph import parse_weighted, shortest_paths

    matrix = parse_weighted("0 1 0\\n0 0 1\\n1 0 0")
    result = shortest_paths(matrix, 0)
    if not result.negative_cycle_detected:
        print(result.distances)  # (0, 1, 2)
"""

from __future__ import annotations

from adjgraph import logging
from adjgraph._version import __version__
from adjgraph.algorithms.bellman_ford import shortest_paths
from adjgraph.algorithms.paths import resolve_path
from adjgraph.algorithms.rlf import color_graph
from adjgraph.engine import parse_source, run
from adjgraph.errors import (
    EmptyMatrixError,
    GraphInputError,
    InvalidSourceError,
    InvalidTokenError,
    InvalidVertexError,
    NotSquareError,
)
from adjgraph.model.matrix import Matrix
from adjgraph.parse import parse_unweighted, parse_weighted
from adjgraph.results.coloring import ColorClass, ColoringResult
from adjgraph.results.shortest_paths import RelaxationHistoryEntry, ShortestPathResult
from adjgraph.types.base import INF, UNCOLORED, Algorithm

__all__ = [
    # Version
    "__version__",
    # Model and parsing
    "Matrix",
    "parse_unweighted",
    "parse_weighted",
    # Algorithms
    "color_graph",
    "shortest_paths",
    "resolve_path",
    # Engine boundary
    "run",
    "parse_source",
    "Algorithm",
    # Results
    "ColorClass",
    "ColoringResult",
    "RelaxationHistoryEntry",
    "ShortestPathResult",
    # Sentinels
    "INF",
    "UNCOLORED",
    # Errors
    "GraphInputError",
    "InvalidTokenError",
    "EmptyMatrixError",
    "NotSquareError",
    "InvalidSourceError",
    "InvalidVertexError",
    # Utilities
    "logging",
]
