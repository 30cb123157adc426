"""Bellman-Ford single-source shortest paths with per-pass history.

Every non-zero matrix entry ``[u][v] = w`` is a directed edge ``u -> v`` of
weight ``w``; zero means "no edge". Passes are Jacobi-style: each pass reads
only the distances from the start of the pass and writes into a fresh
candidate vector that replaces the current one when the pass completes, so
relaxations do not chain within a pass.

The solver stops after ``n - 1`` passes or after the first pass that changes
nothing, then scans all edges once more against the final distances. Any
still-improvable edge means a negative cycle is reachable from the source.
"""

from __future__ import annotations

import numbers
from typing import List, Optional, Tuple

from adjgraph.config import HISTORY_CONFIG, HistoryConfig
from adjgraph.errors import InvalidSourceError
from adjgraph.logging import get_logger
from adjgraph.model.matrix import Matrix
from adjgraph.results.shortest_paths import RelaxationHistoryEntry, ShortestPathResult
from adjgraph.types.base import INF, Cost, WeightedEdge, is_finite

logger = get_logger(__name__)


def validate_source(source: object, size: int) -> int:
    """Return ``source`` if it is an integer vertex index in ``[0, size)``.

    Raises:
        InvalidSourceError: If ``source`` is not an integer or is out of range.
    """
    if isinstance(source, bool) or not isinstance(source, numbers.Integral):
        logger.error("Bellman-Ford source must be an integer, got %r", source)
        raise InvalidSourceError(source, size)
    if not 0 <= source < size:
        logger.error("Bellman-Ford source %d out of range [0, %d)", source, size)
        raise InvalidSourceError(source, size)
    return int(source)


def _relax_pass(
    edges: List[WeightedEdge],
    dist: List[Cost],
    pred: List[Optional[int]],
) -> Tuple[List[Cost], bool]:
    """Run one Jacobi-style pass; ``pred`` is updated in place."""
    candidate = list(dist)
    changed = False
    for u, v, w in edges:
        if is_finite(dist[u]) and dist[u] + w < candidate[v]:
            candidate[v] = dist[u] + w
            pred[v] = u
            changed = True
    return candidate, changed


def _has_improvable_edge(edges: List[WeightedEdge], dist: List[Cost]) -> bool:
    for u, v, w in edges:
        if is_finite(dist[u]) and dist[u] + w < dist[v]:
            logger.debug("Edge %d -> %d (weight %s) still relaxes", u, v, w)
            return True
    return False


def shortest_paths(
    matrix: Matrix,
    source: int,
    config: Optional[HistoryConfig] = None,
) -> ShortestPathResult:
    """Compute shortest-path distances from ``source`` and record every pass.

    Args:
        matrix: Square weighted adjacency matrix; zero means "no edge".
        source: Source vertex index in ``[0, n)``.
        config: History labels; defaults to ``HISTORY_CONFIG``.

    Returns:
        ShortestPathResult with the "Init" snapshot, one snapshot per pass, and
        a terminal snapshot when a negative cycle is detected.

    Raises:
        InvalidSourceError: If ``source`` is not a valid vertex index.
    """
    cfg = config or HISTORY_CONFIG
    n = matrix.size
    source = validate_source(source, n)

    dist: List[Cost] = [INF] * n
    pred: List[Optional[int]] = [None] * n
    dist[source] = 0

    history: List[RelaxationHistoryEntry] = [
        RelaxationHistoryEntry(
            step=cfg.init_label, distances=tuple(dist), predecessors=tuple(pred)
        )
    ]

    edges = matrix.edges()
    logger.debug(
        "Bellman-Ford from %d over %d vertices and %d edges", source, n, len(edges)
    )

    for k in range(1, n):
        dist, changed = _relax_pass(edges, dist, pred)
        history.append(
            RelaxationHistoryEntry(
                step=k,
                distances=tuple(dist),
                predecessors=tuple(pred),
                changed=changed,
            )
        )
        logger.debug("Pass %d: distances %s", k, dist)
        if not changed:
            break

    negative_cycle = _has_improvable_edge(edges, dist)
    if negative_cycle:
        logger.warning(
            "Negative cycle reachable from source %d; distances are not shortest paths",
            source,
        )
        history.append(
            RelaxationHistoryEntry(
                step=n,
                distances=tuple(dist),
                predecessors=tuple(pred),
                negative_cycle=True,
                message=cfg.negative_cycle_message,
            )
        )

    return ShortestPathResult(
        source=source,
        history=tuple(history),
        negative_cycle_detected=negative_cycle,
    )
