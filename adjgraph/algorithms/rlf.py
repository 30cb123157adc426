"""Recursive Largest First (RLF) greedy vertex coloring.

Builds one color class at a time. Each class starts from the uncolored vertex
with the most uncolored neighbors, then keeps absorbing the non-adjacent
uncolored vertex with the most neighbors already excluded from the class.
Adjacency is the out-edge test ``matrix[v][u] == 1``; symmetric matrices are
expected but directed ones are accepted.

Ties on degree go to the lowest vertex index, so results are deterministic.
The class count is a heuristic upper bound on the chromatic number.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Set

from adjgraph.logging import get_logger
from adjgraph.model.matrix import Matrix
from adjgraph.results.coloring import ColorClass, ColoringResult
from adjgraph.types.base import UNCOLORED

logger = get_logger(__name__)


def restricted_degree(matrix: Matrix, vertex: int, within: Iterable[int]) -> int:
    """Count out-neighbors of ``vertex`` that belong to ``within``."""
    row = matrix[vertex]
    return sum(1 for u in within if row[u] == 1)


def _pick_max_degree(
    matrix: Matrix, candidates: Iterable[int], within: Set[int]
) -> Optional[int]:
    """Return the candidate with the highest degree restricted to ``within``.

    Candidates are scanned in ascending order and only a strictly larger degree
    replaces the current pick, so the lowest index wins ties.
    """
    best: Optional[int] = None
    best_degree = -1
    for v in sorted(candidates):
        degree = restricted_degree(matrix, v, within)
        if degree > best_degree:
            best, best_degree = v, degree
    return best


def _out_neighbors(matrix: Matrix, vertex: int) -> Set[int]:
    return {u for u, value in enumerate(matrix[vertex]) if value == 1}


def color_graph(matrix: Matrix) -> ColoringResult:
    """Color the vertices of an unweighted adjacency matrix with RLF.

    Args:
        matrix: Square 0/1 adjacency matrix.

    Returns:
        ColoringResult whose classes appear in creation order and whose
        assignment covers every vertex exactly once.
    """
    n = matrix.size
    assignment: List[int] = [UNCOLORED] * n
    uncolored: Set[int] = set(range(n))
    classes: List[ColorClass] = []
    color = 0

    while uncolored:
        available = set(uncolored)
        first = _pick_max_degree(matrix, available, available)
        # `available` is non-empty, so a first vertex always exists
        assert first is not None

        members = [first]
        assignment[first] = color
        uncolored.discard(first)
        forbidden = _out_neighbors(matrix, first)

        while True:
            candidates = uncolored - forbidden
            nxt = _pick_max_degree(matrix, candidates, forbidden)
            if nxt is None:
                break
            members.append(nxt)
            assignment[nxt] = color
            uncolored.discard(nxt)
            forbidden |= _out_neighbors(matrix, nxt)

        classes.append(ColorClass(color_index=color, vertices=tuple(members)))
        logger.debug("Color class %d: vertices %s", color, members)
        color += 1

    logger.debug("RLF colored %d vertices with %d classes", n, color)
    return ColoringResult(assignment=tuple(assignment), classes=tuple(classes))
