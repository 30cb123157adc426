"""Immutable square adjacency matrix.

``Matrix`` stores rows as a tuple of tuples and validates shape and cell values
on construction. Entry ``[i][j] != 0`` denotes an edge ``i -> j`` whose weight is
the entry itself; a zero entry means "no edge", so zero-weight edges cannot be
expressed.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

import networkx as nx
import numpy as np

from adjgraph.errors import EmptyMatrixError, InvalidTokenError, NotSquareError
from adjgraph.logging import get_logger
from adjgraph.types.base import Cost, WeightedEdge

logger = get_logger(__name__)


def _is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


@dataclass(frozen=True)
class Matrix:
    """Square n x n matrix of finite numbers, n >= 1.

    Attributes:
        rows: Row-major cell values; ``rows[i][j]`` is the entry for ``i -> j``.
    """

    rows: Tuple[Tuple[Cost, ...], ...]

    def __post_init__(self) -> None:
        """Freeze rows into tuples and validate shape and cells.

        Raises:
            EmptyMatrixError: If there are no rows.
            NotSquareError: If a row length differs from the row count.
            InvalidTokenError: If a cell is not a finite number.
        """
        object.__setattr__(self, "rows", tuple(tuple(row) for row in self.rows))
        n = len(self.rows)
        if n == 0:
            logger.error("Matrix has no rows")
            raise EmptyMatrixError()
        for i, row in enumerate(self.rows):
            if len(row) != n:
                logger.error(
                    "Matrix row %d has %d entries, expected %d", i, len(row), n
                )
                raise NotSquareError(i, len(row), n)
            for j, value in enumerate(row):
                if not _is_finite_number(value):
                    logger.error("Matrix cell (%d, %d) is not a finite number", i, j)
                    raise InvalidTokenError(i, j, repr(value), "not a finite number")

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Cost]]) -> "Matrix":
        """Build a Matrix from any iterable of row sequences.

        Args:
            rows: Rows of numeric cells, e.g. a list of lists.

        Returns:
            Validated immutable Matrix.
        """
        return cls(tuple(tuple(row) for row in rows))

    @property
    def size(self) -> int:
        """Number of vertices (rows)."""
        return len(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, idx: int) -> Tuple[Cost, ...]:
        return self.rows[idx]

    def __iter__(self) -> Iterator[Tuple[Cost, ...]]:
        return iter(self.rows)

    def row(self, idx: int) -> Tuple[Cost, ...]:
        """Return row ``idx`` (outgoing entries of vertex ``idx``)."""
        return self.rows[idx]

    def edges(self) -> List[WeightedEdge]:
        """Return every non-zero entry as ``(i, j, weight)`` in row-major order."""
        return [
            (i, j, w)
            for i, row in enumerate(self.rows)
            for j, w in enumerate(row)
            if w != 0
        ]

    def neighbors(self, vertex: int) -> List[int]:
        """Return out-neighbors of ``vertex`` in ascending index order."""
        return [j for j, w in enumerate(self.rows[vertex]) if w != 0]

    def is_symmetric(self) -> bool:
        """Return True when ``[i][j] == [j][i]`` for every pair."""
        n = self.size
        return all(
            self.rows[i][j] == self.rows[j][i]
            for i in range(n)
            for j in range(i + 1, n)
        )

    def to_list(self) -> List[List[Cost]]:
        """Return the cells as a mutable list of lists."""
        return [list(row) for row in self.rows]

    def to_numpy(self) -> np.ndarray:
        """Return the cells as a 2-D numpy array.

        Integer matrices keep an integer dtype; any float cell promotes the
        whole array to float.
        """
        return np.asarray(self.rows)

    def to_networkx(self) -> nx.DiGraph:
        """Convert to a NetworkX DiGraph with integer nodes ``0..n-1``.

        Every non-zero entry becomes an edge with a ``weight`` attribute.

        Returns:
            Directed graph containing all vertices, including isolated ones.
        """
        graph = nx.DiGraph()
        graph.add_nodes_from(range(self.size))
        for i, j, w in self.edges():
            graph.add_edge(i, j, weight=w)
        return graph
