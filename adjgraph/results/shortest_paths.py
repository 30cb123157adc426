"""Result containers for Bellman-Ford shortest paths.

``ShortestPathResult.history`` is the primary output: one immutable snapshot
before relaxation ("Init"), one per completed pass, and a terminal snapshot when
the final edge scan finds a negative cycle. Distances use ``INF`` for vertices
not reachable from the source; ``to_dict()`` renders those as ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

import pandas as pd

from adjgraph.algorithms.paths import resolve_path
from adjgraph.config import HISTORY_CONFIG, HistoryConfig
from adjgraph.errors import InvalidVertexError
from adjgraph.types.base import Cost, DistanceVector, PredecessorVector, is_finite

#: Snapshot label: the init label (``"Init"``) or a pass number.
StepLabel = Union[str, int]


def _json_distance(value: Cost) -> Optional[Cost]:
    return value if is_finite(value) else None


@dataclass(frozen=True, slots=True)
class RelaxationHistoryEntry:
    """Distances and predecessors captured after one Bellman-Ford step.

    Attributes:
        step: ``"Init"`` before relaxation, ``k`` after pass ``k``, or ``n`` for
            the terminal negative-cycle snapshot.
        distances: Tentative distance per vertex (``INF`` when unreachable).
        predecessors: Last vertex relaxed into each vertex, or None.
        changed: Whether the pass lowered at least one distance.
        negative_cycle: True only on the terminal negative-cycle snapshot.
        message: Human-readable note attached to the terminal snapshot.
    """

    step: StepLabel
    distances: DistanceVector
    predecessors: PredecessorVector
    changed: bool = False
    negative_cycle: bool = False
    message: Optional[str] = None

    @property
    def is_init(self) -> bool:
        """True for the snapshot taken before any relaxation."""
        return isinstance(self.step, str)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation."""
        data: Dict[str, Any] = {
            "step": self.step,
            "distances": [_json_distance(d) for d in self.distances],
            "predecessors": list(self.predecessors),
            "changed": self.changed,
        }
        if self.negative_cycle:
            data["negative_cycle"] = True
            data["message"] = self.message
        return data


@dataclass(frozen=True, slots=True)
class ShortestPathResult:
    """Outcome of :func:`~adjgraph.algorithms.bellman_ford.shortest_paths`.

    Check ``negative_cycle_detected`` before treating ``distances`` as shortest
    paths: when it is set the final vector is only the state at detection time.

    Attributes:
        source: Source vertex index.
        history: Snapshots in the order they were taken; never empty.
        negative_cycle_detected: A negative cycle is reachable from ``source``.
    """

    source: int
    history: Tuple[RelaxationHistoryEntry, ...]
    negative_cycle_detected: bool

    @property
    def final(self) -> RelaxationHistoryEntry:
        """Last snapshot in the history."""
        return self.history[-1]

    @property
    def distances(self) -> DistanceVector:
        """Distances of the last snapshot."""
        return self.final.distances

    @property
    def predecessors(self) -> PredecessorVector:
        """Predecessors of the last snapshot."""
        return self.final.predecessors

    @property
    def passes(self) -> int:
        """Number of relaxation passes performed."""
        return sum(
            1
            for entry in self.history
            if not entry.is_init and not entry.negative_cycle
        )

    def path_to(self, target: int) -> Optional[Tuple[int, ...]]:
        """Return the vertex sequence from the source to ``target``.

        Args:
            target: Destination vertex index.

        Returns:
            Vertices from source to target inclusive, or None when ``target``
            is unreachable or the predecessors loop.

        Raises:
            InvalidVertexError: If ``target`` is not in ``[0, n)``.
        """
        n = len(self.distances)
        if isinstance(target, bool) or not isinstance(target, int):
            raise InvalidVertexError(target, n)
        if not 0 <= target < n:
            raise InvalidVertexError(target, n)
        if not is_finite(self.distances[target]):
            return None
        return resolve_path(self.source, target, self.predecessors)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation."""
        history: List[Dict[str, Any]] = [entry.to_dict() for entry in self.history]
        return {
            "source": self.source,
            "history": history,
            "negative_cycle_detected": self.negative_cycle_detected,
        }

    def to_dataframe(
        self, values: str = "distances", config: Optional[HistoryConfig] = None
    ) -> pd.DataFrame:
        """Tabulate the history with one row per snapshot and one column per vertex.

        Args:
            values: ``"distances"`` or ``"predecessors"``.
            config: Labels for vertex columns; defaults to ``HISTORY_CONFIG``.

        Returns:
            DataFrame indexed by step label, columns labelled ``A, B, ...``.

        Raises:
            ValueError: If ``values`` is not a known field.
        """
        if values not in ("distances", "predecessors"):
            raise ValueError(
                f"Invalid values '{values}'. Valid values are: distances, predecessors"
            )
        cfg = config or HISTORY_CONFIG
        n = len(self.distances)
        columns = [cfg.vertex_label(i) for i in range(n)]
        rows = [list(getattr(entry, values)) for entry in self.history]
        index = pd.Index([entry.step for entry in self.history], name="step")
        return pd.DataFrame(rows, index=index, columns=columns)
