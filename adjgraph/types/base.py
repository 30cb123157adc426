"""Base aliases, sentinels and enums shared by the matrix algorithms."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Optional, Tuple, Union

#: Numeric matrix entry or accumulated path weight.
Cost = Union[int, float]

#: Distance of a vertex not (yet) reachable from the source.
INF: float = math.inf

#: Color slot value of a vertex before RLF assigns it a class.
UNCOLORED = -1

#: Per-vertex tentative distances, one entry per vertex.
DistanceVector = Tuple[Cost, ...]

#: Per-vertex predecessor index, ``None`` where no edge was relaxed into the vertex.
PredecessorVector = Tuple[Optional[int], ...]

#: Directed edge as ``(source_index, target_index, weight)``.
WeightedEdge = Tuple[int, int, Cost]


class Algorithm(IntEnum):
    """Algorithms selectable at the engine boundary."""

    #: Recursive Largest First vertex coloring over a 0/1 adjacency matrix.
    RLF = 1
    #: Bellman-Ford single-source shortest paths over a weighted matrix.
    BELLMAN = 2

    @classmethod
    def from_string(cls, value: str) -> "Algorithm":
        """Parse a string into an Algorithm enum value.

        Args:
            value: Case-insensitive identifier (``"rlf"`` or ``"bellman"``).

        Returns:
            The corresponding Algorithm member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.strip().upper()]
        except (KeyError, AttributeError):
            valid = ", ".join(e.name.lower() for e in cls)
            raise ValueError(
                f"Invalid algorithm '{value}'. Valid values are: {valid}"
            ) from None


def is_finite(value: Cost) -> bool:
    """Return True when a distance is a real accumulated weight, not ``INF``."""
    return not math.isinf(value)
