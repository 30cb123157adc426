"""Shared typing constructs for adjgraph.

Type aliases, sentinels and the algorithm enum used across the package. No
algorithm logic lives here.
"""

from adjgraph.types.base import (
    INF,
    UNCOLORED,
    Algorithm,
    Cost,
    DistanceVector,
    PredecessorVector,
    WeightedEdge,
    is_finite,
)

__all__ = [
    # Enums
    "Algorithm",
    # Type aliases and sentinels
    "Cost",
    "DistanceVector",
    "PredecessorVector",
    "WeightedEdge",
    "INF",
    "UNCOLORED",
    "is_finite",
]
