"""Configuration classes for adjgraph components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for matrix text parsing."""

    # Cell separator for the unweighted (0/1) form
    unweighted_separator: str = ","

    # Regex separating cells of the weighted form: any run of commas/whitespace
    weighted_separator_pattern: str = r"[\s,]+"

    # Values accepted in an unweighted adjacency matrix
    allowed_unweighted_values: Tuple[int, ...] = (0, 1)


@dataclass(frozen=True)
class HistoryConfig:
    """Labels attached to Bellman-Ford relaxation history."""

    # Step label of the snapshot taken before any relaxation
    init_label: str = "Init"

    # Message carried by the terminal entry when a negative cycle is found
    negative_cycle_message: str = "Negative cycle detected in final check."

    def vertex_label(self, index: int) -> str:
        """Return a letter label for a vertex index: 0 -> A, 25 -> Z, 26 -> AA."""
        if index < 0:
            raise ValueError(f"Vertex index must be non-negative, got {index}")
        label = ""
        index += 1
        while index:
            index, rem = divmod(index - 1, 26)
            label = chr(ord("A") + rem) + label
        return label


# Global configuration instances
PARSER_CONFIG = ParserConfig()
HISTORY_CONFIG = HistoryConfig()
