"""Result containers for RLF vertex coloring.

Both dataclasses are frozen and hold tuples only, so a consumer can replay the
classes in creation order (e.g. to reveal colors one by one) without the
coloring changing underneath it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from adjgraph.errors import InvalidVertexError


@dataclass(frozen=True, slots=True)
class ColorClass:
    """One color class: vertices sharing a color, in the order they were added.

    Attributes:
        color_index: Zero-based ordinal of the class in creation order.
        vertices: Member vertex indices.
    """

    color_index: int
    vertices: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.vertices)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.vertices

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation."""
        return {"color_index": self.color_index, "vertices": list(self.vertices)}


@dataclass(frozen=True, slots=True)
class ColoringResult:
    """Outcome of :func:`~adjgraph.algorithms.rlf.color_graph`.

    Attributes:
        assignment: Color index per vertex; ``assignment[v]`` is the class of ``v``.
        classes: Color classes in creation order.
    """

    assignment: Tuple[int, ...]
    classes: Tuple[ColorClass, ...]

    @property
    def chromatic_number(self) -> int:
        """Number of classes used: an upper bound on the true chromatic number."""
        return len(self.classes)

    def color_of(self, vertex: int) -> int:
        """Return the color index assigned to ``vertex``.

        Raises:
            InvalidVertexError: If ``vertex`` is not in ``[0, n)``.
        """
        if isinstance(vertex, bool) or not isinstance(vertex, int):
            raise InvalidVertexError(vertex, len(self.assignment))
        if not 0 <= vertex < len(self.assignment):
            raise InvalidVertexError(vertex, len(self.assignment))
        return self.assignment[vertex]

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation."""
        classes: List[Dict[str, Any]] = [c.to_dict() for c in self.classes]
        return {
            "assignment": list(self.assignment),
            "classes": classes,
            "chromatic_number": self.chromatic_number,
        }
