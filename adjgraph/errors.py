"""Error kinds raised while parsing matrices or preparing a solver run.

All errors derive from :class:`GraphInputError`, itself a ``ValueError``, so
callers can catch one family or a specific kind.
"""

from __future__ import annotations

from typing import Optional


class GraphInputError(ValueError):
    """Base class for invalid matrix or vertex input."""


class InvalidTokenError(GraphInputError):
    """A matrix cell is not a valid number for the requested matrix form."""

    def __init__(self, row: int, column: int, token: str, reason: str = "") -> None:
        self.row = row
        self.column = column
        self.token = token
        detail = f": {reason}" if reason else ""
        super().__init__(
            f"Invalid number {token!r} at row {row}, column {column}{detail}"
        )


class EmptyMatrixError(GraphInputError):
    """Input text contains no matrix rows."""

    def __init__(self, message: str = "Empty matrix") -> None:
        super().__init__(message)


class NotSquareError(GraphInputError):
    """A row length differs from the number of rows."""

    def __init__(self, row: int, length: int, expected: int) -> None:
        self.row = row
        self.length = length
        self.expected = expected
        super().__init__(
            f"Matrix must be square: row {row} has {length} entries, "
            f"expected {expected}"
        )


class InvalidSourceError(GraphInputError):
    """Shortest-path source is not a vertex index in ``[0, n)``."""

    def __init__(self, source: object, size: Optional[int] = None) -> None:
        self.source = source
        self.size = size
        if size is None:
            message = f"Invalid source vertex {source!r}"
        else:
            message = (
                f"Invalid source vertex {source!r}; "
                f"expected an integer in [0, {size})"
            )
        super().__init__(message)


class InvalidVertexError(GraphInputError):
    """A vertex index passed to a result query is out of range."""

    def __init__(self, vertex: object, size: int) -> None:
        self.vertex = vertex
        self.size = size
        super().__init__(
            f"Invalid vertex {vertex!r}; expected an integer in [0, {size})"
        )
