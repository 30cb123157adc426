"""Matrix data model."""

from adjgraph.model.matrix import Matrix

__all__ = ["Matrix"]
