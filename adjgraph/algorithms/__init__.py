"""Graph algorithms over adjacency matrices.

Submodules:
    rlf: Recursive Largest First vertex coloring.
    bellman_ford: Single-source shortest paths with per-pass history.
    paths: Path reconstruction from predecessor vectors.
"""
