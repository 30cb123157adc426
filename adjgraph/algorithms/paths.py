from __future__ import annotations

from typing import List, Optional, Sequence, Tuple


def resolve_path(
    src_node: int,
    dst_node: int,
    pred: Sequence[Optional[int]],
) -> Optional[Tuple[int, ...]]:
    """
    Rebuild a source->destination vertex sequence from a predecessor vector.

    Follows ``pred`` backwards from ``dst_node`` until ``src_node`` is reached.
    The walk gives up when it hits a vertex without a predecessor or revisits a
    vertex; the latter only happens when the vector was captured while a
    negative cycle kept rewriting predecessors.

    Args:
        src_node: Source vertex index.
        dst_node: Destination vertex index.
        pred: Predecessor per vertex, ``None`` where nothing was relaxed.

    Returns:
        Tuple of vertex indices from ``src_node`` to ``dst_node`` inclusive,
        ``(src_node,)`` when both are equal, or None if no path is recorded.
    """
    if dst_node == src_node:
        return (src_node,)

    reversed_path: List[int] = [dst_node]
    seen = {dst_node}
    current = dst_node
    while current != src_node:
        previous = pred[current]
        if previous is None or previous in seen:
            return None
        seen.add(previous)
        reversed_path.append(previous)
        current = previous

    return tuple(reversed(reversed_path))
