"""Engine boundary: raw text in, immutable result out.

A host (web UI, notebook, test harness) hands over the matrix text, the
algorithm identifier and, for Bellman-Ford, the source vertex as an int or as
text. Parsing always completes before an algorithm runs, so no algorithm ever
sees an unvalidated matrix.
"""

from __future__ import annotations

from typing import Optional, Union

from adjgraph.algorithms.bellman_ford import shortest_paths, validate_source
from adjgraph.algorithms.rlf import color_graph
from adjgraph.config import HistoryConfig, ParserConfig
from adjgraph.errors import InvalidSourceError
from adjgraph.logging import get_logger
from adjgraph.parse import parse_unweighted, parse_weighted
from adjgraph.results.coloring import ColoringResult
from adjgraph.results.shortest_paths import ShortestPathResult
from adjgraph.types.base import Algorithm

logger = get_logger(__name__)


def parse_source(source: Union[int, str, None], size: int) -> int:
    """Convert a source given as int or text into a vertex index.

    Args:
        source: Vertex index, or its decimal text (surrounding spaces allowed).
        size: Number of vertices.

    Returns:
        Validated vertex index in ``[0, size)``.

    Raises:
        InvalidSourceError: If the source is missing, not an integer, or out of range.
    """
    if isinstance(source, str):
        text = source.strip()
        try:
            source = int(text)
        except ValueError:
            logger.error("Bellman-Ford source %r is not an integer", text)
            raise InvalidSourceError(text, size) from None
    if source is None:
        logger.error("Bellman-Ford requires a source vertex")
        raise InvalidSourceError(None, size)
    return validate_source(source, size)


def run(
    algorithm: Union[Algorithm, str],
    text: str,
    source: Union[int, str, None] = None,
    parser_config: Optional[ParserConfig] = None,
    history_config: Optional[HistoryConfig] = None,
) -> Union[ColoringResult, ShortestPathResult]:
    """Parse ``text`` and run the selected algorithm on it.

    Args:
        algorithm: ``Algorithm`` member or its name (``"rlf"``, ``"bellman"``).
        text: Matrix rows, one per line. RLF reads the comma-separated 0/1
            form; Bellman-Ford reads the weighted comma/whitespace form.
        source: Bellman-Ford source vertex; ignored for RLF.
        parser_config: Optional parser settings.
        history_config: Optional Bellman-Ford history labels.

    Returns:
        ColoringResult for RLF, ShortestPathResult for Bellman-Ford.

    Raises:
        ValueError: If ``algorithm`` is unknown.
        GraphInputError: Any parse or source validation failure.
    """
    if isinstance(algorithm, Algorithm):
        algo = algorithm
    else:
        algo = Algorithm.from_string(algorithm)

    if algo == Algorithm.RLF:
        matrix = parse_unweighted(text, parser_config)
        logger.debug("Running RLF on %d vertices", matrix.size)
        return color_graph(matrix)

    matrix = parse_weighted(text, parser_config)
    src = parse_source(source, matrix.size)
    logger.debug("Running Bellman-Ford on %d vertices from %d", matrix.size, src)
    return shortest_paths(matrix, src, history_config)
