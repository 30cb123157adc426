"""Text parsing for adjacency matrices.

Two input forms are accepted, both with one matrix row per line and blank
lines ignored:

* unweighted: cells separated by commas, each cell ``0`` or ``1``;
* weighted: cells separated by any run of commas and/or whitespace, each cell
  a finite number (negative allowed, ``0`` meaning "no edge").

Both return a validated :class:`~adjgraph.model.matrix.Matrix` or raise one of
the :mod:`adjgraph.errors` kinds. Nothing is coerced silently.
"""

from __future__ import annotations

import math
import re
from typing import List, Optional

from adjgraph.config import PARSER_CONFIG, ParserConfig
from adjgraph.errors import EmptyMatrixError, InvalidTokenError, NotSquareError
from adjgraph.logging import get_logger
from adjgraph.model.matrix import Matrix
from adjgraph.types.base import Cost

logger = get_logger(__name__)

_INTEGER_RE = re.compile(r"[+-]?\d+")


def parse_number(token: str, row: int = 0, column: int = 0) -> Cost:
    """Parse one matrix cell.

    Integral literals become ``int``; other numeric literals become ``float``.

    Args:
        token: Raw cell text (already stripped).
        row: Row index, used in the error.
        column: Column index, used in the error.

    Returns:
        The parsed finite number.

    Raises:
        InvalidTokenError: If the token is empty, not numeric, not finite, or an
            integer too large to convert to float.
    """
    if not token:
        logger.error("Empty matrix cell at (%d, %d)", row, column)
        raise InvalidTokenError(row, column, token, "empty cell")
    if _INTEGER_RE.fullmatch(token):
        try:
            integer = int(token)
            float(integer)
        except (ValueError, OverflowError):
            logger.error("Integer matrix cell at (%d, %d) is out of range", row, column)
            raise InvalidTokenError(
                row, column, token, "integer out of range"
            ) from None
        return integer
    try:
        value = float(token)
    except ValueError:
        logger.error("Invalid matrix cell %r at (%d, %d)", token, row, column)
        raise InvalidTokenError(row, column, token) from None
    if not math.isfinite(value):
        logger.error("Non-finite matrix cell %r at (%d, %d)", token, row, column)
        raise InvalidTokenError(row, column, token, "not a finite number")
    return value


def _split_rows(text: str) -> List[str]:
    if text is None:
        return []
    return [line for line in text.strip().splitlines() if line.strip()]


def _check_square(cells: List[List[Cost]]) -> None:
    if not cells:
        logger.error("Cannot parse matrix: input contains no rows")
        raise EmptyMatrixError()
    n = len(cells)
    for i, row in enumerate(cells):
        if len(row) != n:
            logger.error(
                "Cannot parse matrix: row %d has %d entries, expected %d",
                i,
                len(row),
                n,
            )
            raise NotSquareError(i, len(row), n)


def parse_unweighted(text: str, config: Optional[ParserConfig] = None) -> Matrix:
    """Parse a comma-separated 0/1 adjacency matrix.

    Args:
        text: One row per line, cells separated by commas.
        config: Parser settings; defaults to ``PARSER_CONFIG``.

    Returns:
        Square Matrix with integer cells in ``config.allowed_unweighted_values``.

    Raises:
        EmptyMatrixError: If the text has no non-blank lines.
        InvalidTokenError: If a cell is not a number or not an allowed value.
        NotSquareError: If a row length differs from the row count.
    """
    cfg = config or PARSER_CONFIG
    allowed = ", ".join(str(v) for v in cfg.allowed_unweighted_values)
    cells: List[List[Cost]] = []
    for i, line in enumerate(_split_rows(text)):
        row: List[Cost] = []
        for j, raw in enumerate(line.split(cfg.unweighted_separator)):
            token = raw.strip()
            value = parse_number(token, i, j)
            if value not in cfg.allowed_unweighted_values:
                logger.error(
                    "Matrix cell %r at (%d, %d) is not one of %s", token, i, j, allowed
                )
                raise InvalidTokenError(i, j, token, f"expected one of {allowed}")
            row.append(int(value))
        cells.append(row)

    _check_square(cells)
    logger.debug("Parsed unweighted %dx%d matrix", len(cells), len(cells))
    return Matrix.from_rows(cells)


def parse_weighted(text: str, config: Optional[ParserConfig] = None) -> Matrix:
    """Parse a weighted adjacency matrix.

    Args:
        text: One row per line, cells separated by commas and/or whitespace.
        config: Parser settings; defaults to ``PARSER_CONFIG``.

    Returns:
        Square Matrix of finite numbers; ``0`` means "no edge".

    Raises:
        EmptyMatrixError: If the text has no non-blank lines.
        InvalidTokenError: If a cell is not a finite number.
        NotSquareError: If a row length differs from the row count.
    """
    cfg = config or PARSER_CONFIG
    separator = re.compile(cfg.weighted_separator_pattern)
    cells: List[List[Cost]] = []
    for i, line in enumerate(_split_rows(text)):
        tokens = separator.split(line.strip())
        cells.append([parse_number(token, i, j) for j, token in enumerate(tokens)])

    _check_square(cells)
    logger.debug("Parsed weighted %dx%d matrix", len(cells), len(cells))
    return Matrix.from_rows(cells)
